"""Game objects: a tree of positioned nodes that carry components."""

from __future__ import annotations

from typing import Optional, TypeVar

from minigin.component import Component
from minigin.scene import Scene, SceneError, SceneManager
from minigin.transform import Transform, Vec3

C = TypeVar("C", bound=Component)


class DuplicateComponentError(Exception):
    """Raised when a component of a type already attached is added again."""


def _current_scene() -> Scene:
    scene = SceneManager.instance().current_scene
    if scene is None:
        raise SceneError("no current scene")
    return scene


class GameObject:
    """A node in the scene tree with a position, components and children."""

    def __init__(self, priority: int = 0) -> None:
        self._priority = priority
        self._children: list[GameObject] = []
        self._parent: Optional[GameObject] = None
        self._components: list[Component] = []
        self._transform = Transform()
        self._transform_dirty = True
        self._destroyed = False
        self.tag = "NoTag"
        self.saved_position = Vec3()

    @property
    def priority(self) -> int:
        return self._priority

    @property
    def parent(self) -> Optional["GameObject"]:
        return self._parent

    @property
    def children(self) -> tuple["GameObject", ...]:
        return tuple(self._children)

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    @property
    def local_position(self) -> Vec3:
        return self._transform.local_position

    def update(self) -> None:
        for component in list(self._components):
            component.update()
        for child in list(self._children):
            child.update()

    def fixed_update(self) -> None:
        for component in list(self._components):
            component.fixed_update()
        for child in list(self._children):
            child.fixed_update()

    def render(self) -> None:
        for component in list(self._components):
            component.render()
        for child in list(self._children):
            child.render()

    def begin_play(self) -> None:
        for component in list(self._components):
            component.begin_play()
        for child in list(self._children):
            child.begin_play()

    def _sort_children(self) -> None:
        self._children.sort(key=lambda child: child.priority, reverse=True)

    def _attach(self, child: "GameObject", keep_world_position: bool) -> None:
        world = child.world_position()
        child._parent = self
        self._children.append(child)
        self._sort_children()
        if keep_world_position:
            offset = world - self.world_position()
            child.set_position(offset.x, offset.y)
        else:
            child._set_transform_dirty()

    def set_parent(self, parent: Optional["GameObject"], keep_world_position: bool = True) -> None:
        """Move this object under ``parent``, or back to the scene root for ``None``."""
        if parent is None and self._parent is None:
            return
        if parent is not None and (parent is self or not parent.can_be_parent_of(self)):
            return
        if self._parent is not None:
            self._parent.remove_child(self)
        else:
            _current_scene().remove(self)
        if parent is None:
            world = self.world_position()
            self.set_position(world.x, world.y)
        else:
            if self._parent is None and self in (_current_scene()):
                _current_scene().remove(self)
            parent._attach(self, keep_world_position)

    def add_child(self, child: "GameObject", keep_world_position: bool = True) -> None:
        """Take ``child`` from its parent or the scene and make it a child of this one."""
        if child is self or not self.can_be_parent_of(child):
            return
        if child._parent is not None:
            child._parent._children = [c for c in child._parent._children if c is not child]
        else:
            _current_scene().remove(child)
        self._attach(child, keep_world_position)

    def remove_child(self, child: "GameObject") -> None:
        """Detach ``child``; it keeps its world position and returns to the scene."""
        if not any(c is child for c in self._children):
            raise ValueError("the game object is not a child of this one")
        world = child.world_position()
        self._children = [c for c in self._children if c is not child]
        child._parent = None
        child.set_position(world.x, world.y)
        _current_scene().add(child)

    def can_be_parent_of(self, child: "GameObject") -> bool:
        """True unless this object is destroyed or ``child`` is one of its ancestors."""
        if self._destroyed:
            return False
        if self._parent is None:
            return True
        if self._parent is child:
            return False
        return self._parent.can_be_parent_of(child)

    def add_component(self, component: Component) -> None:
        """Attach a component; only one component of each exact type is allowed."""
        if any(type(existing) is type(component) for existing in self._components):
            raise DuplicateComponentError(f"{type(component).__name__} is already attached")
        component.set_owner(self)
        self._components.append(component)
        self._components.sort(key=lambda item: item.priority, reverse=True)

    def get_component(self, component_type: type[C]) -> Optional[C]:
        for component in self._components:
            if isinstance(component, component_type):
                return component
        return None

    def has_component(self, component_type: type[Component]) -> bool:
        return self.get_component(component_type) is not None

    def _set_transform_dirty(self) -> None:
        self._transform_dirty = True
        for child in self._children:
            child._set_transform_dirty()

    def set_position(self, x: float, y: float) -> None:
        self._set_transform_dirty()
        self._transform.set_position(x, y, 0.0)

    def world_position(self) -> Vec3:
        """The local position offset by every ancestor, recomputed when stale."""
        if self._transform_dirty:
            self._transform_dirty = False
            local = self._transform.local_position
            if self._parent is not None:
                self._transform.update_world_position(local + self._parent.world_position())
            else:
                self._transform.update_world_position(local)
        return self._transform.world_position

    def save_position(self, x: float, y: float) -> None:
        self.saved_position = Vec3(x, y, self.saved_position.z)

    def update_pos(self, x: float, y: float) -> None:
        """Overwrite the cached world position directly."""
        self._transform.update_world_position(Vec3(x, y, 0.0))

    def destroy(self) -> None:
        """Mark this object and all its children destroyed and detach it from its parent."""
        self._destroyed = True
        for child in list(self._children):
            child.destroy()
        if self._parent is not None:
            self._parent.remove_child(self)