"""Scenes holding game objects, and the manager that switches between them."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Iterator, Optional

from minigin.delegate import MulticastDelegate

if TYPE_CHECKING:
    from minigin.game_object import GameObject


class SceneError(Exception):
    """Raised when a scene is used in a way it does not allow."""


class Scene:
    """An ordered collection of root game objects, highest priority first."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.id = 0
        self._objects: list["GameObject"] = []
        self.player: Optional["GameObject"] = None
        self.player2: Optional["GameObject"] = None
        self.enemy: Optional["GameObject"] = None
        self.on_load = MulticastDelegate()
        self.on_clean_up = MulticastDelegate()

    def add(self, game_object: "GameObject") -> None:
        """Add a root object; objects with a parent or already present are refused."""
        if game_object.parent is not None:
            raise SceneError("a game object with a parent cannot be added to a scene")
        if game_object in self:
            raise SceneError("the game object is already in this scene")
        self._objects.append(game_object)
        self._objects.sort(key=lambda item: item.priority, reverse=True)

    def remove(self, game_object: "GameObject") -> None:
        self._objects = [item for item in self._objects if item is not game_object]

    def remove_all(self) -> None:
        self._objects.clear()

    def force_remove_all(self) -> None:
        self._objects.clear()

    def destroy_all(self) -> None:
        for game_object in list(self._objects):
            game_object.destroy()

    def update(self) -> None:
        for game_object in list(self._objects):
            if not game_object.destroyed:
                game_object.update()

    def fixed_update(self) -> None:
        for game_object in list(self._objects):
            game_object.fixed_update()

    def render(self) -> None:
        for game_object in list(self._objects):
            game_object.render()

    def begin_play(self) -> None:
        for game_object in list(self._objects):
            game_object.begin_play()

    def load(self) -> None:
        """Load scene content by running the handlers attached to on_load."""
        self.on_load.broadcast(self)

    def needs_clean_up(self) -> bool:
        return False

    def clean_up(self) -> None:
        """Release scene content by running the handlers attached to on_clean_up."""
        self.on_clean_up.broadcast(self)

    def add_player(self, player: "GameObject") -> None:
        self.player = player

    def add_player2(self, player: "GameObject") -> None:
        self.player2 = player

    def add_enemy(self, enemy: "GameObject") -> None:
        self.enemy = enemy

    def __contains__(self, game_object: object) -> bool:
        return any(item is game_object for item in self._objects)

    def __iter__(self) -> Iterator["GameObject"]:
        return iter(list(self._objects))

    def __len__(self) -> int:
        return len(self._objects)


class SceneManager:
    """Owns every scene and forwards the frame loop to the current one."""

    _instance: ClassVar[Optional["SceneManager"]] = None

    def __init__(self) -> None:
        self._scenes: list[Scene] = []
        self._current: Optional[Scene] = None
        self.delta_time = 0.0
        self.fixed_time_step = 0.0
        self.frame_percentage = 0.0

    @classmethod
    def instance(cls) -> "SceneManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def current_scene(self) -> Optional[Scene]:
        return self._current

    def _require_current(self) -> Scene:
        if self._current is None:
            raise SceneError("no current scene")
        return self._current

    def create_scene(self, name: str) -> Scene:
        """Create a scene, make it current and return it."""
        scene = Scene(name)
        self._scenes.append(scene)
        self._current = scene
        return scene

    def update(self, delta_time: float) -> None:
        self.delta_time = delta_time
        self._require_current().update()

    def fixed_update(self, fixed_time_step: float) -> None:
        self.fixed_time_step = fixed_time_step
        self._require_current().fixed_update()

    def render(self) -> None:
        self._require_current().render()

    def begin_play(self) -> None:
        self._require_current().begin_play()

    def clean_up(self) -> None:
        for scene in self._scenes:
            if scene.needs_clean_up():
                scene.clean_up()

    def get_scene(self, name: str) -> Scene:
        for scene in self._scenes:
            if scene.name == name:
                return scene
        raise KeyError(f"no scene named {name!r}")

    def set_current_scene(self, name: str) -> None:
        """Switch to the named scene and start it; unknown names are ignored."""
        for scene in self._scenes:
            if scene.name == name:
                self._current = scene
                scene.begin_play()
                return

    def force_remove_all_objects(self) -> None:
        for scene in self._scenes:
            scene.force_remove_all()