"""Draws a texture or animation at the owner's position."""

from __future__ import annotations

from typing import Optional

from minigin.animation import AnimationComponent, AnimationType
from minigin.component import Component
from minigin.renderer import Rect, Renderer
from minigin.resources import ResourceManager
from minigin.scene import SceneManager
from minigin.texture import Texture2D
from minigin.transform import Vec3


class RenderComponent(Component):
    """Draws its texture, or the animation selected by ``state``, each frame."""

    def __init__(self, priority: int = -2, use_animation: bool = False) -> None:
        super().__init__(priority)
        self.use_animation = use_animation
        self.texture: Optional[Texture2D] = None
        self.state = 0
        self.can_collide = True
        self.scale = 1.0
        self.shape = Rect()
        self.last_position = Vec3()
        self._visible = True
        self._animations: list[AnimationComponent] = []

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def animations(self) -> tuple[AnimationComponent, ...]:
        return tuple(self._animations)

    def render(self) -> None:
        self.draw()

    def draw(self) -> None:
        """Draw at twice the owner's world position and record the drawn shape."""
        if self.texture is None:
            return
        if self.owner is None:
            raise RuntimeError("render component has no owner")
        world = self.owner.world_position()
        position = Vec3(world.x * 2, world.y * 2, world.z)
        self.last_position = position

        if self.use_animation:
            animation = self._animations[self.state]
            if self._visible:
                animation.draw(position.x, position.y, self.scale)
            self.shape = Rect(
                int(position.x), int(position.y), animation.frame_width, animation.frame_height
            )
        else:
            width, height = self.texture.size
            Renderer.instance().render_texture(
                self.texture, position.x, position.y, width * self.scale, height * self.scale
            )
            self.shape = Rect(int(position.x), int(position.y), width, height)

    def update(self) -> None:
        if self.use_animation:
            self._animations[self.state].update(SceneManager.instance().delta_time)

    def set_texture(self, texture: Optional[Texture2D]) -> None:
        self.texture = texture

    def load_texture(self, filename: str) -> None:
        self.texture = ResourceManager.instance().load_texture(filename)

    def set_scale(self, scale: float) -> None:
        self.scale = scale

    def add_animation(
        self,
        rows: int,
        columns: int,
        max_frames: int,
        frames_per_second: int,
        animation_type: AnimationType,
        current_frame: int,
        row: int,
    ) -> AnimationComponent:
        """Add an animation over the current texture and return it."""
        if self.texture is None:
            raise ValueError("set a texture before adding animations")
        animation = AnimationComponent(
            self.texture,
            rows,
            columns,
            max_frames,
            frames_per_second,
            animation_type,
            current_frame,
            row,
        )
        self._animations.append(animation)
        return animation

    def set_visibility(self, visible: bool) -> None:
        self._visible = visible

    def swap_visibility(self) -> None:
        self._visible = not self._visible