"""Sprite-sheet animation."""

from __future__ import annotations

import enum

from minigin.component import Component
from minigin.renderer import Rect, Renderer
from minigin.texture import Texture2D

_LAST_FRAME = 3


class AnimationType(enum.Enum):
    """How an animation advances and what happens at its end."""

    LOOP = enum.auto()
    ONLY_ONCE = enum.auto()
    START_AT_NON_ZERO = enum.auto()
    ONLY_ONCE_END_AT_LAST = enum.auto()


class AnimationComponent(Component):
    """Steps through the frames of one row of a sprite sheet."""

    def __init__(
        self,
        texture: Texture2D,
        rows: int,
        columns: int,
        max_frames: int,
        frames_per_second: int,
        animation_type: AnimationType,
        current_frame: int,
        row: int,
    ) -> None:
        super().__init__()
        if rows <= 0 or columns <= 0:
            raise ValueError("a sprite sheet needs at least one row and one column")
        if max_frames <= 0:
            raise ValueError("an animation needs at least one frame")
        if frames_per_second <= 0:
            raise ValueError("frames per second must be positive")
        self.texture = texture
        self.rows = rows
        self.columns = columns
        self.max_frames = max_frames
        self.frames_per_second = frames_per_second
        self.animation_type = animation_type
        self.current_frame = current_frame
        self.row = row
        self.playing = False
        self.shape = Rect()
        self._start_frame = current_frame
        self._elapsed = 0.0

    @property
    def frame_width(self) -> int:
        return self.texture.size[0] // self.columns

    @property
    def frame_height(self) -> int:
        return self.texture.size[1] // self.rows

    def play(self) -> None:
        """Start a one-shot animation."""
        self.playing = True

    def _tick(self, elapsed: float) -> bool:
        self._elapsed += elapsed
        frame_time = 1.0 / self.frames_per_second
        if self._elapsed < frame_time:
            return False
        self._elapsed -= frame_time
        self.current_frame += 1
        return True

    def update(self, elapsed: float = 0.0) -> None:
        """Advance by ``elapsed`` seconds."""
        kind = self.animation_type
        if kind is AnimationType.LOOP:
            if self._tick(elapsed) and self.current_frame % self.max_frames == 0:
                self.current_frame = 0
                self._elapsed = 0.0
        elif kind is AnimationType.ONLY_ONCE:
            if self.playing and self._tick(elapsed) and self.current_frame >= self.max_frames:
                self.current_frame = 0
                self._elapsed = 0.0
                self.playing = False
        elif kind is AnimationType.START_AT_NON_ZERO:
            if self._tick(elapsed) and self.current_frame >= self.max_frames:
                self.current_frame = self._start_frame
                self._elapsed = 0.0
        elif kind is AnimationType.ONLY_ONCE_END_AT_LAST:
            if self.playing and self._tick(elapsed) and self.current_frame >= _LAST_FRAME:
                self.current_frame = _LAST_FRAME
                self._elapsed = 0.0
                self.playing = False

    def draw(self, x: float, y: float, scale: float = 1.0) -> None:
        """Draw the current frame at (x, y), scaled by ``scale``."""
        width, height = self.frame_width, self.frame_height
        source = Rect(width * self.current_frame, height * self.row, width, height)
        self.shape = Rect(int(x), int(y), int(width * scale), int(height * scale))
        Renderer.instance().render_region(self.texture, self.shape, source)