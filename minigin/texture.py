"""Images and fonts loaded for drawing."""

from __future__ import annotations

from typing import Optional

import pygame


class Texture2D:
    """An image that can be drawn by the renderer."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    @property
    def size(self) -> tuple[int, int]:
        """Width and height in pixels."""
        return self.surface.get_size()


class Font:
    """A TrueType font at a fixed point size.

    ``path`` of ``None`` selects pygame's built-in font.
    """

    def __init__(self, path: Optional[str], size: int) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self._font = pygame.font.Font(path, size)
        except (OSError, pygame.error) as exc:
            raise RuntimeError(f"Failed to load font: {exc}") from exc
        self.path = path
        self.size = size

    @property
    def font(self) -> pygame.font.Font:
        return self._font