"""Draws textures and shapes onto a target surface."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, NamedTuple, Optional

import pygame

from minigin.scene import SceneManager
from minigin.texture import Texture2D


class Color(NamedTuple):
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255


@dataclass
class Rect:
    """An integer rectangle: top-left corner and size."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def _to_pygame_rect(rect: Rect) -> pygame.Rect:
    return pygame.Rect(rect.x, rect.y, rect.w, rect.h)


class Renderer:
    """Draws onto one target surface, usually the window."""

    _instance: ClassVar[Optional["Renderer"]] = None

    def __init__(self) -> None:
        self._target: Optional[pygame.Surface] = None
        self.background_color = Color(0, 0, 0, 0)
        self.black = Color(0, 0, 0, 255)
        self.white = Color(255, 255, 255, 255)
        self.power_up_color = self.black
        self.is_black = True
        self.total_time_elapsed = 0.0
        self.positions: list[tuple[int, int]] = []
        self.destination_rect = Rect()

    @classmethod
    def instance(cls) -> "Renderer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def target(self) -> Optional[pygame.Surface]:
        return self._target

    def _require_target(self) -> pygame.Surface:
        if self._target is None:
            raise RuntimeError("renderer is not initialised")
        return self._target

    def init(self, surface: pygame.Surface) -> None:
        """Start drawing onto ``surface``."""
        self._target = surface

    def render(self) -> None:
        """Clear to the background colour, draw the current scene and present it."""
        target = self._require_target()
        target.fill(self.background_color)
        SceneManager.instance().render()
        if pygame.display.get_init() and pygame.display.get_surface() is target:
            pygame.display.flip()

    def destroy(self) -> None:
        self._target = None

    def render_texture(
        self,
        texture: Texture2D,
        x: float,
        y: float,
        width: Optional[float] = None,
        height: Optional[float] = None,
    ) -> None:
        """Draw a whole texture at (x, y), stretched to width x height if given."""
        target = self._require_target()
        surface = texture.surface
        if width is None or height is None:
            target.blit(surface, (int(x), int(y)))
            return
        w, h = int(width), int(height)
        self.destination_rect = Rect(int(x), int(y), w, h)
        if w <= 0 or h <= 0:
            return
        if (w, h) != surface.get_size():
            surface = pygame.transform.scale(surface, (w, h))
        target.blit(surface, (int(x), int(y)))

    def render_region(self, texture: Texture2D, destination: Rect, source: Rect) -> None:
        """Draw the ``source`` part of a texture stretched over ``destination``."""
        target = self._require_target()
        region_rect = _to_pygame_rect(source).clip(texture.surface.get_rect())
        if region_rect.width <= 0 or region_rect.height <= 0:
            return
        if destination.w <= 0 or destination.h <= 0:
            return
        region = texture.surface.subsurface(region_rect)
        if region.get_size() != (destination.w, destination.h):
            region = pygame.transform.scale(region, (destination.w, destination.h))
        target.blit(region, (destination.x, destination.y))

    def toggle_color(self) -> None:
        self.is_black = not self.is_black

    def draw_square(self, x: float, y: float, size: float, color: Color) -> None:
        """Draw the one-pixel outline of a square."""
        rect = pygame.Rect(int(x), int(y), int(size), int(size))
        pygame.draw.rect(self._require_target(), color, rect, width=1)

    def fill_square(self, x: float, y: float, size: float, color: Color) -> None:
        self.fill_rect(x, y, size, size, color)

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        self._require_target().fill(color, rect)