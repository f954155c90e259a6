"""Renders text or a flat colour into a render component's texture."""

from __future__ import annotations

from typing import Optional

import pygame

from minigin.component import Component
from minigin.render_component import RenderComponent
from minigin.renderer import Color
from minigin.texture import Font, Texture2D


class FontError(Exception):
    """Raised when text is rendered without a font."""


class TextComponent(Component):
    """Produces textures for a render component from text or a colour."""

    def __init__(
        self,
        render_component: Optional[RenderComponent] = None,
        font: Optional[Font] = None,
        priority: int = -1,
    ) -> None:
        super().__init__(priority)
        self.render_component = render_component
        self.font = font
        self.color = Color(255, 255, 255)

    def _target(self) -> RenderComponent:
        if self.render_component is None:
            raise ValueError("text component has no render component")
        return self.render_component

    def set_text(self, text: str) -> None:
        """Render ``text`` in the current colour and use it as the texture."""
        if self.font is None:
            raise FontError("no font set")
        target = self._target()
        try:
            surface = self.font.font.render(text, True, self.color)
        except pygame.error as exc:
            raise RuntimeError(f"Render text failed: {exc}") from exc
        target.set_texture(Texture2D(surface))

    def set_color_rect(self, width: int, height: int) -> None:
        """Use a width x height rectangle of the current colour as the texture."""
        target = self._target()
        try:
            surface = pygame.Surface((width, height))
        except (pygame.error, ValueError) as exc:
            raise RuntimeError(f"Render color rect failed: {exc}") from exc
        surface.fill(self.color[:3])
        target.set_texture(Texture2D(surface))

    def set_font(self, font: Optional[Font]) -> None:
        self.font = font

    def set_color(self, color: Color) -> None:
        self.color = color