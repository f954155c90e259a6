"""Loads textures and fonts relative to a data directory."""

from __future__ import annotations

from typing import ClassVar, Optional

import pygame

from minigin.texture import Font, Texture2D


class ResourceManager:
    """Resolves resource names against the data path and loads them."""

    _instance: ClassVar[Optional["ResourceManager"]] = None

    def __init__(self) -> None:
        self._data_path = ""

    @classmethod
    def instance(cls) -> "ResourceManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def data_path(self) -> str:
        return self._data_path

    def init(self, data_path: str) -> None:
        """Set the data path, which is prefixed as-is to every file name."""
        self._data_path = data_path
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise RuntimeError(f"Failed to load support for fonts: {exc}") from exc

    def load_texture(self, file: str) -> Texture2D:
        full_path = self._data_path + file
        try:
            surface = pygame.image.load(full_path)
        except (OSError, pygame.error) as exc:
            raise RuntimeError(f"Failed to load texture: {exc}") from exc
        return Texture2D(surface)

    def load_font(self, file: str, size: int) -> Font:
        return Font(self._data_path + file, size)