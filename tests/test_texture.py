import pygame
import pytest

from minigin.texture import Font, Texture2D


def test_texture_size_matches_surface():
    texture = Texture2D(pygame.Surface((3, 5)))
    assert texture.size == (3, 5)


def test_texture_keeps_surface():
    surface = pygame.Surface((2, 2))
    texture = Texture2D(surface)
    assert texture.surface is surface


def test_font_keeps_size():
    font = Font(None, 14)
    assert font.size == 14
    assert font.path is None


def test_font_renders_text():
    font = Font(None, 16)
    width, height = font.font.size("abc")
    assert width > 0 and height > 0


def test_missing_font_raises(tmp_path):
    with pytest.raises(RuntimeError, match="Failed to load font"):
        Font(str(tmp_path / "missing.ttf"), 12)