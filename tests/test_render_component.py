import pygame
import pytest

from minigin.animation import AnimationType
from minigin.game_object import GameObject
from minigin.render_component import RenderComponent
from minigin.renderer import Rect, Renderer
from minigin.scene import SceneManager
from minigin.texture import Texture2D

RED = (255, 0, 0, 255)
BACKGROUND = (0, 0, 0, 255)


@pytest.fixture
def target():
    surface = pygame.Surface((64, 64))
    renderer = Renderer.instance()
    renderer.init(surface)
    yield surface
    renderer.destroy()


def _red(size):
    surface = pygame.Surface(size)
    surface.fill(RED)
    return Texture2D(surface)


def _owned(component, x, y):
    owner = GameObject()
    owner.set_position(x, y)
    owner.add_component(component)
    return owner


def test_visibility_swaps():
    component = RenderComponent()
    assert component.visible
    component.swap_visibility()
    assert component.visible is False
    component.set_visibility(True)
    assert component.visible is True


def test_draw_at_doubled_position(target):
    component = RenderComponent()
    component.set_texture(_red((2, 2)))
    _owned(component, 3, 4)
    component.draw()
    assert component.shape == Rect(6, 8, 2, 2)
    assert target.get_at((6, 8)) == RED
    assert target.get_at((5, 8)) == BACKGROUND


def test_render_draws(target):
    component = RenderComponent()
    component.set_texture(_red((1, 1)))
    _owned(component, 1, 1)
    component.render()
    assert target.get_at((2, 2)) == RED


def test_scale_stretches_texture(target):
    component = RenderComponent()
    component.set_texture(_red((2, 2)))
    component.set_scale(2)
    _owned(component, 0, 0)
    component.draw()
    assert target.get_at((3, 3)) == RED
    assert target.get_at((4, 4)) == BACKGROUND


def test_draw_without_owner_raises(target):
    component = RenderComponent()
    component.set_texture(_red((1, 1)))
    with pytest.raises(RuntimeError):
        component.draw()


def test_draw_without_texture_draws_nothing(target):
    component = RenderComponent()
    _owned(component, 1, 1)
    component.draw()
    assert component.shape == Rect()


def test_add_animation_requires_texture():
    with pytest.raises(ValueError):
        RenderComponent(use_animation=True).add_animation(1, 1, 1, 1, AnimationType.LOOP, 0, 0)


def test_update_advances_selected_animation():
    component = RenderComponent(use_animation=True)
    component.set_texture(_red((8, 4)))
    animation = component.add_animation(1, 4, 4, 4, AnimationType.LOOP, 0, 0)
    SceneManager.instance().delta_time = 0.25
    component.update()
    assert animation.current_frame == 1
    assert component.animations == (animation,)


def test_invisible_animation_records_shape_only(target):
    component = RenderComponent(use_animation=True)
    component.set_texture(_red((8, 4)))
    animation = component.add_animation(1, 4, 4, 4, AnimationType.LOOP, 0, 0)
    _owned(component, 2, 2)
    component.set_visibility(False)
    component.draw()
    assert component.shape == Rect(4, 4, animation.frame_width, animation.frame_height)
    assert target.get_at((4, 4)) == BACKGROUND