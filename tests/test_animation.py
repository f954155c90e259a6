import pygame
import pytest

from minigin.animation import AnimationComponent, AnimationType
from minigin.renderer import Renderer
from minigin.texture import Texture2D

FPS = 4
STEP = 1.0 / FPS
RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)


def _sheet():
    surface = pygame.Surface((8, 4))
    surface.fill(RED, pygame.Rect(0, 0, 2, 4))
    surface.fill(BLUE, pygame.Rect(2, 0, 2, 4))
    return Texture2D(surface)


def _animation(kind, max_frames=3, start=0):
    return AnimationComponent(_sheet(), 2, 4, max_frames, FPS, kind, start, 0)


@pytest.fixture
def target():
    surface = pygame.Surface((32, 32))
    renderer = Renderer.instance()
    renderer.init(surface)
    yield surface
    renderer.destroy()


def test_frame_size_divides_sheet():
    animation = _animation(AnimationType.LOOP)
    assert animation.frame_width * animation.columns == animation.texture.size[0]
    assert animation.frame_height * animation.rows == animation.texture.size[1]


def test_short_update_does_not_advance():
    animation = _animation(AnimationType.LOOP)
    animation.update(STEP / 2)
    assert animation.current_frame == 0


def test_loop_wraps_to_zero():
    animation = _animation(AnimationType.LOOP, max_frames=3)
    frames = []
    for _ in range(3):
        animation.update(STEP)
        frames.append(animation.current_frame)
    assert frames == [1, 2, 0]


def test_only_once_waits_for_play():
    animation = _animation(AnimationType.ONLY_ONCE)
    animation.update(STEP)
    assert animation.current_frame == 0
    animation.play()
    animation.update(STEP)
    assert animation.current_frame == 1
    assert animation.playing


def test_only_once_stops_at_end():
    animation = _animation(AnimationType.ONLY_ONCE, max_frames=2)
    animation.play()
    animation.update(STEP)
    animation.update(STEP)
    assert animation.current_frame == 0
    assert animation.playing is False


def test_start_at_non_zero_returns_to_start():
    animation = _animation(AnimationType.START_AT_NON_ZERO, max_frames=3, start=1)
    animation.update(STEP)
    animation.update(STEP)
    assert animation.current_frame == 1


def test_end_at_last_holds_last_frame():
    animation = _animation(AnimationType.ONLY_ONCE_END_AT_LAST, max_frames=8)
    animation.play()
    for _ in range(6):
        animation.update(STEP)
    assert animation.current_frame == 3
    assert animation.playing is False


def test_invalid_frames_per_second_raises():
    with pytest.raises(ValueError):
        AnimationComponent(_sheet(), 1, 1, 1, 0, AnimationType.LOOP, 0, 0)


def test_draw_uses_current_frame(target):
    animation = _animation(AnimationType.LOOP)
    animation.update(STEP)
    animation.draw(5, 6, 1.0)
    assert target.get_at((5, 6)) == BLUE


def test_draw_scales_shape(target):
    animation = _animation(AnimationType.LOOP)
    animation.draw(5, 6, 2.0)
    assert (animation.shape.x, animation.shape.y) == (5, 6)
    assert animation.shape.w == animation.frame_width * 2
    assert animation.shape.h == animation.frame_height * 2
    assert target.get_at((5 + animation.shape.w - 1, 6)) == RED