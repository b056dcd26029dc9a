import pygame
import pytest

from gridsnake.config import GREEN, RED, Config
from gridsnake.direction import Direction
from gridsnake.display import FixedClock, PygameInput, PygameRenderer, translate
from gridsnake.errors import RenderError
from gridsnake.geometry import Position
from gridsnake.session import EventKind


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


@pytest.mark.parametrize("k,expected", [
    (pygame.K_UP, Direction.UP),
    (pygame.K_w, Direction.UP),
    (pygame.K_DOWN, Direction.DOWN),
    (pygame.K_s, Direction.DOWN),
    (pygame.K_LEFT, Direction.LEFT),
    (pygame.K_a, Direction.LEFT),
    (pygame.K_RIGHT, Direction.RIGHT),
    (pygame.K_d, Direction.RIGHT),
])
def test_translate_direction_keys(k, expected):
    event = translate(key(k))
    assert event.kind is EventKind.DIRECTIONAL
    assert event.direction is expected


def test_translate_quit_and_escape():
    assert translate(pygame.event.Event(pygame.QUIT)).kind is EventKind.QUIT
    assert translate(key(pygame.K_ESCAPE)).kind is EventKind.QUIT


def test_translate_ignores_other_events():
    assert translate(key(pygame.K_SPACE)).kind is EventKind.OTHER
    assert translate(pygame.event.Event(pygame.KEYUP, key=pygame.K_UP)).kind is EventKind.OTHER


def test_renderer_draws_cells_offscreen():
    cfg = Config()
    surface = pygame.Surface((cfg.window_width, cfg.window_height))
    renderer = PygameRenderer(surface, cfg, flip=False)
    renderer.clear()
    renderer.draw_squares(RED, [Position(2, 3)])
    renderer.draw_squares(GREEN, [Position(0, 0), Position(1, 0)])
    renderer.present()

    assert tuple(surface.get_at((25, 35)))[:3] == RED
    assert tuple(surface.get_at((5, 5)))[:3] == GREEN
    assert tuple(surface.get_at((15, 5)))[:3] == GREEN
    assert tuple(surface.get_at((500, 500)))[:3] == (0, 0, 0)


def test_renderer_wraps_pygame_errors(monkeypatch):
    cfg = Config()
    renderer = PygameRenderer(pygame.Surface((10, 10)), cfg)

    def broken_flip():
        raise pygame.error("video system not initialized")

    monkeypatch.setattr(pygame.display, "flip", broken_flip)
    with pytest.raises(RenderError):
        renderer.present()


def test_input_drains_queue():
    pygame.display.init()
    try:
        pygame.display.set_mode((10, 10))
        pygame.event.clear()
        pygame.event.post(key(pygame.K_LEFT))
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        kinds = [e.kind for e in PygameInput().poll() if e.kind is not EventKind.OTHER]
        assert kinds == [EventKind.DIRECTIONAL, EventKind.QUIT]
        assert [e for e in PygameInput().poll() if e.kind is not EventKind.OTHER] == []
    finally:
        pygame.display.quit()


def test_fixed_clock_waits_frame_time(monkeypatch):
    waits = []
    monkeypatch.setattr(pygame.time, "wait", lambda ms: waits.append(ms) or ms)
    clock = FixedClock(Config().frame_ms)
    clock.sleep()
    clock.sleep()
    assert waits == [33, 33]
