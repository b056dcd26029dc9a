# display.py
from __future__ import annotations

from typing import List, Sequence, Tuple
import logging

import pygame  # type: ignore

from .config import BG, CAPTION, Config
from .direction import Direction
from .errors import RenderError
from .geometry import Position, to_rect
from .session import OTHER, QUIT, InputEvent, directional

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def open_window(config: Config) -> pygame.Surface:
    screen = pygame.display.set_mode((config.window_width, config.window_height))
    pygame.display.set_caption(CAPTION)
    logger.debug("Opened %dx%d window", config.window_width, config.window_height)
    return screen


# ---------- Render sink ----------
class PygameRenderer:
    def __init__(self, screen: pygame.Surface, config: Config, flip: bool = True):
        self.screen = screen
        self.config = config
        self.flip = flip  # off for off-screen surfaces

    def clear(self) -> None:
        try:
            self.screen.fill(BG)
        except pygame.error as e:
            raise RenderError(str(e)) from e

    def draw_squares(self, color: Tuple[int, int, int], positions: Sequence[Position]) -> None:
        try:
            for pos in positions:
                pygame.draw.rect(self.screen, color, to_rect(pos, self.config.cell_size))
        except pygame.error as e:
            raise RenderError(str(e)) from e

    def present(self) -> None:
        if not self.flip:
            return
        try:
            pygame.display.flip()
        except pygame.error as e:
            raise RenderError(str(e)) from e


# ---------- Input source ----------
def translate(event: pygame.event.Event) -> InputEvent:
    if event.type == pygame.QUIT:
        return QUIT
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return QUIT
        direction = KEY_TO_DIRECTION.get(event.key)
        if direction is not None:
            return directional(direction)
    return OTHER


class PygameInput:
    """Drains the pygame event queue once per tick."""

    def poll(self) -> List[InputEvent]:
        return [translate(e) for e in pygame.event.get()]


# ---------- Clock ----------
class FixedClock:
    """Sleeps a fixed frame time; no compensation for time spent in the tick."""

    def __init__(self, frame_ms: int):
        self.frame_ms = frame_ms

    def sleep(self) -> None:
        pygame.time.wait(self.frame_ms)
