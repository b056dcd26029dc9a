# session.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Protocol, Sequence, Tuple
import logging

from .config import Config, GREEN, RED
from .direction import Direction
from .engine import GameEngine, GameOverReason
from .errors import RenderError
from .geometry import Position

logger = logging.getLogger(__name__)

Color = Tuple[int, int, int]


# ---------- Input ----------
class EventKind(Enum):
    QUIT = "quit"
    DIRECTIONAL = "directional"
    OTHER = "other"


@dataclass(frozen=True)
class InputEvent:
    kind: EventKind
    direction: Optional[Direction] = None


QUIT = InputEvent(EventKind.QUIT)
OTHER = InputEvent(EventKind.OTHER)


def directional(direction: Direction) -> InputEvent:
    return InputEvent(EventKind.DIRECTIONAL, direction)


@dataclass(frozen=True)
class TickInput:
    quit: bool = False
    direction: Optional[Direction] = None


def coalesce(events: Iterable[InputEvent]) -> TickInput:
    """
    Reduce one tick's drained events to what the engine sees: a quit anywhere
    wins, otherwise only the first directional event is kept.
    """
    first: Optional[Direction] = None
    for event in events:
        if event.kind is EventKind.QUIT:
            return TickInput(quit=True)
        if event.kind is EventKind.DIRECTIONAL and first is None:
            first = event.direction
    return TickInput(direction=first)


# ---------- Collaborators ----------
class RenderSink(Protocol):
    def clear(self) -> None: ...
    def draw_squares(self, color: Color, positions: Sequence[Position]) -> None: ...
    def present(self) -> None: ...


class InputSource(Protocol):
    def poll(self) -> Iterable[InputEvent]: ...


class Clock(Protocol):
    def sleep(self) -> None: ...


# ---------- State machine ----------
class SessionState(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"
    QUIT = "quit"
    RENDER_FAILED = "render_failed"


@dataclass(frozen=True)
class SessionResult:
    state: SessionState
    reason: Optional[GameOverReason]
    length: int
    ticks: int
    apples_eaten: int


class Session:
    """Runs one game: poll input, update, render, sleep, until a terminal state."""

    def __init__(self, config: Config, engine: GameEngine, renderer: RenderSink,
                 source: InputSource, clock: Clock):
        self.config = config
        self.engine = engine
        self.renderer = renderer
        self.source = source
        self.clock = clock
        self.state = SessionState.RUNNING
        self.reason: Optional[GameOverReason] = None

    def render(self) -> None:
        self.renderer.clear()
        self.renderer.draw_squares(RED, [self.engine.apple.position])
        self.renderer.draw_squares(GREEN, self.engine.snake.positions)
        self.renderer.present()

    def step(self) -> SessionState:
        """One tick. Returns the state after it."""
        if self.state is not SessionState.RUNNING:
            return self.state

        tick_input = coalesce(self.source.poll())
        if tick_input.quit:
            logger.info("Quit requested after %d ticks", self.engine.ticks)
            self.state = SessionState.QUIT
            return self.state

        result = self.engine.tick(tick_input.direction)
        if result.terminal:
            self.state = SessionState.GAME_OVER
            self.reason = result.reason
            return self.state

        try:
            self.render()
        except RenderError as e:
            logger.error("Frame %d could not be rendered: %s", self.engine.ticks, e)
            self.state = SessionState.RENDER_FAILED
            return self.state

        self.clock.sleep()
        return self.state

    def run(self) -> SessionResult:
        logger.info("Session started on a %dx%d grid at %d fps",
                    self.config.grid_width, self.config.grid_height, self.config.fps)
        try:
            self.render()
        except RenderError as e:
            logger.error("Initial frame could not be rendered: %s", e)
            self.state = SessionState.RENDER_FAILED

        while self.state is SessionState.RUNNING:
            self.step()
        return self.result()

    def result(self) -> SessionResult:
        return SessionResult(
            state=self.state,
            reason=self.reason,
            length=len(self.engine.snake),
            ticks=self.engine.ticks,
            apples_eaten=self.engine.apples_eaten,
        )
