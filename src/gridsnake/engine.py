# engine.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional
import logging
import random

from .config import Config
from .direction import Direction
from .entities import Apple, Segment, Snake
from .errors import GridSnakeError
from .geometry import Position, in_bounds

logger = logging.getLogger(__name__)


class Outcome(Enum):
    CONTINUE = "continue"
    ATE_APPLE = "ate_apple"
    GAME_OVER = "game_over"


class GameOverReason(Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    SELF_COLLISION = "self_collision"


@dataclass(frozen=True)
class AdvanceResult:
    outcome: Outcome
    reason: Optional[GameOverReason] = None

    @property
    def terminal(self) -> bool:
        return self.outcome is Outcome.GAME_OVER


CONTINUE = AdvanceResult(Outcome.CONTINUE)
ATE_APPLE = AdvanceResult(Outcome.ATE_APPLE)


def game_over(reason: GameOverReason) -> AdvanceResult:
    return AdvanceResult(Outcome.GAME_OVER, reason)


# ---------- Tick ----------
def advance(snake: Snake, apple: Apple, config: Config) -> AdvanceResult:
    """
    Move the snake one cell in its current direction.

    The new head is always prepended. The tail is kept when the head lands on
    the apple (growth by one) and dropped otherwise. Collision checks run on
    the resulting body, so a terminal result wins over eating in the same tick.
    """
    new_head = snake.direction.step(snake.head.position)
    snake.segments.insert(0, Segment(new_head))

    ate = new_head == apple.position
    if not ate:
        snake.segments.pop()

    if not in_bounds(new_head, config):
        return game_over(GameOverReason.OUT_OF_BOUNDS)

    # segments[0] is the new head itself
    for segment in snake.body:
        if segment.position == new_head:
            return game_over(GameOverReason.SELF_COLLISION)

    return ATE_APPLE if ate else CONTINUE


# ---------- Engine ----------
class GameEngine:
    """Owns one game's snake and apple. A new game is a new engine."""

    def __init__(self, config: Config, rng: Optional[random.Random] = None,
                 apple: Optional[Apple] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.snake = Snake.spawn(
            Position(*config.start_head),
            Direction(config.start_direction),
            config.start_length,
        )
        self.apple = apple if apple is not None else Apple.respawn(config, self.rng)
        self.apples_eaten = 0
        self.ticks = 0
        self.last_result: Optional[AdvanceResult] = None

    @property
    def finished(self) -> bool:
        return self.last_result is not None and self.last_result.terminal

    def tick(self, direction: Optional[Direction] = None) -> AdvanceResult:
        if self.finished:
            raise GridSnakeError("game is over; start a new engine to play again")

        if direction is not None:
            self.snake.set_direction(direction)

        result = advance(self.snake, self.apple, self.config)
        self.ticks += 1
        self.last_result = result

        if result.outcome is Outcome.ATE_APPLE:
            self.apples_eaten += 1
            self.apple = Apple.respawn(self.config, self.rng)
            logger.debug("Apple eaten at tick %d, length %d, next apple at %s",
                         self.ticks, len(self.snake), self.apple.position.as_tuple())
        elif result.terminal:
            logger.info("Game over after %d ticks: %s (length %d)",
                        self.ticks, result.reason.value, len(self.snake))
        return result
