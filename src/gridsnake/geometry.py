# geometry.py
from __future__ import annotations

from dataclasses import dataclass
import random

import pygame  # type: ignore

from .config import Config


@dataclass(frozen=True)
class Position:
    """One cell on the grid. Coordinates may be negative once the head leaves it."""
    x: int
    y: int

    def __add__(self, other: "Position") -> "Position":
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)

    def as_tuple(self):
        return (self.x, self.y)


def add(a: Position, b: Position) -> Position:
    return a + b


def random_position(config: Config, rng: random.Random) -> Position:
    """Uniform cell in [0, grid_width) x [0, grid_height)."""
    return Position(rng.randrange(config.grid_width), rng.randrange(config.grid_height))


def to_rect(position: Position, cell_size: int) -> pygame.Rect:
    return pygame.Rect(position.x * cell_size, position.y * cell_size, cell_size, cell_size)


def in_bounds(position: Position, config: Config) -> bool:
    if position.x < 0 or position.y < 0:
        return False
    if config.strict_bounds:
        return position.x < config.grid_width and position.y < config.grid_height
    return position.x <= config.grid_width and position.y <= config.grid_height
