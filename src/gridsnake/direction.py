# direction.py
from __future__ import annotations

from enum import Enum

from .geometry import Position


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def scalar(self) -> Position:
        return _SCALARS[self]

    def invert(self) -> "Direction":
        return _OPPOSITES[self]

    def step(self, position: Position) -> Position:
        return position + self.scalar


# ----- Unit vectors (dx, dy), y grows downwards -----
_SCALARS = {
    Direction.UP: Position(0, -1),
    Direction.DOWN: Position(0, 1),
    Direction.LEFT: Position(-1, 0),
    Direction.RIGHT: Position(1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def scalar(direction: Direction) -> Position:
    return direction.scalar


def invert(direction: Direction) -> Direction:
    return direction.invert()


def step(direction: Direction, position: Position) -> Position:
    return direction.step(position)


def is_opposite(a: Direction, b: Direction) -> bool:
    return a.invert() is b
