# entities.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List
import random

from .config import Config
from .direction import Direction
from .geometry import Position, random_position


@dataclass(frozen=True)
class Segment:
    position: Position


@dataclass(frozen=True)
class Apple:
    position: Position

    @classmethod
    def respawn(cls, config: Config, rng: random.Random) -> "Apple":
        """A fresh apple anywhere on the grid, the snake's cells included."""
        return cls(random_position(config, rng))


@dataclass
class Snake:
    direction: Direction
    segments: List[Segment] = field(default_factory=list)  # head at index 0

    @classmethod
    def spawn(cls, head: Position, direction: Direction, length: int) -> "Snake":
        """
        Lay out `length` segments starting at `head` and trailing behind it,
        i.e. walking along the inverse of `direction`. No bounds check.
        """
        if length < 1:
            raise ValueError(f"snake length must be at least 1, got {length}")
        back = direction.invert()
        segments = []
        cur = head
        for _ in range(length):
            segments.append(Segment(cur))
            cur = back.step(cur)
        return cls(direction=direction, segments=segments)

    @property
    def head(self) -> Segment:
        return self.segments[0]

    @property
    def body(self) -> List[Segment]:
        return self.segments[1:]

    @property
    def positions(self) -> List[Position]:
        return [s.position for s in self.segments]

    def __len__(self) -> int:
        return len(self.segments)

    def set_direction(self, requested: Direction) -> bool:
        """Turn unless `requested` would reverse onto the body. Returns True if applied."""
        if requested is self.direction.invert():
            return False
        self.direction = requested
        return True
