# src/gridsnake/__init__.py
"""Grid snake: update engine plus a pygame front end."""

from .config import Config, DEFAULT_CONFIG
from .direction import Direction
from .engine import AdvanceResult, GameEngine, GameOverReason, Outcome, advance
from .entities import Apple, Segment, Snake
from .geometry import Position

__all__ = [
    "Config", "DEFAULT_CONFIG", "Direction", "AdvanceResult", "GameEngine",
    "GameOverReason", "Outcome", "advance", "Apple", "Segment", "Snake", "Position",
]
