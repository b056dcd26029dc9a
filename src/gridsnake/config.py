from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Window & grid -----
WIDTH, HEIGHT = 800, 600
CELL_SIZE = 10
FPS = 30
CAPTION = "Snake"

# ----- Colors -----
BG    = (0, 0, 0)
GREEN = (0, 255, 0)
RED   = (255, 0, 0)

# ----- Starting snake -----
START_HEAD = (10, 5)
START_DIRECTION = "right"
START_LENGTH = 5


@dataclass(frozen=True)
class Config:
    """Immutable game settings, passed to the engine, session and display."""
    window_width: int = WIDTH
    window_height: int = HEIGHT
    cell_size: int = CELL_SIZE
    fps: int = FPS
    start_head: Tuple[int, int] = START_HEAD
    start_direction: str = START_DIRECTION
    start_length: int = START_LENGTH
    seed: Optional[int] = None
    # False keeps the loose far-edge check: x == grid_width is still on the board
    strict_bounds: bool = True

    def __post_init__(self):
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.window_width < self.cell_size or self.window_height < self.cell_size:
            raise ValueError("window must hold at least one cell")

    @property
    def grid_width(self) -> int:
        return self.window_width // self.cell_size

    @property
    def grid_height(self) -> int:
        return self.window_height // self.cell_size

    @property
    def frame_ms(self) -> int:
        return 1000 // self.fps


DEFAULT_CONFIG = Config()
