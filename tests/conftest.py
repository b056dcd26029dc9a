import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from gridsnake.config import Config  # noqa: E402


@pytest.fixture
def config() -> Config:
    return Config()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
