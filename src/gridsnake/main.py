# main.py
import logging
import random

import pygame # type: ignore

from .config import DEFAULT_CONFIG, Config
from .display import FixedClock, PygameInput, PygameRenderer, open_window
from .engine import GameEngine
from .session import Session, SessionState

logger = logging.getLogger(__name__)


def play(config: Config = DEFAULT_CONFIG) -> SessionState:
    pygame.init()
    try:
        screen = open_window(config)
        engine = GameEngine(config, random.Random(config.seed))
        session = Session(
            config,
            engine,
            renderer=PygameRenderer(screen, config),
            source=PygameInput(),
            clock=FixedClock(config.frame_ms),
        )
        result = session.run()
    finally:
        pygame.quit()

    logger.info("Session ended: %s, length %d, %d apples in %d ticks",
                result.state.value, result.length, result.apples_eaten, result.ticks)
    return result.state


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    state = play()
    return 1 if state is SessionState.RENDER_FAILED else 0


if __name__ == "__main__":
    raise SystemExit(main())
