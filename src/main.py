"""Used to run the game in a terminal"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

from data_types import DEFAULT_PLAYERS
from data_wrappers import MemoryBackend, RedisBackend, Store
from exceptions import CorruptState
from user_interfaces import ConsoleGame

logger = logging.getLogger(__name__)

DEFAULT_STATE_KEY = "game-state-key"


def configure_logging(level: Optional[str] = None) -> None:
    """Sets the root log level, reading LOG_LEVEL from env if none is passed"""

    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
    root_logger.setLevel(level)


def main():
    # Gets settings from env and runs the game with them
    load_dotenv()
    configure_logging()

    key = os.getenv("GAME_STATE_KEY", DEFAULT_STATE_KEY)
    redis_url = os.getenv("REDIS_URL")

    if redis_url:
        backend = RedisBackend.from_url(redis_url)
    else:
        logger.warning("REDIS_URL not set, state will only last until exit")
        backend = MemoryBackend()

    store = Store(key, DEFAULT_PLAYERS, backend)

    if isinstance(backend, RedisBackend):
        backend.listen()

    try:
        ConsoleGame(store).run()
    except CorruptState as exc:
        logger.error("%s, clear the key or set GAME_STATE_KEY to start over", exc)
        raise
    finally:
        if isinstance(backend, RedisBackend):
            backend.close()


if __name__ == "__main__":
    main()
