"""Stdlib logging setup.

Application events go through logfire; this only sets levels so that
third-party libraries logging through ``logging`` stay readable.
"""

import logging
import sys

from board.config import Settings

_NOISY_LOGGERS = ("httpx", "httpcore", "asyncio", "sqlalchemy.engine", "redis")


def setup_logging(settings: Settings) -> None:
    """Configure the root logger for the environment.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("board").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
