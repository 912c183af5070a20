"""Stdlib logging setup for the process.

Application code uses logfire; this only tames third-party loggers and
gives uvicorn a sane format.
"""

import logging
import sys

from ballot.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Chatty below WARNING even in development
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncio")


def log_level(settings: Settings) -> int:
    """Root level for ``settings``: DEBUG when debugging, quieter in tests."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "test":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Route all logging to stdout at the level for this environment."""
    level = log_level(settings)
    logging.basicConfig(
        level=level, format=LOG_FORMAT, stream=sys.stdout, force=True
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    logging.getLogger(__name__).debug(
        "Logging ready for %s at %s",
        settings.environment,
        logging.getLevelName(level),
    )
