"""Centralized logging configuration."""

import logging
from typing import Tuple

from city_weather.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# uvicorn installs its own handlers on these; httpx logs one line per
# Open-Meteo request
THIRD_PARTY_LOGGERS: Tuple[str, ...] = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
)


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def _reset(logger: logging.Logger, level: int) -> None:
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.addHandler(_console_handler(level))


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Route the service and its server/HTTP libraries through one format.

    Unknown level names fall back to INFO. Third-party loggers get a handler
    of their own and stop propagating, so uvicorn lines are not printed twice
    through the root handler.

    Args:
        level: Log level name, e.g. "DEBUG"
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    _reset(logging.getLogger(), log_level)

    for logger_name in THIRD_PARTY_LOGGERS:
        logger = logging.getLogger(logger_name)
        _reset(logger, log_level)
        logger.propagate = False
