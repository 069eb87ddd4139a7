"""
Every module logs through the "jsxlate" logger. Nothing is printed until an
application installs a handler with setup_logger.
"""
import logging
import sys
from typing import IO, Optional, Union

LOGGER_NAME = "jsxlate"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = getattr(logging, level.upper(), None)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(level: Union[str, int] = "INFO", stream: Optional[IO[str]] = None) -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    # Configured once; later calls get the existing logger back untouched
    if logger.handlers:
        return logger
    logger.setLevel(resolve_level(level))
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    logger.addHandler(handler)
    return logger
