"""
Logging setup for the rcalc command line.

Library modules only create loggers; the CLI decides where records go.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_handler: Optional[logging.Handler] = None


def parse_log_level(log_level: str) -> int:
    """Maps a level name such as ``"info"`` to its logging constant."""
    try:
        return LOG_LEVELS[log_level.strip().lower()]
    except KeyError:
        raise ValueError(
            f'Invalid log level "{log_level}". '
            f"Must be one of: {', '.join(LOG_LEVELS)}"
        ) from None


def enable_logging(log_level: str = "warning", stream: Optional[TextIO] = None) -> None:
    """
    Routes ``rcalc`` log records to stderr at the given level.

    Only the ``rcalc`` logger is configured; the root logger is left alone.
    """
    global _handler

    logger = logging.getLogger("rcalc")
    logger.setLevel(parse_log_level(log_level))

    if _handler is not None:
        logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
