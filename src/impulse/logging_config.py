# MIT License (see LICENSE)
"""Logging configuration for impulse."""
from __future__ import annotations
import logging

from .util import log_level

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None, name: str = "impulse") -> logging.Logger:
    """
    Attach a console handler to the package logger.

    The library never calls this itself; applications and example scripts
    opt in. Calling it again only updates the level.

    Args:
        level: Log level name (DEBUG, INFO, ...). Defaults to IMPULSE_LOG_LEVEL.
        name: Logger to configure.

    Returns:
        The configured logger.
    """
    if level is None:
        level = log_level()
    numeric = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(name)
    logger.setLevel(numeric)

    if not any(getattr(h, "_impulse_console", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._impulse_console = True
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(numeric)

    return logger
