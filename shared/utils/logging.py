"""Shared logging utilities"""

import logging
import os
import sys
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    """Resolve a level name or number, falling back to LOG_LEVEL then INFO"""
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Return a logger with a single stdout handler

    Args:
        name: logger name
        level: log level (default: LOG_LEVEL env var, else INFO)

    Returns:
        logging.Logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(_resolve_level(level))
    return logger
