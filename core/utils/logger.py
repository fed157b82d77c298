"""Logging utility."""
import logging
import sys
from typing import Optional, Union

from app.config import settings


def _resolve_level(level: Union[int, str, None]) -> int:
    """Turn a level name such as "debug" into its numeric value."""
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    resolved = getattr(logging, level.upper(), None)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Set up and return a logger instance writing to stdout."""
    logger = logging.getLogger(name)
    level = _resolve_level(level)
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))

    if not logger.handlers:
        logger.addHandler(handler)

    return logger


# Shared logger for the chat application
logger = setup_logger("gemini_chat", settings.LOG_LEVEL)
