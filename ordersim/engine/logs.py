from __future__ import annotations
import sys

from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | {thread.name: <8} | {message}"

def enable_logging(level: int | str = "INFO") -> None:
    """Route ordersim's loguru output to stderr at ``level``, replacing any prior sinks."""
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
