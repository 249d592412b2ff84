"""
huematch Structured Logging
Centralized logging configuration using loguru.
"""
import sys
from typing import Any, Optional

from loguru import logger

from huematch.config import config

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message} | {extra}"


def configure_logging(level: Optional[str] = None, serialize: bool = False, sink: Any = None) -> int:
    """
    Replace loguru's handlers with the structured huematch sink.

    Args:
        level: Minimum level to emit (defaults to config.LOG_LEVEL)
        serialize: Emit JSON records instead of the text format
        sink: Any loguru sink (defaults to sys.stderr)

    Returns:
        Handler id of the installed sink
    """
    level = level or config.LOG_LEVEL
    logger.remove()
    handler_id = logger.add(
        sys.stderr if sink is None else sink,
        format=LOG_FORMAT,
        level=level,
        serialize=serialize,
    )
    logger.debug(f"Logging configured at level {level}")
    return handler_id
