"""
Performance monitoring helpers for the color analysis pipeline.

Timings are reported through loguru; nothing is aggregated in process, so
concurrent analyses never share state.
"""

import time
from contextlib import contextmanager
from typing import Any, Iterator

from loguru import logger


@contextmanager
def performance_monitor(operation_name: str, **context: Any) -> Iterator[None]:
    """
    Time a block of work and log its duration.

    Args:
        operation_name: Label for the timed stage
        **context: Extra fields bound to the log record (pixel counts, k, ...)
    """
    start_time = time.perf_counter()
    try:
        yield
    except Exception as e:
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.bind(operation=operation_name, **context).warning(
            f"{operation_name} failed after {duration_ms:.1f}ms: {e}"
        )
        raise
    duration_ms = (time.perf_counter() - start_time) * 1000
    logger.bind(operation=operation_name, duration_ms=round(duration_ms, 2), **context).debug(
        f"{operation_name} completed in {duration_ms:.1f}ms"
    )

