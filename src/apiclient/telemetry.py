"""Request timing."""

import logging
import time
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


@contextmanager
def log_duration(label: str) -> Iterator[None]:
    """Log the elapsed wall time of the wrapped block at debug level.

    The duration is logged whether the block succeeds or raises.
    """
    start = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.debug(f"{label}: {elapsed_ms:.3f}ms")
