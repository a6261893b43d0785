# workshop_sdk/perf.py
import logging
import time
from contextlib import asynccontextmanager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def async_perf_log(operation: str, logger: logging.Logger = logger):
    """Async context manager for timing async operations"""
    start: float = time.perf_counter()
    logger.info(f"Starting: {operation}")
    try:
        yield
    except Exception as e:
        elapsed: float = time.perf_counter() - start
        logger.error(f"Failed: {operation} after {elapsed:.3f}s - {e}")
        raise
    elapsed = time.perf_counter() - start
    logger.info(f"Completed: {operation} in {elapsed:.3f}s")
