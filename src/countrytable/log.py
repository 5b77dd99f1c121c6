"""Logging setup for countrytable."""

import sys

from loguru import logger


def configure_logging(log_file: str | None = None, level: str = "INFO") -> None:
    """Route loguru output away from the terminal the UI is drawing on.

    Args:
        log_file: File to append log records to. When empty, records are dropped
            while the UI runs and only errors go to stderr.
        level: Minimum level written to the log file.
    """
    logger.remove()
    if log_file:
        logger.add(log_file, level=level.upper(), rotation="1 MB", retention=3, enqueue=True)
    else:
        logger.add(sys.stderr, level="ERROR")
