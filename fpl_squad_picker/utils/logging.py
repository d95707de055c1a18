"""Loguru sink configuration shared by the command line entry points."""

import sys
from typing import Optional

from loguru import logger


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Replace loguru's default sink with a stderr sink at ``level``.

    Args:
        level: Minimum console level (DEBUG, INFO, ...)
        log_file: Optional file receiving DEBUG and above, rotated at 5 MB
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    if log_file:
        logger.add(log_file, level="DEBUG", rotation="5 MB", retention=3)
