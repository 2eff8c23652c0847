"""
Logging infrastructure.

Provides logging utilities for the application and infrastructure layers.
"""
import logging
from typing import Optional

from ordering.settings import get_ordering_settings


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get logger instance.

    Args:
        name: Logger name (usually module name)
        level: Log level name; defaults to ORDERING_LOG_LEVEL

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel((level or get_ordering_settings().log_level).upper())
    return logger
