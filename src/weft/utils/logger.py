"""Minimal logging utilities for weft.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from weft.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Run started")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "weft." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("engine")
        >>> logger.name
        'weft.engine'
    """
    if not (name == "weft" or name.startswith("weft.")):
        name = f"weft.{name}"
    return logging.getLogger(name)
