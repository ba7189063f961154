"""Minimal logging utilities for socialscan.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from socialscan.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning message")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "socialscan." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'socialscan.mymodule'
    """
    if not (name == "socialscan" or name.startswith("socialscan.")):
        name = f"socialscan.{name}"
    return logging.getLogger(name)
