"""Minimal logging utilities for Kara.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from kara.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "kara." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'kara.mymodule'
    """
    if not (name == "kara" or name.startswith("kara.")):
        name = f"kara.{name}"
    return logging.getLogger(name)
