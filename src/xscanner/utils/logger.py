"""Minimal logging utilities for XScanner.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from xscanner.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Dispatching type %r", "word")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "xscanner." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'xscanner.mymodule'
    """
    if not (name == "xscanner" or name.startswith("xscanner.")):
        name = f"xscanner.{name}"
    return logging.getLogger(name)
