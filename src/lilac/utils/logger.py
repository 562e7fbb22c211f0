"""Minimal logging utilities for Lilac.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from lilac.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Rendering samples")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "lilac." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'lilac.mymodule'
    """
    if not (name == "lilac" or name.startswith("lilac.")):
        name = f"lilac.{name}"
    return logging.getLogger(name)
