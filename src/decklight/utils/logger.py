"""Minimal logging utilities for decklight.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from decklight.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Building language registry")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "decklight." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'decklight.mymodule'
    """
    if not (name == "decklight" or name.startswith("decklight.")):
        name = f"decklight.{name}"
    return logging.getLogger(name)
