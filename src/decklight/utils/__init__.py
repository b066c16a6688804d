"""Utility modules for decklight.

Provides:
- text: escape_html for markup output
- logger: get_logger for logging
"""

from decklight.utils.logger import get_logger
from decklight.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
