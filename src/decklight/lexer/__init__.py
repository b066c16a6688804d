"""Rule-driven classifier for decklight.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, classify, classify_range
├── core.py              # Lexer class (scan loop + plain-run coalescing)
└── matchers/            # Stateless token matchers
    ├── protocol.py      # Matcher protocol
    ├── word.py          # Identifier -> keyword / literal lookup
    ├── string.py        # Quoted strings
    └── number.py        # Numeric literals

Usage:
    >>> from decklight.lexer import classify
    >>> [s.category.value for s in classify("message Foo")]
    ['keyword', 'plain']

"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from decklight.lexer.core import Lexer

if TYPE_CHECKING:
    from decklight.grammar import Grammar
    from decklight.tokens import Span


def classify(source: str, grammar: Grammar | None = None) -> Iterator[Span]:
    """Classify source text into highlight spans.

    Each call returns a fresh, independent generator.

    Args:
        source: Text to classify (any string; never raises)
        grammar: Rules to apply (defaults to the protobuf grammar)

    Returns:
        Lazy iterator of contiguous spans covering the whole source.
    """
    return Lexer(source, grammar).tokenize()


def classify_range(
    source: str,
    start: int,
    end: int,
    grammar: Grammar | None = None,
) -> Iterator[Span]:
    """Classify source[start:end] without copying the slice.

    Span offsets are absolute positions in ``source``. Useful when a code
    block sits inside a larger document buffer.
    """
    return Lexer(source, grammar, start=start, end=end).tokenize()


__all__ = ["Lexer", "classify", "classify_range"]
