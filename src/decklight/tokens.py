"""Span and Category definitions for the decklight classifier.

The classifier produces a stream of Span objects that renderers consume.
Each Span carries a highlight category, the covered text, and its offsets
in the source buffer.

Thread Safety:
Span is frozen (immutable) and safe to share across threads.
Category is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Highlight categories produced by the classifier.

    The value doubles as the CSS class name used by the HTML renderer.

    """

    KEYWORD = "keyword"  # message, optional, ...
    LITERAL = "literal"  # int32, string, ...
    STRING = "string"  # "quoted" or 'quoted'
    NUMBER = "number"  # 42, -1.5e3
    PLAIN = "plain"  # everything else


@dataclass(frozen=True, slots=True)
class Span:
    """A classified, contiguous substring of the source.

    Attributes:
        category: Highlight category
        text: Covered source text (never empty)
        start_offset: Absolute start position in source (inclusive)
        end_offset: Absolute end position in source (exclusive)

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.

    """

    category: Category
    text: str
    start_offset: int
    end_offset: int

    def __len__(self) -> int:
        return self.end_offset - self.start_offset

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.text
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Span({self.category.name}, {val!r}, {self.start_offset}:{self.end_offset})"


def is_word_start(ch: str) -> bool:
    """Return True if ch can begin an identifier run."""
    return ch.isalpha() or ch == "_"


def is_word_char(ch: str) -> bool:
    """Return True if ch can continue an identifier run."""
    return ch.isalnum() or ch == "_"
