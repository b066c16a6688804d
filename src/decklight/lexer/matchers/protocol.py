"""Matcher protocol for the classifier's ordered rule chain.

A matcher inspects the source at a cursor position and either claims a
token there or declines. Matchers never move the cursor themselves; the
lexer advances past whatever span was returned.

Thread Safety:
Matchers must be stateless. A single instance is shared by every Grammar
that lists it and may be called concurrently from many threads.

Example:
    >>> class HashMatcher:
    ...     def try_match(self, source, pos, end):
    ...         if source[pos] == "#":
    ...             return Span(Category.PLAIN, "#", pos, pos + 1)
    ...         return None
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from decklight.tokens import Span


@runtime_checkable
class Matcher(Protocol):
    """Protocol for structural token matchers.

    Thread Safety:
        Implementations must be stateless. Multiple threads may call the
        same matcher instance concurrently.
    """

    def try_match(self, source: str, pos: int, end: int) -> Span | None:
        """Try to match a token starting at pos.

        Args:
            source: The complete source buffer (read-only)
            pos: Cursor position, always < end
            end: Exclusive upper bound; matches must not extend past it

        Returns:
            Span starting at pos if this matcher claims the position,
            None otherwise.

        Contract:
            - MUST NOT raise for any input
            - A returned span MUST be non-empty, start at pos and stop
              at or before end; the lexer ignores spans that do not

        A matcher may set ``tracks_failures = True`` and accept a
        keyword-only ``horizons`` dict, which the lexer creates fresh for
        each tokenize call (see QuotedStringMatcher).
        """
        ...
