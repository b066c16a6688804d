"""Quoted string matcher."""

from __future__ import annotations

from typing import ClassVar

from decklight.tokens import Category, Span


class QuotedStringMatcher:
    """Match a single-line quoted string with backslash escapes.

    The span includes both delimiters. A backslash escapes whatever
    character follows it, including a newline. An unescaped newline or the
    end of input before the closing quote means no match: the lexer then
    treats the opening quote as plain text and resumes on the next
    character.

    Failure horizons:
        When a scan for quote ``q`` fails at offset ``k``, every ``q``
        between the opening quote and ``k`` was consumed as an escaped
        character. A scan starting at any of them resumes with the same
        escape alignment and fails at ``k`` too. Passing a ``horizons``
        dict (one per tokenize call) records ``k`` per quote character so
        those scans are rejected without rereading the line, which keeps
        classification linear.

    Attributes:
        quotes: Characters that open (and close) a string
    """

    __slots__ = ("quotes",)

    # The lexer hands this matcher a fresh horizons dict per tokenize call
    tracks_failures: ClassVar[bool] = True

    def __init__(self, quotes: str = "\"'") -> None:
        self.quotes = frozenset(quotes)

    def try_match(
        self,
        source: str,
        pos: int,
        end: int,
        *,
        horizons: dict[str, int] | None = None,
    ) -> Span | None:
        quote = source[pos]
        if quote not in self.quotes:
            return None
        if horizons is not None and pos < horizons.get(quote, -1):
            return None

        i = pos + 1
        while i < end:
            ch = source[i]
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                return Span(Category.STRING, source[pos : i + 1], pos, i + 1)
            if ch == "\n":
                break
            i += 1

        # Unterminated
        if horizons is not None:
            horizons[quote] = i
        return None

    def __repr__(self) -> str:
        return f"QuotedStringMatcher({''.join(sorted(self.quotes))!r})"
