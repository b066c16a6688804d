"""Longest-match classifier with O(n) performance.

Scans left to right. At each cursor position the matcher chain is tried
in priority order (words, then the grammar's structural matchers). A
match is emitted as its own span; anything else accumulates into a plain
run that is flushed as a single span when the next classified token
begins or the input ends.

Guarantees:
- Spans are contiguous and non-overlapping, in source order
- Concatenating span texts reproduces the input exactly
- Every step advances the cursor, so the scan always terminates
  (spans that are empty or fall outside [pos, end) count as no match)

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; the grammar is immutable and shared.

"""

from __future__ import annotations

from collections.abc import Iterator
from functools import partial
from typing import TYPE_CHECKING

from decklight.lexer.matchers import Matcher, WordMatcher
from decklight.tokens import Category, Span
from decklight.utils.logger import get_logger

if TYPE_CHECKING:
    from decklight.grammar import Grammar

logger = get_logger(__name__)


class Lexer:
    """Classify source text into highlight spans.

    Usage:
        >>> lexer = Lexer("required int32 x")
        >>> for span in lexer.tokenize():
        ...     print(span)
        Span(KEYWORD, 'required', 0:8)
        Span(PLAIN, ' ', 8:9)
        Span(LITERAL, 'int32', 9:14)
        Span(PLAIN, ' x', 14:16)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_start",
        "_end",
        "_grammar",
        "_matchers",
    )

    def __init__(
        self,
        source: str,
        grammar: Grammar | None = None,
        *,
        start: int = 0,
        end: int | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Source text to classify
            grammar: Rules to apply (defaults to the protobuf grammar)
            start: Offset where classification begins
            end: Offset where classification stops (default: end of source)
        """
        if grammar is None:
            from decklight.grammar import PROTOBUF

            grammar = PROTOBUF

        source_len = len(source)
        if end is None or end > source_len:
            end = source_len
        start = max(0, min(start, end))

        self._source = source
        self._start = start
        self._end = end
        self._grammar = grammar
        self._matchers: tuple[Matcher, ...] = (
            WordMatcher(grammar.keywords, grammar.literals),
            *grammar.matchers,
        )

    @property
    def grammar(self) -> Grammar:
        return self._grammar

    def tokenize(self) -> Iterator[Span]:
        """Classify the source into a span stream.

        Yields:
            Span objects one at a time, covering [start, end) exactly

        Complexity: O(n) where n = end - start. Matchers that set
        ``tracks_failures`` get a per-call ``horizons`` dict so a failed
        scan is never repeated over the same stretch of input.
        Memory: O(1) iterator (spans yielded, not accumulated)
        """
        source = self._source
        end = self._end
        pos = self._start
        plain_start = pos
        # Per-call memo state keeps the shared matchers stateless
        calls = tuple(
            partial(matcher.try_match, horizons={})
            if getattr(matcher, "tracks_failures", False)
            else matcher.try_match
            for matcher in self._matchers
        )

        while pos < end:
            span = None
            for try_match in calls:
                span = try_match(source, pos, end)
                if span is not None:
                    break

            if span is not None and not (span.start_offset == pos < span.end_offset <= end):
                # A span must be non-empty and lie within [pos, end)
                logger.debug("Ignoring malformed span %r at offset %d", span, pos)
                span = None

            if span is None:
                # No rule claims this character
                pos += 1
                continue

            if span.category is Category.PLAIN:
                # Unknown word: extend the current plain run
                pos = span.end_offset
                continue

            if plain_start < pos:
                yield Span(Category.PLAIN, source[plain_start:pos], plain_start, pos)
            yield span
            pos = span.end_offset
            plain_start = pos

        if plain_start < end:
            yield Span(Category.PLAIN, source[plain_start:end], plain_start, end)

    def __iter__(self) -> Iterator[Span]:
        return self.tokenize()
