"""Identifier matcher: keyword and literal lookup."""

from __future__ import annotations

from decklight.tokens import Category, Span, is_word_char, is_word_start


class WordMatcher:
    """Match a maximal identifier run and classify it by exact lookup.

    Runs start at a letter or underscore and continue through letters,
    digits and underscores, so ``int32`` is one word and ``x42`` never
    yields a number. A run never starts inside a longer word: in
    ``1message`` the ``message`` part is not a keyword. Words found in
    neither set come back as PLAIN spans, which the lexer folds into the
    surrounding plain run.
    """

    __slots__ = ("_keywords", "_literals")

    def __init__(self, keywords: frozenset[str], literals: frozenset[str]) -> None:
        self._keywords = keywords
        self._literals = literals

    def try_match(self, source: str, pos: int, end: int) -> Span | None:
        if not is_word_start(source[pos]):
            return None
        if pos > 0 and is_word_char(source[pos - 1]):
            return None

        i = pos + 1
        while i < end and is_word_char(source[i]):
            i += 1

        word = source[pos:i]
        if word in self._keywords:
            category = Category.KEYWORD
        elif word in self._literals:
            category = Category.LITERAL
        else:
            category = Category.PLAIN
        return Span(category, word, pos, i)
