"""Numeric literal matcher."""

from __future__ import annotations

from decklight.tokens import Category, Span, is_word_char

# ASCII decimal digits only; "²".isdigit() is True but is not a numeral here
DIGITS = frozenset("0123456789")


def _scan_digits(source: str, i: int, end: int) -> int:
    """Return the position after a run of digits starting at i."""
    while i < end and source[i] in DIGITS:
        i += 1
    return i


class NumberMatcher:
    """Match integer and decimal literals with an optional exponent.

    Shape: ``[+-]? digits ( "." digits )? ( [eE] [+-]? digits )?``

    A number must stand on its own: it may not start or end inside a word.
    So ``-5`` in ``x = -5`` is a number, ``a-5`` yields a plain ``-``
    followed by ``5``, and ``42abc`` or ``1_000`` stay plain. A trailing
    ``.`` without digits is left for the next scan step.
    """

    __slots__ = ()

    def try_match(self, source: str, pos: int, end: int) -> Span | None:
        if pos > 0 and is_word_char(source[pos - 1]):
            return None

        i = pos
        if source[i] in "+-":
            i += 1
        if i >= end or source[i] not in DIGITS:
            return None
        i = _scan_digits(source, i, end)

        # Fraction
        if i + 1 < end and source[i] == "." and source[i + 1] in DIGITS:
            i = _scan_digits(source, i + 1, end)

        # Exponent
        if i < end and source[i] in "eE":
            j = i + 1
            if j < end and source[j] in "+-":
                j += 1
            if j < end and source[j] in DIGITS:
                i = _scan_digits(source, j, end)

        if i < end and is_word_char(source[i]):
            return None

        return Span(Category.NUMBER, source[pos:i], pos, i)

    def __repr__(self) -> str:
        return "NumberMatcher()"
