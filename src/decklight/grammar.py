"""Grammar definitions for the decklight classifier.

A Grammar is the declarative rule table for one language: the words that
highlight as keywords, the words that highlight as literals, and an
ordered tuple of structural matchers (strings, numbers) tried after the
word rule.

Thread Safety:
Grammar is a frozen dataclass built once at import time. Safe to share
across threads without locking.

Example:
    >>> from decklight.grammar import PROTOBUF
    >>> PROTOBUF.name
    'protobuf'
    >>> PROTOBUF.classify_word("message")
    <Category.KEYWORD: 'keyword'>
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from decklight.errors import GrammarError
from decklight.lexer.matchers import NUMBER, QUOTE_STRING, Matcher
from decklight.tokens import Category


@dataclass(frozen=True, slots=True)
class Grammar:
    """Immutable highlighting rules for one language.

    Attributes:
        name: Canonical language name used for dispatch (e.g., "protobuf")
        keywords: Words classified as KEYWORD (exact, case-sensitive)
        literals: Words classified as LITERAL (exact, case-sensitive)
        matchers: Structural matchers tried in order when no word matches
        aliases: Alternative names accepted by the language registry

    Raises:
        GrammarError: If name is empty or keywords and literals overlap.

    """

    name: str
    keywords: frozenset[str]
    literals: frozenset[str] = frozenset()
    matchers: tuple[Matcher, ...] = (QUOTE_STRING, NUMBER)
    aliases: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.name:
            raise GrammarError(self.name, "name must not be empty")

        # Accept any iterable of words; store as frozensets
        object.__setattr__(self, "keywords", frozenset(self.keywords))
        object.__setattr__(self, "literals", frozenset(self.literals))
        object.__setattr__(self, "matchers", tuple(self.matchers))
        object.__setattr__(self, "aliases", tuple(self.aliases))

        overlap = self.keywords & self.literals
        if overlap:
            words = ", ".join(sorted(overlap))
            raise GrammarError(self.name, f"words are both keyword and literal: {words}")

    def classify_word(self, word: str) -> Category:
        """Classify a complete identifier.

        Args:
            word: A whole identifier (no surrounding text)

        Returns:
            KEYWORD, LITERAL, or PLAIN for unknown words.
        """
        if word in self.keywords:
            return Category.KEYWORD
        if word in self.literals:
            return Category.LITERAL
        return Category.PLAIN

    @property
    def names(self) -> tuple[str, ...]:
        """Canonical name followed by aliases."""
        return (self.name, *self.aliases)

    @classmethod
    def from_words(
        cls,
        name: str,
        keywords: str | Iterable[str],
        literals: str | Iterable[str] = (),
        *,
        aliases: Iterable[str] = (),
    ) -> Grammar:
        """Build a grammar from space-separated word lists.

        Mirrors the compact ``keyword: 'a b c'`` style used by declarative
        highlighting rule tables.

        Example:
            >>> g = Grammar.from_words("demo", "if else", "true false")
            >>> sorted(g.keywords)
            ['else', 'if']
        """
        if isinstance(keywords, str):
            keywords = keywords.split()
        if isinstance(literals, str):
            literals = literals.split()
        return cls(
            name=name,
            keywords=frozenset(keywords),
            literals=frozenset(literals),
            aliases=tuple(aliases),
        )


PROTOBUF: Grammar = Grammar.from_words(
    "protobuf",
    keywords="message optional required repeated",
    literals="int32 int64 string boolean",
    aliases=("proto",),
)


__all__ = ["Grammar", "PROTOBUF"]
