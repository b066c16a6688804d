"""Token matchers for the decklight classifier.

Each matcher is a small stateless object that decides whether a token of
its kind starts at the cursor. The lexer tries them in a fixed priority
order: words first, then the grammar's structural matchers.
"""

from decklight.lexer.matchers.number import NumberMatcher
from decklight.lexer.matchers.protocol import Matcher
from decklight.lexer.matchers.string import QuotedStringMatcher
from decklight.lexer.matchers.word import WordMatcher

# Shared stateless instances for built-in grammars
QUOTE_STRING = QuotedStringMatcher()
NUMBER = NumberMatcher()

__all__ = [
    "NUMBER",
    "QUOTE_STRING",
    "Matcher",
    "NumberMatcher",
    "QuotedStringMatcher",
    "WordMatcher",
]
