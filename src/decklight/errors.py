"""Exception classes for decklight.

Classification itself never raises: any text is a valid input. These
exceptions cover misconfiguration of grammars and renderers.
"""

from __future__ import annotations


class DecklightError(Exception):
    """Base exception for all decklight errors.

    Subclass this for specific error categories.
    """

    pass


class GrammarError(DecklightError):
    """Error in a grammar definition.

    Raised when a Grammar is constructed with inconsistent rules, such as
    a word listed as both keyword and literal.
    """

    def __init__(self, grammar_name: str, message: str) -> None:
        """Initialize grammar error.

        Args:
            grammar_name: Name of the offending grammar (may be empty)
            message: Description of the problem
        """
        self.grammar_name = grammar_name
        label = f"'{grammar_name}'" if grammar_name else "<unnamed>"
        super().__init__(f"Grammar {label}: {message}")


class RenderError(DecklightError):
    """Error during HTML rendering.

    Raised when a renderer receives spans it cannot turn into markup.
    """

    pass
