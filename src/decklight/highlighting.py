"""Syntax highlighting protocol and service for decklight.

A site generator hands each fenced code block (body plus language label)
to ``highlight()`` and splices the returned HTML into the page. The
built-in DecklightHighlighter resolves the label through the language
registry, classifies the code, and renders spans to HTML.

Protocol Alignment:
    The Highlighter protocol matches the common highlight-service shape:
    - highlight(code, language, hl_lines, show_linenos) -> str
    - supports_language(language) -> bool

Usage:
    # Built-in highlighter
    from decklight.highlighting import highlight
    html = highlight('message Foo { required int32 id = 1; }', "protobuf")

    # Manual injection
    from decklight.highlighting import set_highlighter

    def my_highlighter(code: str, language: str) -> str:
        return f'<pre class="language-{language}"><code>{code}</code></pre>'

    set_highlighter(my_highlighter)
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, Protocol

from decklight.config import get_highlight_config
from decklight.lexer import classify, classify_range
from decklight.renderers.html import HtmlRenderer
from decklight.tokens import Category, Span
from decklight.utils.logger import get_logger

if TYPE_CHECKING:
    from decklight.grammar import Grammar
    from decklight.registry import LanguageRegistry

logger = get_logger(__name__)


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Highlighters take code and language and return HTML markup with
    syntax highlighting applied.

    Thread Safety:
        Implementations must be thread-safe. The highlight() method
        may be called concurrently from multiple render threads.
    """

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Highlight code with syntax colors.

        Args:
            code: Source code to highlight
            language: Language identifier (e.g., "protobuf")
            hl_lines: 1-indexed line numbers to emphasize (optional)
            show_linenos: Include line numbers in output

        Returns:
            HTML markup with highlighting

        Contract:
            - MUST return valid HTML (never raise for bad input)
            - MUST escape HTML entities in code
            - MUST use CSS classes (not inline styles)
            - SHOULD fall back to plain text for unknown languages
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if highlighter supports the given language.

        Contract:
            - MUST NOT raise exceptions
            - SHOULD handle common aliases (proto -> protobuf)
        """
        ...


# Support for simple callable-based highlighters
SimpleHighlighter = Callable[[str, str], str]


class DecklightHighlighter:
    """Registry-backed highlighter implementing the Highlighter protocol.

    Also serves as a range delegate: ``tokenize_range`` classifies a slice
    of a larger buffer without copying it.

    Thread Safety:
        Stateless apart from the immutable registry. Safe to share.
    """

    __slots__ = ("_registry",)

    def __init__(self, registry: LanguageRegistry | None = None) -> None:
        """Initialize highlighter.

        Args:
            registry: Language registry to use. When None, the registry from
                the active HighlightConfig (or the default registry) is
                looked up on every call.
        """
        self._registry = registry

    def _get_registry(self) -> LanguageRegistry:
        if self._registry is not None:
            return self._registry
        config_registry = get_highlight_config().registry
        if config_registry is not None:
            return config_registry
        from decklight.registry import create_default_registry

        return create_default_registry()

    def resolve(self, language: str | None) -> Grammar | None:
        """Look up the grammar for a language name or alias."""
        return self._get_registry().get(language)

    def supports_language(self, language: str) -> bool:
        return self.resolve(language) is not None

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        config = get_highlight_config()
        if config.tab_size:
            code = code.expandtabs(config.tab_size)

        grammar = self.resolve(language)
        spans: Iterator[Span] | list[Span]
        if grammar is None:
            logger.debug("No grammar for language %r; rendering as plain text", language)
            spans = [Span(Category.PLAIN, code, 0, len(code))] if code else []
        else:
            spans = classify(code, grammar)

        return HtmlRenderer().render_block(
            spans,
            language,
            hl_lines=hl_lines,
            show_linenos=show_linenos,
        )

    def tokenize_range(
        self,
        source: str,
        start: int,
        end: int,
        language: str,
    ) -> Iterator[Span]:
        """Classify source[start:end] with the grammar for language.

        Unknown languages yield a single plain span for the range.

        Complexity: O(end - start)
        """
        grammar = self.resolve(language)
        if grammar is not None:
            return classify_range(source, start, end, grammar)
        end = min(end, len(source))
        if start >= end:
            return iter(())
        return iter((Span(Category.PLAIN, source[start:end], start, end),))


# Global highlighter (None = built-in DecklightHighlighter)
_highlighter: Highlighter | SimpleHighlighter | None = None
_default_highlighter: DecklightHighlighter = DecklightHighlighter()


def set_highlighter(highlighter: Highlighter | SimpleHighlighter | None) -> None:
    """Set the global syntax highlighter.

    Args:
        highlighter: A Highlighter protocol implementation, or a simple
            function that takes (code, language) and returns HTML.
            Pass None to restore the built-in highlighter.
    """
    global _highlighter
    _highlighter = highlighter


def get_highlighter() -> Highlighter | SimpleHighlighter:
    """Get the current highlighter instance.

    Returns:
        The configured highlighter, or the built-in DecklightHighlighter.
    """
    if _highlighter is None:
        return _default_highlighter
    return _highlighter


def highlight(
    code: str,
    language: str,
    *,
    hl_lines: list[int] | None = None,
    show_linenos: bool = False,
) -> str:
    """Highlight code using the configured highlighter.

    Args:
        code: Source code to highlight
        language: Language identifier
        hl_lines: 1-indexed line numbers to emphasize (optional)
        show_linenos: Include line numbers in output

    Returns:
        HTML markup (highlighted if the language is known, plain otherwise)
    """
    highlighter = get_highlighter()

    # Check if it's the full protocol or a simple callable
    if hasattr(highlighter, "highlight") and callable(highlighter.highlight):
        return highlighter.highlight(
            code, language, hl_lines=hl_lines, show_linenos=show_linenos
        )
    return highlighter(code, language)


def supports_language(language: str) -> bool:
    """Check whether the configured highlighter knows the language.

    Simple callable highlighters are assumed to accept any language.
    """
    highlighter = get_highlighter()
    check = getattr(highlighter, "supports_language", None)
    if check is None:
        return True
    return bool(check(language))
