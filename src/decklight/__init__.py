"""
decklight — Syntax highlighting for presentation-deck code blocks

Classifies source text of a protobuf-like interface-definition language
into highlight spans (keywords, literals, strings, numbers, plain text)
and renders them as HTML. Zero runtime dependencies.

Quick Start:
    >>> from decklight import classify
    >>> [(s.category.value, s.text) for s in classify("required int32 x")]
    [('keyword', 'required'), ('plain', ' '), ('literal', 'int32'), ('plain', ' x')]

    >>> from decklight import highlight
    >>> highlight("message Foo", "protobuf")
    '<pre><code class="language-protobuf"><span class="keyword">message</span> Foo</code></pre>'

Custom Languages:
    >>> from decklight import Grammar, create_registry_with_defaults
    >>> builder = create_registry_with_defaults()
    >>> _ = builder.register(Grammar.from_words("thrift", "struct service", "i32 i64"))
    >>> registry = builder.build()
"""

from decklight.config import (
    HighlightConfig,
    get_highlight_config,
    highlight_config_context,
    reset_highlight_config,
    set_highlight_config,
)
from decklight.errors import DecklightError, GrammarError, RenderError
from decklight.grammar import PROTOBUF, Grammar
from decklight.highlighting import (
    DecklightHighlighter,
    Highlighter,
    get_highlighter,
    highlight,
    set_highlighter,
    supports_language,
)
from decklight.lexer import Lexer, classify, classify_range
from decklight.registry import (
    LanguageRegistry,
    LanguageRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)
from decklight.renderers.html import HtmlRenderer, render_spans
from decklight.tokens import Category, Span

__version__ = "0.1.0"

# Grammar name used by highlighting frameworks to dispatch code blocks
name = PROTOBUF.name

__all__ = [
    # Core
    "classify",
    "classify_range",
    "Lexer",
    "Span",
    "Category",
    "Grammar",
    "PROTOBUF",
    "name",
    # Registry
    "LanguageRegistry",
    "LanguageRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    # Rendering
    "HtmlRenderer",
    "render_spans",
    "Highlighter",
    "DecklightHighlighter",
    "highlight",
    "get_highlighter",
    "set_highlighter",
    "supports_language",
    # Configuration
    "HighlightConfig",
    "get_highlight_config",
    "set_highlight_config",
    "reset_highlight_config",
    "highlight_config_context",
    # Errors
    "DecklightError",
    "GrammarError",
    "RenderError",
    # Metadata
    "__version__",
]
