"""HTML renderer for classified spans using StringBuilder pattern.

Turns a span stream into markup: classified spans become
``<span class="{prefix}{category}">text</span>``, plain spans become bare
escaped text unless ``wrap_plain`` is set.

Thread Safety:
All per-render state is local to each call. Multiple threads can safely
share a single HtmlRenderer instance and render concurrently.

Line Handling:
Block rendering first splits spans at newlines so that no element ever
crosses a line boundary. Line numbers and highlighted lines then wrap
whole lines without breaking the markup nesting.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable

from decklight.config import get_highlight_config
from decklight.errors import RenderError
from decklight.stringbuilder import StringBuilder
from decklight.tokens import Category, Span
from decklight.utils.text import escape_html


def split_lines(spans: Iterable[Span]) -> list[list[Span]]:
    """Split spans at newlines so no span crosses a line boundary.

    The newline characters themselves are dropped; joining the rendered
    lines with "\\n" restores them. The result always has one more entry
    than the number of newlines in the input.

    Example:
        >>> [[s.text for s in line] for line in split_lines(classify("a\\nmessage"))]
        [['a'], ['message']]
    """
    lines: list[list[Span]] = [[]]
    for span in spans:
        offset = span.start_offset
        for idx, part in enumerate(span.text.split("\n")):
            if idx:
                lines.append([])
                offset += 1
            if part:
                lines[-1].append(Span(span.category, part, offset, offset + len(part)))
            offset += len(part)
    return lines


class HtmlRenderer:
    """Render spans to HTML.

    Options default to the active HighlightConfig when not given.

    Usage:
        >>> HtmlRenderer().render(classify("required int32 x"))
        '<span class="keyword">required</span> <span class="literal">int32</span> x'

    """

    __slots__ = ("_class_prefix", "_wrap_plain")

    def __init__(
        self,
        *,
        class_prefix: str | None = None,
        wrap_plain: bool | None = None,
    ) -> None:
        config = get_highlight_config()
        self._class_prefix = config.class_prefix if class_prefix is None else class_prefix
        self._wrap_plain = config.wrap_plain if wrap_plain is None else wrap_plain

    def render(self, spans: Iterable[Span]) -> str:
        """Render spans to an HTML fragment.

        Raises:
            RenderError: If spans overlap or run backwards.
        """
        sb = StringBuilder()
        self._render_spans(spans, sb)
        return sb.build()

    def render_block(
        self,
        spans: Iterable[Span],
        language: str | None = None,
        *,
        hl_lines: Collection[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Render spans as a complete ``<pre><code>`` block.

        Args:
            spans: Span stream for the whole code block
            language: Language name for the ``language-*`` class
            hl_lines: 1-indexed line numbers wrapped in ``<span class="hll">``
            show_linenos: Prefix each line with ``<span class="lineno">N</span>``

        Returns:
            HTML block markup
        """
        lines = split_lines(spans)
        # A trailing newline does not start a numbered line
        last_numbered = len(lines) - 1 if len(lines) > 1 and not lines[-1] else len(lines)
        hl = frozenset(hl_lines) if hl_lines else frozenset()
        prefix = self._class_prefix

        sb = StringBuilder()
        lang_class = f' class="language-{escape_html(language)}"' if language else ""
        sb.append(f"<pre><code{lang_class}>")

        for idx, line in enumerate(lines):
            lineno = idx + 1
            if idx:
                sb.append("\n")
            if lineno > last_numbered:
                continue
            highlighted = lineno in hl
            if highlighted:
                sb.append(f'<span class="{prefix}hll">')
            if show_linenos:
                sb.append(f'<span class="{prefix}lineno">{lineno}</span>')
            self._render_spans(line, sb)
            if highlighted:
                sb.append("</span>")

        sb.append("</code></pre>")
        return sb.build()

    def _render_spans(self, spans: Iterable[Span], sb: StringBuilder) -> None:
        prefix = self._class_prefix
        wrap_plain = self._wrap_plain
        prev_end = -1
        for span in spans:
            if span.start_offset < prev_end:
                raise RenderError(
                    f"Span at offset {span.start_offset} overlaps previous span ending at {prev_end}"
                )
            prev_end = span.end_offset

            text = escape_html(span.text)
            if span.category is Category.PLAIN and not wrap_plain:
                sb.append(text)
            else:
                sb.append(f'<span class="{prefix}{span.category.value}">')
                sb.append(text)
                sb.append("</span>")


def render_spans(spans: Iterable[Span]) -> str:
    """Render spans to an HTML fragment using the active HighlightConfig."""
    return HtmlRenderer().render(spans)
