"""Tests for the HTML span renderer."""

import pytest

from decklight import (
    HighlightConfig,
    HtmlRenderer,
    RenderError,
    classify,
    highlight_config_context,
    render_spans,
)
from decklight.renderers import split_lines
from decklight.tokens import Category, Span


class TestRenderSpans:
    """Fragment rendering."""

    def test_classified_spans_wrapped(self) -> None:
        html = render_spans(classify("required int32 x"))
        assert html == (
            '<span class="keyword">required</span> <span class="literal">int32</span> x'
        )

    def test_all_categories(self) -> None:
        html = render_spans(classify('optional string s = "a"; x = 1'))
        assert html == (
            '<span class="keyword">optional</span> '
            '<span class="literal">string</span> s = '
            '<span class="string">&quot;a&quot;</span>; x = '
            '<span class="number">1</span>'
        )

    def test_html_is_escaped(self) -> None:
        html = render_spans(classify('x = "<b>" & <i>'))
        assert html == 'x = <span class="string">&quot;&lt;b&gt;&quot;</span> &amp; &lt;i&gt;'

    def test_empty_input(self) -> None:
        assert render_spans(classify("")) == ""

    def test_wrap_plain(self) -> None:
        html = HtmlRenderer(wrap_plain=True).render(classify("message Foo"))
        assert html == '<span class="keyword">message</span><span class="plain"> Foo</span>'

    def test_class_prefix(self) -> None:
        html = HtmlRenderer(class_prefix="hl-").render(classify("message"))
        assert html == '<span class="hl-keyword">message</span>'

    def test_options_default_from_config(self) -> None:
        with highlight_config_context(HighlightConfig(class_prefix="c-", wrap_plain=True)):
            html = render_spans(classify("int32 x"))
        assert html == '<span class="c-literal">int32</span><span class="c-plain"> x</span>'

    def test_overlapping_spans_rejected(self) -> None:
        spans = [Span(Category.PLAIN, "ab", 0, 2), Span(Category.PLAIN, "b", 1, 2)]
        with pytest.raises(RenderError, match="overlaps"):
            render_spans(spans)


class TestSplitLines:
    """Splitting spans at line boundaries."""

    def test_plain_span_split(self) -> None:
        lines = split_lines([Span(Category.PLAIN, "a\n\nb", 0, 4)])
        assert lines == [
            [Span(Category.PLAIN, "a", 0, 1)],
            [],
            [Span(Category.PLAIN, "b", 3, 4)],
        ]

    def test_line_count_matches_newlines(self) -> None:
        source = "message A {\n  required int32 x = 1;\n}\n"
        assert len(split_lines(classify(source))) == source.count("\n") + 1

    def test_categories_preserved(self) -> None:
        source = "message\nint32"
        lines = split_lines(classify(source))
        assert [[s.category for s in line] for line in lines] == [
            [Category.KEYWORD],
            [Category.LITERAL],
        ]

    def test_empty(self) -> None:
        assert split_lines([]) == [[]]


class TestRenderBlock:
    """Whole code block rendering."""

    SOURCE = "message A\nrequired int32 x = 1;\n"

    def test_plain_block(self) -> None:
        html = HtmlRenderer().render_block(classify(self.SOURCE), "protobuf")
        assert html == (
            '<pre><code class="language-protobuf">'
            '<span class="keyword">message</span> A\n'
            '<span class="keyword">required</span> <span class="literal">int32</span> x = '
            '<span class="number">1</span>;\n'
            "</code></pre>"
        )

    def test_without_language(self) -> None:
        html = HtmlRenderer().render_block(classify("x"))
        assert html == "<pre><code>x</code></pre>"

    def test_line_numbers(self) -> None:
        html = HtmlRenderer().render_block(classify(self.SOURCE), "protobuf", show_linenos=True)
        assert html == (
            '<pre><code class="language-protobuf">'
            '<span class="lineno">1</span><span class="keyword">message</span> A\n'
            '<span class="lineno">2</span><span class="keyword">required</span> '
            '<span class="literal">int32</span> x = <span class="number">1</span>;\n'
            "</code></pre>"
        )

    def test_highlighted_lines(self) -> None:
        html = HtmlRenderer().render_block(classify(self.SOURCE), "protobuf", hl_lines=[2])
        assert html == (
            '<pre><code class="language-protobuf">'
            '<span class="keyword">message</span> A\n'
            '<span class="hll"><span class="keyword">required</span> '
            '<span class="literal">int32</span> x = <span class="number">1</span>;</span>\n'
            "</code></pre>"
        )

    def test_language_is_escaped(self) -> None:
        html = HtmlRenderer().render_block([], 'x"><script>')
        assert html == '<pre><code class="language-x&quot;&gt;&lt;script&gt;"></code></pre>'

    def test_out_of_range_hl_lines_ignored(self) -> None:
        html = HtmlRenderer().render_block(classify("message"), "protobuf", hl_lines=[0, 5])
        assert 'class="hll"' not in html
