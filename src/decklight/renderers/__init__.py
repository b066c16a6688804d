"""decklight renderers.

Renderers turn classified spans into presentation markup.

Available Renderers:
- HtmlRenderer: Renders spans to HTML using StringBuilder pattern

Thread Safety:
All renderers use StringBuilder local to each render call.
Safe for concurrent use from multiple threads.

"""

from decklight.renderers.html import HtmlRenderer, render_spans, split_lines

__all__ = ["HtmlRenderer", "render_spans", "split_lines"]
