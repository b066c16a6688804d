"""Text processing utilities for decklight.

Example:
    >>> from decklight.utils.text import escape_html
    >>> escape_html('"hi" & <bye>')
    '&quot;hi&quot; &amp; &lt;bye&gt;'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters for element content and attributes.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text

    Examples:
        >>> escape_html("<script>alert('xss')</script>")
        '&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;'
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)
