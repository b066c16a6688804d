"""Tests for decklight utility modules."""


class TestEscapeHtml:
    """Tests for escape_html function."""

    def test_special_characters(self) -> None:
        from decklight.utils.text import escape_html

        assert escape_html("<a href=\"x\">'&'</a>") == (
            "&lt;a href=&quot;x&quot;&gt;&#x27;&amp;&#x27;&lt;/a&gt;"
        )

    def test_docstring_examples(self) -> None:
        """The usage examples in the module docstrings hold."""
        import doctest

        from decklight.utils import text

        assert doctest.testmod(text).failed == 0

    def test_empty_string(self) -> None:
        from decklight.utils.text import escape_html

        assert escape_html("") == ""

    def test_plain_text_unchanged(self) -> None:
        from decklight.utils.text import escape_html

        assert escape_html("message Foo") == "message Foo"


class TestGetLogger:
    """Tests for get_logger function."""

    def test_adds_prefix(self) -> None:
        from decklight.utils.logger import get_logger

        assert get_logger("mymodule").name == "decklight.mymodule"

    def test_keeps_existing_prefix(self) -> None:
        from decklight.utils.logger import get_logger

        assert get_logger("decklight.registry").name == "decklight.registry"
        assert get_logger("decklight").name == "decklight"


class TestStringBuilder:
    """Tests for StringBuilder."""

    def test_build(self) -> None:
        from decklight.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.append("<b>").append("").append("x").append("</b>")
        assert sb.build() == "<b>x</b>"
        assert bool(sb)

    def test_empty(self) -> None:
        from decklight.stringbuilder import StringBuilder

        sb = StringBuilder()
        assert sb.build() == ""
        assert not sb
