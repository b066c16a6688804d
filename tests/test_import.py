"""Verify package imports work correctly."""


def test_import_decklight() -> None:
    """Test that decklight can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import decklight

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert decklight.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from decklight import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_grammar_name_export() -> None:
    """The grammar name and classify function are exported together."""
    import decklight

    assert decklight.name == "protobuf"
    assert callable(decklight.classify)


def test_all_exports_resolve() -> None:
    """Every name in __all__ is importable."""
    import decklight

    for name in decklight.__all__:
        assert hasattr(decklight, name), name


def test_submodules_import_in_any_order() -> None:
    """Grammar and lexer modules do not depend on import order."""
    import importlib

    for module in (
        "decklight.grammar",
        "decklight.lexer",
        "decklight.lexer.matchers",
        "decklight.registry",
        "decklight.highlighting",
        "decklight.renderers.html",
    ):
        assert importlib.import_module(module)
