"""ContextVar-based highlight configuration for decklight.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Renderers and the highlighter service read the active config at call time.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from decklight.config import HighlightConfig, highlight_config_context
    from decklight import highlight

    with highlight_config_context(HighlightConfig(class_prefix="hl-")):
        html = highlight('message Foo {}', "protobuf")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decklight.registry import LanguageRegistry


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable highlight configuration.

    Attributes:
        class_prefix: Prepended to every category CSS class ("hl-" -> "hl-keyword")
        wrap_plain: Wrap plain spans in <span class="plain"> as well
        registry: Language registry for name lookup (uses defaults if None)
        tab_size: Expand tabs to this width before classification (None = keep)

    """

    class_prefix: str = ""
    wrap_plain: bool = False
    registry: "LanguageRegistry | None" = None
    tab_size: int | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "HighlightConfig":
        """Create HighlightConfig from dictionary.

        Only includes keys that are valid HighlightConfig fields; unknown keys
        are silently ignored, so a site generator can pass its whole
        highlighting section through.

        Example:
            >>> config = HighlightConfig.from_dict({
            ...     "class_prefix": "hl-",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.class_prefix
            'hl-'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_highlight_config() -> HighlightConfig:
    """Get current highlight configuration (thread-local)."""
    return _highlight_config.get()


def set_highlight_config(config: HighlightConfig) -> None:
    """Set highlight configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _highlight_config.set(config)


def reset_highlight_config() -> None:
    """Reset to default configuration."""
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def highlight_config_context(config: HighlightConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with highlight_config_context(HighlightConfig(wrap_plain=True)):
        ...     get_highlight_config().wrap_plain
        True
        >>> get_highlight_config().wrap_plain
        False

    """
    previous = _highlight_config.get()
    _highlight_config.set(config)
    try:
        yield
    finally:
        _highlight_config.set(previous)


__all__ = [
    "HighlightConfig",
    "get_highlight_config",
    "set_highlight_config",
    "reset_highlight_config",
    "highlight_config_context",
]
