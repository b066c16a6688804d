"""Language registry for grammar lookup by name.

The registry maps language names and aliases (as written on fenced code
blocks, e.g. ``protobuf`` or ``proto``) to grammars. Lookup is
case-insensitive.

Thread Safety:
LanguageRegistry is immutable after creation. Safe to share.
Use LanguageRegistryBuilder for mutable construction.

Example:
    >>> builder = LanguageRegistryBuilder()
    >>> _ = builder.register(PROTOBUF)
    >>> registry = builder.build()
    >>> registry.get("proto").name
    'protobuf'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from decklight.utils.logger import get_logger

if TYPE_CHECKING:
    from decklight.grammar import Grammar

logger = get_logger(__name__)


class LanguageRegistry:
    """Immutable registry of grammars.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_grammars", "_by_name")

    def __init__(
        self,
        grammars: tuple[Grammar, ...],
        by_name: dict[str, Grammar],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use LanguageRegistryBuilder to create instances.
        """
        self._grammars = grammars
        self._by_name = by_name

    def get(self, name: str | None) -> Grammar | None:
        """Get grammar for a language name or alias.

        Args:
            name: Language name (case-insensitive, surrounding space ignored)

        Returns:
            Grammar if registered, None otherwise
        """
        if not name:
            return None
        return self._by_name.get(name.strip().lower())

    def has(self, name: str | None) -> bool:
        """Check if language name is registered."""
        return self.get(name) is not None

    @property
    def names(self) -> frozenset[str]:
        """Get all registered names and aliases."""
        return frozenset(self._by_name.keys())

    @property
    def grammars(self) -> tuple[Grammar, ...]:
        """Get all registered grammars."""
        return self._grammars

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.has(name)

    def __len__(self) -> int:
        """Number of registered names and aliases."""
        return len(self._by_name)


class LanguageRegistryBuilder:
    """Mutable builder for LanguageRegistry.

    Example:
        >>> builder = LanguageRegistryBuilder()
        >>> _ = builder.register(PROTOBUF).register(my_grammar)
        >>> registry = builder.build()
    """

    __slots__ = ("_grammars", "_by_name")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._grammars: list[Grammar] = []
        self._by_name: dict[str, Grammar] = {}

    def register(self, grammar: Grammar) -> LanguageRegistryBuilder:
        """Register a grammar under its name and aliases.

        Args:
            grammar: Grammar to register

        Returns:
            Self for chaining

        Raises:
            TypeError: If the object has no name
            ValueError: If a name or alias is already registered
        """
        if not hasattr(grammar, "name"):
            msg = f"Grammar {type(grammar).__name__} missing 'name' attribute"
            raise TypeError(msg)

        keys = [n.strip().lower() for n in (grammar.name, *getattr(grammar, "aliases", ()))]
        for key in keys:
            if key in self._by_name:
                existing = self._by_name[key]
                msg = f"Language '{key}' already registered by grammar '{existing.name}'"
                raise ValueError(msg)

        for key in keys:
            self._by_name[key] = grammar
        self._grammars.append(grammar)
        return self

    def register_all(self, grammars: list[Grammar]) -> LanguageRegistryBuilder:
        """Register multiple grammars.

        Returns:
            Self for chaining
        """
        for grammar in grammars:
            self.register(grammar)
        return self

    def build(self) -> LanguageRegistry:
        """Build immutable registry from registered grammars."""
        logger.debug("Building language registry with names %s", sorted(self._by_name))
        return LanguageRegistry(
            grammars=tuple(self._grammars),
            by_name=dict(self._by_name),
        )

    def __len__(self) -> int:
        """Number of registered grammars."""
        return len(self._grammars)


# Cached singleton, thread-safe since LanguageRegistry is immutable
_DEFAULT_REGISTRY: LanguageRegistry | None = None


def create_registry_with_defaults() -> LanguageRegistryBuilder:
    """Create a builder pre-populated with the built-in grammars.

    Use this to add your own languages alongside the defaults:

        >>> builder = create_registry_with_defaults()
        >>> _ = builder.register(Grammar.from_words("thrift", "struct service"))
        >>> registry = builder.build()
    """
    from decklight.grammar import PROTOBUF

    builder = LanguageRegistryBuilder()
    builder.register(PROTOBUF)
    return builder


def create_default_registry() -> LanguageRegistry:
    """Get the default language registry (cached singleton).

    Returns:
        Registry with the built-in grammars (protobuf, alias proto).
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY


__all__ = [
    "LanguageRegistry",
    "LanguageRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
]
