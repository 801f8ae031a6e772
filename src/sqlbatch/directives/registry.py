"""Directive registry for handler lookup and registration.

The registry maps directive names to their handlers. The lexer decides
which lines are directives; the registry decides what each one does.

Thread Safety:
DirectiveRegistry is immutable after creation. Safe to share.
Use DirectiveRegistryBuilder for mutable construction.

Example:
    >>> builder = create_registry_with_defaults()
    >>> builder.replace(AuditedIncludeDirective())
    >>> registry = builder.build()
    >>> registry.get("r")
    <AuditedIncludeDirective ...>
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sqlbatch.directives.protocol import DirectiveHandler


class DirectiveRegistry:
    """Immutable registry of directive handlers.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_by_name",)

    def __init__(self, by_name: dict[str, DirectiveHandler]) -> None:
        """Initialize registry with a pre-built mapping.

        Use DirectiveRegistryBuilder to create instances.
        """
        self._by_name = by_name

    def get(self, name: str) -> DirectiveHandler | None:
        """Get handler for a directive name (case-insensitive).

        Args:
            name: Directive name without the colon (e.g., "r", "setvar")

        Returns:
            Handler if registered, None otherwise
        """
        return self._by_name.get(name.lower())

    @property
    def names(self) -> frozenset[str]:
        """Get all registered directive names."""
        return frozenset(self._by_name.keys())

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return name.lower() in self._by_name

    def __len__(self) -> int:
        """Number of registered directive names."""
        return len(self._by_name)


class DirectiveRegistryBuilder:
    """Mutable builder for DirectiveRegistry.

    Example:
        >>> builder = DirectiveRegistryBuilder()
        >>> builder.register(SetVarDirective())
        >>> registry = builder.build()
    """

    __slots__ = ("_by_name",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._by_name: dict[str, DirectiveHandler] = {}

    def register(self, handler: DirectiveHandler) -> DirectiveRegistryBuilder:
        """Register a directive handler.

        Args:
            handler: Handler implementing DirectiveHandler protocol

        Returns:
            Self for chaining

        Raises:
            TypeError: If handler has no names
            ValueError: If a name is already registered
        """
        if not getattr(handler, "names", None):
            msg = f"Handler {type(handler).__name__} missing 'names' attribute"
            raise TypeError(msg)

        for name in handler.names:
            key = name.lower()
            if key in self._by_name:
                existing = self._by_name[key]
                msg = f"Directive '{name}' already registered by {type(existing).__name__}"
                raise ValueError(msg)

        for name in handler.names:
            self._by_name[name.lower()] = handler
        return self

    def replace(self, handler: DirectiveHandler) -> DirectiveRegistryBuilder:
        """Register a handler, overriding existing handlers for its names.

        Returns:
            Self for chaining
        """
        for name in handler.names:
            self._by_name.pop(name.lower(), None)
        return self.register(handler)

    def build(self) -> DirectiveRegistry:
        """Build immutable registry from registered handlers."""
        return DirectiveRegistry(dict(self._by_name))

    def __len__(self) -> int:
        """Number of registered names."""
        return len(self._by_name)


def create_registry_with_defaults() -> DirectiveRegistryBuilder:
    """Create a builder pre-populated with :r and :setvar."""
    from sqlbatch.directives.builtins import IncludeDirective, SetVarDirective

    builder = DirectiveRegistryBuilder()
    builder.register(IncludeDirective())
    builder.register(SetVarDirective())
    return builder


# Cached singleton; DirectiveRegistry is immutable
_DEFAULT_REGISTRY: DirectiveRegistry | None = None


def create_default_registry() -> DirectiveRegistry:
    """Get the default directive registry (cached singleton).

    Returns:
        Registry with the :r and :setvar handlers
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY
