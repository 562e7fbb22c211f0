"""Formatter registry for id lookup and registration.

The registry maps formatter ids (names and aliases) to Formatter instances
and knows which formatter to fall back to for ids it has never heard of.

Thread Safety:
FormatterRegistry is immutable after creation. Safe to share.
Use FormatterRegistryBuilder for mutable construction.

Example:
    >>> builder = FormatterRegistryBuilder()
    >>> builder.register(LavendeuxFormatter())
    >>> builder.register(JavascriptFormatter())
    >>> registry = builder.build()
    >>> registry.resolve("unknown-lang").name
    'lavendeux'

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lilac.errors import UnknownFormatterError
from lilac.utils.logger import get_logger

if TYPE_CHECKING:
    from lilac.formatters.base import Formatter

logger = get_logger(__name__)


class FormatterRegistry:
    """Immutable registry of formatters.

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_by_name", "_default", "_formatters")

    def __init__(
        self,
        formatters: tuple[Formatter, ...],
        by_name: dict[str, Formatter],
        default: Formatter,
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use FormatterRegistryBuilder to create instances.
        """
        self._formatters = formatters
        self._by_name = by_name
        self._default = default

    def get(self, name: str) -> Formatter | None:
        """Get formatter for an id.

        Returns:
            Formatter if registered, None otherwise
        """
        return self._by_name.get(name)

    def resolve(self, name: str | None) -> Formatter:
        """Get formatter for an id, falling back to the default.

        Unknown and missing ids are not an error: samples written for a
        dialect nobody registered still render, just with default rules.
        """
        if name:
            formatter = self._by_name.get(name)
            if formatter is not None:
                return formatter
        logger.debug(
            "Unknown formatter %r, falling back to %r",
            name,
            self._default.name,
        )
        return self._default

    def require(self, name: str) -> Formatter:
        """Get formatter for an id, raising if it is not registered.

        Raises:
            UnknownFormatterError: If name is not registered
        """
        formatter = self._by_name.get(name)
        if formatter is None:
            raise UnknownFormatterError(name, self.names)
        return formatter

    def has(self, name: str) -> bool:
        """Check if a formatter id is registered."""
        return name in self._by_name

    @property
    def default(self) -> Formatter:
        """Formatter used when resolve() misses."""
        return self._default

    @property
    def names(self) -> frozenset[str]:
        """All registered ids, aliases included."""
        return frozenset(self._by_name.keys())

    @property
    def formatters(self) -> tuple[Formatter, ...]:
        """Registered formatters in registration order."""
        return self._formatters

    def __contains__(self, name: str) -> bool:
        """Support 'name in registry' syntax."""
        return self.has(name)

    def __len__(self) -> int:
        """Number of registered formatters (aliases not counted)."""
        return len(self._formatters)


class FormatterRegistryBuilder:
    """Mutable builder for FormatterRegistry.

    Example:
            >>> registry = (
            ...     FormatterRegistryBuilder()
            ...     .register(LavendeuxFormatter())
            ...     .register(JavascriptFormatter())
            ...     .set_default("javascript")
            ...     .build()
            ... )

    """

    __slots__ = ("_by_name", "_default_name", "_formatters")

    def __init__(self) -> None:
        self._formatters: list[Formatter] = []
        self._by_name: dict[str, Formatter] = {}
        self._default_name: str | None = None

    def register(self, formatter: Formatter) -> FormatterRegistryBuilder:
        """Register a formatter under its name and aliases.

        Returns:
            Self for chaining

        Raises:
            ValueError: If any of its ids is already taken
        """
        for name in (formatter.name, *formatter.aliases):
            if name in self._by_name:
                existing = self._by_name[name]
                msg = f"Formatter id '{name}' already registered by {existing.name!r}"
                raise ValueError(msg)

        for name in (formatter.name, *formatter.aliases):
            self._by_name[name] = formatter
        self._formatters.append(formatter)
        return self

    def set_default(self, name: str) -> FormatterRegistryBuilder:
        """Choose the fallback formatter by id (checked in build())."""
        self._default_name = name
        return self

    def build(self) -> FormatterRegistry:
        """Build immutable registry.

        The first registered formatter is the default unless set_default()
        named another one.

        Raises:
            ValueError: If nothing is registered or the default is unknown
        """
        if not self._formatters:
            raise ValueError("Cannot build a FormatterRegistry without formatters")

        if self._default_name is None:
            default = self._formatters[0]
        else:
            found = self._by_name.get(self._default_name)
            if found is None:
                msg = f"Default formatter '{self._default_name}' is not registered"
                raise ValueError(msg)
            default = found

        return FormatterRegistry(
            formatters=tuple(self._formatters),
            by_name=dict(self._by_name),
            default=default,
        )


def create_default_registry(default: str | None = None) -> FormatterRegistry:
    """Create a registry with the built-in formatters.

    Args:
        default: Fallback formatter id; None uses the active RenderConfig

    Returns:
        Registry with lavendeux (alias "lav") and javascript (alias "js")
    """
    from lilac.config import get_render_config
    from lilac.formatters.javascript import JavascriptFormatter
    from lilac.formatters.lavendeux import LavendeuxFormatter

    return (
        FormatterRegistryBuilder()
        .register(LavendeuxFormatter())
        .register(JavascriptFormatter())
        .set_default(default or get_render_config().default_formatter)
        .build()
    )


# Cached registries keyed by fallback id; safe to share since they are immutable
_DEFAULT_REGISTRIES: dict[str, FormatterRegistry] = {}


def get_default_registry(default: str | None = None) -> FormatterRegistry:
    """Get the built-in registry for a fallback id (cached).

    Used by highlight() and render_samples() when no registry is passed, so
    repeated calls do not rebuild formatters.

    Args:
        default: Fallback formatter id; None uses the active RenderConfig

    Thread Safety:
        Two threads may both build on a miss; either result is equivalent.
    """
    from lilac.config import get_render_config

    key = default or get_render_config().default_formatter
    registry = _DEFAULT_REGISTRIES.get(key)
    if registry is None:
        registry = create_default_registry(key)
        _DEFAULT_REGISTRIES[key] = registry
    return registry


__all__ = [
    "FormatterRegistry",
    "FormatterRegistryBuilder",
    "create_default_registry",
    "get_default_registry",
]
