"""ContextVar-based render configuration for Lilac.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Formatters and registries stay immutable; the few knobs that change how a
rendering pass behaves live here instead.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from lilac.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(strict_samples=True)):
        batch = load_samples(document)  # raises on the first bad entry

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        default_formatter: Formatter id used when a sample names none, and
            the fallback for ids the registry does not know
        escape_html: Escape &, < and > in the emitted fragment
        separator: String placed between fragments by get_sample_html()
        strict_samples: Raise on the first malformed sample entry instead of
            collecting it in the batch

    """

    default_formatter: str = "lavendeux"
    escape_html: bool = True
    separator: str = "\n"
    strict_samples: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({"separator": "<br>", "x": 1})
            >>> config.separator
            '<br>'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Args:
        config: RenderConfig instance to use for this context.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(escape_html=False)):
        ...     html = formatter.format("1 < 2")
        >>> # Automatically reset to previous config

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
