"""
Lilac: sample highlighting for documentation pages

Renders small code snippets (Lavendeux expressions and JavaScript extension
sources) as HTML with ``<span class="...">`` wrapped tokens. Best-effort and
cosmetic: ordered regex rules, no AST, zero runtime dependencies.

Quick Start:
    >>> from lilac import highlight
    >>> highlight("255 @hex")
    '<span class="data">255</span> <span class="decorator">@hex</span>'

    >>> # Render the bundled documentation samples
    >>> from lilac import get_sample_html, load_bundled_samples
    >>> html = get_sample_html(load_bundled_samples())

Custom Formatters:
    >>> from lilac import Formatter, FormatterRegistryBuilder, Rule
    >>> todo = Formatter("todo", [Rule.compile(r"TODO", "comment")])
    >>> registry = FormatterRegistryBuilder().register(todo).build()
"""

from lilac.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from lilac.encoder import MatchSpan, encode, scan
from lilac.errors import LilacError, RuleError, SampleError, UnknownFormatterError
from lilac.formatters import (
    Formatter,
    FormatterRegistry,
    FormatterRegistryBuilder,
    JavascriptFormatter,
    LavendeuxFormatter,
    create_default_registry,
    get_default_registry,
)
from lilac.rules import Rule, RuleKind
from lilac.samples import (
    Sample,
    SampleBatch,
    get_example_sample,
    get_sample_html,
    load_bundled_samples,
    load_samples,
    load_samples_file,
    render_samples,
)

__version__ = "0.1.0"


def highlight(
    text: str,
    formatter: str | None = None,
    *,
    registry: FormatterRegistry | None = None,
) -> str:
    """Highlight one snippet.

    Args:
        text: Raw source text
        formatter: Formatter id; unknown or None ids use the registry default
        registry: Formatter registry (uses the cached built-in one if None)

    Returns:
        HTML fragment
    """
    if registry is None:
        registry = get_default_registry()
    return registry.resolve(formatter).format(text)


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "highlight",
    "encode",
    "scan",
    "MatchSpan",
    # Rules and formatters
    "Rule",
    "RuleKind",
    "Formatter",
    "LavendeuxFormatter",
    "JavascriptFormatter",
    "FormatterRegistry",
    "FormatterRegistryBuilder",
    "create_default_registry",
    "get_default_registry",
    # Samples
    "Sample",
    "SampleBatch",
    "load_samples",
    "load_samples_file",
    "load_bundled_samples",
    "render_samples",
    "get_sample_html",
    "get_example_sample",
    # Errors
    "LilacError",
    "RuleError",
    "SampleError",
    "UnknownFormatterError",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
