"""Formatters: per-dialect rule tables and the registry that maps ids to them.

Built-in formatters:
- lavendeux (alias lav): Lavendeux expression language
- javascript (alias js): JavaScript extension sources

Example:
    >>> from lilac.formatters import create_default_registry
    >>> registry = create_default_registry()
    >>> registry.resolve("js").format("return 5;")
    '<span class="keyword">return</span> <span class="data">5</span>;'

"""

from lilac.formatters.base import Formatter
from lilac.formatters.javascript import JAVASCRIPT_RULES, JavascriptFormatter
from lilac.formatters.lavendeux import LAVENDEUX_RULES, LavendeuxFormatter
from lilac.formatters.registry import (
    FormatterRegistry,
    FormatterRegistryBuilder,
    create_default_registry,
    get_default_registry,
)

__all__ = [
    "Formatter",
    "FormatterRegistry",
    "FormatterRegistryBuilder",
    "JAVASCRIPT_RULES",
    "JavascriptFormatter",
    "LAVENDEUX_RULES",
    "LavendeuxFormatter",
    "create_default_registry",
    "get_default_registry",
]
