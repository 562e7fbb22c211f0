"""Rule table for the Lavendeux expression language.

Covers the constructs shown on the help page: comments, strings,
radix literals (0x, 0o, 0b and leading-zero octal), ``@decorator`` suffixes,
function calls and the catch-all class for numbers, constants and
variable names.
"""

from __future__ import annotations

import re

from lilac.formatters.base import Formatter
from lilac.rules import Rule, RuleKind

LAVENDEUX_RULES: tuple[Rule, ...] = (
    Rule.compile(r"//.*", "comment"),
    Rule.compile(r"/\*.*?\*/", "comment", flags=re.MULTILINE | re.DOTALL),
    Rule.compile(r""""(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*'""", "data"),
    Rule.compile(r"\b0[xXbBoO]?[a-zA-Z0-9]+", "radix"),
    Rule.compile(r"@[0-9A-Za-z_]+", "decorator"),
    Rule.compile(r"[0-9A-Za-z_]*\(", "function", RuleKind.OPEN),
    Rule.compile(r"\)", "function", RuleKind.CLOSE),
    # Numbers (5, 5.56, .2e+3, 5.6e+7), constants and identifiers
    Rule.compile(r"[0-9]*\.?[0-9]+[eE][-+]?[0-9]+|[0-9A-Za-z._]+", "data"),
)


class LavendeuxFormatter(Formatter):
    """Formatter for Lavendeux expressions (the default dialect)."""

    __slots__ = ()

    NAME = "lavendeux"
    ALIASES = ("lav",)

    def __init__(self) -> None:
        super().__init__(self.NAME, LAVENDEUX_RULES, aliases=self.ALIASES)
