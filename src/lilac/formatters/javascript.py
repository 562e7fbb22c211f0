"""Rule table for the JavaScript extension-authoring dialect.

Extensions are plain JavaScript with JSDoc blocks. Both comment forms share
one rule, so whichever opener comes first wins: a ``//`` inside a doc comment
stays part of the block, and a ``/* */`` after ``//`` stays part of the line.
There is no decorator sigil; keywords get their own class instead.
"""

from __future__ import annotations

from lilac.formatters.base import Formatter
from lilac.rules import Rule, RuleKind

_KEYWORDS = (
    "async",
    "await",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "default",
    "delete",
    "do",
    "else",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "import",
    "in",
    "instanceof",
    "let",
    "new",
    "null",
    "of",
    "return",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "undefined",
    "var",
    "void",
    "while",
    "yield",
)

JAVASCRIPT_RULES: tuple[Rule, ...] = (
    Rule.compile(r"/\*(?s:.*?)\*/|//.*", "comment"),
    Rule.compile(r""""(?:\\.|[^"\\\n])*"|'(?:\\.|[^'\\\n])*'|`(?:\\.|[^`\\])*`""", "data"),
    Rule.compile(r"\b(?:" + "|".join(_KEYWORDS) + r")\b", "keyword"),
    Rule.compile(r"\b0[xXoObB][0-9a-fA-F]+\b", "radix"),
    Rule.compile(r"[$0-9A-Za-z_]*\(", "function", RuleKind.OPEN),
    Rule.compile(r"\)", "function", RuleKind.CLOSE),
    Rule.compile(r"[$0-9A-Za-z_]+(?:\.[$0-9A-Za-z_]+)*", "data"),
)


class JavascriptFormatter(Formatter):
    """Formatter for JavaScript extension sources."""

    __slots__ = ()

    NAME = "javascript"
    ALIASES = ("js",)

    def __init__(self) -> None:
        super().__init__(self.NAME, JAVASCRIPT_RULES, aliases=self.ALIASES)
