"""Highlighting rules: a pattern paired with a semantic class tag.

A Rule recognizes one token kind. Formatters hold an ordered tuple of rules;
the order is the priority order and never changes after construction.

Most rules wrap their match in a single span. The function-call head and the
close parenthesis cooperate instead: the head opens a span that the close
parenthesis rule ends, so a whole call expression sits inside one element.

Thread Safety:
Rule is frozen (immutable) and safe to share across threads.
Compiled re.Pattern objects are themselves safe for concurrent use.

Example:
    >>> rule = Rule.compile(r"//.*", "comment")
    >>> rule.open_markup()
    '<span class="comment">'

"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto

from lilac.errors import RuleError

# Class tags land verbatim in a class="..." attribute
_CSS_CLASS_PATTERN = re.compile(r"-?[_a-zA-Z][_a-zA-Z0-9-]*")

# Strings a sane pattern must never match with zero width
_EMPTY_MATCH_PROBES: tuple[str, ...] = (
    "",
    " ",
    "\n",
    "a",
    "Z_9",
    "0",
    "0x1F",
    "()",
    "@x",
    "//",
    "/* */",
    '"s"',
    "'s'",
    "+-*/",
)


class RuleKind(Enum):
    """How a rule's markup surrounds its match."""

    WRAP = auto()  # <span class="c">match</span>
    OPEN = auto()  # <span class="c">match   (closed by a CLOSE rule)
    CLOSE = auto()  # match</span>


@dataclass(frozen=True, slots=True)
class Rule:
    """A compiled pattern and the class tag its matches receive.

    Attributes:
        pattern: Compiled regular expression
        css_class: Semantic class tag (comment, radix, decorator, ...)
        kind: Markup shape, see RuleKind

    Raises:
        RuleError: If the class tag is not a usable CSS class name, or the
            pattern can match an empty span

    """

    pattern: re.Pattern[str]
    css_class: str
    kind: RuleKind = RuleKind.WRAP

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, re.Pattern):
            raise RuleError(
                f"pattern must be a compiled regular expression, got {type(self.pattern).__name__}",
                css_class=self.css_class,
            )
        if not isinstance(self.css_class, str) or not _CSS_CLASS_PATTERN.fullmatch(
            self.css_class
        ):
            raise RuleError(
                "class tag must be a non-empty CSS class name",
                css_class=None,
                pattern=self.pattern.pattern,
            )
        for probe in _EMPTY_MATCH_PROBES:
            for match in self.pattern.finditer(probe):
                if match.start() == match.end():
                    raise RuleError(
                        f"pattern matches an empty span in {probe!r}",
                        css_class=self.css_class,
                        pattern=self.pattern.pattern,
                    )

    @classmethod
    def compile(
        cls,
        pattern: str,
        css_class: str,
        kind: RuleKind = RuleKind.WRAP,
        flags: int = re.MULTILINE,
    ) -> Rule:
        """Build a rule from a pattern string.

        Args:
            pattern: Regular expression source
            css_class: Class tag for matches
            kind: Markup shape (default WRAP)
            flags: re flags (default re.MULTILINE)

        Raises:
            RuleError: If the pattern does not compile or is degenerate
        """
        try:
            compiled = re.compile(pattern, flags)
        except re.error as e:
            raise RuleError(f"invalid pattern: {e}", css_class=css_class, pattern=pattern) from e
        return cls(compiled, css_class, kind)

    def open_markup(self) -> str:
        """Markup placed before the match ("" for CLOSE rules)."""
        if self.kind is RuleKind.CLOSE:
            return ""
        return f'<span class="{self.css_class}">'

    def close_markup(self) -> str:
        """Markup placed after the match ("" for OPEN rules)."""
        if self.kind is RuleKind.OPEN:
            return ""
        return "</span>"

    def __repr__(self) -> str:
        return f"Rule({self.pattern.pattern!r}, {self.css_class!r}, {self.kind.name})"
