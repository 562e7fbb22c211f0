"""Formatter base class: an ordered rule table for one dialect.

A Formatter is built once and shared by every sample of its dialect.
Rule order is fixed at construction; format() is a pure function of
(formatter, text).

Thread Safety:
    Immutable after creation. Safe to share across threads.

Example:
    >>> from lilac.rules import Rule
    >>> shout = Formatter("shout", [Rule.compile(r"[A-Z]+", "loud")])
    >>> shout.format("say HI")
    'say <span class="loud">HI</span>'

"""

from __future__ import annotations

from collections.abc import Iterable

from lilac.encoder import MatchSpan, encode, scan
from lilac.errors import RuleError
from lilac.rules import Rule


class Formatter:
    """Ordered rule table plus the format() entry point.

    Attributes:
        name: Short id used by samples (e.g. "lavendeux")
        aliases: Extra ids the registry also maps to this formatter
        rules: Rules in priority order

    """

    __slots__ = ("_aliases", "_name", "_rules")

    def __init__(
        self,
        name: str,
        rules: Iterable[Rule],
        *,
        aliases: Iterable[str] = (),
    ) -> None:
        """Initialize formatter.

        Raises:
            ValueError: If name is empty
            RuleError: If rules is empty or holds something that is not a Rule
        """
        if not name:
            raise ValueError("Formatter name must be a non-empty string")
        rule_tuple = tuple(rules)
        if not rule_tuple:
            raise RuleError(f"formatter '{name}' needs at least one rule")
        for rule in rule_tuple:
            if not isinstance(rule, Rule):
                raise RuleError(
                    f"formatter '{name}' got {type(rule).__name__} where a Rule was expected"
                )
        self._name = name
        self._aliases = tuple(aliases)
        self._rules = rule_tuple

    @property
    def name(self) -> str:
        return self._name

    @property
    def aliases(self) -> tuple[str, ...]:
        return self._aliases

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def css_classes(self) -> frozenset[str]:
        """Class tags this formatter can emit."""
        return frozenset(rule.css_class for rule in self._rules)

    def format(self, text: str) -> str:
        """Render raw text as highlighted HTML.

        Never raises for string input; text no rule recognizes comes back
        trimmed and escaped.
        """
        return encode(self._rules, text)

    def tokens(self, text: str) -> list[MatchSpan]:
        """Matches format() would highlight, in trimmed-text coordinates."""
        return scan(self._rules, text.strip())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, rules={len(self._rules)})"
