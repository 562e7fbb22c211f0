"""StringBuilder for O(n) string accumulation.

The encoder emits a fragment per span plus the plain text between spans.
Appending to a list and joining once keeps assembly linear in the output
size instead of quadratic for repeated concatenation.

Thread Safety:
StringBuilder instances are local to each encode() call.
No shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append('<span class="radix">')
            >>> sb.append("0xFF")
            >>> sb.append("</span>")
            >>> sb.build()
            '<span class="radix">0xFF</span>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string (empty strings are skipped); returns self."""
        if s:
            self._parts.append(s)
        return self

    def extend(self, strings: Iterable[str]) -> StringBuilder:
        """Append several strings at once; returns self."""
        self._parts.extend(s for s in strings if s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
