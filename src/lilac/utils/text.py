"""Text helpers shared by the encoder and the sample loader.

Example:
    >>> from lilac.utils.text import escape_html, join_lines
    >>> escape_html('0xF & "a" < 1')
    '0xF &amp; "a" &lt; 1'
    >>> join_lines(["x = 1", "x + 2"])
    'x = 1\\nx + 2'
"""

from __future__ import annotations

import html as html_module
from collections.abc import Sequence


def escape_html(text: str) -> str:
    """Escape markup-significant characters in element content.

    Quotes are left alone: highlighted fragments only ever land inside
    element bodies, never attribute values, and string literals read
    better unescaped.
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False)


def join_lines(value: str | Sequence[str]) -> str:
    """Join a sample body given either as one string or as a list of lines.

    Raises:
        TypeError: If value is neither a string nor a sequence of strings
    """
    if isinstance(value, str):
        return value
    if not isinstance(value, Sequence):
        raise TypeError(f"expected a string or list of strings, got {type(value).__name__}")
    for line in value:
        if not isinstance(line, str):
            raise TypeError(f"expected only strings in line list, got {type(line).__name__}")
    return "\n".join(value)
