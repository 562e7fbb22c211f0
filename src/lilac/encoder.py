"""Masking encoder shared by all formatters.

Applies an ordered rule table to sample text and produces HTML where every
recognized token sits in a ``<span class="...">`` element.

Algorithm:
    1. The input is trimmed; the trimmed string is what gets scanned and
       what the output is built from.
    2. A scan buffer starts as a copy of that text. Each rule, in declaration
       order, searches the buffer left to right. A match is kept only if none
       of its characters were claimed by an earlier match; kept regions are
       then blanked out in the scan buffer (same length, so offsets keep
       pointing into the original text) and marked as claimed.
    3. Once all rules ran, the kept matches are sorted by offset and the
       output is assembled from the original text: plain stretches escaped,
       matches surrounded by their rule's markup.

Because markup is only inserted in step 3, a replacement that is longer than
its match can never shift where a later rule looks. Earlier rules win any
contested character; within a rule the leftmost match wins and scanning
resumes right after it.

Thread Safety:
    scan() and encode() are pure. Every call owns its buffers; rule tables
    are only read.

Example:
    >>> from lilac.formatters import LavendeuxFormatter
    >>> encode(LavendeuxFormatter().rules, "255 @hex")
    '<span class="data">255</span> <span class="decorator">@hex</span>'

"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from lilac.config import get_render_config
from lilac.rules import Rule, RuleKind
from lilac.stringbuilder import StringBuilder
from lilac.utils.text import escape_html

# Fill character for claimed regions of the scan buffer
_MASK = " "


@dataclass(frozen=True, slots=True)
class MatchSpan:
    """One kept match, in coordinates of the trimmed input text.

    Attributes:
        start: Offset of the first matched character
        length: Number of matched characters (always > 0)
        text: The matched substring
        rule: Rule that produced the match

    """

    start: int
    length: int
    text: str
    rule: Rule

    @property
    def end(self) -> int:
        """Offset one past the last matched character."""
        return self.start + self.length


def scan(rules: Iterable[Rule], text: str) -> list[MatchSpan]:
    """Find the non-overlapping matches of an ordered rule table.

    The text is used as given (encode() trims before calling this).

    Args:
        rules: Rules in priority order
        text: Text to scan

    Returns:
        Kept matches sorted by start offset. No two spans share a character.
    """
    claimed = bytearray(len(text))
    buffer = text
    spans: list[MatchSpan] = []

    for rule in rules:
        pattern = rule.pattern
        kept: list[tuple[int, int]] = []
        pos = 0
        while pos <= len(buffer):
            match = pattern.search(buffer, pos)
            if match is None:
                break
            start, end = match.span()
            if start == end:
                # Guard against zero-width matches: always move forward
                pos = start + 1
                continue
            if any(claimed[start:end]):
                pos = start + 1
                continue
            kept.append((start, end))
            claimed[start:end] = b"\x01" * (end - start)
            spans.append(MatchSpan(start, end - start, text[start:end], rule))
            pos = end

        if kept:
            buffer = _mask(buffer, kept)

    spans.sort(key=lambda span: span.start)
    return spans


def _mask(buffer: str, regions: Sequence[tuple[int, int]]) -> str:
    """Blank out (start, end) regions, which are sorted and disjoint."""
    parts: list[str] = []
    cursor = 0
    for start, end in regions:
        parts.append(buffer[cursor:start])
        parts.append(_MASK * (end - start))
        cursor = end
    parts.append(buffer[cursor:])
    return "".join(parts)


def render(text: str, spans: Iterable[MatchSpan], *, escape: bool = True) -> str:
    """Assemble HTML from text and its sorted, non-overlapping spans.

    OPEN spans push a pending call that the next CLOSE span ends. A CLOSE
    span with nothing pending is emitted as plain text, and calls still
    pending at the end are closed so the fragment is always balanced.
    """
    esc = escape_html if escape else _identity
    sb = StringBuilder()
    pending = 0
    cursor = 0

    for span in spans:
        sb.append(esc(text[cursor : span.start]))
        rule = span.rule
        body = esc(span.text)
        if rule.kind is RuleKind.OPEN:
            sb.append(rule.open_markup()).append(body)
            pending += 1
        elif rule.kind is RuleKind.CLOSE:
            sb.append(body)
            if pending:
                sb.append(rule.close_markup())
                pending -= 1
        else:
            sb.append(rule.open_markup()).append(body).append(rule.close_markup())
        cursor = span.end

    sb.append(esc(text[cursor:]))
    sb.extend(["</span>"] * pending)
    return sb.build()


def encode(rules: Iterable[Rule], text: str, *, escape: bool | None = None) -> str:
    """Highlight text with an ordered rule table.

    Args:
        rules: Rules in priority order
        text: Raw sample text (leading/trailing whitespace is dropped)
        escape: Escape HTML in the output; None uses the active RenderConfig

    Returns:
        HTML fragment ("" for empty or whitespace-only input)
    """
    trimmed = text.strip()
    if not trimmed:
        return ""
    if escape is None:
        escape = get_render_config().escape_html
    return render(trimmed, scan(rules, trimmed), escape=escape)


def _identity(text: str) -> str:
    return text


__all__ = ["MatchSpan", "encode", "render", "scan"]
