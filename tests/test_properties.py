"""Property-based tests for the encoder using Hypothesis.

Invariants that must hold for any input text:
1. Formatting is deterministic
2. Kept spans never overlap and always point at their own text
3. Formatting never raises and always yields balanced markup
4. Removing the markup gives back the trimmed input
"""

import html
import re

from hypothesis import given, settings
from hypothesis import strategies as st

from lilac import JavascriptFormatter, LavendeuxFormatter, Rule, encode, scan

FORMATTERS = [LavendeuxFormatter(), JavascriptFormatter()]

formatters = st.sampled_from(FORMATTERS)

# Biased towards characters the rule tables care about
source_text = st.one_of(
    st.text(),
    st.text(alphabet="0123456789abcxXoOeE_@()/*\"'+-.&<> \n", max_size=80),
)

_MARKUP = re.compile(r'<span class="[^"]*">|</span>')


class TestEncoderProperties:
    """Invariants over arbitrary text."""

    @given(formatter=formatters, text=source_text)
    @settings(max_examples=200)
    def test_format_is_deterministic(self, formatter, text: str) -> None:
        assert formatter.format(text) == formatter.format(text)

    @given(formatter=formatters, text=source_text)
    @settings(max_examples=200)
    def test_spans_do_not_overlap(self, formatter, text: str) -> None:
        trimmed = text.strip()
        spans = scan(formatter.rules, trimmed)
        for previous, current in zip(spans, spans[1:]):
            assert previous.end <= current.start
        for span in spans:
            assert span.length > 0
            assert trimmed[span.start : span.end] == span.text

    @given(formatter=formatters, text=source_text)
    @settings(max_examples=200)
    def test_markup_is_balanced(self, formatter, text: str) -> None:
        result = formatter.format(text)
        assert result.count("<span") == result.count("</span>")

    @given(formatter=formatters, text=source_text)
    @settings(max_examples=200)
    def test_stripping_markup_restores_text(self, formatter, text: str) -> None:
        result = formatter.format(text)
        assert html.unescape(_MARKUP.sub("", result)) == text.strip()


class TestRuleOrderProperties:
    """Precedence between two rules matching the same substring."""

    @given(
        prefix=st.text(alphabet=" xyz", max_size=10),
        suffix=st.text(alphabet=" xyz", max_size=10),
    )
    def test_first_declared_rule_claims_shared_text(self, prefix: str, suffix: str) -> None:
        first = Rule.compile(r"ab", "first")
        second = Rule.compile(r"abc", "second")
        text = f"{prefix}abc{suffix}"
        forward = encode([first, second], text)
        backward = encode([second, first], text)
        assert '<span class="first">ab</span>' in forward
        assert "second" not in forward
        assert '<span class="second">abc</span>' in backward
        assert "first" not in backward
