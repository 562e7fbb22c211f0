"""Tests for Lilac utility modules."""

import pytest


class TestEscapeHtml:
    """Tests for escape_html."""

    def test_markup_characters(self) -> None:
        from lilac.utils.text import escape_html

        assert escape_html("a < b > c & d") == "a &lt; b &gt; c &amp; d"

    def test_quotes_untouched(self) -> None:
        from lilac.utils.text import escape_html

        assert escape_html("\"s\" 'c'") == "\"s\" 'c'"

    def test_empty_string(self) -> None:
        from lilac.utils.text import escape_html

        assert escape_html("") == ""


class TestJoinLines:
    """Tests for join_lines."""

    def test_string_passthrough(self) -> None:
        from lilac.utils.text import join_lines

        assert join_lines("a\nb") == "a\nb"

    def test_list_joined_with_newlines(self) -> None:
        from lilac.utils.text import join_lines

        assert join_lines(["a", "", "b"]) == "a\n\nb"
        assert join_lines([]) == ""

    def test_rejects_non_strings(self) -> None:
        from lilac.utils.text import join_lines

        with pytest.raises(TypeError):
            join_lines(5)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            join_lines(["a", None])  # type: ignore[list-item]


class TestLogger:
    """Tests for get_logger."""

    def test_prefix_added(self) -> None:
        from lilac.utils.logger import get_logger

        assert get_logger("mymodule").name == "lilac.mymodule"

    def test_prefix_not_duplicated(self) -> None:
        from lilac.utils.logger import get_logger

        assert get_logger("lilac.samples").name == "lilac.samples"
        assert get_logger("lilac").name == "lilac"


class TestStringBuilder:
    """Tests for StringBuilder."""

    def test_build(self) -> None:
        from lilac.stringbuilder import StringBuilder

        sb = StringBuilder()
        sb.append("<b>").append("").append("x").extend(["</b>", ""])
        assert sb.build() == "<b>x</b>"
        assert len(sb) == 3
        assert sb

    def test_empty(self) -> None:
        from lilac.stringbuilder import StringBuilder

        sb = StringBuilder()
        assert sb.build() == ""
        assert not sb
