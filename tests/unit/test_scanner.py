"""Tests for the bracket- and quote-aware scanner."""

import pytest

from gridforge.core import LiteralSyntaxError, UnterminatedAggregate
from gridforge.literal import (
    blank_comments,
    blank_strings,
    find_closing,
    find_top_level,
    split_spans,
    split_top_level,
)


@pytest.mark.unit
class TestFindClosing:
    """Matching closer lookup."""

    def test_simple_table(self):
        text = "{a = 1}"
        assert find_closing(text, 0) == len(text) - 1

    def test_nested(self):
        text = "({1, {2, 3}}, 4)"
        assert find_closing(text, 0) == len(text) - 1
        assert find_closing(text, 1) == text.index("}}") + 1

    def test_ignores_closers_in_strings(self):
        text = '("a)b", \'}\')'
        assert find_closing(text, 0) == len(text) - 1

    def test_escaped_quote_in_string(self):
        text = '("say \\"hi)\\"")'
        assert find_closing(text, 0) == len(text) - 1

    def test_unterminated(self):
        with pytest.raises(UnterminatedAggregate) as exc_info:
            find_closing("{1, {2}", 0)
        assert exc_info.value.offset == 0

    def test_mismatched_closer(self):
        with pytest.raises(LiteralSyntaxError):
            find_closing("{1, 2)", 0)

    def test_not_an_opener(self):
        with pytest.raises(LiteralSyntaxError):
            find_closing("abc", 0)


@pytest.mark.unit
class TestSplit:
    """Top-level comma splitting."""

    def test_nested_commas_stay_together(self):
        assert split_top_level('{"a","b"}, {{1,2},{3,4}}') == ['{"a","b"}', "{{1,2},{3,4}}"]

    def test_commas_in_strings(self):
        assert split_top_level("'a,b', \"c,d\"") == ["'a,b'", '"c,d"']

    def test_trailing_comma_dropped(self):
        assert split_top_level("1, 2,") == ["1", "2"]

    def test_blank_region(self):
        assert split_spans("   ") == []

    def test_spans_are_original_offsets(self):
        text = "f(1,  two )"
        assert split_spans(text, 2, len(text) - 1) == [(2, 3), (6, 9)]

    def test_find_top_level_skips_nested(self):
        text = "{a = 1} = 2"
        assert find_top_level(text, "=") == text.rindex("=")
        assert find_top_level("no equals", "=") == -1


@pytest.mark.unit
class TestBlankComments:
    """Comment removal keeps offsets."""

    def test_line_comment(self):
        text = "local a = 1 -- note\nlocal b = 2"
        blanked = blank_comments(text)
        assert len(blanked) == len(text)
        assert "note" not in blanked
        assert blanked.endswith("local b = 2")

    def test_block_comment_keeps_newlines(self):
        text = "--[[ one\ntwo ]]x"
        blanked = blank_comments(text)
        assert blanked.count("\n") == 1
        assert blanked.strip() == "x"

    def test_dashes_in_string_survive(self):
        text = 'setText("a -- b")'
        assert blank_comments(text) == text


@pytest.mark.unit
class TestBlankStrings:
    """String contents removed, quotes and offsets kept."""

    def test_contents_blanked(self):
        text = 'main:setTitle("a:setText(99)")'
        blanked = blank_strings(text)
        assert blanked == 'main:setTitle("' + " " * 13 + '")'

    def test_escaped_quote(self):
        text = r"""x('it\'s', "b")"""
        blanked = blank_strings(text)
        assert len(blanked) == len(text)
        assert blanked.endswith('" ")')
        assert "it" not in blanked

    def test_region_offsets(self):
        text = 'abc"def"ghi'
        assert blank_strings(text, 3, 8) == '"   "'
