#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the GFM extension rules."""

import pytest

from html2gfm import Converter, commonmark_rules, gfm_plugin, text_rule


def md(html: str) -> str:
    return Converter().add_rules(text_rule, *commonmark_rules).use(gfm_plugin).convert_string(html)


@pytest.mark.unit
class TestStrikethrough:
    """Tests for del, s and strike."""

    @pytest.mark.parametrize("tag", ["del", "s", "strike"])
    def test_strikethrough(self, tag):
        """Test that deleted text is wrapped in double tildes."""
        assert md(f"<p><{tag}>old</{tag}> new</p>") == "~~old~~ new"

    def test_empty_strikethrough_dropped(self):
        """Test that empty strikethrough leaves nothing behind."""
        assert md("<p>a<del> </del>b</p>") == "ab"


@pytest.mark.unit
class TestTaskLists:
    """Tests for checkbox task-list items."""

    def test_checked_and_unchecked(self):
        """Test task markers for checked and unchecked boxes."""
        html = '<ul><li><input type="checkbox" checked> Done</li><li><input type="checkbox"> Todo</li></ul>'
        assert md(html) == "- [x] Done\n- [ ] Todo"

    def test_checkbox_without_following_space(self):
        """Test that a space is added when text follows directly."""
        assert md('<ul><li><input type="checkbox">Todo</li></ul>') == "- [ ] Todo"

    def test_checkbox_outside_list_dropped(self):
        """Test that checkboxes outside list items are ignored."""
        assert md('<p><input type="checkbox"> x</p>') == "x"

    def test_other_inputs_dropped(self):
        """Test that non-checkbox inputs produce nothing."""
        assert md('<ul><li><input type="text">a</li></ul>') == "- a"


@pytest.mark.unit
class TestInlineExtensions:
    """Tests for mark, sub and sup."""

    def test_highlight(self):
        """Test that marked text uses double equals."""
        assert md("<p>a <mark>key</mark> point</p>") == "a ==key== point"

    def test_subscript_not_padded(self):
        """Test that subscripts stay attached to their word."""
        assert md("<p>H<sub>2</sub>O</p>") == "H~2~O"

    def test_superscript_not_padded(self):
        """Test that superscripts stay attached to their word."""
        assert md("<p>x<sup>2</sup></p>") == "x^2^"

    def test_includes_tables(self):
        """Test that the GFM plugin also converts tables."""
        assert md("<table><tr><th>A</th></tr></table>") == "| A |\n| --- |"
