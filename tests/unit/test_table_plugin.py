#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the GFM table plugin."""

import pytest
from bs4 import BeautifulSoup

from html2gfm import Converter, commonmark_rules, table_plugin, text_rule
from html2gfm.plugins.table import get_cell_border, is_heading_row, move_captions_after_tables


@pytest.fixture
def table_converter():
    """Provide a converter with CommonMark rules and the table plugin only."""
    return Converter().add_rules(text_rule, *commonmark_rules).use(table_plugin)


@pytest.mark.unit
class TestTableConversion:
    """Tests for converting tables."""

    def test_table_with_thead(self, table_converter):
        """Test a table with an explicit header section and alignment."""
        html = (
            "<table><thead><tr><th>Name</th><th align=\"right\">Qty</th></tr></thead>"
            "<tbody><tr><td>Apple</td><td align=\"right\">9</td></tr></tbody></table>"
        )
        assert table_converter.convert_string(html) == "| Name | Qty |\n| --- | ---: |\n| Apple | 9 |"

    def test_th_row_without_thead(self, table_converter):
        """Test that a row of <th> cells is the header."""
        html = "<table><tr><th>H</th></tr><tr><td>d</td></tr></table>"
        assert table_converter.convert_string(html) == "| H |\n| --- |\n| d |"

    def test_header_synthesized_for_td_only_table(self, table_converter):
        """Test that tables without header cells get an empty header row."""
        html = "<table><tr><td>a</td><td>b</td></tr><tr><td>c</td></tr></table>"
        expected = "|     |     |\n| --- | --- |\n| a | b |\n| c |"
        assert table_converter.convert_string(html) == expected

    def test_alignment_in_heading_row(self, table_converter):
        """Test alignment markers from the align attribute."""
        html = (
            '<table><thead><tr><td align="left">l</td><td align="center">c</td>'
            '<td align="right">9</td><td>d</td></tr></thead></table>'
        )
        assert table_converter.convert_string(html) == "| l | c | 9 | d |\n| :--- | :---: | ---: | --- |"

    def test_cell_pipes_and_breaks(self, table_converter):
        """Test that pipes are escaped once and line breaks become <br>."""
        html = "<table><tr><th>a|b</th><th>x<br>y</th></tr></table>"
        assert table_converter.convert_string(html) == "| a\\|b | x<br>y |\n| --- | --- |"

    def test_source_whitespace_ignored(self, table_converter):
        """Test that indentation between table elements is ignored."""
        html = "<table>\n  <tr>\n    <td>a</td>\n  </tr>\n</table>"
        assert table_converter.convert_string(html) == "|     |\n| --- |\n| a |"

    def test_empty_table(self, table_converter):
        """Test that a table without rows produces nothing."""
        assert table_converter.convert_string("<p>a</p><table></table>") == "a"

    def test_caption_moved_after_table(self, table_converter):
        """Test that captions are emitted as an italic line after the table."""
        html = "<table><caption>Prices</caption><tr><th>A</th></tr></table>"
        assert table_converter.convert_string(html) == "| A |\n| --- |\n\n*Prices*"

    def test_inline_markup_in_cells(self, table_converter):
        """Test that inline rules apply inside cells."""
        html = '<table><tr><th>Link</th></tr><tr><td><a href="/x"><b>bold</b></a></td></tr></table>'
        assert table_converter.convert_string(html) == "| Link |\n| --- |\n| [**bold**](/x) |"


@pytest.mark.unit
class TestTableHelpers:
    """Tests for the table helper functions."""

    def test_is_heading_row(self):
        """Test heading row detection."""
        soup = BeautifulSoup(
            "<table><thead><tr><td>h</td></tr></thead><tbody><tr><td>d</td></tr></tbody></table>", "html.parser"
        )
        head_row, body_row = soup.find_all("tr")

        assert is_heading_row(head_row)
        assert not is_heading_row(body_row)

    def test_first_row_of_table_with_header_cells(self):
        """Test that the first row counts when header cells follow it."""
        soup = BeautifulSoup("<table><tr><td>a</td></tr><tr><th>b</th></tr></table>", "html.parser")
        first, second = soup.find_all("tr")

        assert is_heading_row(first)
        assert is_heading_row(second)

    def test_td_only_table_has_no_heading_row(self):
        """Test that td-only tables leave the header to synthesis."""
        soup = BeautifulSoup("<table><tr><td>a</td></tr></table>", "html.parser")
        assert not is_heading_row(soup.tr)

    @pytest.mark.parametrize(
        "align,expected",
        [("left", ":---"), ("right", "---:"), ("center", ":---:"), ("CENTER", ":---:"), ("justify", "---"), ("", "---")],
    )
    def test_get_cell_border(self, align, expected):
        """Test alignment to divider mapping."""
        soup = BeautifulSoup(f'<table><tr><td align="{align}">x</td></tr></table>', "html.parser")
        assert get_cell_border(soup.td) == expected

    def test_move_captions(self):
        """Test that captions become the next sibling of their table."""
        soup = BeautifulSoup("<div><table><caption>C</caption><tr><td>x</td></tr></table></div>", "html.parser")
        move_captions_after_tables(soup)

        assert soup.table.find("caption") is None
        assert soup.table.next_sibling.name == "caption"

    def test_move_captions_ignores_stray_captions(self):
        """Test that captions outside tables are left in place."""
        soup = BeautifulSoup("<div><caption>C</caption></div>", "html.parser")
        move_captions_after_tables(soup)

        assert soup.caption.parent.name == "div"
