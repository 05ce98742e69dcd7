#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/plugins/table.py
"""GitHub Flavored Markdown table plugin.

Converts ``<table>`` markup to pipe tables. Captions are moved after their
table before conversion and rendered as an italic paragraph. Tables without
any header cells get an empty header row so the output is still a valid GFM
table.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

from bs4.element import PageElement, Tag

from html2gfm.constants import DEFAULT_TABLE_ALIGNMENT, TABLE_ALIGNMENT_MAPPING
from html2gfm.options import ConverterOptions
from html2gfm.rules.base import Rule, rule
from html2gfm.utils.dom import closest, element_children, get_attribute, previous_element_sibling, tag_name
from html2gfm.utils.escape import escape_table_cell

if TYPE_CHECKING:
    from html2gfm.converter import Converter

logger = logging.getLogger(__name__)

_CELL_TAGS = ("th", "td")
_NEWLINE_RUN = re.compile(r"\n+")


def move_captions_after_tables(document: PageElement) -> None:
    """Relocate every ``<caption>`` of a table to directly after that table."""
    if not isinstance(document, Tag):
        return
    for caption in document.find_all("caption"):
        table = caption.parent
        if tag_name(table) != "table":
            continue
        table.insert_after(caption.extract())
        logger.debug("Moved table caption after its table")


def _row_cells(row: Tag) -> list[Tag]:
    return [cell for cell in element_children(row) if tag_name(cell) in _CELL_TAGS]


def _has_header(table: Tag) -> bool:
    return table.find("thead") is not None or table.find("th") is not None


def is_heading_row(row: Tag) -> bool:
    """Return True if ``row`` is the header row of its table.

    A row is a heading row when it sits in ``<thead>`` or contains a
    ``<th>`` cell. In a table without ``<thead>`` whose header cells are
    further down, the first row also counts; a table with no header cells at
    all gets a synthesized header instead.
    """
    if tag_name(row.parent) == "thead":
        return True
    if any(tag_name(cell) == "th" for cell in _row_cells(row)):
        return True

    table = closest(row, ["table"])
    if table is None or table.find("thead") is not None or not _has_header(table):
        return False
    first_row = table.find("tr")
    return first_row is row


def get_cell_border(cell: Tag) -> str:
    """Return the divider segment for ``cell`` based on its ``align`` attribute."""
    align = get_attribute(cell, "align").strip().lower()
    return TABLE_ALIGNMENT_MAPPING.get(align, DEFAULT_TABLE_ALIGNMENT)


def _column_count(table: Tag) -> int:
    return max((len(_row_cells(row)) for row in table.find_all("tr")), default=0)


@rule("table")
def table_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render a pipe table, synthesizing an empty header when none exists."""
    if not _has_header(el):
        columns = _column_count(el)
        if columns:
            header = "|" + "     |" * columns
            divider = "|" + " --- |" * columns
            content = f"{header}\n{divider}{content}"
    return f"\n\n{content.strip()}\n\n"


@rule("thead", "tbody", "tfoot")
def table_section_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Pass row sections through unchanged."""
    return content


@rule("tr")
def table_row_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render a row on its own line, followed by the divider for heading rows."""
    if not is_heading_row(el):
        return "\n" + content

    borders = []
    for index, cell in enumerate(_row_cells(el)):
        lead = "| " if index == 0 else " "
        borders.append(f"{lead}{get_cell_border(cell)} |")
    return "\n" + content + ("\n" + "".join(borders) if borders else "")


@rule(*_CELL_TAGS)
def table_cell_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render one cell; line breaks become ``<br>`` and pipes are escaped."""
    text = _NEWLINE_RUN.sub("<br>", content.strip())
    text = escape_table_cell(text)
    if previous_element_sibling(el) is None:
        return f"| {text} |"
    return f" {text} |"


@rule("caption")
def caption_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render a table caption as an italic paragraph."""
    trimmed = content.strip()
    if not trimmed:
        return None
    return f"\n\n*{trimmed}*\n\n"


table_rules: list[Rule] = [table_rule, table_section_rule, table_row_rule, table_cell_rule, caption_rule]


def table_plugin(converter: Converter) -> list[Rule]:
    """Register the caption hook and return the table rules."""
    converter.before(move_captions_after_tables)
    return list(table_rules)
