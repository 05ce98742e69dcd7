#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Helpers shared by the conversion rules."""

from html2gfm.utils.escape import escape_markdown_characters, escape_multiline, escape_table_cell
from html2gfm.utils.fence import calculate_code_fence, collect_inline_code_content, extract_language
from html2gfm.utils.lists import indent_multiline_list_item, is_list_item
from html2gfm.utils.spacing import add_space_if_necessary, get_absolute_url, trim_leading_spaces

__all__ = [
    "add_space_if_necessary",
    "calculate_code_fence",
    "collect_inline_code_content",
    "escape_markdown_characters",
    "escape_multiline",
    "escape_table_cell",
    "extract_language",
    "get_absolute_url",
    "indent_multiline_list_item",
    "is_list_item",
    "trim_leading_spaces",
]
