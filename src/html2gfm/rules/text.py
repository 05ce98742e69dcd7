#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/rules/text.py
"""Text node rule.

Registered under the ``#text`` pseudo tag. The converter hands it the raw
text of every text node; it normalizes whitespace and escapes Markdown
characters according to ``escape_mode``.
"""

from __future__ import annotations

import re

from bs4.element import PageElement

from html2gfm.constants import TEXT_NODE_TAG
from html2gfm.options import ConverterOptions
from html2gfm.rules.base import Rule
from html2gfm.utils.dom import parent_tag_name
from html2gfm.utils.escape import escape_markdown_characters

# Containers whose whitespace-only text is formatting between child elements
_STRUCTURAL_PARENTS = frozenset({"ul", "ol", "table", "thead", "tbody", "tfoot", "tr"})

_TABS = re.compile(r"\t+")
_SPACE_RUN = re.compile(r" {2,}")


def convert_text(content: str, el: PageElement, options: ConverterOptions) -> str:
    """Normalize and escape the text of a single text node."""
    text = content
    if not text.strip():
        if parent_tag_name(el) in _STRUCTURAL_PARENTS:
            return ""
        return " " if (" " in text or "\n" in text) else ""

    text = _TABS.sub(" ", text)
    text = _SPACE_RUN.sub(" ", text)
    text = text.replace("\r\n", "\n").replace("\r", "\n")

    if options.escape_mode == "basic":
        text = escape_markdown_characters(text)
    return text


text_rule = Rule(tags=frozenset({TEXT_NODE_TAG}), convert=convert_text, name="text")
