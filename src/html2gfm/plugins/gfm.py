#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/plugins/gfm.py
"""GitHub Flavored Markdown extensions.

Bundles the table plugin with strikethrough, task-list checkboxes and the
widely supported ``==highlight==``, ``~sub~`` and ``^sup^`` inline syntaxes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bs4.element import PageElement

from html2gfm.options import ConverterOptions
from html2gfm.plugins.table import table_plugin
from html2gfm.rules.base import Rule, rule
from html2gfm.utils.dom import closest, get_attribute, get_next_sibling_text, has_attribute
from html2gfm.utils.spacing import add_space_if_necessary

if TYPE_CHECKING:
    from html2gfm.converter import Converter


def _wrap(content: str, el: PageElement, delimiter: str, pad: bool = True) -> str:
    trimmed = content.strip()
    if not trimmed:
        return ""
    markdown = f"{delimiter}{trimmed}{delimiter}"
    return add_space_if_necessary(el, markdown) if pad else markdown


@rule("del", "s", "strike")
def strikethrough_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render deleted text as ``~~text~~``."""
    return _wrap(content, el, "~~")


@rule("input")
def task_list_item_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render checkboxes inside list items as task-list markers."""
    if get_attribute(el, "type").lower() != "checkbox" or closest(el, ["li"]) is None:
        return None
    marker = "[x]" if has_attribute(el, "checked") else "[ ]"
    next_text = get_next_sibling_text(el)
    if next_text and next_text[0].isspace():
        return marker
    return marker + " "


@rule("mark")
def highlight_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render highlighted text as ``==text==``."""
    return _wrap(content, el, "==")


@rule("sub")
def subscript_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render subscripts as ``~text~``, without padding."""
    return _wrap(content, el, "~", pad=False)


@rule("sup")
def superscript_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render superscripts as ``^text^``, without padding."""
    return _wrap(content, el, "^", pad=False)


gfm_rules: list[Rule] = [
    strikethrough_rule,
    task_list_item_rule,
    highlight_rule,
    subscript_rule,
    superscript_rule,
]


def gfm_plugin(converter: Converter) -> list[Rule]:
    """Apply the table plugin and return the remaining GFM rules."""
    converter.use(table_plugin)
    return list(gfm_rules)
