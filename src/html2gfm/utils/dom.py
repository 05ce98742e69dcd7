#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/utils/dom.py
"""Helpers for reading BeautifulSoup trees.

Rules only need a handful of DOM queries (attributes, ancestors, sibling
text). They are collected here so rules stay independent of the quirks of
``bs4``, such as multi-valued attributes being returned as lists.
"""

from __future__ import annotations

from typing import Iterable

from bs4.element import (
    CData,
    Comment,
    Declaration,
    Doctype,
    NavigableString,
    PageElement,
    ProcessingInstruction,
    Tag,
)

# NavigableString subclasses that never carry document text
_NON_TEXT_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction, CData)


def is_text_node(node: PageElement) -> bool:
    """Return True for string nodes that contribute document text."""
    return isinstance(node, NavigableString) and not isinstance(node, _NON_TEXT_STRINGS)


def tag_name(node: PageElement | None) -> str:
    """Return the lower-cased tag name of ``node`` or an empty string."""
    if isinstance(node, Tag) and node.name:
        return node.name.lower()
    return ""


def get_attribute(el: PageElement, name: str) -> str:
    """Return an attribute value as a string.

    ``bs4`` returns multi-valued attributes such as ``class`` as lists; those
    are joined with single spaces. Missing attributes yield ``""``.
    """
    if not isinstance(el, Tag):
        return ""
    value = el.get(name)
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


def has_attribute(el: PageElement, name: str) -> bool:
    """Return True if ``el`` is a tag carrying the attribute ``name``."""
    return isinstance(el, Tag) and el.has_attr(name)


def closest(el: PageElement, names: Iterable[str]) -> Tag | None:
    """Return the nearest proper ancestor whose tag name is in ``names``."""
    wanted = set(names)
    parent = el.parent
    while parent is not None:
        if tag_name(parent) in wanted:
            return parent
        parent = parent.parent
    return None


def parent_tag_name(el: PageElement) -> str:
    """Return the tag name of the parent element or an empty string."""
    return tag_name(el.parent)


def element_children(el: Tag) -> list[Tag]:
    """Return the element (non-string) children of ``el``."""
    return [child for child in el.children if isinstance(child, Tag)]


def previous_element_sibling(el: PageElement) -> Tag | None:
    """Return the nearest preceding sibling that is an element."""
    node = el.previous_sibling
    while node is not None and not isinstance(node, Tag):
        node = node.previous_sibling
    return node


def text_content(node: PageElement) -> str:
    """Return the concatenated document text of ``node`` and its descendants."""
    if isinstance(node, Tag):
        return "".join(str(s) for s in node.descendants if is_text_node(s))
    if is_text_node(node):
        return str(node)
    return ""


def _sibling_text(node: PageElement | None, forward: bool) -> str:
    while node is not None:
        if isinstance(node, Tag) or is_text_node(node):
            return text_content(node)
        node = node.next_sibling if forward else node.previous_sibling
    return ""


def get_prev_sibling_text(el: PageElement) -> str:
    """Return the text of the nearest preceding text or element sibling."""
    return _sibling_text(el.previous_sibling, forward=False)


def get_next_sibling_text(el: PageElement) -> str:
    """Return the text of the nearest following text or element sibling."""
    return _sibling_text(el.next_sibling, forward=True)


def document_root(node: PageElement) -> PageElement:
    """Return the topmost ancestor of ``node`` (the document for attached nodes)."""
    while node.parent is not None:
        node = node.parent
    return node
