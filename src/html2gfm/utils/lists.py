#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/utils/lists.py
"""List preprocessing and list-item indentation helpers.

Before a tree is reduced, every top-level ``<ul>``/``<ol>`` is walked once and
each ``<li>`` receives a :class:`ListItemContext`: the marker it will be
rendered with and the indentation inherited from its ancestor items. The
contexts are kept in a side-table keyed by node identity so that the tree
itself is never modified.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from bs4.element import Tag

from html2gfm.constants import LIST_TAGS
from html2gfm.utils.dom import closest, element_children, get_attribute, tag_name
from html2gfm.utils.fence import closes_fence, fence_marker

_LIST_ITEM_LINE = re.compile(r"^(?:[-*+]|\d+\.) ")


@dataclass(frozen=True)
class ListItemContext:
    """Marker and indentation for one ``<li>``.

    Parameters
    ----------
    prefix : str
        Marker text including the trailing space (``"- "``, ``"3. "``)
    prefix_width : int
        Width of ``prefix`` in characters
    indent_width : int
        Sum of the marker widths of all ancestor items

    """

    prefix: str = "- "
    prefix_width: int = 2
    indent_width: int = 0


DEFAULT_LIST_ITEM_CONTEXT = ListItemContext()


def is_list_item(line: str) -> bool:
    """Return True if ``line`` starts with a list marker after indentation."""
    return bool(_LIST_ITEM_LINE.match(line.lstrip()))


def indent_multiline_list_item(text: str, spaces: int) -> str:
    """Indent the continuation lines of a list item.

    The first line is left alone (it follows the marker), as are blank lines
    and lines of nested list items, which carry their own indentation. Every
    line of a fenced code block is indented, whatever it looks like.

    Examples
    --------
        >>> indent_multiline_list_item("Item\\n```\\n- x\\n```", 2)
        'Item\\n  ```\\n  - x\\n  ```'

    """
    indent = " " * spaces
    lines = text.split("\n")
    fence = fence_marker(lines[0])
    for i in range(1, len(lines)):
        line = lines[i]
        if fence is not None:
            if closes_fence(line, fence):
                fence = None
        elif not line.strip() or is_list_item(line):
            continue
        else:
            fence = fence_marker(line)
        if line.strip():
            lines[i] = indent + line
    return "\n".join(lines)


def _list_start(list_el: Tag) -> int:
    start = get_attribute(list_el, "start").strip()
    try:
        return int(start)
    except ValueError:
        return 1


def calculate_list_prefix(list_el: Tag, index: int, bullet_marker: str) -> str:
    """Return the marker for the item at ``index`` (0-based) of ``list_el``.

    Ordered lists count from their ``start`` attribute (1 when missing or not
    a number). Unordered lists use ``bullet_marker``.
    """
    if tag_name(list_el) == "ol":
        return f"{_list_start(list_el) + index}. "
    return f"{bullet_marker} "


def _nested_lists(item: Tag) -> list[Tag]:
    """Return lists inside ``item`` whose nearest enclosing item is ``item``."""
    return [lst for lst in item.find_all(list(LIST_TAGS)) if closest(lst, ["li"]) is item]


def preprocess_list(
    list_el: Tag,
    bullet_marker: str,
    annotations: dict[int, ListItemContext],
    prev_prefix_width: int = 0,
) -> None:
    """Annotate every item of ``list_el`` and of the lists nested in it.

    Parameters
    ----------
    list_el : Tag
        A ``<ul>`` or ``<ol>`` element
    bullet_marker : str
        Marker character for unordered items
    annotations : dict[int, ListItemContext]
        Side-table filled in place, keyed by ``id(li)``
    prev_prefix_width : int, default 0
        Accumulated marker width of the ancestor items

    """
    items = [child for child in element_children(list_el) if tag_name(child) == "li"]
    for index, item in enumerate(items):
        prefix = calculate_list_prefix(list_el, index, bullet_marker)
        annotations[id(item)] = ListItemContext(
            prefix=prefix,
            prefix_width=len(prefix),
            indent_width=prev_prefix_width,
        )
        for nested in _nested_lists(item):
            preprocess_list(nested, bullet_marker, annotations, prev_prefix_width + len(prefix))


def find_top_level_lists(root: Tag) -> list[Tag]:
    """Return the lists under ``root`` that have no list ancestor below ``root``."""
    candidates = [root] if tag_name(root) in LIST_TAGS else []
    candidates.extend(root.find_all(list(LIST_TAGS)))

    top_level = []
    for lst in candidates:
        parent = lst.parent
        nested = False
        while parent is not None and lst is not root:
            if tag_name(parent) in LIST_TAGS:
                nested = True
                break
            if parent is root:
                break
            parent = parent.parent
        if not nested:
            top_level.append(lst)
    return top_level


def preprocess_lists(root: Tag, bullet_marker: str) -> dict[int, ListItemContext]:
    """Build the list-item side-table for every list under ``root``."""
    annotations: dict[int, ListItemContext] = {}
    for lst in find_top_level_lists(root):
        preprocess_list(lst, bullet_marker, annotations)
    return annotations
