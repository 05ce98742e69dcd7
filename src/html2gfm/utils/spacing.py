#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/utils/spacing.py
"""Spacing and whitespace helpers shared by the inline rules."""

from __future__ import annotations

import unicodedata
from urllib.parse import urljoin

from bs4.element import PageElement

from html2gfm.constants import INLINE_ELEMENTS
from html2gfm.utils.dom import get_next_sibling_text, get_prev_sibling_text
from html2gfm.utils.fence import closes_fence, fence_marker
from html2gfm.utils.lists import is_list_item


def is_inline_element(tag: str | None) -> bool:
    """Return True if ``tag`` names an inline (non-block) element."""
    if not tag:
        return False
    return tag.lower() in INLINE_ELEMENTS


def _is_punctuation(char: str) -> bool:
    return unicodedata.category(char).startswith("P")


def add_space_if_necessary(el: PageElement, markdown: str) -> str:
    """Pad inline markup so it does not fuse with neighbouring text.

    A leading space is added when the previous sibling's text ends with a
    non-whitespace character. A trailing space is added when the next
    sibling's text starts with a character that is neither whitespace nor
    punctuation. ``hello<b>world</b>there`` therefore becomes
    ``hello **world** there``.

    Parameters
    ----------
    el : PageElement
        The element that produced ``markdown``
    markdown : str
        Converted markup for ``el``

    Returns
    -------
    str
        ``markdown`` with boundary spaces added where needed

    """
    if not markdown:
        return markdown

    prev_text = get_prev_sibling_text(el)
    if prev_text and not prev_text[-1].isspace():
        markdown = " " + markdown

    next_text = get_next_sibling_text(el)
    if next_text:
        first = next_text[0]
        if not first.isspace() and not _is_punctuation(first):
            markdown = markdown + " "

    return markdown


def trim_leading_spaces(text: str) -> str:
    """Strip leading whitespace from every line outside lists and code.

    Whitespace-only text nodes collapse to single spaces, so pretty-printed
    HTML can stack several of them in front of a line. That indentation is
    removed. Indentation produced by the list rules is kept: nested items and
    continuation lines indented under a preceding item. Lines inside fenced
    code blocks are never touched.

    Examples
    --------
        >>> trim_leading_spaces(" Hello\\n     world")
        'Hello\\nworld'
        >>> trim_leading_spaces("- A\\n  - B\\n  more")
        '- A\\n  - B\\n  more'

    """
    lines = text.split("\n")
    fence: str | None = None
    in_list = False
    for i, line in enumerate(lines):
        if fence is not None:
            if closes_fence(line, fence):
                fence = None
            continue

        stripped = line.lstrip()
        if not stripped:
            lines[i] = ""
            continue

        indent = len(line) - len(stripped)
        keep = in_list and indent > 1
        if is_list_item(line):
            in_list = True
        elif not keep:
            in_list = False
        if not keep:
            lines[i] = stripped
        fence = fence_marker(line)
    return "\n".join(lines)


def delimiter_for_every_line(text: str, delimiter: str) -> str:
    """Wrap each non-empty line of ``text`` in ``delimiter``.

    Emphasis cannot span a line break, so multi-line content is wrapped line
    by line. Blank lines stay empty.

    Examples
    --------
        >>> delimiter_for_every_line("one\\n\\ntwo", "**")
        '**one**\\n\\n**two**'

    """
    lines = []
    for line in text.split("\n"):
        line = line.strip()
        lines.append(f"{delimiter}{line}{delimiter}" if line else "")
    return "\n".join(lines)


def get_absolute_url(url: str, domain: str | None = None) -> str:
    """Resolve ``url`` against ``domain``.

    Absolute URLs, protocol-relative URLs and URLs carrying any scheme
    (``mailto:``, ``data:``) are returned unchanged, as is everything when
    no domain is configured.

    Examples
    --------
        >>> get_absolute_url("/docs/a.html", "https://example.com")
        'https://example.com/docs/a.html'
        >>> get_absolute_url("/docs/a.html")
        '/docs/a.html'

    """
    if not url or not domain:
        return url
    if url.startswith(("http://", "https://", "//")):
        return url
    if ":" in url:
        return url
    return urljoin(domain, url)
