#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/utils/escape.py
"""Markdown text escaping utilities.

This module provides the escape functions applied to text nodes and link
text so that literal characters from the HTML source are not interpreted as
Markdown syntax.

"""

from __future__ import annotations

import re
from typing import Callable, Union

# Ordered (pattern, replacement) pairs; backslashes must be escaped first so the
# escapes added by later steps are not doubled.
_Replacement = Union[str, Callable[[re.Match[str]], str]]

_ESCAPE_STEPS: list[tuple[re.Pattern[str] | str, _Replacement]] = [
    (re.compile(r"\\(\S)"), r"\\\\\1"),
    # ATX headings at line start
    (re.compile(r"^(#{1,6} )", re.MULTILINE), r"\\\1"),
    # Ordered list markers
    (re.compile(r"^(\W* {0,3})(\d+)\. ", re.MULTILINE), r"\1\2\\. "),
    # Unordered list markers; "*" is covered by the emphasis step below
    (re.compile(r"^([^\\\w]*)([+-] )", re.MULTILINE), r"\1\\\2"),
    # Blockquote markers
    (re.compile(r"^(\W* {0,3})> ", re.MULTILINE), r"\1\\> "),
    ("*", r"\*"),
    ("_", r"\_"),
    ("`", r"\`"),
    ("|", r"\|"),
    (re.compile(r"([\[\]])"), r"\\\1"),
]

_NEWLINE_RUN = re.compile(r"\n+")
_UNESCAPED_PIPE = re.compile(r"(?<!\\)\|")


def escape_markdown_characters(text: str) -> str:
    r"""Escape Markdown special characters in plain text.

    Escapes backslashes that precede a non-space character, ATX heading,
    list and blockquote markers at the start of a line, and the inline
    characters ``*``, ``_``, backtick, ``|``, ``[`` and ``]``.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for Markdown

    Examples
    --------
        >>> escape_markdown_characters("# not a heading")
        '\\# not a heading'
        >>> escape_markdown_characters("2 * 3 = [six]")
        '2 \\* 3 = \\[six\\]'

    """
    if not text:
        return text

    for pattern, replacement in _ESCAPE_STEPS:
        if isinstance(pattern, str):
            text = text.replace(pattern, replacement)  # type: ignore[arg-type]
        else:
            text = pattern.sub(replacement, text)
    return text


def escape_multiline(text: str) -> str:
    """Collapse line breaks so that text stays on a single line.

    Used for link text, where a line break would end the link.

    Parameters
    ----------
    text : str
        Text that may contain newlines

    Returns
    -------
    str
        Text with each run of newlines replaced by a single space, trimmed

    """
    return _NEWLINE_RUN.sub(" ", text).strip()


def escape_table_cell(text: str) -> str:
    r"""Escape pipe characters that would otherwise split a table cell.

    Pipes already escaped by the text rule are left alone.

    Examples
    --------
        >>> escape_table_cell("a | b")
        'a \\| b'
        >>> escape_table_cell("a \\| b")
        'a \\| b'

    """
    return _UNESCAPED_PIPE.sub(r"\\|", text)
