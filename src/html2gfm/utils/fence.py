#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/utils/fence.py
"""Code fence utilities.

A fence must be longer than any run of its own character inside the code it
delimits, otherwise the code block ends early and the rest of the content is
rendered as Markdown.
"""

from __future__ import annotations

import re

from bs4.element import PageElement, Tag

from html2gfm.constants import CODE_LANGUAGE_CLASS_PREFIXES, COMMON_CODE_LANGUAGES, MIN_CODE_FENCE_LENGTH
from html2gfm.utils.dom import get_attribute, is_text_node, tag_name

_PREFIXED_LANGUAGE = re.compile(r"(?:" + "|".join(re.escape(p) for p in CODE_LANGUAGE_CLASS_PREFIXES) + r")(\w+)")
_BARE_LANGUAGE = re.compile(r"^(\w+)$")
_FENCE_LINE = re.compile(r"^\s*(`{3,}|~{3,})")


def calculate_code_fence(fence_char: str, content: str) -> str:
    """Return a fence that cannot collide with ``content``.

    Parameters
    ----------
    fence_char : str
        Character the fence is built from (backtick or tilde)
    content : str
        Code that the fence will delimit

    Returns
    -------
    str
        ``fence_char`` repeated ``max(3, longest_run + 1)`` times

    Examples
    --------
        >>> calculate_code_fence("`", "plain")
        '```'
        >>> calculate_code_fence("`", "a ```` b")
        '`````'

    """
    longest = 0
    current = 0
    for char in content:
        if char == fence_char:
            current += 1
            longest = max(longest, current)
        else:
            current = 0

    return fence_char * max(MIN_CODE_FENCE_LENGTH, longest + 1)


def fence_marker(line: str) -> str | None:
    """Return the code fence ``line`` starts with, if any.

    A backtick run followed by more backticks on the same line is inline code,
    not a fence.

    Examples
    --------
        >>> fence_marker("  ```python")
        '```'
        >>> fence_marker("```x``` and more") is None
        True

    """
    match = _FENCE_LINE.match(line)
    if not match:
        return None
    marker = match.group(1)
    if marker[0] == "`" and "`" in line[match.end() :]:
        return None
    return marker


def closes_fence(line: str, fence: str) -> bool:
    """Return True if ``line`` closes a code block opened with ``fence``.

    Examples
    --------
        >>> closes_fence("````", "```")
        True
        >>> closes_fence("~~~", "```")
        False

    """
    stripped = line.strip()
    return len(stripped) >= len(fence) and stripped == fence[0] * len(stripped)


def _language_from_class(class_attr: str) -> str:
    match = _PREFIXED_LANGUAGE.search(class_attr)
    if match:
        return match.group(1)

    bare = _BARE_LANGUAGE.match(class_attr)
    if bare and bare.group(1).lower() in COMMON_CODE_LANGUAGES:
        return bare.group(1)
    return ""


def extract_language(el: Tag) -> str:
    """Detect the language of a code block from class conventions.

    Looks at ``el`` itself when it is a ``<code>`` element, otherwise at its
    first ``<code>`` descendant. Recognizes ``language-x``, ``lang-x`` and
    ``hljs-x`` classes as well as a bare class naming a common language.
    When the code element carries no language, the class of ``el`` itself is
    consulted (``<pre class="language-python">``).

    Parameters
    ----------
    el : Tag
        A ``<pre>`` or ``<code>`` element

    Returns
    -------
    str
        The language name, or ``""`` if none was found

    """
    code_el = el if tag_name(el) == "code" else el.find("code")
    if isinstance(code_el, Tag):
        language = _language_from_class(get_attribute(code_el, "class"))
        if language:
            return language
    if code_el is not el:
        return _language_from_class(get_attribute(el, "class"))
    return ""


def collect_inline_code_content(el: PageElement) -> str:
    """Collect the raw text of a code element.

    Text is taken verbatim (no Markdown escaping) and ``<br>`` elements become
    newlines.
    """
    parts: list[str] = []

    def walk(node: PageElement) -> None:
        if is_text_node(node):
            parts.append(str(node))
        elif isinstance(node, Tag):
            if tag_name(node) == "br":
                parts.append("\n")
            else:
                for child in node.children:
                    walk(child)

    walk(el)
    return "".join(parts)
