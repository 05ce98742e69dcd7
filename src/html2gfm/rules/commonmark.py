#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/rules/commonmark.py
"""Baseline CommonMark conversion rules.

Each rule receives the already converted Markdown of the element's children
(``content``), the source element (``el``) and the shared options. Block
rules pad their output with blank lines; the converter collapses the excess
during whitespace normalization.

"""

from __future__ import annotations

import logging
import re
from urllib.parse import unquote

from bs4.element import PageElement

from html2gfm.constants import HEADING_TAGS, IFRAME_CONTENT_PLACEHOLDER
from html2gfm.options import ConverterOptions
from html2gfm.rules.base import ConversionResult, Rule, advanced_rule, rule
from html2gfm.state import current_state
from html2gfm.utils.dom import closest, element_children, get_attribute, parent_tag_name, tag_name
from html2gfm.utils.escape import escape_multiline
from html2gfm.utils.fence import calculate_code_fence, collect_inline_code_content, extract_language
from html2gfm.utils.lists import indent_multiline_list_item
from html2gfm.utils.spacing import (
    add_space_if_necessary,
    delimiter_for_every_line,
    get_absolute_url,
    is_inline_element,
    trim_leading_spaces,
)

logger = logging.getLogger(__name__)

_LEADING_NEWLINES = re.compile(r"^\n+")
_TRAILING_NEWLINES = re.compile(r"\n+$")
_WHITESPACE_RUN = re.compile(r"\s+")
_UNESCAPED_HASH = re.compile(r"(?<!\\)#")
_MULTI_NEWLINE = re.compile(r"\n{2,}")
_MALFORMED_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@rule("ul", "ol")
def list_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Pad lists with blank lines, or continue the parent item's block."""
    parent = el.parent
    if tag_name(parent) in ("li", "ul", "ol"):
        siblings = element_children(parent)
        if siblings and siblings[-1] is el:
            return ("\n" + content).rstrip()
    return f"\n\n{content}\n\n"


@rule("li")
def list_item_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render one list item with the marker computed by the list preprocessor.

    Continuation lines are indented by the item's own marker width; each
    enclosing item adds its marker width in turn, so in the final document
    they sit at ``indent_width + prefix_width``. Lines of nested items are
    emitted fully indented and left alone by the ancestors.
    """
    if not content.strip():
        return None

    content = _LEADING_NEWLINES.sub("", content)
    content = _TRAILING_NEWLINES.sub("\n", content)
    content = content.lstrip()

    item = current_state().list_item_context(el)
    content = indent_multiline_list_item(content, item.prefix_width)
    return " " * item.indent_width + item.prefix + content + "\n"


@rule("p", "div")
def paragraph_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Wrap paragraphs, with minimal spacing inside inline elements and items."""
    parent = parent_tag_name(el)
    if is_inline_element(parent) or parent == "li":
        return f"\n{content}\n"

    content = trim_leading_spaces(content)
    return f"\n\n{content}\n\n"


@rule(*sorted(HEADING_TAGS))
def heading_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render h1-h6 as ATX or setext headings, or bold text inside links."""
    if not content.strip():
        return None

    content = _WHITESPACE_RUN.sub(" ", content)
    content = _UNESCAPED_HASH.sub(r"\\#", content).strip()

    # Headings cannot live inside link text
    if closest(el, ["a"]) is not None:
        return add_space_if_necessary(el, f"{options.strong_delimiter}{content}{options.strong_delimiter}")

    level = int(tag_name(el)[1])
    if options.heading_style == "setext" and level < 3:
        underline = "=" if level == 1 else "-"
        return f"\n\n{content}\n{underline * len(content)}\n\n"

    return f"\n\n{'#' * level} {content}\n\n"


def _emphasis(content: str, el: PageElement, delimiter: str, same_kind: tuple[str, ...]) -> str:
    if parent_tag_name(el) in same_kind:
        return content

    trimmed = content.strip()
    if not trimmed:
        return ""
    return add_space_if_necessary(el, delimiter_for_every_line(trimmed, delimiter))


@rule("strong", "b")
def bold_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render strong emphasis, once per line."""
    return _emphasis(content, el, options.strong_delimiter, ("strong", "b"))


@rule("em", "i")
def italic_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render emphasis, once per line."""
    return _emphasis(content, el, options.em_delimiter, ("em", "i"))


@rule("img")
def image_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render images as ``![alt](src)``."""
    src = get_attribute(el, "src").strip()
    if not src:
        return ""

    src = get_absolute_url(src, options.domain)
    alt = get_attribute(el, "alt").replace("\n", " ").strip()
    return f"![{alt}]({src})"


@advanced_rule("a")
def link_rule(content: str, el: PageElement, options: ConverterOptions) -> ConversionResult | None:
    """Render links inline, or as numbered references collected in the footer."""
    href = get_attribute(el, "href").strip()
    if not href or href == "#":
        return ConversionResult(markdown=content)

    href = get_absolute_url(href, options.domain)
    content = escape_multiline(content)

    title_attr = get_attribute(el, "title")
    title = ""
    if title_attr:
        title = ' "' + title_attr.replace("\n", " ").replace('"', '\\"') + '"'

    if not content.strip():
        content = escape_multiline(title_attr or get_attribute(el, "aria-label"))
    if not content:
        return None

    if options.link_style != "referenced":
        return ConversionResult(markdown=add_space_if_necessary(el, f"[{content}]({href}{title})"))

    index = current_state().next_link_index()
    return ConversionResult(
        markdown=add_space_if_necessary(el, f"[{content}][{index}]"),
        footer=f"[{index}]: {href}{title}",
    )


@rule("code", "kbd", "samp", "tt")
def inline_code_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render inline code spans; code inside ``<pre>`` is left to the block rule."""
    if closest(el, ["pre"]) is not None:
        return None

    code = collect_inline_code_content(el)
    code = _MULTI_NEWLINE.sub("\n", code)
    if not code:
        return ""

    fence = calculate_code_fence("`", code)
    if code.startswith("`"):
        code = " " + code
    if code.endswith("`"):
        code = code + " "

    return add_space_if_necessary(el, f"{fence}{code}{fence}")


@rule("pre")
def code_block_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render fenced code blocks with a detected language."""
    language = extract_language(el)
    code = collect_inline_code_content(el)
    # A newline directly after <pre> and before </pre> is markup, not code
    if code.startswith("\n"):
        code = code[1:]
    if code.endswith("\n"):
        code = code[:-1]

    fence = calculate_code_fence(options.fence_char, code)
    return f"\n\n{fence}{language}\n{code}\n{fence}\n\n"


@rule("hr")
def horizontal_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render thematic breaks; decorative rules inside headings are dropped."""
    if closest(el, HEADING_TAGS) is not None:
        return ""
    return f"\n\n{options.horizontal_rule}\n\n"


@rule("br")
def line_break_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render line breaks as a blank line."""
    return "\n\n"


@rule("blockquote")
def blockquote_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Prefix every line of the quoted content with ``> ``."""
    content = content.strip()
    if not content:
        return None

    content = _MULTI_NEWLINE.sub("\n\n", content)
    quoted = "\n".join("> " + line for line in content.split("\n"))
    return f"\n\n{quoted}\n\n"


@rule("noscript")
def noscript_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Drop ``<noscript>`` fallbacks."""
    return ""


@rule("iframe")
def iframe_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render iframes as a placeholder link.

    Inline HTML documents (``data:text/html`` sources) are not converted;
    a static marker stands in for them.
    """
    src = get_attribute(el, "src").strip()
    if not src:
        return ""

    if src.startswith("data:text/html"):
        _, comma, payload = src.partition(",")
        if not comma:
            return ""
        if _MALFORMED_PERCENT_ESCAPE.search(payload):
            logger.debug("Skipping iframe with malformed data URI escape")
            return ""
        try:
            unquote(payload, errors="strict")
        except UnicodeDecodeError:
            logger.debug("Skipping iframe with undecodable data URI")
            return ""
        return IFRAME_CONTENT_PLACEHOLDER

    return f"[iframe]({get_absolute_url(src, options.domain)})"


@rule("figure")
def figure_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render figures as a standalone block."""
    return f"\n\n{content.strip()}\n\n"


@rule("figcaption")
def figcaption_rule(content: str, el: PageElement, options: ConverterOptions) -> str | None:
    """Render figure captions in italics."""
    trimmed = content.strip()
    if not trimmed:
        return None
    return f"\n\n*{trimmed}*\n\n"


commonmark_rules: list[Rule] = [
    list_rule,
    list_item_rule,
    paragraph_rule,
    heading_rule,
    bold_rule,
    italic_rule,
    image_rule,
    link_rule,
    inline_code_rule,
    code_block_rule,
    horizontal_rule,
    line_break_rule,
    blockquote_rule,
    noscript_rule,
    iframe_rule,
    figure_rule,
    figcaption_rule,
]
