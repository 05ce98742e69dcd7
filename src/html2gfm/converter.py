#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/converter.py
"""HTML tree to Markdown converter.

The :class:`Converter` walks a BeautifulSoup tree depth-first, converting
children before their parent, and dispatches every node to the rules
registered for its tag. Rules are added at build time through a fluent API;
conversion itself only reads the registry, so one converter can be reused for
any number of documents.

Examples
--------
Build a converter and convert a parsed document:

    >>> from bs4 import BeautifulSoup
    >>> from html2gfm import commonmark_rules, rule, text_rule
    >>> converter = Converter().add_rules(text_rule, *commonmark_rules).use("gfm")
    >>> converter.convert(BeautifulSoup("<h1>Title</h1>", "html.parser"))
    '# Title'

Extend it with a custom rule and a post-processing hook:

    >>> @rule("abbr")
    ... def abbr_rule(content, el, options):
    ...     return f"{content} ({el.get('title')})" if el.get("title") else None
    >>> converter.add_rules(abbr_rule).after(lambda md: md + "\\n")

"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Optional, Union

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from html2gfm.constants import TEXT_NODE_TAG
from html2gfm.exceptions import InputError
from html2gfm.options import ConverterOptions
from html2gfm.registry import RuleRegistry
from html2gfm.rules.base import Rule
from html2gfm.state import ConversionState, conversion_state
from html2gfm.utils.decorators import debug_timer
from html2gfm.utils.dom import document_root, is_text_node, tag_name
from html2gfm.utils.lists import preprocess_lists

logger = logging.getLogger(__name__)

BeforeHook = Callable[[PageElement], None]
AfterHook = Callable[[str], str]
Plugin = Callable[["Converter"], Optional[Iterable[Rule]]]

_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_TRAILING_LINE_WHITESPACE = re.compile(r"[ \t]+$", re.MULTILINE)


class Converter:
    """Rule-driven HTML to Markdown converter.

    Parameters
    ----------
    options : ConverterOptions, optional
        Conversion options shared by every rule. Defaults to
        ``ConverterOptions()``.

    Notes
    -----
    The build methods (:meth:`add_rules`, :meth:`use`, :meth:`keep`,
    :meth:`remove`, :meth:`before`, :meth:`after`) all return the converter
    so calls can be chained. They are not meant to be called while a
    conversion is running.

    """

    def __init__(self, options: ConverterOptions | None = None):
        self.options = options or ConverterOptions()
        self.registry = RuleRegistry()
        self._before_hooks: list[BeforeHook] = []
        self._after_hooks: list[AfterHook] = []

    # ------------------------------------------------------------------
    # Build-time API
    # ------------------------------------------------------------------

    def add_rules(self, *rules: Rule) -> Converter:
        """Register rules, appending each to the list of every tag it declares.

        Raises
        ------
        InvalidRuleError
            If an argument is not a :class:`~html2gfm.rules.base.Rule`

        """
        self.registry.add_all(rules)
        return self

    def use(self, *plugins: Union[Plugin, str]) -> Converter:
        """Apply plugins to this converter.

        Each plugin is either a callable taking the converter or the name of
        a built-in or entry-point plugin. A plugin may register hooks or
        keep/remove tags on the converter directly; any rules it returns are
        added.

        Raises
        ------
        PluginNotFoundError
            If a plugin name cannot be resolved

        """
        from html2gfm.plugins import get_plugin

        for plugin in plugins:
            if isinstance(plugin, str):
                plugin = get_plugin(plugin)
            name = getattr(plugin, "__name__", repr(plugin))
            rules = plugin(self)
            if rules:
                self.add_rules(*rules)
            logger.debug("Applied plugin '%s'", name)
        return self

    def keep(self, *tags: str) -> Converter:
        """Emit elements with these tags as their original HTML."""
        self.registry.keep(tags)
        logger.debug("Keeping tags verbatim: %s", ", ".join(tags))
        return self

    def remove(self, *tags: str) -> Converter:
        """Drop elements with these tags together with their content."""
        self.registry.remove(tags)
        logger.debug("Removing tags: %s", ", ".join(tags))
        return self

    def before(self, *hooks: BeforeHook) -> Converter:
        """Register hooks run on the document tree before conversion.

        Hooks receive the root of the document containing the converted node
        and may mutate it in place.
        """
        self._before_hooks.extend(hooks)
        return self

    def after(self, *hooks: AfterHook) -> Converter:
        """Register hooks that transform the final Markdown string, in order."""
        self._after_hooks.extend(hooks)
        return self

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def convert(self, root: PageElement) -> str:
        """Convert a BeautifulSoup document or element to Markdown.

        Parameters
        ----------
        root : BeautifulSoup or Tag
            Tree to convert. Before-hooks may mutate the document it belongs
            to.

        Returns
        -------
        str
            The Markdown document, trimmed

        Raises
        ------
        InputError
            If ``root`` is not a BeautifulSoup element

        """
        if not isinstance(root, Tag):
            raise InputError(
                f"Expected a BeautifulSoup document or Tag, got {type(root).__name__}",
                input_type=type(root),
            )

        with debug_timer(logger, "HTML to Markdown conversion"):
            if self._before_hooks:
                document = document_root(root)
                for hook in self._before_hooks:
                    hook(document)
                logger.debug("Ran %d before-hook(s)", len(self._before_hooks))

            state = ConversionState(list_items=preprocess_lists(root, self.options.bullet_list_marker))
            with conversion_state(state):
                body, headers, footers = self._process_node(root)

            parts = []
            if headers:
                parts.append("\n".join(headers))
            parts.append(body)
            if footers:
                parts.append("\n".join(footers))
            markdown = _normalize_whitespace("\n\n".join(parts))

            for after_hook in self._after_hooks:
                markdown = after_hook(markdown)
            if self._after_hooks:
                logger.debug("Ran %d after-hook(s)", len(self._after_hooks))

        logger.debug("Converted document to %d characters of Markdown", len(markdown))
        return markdown.strip()

    def convert_string(self, html: str) -> str:
        """Parse an HTML string and convert it.

        The ``<body>`` element is converted when present, otherwise the whole
        parsed document.

        Raises
        ------
        InputError
            If ``html`` is not a string

        """
        if not isinstance(html, str):
            raise InputError(f"Expected HTML as str, got {type(html).__name__}", input_type=type(html))

        soup = BeautifulSoup(html, "html.parser")
        return self.convert(soup.body if soup.body is not None else soup)

    def _process_node(self, node: PageElement) -> tuple[str, list[str], list[str]]:
        """Reduce ``node`` to Markdown plus the header and footer fragments of its subtree."""
        if not isinstance(node, Tag):
            if not is_text_node(node):
                return "", [], []
            text = str(node)
            result = self.registry.dispatch(TEXT_NODE_TAG, text, node, self.options)
            if result is None:
                return text, [], []
            return result.markdown, _fragment(result.header), _fragment(result.footer)

        name = tag_name(node)
        if self.registry.is_removed(name):
            return "", [], []
        if self.registry.is_kept(name):
            return str(node), [], []

        pieces: list[str] = []
        headers: list[str] = []
        footers: list[str] = []
        for child in node.children:
            markdown, child_headers, child_footers = self._process_node(child)
            pieces.append(markdown)
            headers.extend(child_headers)
            footers.extend(child_footers)
        content = "".join(pieces)

        # The document object itself is a container, not an element
        if isinstance(node, BeautifulSoup):
            return content, headers, footers

        result = self.registry.dispatch(name, content, node, self.options)
        if result is None:
            return content, headers, footers
        headers.extend(_fragment(result.header))
        footers.extend(_fragment(result.footer))
        return result.markdown, headers, footers


def _fragment(value: str | None) -> list[str]:
    return [value] if value else []


def _normalize_whitespace(markdown: str) -> str:
    markdown = _TRAILING_LINE_WHITESPACE.sub("", markdown)
    markdown = _EXCESS_NEWLINES.sub("\n\n", markdown)
    return markdown.strip()
