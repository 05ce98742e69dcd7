#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/api.py
"""Convenience entry points for html2gfm.

:func:`create_converter` assembles a converter with the standard rule set
and plugins; :func:`html_to_markdown` converts an HTML string in one call.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from html2gfm.converter import Converter, Plugin
from html2gfm.options import ConverterOptions
from html2gfm.rules import commonmark_rules, text_rule

logger = logging.getLogger(__name__)

# Tags whose content is never document text
DEFAULT_REMOVED_TAGS = ("script", "style", "template")


def _resolve_options(
    options: Union[ConverterOptions, Mapping[str, Any], None], overrides: Mapping[str, Any]
) -> ConverterOptions:
    if options is None:
        options = ConverterOptions()
    elif not isinstance(options, ConverterOptions):
        options = ConverterOptions.from_dict(options)
    if overrides:
        options = options.create_updated(**overrides)
    return options


def create_converter(
    options: Union[ConverterOptions, Mapping[str, Any], None] = None,
    plugins: Iterable[Union[Plugin, str]] = ("gfm",),
    **kwargs: Any,
) -> Converter:
    """Build a converter with the text rule, the CommonMark rules and ``plugins``.

    ``<script>``, ``<style>`` and ``<template>`` elements are removed.

    Parameters
    ----------
    options : ConverterOptions or Mapping, optional
        Conversion options. A mapping is passed to
        :meth:`ConverterOptions.from_dict`.
    plugins : Iterable of plugin or str, default ("gfm",)
        Plugins to apply, as callables or registered names
    kwargs : Any
        Individual option overrides, e.g. ``heading_style="setext"``

    Returns
    -------
    Converter
        The configured converter

    Raises
    ------
    PluginNotFoundError
        If a plugin name cannot be resolved

    Examples
    --------
        >>> converter = create_converter(link_style="referenced")
        >>> converter.convert_string('<a href="/a">A</a>')
        '[A][1]\\n\\n[1]: /a'

    """
    converter = Converter(_resolve_options(options, kwargs))
    converter.add_rules(text_rule, *commonmark_rules)
    converter.use(*plugins)
    converter.remove(*DEFAULT_REMOVED_TAGS)
    return converter


def html_to_markdown(
    html: str,
    options: Optional[Union[ConverterOptions, Mapping[str, Any]]] = None,
    **kwargs: Any,
) -> str:
    """Convert an HTML string to GitHub Flavored Markdown.

    Parameters
    ----------
    html : str
        HTML document or fragment
    options : ConverterOptions or Mapping, optional
        Conversion options
    kwargs : Any
        Individual option overrides

    Returns
    -------
    str
        The converted Markdown

    Raises
    ------
    InputError
        If ``html`` is not a string

    Examples
    --------
        >>> html_to_markdown("<h1>Title</h1><p>Hello <strong>world</strong>.</p>")
        '# Title\\n\\nHello **world**.'

    """
    return create_converter(options, **kwargs).convert_string(html)
