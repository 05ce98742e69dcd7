"""html2gfm - Rule-driven HTML to GitHub Flavored Markdown conversion.

html2gfm converts a parsed BeautifulSoup tree into CommonMark / GitHub
Flavored Markdown. Conversion is driven by a registry of per-tag rules: each
rule receives the already converted Markdown of an element's children and
returns the Markdown for the element itself. Rules can contribute header and
footer fragments (reference-link definitions, for example) that are gathered
at the document root.

Key Features
------------
- CommonMark coverage: headings, emphasis, links, images, code, lists,
  blockquotes, thematic breaks
- GFM tables with alignment, strikethrough and task lists
- Nested list indentation aligned to the parent item's text column
- Code fences that never collide with backticks in the code
- Fluent extension API: custom rules, plugins, keep/remove tags and
  before/after hooks

Requirements
------------
- Python 3.10+
- beautifulsoup4

Examples
--------
One-call conversion:

    >>> from html2gfm import html_to_markdown
    >>> html_to_markdown("<ul><li>A<ul><li>B</li></ul></li></ul>")
    '- A\\n  - B'

Building a converter:

    >>> from html2gfm import create_converter
    >>> converter = create_converter(heading_style="setext").keep("svg")
    >>> markdown = converter.convert_string(html)

See Also
--------
html2gfm.rules : Built-in conversion rules
html2gfm.plugins : Table and GFM plugins

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "html2gfm requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from html2gfm.api import create_converter, html_to_markdown  # noqa: E402
from html2gfm.converter import Converter  # noqa: E402
from html2gfm.exceptions import (  # noqa: E402
    Html2GfmError,
    InputError,
    InvalidRuleError,
    PluginNotFoundError,
    ValidationError,
)
from html2gfm.options import ConverterOptions  # noqa: E402
from html2gfm.plugins import gfm_plugin, table_plugin  # noqa: E402
from html2gfm.rules import (  # noqa: E402
    AdvancedRule,
    ConversionResult,
    Rule,
    advanced_rule,
    commonmark_rules,
    rule,
    text_rule,
)

__all__ = [
    "__version__",
    "AdvancedRule",
    "ConversionResult",
    "Converter",
    "ConverterOptions",
    "Html2GfmError",
    "InputError",
    "InvalidRuleError",
    "PluginNotFoundError",
    "Rule",
    "ValidationError",
    "advanced_rule",
    "commonmark_rules",
    "create_converter",
    "gfm_plugin",
    "html_to_markdown",
    "rule",
    "table_plugin",
    "text_rule",
]
