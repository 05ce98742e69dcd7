#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the html2gfm library.

This module centralizes the hardcoded values and default configuration
constants used across html2gfm.

Constants are organized by category:
1. Type Definitions - Literal types used by the option classes
2. Markdown Formatting Defaults - Defaults for ``ConverterOptions``
3. Element Classification - Tag sets consulted by rules and utilities
4. Code Fences - Fence sizing and language detection
5. Tables - Alignment markers for GFM tables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HeadingStyle = Literal["atx", "setext"]
BulletListMarker = Literal["-", "+", "*"]
CodeBlockStyle = Literal["indented", "fenced"]
FenceStyle = Literal["```", "~~~"]
EmDelimiter = Literal["_", "*"]
StrongDelimiter = Literal["**", "__"]
LinkStyle = Literal["inlined", "referenced"]
LinkReferenceStyle = Literal["full", "collapsed", "shortcut"]
EscapeMode = Literal["basic", "disabled"]

# =============================================================================
# Markdown Formatting Defaults
# =============================================================================

DEFAULT_HEADING_STYLE: HeadingStyle = "atx"
DEFAULT_HORIZONTAL_RULE = "* * *"
DEFAULT_BULLET_LIST_MARKER: BulletListMarker = "-"
DEFAULT_CODE_BLOCK_STYLE: CodeBlockStyle = "fenced"
DEFAULT_FENCE: FenceStyle = "```"
DEFAULT_EM_DELIMITER: EmDelimiter = "_"
DEFAULT_STRONG_DELIMITER: StrongDelimiter = "**"
DEFAULT_LINK_STYLE: LinkStyle = "inlined"
DEFAULT_LINK_REFERENCE_STYLE: LinkReferenceStyle = "full"
DEFAULT_ESCAPE_MODE: EscapeMode = "basic"

# Pseudo tag under which the text-node rule is registered
TEXT_NODE_TAG = "#text"

# =============================================================================
# Element Classification
# =============================================================================

# Elements that do not create block breaks
INLINE_ELEMENTS = frozenset(
    {
        "a",
        "abbr",
        "acronym",
        "b",
        "bdo",
        "big",
        "br",
        "button",
        "cite",
        "code",
        "dfn",
        "em",
        "i",
        "img",
        "input",
        "kbd",
        "label",
        "map",
        "object",
        "output",
        "q",
        "samp",
        "script",
        "select",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "textarea",
        "time",
        "tt",
        "var",
    }
)

LIST_TAGS = frozenset({"ul", "ol"})
HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})

# =============================================================================
# Code Fences
# =============================================================================

MIN_CODE_FENCE_LENGTH = 3

# Class prefixes that carry a code block language (language-js, lang-js, hljs-js)
CODE_LANGUAGE_CLASS_PREFIXES = ("language-", "lang-", "hljs-")

# Bare class names accepted as a language when no prefix is present
COMMON_CODE_LANGUAGES = frozenset(
    {
        "javascript",
        "js",
        "typescript",
        "ts",
        "python",
        "py",
        "ruby",
        "rb",
        "java",
        "go",
        "rust",
        "c",
        "cpp",
        "csharp",
        "cs",
        "php",
        "swift",
        "kotlin",
        "scala",
        "bash",
        "sh",
        "shell",
        "zsh",
        "powershell",
        "ps1",
        "sql",
        "html",
        "css",
        "scss",
        "sass",
        "less",
        "json",
        "yaml",
        "yml",
        "xml",
        "markdown",
        "md",
        "plaintext",
        "text",
        "diff",
        "dockerfile",
    }
)

# Placeholder emitted for iframes whose source is an inline HTML document
IFRAME_CONTENT_PLACEHOLDER = "[iframe content]"

# =============================================================================
# Tables
# =============================================================================

TABLE_ALIGNMENT_MAPPING = {
    "left": ":---",
    "right": "---:",
    "center": ":---:",
}
DEFAULT_TABLE_ALIGNMENT = "---"

# =============================================================================
# Plugins
# =============================================================================

PLUGIN_ENTRY_POINT_GROUP = "html2gfm.plugins"
