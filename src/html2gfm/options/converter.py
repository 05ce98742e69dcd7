#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/options/converter.py
"""Configuration options for HTML-to-Markdown conversion.

This module defines the immutable options record shared read-only by every
rule during a conversion.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields

from html2gfm.constants import (
    DEFAULT_BULLET_LIST_MARKER,
    DEFAULT_CODE_BLOCK_STYLE,
    DEFAULT_EM_DELIMITER,
    DEFAULT_ESCAPE_MODE,
    DEFAULT_FENCE,
    DEFAULT_HEADING_STYLE,
    DEFAULT_HORIZONTAL_RULE,
    DEFAULT_LINK_REFERENCE_STYLE,
    DEFAULT_LINK_STYLE,
    DEFAULT_STRONG_DELIMITER,
    BulletListMarker,
    CodeBlockStyle,
    EmDelimiter,
    EscapeMode,
    FenceStyle,
    HeadingStyle,
    LinkReferenceStyle,
    LinkStyle,
    StrongDelimiter,
)
from html2gfm.options.base import CloneFrozenMixin

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConverterOptions(CloneFrozenMixin):
    r"""Markdown output options for the rule-driven converter.

    Every field is optional and independently defaulted. Values outside the
    documented choices are not rejected: rules treat them like the
    default-like branch (for example any ``heading_style`` other than
    ``"setext"`` produces ATX headings).

    Parameters
    ----------
    heading_style : {"atx", "setext"}, default "atx"
        ``"atx"`` emits ``# Heading``. ``"setext"`` underlines level 1 and 2
        headings with ``=`` and ``-``; deeper levels stay ATX.
    horizontal_rule : str, default "\* \* \*"
        Token emitted for ``<hr>``.
    bullet_list_marker : {"-", "+", "\*"}, default "-"
        Marker used for unordered list items.
    code_block_style : {"fenced", "indented"}, default "fenced"
        Only the fenced style has rule coverage.
    fence : {"\`\`\`", "~~~"}, default "\`\`\`"
        Code block fence; its first character is repeated as needed.
    em_delimiter : {"\_", "\*"}, default "\_"
        Delimiter for ``<em>``/``<i>``.
    strong_delimiter : {"\*\*", "\_\_"}, default "\*\*"
        Delimiter for ``<strong>``/``<b>``.
    link_style : {"inlined", "referenced"}, default "inlined"
        ``"inlined"`` emits ``[text](href)``. ``"referenced"`` emits
        ``[text][n]`` with a numbered definition at the end of the document.
    link_reference_style : {"full", "collapsed", "shortcut"}, default "full"
        Only ``"full"`` has rule coverage.
    escape_mode : {"basic", "disabled"}, default "basic"
        ``"basic"`` escapes Markdown characters in text nodes.
    domain : str or None, default None
        Base URL used to resolve relative ``href``/``src`` values. When
        unset, relative URLs pass through unchanged.

    """

    heading_style: HeadingStyle = field(
        default=DEFAULT_HEADING_STYLE,
        metadata={"help": "Heading style for h1-h6", "choices": ["atx", "setext"]},
    )
    horizontal_rule: str = field(
        default=DEFAULT_HORIZONTAL_RULE,
        metadata={"help": "Token emitted for horizontal rules"},
    )
    bullet_list_marker: BulletListMarker = field(
        default=DEFAULT_BULLET_LIST_MARKER,
        metadata={"help": "Marker for unordered list items", "choices": ["-", "+", "*"]},
    )
    code_block_style: CodeBlockStyle = field(
        default=DEFAULT_CODE_BLOCK_STYLE,
        metadata={"help": "Code block style", "choices": ["indented", "fenced"]},
    )
    fence: FenceStyle = field(
        default=DEFAULT_FENCE,
        metadata={"help": "Fence used for code blocks", "choices": ["```", "~~~"]},
    )
    em_delimiter: EmDelimiter = field(
        default=DEFAULT_EM_DELIMITER,
        metadata={"help": "Delimiter for emphasis", "choices": ["_", "*"]},
    )
    strong_delimiter: StrongDelimiter = field(
        default=DEFAULT_STRONG_DELIMITER,
        metadata={"help": "Delimiter for strong emphasis", "choices": ["**", "__"]},
    )
    link_style: LinkStyle = field(
        default=DEFAULT_LINK_STYLE,
        metadata={"help": "Inline or reference-style links", "choices": ["inlined", "referenced"]},
    )
    link_reference_style: LinkReferenceStyle = field(
        default=DEFAULT_LINK_REFERENCE_STYLE,
        metadata={"help": "Reference link style", "choices": ["full", "collapsed", "shortcut"]},
    )
    escape_mode: EscapeMode = field(
        default=DEFAULT_ESCAPE_MODE,
        metadata={"help": "Escape Markdown characters in text", "choices": ["basic", "disabled"]},
    )
    domain: str | None = field(
        default=None,
        metadata={"help": "Base URL for resolving relative links and images"},
    )

    def __post_init__(self) -> None:
        """Log option values that fall outside their documented choices.

        Unrecognized values are kept as given; rules fall back to their
        default-like behavior for them.
        """
        for f in fields(self):
            choices = f.metadata.get("choices")
            value = getattr(self, f.name)
            if choices and value not in choices:
                logger.debug("Unrecognized value %r for option '%s'; rules fall back to defaults", value, f.name)

    @property
    def fence_char(self) -> str:
        """Character repeated to build code block fences."""
        return self.fence[0] if self.fence else DEFAULT_FENCE[0]
