#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/rules/__init__.py
"""Conversion rules.

``text_rule`` handles text nodes; ``commonmark_rules`` covers the baseline
CommonMark elements. GFM extensions live in :mod:`html2gfm.plugins`.
"""

from html2gfm.rules.base import AdvancedRule, ConversionResult, Rule, advanced_rule, rule
from html2gfm.rules.commonmark import commonmark_rules
from html2gfm.rules.text import text_rule

__all__ = [
    "AdvancedRule",
    "ConversionResult",
    "Rule",
    "advanced_rule",
    "commonmark_rules",
    "rule",
    "text_rule",
]
