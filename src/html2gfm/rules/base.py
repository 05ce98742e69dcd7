#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/rules/base.py
"""Rule types used by the converter.

A rule is bound to a set of tag names and converts an element, given the
already converted Markdown of its children, into Markdown. Returning ``None``
declines the element so the next rule registered for the tag (or, failing
that, passthrough of the child Markdown) applies.

Two variants exist:

- :class:`Rule` returns a Markdown string.
- :class:`AdvancedRule` returns a :class:`ConversionResult`, which may carry
  ``header`` and ``footer`` fragments that bubble up to the document root
  (reference-link definitions, for example).

Examples
--------
Defining rules with the decorators:

    >>> @rule("mark")
    ... def mark_rule(content, el, options):
    ...     return f"=={content}==" if content.strip() else ""
    >>>
    >>> @advanced_rule("abbr")
    ... def abbr_rule(content, el, options):
    ...     title = el.get("title")
    ...     if not title:
    ...         return None
    ...     return ConversionResult(markdown=content, footer=f"*[{content}]: {title}")

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Iterable, Optional, Union

from bs4.element import PageElement

from html2gfm.exceptions import InvalidRuleError

if TYPE_CHECKING:
    from html2gfm.options import ConverterOptions

SimpleConvertFn = Callable[[str, PageElement, "ConverterOptions"], Optional[str]]
AdvancedConvertFn = Callable[[str, PageElement, "ConverterOptions"], Optional["ConversionResult"]]


@dataclass
class ConversionResult:
    """Markdown for one element plus fragments bubbling to the document root.

    Parameters
    ----------
    markdown : str
        Markdown that replaces the element in place
    header : str, optional
        Fragment placed before the document body
    footer : str, optional
        Fragment placed after the document body

    """

    markdown: str
    header: str | None = None
    footer: str | None = None


def _normalize_tags(tags: Union[str, Iterable[str]]) -> frozenset[str]:
    if isinstance(tags, str):
        tags = [tags]
    return frozenset(tag.lower() for tag in tags)


@dataclass(frozen=True)
class Rule:
    """A tag-scoped conversion returning Markdown text.

    Parameters
    ----------
    tags : Iterable[str]
        Tag names this rule applies to (case-insensitive). ``"#text"``
        registers a rule for text nodes.
    convert : callable
        ``convert(content, el, options) -> str | None``
    name : str, optional
        Label used in log messages; defaults to the function name

    """

    tags: frozenset[str]
    convert: SimpleConvertFn
    name: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        """Normalize tag names and reject rules that cannot apply anywhere."""
        object.__setattr__(self, "tags", _normalize_tags(self.tags))
        if not self.tags:
            raise InvalidRuleError(self, "A conversion rule must declare at least one tag")
        if not callable(self.convert):
            raise InvalidRuleError(self, f"Rule convert function is not callable: {self.convert!r}")
        if not self.name:
            object.__setattr__(self, "name", getattr(self.convert, "__name__", "rule"))

    def apply(self, content: str, el: PageElement, options: ConverterOptions) -> ConversionResult | None:
        """Run the rule and wrap its output in a :class:`ConversionResult`."""
        markdown = self.convert(content, el, options)
        if markdown is None:
            return None
        return ConversionResult(markdown=markdown)

    def __call__(self, content: str, el: PageElement, options: ConverterOptions):
        """Call the underlying convert function directly."""
        return self.convert(content, el, options)


@dataclass(frozen=True)
class AdvancedRule(Rule):
    """A tag-scoped conversion that may contribute header/footer fragments.

    ``convert(content, el, options)`` returns a :class:`ConversionResult` or
    ``None``. A bare string is accepted and treated as Markdown without
    fragments.
    """

    convert: AdvancedConvertFn  # type: ignore[assignment]

    def apply(self, content: str, el: PageElement, options: ConverterOptions) -> ConversionResult | None:
        """Run the rule, passing its :class:`ConversionResult` through."""
        result = self.convert(content, el, options)
        if isinstance(result, str):
            return ConversionResult(markdown=result)
        return result


def rule(*tags: str) -> Callable[[SimpleConvertFn], Rule]:
    """Decorate a function as a :class:`Rule` for ``tags``."""

    def decorator(fn: SimpleConvertFn) -> Rule:
        return Rule(tags=frozenset(tags), convert=fn)

    return decorator


def advanced_rule(*tags: str) -> Callable[[AdvancedConvertFn], AdvancedRule]:
    """Decorate a function as an :class:`AdvancedRule` for ``tags``."""

    def decorator(fn: AdvancedConvertFn) -> AdvancedRule:
        return AdvancedRule(tags=frozenset(tags), convert=fn)

    return decorator
