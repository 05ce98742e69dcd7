#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2gfm/registry.py
"""Rule registry for tag-keyed dispatch.

The registry maps each tag name to the ordered list of rules registered for
it and holds the keep/remove tag sets. It is populated while a converter is
built and only read during conversion.

Examples
--------
    >>> registry = RuleRegistry()
    >>> registry.add(bold_rule)
    >>> [rule.name for rule in registry.rules_for("b")]
    ['bold_rule']

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from bs4.element import PageElement

from html2gfm.exceptions import InvalidRuleError
from html2gfm.rules.base import ConversionResult, Rule

if TYPE_CHECKING:
    from html2gfm.options import ConverterOptions

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Ordered tag -> rule lists plus the keep and remove tag sets.

    Rules registered for the same tag are tried in registration order; the
    first one returning a non-``None`` result wins.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._rules: dict[str, list[Rule]] = {}
        self._keep_tags: set[str] = set()
        self._remove_tags: set[str] = set()

    def add(self, rule: Rule) -> None:
        """Append ``rule`` to the rule list of every tag it declares.

        Raises
        ------
        InvalidRuleError
            If ``rule`` is not a :class:`Rule` instance

        """
        if not isinstance(rule, Rule):
            raise InvalidRuleError(rule)

        for tag in sorted(rule.tags):
            self._rules.setdefault(tag, []).append(rule)
        logger.debug("Registered rule '%s' for tags: %s", rule.name, ", ".join(sorted(rule.tags)))

    def add_all(self, rules: Iterable[Rule]) -> None:
        """Register each rule of ``rules`` in order."""
        for rule in rules:
            self.add(rule)

    def rules_for(self, tag: str) -> list[Rule]:
        """Return the rules registered for ``tag``, in registration order."""
        return list(self._rules.get(tag.lower(), ()))

    def has_rules(self, tag: str) -> bool:
        """Return True if at least one rule is registered for ``tag``."""
        return bool(self._rules.get(tag.lower()))

    @property
    def tags(self) -> list[str]:
        """Tag names that have at least one registered rule."""
        return sorted(self._rules)

    def keep(self, tags: Iterable[str]) -> None:
        """Mark ``tags`` to be emitted as their original HTML."""
        for tag in tags:
            self._keep_tags.add(tag.lower())

    def remove(self, tags: Iterable[str]) -> None:
        """Mark ``tags`` to be dropped together with their subtree."""
        for tag in tags:
            self._remove_tags.add(tag.lower())

    def is_kept(self, tag: str) -> bool:
        """Return True if ``tag`` is emitted verbatim."""
        return tag in self._keep_tags

    def is_removed(self, tag: str) -> bool:
        """Return True if ``tag`` is dropped with its subtree."""
        return tag in self._remove_tags

    def dispatch(
        self, tag: str, content: str, el: PageElement, options: ConverterOptions
    ) -> ConversionResult | None:
        """Apply the first rule for ``tag`` that does not decline.

        Parameters
        ----------
        tag : str
            Tag name (or ``"#text"``) to look up
        content : str
            Converted Markdown of the node's children (the raw text for
            text nodes)
        el : PageElement
            The source node
        options : ConverterOptions
            Shared conversion options

        Returns
        -------
        ConversionResult or None
            The winning rule's result, or None if every rule declined or no
            rule is registered

        """
        for rule in self._rules.get(tag, ()):
            result = rule.apply(content, el, options)
            if result is not None:
                return result
        return None

    def __len__(self) -> int:
        """Return the number of distinct rules registered."""
        return len({id(rule) for rules in self._rules.values() for rule in rules})
