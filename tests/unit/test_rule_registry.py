#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for rule types and the rule registry."""

import pytest
from bs4 import BeautifulSoup

from html2gfm.exceptions import InvalidRuleError
from html2gfm.options import ConverterOptions
from html2gfm.registry import RuleRegistry
from html2gfm.rules.base import AdvancedRule, ConversionResult, Rule, advanced_rule, rule


@pytest.fixture
def element():
    """Provide a simple element to pass to rules."""
    return BeautifulSoup("<b>x</b>", "html.parser").b


@pytest.fixture
def options():
    """Provide default options."""
    return ConverterOptions()


@rule("B", "strong")
def upper_rule(content, el, options):
    return content.upper()


@rule("b")
def declining_rule(content, el, options):
    return None


@advanced_rule("a")
def footer_rule(content, el, options):
    return ConversionResult(markdown=content, footer="note")


@pytest.mark.unit
class TestRuleTypes:
    """Tests for Rule, AdvancedRule and the decorators."""

    def test_decorator_builds_rule(self):
        """Test that @rule produces a Rule with lower-cased tags."""
        assert isinstance(upper_rule, Rule)
        assert upper_rule.tags == frozenset({"b", "strong"})
        assert upper_rule.name == "upper_rule"

    def test_advanced_decorator(self):
        """Test that @advanced_rule produces an AdvancedRule."""
        assert isinstance(footer_rule, AdvancedRule)

    def test_rule_is_callable(self, element, options):
        """Test that a rule can be called like its function."""
        assert upper_rule("abc", element, options) == "ABC"

    def test_apply_wraps_result(self, element, options):
        """Test that Rule.apply wraps strings in a ConversionResult."""
        assert upper_rule.apply("abc", element, options) == ConversionResult(markdown="ABC")

    def test_apply_passes_decline_through(self, element, options):
        """Test that a declining rule yields None."""
        assert declining_rule.apply("abc", element, options) is None

    def test_advanced_apply_keeps_fragments(self, element, options):
        """Test that AdvancedRule.apply returns the result unchanged."""
        result = footer_rule.apply("abc", element, options)
        assert result == ConversionResult(markdown="abc", footer="note")

    def test_advanced_rule_accepts_string(self, element, options):
        """Test that an advanced rule returning a string is wrapped."""
        plain = AdvancedRule(tags=frozenset({"x"}), convert=lambda c, e, o: "md")
        assert plain.apply("", element, options) == ConversionResult(markdown="md")

    def test_single_string_tag(self):
        """Test that a bare string is treated as one tag."""
        assert Rule(tags="Div", convert=lambda c, e, o: c).tags == frozenset({"div"})

    def test_rule_without_tags_rejected(self):
        """Test that a rule must declare at least one tag."""
        with pytest.raises(InvalidRuleError):
            Rule(tags=frozenset(), convert=lambda c, e, o: c)

    def test_non_callable_convert_rejected(self):
        """Test that convert must be callable."""
        with pytest.raises(InvalidRuleError):
            Rule(tags=frozenset({"p"}), convert="not callable")


@pytest.mark.unit
class TestRuleRegistry:
    """Tests for RuleRegistry."""

    def test_add_registers_every_tag(self):
        """Test that a rule is registered under each of its tags."""
        registry = RuleRegistry()
        registry.add(upper_rule)

        assert registry.rules_for("b") == [upper_rule]
        assert registry.rules_for("STRONG") == [upper_rule]
        assert registry.tags == ["b", "strong"]
        assert len(registry) == 1

    def test_add_rejects_non_rules(self):
        """Test that plain callables cannot be registered."""
        registry = RuleRegistry()
        with pytest.raises(InvalidRuleError):
            registry.add(lambda c, e, o: c)

    def test_dispatch_first_non_none_wins(self, element, options):
        """Test that a declining rule falls through to the next one."""
        registry = RuleRegistry()
        registry.add_all([declining_rule, upper_rule])

        assert registry.dispatch("b", "abc", element, options) == ConversionResult(markdown="ABC")

    def test_dispatch_registration_order(self, element, options):
        """Test that earlier rules take precedence."""
        first = Rule(tags=frozenset({"b"}), convert=lambda c, e, o: "first")
        second = Rule(tags=frozenset({"b"}), convert=lambda c, e, o: "second")
        registry = RuleRegistry()
        registry.add_all([first, second])

        assert registry.dispatch("b", "", element, options).markdown == "first"

    def test_dispatch_all_decline(self, element, options):
        """Test that dispatch returns None when no rule applies."""
        registry = RuleRegistry()
        registry.add(declining_rule)

        assert registry.dispatch("b", "abc", element, options) is None
        assert registry.dispatch("i", "abc", element, options) is None

    def test_keep_and_remove(self):
        """Test the keep and remove tag sets."""
        registry = RuleRegistry()
        registry.keep(["SVG"])
        registry.remove(["script"])

        assert registry.is_kept("svg")
        assert registry.is_removed("script")
        assert not registry.is_kept("script")
        assert not registry.has_rules("svg")
