"""Pytest configuration and shared fixtures for the html2gfm test suite.

This module provides shared fixtures, test configuration, and helpers that
are used across the entire test suite.
"""

import os
from typing import Callable

import pytest
from bs4 import BeautifulSoup
from hypothesis import Phase, Verbosity, settings

from html2gfm import Converter, commonmark_rules, create_converter, text_rule

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def soup() -> Callable[[str], BeautifulSoup]:
    """Provide a parser turning an HTML string into a BeautifulSoup document.

    Returns
    -------
    Callable[[str], BeautifulSoup]
        Function parsing HTML with the ``html.parser`` backend.

    """

    def parse(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")

    return parse


@pytest.fixture
def converter() -> Converter:
    """Provide a fully configured converter (CommonMark rules + GFM plugin)."""
    return create_converter()


@pytest.fixture
def commonmark_converter() -> Converter:
    """Provide a converter with only the text rule and the CommonMark rules."""
    return Converter().add_rules(text_rule, *commonmark_rules)

