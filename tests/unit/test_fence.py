#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for code fence sizing and language detection.

Includes Hypothesis properties for fence safety: a fence is always longer
than any run of its character inside the code and never shorter than three.
"""

import re

import pytest
from bs4 import BeautifulSoup
from hypothesis import given, strategies as st

from html2gfm.utils.fence import (
    calculate_code_fence,
    closes_fence,
    collect_inline_code_content,
    extract_language,
    fence_marker,
)


def _longest_run(char: str, text: str) -> int:
    runs = re.findall(f"{re.escape(char)}+", text)
    return max((len(run) for run in runs), default=0)


@pytest.mark.unit
class TestCalculateCodeFence:
    """Tests for calculate_code_fence."""

    def test_minimum_length(self):
        """Test that plain code gets a three character fence."""
        assert calculate_code_fence("`", "print('hi')") == "```"

    def test_empty_content(self):
        """Test that empty code still gets the minimum fence."""
        assert calculate_code_fence("`", "") == "```"

    def test_short_runs_do_not_grow_fence(self):
        """Test that runs shorter than three do not affect the fence."""
        assert calculate_code_fence("`", "a `b` ``c``") == "```"

    def test_four_backticks_need_five(self):
        """Test that a run of four backticks requires a five backtick fence."""
        assert calculate_code_fence("`", "before ```` after") == "`````"

    def test_longest_run_wins(self):
        """Test that the longest run determines the length."""
        assert calculate_code_fence("`", "``` and ``````") == "```````"

    def test_tilde_fence(self):
        """Test that tilde fences count tilde runs only."""
        assert calculate_code_fence("~", "~~~~ ````") == "~~~~~"


@pytest.mark.unit
@pytest.mark.fuzzing
class TestCodeFenceProperties:
    """Property-based tests for fence safety."""

    @given(st.text(alphabet="`~ ab\n", max_size=200), st.sampled_from(["`", "~"]))
    def test_fence_exceeds_longest_run(self, content, char):
        """Property: the fence is longer than every run and at least three long."""
        fence = calculate_code_fence(char, content)

        assert set(fence) == {char}
        assert len(fence) > _longest_run(char, content)
        assert len(fence) >= 3

    @given(st.text(alphabet="`x\n", max_size=200))
    def test_fence_never_occurs_in_content(self, content):
        """Property: the fence string never appears inside the code."""
        assert calculate_code_fence("`", content) not in content


@pytest.mark.unit
class TestExtractLanguage:
    """Tests for extract_language."""

    @pytest.mark.parametrize(
        "class_attr,expected",
        [
            ("language-python", "python"),
            ("lang-js", "js"),
            ("hljs-ruby", "ruby"),
            ("highlight language-rust", "rust"),
            ("python", "python"),
            ("not-a-language", ""),
        ],
    )
    def test_code_class_conventions(self, class_attr, expected):
        """Test that language class conventions on <code> are recognized."""
        soup = BeautifulSoup(f'<pre><code class="{class_attr}">x</code></pre>', "html.parser")
        assert extract_language(soup.pre) == expected

    def test_no_class(self):
        """Test that a code block without classes has no language."""
        soup = BeautifulSoup("<pre><code>x</code></pre>", "html.parser")
        assert extract_language(soup.pre) == ""

    def test_falls_back_to_pre_class(self):
        """Test that the <pre> class is used when <code> has no language."""
        soup = BeautifulSoup('<pre class="language-go"><code>x</code></pre>', "html.parser")
        assert extract_language(soup.pre) == "go"

    def test_code_class_takes_precedence(self):
        """Test that the <code> language wins over the <pre> language."""
        soup = BeautifulSoup('<pre class="language-go"><code class="language-c">x</code></pre>', "html.parser")
        assert extract_language(soup.pre) == "c"


@pytest.mark.unit
class TestCollectInlineCodeContent:
    """Tests for collect_inline_code_content."""

    def test_text_is_not_escaped(self):
        """Test that Markdown characters in code are kept verbatim."""
        soup = BeautifulSoup("<code>a_b * [c]</code>", "html.parser")
        assert collect_inline_code_content(soup.code) == "a_b * [c]"

    def test_br_becomes_newline(self):
        """Test that <br> elements become newlines."""
        soup = BeautifulSoup("<code>one<br>two</code>", "html.parser")
        assert collect_inline_code_content(soup.code) == "one\ntwo"

    def test_nested_markup_flattened(self):
        """Test that text of nested elements is collected in order."""
        soup = BeautifulSoup('<code><span class="k">def</span> f():</code>', "html.parser")
        assert collect_inline_code_content(soup.code) == "def f():"


@pytest.mark.unit
class TestFenceLines:
    """Tests for fence_marker and closes_fence."""

    @pytest.mark.parametrize(
        "line,expected",
        [("```", "```"), ("````python", "````"), ("  ~~~", "~~~"), ("~~~~ a`b", "~~~~")],
    )
    def test_fence_openers(self, line, expected):
        """Test lines that open a code block."""
        assert fence_marker(line) == expected

    @pytest.mark.parametrize("line", ["text", "``", "```parse()``` call", "- ```"])
    def test_not_fences(self, line):
        """Test plain lines and inline code are not fences."""
        assert fence_marker(line) is None

    def test_closing_fence(self):
        """Test that a fence closes with the same character and at least its length."""
        assert closes_fence("```", "```")
        assert closes_fence("  `````", "```")
        assert not closes_fence("``", "```")
        assert not closes_fence("~~~", "```")
        assert not closes_fence("```python", "```")
