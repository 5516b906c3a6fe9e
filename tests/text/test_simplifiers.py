"""Tests for the text simplifiers.

Covers:
- Case folding, non-word replacement, whitespace collapsing, diacritics
- CaseSplitter across camelCase, PascalCase, snake_case, kebab-case,
  acronyms and digit boundaries
- Chain applies simplifiers in order and validates its members
"""

from __future__ import annotations

import pytest

from string_metrics.protocols import Simplifier
from string_metrics.text.simplifiers import (
    CaseSplitter,
    Chain,
    CollapseWhitespace,
    RemoveDiacritics,
    ReplaceNonWord,
    ToLowerCase,
    ToUpperCase,
    chain,
)


class TestCaseFolding:
    def test_lower(self) -> None:
        assert ToLowerCase().simplify("To Repeat") == "to repeat"

    def test_upper(self) -> None:
        assert ToUpperCase().simplify("To Repeat") == "TO REPEAT"


class TestReplaceNonWord:
    def test_default_replacement(self) -> None:
        assert ReplaceNonWord().simplify("sentence. It's") == "sentence It s"

    def test_custom_replacement(self) -> None:
        assert ReplaceNonWord("").simplify("a-b, c!") == "abc"

    def test_repr(self) -> None:
        assert repr(ReplaceNonWord()) == "ReplaceNonWord(replacement=' ')"


class TestCollapseWhitespace:
    def test_collapses_and_strips(self) -> None:
        assert CollapseWhitespace().simplify("  to \t repeat\n ") == "to repeat"


class TestRemoveDiacritics:
    def test_strips_accents(self) -> None:
        assert RemoveDiacritics().simplify("Crème brûlée") == "Creme brulee"

    def test_plain_ascii_unchanged(self) -> None:
        assert RemoveDiacritics().simplify("plain") == "plain"


class TestCaseSplitter:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("camelCase", "camel case"),
            ("PascalCase", "pascal case"),
            ("snake_case", "snake case"),
            ("kebab-case", "kebab case"),
            ("APIKey", "api key"),
            ("URLParser", "url parser"),
            ("address2", "address 2"),
            ("v2Config", "v 2 config"),
            ("some__key", "some key"),
            ("user_name-field", "user name field"),
        ],
    )
    def test_conventions(self, raw: str, expected: str) -> None:
        assert CaseSplitter().simplify(raw) == expected

    def test_empty(self) -> None:
        assert CaseSplitter().simplify("") == ""


class TestChain:
    def test_applies_in_order(self) -> None:
        simplifier = chain(ReplaceNonWord("_"), CaseSplitter())
        assert simplifier.simplify("userName.firstName") == "user name first name"

    def test_order_matters(self) -> None:
        upper_then_split = chain(ToUpperCase(), CaseSplitter())
        split_then_upper = chain(CaseSplitter(), ToUpperCase())
        assert upper_then_split.simplify("userName") == "username"
        assert split_then_upper.simplify("userName") == "USER NAME"

    def test_exposes_members(self) -> None:
        lower = ToLowerCase()
        assert chain(lower).simplifiers == (lower,)

    def test_rejects_non_simplifier(self) -> None:
        with pytest.raises(TypeError, match="Simplifier"):
            Chain((ToLowerCase(), str.lower))  # type: ignore[arg-type]

    def test_is_a_simplifier(self) -> None:
        assert isinstance(chain(), Simplifier)
        assert chain().simplify("Same") == "Same"

    def test_equality_and_repr(self) -> None:
        assert chain(ToLowerCase()) == chain(ToLowerCase())
        assert repr(chain(ToLowerCase())) == "Chain(simplifiers=[ToLowerCase()])"
