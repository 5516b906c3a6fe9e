"""Text simplifiers applied before tokenization.

Every simplifier is a small immutable object with a pure, total
``simplify(text) -> str`` method.  ``Chain`` applies several in order.

CaseSplitter turns identifiers into lowercase words and handles four naming
conventions:
- camelCase (e.g. "camelCase" -> "camel case")
- PascalCase (e.g. "PascalCase" -> "pascal case")
- snake_case (e.g. "snake_case" -> "snake case")
- kebab-case (e.g. "kebab-case" -> "kebab case")

plus acronyms ("APIKey" -> "api key") and digit boundaries
("address2" -> "address 2").
"""

from __future__ import annotations

import re
import unicodedata

from string_metrics.protocols import Simplifier

__all__ = [
    "CaseSplitter",
    "Chain",
    "CollapseWhitespace",
    "RemoveDiacritics",
    "ReplaceNonWord",
    "ToLowerCase",
    "ToUpperCase",
    "chain",
]

# Compiled regex patterns (module-level, compiled once)

_NON_WORD = re.compile(r"\W+")
_WHITESPACE = re.compile(r"\s+")

# snake_case and kebab-case separators
_SEP = re.compile(r"[_\-]+")

# camelCase boundary: lowercase letter followed by uppercase letter
_UPPER_LOWER = re.compile(r"([a-z])([A-Z])")

# Acronym run before an uppercase+lowercase pair ("URLParser" -> "URL Parser")
_UPPER_RUN = re.compile(r"([A-Z]+)([A-Z][a-z])")

# Letter/digit boundaries in both directions.
# NOTE: applied twice because each match consumes both characters, so in
# "v2Config" the "2C" boundary only becomes visible after the first pass.
_DIGIT_BOUNDARY = re.compile(r"([a-zA-Z])(\d)|(\d)([a-zA-Z])")


class ToLowerCase:
    """Lowercase the text (``str.lower``)."""

    def simplify(self, text: str) -> str:
        return text.lower()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ToLowerCase)

    def __hash__(self) -> int:
        return hash(ToLowerCase)

    def __repr__(self) -> str:
        return "ToLowerCase()"


class ToUpperCase:
    """Uppercase the text (``str.upper``)."""

    def simplify(self, text: str) -> str:
        return text.upper()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ToUpperCase)

    def __hash__(self) -> int:
        return hash(ToUpperCase)

    def __repr__(self) -> str:
        return "ToUpperCase()"


class ReplaceNonWord:
    """Replace each run of non-word characters with ``replacement``."""

    def __init__(self, replacement: str = " ") -> None:
        self._replacement = replacement

    def simplify(self, text: str) -> str:
        return _NON_WORD.sub(self._replacement, text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReplaceNonWord):
            return NotImplemented
        return self._replacement == other._replacement

    def __hash__(self) -> int:
        return hash((ReplaceNonWord, self._replacement))

    def __repr__(self) -> str:
        return f"ReplaceNonWord(replacement={self._replacement!r})"


class CollapseWhitespace:
    """Collapse whitespace runs to one space and strip both ends."""

    def simplify(self, text: str) -> str:
        return _WHITESPACE.sub(" ", text).strip()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CollapseWhitespace)

    def __hash__(self) -> int:
        return hash(CollapseWhitespace)

    def __repr__(self) -> str:
        return "CollapseWhitespace()"


class RemoveDiacritics:
    """Strip combining marks after canonical decomposition ("é" -> "e")."""

    def simplify(self, text: str) -> str:
        decomposed = unicodedata.normalize("NFD", text)
        return "".join(ch for ch in decomposed if not unicodedata.combining(ch))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, RemoveDiacritics)

    def __hash__(self) -> int:
        return hash(RemoveDiacritics)

    def __repr__(self) -> str:
        return "RemoveDiacritics()"


class CaseSplitter:
    """Split identifiers into lowercase space-separated words.

    Example usage:
        splitter = CaseSplitter()
        splitter.simplify("camelCase")    # "camel case"
        splitter.simplify("APIKey")       # "api key"
        splitter.simplify("snake_case")   # "snake case"
    """

    def simplify(self, text: str) -> str:
        """Split ``text`` on naming-convention boundaries.

        Processing pipeline (applied in order):
        1. Replace underscore and hyphen separators with spaces.
        2. Insert space at camelCase boundaries.
        3. Insert space at acronym runs.
        4. Insert space at digit boundaries (two passes).
        5. Lowercase everything and collapse whitespace.
        """
        s = _SEP.sub(" ", text)
        s = _UPPER_LOWER.sub(r"\1 \2", s)
        s = _UPPER_RUN.sub(r"\1 \2", s)
        s = _DIGIT_BOUNDARY.sub(r"\1\3 \2\4", s)
        s = _DIGIT_BOUNDARY.sub(r"\1\3 \2\4", s)
        return " ".join(s.lower().split())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CaseSplitter)

    def __hash__(self) -> int:
        return hash(CaseSplitter)

    def __repr__(self) -> str:
        return "CaseSplitter()"


class Chain:
    """Apply several simplifiers in order, as one simplifier."""

    def __init__(self, simplifiers: tuple[Simplifier, ...]) -> None:
        for simplifier in simplifiers:
            if not isinstance(simplifier, Simplifier):
                msg = f"expected a Simplifier, got {simplifier!r}"
                raise TypeError(msg)
        self._simplifiers = tuple(simplifiers)

    @property
    def simplifiers(self) -> tuple[Simplifier, ...]:
        return self._simplifiers

    def simplify(self, text: str) -> str:
        for simplifier in self._simplifiers:
            text = simplifier.simplify(text)
        return text

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chain):
            return NotImplemented
        return self._simplifiers == other._simplifiers

    def __hash__(self) -> int:
        return hash((Chain, self._simplifiers))

    def __repr__(self) -> str:
        return f"Chain(simplifiers={list(self._simplifiers)!r})"


def chain(*simplifiers: Simplifier) -> Chain:
    """Compose ``simplifiers`` into one, applied left to right."""
    return Chain(simplifiers)
