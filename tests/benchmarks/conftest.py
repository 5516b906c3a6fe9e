"""Deterministic input generators for performance benchmarks.

All generators produce fixed, reproducible strings. No random values.
Three tiers: 10, 100 and 1000 symbols (characters or words).
"""

from __future__ import annotations

import pytest

_WORDS = ["alpha", "beta", "gamma", "delta", "epsilon", "zeta", "eta", "theta"]


def make_text(length: int, offset: int = 0) -> str:
    """Generate a string of ``length`` lowercase letters."""
    return "".join(chr(ord("a") + (i * 7 + offset) % 26) for i in range(length))


def make_sentence(words: int, offset: int = 0) -> str:
    """Generate ``words`` space-separated words from a fixed vocabulary."""
    return " ".join(_WORDS[(i * 3 + offset) % len(_WORDS)] for i in range(words))


def _make_typo_pair(length: int) -> tuple[str, str]:
    """Pair differing by one adjacent swap in the middle."""
    left = make_text(length)
    mid = length // 2
    right = left[: mid - 1] + left[mid] + left[mid - 1] + left[mid + 1 :]
    return left, right


@pytest.fixture
def text_pair_10() -> tuple[str, str]:
    return _make_typo_pair(10)


@pytest.fixture
def text_pair_100() -> tuple[str, str]:
    return _make_typo_pair(100)


@pytest.fixture
def text_pair_1000() -> tuple[str, str]:
    return _make_typo_pair(1000)


@pytest.fixture
def sentence_pair_1000() -> tuple[str, str]:
    """1000-word sentences with shifted vocabulary."""
    return make_sentence(1000), make_sentence(1000, offset=1)


@pytest.fixture
def batch_20() -> list[str]:
    """20 distinct 30-character strings for similarity_matrix."""
    return [make_text(30, offset=i) for i in range(20)]
