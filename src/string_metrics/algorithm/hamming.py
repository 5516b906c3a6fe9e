"""Hamming distance and similarity over equal-length sequences.

A single engine covers strings (compared character by character) and token
lists (compared token by token).  Inputs of different length are rejected,
never padded or truncated.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Generic, TypeVar

from string_metrics._checks import require_not_none
from string_metrics.algorithm.config import TokenSemantics
from string_metrics.algorithm.normalizer import normalize_similarity

T = TypeVar("T", bound=Hashable)

__all__ = ["HammingDistance", "HammingSimilarity", "hamming_distance"]


def hamming_distance(a: Sequence[T], b: Sequence[T]) -> int:
    """Count the positions at which ``a`` and ``b`` differ.

    Raises:
        ValueError: When the sequences differ in length.
    """
    if len(a) != len(b):
        msg = f"sequences must have equal length, got {len(a)} and {len(b)}"
        raise ValueError(msg)
    return sum(1 for x, y in zip(a, b, strict=True) if x != y)


class HammingDistance(Generic[T]):
    """Position-wise mismatch count between two equal-length sequences.

    Example::

        HammingDistance().distance("karolin", "kathrin")   # 3.0
    """

    semantics = TokenSemantics.LIST

    def distance(self, a: Sequence[T], b: Sequence[T]) -> float:
        require_not_none(a, b)
        return float(hamming_distance(a, b))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HammingDistance)

    def __hash__(self) -> int:
        return hash(HammingDistance)

    def __repr__(self) -> str:
        return "HammingDistance()"


class HammingSimilarity(Generic[T]):
    """Fraction of positions at which two equal-length sequences agree.

    ``1 - hamming_distance(a, b) / len(a)``; two empty sequences are identical.
    """

    semantics = TokenSemantics.LIST

    def compare(self, a: Sequence[T], b: Sequence[T]) -> float:
        require_not_none(a, b)
        return normalize_similarity(hamming_distance(a, b), len(a))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, HammingSimilarity)

    def __hash__(self) -> int:
        return hash(HammingSimilarity)

    def __repr__(self) -> str:
        return "HammingSimilarity()"
