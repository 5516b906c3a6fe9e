"""Similarity and distance over token collections.

Set metrics (duplicates ignored):
- OverlapCoefficient: ``|A ∩ B| / min(|A|, |B|)``
- JaccardSimilarity:  ``|A ∩ B| / |A ∪ B|``

Multiset metrics (each distinct token is a dimension, its count the value):
- CosineSimilarity:  ``(a · b) / (‖a‖ ‖b‖)``
- EuclideanDistance: ``sqrt(Σ (a_i - b_i)²)`` over the union of dimensions.
  Unbounded: it satisfies the Distance capability, not the Metric one.

Identity compares whole collections for equality; its collection flavor is
chosen at construction.

All metrics are generic over the token type: anything hashable works, not
only strings.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Mapping
from collections.abc import Set as AbstractSet
from typing import Any, Generic, TypeVar

import numpy as np
from scipy.spatial import distance as spatial_distance  # type: ignore[import-untyped]

from string_metrics._checks import require_not_none
from string_metrics.algorithm.config import TokenSemantics

T = TypeVar("T", bound=Hashable)

__all__ = [
    "CosineSimilarity",
    "EuclideanDistance",
    "Identity",
    "JaccardSimilarity",
    "OverlapCoefficient",
    "frequency_vectors",
]


def _as_set(tokens: Iterable[T]) -> AbstractSet[T]:
    if isinstance(tokens, AbstractSet):
        return tokens
    return frozenset(tokens)


def _as_counter(tokens: Iterable[T] | Mapping[T, int]) -> Mapping[T, int]:
    # Unary plus drops zero and negative counts left by Counter.subtract()
    return +Counter(tokens)


def frequency_vectors(
    a: Mapping[T, int], b: Mapping[T, int]
) -> tuple[np.ndarray, np.ndarray]:
    """Project two token counts onto the union of their dimensions.

    Returns:
        Two float64 arrays of equal length; position ``k`` of each holds the
        count of the same token (0 when absent from that side).
    """
    vocabulary = list(a.keys() | b.keys())
    vec_a = np.array([a.get(token, 0) for token in vocabulary], dtype=np.float64)
    vec_b = np.array([b.get(token, 0) for token in vocabulary], dtype=np.float64)
    return vec_a, vec_b


class OverlapCoefficient(Generic[T]):
    """Overlap coefficient of two sets.

    Example::

        metric = OverlapCoefficient()
        metric.compare({1, 2, 3, 5, 8, 11, 19}, {1, 2, 4, 8, 16, 32, 64})  # 3/7
    """

    semantics = TokenSemantics.SET

    def compare(self, a: Iterable[T], b: Iterable[T]) -> float:
        require_not_none(a, b)
        set_a = _as_set(a)
        set_b = _as_set(b)
        if not set_a and not set_b:
            return 1.0
        if not set_a or not set_b:
            return 0.0
        return len(set_a & set_b) / min(len(set_a), len(set_b))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, OverlapCoefficient)

    def __hash__(self) -> int:
        return hash(OverlapCoefficient)

    def __repr__(self) -> str:
        return "OverlapCoefficient()"


class JaccardSimilarity(Generic[T]):
    """Jaccard index of two sets: shared tokens over all tokens."""

    semantics = TokenSemantics.SET

    def compare(self, a: Iterable[T], b: Iterable[T]) -> float:
        require_not_none(a, b)
        set_a = _as_set(a)
        set_b = _as_set(b)
        if not set_a and not set_b:
            return 1.0
        if not set_a or not set_b:
            return 0.0
        return len(set_a & set_b) / len(set_a | set_b)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JaccardSimilarity)

    def __hash__(self) -> int:
        return hash(JaccardSimilarity)

    def __repr__(self) -> str:
        return "JaccardSimilarity()"


class CosineSimilarity(Generic[T]):
    """Cosine similarity of two token-frequency vectors.

    Accepts ``Counter`` (or any token -> count mapping) or a plain iterable of
    tokens, which is counted first.
    """

    semantics = TokenSemantics.MULTISET

    def compare(
        self,
        a: Iterable[T] | Mapping[T, int],
        b: Iterable[T] | Mapping[T, int],
    ) -> float:
        require_not_none(a, b)
        counts_a = _as_counter(a)
        counts_b = _as_counter(b)
        if not counts_a and not counts_b:
            return 1.0
        if not counts_a or not counts_b:
            return 0.0

        vec_a, vec_b = frequency_vectors(counts_a, counts_b)
        dot = float(np.dot(vec_a, vec_b))
        norm_a = float(np.linalg.norm(vec_a))
        norm_b = float(np.linalg.norm(vec_b))
        # Rounding can push identical vectors a hair above 1.0
        return min(1.0, dot / (norm_a * norm_b))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CosineSimilarity)

    def __hash__(self) -> int:
        return hash(CosineSimilarity)

    def __repr__(self) -> str:
        return "CosineSimilarity()"


class EuclideanDistance(Generic[T]):
    """Euclidean distance between two token-frequency vectors.

    The result is a raw, non-negative distance with no upper bound.
    """

    semantics = TokenSemantics.MULTISET

    def distance(
        self,
        a: Iterable[T] | Mapping[T, int],
        b: Iterable[T] | Mapping[T, int],
    ) -> float:
        require_not_none(a, b)
        counts_a = _as_counter(a)
        counts_b = _as_counter(b)
        if not counts_a and not counts_b:
            return 0.0

        vec_a, vec_b = frequency_vectors(counts_a, counts_b)
        return float(spatial_distance.euclidean(vec_a, vec_b))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, EuclideanDistance)

    def __hash__(self) -> int:
        return hash(EuclideanDistance)

    def __repr__(self) -> str:
        return "EuclideanDistance()"


class Identity(Generic[T]):
    """1.0 when both collections are equal, 0.0 otherwise.

    Args:
        semantics: Collection flavor a pipeline should hand to this metric.
            With ``SET`` repeated tokens and order are ignored; with ``LIST``
            both matter.
    """

    def __init__(self, semantics: TokenSemantics = TokenSemantics.SET) -> None:
        self._semantics = TokenSemantics(semantics)

    @property
    def semantics(self) -> TokenSemantics:
        return self._semantics

    def compare(self, a: Any, b: Any) -> float:
        require_not_none(a, b)
        return 1.0 if a == b else 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Identity):
            return NotImplemented
        return self._semantics == other._semantics

    def __hash__(self) -> int:
        return hash((Identity, self._semantics))

    def __repr__(self) -> str:
        return f"Identity(semantics={self._semantics.value!r})"
