"""Tests for the token-collection metrics.

Covers:
- OverlapCoefficient and JaccardSimilarity over sets (duplicates ignored)
- CosineSimilarity over token frequencies (duplicates counted)
- EuclideanDistance stays a raw, unbounded distance
- Identity with set and list flavors
- Generic token types (integers)
"""

from __future__ import annotations

import math
from collections import Counter

import numpy as np
import pytest

from string_metrics.algorithm.config import TokenSemantics
from string_metrics.algorithm.token_metrics import (
    CosineSimilarity,
    EuclideanDistance,
    Identity,
    JaccardSimilarity,
    OverlapCoefficient,
    frequency_vectors,
)

# ---------------------------------------------------------------------------
# OverlapCoefficient
# ---------------------------------------------------------------------------


class TestOverlapCoefficient:
    def test_integer_sets(self) -> None:
        scores1 = set([1, 1, 2, 3, 5, 8, 11, 19])
        scores2 = set([1, 2, 4, 8, 16, 32, 64])
        assert OverlapCoefficient().compare(scores1, scores2) == pytest.approx(
            3 / 7, abs=1e-4
        )

    def test_subset_scores_one(self) -> None:
        assert OverlapCoefficient().compare({"a", "b"}, {"a", "b", "c", "d"}) == 1.0

    def test_both_empty(self) -> None:
        assert OverlapCoefficient().compare(set(), set()) == 1.0

    def test_one_empty(self) -> None:
        assert OverlapCoefficient().compare({"a"}, frozenset()) == 0.0

    def test_disjoint(self) -> None:
        assert OverlapCoefficient().compare({"a"}, {"b"}) == 0.0

    def test_iterables_are_deduplicated(self) -> None:
        assert OverlapCoefficient().compare(["a", "a", "b"], ["b", "c"]) == 0.5

    def test_semantics(self) -> None:
        assert OverlapCoefficient.semantics == TokenSemantics.SET


# ---------------------------------------------------------------------------
# JaccardSimilarity
# ---------------------------------------------------------------------------


class TestJaccardSimilarity:
    def test_half_shared(self) -> None:
        assert JaccardSimilarity().compare({"a", "b", "c"}, {"b", "c", "d"}) == 0.5

    def test_both_empty(self) -> None:
        assert JaccardSimilarity().compare(frozenset(), frozenset()) == 1.0

    def test_one_empty(self) -> None:
        assert JaccardSimilarity().compare(frozenset(), {"x"}) == 0.0

    def test_subset_is_not_identical(self) -> None:
        assert JaccardSimilarity().compare({"a"}, {"a", "b"}) == 0.5


# ---------------------------------------------------------------------------
# CosineSimilarity
# ---------------------------------------------------------------------------


class TestCosineSimilarity:
    def test_parallel_vectors(self) -> None:
        assert CosineSimilarity().compare(
            Counter({"a": 1, "b": 2}), Counter({"a": 2, "b": 4})
        ) == pytest.approx(1.0)

    def test_orthogonal_vectors(self) -> None:
        assert CosineSimilarity().compare(["a", "b"], ["c"]) == 0.0

    def test_counts_repeated_tokens(self) -> None:
        # (2, 1) . (1, 1) / (sqrt(5) * sqrt(2))
        assert CosineSimilarity().compare(["a", "a", "b"], ["a", "b"]) == pytest.approx(
            3 / math.sqrt(10)
        )

    def test_sentence_tokens(self) -> None:
        a = "This is a sentence. It is made of words".split()
        b = "This sentence is similar. It has almost the same words".split()
        assert CosineSimilarity().compare(a, b) == pytest.approx(0.4767, abs=1e-4)

    def test_both_empty(self) -> None:
        assert CosineSimilarity().compare(Counter(), Counter()) == 1.0

    def test_one_empty(self) -> None:
        assert CosineSimilarity().compare(Counter("abc"), Counter()) == 0.0

    def test_never_exceeds_one(self) -> None:
        tokens = ["x", "y", "y", "z", "z", "z"] * 7
        assert CosineSimilarity().compare(tokens, tokens) <= 1.0

    def test_zero_counts_treated_as_empty(self) -> None:
        emptied = Counter(a=1)
        emptied.subtract({"a": 1})
        assert CosineSimilarity().compare(emptied, Counter(b=1)) == 0.0
        assert CosineSimilarity().compare(emptied, Counter()) == 1.0

    def test_negative_counts_ignored(self) -> None:
        score = CosineSimilarity().compare(Counter(a=2, b=-1), Counter(a=1, b=1))
        assert 0.0 <= score <= 1.0
        assert score == pytest.approx(1 / math.sqrt(2))

    def test_semantics(self) -> None:
        assert CosineSimilarity.semantics == TokenSemantics.MULTISET


# ---------------------------------------------------------------------------
# EuclideanDistance
# ---------------------------------------------------------------------------


class TestEuclideanDistance:
    def test_one_token_each_way(self) -> None:
        assert EuclideanDistance().distance(["a", "b"], ["a", "c"]) == pytest.approx(
            math.sqrt(2)
        )

    def test_count_difference(self) -> None:
        assert EuclideanDistance().distance(
            Counter({"a": 3}), Counter({"a": 1})
        ) == pytest.approx(2.0)

    def test_both_empty(self) -> None:
        assert EuclideanDistance().distance([], []) == 0.0

    def test_one_empty(self) -> None:
        assert EuclideanDistance().distance(["a", "a"], []) == pytest.approx(2.0)

    def test_unbounded(self) -> None:
        assert EuclideanDistance().distance(["x"] * 10, []) == pytest.approx(10.0)

    def test_non_positive_counts_ignored(self) -> None:
        assert EuclideanDistance().distance(
            Counter(a=0, b=-2), Counter()
        ) == 0.0

    def test_has_no_compare(self) -> None:
        assert not hasattr(EuclideanDistance(), "compare")

    def test_none_rejected(self) -> None:
        with pytest.raises(TypeError):
            EuclideanDistance().distance(["a"], None)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Identity
# ---------------------------------------------------------------------------


class TestIdentity:
    def test_default_semantics_is_set(self) -> None:
        assert Identity().semantics == TokenSemantics.SET

    def test_equal_sets(self) -> None:
        assert Identity().compare(frozenset({"a", "b"}), frozenset({"b", "a"})) == 1.0

    def test_different_lists(self) -> None:
        metric = Identity(TokenSemantics.LIST)
        assert metric.compare(["a", "b"], ["b", "a"]) == 0.0

    def test_semantics_accepts_string_value(self) -> None:
        assert Identity("list").semantics == TokenSemantics.LIST  # type: ignore[arg-type]

    def test_repr(self) -> None:
        assert repr(Identity()) == "Identity(semantics='set')"

    def test_equality_by_semantics(self) -> None:
        assert Identity() == Identity(TokenSemantics.SET)
        assert Identity() != Identity(TokenSemantics.LIST)


# ---------------------------------------------------------------------------
# frequency_vectors
# ---------------------------------------------------------------------------


class TestFrequencyVectors:
    def test_aligned_dimensions(self) -> None:
        vec_a, vec_b = frequency_vectors(Counter("aab"), Counter("bc"))
        assert vec_a.shape == vec_b.shape == (3,)
        assert vec_a.dtype == np.float64
        assert float(vec_a.sum()) == 3.0
        assert float(vec_b.sum()) == 2.0
        # each dimension refers to the same token on both sides
        assert float(np.dot(vec_a, vec_b)) == 1.0
