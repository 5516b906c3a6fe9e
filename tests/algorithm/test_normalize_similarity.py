"""Unit tests for normalize_similarity in normalizer.py.

Tests verify:
- Formula correctness (1 - raw / bound)
- Boundary conditions (zero bound, distance at the bound)
- Output always in [0.0, 1.0]
"""

from __future__ import annotations

import pytest

from string_metrics.algorithm.normalizer import normalize_similarity


class TestNormalizeSimilarity:
    def test_zero_distance_is_identical(self) -> None:
        assert normalize_similarity(0.0, 5.0) == pytest.approx(1.0)

    def test_distance_at_bound_is_zero(self) -> None:
        assert normalize_similarity(4.0, 4.0) == pytest.approx(0.0)

    def test_half_way(self) -> None:
        assert normalize_similarity(1.0, 2.0) == pytest.approx(0.5)

    def test_zero_bound_means_both_empty(self) -> None:
        assert normalize_similarity(0.0, 0.0) == 1.0

    def test_overshoot_clips_to_zero(self) -> None:
        assert normalize_similarity(2.0000001, 2.0) == 0.0

    @pytest.mark.parametrize("raw", [0.0, 0.3, 1.7, 3.0])
    def test_output_in_unit_interval(self, raw: float) -> None:
        assert 0.0 <= normalize_similarity(raw, 3.0) <= 1.0
