"""Public API functions for string-metrics.

This module provides four user-facing functions: compare, distance,
is_similar and similarity_matrix.  Metrics are immutable, so a default one
is shared across calls without any global state mutation.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

from string_metrics.algorithm.edit_distance import DamerauLevenshtein
from string_metrics.protocols import Distance, Metric

logger = logging.getLogger(__name__)

__all__ = ["compare", "distance", "is_similar", "similarity_matrix"]

# Module-level default: DamerauLevenshtein is stateless, safe to share.
_default_metric: DamerauLevenshtein[Any] = DamerauLevenshtein()


def compare(a: Any, b: Any, metric: Metric[Any] | None = None) -> float:
    """Return the similarity of two values.

    Args:
        a:      First value (a string, or whatever ``metric`` accepts).
        b:      Second value.
        metric: Metric to use.  Defaults to ``DamerauLevenshtein()``.

    Returns:
        A float in [0.0, 1.0]. 1.0 means identical.
    """
    return (metric if metric is not None else _default_metric).compare(a, b)


def distance(a: Any, b: Any, metric: Distance[Any] | None = None) -> float:
    """Return the distance between two values.

    Args:
        a:      First value.
        b:      Second value.
        metric: Distance to use.  Defaults to ``DamerauLevenshtein()``.

    Returns:
        A float >= 0.0. 0.0 means identical.
    """
    return (metric if metric is not None else _default_metric).distance(a, b)


def is_similar(
    a: Any,
    b: Any,
    threshold: float = 0.85,
    metric: Metric[Any] | None = None,
) -> bool:
    """Return True if the similarity of ``a`` and ``b`` reaches ``threshold``.

    Args:
        a:         First value.
        b:         Second value.
        threshold: Minimum similarity in [0.0, 1.0].  Defaults to 0.85.
        metric:    Metric to use.  Defaults to ``DamerauLevenshtein()``.

    Raises:
        ValueError: When ``threshold`` lies outside [0.0, 1.0].
    """
    if not 0.0 <= threshold <= 1.0:
        msg = f"threshold must be in [0, 1], got {threshold}"
        raise ValueError(msg)
    return compare(a, b, metric=metric) >= threshold


def similarity_matrix(
    values: Sequence[Any],
    metric: Metric[Any] | None = None,
) -> np.ndarray:
    """Score every pair of ``values`` against each other.

    Only the C(N, 2) pairs ``i < j`` are computed; the matrix is mirrored
    across the diagonal, which holds 1.0.  Useful for deduplication and
    record linkage over a batch of strings.

    Args:
        values: Values to compare.  May be empty.
        metric: Symmetric metric to use.  Defaults to ``DamerauLevenshtein()``.

    Returns:
        Shape ``(N, N)`` float64 numpy array.
    """
    chosen = metric if metric is not None else _default_metric
    n = len(values)
    matrix = np.eye(n, dtype=np.float64)
    for i, j in itertools.combinations(range(n), 2):
        score = chosen.compare(values[i], values[j])
        matrix[i, j] = score
        matrix[j, i] = score
    logger.debug("Scored %d pairs with %r", n * (n - 1) // 2, chosen)
    return matrix
