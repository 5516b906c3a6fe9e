"""Weighted Levenshtein and Damerau-Levenshtein edit distance.

Both engines share one rolling dynamic-programming routine.  Only three rows
of the ``(|s| + 1) x (|t| + 1)`` matrix are alive at any time:

- ``v0``: row ``i - 1`` (needed for the transposition candidate).
- ``v1``: row ``i`` (the previous row).
- ``v2``: row ``i + 1`` (the row being filled).

The shorter sequence is placed on the inner loop so the rows are
``min(|s|, |t|) + 1`` long.  The rows are allocated per call and discarded
afterwards; engines hold nothing but their immutable ``CostProfile`` and can
be shared freely between threads.

Recurrence for cell ``(i + 1, j + 1)``::

    min(
        v2[j]     + insert_delete,                  # insert
        v1[j + 1] + insert_delete,                  # delete
        v1[j]     + (0 if s[i] == t[j] else substitute),
        v0[j - 1] + transpose,                      # only for swapped pairs
    )

The similarity is ``1 - distance / (max_cost * max(|s|, |t|))``: no
alignment can cost more than rewriting every symbol of the longer sequence
with the most expensive operation.
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Generic, TypeVar

from string_metrics._checks import require_not_none
from string_metrics.algorithm.config import CostProfile, TokenSemantics
from string_metrics.algorithm.normalizer import normalize_similarity

T = TypeVar("T", bound=Hashable)

__all__ = ["DamerauLevenshtein", "Levenshtein", "edit_distance"]


def edit_distance(
    s: Sequence[T],
    t: Sequence[T],
    costs: CostProfile,
    transpositions: bool = True,
) -> float:
    """Compute the weighted edit distance between two sequences.

    Args:
        s: First sequence of symbols (a string or a list of tokens).
        t: Second sequence of symbols.
        costs: Operation weights.
        transpositions: When True, swapping two adjacent symbols is a unit
            operation costing ``costs.transpose`` (Damerau variant).

    Returns:
        Non-negative minimum total cost of turning ``s`` into ``t``.
    """
    if s == t:
        return 0.0
    if len(s) == 0:
        return len(t) * costs.insert_delete
    if len(t) == 0:
        return len(s) * costs.insert_delete

    # Insert and delete share a weight, so the distance is symmetric and the
    # shorter sequence can always be the inner one.
    if len(t) > len(s):
        s, t = t, s

    insert_delete = costs.insert_delete
    substitute = costs.substitute
    transpose = costs.transpose
    t_length = len(t)

    v0 = [0.0] * (t_length + 1)
    v1 = [j * insert_delete for j in range(t_length + 1)]
    v2 = [0.0] * (t_length + 1)

    for i in range(len(s)):
        v2[0] = (i + 1) * insert_delete
        s_i = s[i]
        for j in range(t_length):
            t_j = t[j]
            cost = v1[j] if s_i == t_j else v1[j] + substitute
            insertion = v2[j] + insert_delete
            deletion = v1[j + 1] + insert_delete
            if insertion < cost:
                cost = insertion
            if deletion < cost:
                cost = deletion
            if (
                transpositions
                and i > 0
                and j > 0
                and s[i - 1] == t_j
                and s_i == t[j - 1]
            ):
                swap = v0[j - 1] + transpose
                if swap < cost:
                    cost = swap
            v2[j + 1] = cost

        v0, v1, v2 = v1, v2, v0

    # The last filled row was rotated into v1
    return v1[t_length]


class DamerauLevenshtein(Generic[T]):
    """Weighted Damerau-Levenshtein (optimal string alignment) metric.

    Works on any sequence of hashable symbols: characters of a string or
    tokens of a list.

    Example::

        from string_metrics.algorithm import DamerauLevenshtein

        metric = DamerauLevenshtein()
        metric.distance("ab", "ba")   # 1.0  (one transposition)
        metric.compare("ab", "ba")    # 0.5
    """

    semantics = TokenSemantics.LIST

    def __init__(
        self,
        insert_delete: float = 1.0,
        substitute: float = 1.0,
        transpose: float = 1.0,
    ) -> None:
        """Initialise the metric with its operation weights.

        Args:
            insert_delete: Positive cost of an insertion or deletion.
            substitute: Positive cost of a substitution.
            transpose: Non-negative cost of an adjacent transposition.

        Raises:
            ValueError: When a weight violates its bound.
        """
        self._costs = CostProfile(insert_delete, substitute, transpose)

    @property
    def costs(self) -> CostProfile:
        """The immutable operation weights."""
        return self._costs

    def compare(self, a: Sequence[T], b: Sequence[T]) -> float:
        """Return the normalized similarity of ``a`` and ``b`` in [0, 1]."""
        require_not_none(a, b)
        if len(a) == 0 and len(b) == 0:
            return 1.0
        if len(a) == 0 or len(b) == 0:
            return 0.0
        raw = edit_distance(a, b, self._costs, transpositions=True)
        return normalize_similarity(raw, self._costs.max_cost * max(len(a), len(b)))

    def distance(self, a: Sequence[T], b: Sequence[T]) -> float:
        """Return the weighted edit distance between ``a`` and ``b``."""
        require_not_none(a, b)
        return edit_distance(a, b, self._costs, transpositions=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DamerauLevenshtein):
            return NotImplemented
        return self._costs == other._costs

    def __hash__(self) -> int:
        return hash((DamerauLevenshtein, self._costs))

    def __repr__(self) -> str:
        c = self._costs
        return (
            f"DamerauLevenshtein(insert_delete={c.insert_delete}, "
            f"substitute={c.substitute}, transpose={c.transpose})"
        )


class Levenshtein(Generic[T]):
    """Weighted Levenshtein metric: insert, delete and substitute only."""

    semantics = TokenSemantics.LIST

    def __init__(self, insert_delete: float = 1.0, substitute: float = 1.0) -> None:
        self._costs = CostProfile(insert_delete, substitute, transpose=0.0)

    @property
    def costs(self) -> CostProfile:
        return self._costs

    def compare(self, a: Sequence[T], b: Sequence[T]) -> float:
        require_not_none(a, b)
        if len(a) == 0 and len(b) == 0:
            return 1.0
        if len(a) == 0 or len(b) == 0:
            return 0.0
        raw = edit_distance(a, b, self._costs, transpositions=False)
        return normalize_similarity(raw, self._costs.max_cost * max(len(a), len(b)))

    def distance(self, a: Sequence[T], b: Sequence[T]) -> float:
        require_not_none(a, b)
        return edit_distance(a, b, self._costs, transpositions=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Levenshtein):
            return NotImplemented
        return self._costs == other._costs

    def __hash__(self) -> int:
        return hash((Levenshtein, self._costs))

    def __repr__(self) -> str:
        c = self._costs
        return f"Levenshtein(insert_delete={c.insert_delete}, substitute={c.substitute})"
