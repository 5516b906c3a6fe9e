"""Distance-to-similarity normalizer shared by the edit-distance engines.

Converts a raw, unbounded distance into a similarity in [0, 1] using an
algorithm-specific worst-case cost bound::

    similarity = 1 - raw_distance / max_possible_cost

Each engine supplies its own ``max_possible_cost`` (e.g.
``max_cost * max(len(a), len(b))`` for weighted edit distance), which must be
a true upper bound for that engine.  The ``min(1, ...)`` guard only absorbs
floating-point rounding on top of that bound.
"""

from __future__ import annotations


def normalize_similarity(raw_distance: float, max_possible_cost: float) -> float:
    """Normalize a raw distance to a [0, 1] similarity score.

    Args:
        raw_distance: Non-negative distance produced by an engine.
        max_possible_cost: Upper bound of ``raw_distance`` for the inputs
            compared.  A bound of zero means both inputs were empty.

    Returns:
        Float in [0.0, 1.0]; 1.0 means identical.
    """
    if max_possible_cost <= 0.0:
        return 1.0
    return 1.0 - min(1.0, raw_distance / max_possible_cost)
