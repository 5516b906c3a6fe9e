"""algorithm subpackage: the metric computation engines.

Provides the edit-distance, Hamming and token-collection metrics together
with their configuration.  Import from this module (not from sub-modules
directly) to stay on the stable public interface.

Example::

    from string_metrics.algorithm import DamerauLevenshtein, OverlapCoefficient

    DamerauLevenshtein().compare("ab", "ba")                 # 0.5
    OverlapCoefficient().compare({"a", "b"}, {"b", "c"})     # 0.5
"""

from __future__ import annotations

from string_metrics.algorithm.config import CostProfile, TokenSemantics
from string_metrics.algorithm.edit_distance import (
    DamerauLevenshtein,
    Levenshtein,
    edit_distance,
)
from string_metrics.algorithm.hamming import (
    HammingDistance,
    HammingSimilarity,
    hamming_distance,
)
from string_metrics.algorithm.normalizer import normalize_similarity
from string_metrics.algorithm.token_metrics import (
    CosineSimilarity,
    EuclideanDistance,
    Identity,
    JaccardSimilarity,
    OverlapCoefficient,
)

__all__ = [
    "CosineSimilarity",
    "CostProfile",
    "DamerauLevenshtein",
    "EuclideanDistance",
    "HammingDistance",
    "HammingSimilarity",
    "Identity",
    "JaccardSimilarity",
    "Levenshtein",
    "OverlapCoefficient",
    "TokenSemantics",
    "edit_distance",
    "hamming_distance",
    "normalize_similarity",
]
