"""Ready-made string metrics.

Each factory returns a freshly configured pipeline comparing plain strings.
Token metrics split on whitespace; edit-distance metrics compare characters.

Example::

    from string_metrics.metrics import cosine_similarity

    metric = cosine_similarity()
    metric.compare(
        "This is a sentence. It is made of words",
        "This sentence is similar. It has almost the same words",
    )  # ~0.4767
"""

from __future__ import annotations

from string_metrics.algorithm.config import TokenSemantics
from string_metrics.algorithm.edit_distance import DamerauLevenshtein, Levenshtein
from string_metrics.algorithm.hamming import HammingDistance
from string_metrics.algorithm.token_metrics import (
    CosineSimilarity,
    EuclideanDistance,
    Identity,
    JaccardSimilarity,
    OverlapCoefficient,
)
from string_metrics.pipeline import (
    DistancePipeline,
    MetricDistancePipeline,
    MetricPipeline,
    PipelineConfig,
)
from string_metrics.text.tokenizers import WhitespaceTokenizer

__all__ = [
    "cosine_similarity",
    "damerau_levenshtein",
    "euclidean_distance",
    "hamming",
    "identity",
    "jaccard",
    "levenshtein",
    "overlap_coefficient",
]


def cosine_similarity() -> MetricPipeline:
    """Cosine similarity of whitespace-token frequencies."""
    return MetricPipeline(
        PipelineConfig(CosineSimilarity(), tokenizer=WhitespaceTokenizer())
    )


def euclidean_distance() -> DistancePipeline:
    """Euclidean distance between whitespace-token frequencies."""
    return DistancePipeline(
        PipelineConfig(EuclideanDistance(), tokenizer=WhitespaceTokenizer())
    )


def overlap_coefficient() -> MetricPipeline:
    """Overlap coefficient of the sets of whitespace tokens."""
    return MetricPipeline(
        PipelineConfig(OverlapCoefficient(), tokenizer=WhitespaceTokenizer())
    )


def jaccard() -> MetricPipeline:
    """Jaccard similarity of the sets of whitespace tokens."""
    return MetricPipeline(
        PipelineConfig(JaccardSimilarity(), tokenizer=WhitespaceTokenizer())
    )


def identity() -> MetricPipeline:
    """1.0 for equal strings, 0.0 otherwise."""
    return MetricPipeline(PipelineConfig(Identity(TokenSemantics.LIST)))


def damerau_levenshtein(
    insert_delete: float = 1.0,
    substitute: float = 1.0,
    transpose: float = 1.0,
) -> MetricDistancePipeline:
    """Character-level weighted Damerau-Levenshtein similarity and distance."""
    return MetricDistancePipeline(
        PipelineConfig(DamerauLevenshtein(insert_delete, substitute, transpose))
    )


def levenshtein(
    insert_delete: float = 1.0, substitute: float = 1.0
) -> MetricDistancePipeline:
    """Character-level weighted Levenshtein similarity and distance."""
    return MetricDistancePipeline(PipelineConfig(Levenshtein(insert_delete, substitute)))


def hamming() -> DistancePipeline:
    """Character-level Hamming distance for strings of equal length."""
    return DistancePipeline(PipelineConfig(HammingDistance()))
