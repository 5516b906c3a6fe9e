"""String metrics - bounded similarity and distance scores for strings and tokens."""

from __future__ import annotations

import logging

from string_metrics.algorithm import (
    CosineSimilarity,
    CostProfile,
    DamerauLevenshtein,
    EuclideanDistance,
    HammingDistance,
    HammingSimilarity,
    Identity,
    JaccardSimilarity,
    Levenshtein,
    OverlapCoefficient,
    TokenSemantics,
)
from string_metrics.api import compare, distance, is_similar, similarity_matrix
from string_metrics.pipeline import (
    DistancePipeline,
    MetricDistancePipeline,
    MetricPipeline,
    PipelineConfig,
    build,
)
from string_metrics.protocols import Distance, Metric, SetMetric, Simplifier, Tokenizer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "CosineSimilarity",
    "CostProfile",
    "DamerauLevenshtein",
    "Distance",
    "DistancePipeline",
    "EuclideanDistance",
    "HammingDistance",
    "HammingSimilarity",
    "Identity",
    "JaccardSimilarity",
    "Levenshtein",
    "Metric",
    "MetricDistancePipeline",
    "MetricPipeline",
    "OverlapCoefficient",
    "PipelineConfig",
    "SetMetric",
    "Simplifier",
    "TokenSemantics",
    "Tokenizer",
    "build",
    "compare",
    "distance",
    "is_similar",
    "similarity_matrix",
]
