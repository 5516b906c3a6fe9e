"""Composition pipelines: simplifiers + tokenizer + base metric.

This is the wiring layer between raw text and the metric engines.  A
pipeline turns any base metric or distance into one that compares strings.

Architecture:
- ``PipelineConfig`` is the immutable description of a pipeline: the base
  metric, an ordered tuple of simplifiers and an optional tokenizer.  It is
  validated eagerly, so a misconfigured pipeline fails at construction and
  never at comparison time.
- ``compare()`` / ``distance()`` apply every simplifier in configured order
  to both inputs, tokenize the result and convert the tokens to the
  collection flavor the base metric declares through its ``semantics``
  attribute:

  ============  ===========================  ==============================
  semantics     collection                   repeated tokens / order
  ============  ===========================  ==============================
  SET           ``frozenset``                collapsed / ignored
  MULTISET      ``collections.Counter``      counted / ignored
  LIST          ``list``                     kept / kept
  ============  ===========================  ==============================

- Without a tokenizer the simplified string itself is handed to the base
  metric, which must then be a LIST (sequence) metric.

Pipelines keep no state besides their configuration; every call builds its
own intermediate collections, so one pipeline may serve any number of
threads.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any

from string_metrics._checks import require_not_none
from string_metrics.algorithm.config import TokenSemantics
from string_metrics.protocols import Distance, Metric, Simplifier, Tokenizer

logger = logging.getLogger(__name__)

__all__ = [
    "DistancePipeline",
    "MetricDistancePipeline",
    "MetricPipeline",
    "PipelineConfig",
    "build",
]


def _semantics_of(base: Any) -> TokenSemantics:
    """Return the collection flavor ``base`` declares, LIST when it is silent."""
    return TokenSemantics(getattr(base, "semantics", TokenSemantics.LIST))


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    """Immutable configuration of a composition pipeline.

    Attributes:
        metric: The base metric (``compare``) or distance (``distance``).
        simplifiers: Simplifiers applied in order before tokenization.
        tokenizer: Splits simplified text into tokens.  ``None`` hands the
            simplified string itself to ``metric``.
    """

    metric: Any
    simplifiers: tuple[Simplifier, ...] = ()
    tokenizer: Tokenizer | None = None

    def __post_init__(self) -> None:
        if self.metric is None:
            raise TypeError("metric must not be None")
        # Accept any iterable of simplifiers but store a tuple
        object.__setattr__(self, "simplifiers", tuple(self.simplifiers))
        for simplifier in self.simplifiers:
            if not isinstance(simplifier, Simplifier):
                msg = f"expected a Simplifier, got {simplifier!r}"
                raise TypeError(msg)
        if self.tokenizer is not None and not isinstance(self.tokenizer, Tokenizer):
            msg = f"expected a Tokenizer, got {self.tokenizer!r}"
            raise TypeError(msg)
        if self.tokenizer is None and self.semantics != TokenSemantics.LIST:
            msg = f"{self.metric!r} compares {self.semantics} tokens and needs a tokenizer"
            raise ValueError(msg)

    @property
    def semantics(self) -> TokenSemantics:
        """Collection flavor the base metric consumes."""
        return _semantics_of(self.metric)


class _Pipeline:
    """Shared preprocessing of MetricPipeline and DistancePipeline."""

    __slots__ = ("_config",)

    def __init__(self, config: PipelineConfig) -> None:
        self._config = config
        logger.debug("Built %r", self)

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> PipelineConfig:
        return self._config

    @property
    def metric(self) -> Any:
        """The exact base metric instance this pipeline was built with."""
        return self._config.metric

    @property
    def simplifiers(self) -> tuple[Simplifier, ...]:
        return self._config.simplifiers

    @property
    def simplifier(self) -> Simplifier | None:
        """The simplifier when exactly one is configured, else ``None``."""
        if len(self._config.simplifiers) == 1:
            return self._config.simplifiers[0]
        return None

    @property
    def tokenizer(self) -> Tokenizer | None:
        return self._config.tokenizer

    # ------------------------------------------------------------------
    # Preprocessing
    # ------------------------------------------------------------------

    def _simplify(self, text: str) -> str:
        for simplifier in self._config.simplifiers:
            text = simplifier.simplify(text)
        return text

    def _prepare(self, text: str) -> Any:
        """Simplify and tokenize ``text`` into the base metric's flavor."""
        simplified = self._simplify(text)
        tokenizer = self._config.tokenizer
        if tokenizer is None:
            return simplified

        tokens: list[Hashable] = tokenizer.tokenize(simplified)
        semantics = self._config.semantics
        if semantics == TokenSemantics.SET:
            return frozenset(tokens)
        if semantics == TokenSemantics.MULTISET:
            return Counter(tokens)
        return list(tokens)

    def _prepare_pair(self, a: str, b: str) -> tuple[Any, Any]:
        require_not_none(a, b)
        prepared_a = self._prepare(a)
        prepared_b = self._prepare(b)
        logger.debug("Prepared %r -> %r and %r -> %r", a, prepared_a, b, prepared_b)
        return prepared_a, prepared_b

    # ------------------------------------------------------------------
    # Identity and diagnostics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Pipeline) or type(other) is not type(self):
            return NotImplemented
        return self._config == other._config

    def __hash__(self) -> int:
        return hash((type(self), self._config))

    def __repr__(self) -> str:
        parts = [f"metric={self._config.metric!r}"]
        if self._config.simplifiers:
            parts.append(f"simplifiers={list(self._config.simplifiers)!r}")
        if self._config.tokenizer is not None:
            parts.append(f"tokenizer={self._config.tokenizer!r}")
        return f"{type(self).__name__}({', '.join(parts)})"


class MetricPipeline(_Pipeline):
    """String metric built from simplifiers, a tokenizer and a base metric.

    Example::

        from string_metrics.algorithm import CosineSimilarity
        from string_metrics.pipeline import MetricPipeline, PipelineConfig
        from string_metrics.text import ReplaceNonWord, ToLowerCase, WhitespaceTokenizer

        metric = MetricPipeline(
            PipelineConfig(
                CosineSimilarity(),
                simplifiers=(ToLowerCase(), ReplaceNonWord()),
                tokenizer=WhitespaceTokenizer(),
            )
        )
        metric.compare(
            "This is a sentence. It is made of words",
            "This sentence is similar. It has almost the same words",
        )  # ~0.5721
    """

    __slots__ = ()

    def __init__(self, config: PipelineConfig) -> None:
        if not isinstance(config.metric, Metric):
            msg = f"expected a Metric with compare(), got {config.metric!r}"
            raise TypeError(msg)
        super().__init__(config)

    def compare(self, a: str, b: str) -> float:
        """Return the similarity of ``a`` and ``b`` in [0, 1].

        Raises:
            TypeError: When ``a`` or ``b`` is None.
        """
        prepared_a, prepared_b = self._prepare_pair(a, b)
        return self._config.metric.compare(prepared_a, prepared_b)


class DistancePipeline(_Pipeline):
    """String distance built from simplifiers, a tokenizer and a base distance."""

    __slots__ = ()

    def __init__(self, config: PipelineConfig) -> None:
        if not isinstance(config.metric, Distance):
            msg = f"expected a Distance with distance(), got {config.metric!r}"
            raise TypeError(msg)
        super().__init__(config)

    def distance(self, a: str, b: str) -> float:
        """Return the distance between ``a`` and ``b``, at least 0.0.

        Raises:
            TypeError: When ``a`` or ``b`` is None.
        """
        prepared_a, prepared_b = self._prepare_pair(a, b)
        return self._config.metric.distance(prepared_a, prepared_b)


class MetricDistancePipeline(MetricPipeline):
    """String metric whose base also measures a raw distance.

    Built around engines such as ``DamerauLevenshtein`` that offer both
    ``compare`` and ``distance``; the same preprocessing feeds either.

    Example::

        metric = build(DamerauLevenshtein(), ToLowerCase())
        metric.compare("AB", "ba")    # 0.5
        metric.distance("AB", "ba")   # 1.0
    """

    __slots__ = ()

    def __init__(self, config: PipelineConfig) -> None:
        if not isinstance(config.metric, Distance):
            msg = f"expected a Distance with distance(), got {config.metric!r}"
            raise TypeError(msg)
        super().__init__(config)

    def distance(self, a: str, b: str) -> float:
        """Return the distance between ``a`` and ``b``, at least 0.0.

        Raises:
            TypeError: When ``a`` or ``b`` is None.
        """
        prepared_a, prepared_b = self._prepare_pair(a, b)
        return self._config.metric.distance(prepared_a, prepared_b)


def build(
    metric: Any,
    *simplifiers: Simplifier,
    tokenizer: Tokenizer | None = None,
) -> MetricPipeline | DistancePipeline:
    """Build a pipeline around ``metric``.

    Returns a ``MetricDistancePipeline`` when ``metric`` has both ``compare``
    and ``distance``, a ``MetricPipeline`` when it only has ``compare`` and a
    ``DistancePipeline`` when it only has ``distance``.

    Args:
        metric: Base metric or distance.
        *simplifiers: Simplifiers applied in the given order.
        tokenizer: Optional tokenizer.

    Raises:
        TypeError: When ``metric`` is neither a Metric nor a Distance, or a
            component does not satisfy its protocol.
        ValueError: When a set or multiset metric is given no tokenizer.
    """
    config = PipelineConfig(metric, simplifiers, tokenizer)
    if isinstance(metric, Metric) and isinstance(metric, Distance):
        return MetricDistancePipeline(config)
    if isinstance(metric, Metric):
        return MetricPipeline(config)
    if isinstance(metric, Distance):
        return DistancePipeline(config)
    msg = f"expected a Metric or Distance, got {metric!r}"
    raise TypeError(msg)
