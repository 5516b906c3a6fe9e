"""Capability protocols for metrics, distances and text preprocessing.

Defines the structural interfaces every component satisfies.  Users can plug
in their own metrics, simplifiers or tokenizers without inheriting from any
base class: any object with the right method passes ``isinstance`` checks.

Example::

    from string_metrics.protocols import Tokenizer

    class CommaTokenizer:
        def tokenize(self, text: str) -> list[str]:
            return [t for t in text.split(",") if t]

    assert isinstance(CommaTokenizer(), Tokenizer)  # structural conformance
"""

from __future__ import annotations

from collections.abc import Set as AbstractSet
from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Metric(Protocol[T_contra]):
    """Similarity between two values.

    ``compare`` must:
    - Return a float in [0.0, 1.0], 1.0 meaning identical.
    - Raise ``TypeError`` when either argument is None.
    """

    def compare(self, a: T_contra, b: T_contra) -> float: ...


@runtime_checkable
class Distance(Protocol[T_contra]):
    """Distance between two values.

    ``distance`` must return a float in [0.0, +inf), 0.0 meaning identical,
    and raise ``TypeError`` when either argument is None.  No upper bound is
    guaranteed.
    """

    def distance(self, a: T_contra, b: T_contra) -> float: ...


@runtime_checkable
class SetMetric(Protocol[T_contra]):
    """Similarity between two sets, same [0, 1] contract as ``Metric``."""

    def compare(
        self, a: AbstractSet[T_contra], b: AbstractSet[T_contra]
    ) -> float: ...


@runtime_checkable
class Simplifier(Protocol):
    """Pure, total text transform applied before tokenization."""

    def simplify(self, text: str) -> str: ...


@runtime_checkable
class Tokenizer(Protocol):
    """Deterministic split of text into an ordered list of tokens."""

    def tokenize(self, text: str) -> list[str]: ...
