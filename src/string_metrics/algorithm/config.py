"""CostProfile and TokenSemantics for metric configuration.

CostProfile is a frozen (immutable) dataclass holding the per-operation
weights of the edit-distance engines.  TokenSemantics selects which token
collection a metric consumes: a set (duplicates removed), a multiset
(duplicates counted) or a list (duplicates and order kept).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class TokenSemantics(StrEnum):
    """Collection flavor a metric expects from the tokenizer.

    - SET:      ``frozenset`` of distinct tokens, order irrelevant.
    - MULTISET: ``Counter`` of token occurrences, order irrelevant.
    - LIST:     ``list`` of tokens, order and multiplicity preserved.
    """

    SET = auto()
    MULTISET = auto()
    LIST = auto()


@dataclass(frozen=True, slots=True)
class CostProfile:
    """Immutable operation weights for weighted edit distance.

    Attributes:
        insert_delete: Cost of inserting or deleting one symbol.  Must be > 0.
        substitute: Cost of replacing one symbol by another.  Must be > 0.
        transpose: Cost of swapping two adjacent symbols.  Must be >= 0.
    """

    insert_delete: float = 1.0
    substitute: float = 1.0
    transpose: float = 1.0

    def __post_init__(self) -> None:
        if not self.insert_delete > 0.0:
            msg = f"insert_delete must be > 0, got {self.insert_delete}"
            raise ValueError(msg)
        if not self.substitute > 0.0:
            msg = f"substitute must be > 0, got {self.substitute}"
            raise ValueError(msg)
        if not self.transpose >= 0.0:
            msg = f"transpose must be >= 0, got {self.transpose}"
            raise ValueError(msg)

    @property
    def max_cost(self) -> float:
        """The most expensive single operation."""
        return max(self.insert_delete, self.substitute, self.transpose)
