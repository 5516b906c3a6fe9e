"""Tokenizers splitting text into ordered token lists.

Each tokenizer is immutable and deterministic.  Besides ``tokenize`` they
offer ``tokenize_to_list`` and ``tokenize_to_set`` for callers that want a
specific collection flavor.
"""

from __future__ import annotations

__all__ = ["CodePointTokenizer", "QGramTokenizer", "WhitespaceTokenizer"]


class WhitespaceTokenizer:
    """Split on runs of whitespace; leading and trailing blanks yield nothing.

    Example::

        WhitespaceTokenizer().tokenize("to  repeat is")   # ["to", "repeat", "is"]
    """

    def tokenize(self, text: str) -> list[str]:
        return text.split()

    def tokenize_to_list(self, text: str) -> list[str]:
        return self.tokenize(text)

    def tokenize_to_set(self, text: str) -> frozenset[str]:
        return frozenset(self.tokenize(text))

    def __eq__(self, other: object) -> bool:
        return isinstance(other, WhitespaceTokenizer)

    def __hash__(self) -> int:
        return hash(WhitespaceTokenizer)

    def __repr__(self) -> str:
        return "WhitespaceTokenizer()"


class CodePointTokenizer:
    """One token per Unicode code point.

    Python strings index by code point, so characters outside the Basic
    Multilingual Plane come out whole.
    """

    def tokenize(self, text: str) -> list[str]:
        return list(text)

    def tokenize_to_list(self, text: str) -> list[str]:
        return self.tokenize(text)

    def tokenize_to_set(self, text: str) -> frozenset[str]:
        return frozenset(text)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CodePointTokenizer)

    def __hash__(self) -> int:
        return hash(CodePointTokenizer)

    def __repr__(self) -> str:
        return "CodePointTokenizer()"


class QGramTokenizer:
    """Overlapping substrings of length ``q``.

    Args:
        q: Gram length, at least 1.
        padding: When True the text is padded with ``q - 1`` copies of
            ``start`` and ``end`` so leading and trailing characters appear in
            as many grams as inner ones.
        start: Padding character prepended.
        end: Padding character appended.

    Text shorter than ``q`` (after padding) yields a single token holding
    the whole text, or nothing when the text is empty.

    Raises:
        ValueError: When ``q`` is smaller than 1.
    """

    def __init__(
        self,
        q: int = 2,
        padding: bool = False,
        start: str = "#",
        end: str = "#",
    ) -> None:
        if q < 1:
            msg = f"q must be >= 1, got {q}"
            raise ValueError(msg)
        self._q = q
        self._padding = padding
        self._start = start
        self._end = end

    @property
    def q(self) -> int:
        return self._q

    def tokenize(self, text: str) -> list[str]:
        if not text:
            return []
        if self._padding and self._q > 1:
            text = self._start * (self._q - 1) + text + self._end * (self._q - 1)
        if len(text) < self._q:
            return [text]
        return [text[i : i + self._q] for i in range(len(text) - self._q + 1)]

    def tokenize_to_list(self, text: str) -> list[str]:
        return self.tokenize(text)

    def tokenize_to_set(self, text: str) -> frozenset[str]:
        return frozenset(self.tokenize(text))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QGramTokenizer):
            return NotImplemented
        return (self._q, self._padding, self._start, self._end) == (
            other._q,
            other._padding,
            other._start,
            other._end,
        )

    def __hash__(self) -> int:
        return hash((QGramTokenizer, self._q, self._padding, self._start, self._end))

    def __repr__(self) -> str:
        return (
            f"QGramTokenizer(q={self._q}, padding={self._padding}, "
            f"start={self._start!r}, end={self._end!r})"
        )
