"""Text subpackage: simplifiers and tokenizers feeding the pipelines.

Re-exports the public API for the text module:
- Simplifiers: ToLowerCase, ToUpperCase, ReplaceNonWord, CollapseWhitespace,
  RemoveDiacritics, CaseSplitter, Chain / chain
- Tokenizers: WhitespaceTokenizer, QGramTokenizer, CodePointTokenizer
"""

from string_metrics.text.simplifiers import (
    CaseSplitter,
    Chain,
    CollapseWhitespace,
    RemoveDiacritics,
    ReplaceNonWord,
    ToLowerCase,
    ToUpperCase,
    chain,
)
from string_metrics.text.tokenizers import (
    CodePointTokenizer,
    QGramTokenizer,
    WhitespaceTokenizer,
)

__all__ = [
    "CaseSplitter",
    "Chain",
    "CodePointTokenizer",
    "CollapseWhitespace",
    "QGramTokenizer",
    "RemoveDiacritics",
    "ReplaceNonWord",
    "ToLowerCase",
    "ToUpperCase",
    "WhitespaceTokenizer",
    "chain",
]
