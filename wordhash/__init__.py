"""
Top-level package for building term-frequency maps ("word hashes").

This package contains modules for:
- static per-language stopword tables and configuration loading
- tokenization, token validation, and stemming
- aggregation of stemmed tokens into term-frequency maps
- conversion of word hashes into feature matrices for classifiers
- shared logging helpers

The word hash is the front-end of statistical text classifiers: every
document is reduced to a mapping from stem to occurrence count.
"""

from wordhash.features.stemming import UnsupportedLanguageError
from wordhash.features.word_hash import (
    TermFrequencyMap,
    build_word_hash,
    clean_word_hash,
    raw_word_hash,
    word_hash,
)

__all__ = [
    "TermFrequencyMap",
    "UnsupportedLanguageError",
    "build_word_hash",
    "clean_word_hash",
    "raw_word_hash",
    "word_hash",
]
