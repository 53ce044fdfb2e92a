"""
Build term-frequency maps ("word hashes") from raw documents.

A word hash maps each stemmed token of a document to the number of times
it occurs. It is the input format for the Bayesian and vector-space
classifiers downstream. The pipeline is:

- tokenize (clean or raw policy), lowercasing word-shaped tokens
- drop invalid tokens (stopwords, short words, mixed alphanumerics)
- stem each remaining token
- count

We provide helpers for a single document, for an options dict, and for
pandas Series of documents.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Any, Dict, Iterable, List, Mapping, Optional

import pandas as pd

from wordhash.data.config import (
    DEFAULT_CONFIG_PATH,
    load_word_hash_config,
    resolve_options,
    unrecognized_option_keys,
)
from wordhash.data.languages import normalize_language_code
from wordhash.data.stopwords import get_stopword_set
from wordhash.features.stemming import Stemmer, build_stemmer
from wordhash.features.tokenization import tokenize_text
from wordhash.features.validation import is_valid_token
from wordhash.utils.logging_utils import get_logger


TermFrequencyMap = Dict[str, int]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def aggregate_term_frequencies(
    tokens: Iterable[str],
    stemmer: Stemmer,
) -> TermFrequencyMap:
    """
    Stem tokens and count them in encounter order.

    Parameters
    ----------
    tokens : Iterable[str]
        Validated tokens.
    stemmer : Stemmer
        Object with a ``stem(word)`` method.

    Returns
    -------
    TermFrequencyMap
        Mapping from stem to occurrence count.
    """
    counts: TermFrequencyMap = {}
    for token in tokens:
        key = stemmer.stem(token)
        counts[key] = counts.get(key, 0) + 1
    return counts


# ---------------------------------------------------------------------------
# Single-document pipeline
# ---------------------------------------------------------------------------


def build_word_hash(
    text: str,
    clean_source: bool = True,
    stemmer_language: str = "en",
    stemmer: Optional[Stemmer] = None,
    stopword_set: Optional[AbstractSet[str]] = None,
) -> TermFrequencyMap:
    """
    Full pipeline: turn one document into a term-frequency map.

    Parameters
    ----------
    text : str
        Raw document text.
    clean_source : bool
        If True, strip punctuation and count only stemmed words. If
        False, punctuation fragments are counted as tokens too.
    stemmer_language : str
        Language code or Snowball name selecting the stopword table and (unless a stemmer
        is injected) the Snowball stemmer.
    stemmer : Optional[Stemmer]
        Stemmer to use instead of building one for ``stemmer_language``.
    stopword_set : Optional[AbstractSet[str]]
        Stopwords to use instead of the built-in table for the language.

    Returns
    -------
    TermFrequencyMap
        Mapping from stem to count. Empty for empty input.

    Raises
    ------
    UnsupportedLanguageError
        If no stemmer is injected and the language has no stemmer.
    """
    # One code for both lookups, so "EN" and "english" behave like "en".
    language = normalize_language_code(stemmer_language)

    # Build the stemmer first so a bad language fails even on empty text.
    if stemmer is None:
        stemmer = build_stemmer(language)
    if stopword_set is None:
        stopword_set = get_stopword_set(language)

    tokens = tokenize_text(text, clean_source=clean_source)
    valid = (t for t in tokens if is_valid_token(t, stopword_set))
    return aggregate_term_frequencies(valid, stemmer)


def word_hash(
    text: str,
    options: Optional[Mapping[str, Any]] = None,
    stemmer: Optional[Stemmer] = None,
) -> TermFrequencyMap:
    """
    Build a word hash from an options dict.

    Recognized options are "clean_source" (default True) and
    "stemmer_language" (default "en"); other keys are ignored.
    """
    ignored = unrecognized_option_keys(options)
    if ignored:
        logger.debug("Ignoring unrecognized word hash options: %s", ignored)

    resolved = resolve_options(options)
    return build_word_hash(
        text,
        clean_source=resolved["clean_source"],
        stemmer_language=resolved["stemmer_language"],
        stemmer=stemmer,
    )


def clean_word_hash(text: str, stemmer_language: str = "en") -> TermFrequencyMap:
    """Word hash with punctuation stripped: just stemmed words."""
    return build_word_hash(text, clean_source=True, stemmer_language=stemmer_language)


def raw_word_hash(text: str, stemmer_language: str = "en") -> TermFrequencyMap:
    """Word hash that also counts punctuation fragments."""
    return build_word_hash(text, clean_source=False, stemmer_language=stemmer_language)


# ---------------------------------------------------------------------------
# Batch helpers
# ---------------------------------------------------------------------------


def word_hash_series(
    series: pd.Series,
    options: Optional[Mapping[str, Any]] = None,
    stemmer: Optional[Stemmer] = None,
) -> pd.Series:
    """
    Apply the word-hash pipeline to a pandas Series of documents.

    One stemmer is built for the whole Series and reused for every
    document.

    Parameters
    ----------
    series : pd.Series
        Series of raw text values. Missing values become empty documents.
    options : Optional[Mapping[str, Any]]
        Same options as ``word_hash``.
    stemmer : Optional[Stemmer]
        Stemmer to use instead of the Snowball default.

    Returns
    -------
    pd.Series
        Series of term-frequency dicts, aligned with the input index.
    """
    resolved = resolve_options(options)
    language = normalize_language_code(resolved["stemmer_language"])
    if stemmer is None:
        stemmer = build_stemmer(language)
    stopword_set = get_stopword_set(language)

    texts = series.fillna("").astype(str)
    return texts.apply(
        lambda x: build_word_hash(
            x,
            clean_source=resolved["clean_source"],
            stemmer_language=language,
            stemmer=stemmer,
            stopword_set=stopword_set,
        )
    )


def word_hashes_from_config(
    texts: Iterable[str],
    config_path: str = DEFAULT_CONFIG_PATH,
) -> List[TermFrequencyMap]:
    """
    Build word hashes for many documents using the YAML defaults.

    Parameters
    ----------
    texts : Iterable[str]
        Raw documents.
    config_path : str
        Path to config/word_hash.yaml.

    Returns
    -------
    List[TermFrequencyMap]
        One term-frequency map per document, in input order.
    """
    cfg = load_word_hash_config(config_path)
    run_logger = get_logger(name="word_hash", config=cfg)

    options = resolve_options(cfg["word_hash"] or {})
    run_logger.info(
        "Building word hashes: clean_source=%s, stemmer_language=%s",
        options["clean_source"],
        options["stemmer_language"],
    )

    series = pd.Series(list(texts), dtype=object)
    hashes = word_hash_series(series, options=options).tolist()

    total_terms = sum(sum(h.values()) for h in hashes)
    run_logger.info(
        "Built %d word hashes with %d counted terms.", len(hashes), total_terms
    )
    return hashes
