"""
Document-term matrices built from word hashes.

Classical classifiers in scikit-learn expect a feature matrix rather than
a dict per document. This module turns word hashes into a sparse count
matrix with ``DictVectorizer``, using the same options as the rest of
the pipeline.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional, Tuple

import pandas as pd
from scipy import sparse
from sklearn.feature_extraction import DictVectorizer

from wordhash.features.stemming import Stemmer
from wordhash.features.word_hash import word_hash_series


def _build_dict_vectorizer() -> DictVectorizer:
    # Counts are integers; keep the matrix sparse for large vocabularies.
    return DictVectorizer(sparse=True, sort=True)


def _as_series(texts: Iterable[str]) -> pd.Series:
    if isinstance(texts, pd.Series):
        return texts
    return pd.Series(list(texts), dtype=object)


def fit_dict_vectorizer(
    train_texts: Iterable[str],
    options: Optional[Mapping[str, Any]] = None,
    stemmer: Optional[Stemmer] = None,
) -> DictVectorizer:
    """
    Fit a DictVectorizer on the word hashes of the training texts.

    Parameters
    ----------
    train_texts : Iterable[str]
        Raw training documents.
    options : Optional[Mapping[str, Any]]
        Word-hash options ("clean_source", "stemmer_language").
    stemmer : Optional[Stemmer]
        Stemmer to use instead of the Snowball default.

    Returns
    -------
    DictVectorizer
        Fitted vectorizer whose feature names are the stems.
    """
    hashes = word_hash_series(_as_series(train_texts), options=options, stemmer=stemmer)
    vectorizer = _build_dict_vectorizer()
    vectorizer.fit(hashes.tolist())
    return vectorizer


def transform_texts_to_counts(
    texts: Iterable[str],
    vectorizer: DictVectorizer,
    options: Optional[Mapping[str, Any]] = None,
    stemmer: Optional[Stemmer] = None,
) -> sparse.spmatrix:
    """
    Transform raw texts into a count matrix using a fitted vectorizer.

    Stems unseen during fitting are dropped.

    Returns
    -------
    sparse.spmatrix
        Matrix of shape (n_samples, n_features).
    """
    hashes = word_hash_series(_as_series(texts), options=options, stemmer=stemmer)
    return vectorizer.transform(hashes.tolist())


def fit_transform_texts_to_counts(
    train_texts: Iterable[str],
    options: Optional[Mapping[str, Any]] = None,
    stemmer: Optional[Stemmer] = None,
) -> Tuple[sparse.spmatrix, DictVectorizer]:
    """
    Fit a vectorizer on the training texts and return their count matrix.

    Returns
    -------
    Tuple[sparse.spmatrix, DictVectorizer]
        The count matrix and the fitted vectorizer.
    """
    hashes = word_hash_series(_as_series(train_texts), options=options, stemmer=stemmer)
    vectorizer = _build_dict_vectorizer()
    features = vectorizer.fit_transform(hashes.tolist())
    return features, vectorizer
