"""
Tests for the word-hash pipeline.

Most tests inject a stemmer so that the expected keys are obvious; the
last section runs the real Snowball stemmer end to end.
"""

from __future__ import annotations

import pandas as pd
import pytest

from wordhash import UnsupportedLanguageError
from wordhash.features.word_hash import (
    aggregate_term_frequencies,
    build_word_hash,
    clean_word_hash,
    raw_word_hash,
    word_hash,
    word_hash_series,
    word_hashes_from_config,
)


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------


def test_aggregate_counts_every_occurrence(recording_stemmer):
    """
    Each token is stemmed once and counted under its stem.
    """
    counts = aggregate_term_frequencies(["running", "runs", "cats", "run"], recording_stemmer)
    assert counts == {"run": 3, "cat": 1}
    assert recording_stemmer.calls == ["running", "runs", "cats", "run"]


def test_aggregate_empty_stream(identity_stemmer):
    """
    No tokens give an empty map.
    """
    assert aggregate_term_frequencies([], identity_stemmer) == {}


# ---------------------------------------------------------------------------
# Clean policy
# ---------------------------------------------------------------------------


def test_stopwords_are_excluded(identity_stemmer):
    """
    Stopwords are dropped and remaining words counted once each.
    """
    result = build_word_hash("the cat and the dog", stemmer=identity_stemmer)
    assert result == {"cat": 1, "dog": 1}


def test_short_words_are_excluded(identity_stemmer):
    """
    Two-character words never become keys.
    """
    result = build_word_hash("ok run", stemmer=identity_stemmer)
    assert "ok" not in result
    assert result["run"] == 1


def test_mixed_alphanumerics_are_excluded(identity_stemmer):
    """
    Ordinals are dropped while plain words and numbers are kept.
    """
    result = build_word_hash("the 3rd and 2nd place in 2024", stemmer=identity_stemmer)
    assert "3rd" not in result
    assert "2nd" not in result
    assert result == {"place": 1, "2024": 1}


def test_case_folds_to_one_key(identity_stemmer):
    """
    Words differing only in case share one key.
    """
    assert build_word_hash("Dog dog DOG", stemmer=identity_stemmer) == {"dog": 3}


def test_contraction_collapses_to_stopword(identity_stemmer):
    """
    "Don't" becomes "dont", which is an English stopword.
    """
    # "Don't" becomes "dont", which is an English stopword.
    assert build_word_hash("Don't e-mail", stemmer=identity_stemmer) == {"email": 1}


def test_clean_policy_never_counts_punctuation(identity_stemmer):
    """
    Under the clean policy no key contains punctuation.
    """
    result = build_word_hash('wow!! "really?" (yes) ... #tag', stemmer=identity_stemmer)
    assert result == {"wow": 1, "really": 1, "tag": 1}
    assert all(key.isalnum() for key in result)


def test_clean_policy_lowercasing_does_not_bypass_filters(identity_stemmer):
    """
    Dotted capital I lowercases to two characters; the short-word and
    stopword rules must still apply to what is left.
    """
    assert build_word_hash("İN İ", stemmer=identity_stemmer) == {}
    assert build_word_hash("İN İSTANBUL", stemmer=identity_stemmer) == {"istanbul": 1}


def test_only_validated_tokens_reach_the_stemmer(recording_stemmer):
    """
    The stemmer is only called for accepted tokens.
    """
    build_word_hash("The cats and ok 3rd dogs", stemmer=recording_stemmer)
    assert recording_stemmer.calls == ["cats", "dogs"]


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_empty_input_gives_empty_map(text, identity_stemmer):
    """
    Empty and whitespace-only text is not an error.
    """
    assert build_word_hash(text, stemmer=identity_stemmer) == {}


# ---------------------------------------------------------------------------
# Raw policy
# ---------------------------------------------------------------------------


def test_raw_policy_counts_punctuation_fragments(identity_stemmer):
    """
    Punctuation fragments are counted under the raw policy.
    """
    result = build_word_hash("wow!!", clean_source=False, stemmer=identity_stemmer)
    assert result == {"wow": 1, "!!": 1}


def test_raw_punctuation_bypasses_length_and_stopword_checks(identity_stemmer):
    """
    Fragments are counted even when short or listed as stopwords.
    """
    result = build_word_hash(
        "the end. ok? ok?",
        clean_source=False,
        stemmer=identity_stemmer,
        stopword_set={"the", "?"},
    )
    assert result == {"end": 1, ".": 1, "?": 2}


def test_raw_policy_still_filters_word_tokens(identity_stemmer):
    """
    Word tokens follow the usual rules under the raw policy.
    """
    result = build_word_hash("The 3rd ok dog!", clean_source=False, stemmer=identity_stemmer)
    assert result == {"dog": 1, "!": 1}


# ---------------------------------------------------------------------------
# Languages
# ---------------------------------------------------------------------------


def test_spanish_stopwords_are_used(identity_stemmer):
    """
    The Spanish table applies when the language is "es".
    """
    result = build_word_hash(
        "Los gatos de la casa", stemmer_language="es", stemmer=identity_stemmer
    )
    assert result == {"gatos": 1, "casa": 1}


def test_language_without_stopword_table_does_no_filtering(identity_stemmer):
    """
    A stemmable language with no table filters nothing.
    """
    result = build_word_hash("the cat", stemmer_language="fr", stemmer=identity_stemmer)
    assert result == {"the": 1, "cat": 1}


@pytest.mark.parametrize("language", ["EN", "english", " English "])
def test_language_spellings_give_the_same_map(language):
    """
    "en", "EN" and "english" select the same stopwords and stemmer.
    """
    text = "The cat and the dog are running"
    assert clean_word_hash(text, language) == clean_word_hash(text, "en")
    assert clean_word_hash(text, language) == {"cat": 1, "dog": 1, "run": 1}


def test_unsupported_stemmer_language_fails_fast():
    """
    An unknown language fails even before any text is processed.
    """
    with pytest.raises(UnsupportedLanguageError):
        build_word_hash("", stemmer_language="xx")


# ---------------------------------------------------------------------------
# Options dict entry points
# ---------------------------------------------------------------------------


def test_word_hash_defaults(identity_stemmer):
    """
    The options dict defaults to the clean policy and English.
    """
    assert word_hash("wow!! cat", stemmer=identity_stemmer) == {"wow": 1, "cat": 1}


def test_word_hash_ignores_unknown_options(identity_stemmer):
    """
    Unrecognized option keys have no effect.
    """
    options = {"clean_source": False, "max_terms": 1, "colour": "blue"}
    assert word_hash("wow!!", options, stemmer=identity_stemmer) == {"wow": 1, "!!": 1}


def test_word_hash_propagates_language_errors():
    """
    Language errors reach the caller.
    """
    with pytest.raises(UnsupportedLanguageError):
        word_hash("hello", {"stemmer_language": "klingon"})


# ---------------------------------------------------------------------------
# Batch helpers
# ---------------------------------------------------------------------------


def test_word_hash_series_aligns_with_index(identity_stemmer):
    """
    Series results keep the input index; missing values give empty maps.
    """
    series = pd.Series(["the cat", None, "dog dog"], index=[10, 20, 30])
    result = word_hash_series(series, stemmer=identity_stemmer)
    assert list(result.index) == [10, 20, 30]
    assert result.tolist() == [{"cat": 1}, {}, {"dog": 2}]


def test_word_hash_series_normalizes_language(identity_stemmer):
    """
    Series options accept Snowball names for the language.
    """
    series = pd.Series(["los gatos de la casa"])
    result = word_hash_series(series, {"stemmer_language": "Spanish"}, stemmer=identity_stemmer)
    assert result.tolist() == [{"gatos": 1, "casa": 1}]


def test_word_hashes_from_config(config_path):
    """
    The shipped YAML defaults drive the batch helper.
    """
    hashes = word_hashes_from_config(["running runs run", ""], config_path=config_path)
    assert hashes == [{"run": 3}, {}]


# ---------------------------------------------------------------------------
# End to end with the Snowball stemmer
# ---------------------------------------------------------------------------


def test_snowball_stopword_exclusion():
    """
    End to end: stopwords dropped, stems counted.
    """
    assert clean_word_hash("the cat and the dog") == {"cat": 1, "dog": 1}


def test_snowball_collapses_inflections():
    """
    End to end: inflections of one word share a key.
    """
    assert clean_word_hash("running runs run") == {"run": 3}


def test_snowball_case_folding():
    """
    End to end: case differences fold together.
    """
    assert clean_word_hash("Dog dog") == {"dog": 2}


def test_snowball_raw_policy():
    """
    End to end: the raw policy keeps punctuation fragments.
    """
    assert raw_word_hash("wow!!") == {"wow": 1, "!!": 1}


def test_snowball_output_is_deterministic():
    """
    End to end: the same input always gives the same map.
    """
    text = "Classifiers classify documents; documents are classified by classifiers!"
    first = clean_word_hash(text)
    assert clean_word_hash(text) == first
    assert all(count >= 1 for count in first.values())
