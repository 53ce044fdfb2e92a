"""
Tests for language code resolution.
"""

from __future__ import annotations

import pytest

from wordhash.data.languages import SNOWBALL_LANGUAGES, normalize_language_code


@pytest.mark.parametrize("language", ["en", "EN", " en ", "english", "English"])
def test_english_spellings_resolve_to_one_code(language):
    """
    Codes in any case and Snowball names all resolve to "en".
    """
    assert normalize_language_code(language) == "en"


def test_every_snowball_name_maps_back_to_its_code():
    """
    The name-to-code mapping is the inverse of SNOWBALL_LANGUAGES.
    """
    for code, name in SNOWBALL_LANGUAGES.items():
        assert normalize_language_code(name) == code


def test_unknown_language_is_lowercased_and_kept():
    """
    Unknown languages pass through so callers can report them.
    """
    assert normalize_language_code(" XX ") == "xx"
    assert normalize_language_code(None) == ""
