"""
Language codes shared by the stopword tables and the stemmers.

Callers may name a language by its ISO 639-1 code ("en"), in any case, or
by its Snowball name ("english"). Both resolve to the same code, so one
language always selects the same stopword table and the same stemmer.
"""

from __future__ import annotations

from typing import Dict


SNOWBALL_LANGUAGES: Dict[str, str] = {
    "ar": "arabic",
    "da": "danish",
    "de": "german",
    "en": "english",
    "es": "spanish",
    "fi": "finnish",
    "fr": "french",
    "hu": "hungarian",
    "it": "italian",
    "nl": "dutch",
    "no": "norwegian",
    "pt": "portuguese",
    "ro": "romanian",
    "ru": "russian",
    "sv": "swedish",
}

_CODES_BY_NAME: Dict[str, str] = {name: code for code, name in SNOWBALL_LANGUAGES.items()}


def normalize_language_code(language: str) -> str:
    """
    Resolve a language code or Snowball name to a lowercase ISO code.

    Parameters
    ----------
    language : str
        E.g. "en", "EN", " english ".

    Returns
    -------
    str
        The ISO 639-1 code for known languages; otherwise the stripped,
        lowercased input.
    """
    key = (language or "").strip().lower()
    return _CODES_BY_NAME.get(key, key)
