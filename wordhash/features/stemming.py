"""
Stemming backends for the word-hash pipeline.

The pipeline only needs an object with a ``stem(word) -> str`` method.
The default backend wraps NLTK's Snowball stemmers, selected by an
ISO 639-1 language code ("en", "es", ...) or by the Snowball language
name ("english", "spanish", ...).

Unsupported languages fail when the stemmer is built, not when the
first word is stemmed.
"""

from __future__ import annotations

from typing import Protocol

from nltk.stem import SnowballStemmer

from wordhash.data.languages import SNOWBALL_LANGUAGES, normalize_language_code


class Stemmer(Protocol):
    def stem(self, word: str) -> str:
        ...


class UnsupportedLanguageError(ValueError):
    """Raised when no stemmer is available for a language."""

    def __init__(self, language: str):
        self.language = language
        supported = ", ".join(sorted(SNOWBALL_LANGUAGES))
        super().__init__(
            f"No stemmer available for language {language!r}. "
            f"Supported codes: {supported}"
        )


def resolve_snowball_language(language: str) -> str:
    """
    Map a language code or Snowball name to a Snowball language name.

    Parameters
    ----------
    language : str
        Language code such as "en", or a Snowball name such as "english".

    Returns
    -------
    str
        Snowball language name understood by NLTK.

    Raises
    ------
    UnsupportedLanguageError
        If the language is not backed by a Snowball stemmer.
    """
    code = normalize_language_code(language)
    if code in SNOWBALL_LANGUAGES:
        return SNOWBALL_LANGUAGES[code]
    raise UnsupportedLanguageError(language)


class SnowballStemmerAdapter:
    """Snowball stemmer bound to one language."""

    def __init__(self, language: str = "en"):
        self.language = language
        self.snowball_language = resolve_snowball_language(language)
        self._stemmer = SnowballStemmer(self.snowball_language)

    def stem(self, word: str) -> str:
        return self._stemmer.stem(word)

    def __repr__(self) -> str:
        return f"SnowballStemmerAdapter(language={self.language!r})"


class IdentityStemmer:
    """Stemmer that leaves words untouched."""

    def stem(self, word: str) -> str:
        return word


def build_stemmer(language: str = "en") -> Stemmer:
    """
    Build the default stemmer for a language.

    Parameters
    ----------
    language : str
        Language code or Snowball language name.

    Returns
    -------
    Stemmer
        Object with a ``stem(word)`` method.
    """
    return SnowballStemmerAdapter(language)
