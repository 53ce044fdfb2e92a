"""
Tokenization for the word-hash pipeline.

Two policies are supported:

- clean: punctuation is stripped and only word-shaped tokens remain
- raw: word-shaped tokens plus the punctuation fragments between them

Apostrophes and hyphens are deleted (not replaced by spaces) under the
clean policy, so "don't" becomes "dont" and "e-mail" becomes "email".
Word tokens are lowercased as part of tokenization.
"""

from __future__ import annotations

import re
from typing import Any, List


PUNCTUATION_TO_SPACE = ",?.!;:\"@#$%^&*()_=+[]{}|<>/`~"
PUNCTUATION_TO_DELETE = "'-"

_PUNCTUATION_TABLE = str.maketrans(
    {
        **{ch: " " for ch in PUNCTUATION_TO_SPACE},
        **{ch: None for ch in PUNCTUATION_TO_DELETE},
    }
)

_NON_WORD_NON_SPACE_RE = re.compile(r"[^\w\s]")
_WORD_CHAR_RE = re.compile(r"\w")


def _as_text(text: Any) -> str:
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)
    return text


def strip_punctuation(text: str) -> str:
    """
    Remove common punctuation symbols, returning a new string.

    E.g. ``"Hello (greeting's), {braces}!"`` becomes
    ``"Hello  greetings    braces  "``.
    """
    return _as_text(text).translate(_PUNCTUATION_TABLE)


def _word_tokens(text: str) -> List[str]:
    # Lowercase first: lower() can emit non-word combining marks
    # ("İ" -> "i" + U+0307) that the non-word pass has to remove.
    return _NON_WORD_NON_SPACE_RE.sub("", text.lower()).split()


def tokenize_clean(text: str) -> List[str]:
    """
    Split text into lowercase word-shaped tokens (letters, digits, underscore).

    Parameters
    ----------
    text : str
        Raw input text.

    Returns
    -------
    List[str]
        Tokens in encounter order.
    """
    return _word_tokens(strip_punctuation(text))


def tokenize_raw(text: str) -> List[str]:
    """
    Split text into word-shaped tokens followed by punctuation fragments.

    The punctuation stream is what is left when every word character is
    replaced by a space, so ``"Wow!!"`` yields ``["wow", "!!"]``.

    Parameters
    ----------
    text : str
        Raw input text.

    Returns
    -------
    List[str]
        Lowercase word tokens, then punctuation tokens.
    """
    text = _as_text(text)
    fragments = _WORD_CHAR_RE.sub(" ", text).split()
    return _word_tokens(text) + fragments


def tokenize_text(text: str, clean_source: bool = True) -> List[str]:
    """
    Tokenize a text string under the selected policy.

    Parameters
    ----------
    text : str
        Raw input text.
    clean_source : bool
        Use the clean policy if True, the raw policy otherwise.

    Returns
    -------
    List[str]
        Candidate tokens, lowercased but not yet validated.
    """
    if clean_source:
        return tokenize_clean(text)
    return tokenize_raw(text)
