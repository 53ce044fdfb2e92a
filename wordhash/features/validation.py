"""
Token validity rules.

A token is counted if it contains any non-word character (a punctuation
fragment from the raw tokenizer), or if it is a word-shaped token that:

- is not a stopword for the active language
- is longer than two characters
- is not mixed alphanumeric (e.g. "3rd", "abc123")

Under the clean tokenizer no token can contain a non-word character, so
only the second rule ever applies there.
"""

from __future__ import annotations

import re
from typing import AbstractSet, Iterable, List


MIN_TOKEN_LENGTH = 3

_NON_WORD_RE = re.compile(r"\W")
_LETTER_RE = re.compile(r"[^\W\d_]")
_DIGIT_RE = re.compile(r"\d")


def has_non_word_character(token: str) -> bool:
    return _NON_WORD_RE.search(token) is not None


def is_mixed_alphanumeric(token: str) -> bool:
    """
    Test if a token mixes letters and digits.

    A token is mixed if it starts with a letter and contains a digit, or
    starts with a digit and contains a letter.

    Parameters
    ----------
    token : str
        Candidate token.

    Returns
    -------
    bool
        True for tokens such as "2nd" or "mp3".
    """
    if not token:
        return False

    first = token[0]
    if _LETTER_RE.match(first):
        return _DIGIT_RE.search(token) is not None
    if _DIGIT_RE.match(first):
        return _LETTER_RE.search(token) is not None
    return False


def is_valid_token(
    token: str,
    stopword_set: AbstractSet[str],
    min_length: int = MIN_TOKEN_LENGTH,
) -> bool:
    """
    Decide whether a (lowercased) token contributes to the frequency map.

    Parameters
    ----------
    token : str
        Candidate token, already case-normalized.
    stopword_set : AbstractSet[str]
        Stopwords for the active language.
    min_length : int
        Minimum length for word-shaped tokens.

    Returns
    -------
    bool
        True if the token should be stemmed and counted.
    """
    if has_non_word_character(token):
        return True

    return (
        token not in stopword_set
        and len(token) >= min_length
        and not is_mixed_alphanumeric(token)
    )


def filter_valid_tokens(
    tokens: Iterable[str],
    stopword_set: AbstractSet[str],
) -> List[str]:
    """Keep only the tokens accepted by ``is_valid_token``, in order."""
    return [t for t in tokens if is_valid_token(t, stopword_set)]
