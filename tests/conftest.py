"""
Shared fixtures for the word-hash test suite.
"""

from __future__ import annotations

import os
from typing import Dict, List, Optional

import pytest

from wordhash.features.stemming import IdentityStemmer


PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
CONFIG_PATH = os.path.join(PROJECT_ROOT, "config", "word_hash.yaml")


class RecordingStemmer:
    """Stemmer backed by a lookup table that remembers every call."""

    def __init__(self, table: Optional[Dict[str, str]] = None):
        self.table = table or {}
        self.calls: List[str] = []

    def stem(self, word: str) -> str:
        self.calls.append(word)
        return self.table.get(word, word)


@pytest.fixture
def identity_stemmer() -> IdentityStemmer:
    return IdentityStemmer()


@pytest.fixture
def recording_stemmer() -> RecordingStemmer:
    return RecordingStemmer(
        {"running": "run", "runs": "run", "cats": "cat", "dogs": "dog"}
    )


@pytest.fixture
def config_path() -> str:
    return CONFIG_PATH
