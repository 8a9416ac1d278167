"""
Shared test fixtures for the wordtrie test suite.

Provides the standard completion word set, a trie built from it, and
word-list files written under pytest's tmp_path.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from wordtrie.autocomplete.trie import Trie
from wordtrie.config.settings import Settings

FIXTURE_WORDS = [
    "abc",
    "abcde",
    "abb",
    "abbc",
    "abba",
    "abccd",
    "abcdeef",
    "acabc",
    "bc",
    "bced",
]


@pytest.fixture
def words() -> list[str]:
    """The standard completion word set (fresh copy per test)."""
    return list(FIXTURE_WORDS)


@pytest.fixture
def trie(words: list[str]) -> Trie:
    """A trie built from the standard word set."""
    return Trie(words)


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Settings rooted at a temporary project directory."""
    s = Settings(project_root=tmp_path)
    s.ensure_dirs()
    return s


# ---------------------------------------------------------------------------
# Sample data factories
# ---------------------------------------------------------------------------


def write_word_list(path: Path, words: list[str], newline: str = "\n") -> Path:
    """Write *words* one per line to *path* and return it."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(newline.join(words).encode("utf-8") + newline.encode("utf-8"))
    return path


@pytest.fixture
def word_list_file(tmp_path: Path, words: list[str]) -> Path:
    """The standard word set written to a temporary file."""
    return write_word_list(tmp_path / "words.txt", words)
