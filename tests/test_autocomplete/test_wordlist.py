"""Tests for word-list loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from wordtrie.autocomplete.wordlist import read_word_list, trie_from_file
from wordtrie.config.settings import WordListSettings

from tests.conftest import write_word_list


class TestReadWordList:
    def test_lines_in_order(self, word_list_file: Path, words):
        assert read_word_list(word_list_file, WordListSettings()) == words

    def test_crlf_line_endings(self, tmp_path: Path):
        path = write_word_list(tmp_path / "crlf.txt", ["alpha", "beta"], newline="\r\n")
        assert read_word_list(path, WordListSettings()) == ["alpha", "beta"]

    def test_missing_trailing_newline(self, tmp_path: Path):
        path = tmp_path / "words.txt"
        path.write_text("one\ntwo", encoding="utf-8")
        assert read_word_list(path, WordListSettings()) == ["one", "two"]

    def test_blank_lines_are_kept(self, tmp_path: Path):
        path = tmp_path / "words.txt"
        path.write_text("one\n\ntwo\n", encoding="utf-8")
        assert read_word_list(path, WordListSettings()) == ["one", "", "two"]

    def test_inner_whitespace_is_preserved(self, tmp_path: Path):
        path = tmp_path / "words.txt"
        path.write_text(" padded \n", encoding="utf-8")
        assert read_word_list(path, WordListSettings()) == [" padded "]

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        assert read_word_list(path, WordListSettings()) == []

    def test_encoding_from_settings(self, tmp_path: Path):
        path = tmp_path / "latin.txt"
        path.write_bytes("façade\n".encode("latin-1"))
        assert read_word_list(path, WordListSettings(encoding="latin-1")) == ["façade"]

    def test_undecodable_file_raises(self, tmp_path: Path):
        path = tmp_path / "latin.txt"
        path.write_bytes("façade\n".encode("latin-1"))
        with pytest.raises(UnicodeDecodeError):
            read_word_list(path, WordListSettings(encoding="utf-8"))

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            read_word_list(tmp_path / "no_such.txt", WordListSettings())


class TestTrieFromFile:
    def test_builds_trie(self, word_list_file: Path, words):
        t = trie_from_file(word_list_file, WordListSettings())
        assert sorted(t.all_words()) == sorted(words)
        assert t.size == len(words)

    def test_prefix_query_on_loaded_trie(self, tmp_path: Path):
        path = write_word_list(
            tmp_path / "words.txt",
            [
                "breakfast",
                "breakfasted",
                "breakfaster",
                "breakfasters",
                "breakfasting",
                "breakfastless",
                "breakfasts",
                "breakneck",
                "salband",
                "salt",
            ],
        )
        t = trie_from_file(path, WordListSettings())
        assert sorted(t.all_with_prefix("breakfast")) == [
            "breakfast",
            "breakfasted",
            "breakfaster",
            "breakfasters",
            "breakfasting",
            "breakfastless",
            "breakfasts",
        ]
        assert t.all_with_prefix("salb") == ["salband"]

    def test_blank_lines_add_nothing(self, tmp_path: Path):
        path = tmp_path / "words.txt"
        path.write_text("\n\nword\n\n", encoding="utf-8")
        t = trie_from_file(path, WordListSettings())
        assert t.all_words() == ["word"]

    def test_accepts_string_path(self, word_list_file: Path, words):
        t = trie_from_file(str(word_list_file), WordListSettings())
        assert t.size == len(words)
