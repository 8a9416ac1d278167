"""Autocomplete package — prefix trie and incremental completion cursor."""

from wordtrie.autocomplete.completer import AutoCompleter, NoMatchesError
from wordtrie.autocomplete.trie import Trie, TrieNode
from wordtrie.autocomplete.wordlist import read_word_list, trie_from_file

__all__ = [
    "AutoCompleter",
    "NoMatchesError",
    "Trie",
    "TrieNode",
    "read_word_list",
    "trie_from_file",
]
