"""
In-memory prefix trie over unicode strings.

Each node maps a single code point to its child and carries a flag
marking the end of an inserted word.  The trie supports bulk
construction, full enumeration and prefix-filtered enumeration.
Enumeration order is unspecified; callers that need a stable order
must sort the results themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

logger = logging.getLogger(__name__)


@dataclass
class TrieNode:
    """Single node in the trie."""

    children: dict[str, "TrieNode"] = field(default_factory=dict)
    is_word: bool = False


def collect_words(node: TrieNode) -> list[str]:
    """
    Return every word suffix reachable strictly below *node*.

    The empty suffix for *node* itself is not included; callers decide
    whether to add it based on ``node.is_word``.  Traversal uses an
    explicit stack so very long words never hit the recursion limit.
    """
    words: list[str] = []
    stack: list[tuple[TrieNode, str]] = [
        (child, ch) for ch, child in node.children.items()
    ]
    while stack:
        current, path = stack.pop()
        if current.is_word:
            words.append(path)
        for ch, child in current.children.items():
            stack.append((child, path + ch))
    return words


class Trie:
    """Insert-only prefix trie with full and prefix enumeration."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = TrieNode()
        self._size = 0
        for word in words:
            self.insert(word)
        logger.debug("Built trie with %d distinct words", self._size)

    @property
    def root(self) -> TrieNode:
        """Root node. Shared read-only with cursors over this trie."""
        return self._root

    @property
    def size(self) -> int:
        """Number of distinct words stored."""
        return self._size

    def insert(self, word: str) -> None:
        """
        Insert *word*.

        Inserting a word twice is a no-op the second time.  The empty
        string is ignored: the root is never marked as a word.
        """
        if not word:
            return

        node = self._root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]

        if not node.is_word:
            self._size += 1
        node.is_word = True

    def all_words(self) -> list[str]:
        """Return every stored word, in no particular order."""
        return collect_words(self._root)

    def all_with_prefix(self, prefix: str) -> list[str]:
        """
        Return every stored word starting with *prefix*.

        Returns an empty list when no word has that prefix.  The prefix
        itself is included when it is a stored word.
        """
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return []

        words = [prefix + suffix for suffix in collect_words(node)]
        if node.is_word:
            words.append(prefix)
        return words
