"""
Incremental auto-completion cursor over a built Trie.

The cursor keeps a stack of trie nodes mirroring the characters typed
so far, so each keystroke or backspace is O(1) and listing matches
never re-walks the prefix from the root.
"""

from __future__ import annotations

import logging

from wordtrie.autocomplete.trie import Trie, TrieNode, collect_words

logger = logging.getLogger(__name__)


class NoMatchesError(LookupError):
    """Raised when no stored word continues the current prefix with a symbol."""

    def __init__(self, symbol: str, prefix: str) -> None:
        super().__init__(f"no words start with {prefix + symbol!r}")
        self.symbol = symbol
        self.prefix = prefix


class AutoCompleter:
    """
    Bidirectional cursor over a Trie.

    The trie is never modified and must not be modified while any
    cursor over it is in use.  A cursor is not safe for concurrent use.
    """

    def __init__(self, trie: Trie) -> None:
        self._prefix: list[str] = []
        # stack[0] is the root; stack[i] is reached from stack[i-1] via prefix[i-1]
        self._stack: list[TrieNode] = [trie.root]

    @property
    def prefix(self) -> str:
        """The characters typed so far."""
        return "".join(self._prefix)

    def __len__(self) -> int:
        return len(self._prefix)

    def add(self, symbol: str) -> None:
        """
        Type one character.

        Raises NoMatchesError, leaving the cursor unchanged, when no
        stored word continues the current prefix with *symbol*.
        """
        if len(symbol) != 1:
            raise ValueError(f"expected a single character, got {symbol!r}")

        child = self._stack[-1].children.get(symbol)
        if child is None:
            logger.debug("Rejected %r after prefix %r", symbol, self.prefix)
            raise NoMatchesError(symbol, self.prefix)

        self._prefix.append(symbol)
        self._stack.append(child)

    def add_string(self, symbols: str) -> None:
        """
        Type each character of *symbols* in order.

        Stops at the first character that fails; the characters typed
        before it stay applied.
        """
        for symbol in symbols:
            self.add(symbol)

    def all_matches(self) -> list[str]:
        """Return every stored word extending the current prefix."""
        node = self._stack[-1]
        prefix = self.prefix
        words = [prefix + suffix for suffix in collect_words(node)]
        if node.is_word:
            words.append(prefix)
        return words

    def delete(self) -> None:
        """Remove the last typed character. No-op when nothing is typed."""
        if not self._prefix:
            return
        self._prefix.pop()
        self._stack.pop()
