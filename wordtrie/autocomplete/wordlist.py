"""
Word-list loading.

Reads a line-delimited text file into an ordered list of words and
builds a Trie from it.  Read failures are logged and re-raised: a
missing or undecodable word list is fatal to the caller.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from wordtrie.autocomplete.trie import Trie
from wordtrie.config.settings import WordListSettings, get_settings

logger = logging.getLogger(__name__)


def read_word_list(
    path: str | Path,
    settings: Optional[WordListSettings] = None,
) -> list[str]:
    """
    Return the lines of *path* in file order, line endings stripped.

    Blank lines come back as empty strings; inserting them into a trie
    is a no-op.
    """
    settings = settings or get_settings().word_list
    path = Path(path)
    try:
        with open(path, "r", encoding=settings.encoding) as f:
            words = [line.rstrip("\n") for line in f]
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read word list %s: %s", path, exc)
        raise

    logger.info("Read %d lines from %s", len(words), path)
    return words


def trie_from_file(
    path: str | Path,
    settings: Optional[WordListSettings] = None,
) -> Trie:
    """Build a Trie from the words in *path*, one word per line."""
    trie = Trie(read_word_list(path, settings))
    logger.info("Loaded trie (%d words) from %s", trie.size, path)
    return trie
