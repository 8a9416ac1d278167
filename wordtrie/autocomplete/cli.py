"""Autocomplete CLI — list words, query a prefix, or run a typing session."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, TextIO

from wordtrie.autocomplete.completer import AutoCompleter, NoMatchesError
from wordtrie.autocomplete.trie import Trie
from wordtrie.autocomplete.wordlist import trie_from_file
from wordtrie.config.logging_config import setup_logging
from wordtrie.config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(description="Trie-backed word completion.")
    parser.add_argument(
        "--words",
        default=None,
        help="Word list, one word per line (default: data/words.txt).",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("words", help="Print every word in the list.")

    prefix = sub.add_parser("prefix", help="Print every word starting with a prefix.")
    prefix.add_argument("prefix", help="Prefix to match.")

    sub.add_parser(
        "complete",
        help="Interactive session: type text, '-' or '-N' deletes, '?' lists, '.' shows prefix.",
    )
    return parser


def _print_sorted(words: list[str], out: TextIO, limit: int = 0) -> None:
    words = sorted(words)
    shown = words[:limit] if limit else words
    for word in shown:
        print(word, file=out)
    if len(shown) < len(words):
        print(f"... {len(words) - len(shown)} more", file=out)


def run_session(
    trie: Trie,
    lines: TextIO,
    out: TextIO,
    max_display: int = 0,
) -> None:
    """
    Drive an AutoCompleter from command lines read from *lines*.

    Plain text is typed, ``-`` deletes one character (``-N`` deletes N),
    ``?`` lists the current matches and ``.`` prints the current prefix.
    """
    completer = AutoCompleter(trie)
    for raw in lines:
        line = raw.rstrip("\n")
        if not line:
            continue

        if line == "?":
            _print_sorted(completer.all_matches(), out, max_display)
        elif line == ".":
            print(completer.prefix, file=out)
        elif line.startswith("-") and (line == "-" or line[1:].isdecimal()):
            count = int(line[1:]) if len(line) > 1 else 1
            for _ in range(min(count, len(completer))):
                completer.delete()
        else:
            try:
                completer.add_string(line)
            except NoMatchesError as exc:
                print(f"no matches for {exc.symbol!r} after {exc.prefix!r}", file=out)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    settings: Settings = get_settings()
    setup_logging(log_dir=settings.logs_dir, settings=settings.logging)

    path = args.words or settings.word_list_path
    try:
        trie = trie_from_file(path, settings.word_list)
    except Exception as exc:
        logger.exception("Could not load word list: %s", exc)
        return 1

    if args.command == "words":
        _print_sorted(trie.all_words(), sys.stdout)
    elif args.command == "prefix":
        _print_sorted(trie.all_with_prefix(args.prefix), sys.stdout)
    elif args.command == "complete":
        run_session(trie, sys.stdin, sys.stdout, settings.completion.max_display)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
