"""Command-line entry point for the lexicon trie."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Iterable

from lexicon.constants import LOGGER_NAME
from lexicon.trie import LexiconTrie
from lexicon.wordlist import add_words_from_file, find_word_list

log = logging.getLogger(LOGGER_NAME)

HELP_TEXT = """\
Commands:
  add WORD [WORD ...]     -- add words
  remove WORD [WORD ...]  -- remove words
  has WORD                -- is WORD stored?
  prefix PREFIX           -- list the words starting with PREFIX
  count                   -- number of stored words
  list                    -- list every stored word
  help                    -- show this text
  quit                    -- leave"""


def print_words(words: Iterable[str]) -> int:
    """Print one word per line; return how many were printed."""
    n = 0
    for word in words:
        print(word)
        n += 1
    return n


def run_interactive(trie: LexiconTrie) -> None:
    """Read commands from the terminal until ``quit`` or EOF."""
    print()
    print(HELP_TEXT)
    print()

    while True:
        try:
            inp = input("lexicon> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        cmd, *args = inp.split()
        cmd = cmd.lower()

        if cmd == "quit":
            break
        if cmd == "help":
            print(HELP_TEXT)
        elif cmd == "count":
            print(f"  {trie.num_words():,} words")
        elif cmd == "list":
            print_words(trie)
        elif cmd == "add" and args:
            for word in args:
                status = "added" if trie.add_word(word) else "already present"
                print(f"  {word.lower()}: {status}")
        elif cmd == "remove" and args:
            for word in args:
                status = "removed" if trie.remove_word(word) else "not present"
                print(f"  {word.lower()}: {status}")
        elif cmd == "has" and len(args) == 1:
            word = args[0]
            if trie.contains_word(word):
                print(f"  {word.lower()} is a word")
            elif trie.contains_prefix(word):
                print(f"  {word.lower()} is a prefix only")
            else:
                print(f"  {word.lower()} not found")
        elif cmd == "prefix" and len(args) == 1:
            if print_words(trie.words_with_prefix(args[0])) == 0:
                print(f"  no words start with {args[0].lower()}")
        else:
            print("  Unknown command.  Type 'help' for the list.")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Lexicon -- load a word list into a trie and query it",
    )
    parser.add_argument("wordlist", nargs="?", default=None,
                        help="Path to a word list (one word per line)")
    parser.add_argument("--remove", "-r", action="append", default=[], metavar="WORD",
                        help="Remove WORD after loading (repeatable)")
    parser.add_argument("--prefix", "-p", type=str, default=None,
                        help="Only print the words starting with PREFIX")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Enter the interactive command loop after loading")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    path = find_word_list(args.wordlist)
    if path is None:
        log.error("Give a word list path, or save one as words.txt.")
        return 1

    trie = LexiconTrie()
    try:
        added = add_words_from_file(trie, path)
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Could not read %s: %s", path, exc)
        return 1
    print(f"Added {added:,} words from {path}")

    for word in args.remove:
        status = "removed" if trie.remove_word(word) else "not present"
        print(f"  {word.lower()}: {status}")

    if args.prefix is not None:
        print_words(trie.words_with_prefix(args.prefix))
    elif not args.interactive:
        print_words(trie)

    if args.interactive:
        run_interactive(trie)
    return 0
