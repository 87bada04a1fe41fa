"""Loading one-word-per-line word lists into a Lexicon."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from lexicon.base import Lexicon
from lexicon.constants import LOGGER_NAME, WORD_LIST_PATHS

log = logging.getLogger(LOGGER_NAME)


def normalize_word(line: str) -> str | None:
    """Stripped, lowercased word, or None for blank / non-alphabetic lines."""
    word = line.strip().lower()
    if not word or not word.isalpha():
        return None
    return word


def read_words(path: str) -> Iterator[str]:
    """Yield the usable words of *path*, one per line.

    Raises ``FileNotFoundError`` (or any other ``OSError``) if the file
    cannot be opened.
    """
    skipped = 0
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = normalize_word(line)
            if word is None:
                if line.strip():
                    skipped += 1
                continue
            yield word
    if skipped:
        log.debug("Skipped %d malformed lines in %s", skipped, path)


def add_words_from_file(lexicon: Lexicon, path: str) -> int:
    """Add every word in *path* to *lexicon*.

    Parameters
    ----------
    lexicon : Lexicon
        Destination; words already in it are skipped.
    path : str
        UTF-8 text file with one word per line.

    Returns
    -------
    int
        Number of words that were new to the lexicon.
    """
    before = lexicon.num_words()
    for word in read_words(path):
        lexicon.add_word(word)
    added = lexicon.num_words() - before
    log.info("Loaded %s new words from %s", f"{added:,}", path)
    return added


def find_word_list(path: str | None = None) -> str | None:
    """First existing file among *path* and the default search paths."""
    search_paths: list[str] = []
    if path:
        if not os.path.isfile(path):
            log.warning("Word list %s not found -- trying default locations.", path)
        search_paths.append(path)
    search_paths.extend(WORD_LIST_PATHS)

    for candidate in search_paths:
        if os.path.isfile(candidate):
            return candidate

    log.warning("No word list found.")
    return None
