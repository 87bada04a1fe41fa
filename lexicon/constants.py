"""Constants shared across the lexicon package."""

from __future__ import annotations

import os

LOGGER_NAME = "lexicon"

# Placeholder letters.  Neither is a letter, so neither can collide with a
# stored word's characters.
ROOT_CHAR = "^"
NOT_FOUND_CHAR = "~"

# Returned by LexiconNode.locate() when a node has no children at all.
NO_CHILDREN = -1

# Word lists tried in order when none is given on the command line.
WORD_LIST_PATHS: tuple[str, ...] = (
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "words.txt"),
    "/usr/share/dict/words",
)
