"""Abstract word-dictionary contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator


class Lexicon(ABC):
    """A set of lowercase words with prefix queries and sorted iteration.

    Every word operation lowercases its argument, so lookups and removals
    ignore case: after ``add_word("Help")``, ``remove_word("HELP")`` is true.

    Subclasses implement the word operations.  ``suggest_corrections`` and
    ``match_regex`` are part of the contract but optional; the defaults
    raise ``NotImplementedError``.
    """

    @abstractmethod
    def add_word(self, word: str) -> bool:
        """Add *word*.  True if it was not already present."""

    @abstractmethod
    def remove_word(self, word: str) -> bool:
        """Remove *word*.  True if it was present."""

    @abstractmethod
    def contains_word(self, word: str) -> bool:
        """True if *word* is stored."""

    @abstractmethod
    def contains_prefix(self, prefix: str) -> bool:
        """True if some stored word starts with *prefix*."""

    @abstractmethod
    def num_words(self) -> int:
        """Number of stored words."""

    @abstractmethod
    def __iter__(self) -> Iterator[str]:
        """Stored words in lexicographic order."""

    def __len__(self) -> int:
        return self.num_words()

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains_word(word)

    def suggest_corrections(self, target: str, max_distance: int) -> set[str]:
        """Words within *max_distance* edits of *target*."""
        raise NotImplementedError(f"{type(self).__name__} does not support suggest_corrections")

    def match_regex(self, pattern: str) -> set[str]:
        """Words matching the wildcard *pattern*."""
        raise NotImplementedError(f"{type(self).__name__} does not support match_regex")
