"""Prefix trie implementing the Lexicon contract."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from lexicon.base import Lexicon
from lexicon.constants import LOGGER_NAME, ROOT_CHAR
from lexicon.node import NOT_FOUND, LexiconNode

log = logging.getLogger(LOGGER_NAME)


class LexiconTrie(Lexicon):
    """Character trie with soft deletion.

    Removing a word only clears its node's word flag; nodes are never
    detached, so shared prefixes (and re-insertion) stay cheap.  Words are
    stored lowercase.
    """

    def __init__(self):
        self.root = LexiconNode(ROOT_CHAR)
        self._count = 0

    def __repr__(self) -> str:
        return f"<LexiconTrie {self._count} words>"

    # lookup

    def _walk(self, s: str) -> LexiconNode:
        """Node at the end of path *s*, or NOT_FOUND.  The root is never
        returned, so the empty string is never found."""
        if not s:
            return NOT_FOUND
        node = self.root
        for ch in s:
            node = node.get_child(ch)
            if node is NOT_FOUND:
                break
        return node

    def contains_word(self, word: str) -> bool:
        return self._walk(word.lower()).terminal

    def contains_prefix(self, prefix: str) -> bool:
        node = self._walk(prefix.lower())
        if node is NOT_FOUND:
            return False
        # Deleted words leave their nodes behind, so a path only counts as a
        # prefix while it still leads to a word.
        return node.terminal or node.has_terminal_below()

    def num_words(self) -> int:
        return self._count

    # mutation

    def add_word(self, word: str) -> bool:
        word = word.lower()
        if not word or self.contains_word(word):
            return False

        node = self.root
        for i, ch in enumerate(word):
            child = node.get_child(ch)
            if child is NOT_FOUND:
                node.add_child(self._make_chain(word[i:]))
                break
            node = child
        else:
            # Path already there: a removed word or a prefix of a longer one.
            node.terminal = True

        self._count += 1
        log.debug("Added %r (%d words)", word, self._count)
        return True

    @staticmethod
    def _make_chain(suffix: str) -> LexiconNode:
        """Build a single-branch chain spelling *suffix*, last node terminal."""
        tail = LexiconNode(suffix[-1], terminal=True)
        for ch in reversed(suffix[:-1]):
            head = LexiconNode(ch)
            head.add_child(tail)
            tail = head
        return tail

    def remove_word(self, word: str) -> bool:
        word = word.lower()
        node = self._walk(word)
        if node is NOT_FOUND or not node.terminal:
            return False

        node.terminal = False
        self._count -= 1
        log.debug("Removed %r (%d words)", word, self._count)
        return True

    # enumeration

    def __iter__(self) -> Iterator[str]:
        return self._words_below(self.root, "")

    def words_with_prefix(self, prefix: str) -> Iterator[str]:
        """Stored words starting with *prefix*, in order, *prefix* included."""
        prefix = prefix.lower()
        node = self._walk(prefix)
        if node is NOT_FOUND:
            return
        if node.terminal:
            yield prefix
        yield from self._words_below(node, prefix)

    def _words_below(self, node: LexiconNode, spelled: str) -> Iterator[str]:
        # Pre-order with an explicit stack: children are pushed in reverse so
        # the smallest letter pops first, and a node's whole subtree is popped
        # before its next sibling.
        stack = [(child, spelled + child.character) for child in reversed(node.children)]
        while stack:
            current, word = stack.pop()
            if current.terminal:
                yield word
            stack.extend(
                (child, word + child.character) for child in reversed(current.children)
            )
