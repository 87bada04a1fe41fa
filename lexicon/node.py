"""Single vertex of the lexicon trie."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterator
from functools import total_ordering

from lexicon.constants import NO_CHILDREN, NOT_FOUND_CHAR


def _letter(node: LexiconNode) -> str:
    return node.character


@total_ordering
class LexiconNode:
    """One letter of the trie plus its children, kept sorted by letter.

    Nodes compare (and hash) by ``character`` alone, so two nodes holding the
    same letter are equal even when their subtrees differ.
    """

    __slots__ = ("character", "terminal", "children")

    def __init__(self, character: str, terminal: bool = False):
        self.character = character
        self.terminal = terminal
        self.children: list[LexiconNode] = []

    # ordering

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LexiconNode):
            return NotImplemented
        return self.character == other.character

    def __lt__(self, other: LexiconNode) -> bool:
        if not isinstance(other, LexiconNode):
            return NotImplemented
        return self.character < other.character

    def __hash__(self) -> int:
        return hash(self.character)

    def __repr__(self) -> str:
        mark = "*" if self.terminal else ""
        kids = "".join(c.character for c in self.children)
        return f"<LexiconNode {self.character!r}{mark} [{kids}]>"

    # children

    def __iter__(self) -> Iterator[LexiconNode]:
        """Children in ascending letter order."""
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def locate(self, ch: str) -> int:
        """Index at which a child for *ch* is, or would be inserted.

        Returns ``NO_CHILDREN`` when the node is a leaf, which is distinct from
        ``len(self.children)`` ("append at the end").
        """
        if not self.children:
            return NO_CHILDREN
        return bisect_left(self.children, ch, key=_letter)

    def add_child(self, node: LexiconNode) -> None:
        """Insert *node* in sorted position.  No-op if its letter is taken."""
        i = self.locate(node.character)
        if i == NO_CHILDREN:
            self.children.append(node)
        elif i == len(self.children) or self.children[i].character != node.character:
            self.children.insert(i, node)

    def get_child(self, ch: str) -> LexiconNode:
        """Child holding *ch*, or ``NOT_FOUND``."""
        i = self.locate(ch)
        if i == NO_CHILDREN or i >= len(self.children):
            return NOT_FOUND
        child = self.children[i]
        if child.character != ch:
            return NOT_FOUND
        return child

    def remove_child(self, ch: str) -> None:
        """Clear the word flag on child *ch*.  The child stays attached."""
        child = self.get_child(ch)
        if child is not NOT_FOUND:
            child.terminal = False

    def has_terminal_below(self) -> bool:
        """True if any descendant (not this node) ends a word."""
        stack = list(self.children)
        while stack:
            node = stack.pop()
            if node.terminal:
                return True
            stack.extend(node.children)
        return False


class _NotFound(LexiconNode):
    """Read-only placeholder node with no children."""

    __slots__ = ()

    def __init__(self, character: str):
        object.__setattr__(self, "character", character)
        object.__setattr__(self, "terminal", False)
        object.__setattr__(self, "children", ())

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"NOT_FOUND is read-only (cannot set {name!r})")

    def add_child(self, node: LexiconNode) -> None:
        raise TypeError("NOT_FOUND cannot have children")

    def __repr__(self) -> str:
        return "<LexiconNode NOT_FOUND>"


# Returned by lookups that fail.  Compare with ``is``: a real node may hold the
# same letter.  Never attached to a tree.
NOT_FOUND = _NotFound(NOT_FOUND_CHAR)
