import pytest

from lexicon.constants import NO_CHILDREN
from lexicon.node import NOT_FOUND, LexiconNode


def letters(node):
    return "".join(child.character for child in node)


def test_locate_on_leaf_is_distinct_from_append():
    node = LexiconNode("t")
    assert node.locate("a") == NO_CHILDREN

    node.add_child(LexiconNode("k"))
    assert node.locate("z") == 1
    assert node.locate("a") == 0
    # Existing letter gives its own index.
    assert node.locate("k") == 0


def test_add_child_keeps_children_sorted():
    node = LexiconNode("t")
    for ch in "ksaz":
        node.add_child(LexiconNode(ch, terminal=True))
    assert letters(node) == "aksz"


def test_add_child_is_idempotent():
    node = LexiconNode("t")
    first = LexiconNode("s")
    first.add_child(LexiconNode("o", terminal=True))
    node.add_child(first)

    node.add_child(LexiconNode("s", terminal=True))

    assert letters(node) == "s"
    assert node.get_child("s") is first
    assert not first.terminal
    assert letters(first) == "o"


def test_get_child():
    node = LexiconNode("t")
    k = LexiconNode("k", terminal=True)
    node.add_child(LexiconNode("a"))
    node.add_child(k)

    assert node.get_child("k") is k
    assert node.get_child("b") is NOT_FOUND
    assert node.get_child("z") is NOT_FOUND
    assert LexiconNode("x").get_child("x") is NOT_FOUND


def test_not_found_is_never_a_real_node():
    node = LexiconNode("t")
    tilde = LexiconNode("~", terminal=True)
    node.add_child(tilde)
    assert node.get_child("~") is tilde
    assert node.get_child("~") is not NOT_FOUND
    assert not NOT_FOUND.children


def test_remove_child_clears_flag_only():
    node = LexiconNode("t")
    k = LexiconNode("k", terminal=True)
    k.add_child(LexiconNode("a", terminal=True))
    node.add_child(k)

    node.remove_child("k")

    assert node.get_child("k") is k
    assert not k.terminal
    assert k.get_child("a").terminal


def test_remove_missing_child_is_noop():
    node = LexiconNode("t")
    node.remove_child("q")
    node.add_child(LexiconNode("a", terminal=True))
    node.remove_child("q")
    assert node.get_child("a").terminal
    assert not NOT_FOUND.terminal


def test_comparison_is_by_letter():
    assert LexiconNode("a") < LexiconNode("b")
    assert LexiconNode("a", terminal=True) == LexiconNode("a")
    assert LexiconNode("c") >= LexiconNode("b")
    assert sorted([LexiconNode("z"), LexiconNode("m"), LexiconNode("c")]) == [
        LexiconNode("c"), LexiconNode("m"), LexiconNode("z"),
    ]
    assert len({LexiconNode("a"), LexiconNode("a", terminal=True)}) == 1


def test_has_terminal_below():
    node = LexiconNode("c")
    a = LexiconNode("a")
    node.add_child(a)
    assert not node.has_terminal_below()

    t = LexiconNode("t")
    a.add_child(t)
    assert not node.has_terminal_below()

    t.terminal = True
    assert node.has_terminal_below()
    assert not t.has_terminal_below()


def test_not_found_is_read_only():
    with pytest.raises(AttributeError):
        NOT_FOUND.terminal = True
    with pytest.raises(AttributeError):
        NOT_FOUND.children = [LexiconNode("a")]
    with pytest.raises(TypeError):
        NOT_FOUND.add_child(LexiconNode("a"))
    NOT_FOUND.remove_child("a")
    assert not NOT_FOUND.terminal
    assert len(NOT_FOUND) == 0
    assert NOT_FOUND.get_child("a") is NOT_FOUND
