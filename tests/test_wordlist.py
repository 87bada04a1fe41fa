import logging

import pytest

from lexicon import LexiconTrie, add_words_from_file, find_word_list, normalize_word, read_words


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "small.txt"
    path.write_text("Help\nhold\n\n  apple  \nhelp\nno-go\nzebra\n", encoding="utf-8")
    return str(path)


def test_normalize_word():
    assert normalize_word("  Apple\n") == "apple"
    assert normalize_word("\n") is None
    assert normalize_word("two words") is None
    assert normalize_word("x1") is None
    assert normalize_word("éclair") == "éclair"


def test_read_words(word_file):
    assert list(read_words(word_file)) == ["help", "hold", "apple", "help", "zebra"]


def test_read_words_logs_skipped_lines(word_file, caplog):
    with caplog.at_level(logging.DEBUG, logger="lexicon"):
        list(read_words(word_file))
    assert "Skipped 1 malformed lines" in caplog.text


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(read_words(str(tmp_path / "nope.txt")))


def test_add_words_from_file(word_file):
    t = LexiconTrie()
    assert add_words_from_file(t, word_file) == 4
    assert list(t) == ["apple", "help", "hold", "zebra"]


def test_add_words_counts_only_new(word_file):
    t = LexiconTrie()
    t.add_word("apple")
    t.add_word("cat")
    assert add_words_from_file(t, word_file) == 3
    assert t.num_words() == 5
    assert add_words_from_file(t, word_file) == 0


def test_find_word_list_explicit(word_file):
    assert find_word_list(word_file) == word_file


def test_find_word_list_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr("lexicon.wordlist.WORD_LIST_PATHS", ("words.txt",))
    monkeypatch.chdir(tmp_path)
    assert find_word_list() is None
    assert find_word_list("missing.txt") is None

    (tmp_path / "words.txt").write_text("cat\n", encoding="utf-8")
    assert find_word_list() == "words.txt"
    assert find_word_list("missing.txt") == "words.txt"
