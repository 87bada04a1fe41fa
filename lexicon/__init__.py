"""Lexicon -- trie-backed word dictionary."""

from lexicon.base import Lexicon
from lexicon.node import NOT_FOUND, LexiconNode
from lexicon.trie import LexiconTrie
from lexicon.wordlist import add_words_from_file, find_word_list, normalize_word, read_words

__all__ = [
    "NOT_FOUND",
    "Lexicon",
    "LexiconNode",
    "LexiconTrie",
    "add_words_from_file",
    "find_word_list",
    "normalize_word",
    "read_words",
]
