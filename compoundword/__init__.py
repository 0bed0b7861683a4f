"""Compound word finder package."""

from compoundword.trie import Trie, TrieNode
from compoundword.segment import is_compound, segment
from compoundword.result import CompoundResult
from compoundword.ranking import build_trie, iter_compound_words, rank_compound_words
from compoundword.wordlist import LOWERCASE, InvalidWordError, is_valid_word, read_words

__all__ = [
    "LOWERCASE",
    "CompoundResult",
    "InvalidWordError",
    "Trie",
    "TrieNode",
    "build_trie",
    "is_compound",
    "is_valid_word",
    "iter_compound_words",
    "rank_compound_words",
    "read_words",
    "segment",
]
