"""Prefix trie used as the compound-word dictionary."""

from __future__ import annotations

from typing import Iterator

from compoundword.wordlist import LOWERCASE, InvalidWordError


class TrieNode:
    """Single node in the prefix trie."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self.is_terminal: bool = False


class Trie:
    """Prefix trie over a closed alphabet (lowercase ASCII by default)."""

    def __init__(self, alphabet: str = LOWERCASE):
        self.root = TrieNode()
        self.alphabet = frozenset(alphabet)
        self._size = 0

    def insert(self, word: str) -> None:
        bad = set(word) - self.alphabet
        if bad:
            raise InvalidWordError(word, bad)
        node = self.root
        for ch in word:
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]
        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def prefix_ends(self, word: str, start: int = 0) -> Iterator[int]:
        """Yield each end offset ``j`` (ascending) for which
        ``word[start:j]`` is a stored word.

        Walks the trie once instead of looking up every prefix separately.
        """
        node = self.root
        for j in range(start, len(word)):
            node = node.children.get(word[j])
            if node is None:
                return
            if node.is_terminal:
                yield j + 1

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return self._size
