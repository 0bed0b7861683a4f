"""Segmentation of a word into dictionary words.

A word is *compound* when it splits into two or more non-empty pieces,
each of which is in the dictionary, covering the whole word. The search
tries split points shortest-prefix-first and stops at the first
decomposition that works.

Matching the whole word as a single piece does not count. The search
tracks how many pieces the current path has consumed and only accepts
reaching the end of the word when that count is not exactly one. Since
the count only grows, every count of two or more behaves the same, so
results are memoised per ``(offset, min(count, 2))``.
"""

from __future__ import annotations

from compoundword.trie import Trie


def segment(word: str, trie: Trie) -> list[str] | None:
    """Return the first decomposition of *word* into two or more
    dictionary words, or ``None`` if there is none.

    Parameters
    ----------
    word : str
        Candidate word.
    trie : Trie
        Dictionary to split against. *word* itself may be stored in it.

    Returns
    -------
    list[str] | None
        The pieces in order (shortest first piece first), or ``None``.
    """
    if not word:
        return None

    n = len(word)
    # (offset, depth class) -> end offset of the next piece, or None if dead
    memo: dict[tuple[int, int], int | None] = {}

    def solve(start: int, depth: int) -> bool:
        if start == n:
            return depth != 1
        key = (start, min(depth, 2))
        if key in memo:
            return memo[key] is not None
        memo[key] = None
        for end in trie.prefix_ends(word, start):
            if solve(end, depth + 1):
                memo[key] = end
                return True
        return False

    if not solve(0, 0):
        return None

    pieces: list[str] = []
    start, depth = 0, 0
    while start < n:
        end = memo[(start, min(depth, 2))]
        pieces.append(word[start:end])
        start, depth = end, depth + 1
    return pieces


def is_compound(word: str, trie: Trie) -> bool:
    """True if *word* splits into two or more words stored in *trie*."""
    return segment(word, trie) is not None
