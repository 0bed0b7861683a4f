"""Ranking driver: find the longest compound words in a word list."""

from __future__ import annotations

import heapq
import logging
from typing import Iterable, Iterator

from compoundword.result import CompoundResult
from compoundword.segment import segment
from compoundword.trie import Trie
from compoundword.wordlist import InvalidWordError

log = logging.getLogger("compoundword")


def build_trie(words: Iterable[str]) -> tuple[Trie, int]:
    """Insert every valid word into a fresh trie.

    Returns the trie and the number of tokens skipped because they fall
    outside the alphabet.  Empty tokens are ignored silently.
    """
    trie = Trie()
    skipped = 0
    for word in words:
        if not word:
            continue
        try:
            trie.insert(word)
        except InvalidWordError as exc:
            log.warning("Skipping %s", exc)
            skipped += 1
    log.debug("Dictionary holds %d distinct words", len(trie))
    return trie, skipped


def _longest_first(words: list[str], trie: Trie) -> Iterator[str]:
    """Yield the storable entries of *words* by decreasing length.

    Equal lengths come out in list order.  Each entry is yielded once.
    """
    heap = [
        (-len(w), i, w) for i, w in enumerate(words)
        if w and trie.alphabet.issuperset(w)
    ]
    heapq.heapify(heap)
    while heap:
        yield heapq.heappop(heap)[2]


def iter_compound_words(
    words: list[str],
    trie: Trie | None = None,
) -> Iterator[tuple[str, list[str]]]:
    """Yield ``(word, pieces)`` for each compound word, longest first.

    *words* is not modified.  If *trie* is None it is built from the
    full list first.
    """
    if trie is None:
        trie, _ = build_trie(words)
    for word in _longest_first(words, trie):
        pieces = segment(word, trie)
        if pieces is None:
            log.debug("  %s: not compound", word)
            continue
        log.debug("  %s: %s", word, " + ".join(pieces))
        yield word, pieces


def rank_compound_words(words: list[str]) -> CompoundResult:
    """Find the longest and second-longest compound words in *words*.

    The dictionary is built once from the whole list, so every word can
    serve as a piece of another even after it has been examined itself.
    Slots that cannot be filled stay ``None``.
    """
    trie, skipped = build_trie(words)
    result = CompoundResult(skipped=skipped)
    for word in _longest_first(words, trie):
        result.examined += 1
        pieces = segment(word, trie)
        if pieces is not None and result.add(word, pieces):
            break
    return result
