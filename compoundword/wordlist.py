"""Word list loading and token validation."""

from __future__ import annotations

import logging
import string

log = logging.getLogger("compoundword")

LOWERCASE = string.ascii_lowercase


class InvalidWordError(ValueError):
    """Raised when a word contains symbols outside the dictionary alphabet."""

    def __init__(self, word: str, symbols: set[str]):
        self.word = word
        self.symbols = symbols
        bad = ", ".join(repr(s) for s in sorted(symbols))
        super().__init__(f"{word!r} contains symbols outside the alphabet: {bad}")


def is_valid_word(word: str, alphabet: str = LOWERCASE) -> bool:
    """True if *word* is non-empty and spelled only with *alphabet*."""
    return bool(word) and all(ch in alphabet for ch in word)


def read_words(path: str) -> list[str]:
    """Read one word per line from *path*, in file order.

    Surrounding whitespace is stripped and blank lines are dropped.
    Tokens are not validated here; that happens when the dictionary is
    built.

    Raises
    ------
    OSError
        If the file is missing or cannot be read.
    """
    words: list[str] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip()
            if word:
                words.append(word)
    log.info("Loaded %s words from %s", f"{len(words):,}", path)
    return words
