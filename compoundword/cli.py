"""CLI / terminal reporting for the compound word finder."""

from __future__ import annotations

import logging
import time

from compoundword.ranking import rank_compound_words
from compoundword.result import CompoundResult
from compoundword.wordlist import read_words

log = logging.getLogger("compoundword")

_NOT_FOUND = "No compound word found"


def print_result(result: CompoundResult) -> None:
    """Print both result slots in the classic report format."""
    print(f"Longest Compound Word: {result.longest or _NOT_FOUND}")
    print(f"Second Largest Compound Word: {result.second_longest or _NOT_FOUND}")
    for word in result.words:
        log.debug("%s = %s", word, " + ".join(result.segments[word]))


def process_file(path: str) -> CompoundResult:
    """Read *path*, rank its compound words and print the report.

    A word list that cannot be read is logged and reported as an empty
    result; it never stops the run.
    """
    t0 = time.time()
    try:
        words = read_words(path)
    except OSError as exc:
        log.error("Cannot read word list %s: %s", path, exc)
        words = []

    result = rank_compound_words(words)
    elapsed = time.time() - t0

    print_result(result)
    if result.skipped:
        log.warning("%d token(s) outside a-z were ignored", result.skipped)
    log.debug("Tested %d candidate(s)", result.examined)
    print(f"Time taken to process the file: {elapsed} seconds")
    return result


def run_cli(paths: list[str]) -> list[CompoundResult]:
    """Process each word list in turn."""
    results: list[CompoundResult] = []
    for i, path in enumerate(paths, start=1):
        print(f"FOR INPUT {i:02d}--------")
        results.append(process_file(path))
    return results
