#!/usr/bin/env python3
"""
Compound Word Finder

Reads word lists (one word per line) and reports the longest and
second-longest words that are made up of two or more other words from
the same list. Uses a prefix trie for dictionary lookups.
"""

from __future__ import annotations

import argparse
import logging

from compoundword.cli import run_cli


# Logging setup

logging.basicConfig(
    level=logging.INFO,
    format="[%(levelname)s] %(message)s",
)
log = logging.getLogger("compoundword")

DEFAULT_INPUTS = ["Input_01.txt", "Input_02.txt"]


# Entry point

def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Compound Word Finder -- longest words built from other words in the list",
    )
    parser.add_argument("files", nargs="*", default=DEFAULT_INPUTS,
                        help="Word list files, one word per line "
                             f"(default: {' '.join(DEFAULT_INPUTS)})")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    run_cli(args.files)


if __name__ == "__main__":
    main()
