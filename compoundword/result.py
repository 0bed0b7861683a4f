"""Result of a compound-word ranking run."""

from __future__ import annotations


class CompoundResult:
    """Longest and second-longest compound words found in one word list."""

    __slots__ = ("longest", "second_longest", "segments", "examined", "skipped")

    def __init__(
        self,
        longest: str | None = None,
        second_longest: str | None = None,
        segments: dict[str, list[str]] | None = None,
        examined: int = 0,
        skipped: int = 0,
    ):
        self.longest = longest
        self.second_longest = second_longest
        self.segments = segments or {}  # word -> pieces found for it
        self.examined = examined        # candidates tested
        self.skipped = skipped          # tokens outside the alphabet

    def add(self, word: str, pieces: list[str]) -> bool:
        """Fill the next open slot.  Returns True once both are filled."""
        if self.longest is None:
            self.longest = word
        elif self.second_longest is None:
            self.second_longest = word
        else:
            raise ValueError("both result slots are already filled")
        self.segments[word] = pieces
        return self.is_complete

    @property
    def is_complete(self) -> bool:
        return self.second_longest is not None

    @property
    def words(self) -> list[str]:
        return [w for w in (self.longest, self.second_longest) if w is not None]

    def __bool__(self) -> bool:
        return self.longest is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompoundResult):
            return NotImplemented
        return (self.longest, self.second_longest) == (other.longest, other.second_longest)

    def __repr__(self) -> str:
        return (
            f"CompoundResult(longest={self.longest!r}, "
            f"second_longest={self.second_longest!r}, examined={self.examined})"
        )
