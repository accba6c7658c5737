"""Bigram histogram — word sequence to ordered bigram counts.

Counting is a single walk over consecutive pairs. Each distinct bigram is
recorded the first time it is seen and its count bumped on every repeat.
Reporting order is first-seen order, never sorted.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from .tokenizer import TokenizerConfig, tokenize


def bigram_key(left: str, right: str) -> str:
    """Canonical bigram form: the two tokens joined by a single space."""
    return f"{left} {right}"


@dataclass
class BigramCount:
    """
    One histogram entry: a bigram, how often it occurs, and the pair index
    at which it first appeared.
    """
    bigram: str
    first_position: int
    count: int = 0

    def increment(self) -> None:
        self.count += 1

    def __str__(self) -> str:
        return f'"{self.bigram}" {self.count}'


class BigramHistogram:
    """
    Insertion-ordered map from bigram to occurrence count.

    Lookup goes through a dict keyed by the joined bigram string; the dict
    keeps insertion order, so the key list doubles as the first-seen order.
    """

    def __init__(self) -> None:
        # bigram -> BigramCount, in first-seen order
        self._entries: dict[str, BigramCount] = {}
        # Total pair occurrences
        self._total: int = 0

    def add(self, left: str, right: str) -> BigramCount:
        """Count one occurrence of the pair (left, right)."""
        key = bigram_key(left, right)
        entry = self._entries.get(key)
        if entry is None:
            entry = BigramCount(key, first_position=self._total)
            self._entries[key] = entry
        entry.increment()
        self._total += 1
        return entry

    def add_sequence(self, tokens: Sequence[str]) -> None:
        """Count every adjacent pair in tokens.

        Pairs never span separate calls.
        """
        for i in range(len(tokens) - 1):
            self.add(tokens[i], tokens[i + 1])

    def count(self, bigram: str) -> int:
        """Occurrences of a bigram, 0 if never seen."""
        entry = self._entries.get(bigram)
        return entry.count if entry else 0

    def get(self, bigram: str) -> BigramCount | None:
        return self._entries.get(bigram)

    @property
    def order(self) -> list[str]:
        """Distinct bigrams in first-seen order."""
        return list(self._entries)

    @property
    def total(self) -> int:
        """Sum of all counts."""
        return self._total

    def entries(self) -> list[BigramCount]:
        return list(self._entries.values())

    def items(self) -> list[tuple[str, int]]:
        """(bigram, count) pairs in first-seen order."""
        return [(e.bigram, e.count) for e in self._entries.values()]

    def __iter__(self) -> Iterator[BigramCount]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, bigram: object) -> bool:
        return bigram in self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigramHistogram):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"BigramHistogram(distinct={len(self)}, total={self._total})"

    @classmethod
    def from_tokens(cls, tokens: Sequence[str]) -> BigramHistogram:
        histogram = cls()
        histogram.add_sequence(tokens)
        return histogram


def compute_histogram(
    text: str, config: TokenizerConfig | None = None
) -> tuple[list[tuple[str, int]], int]:
    """Tokenize text and count its bigrams.

    Args:
        text: Decoded input text
        config: Optional TokenizerConfig

    Returns:
        (entries, total) where entries is a list of (bigram, count) in
        first-seen order and total is the sum of the counts.
    """
    histogram = BigramHistogram.from_tokens(tokenize(text, config))
    return histogram.items(), histogram.total
