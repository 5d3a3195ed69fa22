"""Distance metrics used to rank suggestions."""

from typing import Protocol

from rapidfuzz.distance import Levenshtein


class Metric(Protocol):
    """Non-negative integer distance between two normalized keys."""

    def distance(self, a: str, b: str) -> int: ...  # pragma: no cover


class LevenshteinDistance:
    """Plain edit distance (insert, delete, substitute all cost 1)."""

    def distance(self, a: str, b: str) -> int:
        return int(Levenshtein.distance(a, b))
