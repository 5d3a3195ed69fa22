"""Word normalization applied before every dictionary lookup."""

from typing import Protocol


class Transform(Protocol):
    """Maps a raw word to its lookup key, or None if it cannot be checked."""

    def __call__(self, word: str) -> str | None: ...  # pragma: no cover


class Transformation:
    """Default normalization: trimmed, lowercased, at least `min_length` long."""

    def __init__(self, min_length: int = 3) -> None:
        self.min_length = min_length

    def __call__(self, word: str) -> str | None:
        if word is None:
            return None
        stripped = word.strip()
        # Very short tokens are mostly abbreviations, never flag them
        if len(stripped) < self.min_length:
            return None
        return stripped.lower()
