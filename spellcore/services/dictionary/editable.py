"""Mutable, user-maintained dictionary."""

import logging
import threading
from collections.abc import Callable, Iterable

from spellcore.services.dictionary.base import Containment, Dictionary

logger = logging.getLogger(__name__)


class EditableDictionary(Dictionary):
    """
    In-memory word set that users can add words to and remove words from.

    Every operation takes an internal lock, so edits coming from user actions
    may run concurrently with lookups. A user list only knows the words it
    holds: an absent word is UNKNOWN, never NO.
    """

    def __init__(self, name: str, words: Iterable[str] | None = None) -> None:
        self._name = name
        self._lock = threading.Lock()
        self._words: set[str] = {w for w in words or () if w}

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        with self._lock:
            return len(self._words)

    def contains(self, key: str) -> Containment:
        with self._lock:
            found = key in self._words
        return Containment.YES if found else Containment.UNKNOWN

    def traverse(self, visit: Callable[[str], None]) -> None:
        # Visit a snapshot so callbacks never run under the lock
        for word in self.words():
            visit(word)

    def words(self) -> list[str]:
        """Return a sorted snapshot of the stored words."""
        with self._lock:
            return sorted(self._words)

    def add_word(self, word: str) -> bool:
        """Add a word. Returns False if it was empty or already present."""
        if not word:
            return False
        with self._lock:
            if word in self._words:
                return False
            self._words.add(word)
        logger.debug(f"Added '{word}' to {self._name}")
        return True

    def add_words(self, words: Iterable[str]) -> int:
        """Add several words, returning how many were new."""
        return sum(1 for word in words if self.add_word(word))

    def remove_word(self, word: str) -> bool:
        """Remove a word. Returns False if it was not present."""
        with self._lock:
            if word not in self._words:
                return False
            self._words.discard(word)
        logger.debug(f"Removed '{word}' from {self._name}")
        return True

    def replace_all(self, words: Iterable[str]) -> None:
        """Replace the whole content with `words`."""
        new_words = {w for w in words if w}
        with self._lock:
            self._words = new_words

    def clear(self) -> None:
        with self._lock:
            self._words.clear()
