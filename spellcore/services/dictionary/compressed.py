"""Immutable dictionary storing encoded words grouped by first letter and length."""

import logging
import sys
from bisect import bisect_left
from collections import defaultdict
from collections.abc import Callable, Iterable

from spellcore.services.dictionary.base import Containment, Dictionary, Loader
from spellcore.services.transform import Transform

logger = logging.getLogger(__name__)


class Alphabet:
    """Fixed set of letters, each encoded as a small integer code."""

    def __init__(self, letters: Iterable[str]) -> None:
        self._letters = tuple(sorted(set(letters)))
        # Code 0 is never assigned
        self._codes = {letter: code for code, letter in enumerate(self._letters, start=1)}
        self.width = max(1, (len(self._letters).bit_length() + 7) // 8)

    def __len__(self) -> int:
        return len(self._letters)

    def __contains__(self, letter: str) -> bool:
        return letter in self._codes

    def encode(self, word: str) -> bytes | None:
        """Encode a word, or return None if it uses a letter outside the alphabet."""
        encoded = bytearray()
        for letter in word:
            code = self._codes.get(letter)
            if code is None:
                return None
            encoded += code.to_bytes(self.width, "big")
        return bytes(encoded)

    def decode(self, encoded: bytes) -> str:
        width = self.width
        return "".join(
            self._letters[int.from_bytes(encoded[i : i + width], "big") - 1]
            for i in range(0, len(encoded), width)
        )


class CompressedDictionary(Dictionary):
    """
    Read-only dictionary built once from a loader.

    Words are normalized with the engine transform, encoded against the
    alphabet seen while building, and kept in sorted tuples keyed by first
    letter and word length. A lookup key using a letter the dictionary has
    never seen cannot be judged and answers UNKNOWN.
    """

    def __init__(
        self,
        name: str,
        alphabet: Alphabet,
        buckets: dict[str, dict[int, tuple[bytes, ...]]],
    ) -> None:
        self._name = name
        self._alphabet = alphabet
        self._buckets = buckets
        self._size = sum(len(words) for by_length in buckets.values() for words in by_length.values())

    @classmethod
    def create(cls, loader: Loader, transform: Transform) -> "CompressedDictionary | None":
        """
        Build a dictionary from a loader.

        Returns:
            The dictionary, or None if the loader produced no checkable word
        """
        keys: set[str] = set()
        for raw in loader.produce():
            key = transform(raw)
            if key:
                keys.add(key)

        if not keys:
            logger.debug(f"Loader '{loader.name}' produced no usable words")
            return None

        alphabet = Alphabet(letter for key in keys for letter in key)
        grouped: dict[str, dict[int, list[bytes]]] = defaultdict(lambda: defaultdict(list))
        for key in keys:
            encoded = alphabet.encode(key)
            if encoded is None:
                raise ValueError(f"Cannot encode '{key}' with the dictionary alphabet")
            grouped[key[0]][len(key)].append(encoded)

        buckets = {
            first: {length: tuple(sorted(words)) for length, words in by_length.items()}
            for first, by_length in grouped.items()
        }
        dictionary = cls(loader.name, alphabet, buckets)
        logger.debug(
            f"Built '{dictionary.name}': {len(dictionary)} words, {len(alphabet)} letters"
        )
        return dictionary

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        return self._size

    def contains(self, key: str) -> Containment:
        if not key:
            return Containment.NO
        encoded = self._alphabet.encode(key)
        if encoded is None:
            return Containment.UNKNOWN

        words = self._buckets.get(key[0], {}).get(len(key), ())
        index = bisect_left(words, encoded)
        if index < len(words) and words[index] == encoded:
            return Containment.YES
        return Containment.NO

    def get_words(
        self,
        first: str,
        min_length: int = 0,
        max_length: int = sys.maxsize,
    ) -> list[str]:
        """Return stored words starting with `first` whose length lies in the range."""
        by_length = self._buckets.get(first)
        if not by_length:
            return []

        words: list[str] = []
        for length in sorted(by_length):
            if min_length <= length <= max_length:
                words.extend(self._alphabet.decode(encoded) for encoded in by_length[length])
        return words

    def traverse(self, visit: Callable[[str], None]) -> None:
        for first in sorted(self._buckets):
            for word in self.get_words(first):
                visit(word)
