"""Loaders producing raw words for dictionaries."""

import gzip
import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from spellcore.services.dictionary.base import Loader
from spellcore.services.dictionary.editable import EditableDictionary

logger = logging.getLogger(__name__)

WORD_LIST_SUFFIXES = (".dic", ".txt", ".dic.gz", ".txt.gz")


class WordListLoader(Loader):
    """Loader over an in-memory sequence of words."""

    def __init__(self, name: str, words: Iterable[str]) -> None:
        self._name = name
        self._words = list(words)

    @property
    def name(self) -> str:
        return self._name

    def produce(self) -> Iterable[str]:
        return iter(self._words)


class FileLoader(Loader):
    """
    Loader reading a plain-text word list, one word per line.

    Blank lines and lines starting with '#' are skipped. Files ending in
    '.gz' are decompressed on the fly.
    """

    def __init__(self, path: Path, name: str | None = None) -> None:
        self.path = Path(path)
        self._name = name or self.path.name

    @property
    def name(self) -> str:
        return self._name

    def produce(self) -> Iterator[str]:
        logger.debug(f"Reading word list {self.path}")
        if self.path.suffix == ".gz":
            stream = gzip.open(self.path, "rt", encoding="utf-8")
        else:
            stream = self.path.open(encoding="utf-8")

        with stream:
            for line in stream:
                word = line.strip()
                if not word or word.startswith("#"):
                    continue
                yield word


class EditableDictionaryLoader(Loader):
    """Loader handing an existing editable dictionary to the engine."""

    def __init__(self, dictionary: EditableDictionary) -> None:
        self.dictionary = dictionary

    @property
    def name(self) -> str:
        return self.dictionary.name

    def produce(self) -> Iterable[str]:
        return self.dictionary.words()


def discover_dictionaries(directory: Path) -> list[FileLoader]:
    """
    Find word list files in a directory.

    Args:
        directory: Directory to scan (not recursive)

    Returns:
        One FileLoader per word list, sorted by file name
    """
    if not directory.is_dir():
        logger.debug(f"Dictionary directory {directory} does not exist")
        return []

    paths = sorted(
        p for p in directory.iterdir() if p.is_file() and p.name.endswith(WORD_LIST_SUFFIXES)
    )
    return [FileLoader(path) for path in paths]
