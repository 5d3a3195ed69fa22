"""Dictionaries and loaders used by the spell checker engine."""

from spellcore.services.dictionary.base import Containment, Dictionary, Loader
from spellcore.services.dictionary.compressed import Alphabet, CompressedDictionary
from spellcore.services.dictionary.editable import EditableDictionary
from spellcore.services.dictionary.loaders import (
    EditableDictionaryLoader,
    FileLoader,
    WordListLoader,
    discover_dictionaries,
)

__all__ = [
    "Alphabet",
    "CompressedDictionary",
    "Containment",
    "Dictionary",
    "EditableDictionary",
    "EditableDictionaryLoader",
    "FileLoader",
    "Loader",
    "WordListLoader",
    "discover_dictionaries",
]
