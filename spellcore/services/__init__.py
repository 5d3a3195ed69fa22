"""Service layer for spellcore."""

from spellcore.services.engine import SpellCheckerEngine, Suggestion
from spellcore.services.loading import LoadCoordinator, LoadState
from spellcore.services.registry import DictionaryRegistry

__all__ = [
    "DictionaryRegistry",
    "LoadCoordinator",
    "LoadState",
    "SpellCheckerEngine",
    "Suggestion",
]
