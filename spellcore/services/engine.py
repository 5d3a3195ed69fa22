"""Spell checker engine combining bundled and user dictionaries."""

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import Executor
from dataclasses import dataclass

from spellcore.services.dictionary.base import Containment, Dictionary, Loader
from spellcore.services.dictionary.compressed import CompressedDictionary
from spellcore.services.dictionary.editable import EditableDictionary
from spellcore.services.dictionary.loaders import EditableDictionaryLoader
from spellcore.services.loading import LoadCoordinator
from spellcore.services.metrics import LevenshteinDistance, Metric
from spellcore.services.registry import DictionaryRegistry
from spellcore.services.transform import Transform, Transformation

logger = logging.getLogger(__name__)

# Pool verdicts returned by pool_verdict(); a positive value means
# "every dictionary answered UNKNOWN" and equals the pool size.
CORRECT = 0
INCORRECT = -1


@dataclass(frozen=True)
class Suggestion:
    """A candidate correction and its distance from the checked word."""

    word: str
    distance: int


def pool_verdict(key: str, dictionaries: Iterable[Dictionary]) -> int:
    """
    Ask every dictionary of a pool about `key`.

    Returns:
        CORRECT (0) if any dictionary answers YES, the pool size if all of
        them answer UNKNOWN, INCORRECT (-1) otherwise (including empty pools)
    """
    unknown = 0
    size = 0
    for dictionary in dictionaries:
        size += 1
        answer = dictionary.contains(key)
        if answer is Containment.YES:
            return CORRECT
        if answer is Containment.UNKNOWN:
            unknown += 1
    if size and unknown == size:
        return unknown
    return INCORRECT


def combine_verdicts(bundled: int, user: int) -> bool:
    """A word is correct if either pool knows it, or neither pool can tell."""
    return bundled == CORRECT or user == CORRECT or (bundled > 0 and user > 0)


def _collect_words(first: str, dictionaries: Iterable[Dictionary]) -> list[str]:
    """Gather stored words starting with `first` from every dictionary."""
    results: list[str] = []

    def visit(word: str) -> None:
        if word and word[0] == first:
            results.append(word)

    for dictionary in dictionaries:
        if isinstance(dictionary, CompressedDictionary):
            results.extend(dictionary.get_words(first))
        else:
            dictionary.traverse(visit)
    return results


class SpellCheckerEngine:
    """
    Facade answering "is this word known?" and "what did you mean?".

    One engine is created per host (application, CLI run, test) with its
    transform and metric; dictionaries are added through `load_dictionary`.
    Queries never wait for loading: while a background build is running every
    word is treated as correct.
    """

    def __init__(
        self,
        transform: Transform | None = None,
        metric: Metric | None = None,
        synchronous: bool = False,
        executor: Executor | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            transform: Word normalization. Defaults to Transformation()
            metric: Suggestion distance. Defaults to LevenshteinDistance()
            synchronous: Build dictionaries on the calling thread (CLI, tests)
            executor: Executor for background builds. Defaults to a private
                single-thread pool
        """
        self.transform = transform or Transformation()
        self.metric = metric or LevenshteinDistance()
        self.registry = DictionaryRegistry()
        self._listeners: list[Callable[[], None]] = []
        self.coordinator = LoadCoordinator(
            self.transform,
            on_finished=self._request_reanalysis,
            synchronous=synchronous,
            executor=executor,
        )

    @property
    def is_loading(self) -> bool:
        return self.coordinator.is_building

    def add_reanalysis_listener(self, callback: Callable[[], None]) -> None:
        """Register a callback run once after each completed background load batch."""
        self._listeners.append(callback)

    def _request_reanalysis(self) -> None:
        for callback in list(self._listeners):
            callback()

    def load_dictionary(self, loader: Loader) -> None:
        """Register an editable dictionary, or build a bundled one from `loader`."""
        if isinstance(loader, EditableDictionaryLoader):
            self.register_user_dictionary(loader.dictionary)
            return
        self.coordinator.request_load(loader, self.registry.add_compressed)

    def register_user_dictionary(self, dictionary: EditableDictionary) -> None:
        self.registry.add_editable(dictionary)

    def unregister_user_dictionary(self, dictionary: EditableDictionary) -> None:
        self.registry.remove_editable(dictionary)

    def wait_until_idle(self, timeout: float | None = None) -> bool:
        return self.coordinator.wait_until_idle(timeout)

    def is_correct(self, word: str) -> bool:
        """
        Check a word against every dictionary.

        Words that cannot be normalized, and any word asked about while
        dictionaries are loading, are reported as correct.
        """
        key = self.transform(word)
        if key is None or self.coordinator.is_building:
            return True

        bundled = pool_verdict(key, self.registry.bundled)
        user = pool_verdict(key, self.registry.user)
        return combine_verdicts(bundled, user)

    def suggest(self, word: str, threshold: int, quality: int) -> list[str]:
        """
        Suggest corrections for a word.

        Args:
            word: The (presumably misspelled) word
            threshold: Maximum number of suggestions
            quality: Allowed difference from the best distance

        Returns:
            Suggested words ordered by ascending distance
        """
        key = self.transform(word)
        if not key:
            return []

        # Bundled words are matched on the normalized key, user words on the raw word
        candidates = _collect_words(key[0], self.registry.bundled)
        if word:
            candidates.extend(_collect_words(word[0], self.registry.user))

        suggestions = [
            Suggestion(candidate, self.metric.distance(key, candidate)) for candidate in candidates
        ]
        if not suggestions:
            return []

        suggestions.sort(key=lambda s: s.distance)
        best = suggestions[0].distance
        result: list[str] = []
        for i in range(threshold):
            if len(suggestions) <= i or best - suggestions[i].distance > quality:
                break
            result.append(suggestions[i].word)
        return result

    def reset(self) -> None:
        """Forget every dictionary (a load in flight will still publish its result)."""
        self.registry.reset()

    def is_dictionary_loaded(self, name: str) -> bool:
        return self.registry.is_loaded(name)

    def remove_dictionary(self, name: str) -> None:
        self.registry.remove_by_name(name)

    def find_bundled_by_name(self, name: str) -> Dictionary | None:
        return self.registry.find_by_name(name)

    def close(self) -> None:
        """Release the background loader."""
        self.coordinator.shutdown(wait=False)
