"""Registry of bundled and user dictionaries."""

import logging
import threading

from spellcore.services.dictionary.base import Dictionary
from spellcore.services.dictionary.editable import EditableDictionary

logger = logging.getLogger(__name__)


class DictionaryRegistry:
    """
    Holds the bundled (compressed) and user (editable) dictionary pools.

    Both pools are published as immutable tuples that are replaced under a
    lock, so readers iterate a consistent snapshot without locking.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bundled: tuple[Dictionary, ...] = ()
        self._user: tuple[EditableDictionary, ...] = ()

    @property
    def bundled(self) -> tuple[Dictionary, ...]:
        return self._bundled

    @property
    def user(self) -> tuple[EditableDictionary, ...]:
        return self._user

    def add_compressed(self, dictionary: Dictionary) -> None:
        with self._lock:
            self._bundled = (*self._bundled, dictionary)
        logger.debug(f"Published bundled dictionary '{dictionary.name}'")

    def add_editable(self, dictionary: EditableDictionary) -> None:
        with self._lock:
            if any(d is dictionary for d in self._user):
                return
            self._user = (*self._user, dictionary)
        logger.debug(f"Registered user dictionary '{dictionary.name}'")

    def remove_editable(self, dictionary: EditableDictionary) -> None:
        with self._lock:
            self._user = tuple(d for d in self._user if d is not dictionary)

    def remove_by_name(self, name: str) -> None:
        with self._lock:
            for index, dictionary in enumerate(self._bundled):
                if dictionary.name == name:
                    self._bundled = self._bundled[:index] + self._bundled[index + 1 :]
                    logger.debug(f"Removed bundled dictionary '{name}'")
                    return

    def find_by_name(self, name: str) -> Dictionary | None:
        for dictionary in self._bundled:
            if dictionary.name == name:
                return dictionary
        return None

    def is_loaded(self, name: str) -> bool:
        return self.find_by_name(name) is not None

    def reset(self) -> None:
        """Drop every dictionary. Loads still in flight will publish afterwards."""
        with self._lock:
            self._bundled = ()
            self._user = ()
        logger.info("Dictionary registry reset")
