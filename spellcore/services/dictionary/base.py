"""Base classes for dictionaries and their loaders."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from enum import Enum


class Containment(Enum):
    """Result of asking a dictionary whether it knows a word."""

    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"  # dictionary cannot decide (e.g. foreign alphabet)


class Dictionary(ABC):
    """Abstract base class for a named, queryable word source."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this dictionary."""
        ...  # pragma: no cover

    @abstractmethod
    def contains(self, key: str) -> Containment:
        """
        Check whether a normalized key is known to this dictionary.

        Args:
            key: The normalized lookup key

        Returns:
            Containment.YES, Containment.NO or Containment.UNKNOWN
        """
        ...  # pragma: no cover

    @abstractmethod
    def traverse(self, visit: Callable[[str], None]) -> None:
        """Call `visit` once for every stored word."""
        ...  # pragma: no cover

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class Loader(ABC):
    """Abstract source of raw words for building a dictionary."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name given to the dictionary built from this loader."""
        ...  # pragma: no cover

    @abstractmethod
    def produce(self) -> Iterable[str]:
        """Yield the raw words of this source."""
        ...  # pragma: no cover
