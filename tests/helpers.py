"""Test doubles shared by the test modules."""

from collections.abc import Callable, Iterable

from spellcore.services.dictionary import Containment, Dictionary


class StubDictionary(Dictionary):
    """Dictionary answering a fixed containment and traversing words in the given order."""

    def __init__(
        self,
        name: str,
        answer: Containment = Containment.NO,
        words: Iterable[str] = (),
    ) -> None:
        self._name = name
        self.answer = answer
        self._words = list(words)
        self.queries: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    def contains(self, key: str) -> Containment:
        self.queries.append(key)
        if key in self._words:
            return Containment.YES
        return self.answer

    def traverse(self, visit: Callable[[str], None]) -> None:
        for word in self._words:
            visit(word)


class TableMetric:
    """Metric returning preset distances per candidate."""

    def __init__(self, distances: dict[str, int], default: int = 9) -> None:
        self.distances = distances
        self.default = default

    def distance(self, a: str, b: str) -> int:
        return self.distances.get(b, self.default)
