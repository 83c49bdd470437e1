"""Random sources for obstacle gap placement.

The engine only needs uniform integers in an inclusive range, so any
object with a matching ``randint`` can be injected.
"""

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Produces uniform integers in ``[low, high]``."""

    def randint(self, low: int, high: int) -> int:
        ...


class SystemRandomSource:
    """OS entropy backed source, used by default."""

    def __init__(self) -> None:
        self._random = random.SystemRandom()

    def randint(self, low: int, high: int) -> int:
        return self._random.randint(low, high)


class SeededRandomSource:
    """Reproducible source for replays of a given seed."""

    def __init__(self, seed: int) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        return self._random.randint(low, high)
