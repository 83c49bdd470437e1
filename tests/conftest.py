"""Shared fixtures."""

import pytest

from flappyascii.config.themes import ThemeManager
from flappyascii.game import GameConfig, SimulationEngine
from flappyascii.graphics import GridRenderer
from flappyascii.storage import HighScoreStore, MemoryStore


class ScriptedRandom:
    """Returns queued values, then repeats the last one; records every call."""

    def __init__(self, *values: int) -> None:
        self.values = list(values) or [14]
        self.calls: list[tuple[int, int]] = []

    def randint(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


class BrokenStore:
    """Store whose every operation fails."""

    def get(self, key: str) -> str | None:
        raise OSError("storage offline")

    def set(self, key: str, value: str) -> None:
        raise OSError("storage offline")


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def rng() -> ScriptedRandom:
    return ScriptedRandom(14)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def engine(config, rng, store) -> SimulationEngine:
    return SimulationEngine(config=config, rng=rng, high_scores=HighScoreStore(store))


@pytest.fixture
def renderer(config) -> GridRenderer:
    return GridRenderer(config)


@pytest.fixture
def themes(store) -> ThemeManager:
    return ThemeManager(default="light", store=store)
