"""Persistence for the high score and small player preferences."""

from .high_score import KeyValueStore, MemoryStore, JsonFileStore, HighScoreStore, HIGH_SCORE_KEY

__all__ = ["KeyValueStore", "MemoryStore", "JsonFileStore", "HighScoreStore", "HIGH_SCORE_KEY"]
