"""
High score persistence.

A tiny key-value contract (``get``/``set`` of strings) stands in for the
browser's local storage. ``HighScoreStore`` keeps a single integer under
one fixed key and never lets a storage problem reach the game.
"""

import json
import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "flappyBirdHighScore"


@runtime_checkable
class KeyValueStore(Protocol):
    """String key-value persistence collaborator."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """Process-local store, used for tests and when no file is configured."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class JsonFileStore:
    """
    Key-value store backed by a small JSON object on disk.

    Every ``set`` rewrites the file synchronously. A missing or corrupt
    file reads as empty.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Invalid store file {self.path}: {e}")
            return {}
        except OSError as e:
            logger.warning(f"Error reading store file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Store file {self.path} does not hold an object, ignoring")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = str(value)

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)


class HighScoreStore:
    """Loads and saves the single persisted high score."""

    def __init__(self, store: KeyValueStore | None = None, key: str = HIGH_SCORE_KEY) -> None:
        self.store = store
        self.key = key

    def load(self) -> int:
        """
        Read the persisted high score.

        Returns:
            The stored value, or 0 if absent, unparseable or negative
        """
        if self.store is None:
            return 0

        try:
            raw = self.store.get(self.key)
        except Exception as e:
            logger.warning(f"High score store unavailable: {e}")
            return 0

        if raw is None:
            return 0

        try:
            value = int(str(raw).strip())
        except ValueError:
            logger.warning(f"Ignoring unparseable high score {raw!r}")
            return 0

        if value < 0:
            logger.warning(f"Ignoring negative high score {value}")
            return 0
        return value

    def save(self, score: int) -> bool:
        """
        Persist a new high score (best effort).

        Returns:
            True if the value reached the store
        """
        if self.store is None:
            return False

        try:
            self.store.set(self.key, str(score))
        except Exception as e:
            logger.warning(f"Failed to persist high score {score}: {e}")
            return False

        logger.debug(f"High score {score} saved")
        return True
