"""Theme selection and toggling.

Switching theme only changes which ``GlyphSet`` the next render call
receives; redrawing is the caller's job.
"""

import logging
from pathlib import Path

from flappyascii.config.themes.base import GlyphSet, Theme, load_theme
from flappyascii.storage.high_score import KeyValueStore

logger = logging.getLogger(__name__)

THEME_KEY = "theme"


class ThemeManager:
    """Tracks the active theme and persists the player's choice."""

    TOGGLE_PAIR = ("light", "dark")

    def __init__(
        self,
        default: str = "light",
        store: KeyValueStore | None = None,
        themes_path: Path | None = None,
    ) -> None:
        self.store = store
        self.themes_path = themes_path
        self._theme = load_theme(self._saved_theme() or default, themes_path)
        logger.info(f"Theme: {self._theme.name}")

    def _saved_theme(self) -> str | None:
        if self.store is None:
            return None
        try:
            return self.store.get(THEME_KEY)
        except Exception as e:
            logger.warning(f"Could not read saved theme: {e}")
            return None

    @property
    def name(self) -> str:
        return self._theme.name

    @property
    def theme(self) -> Theme:
        return self._theme

    @property
    def glyphs(self) -> GlyphSet:
        return self._theme.glyphs

    def set_theme(self, name: str) -> GlyphSet:
        """Switch to a named theme and remember it."""
        self._theme = load_theme(name, self.themes_path)
        logger.info(f"Theme changed to {self._theme.name}")

        if self.store is not None:
            try:
                self.store.set(THEME_KEY, self._theme.name)
            except Exception as e:
                logger.warning(f"Could not persist theme: {e}")

        return self._theme.glyphs

    def toggle(self) -> GlyphSet:
        """Flip between light and dark."""
        light, dark = self.TOGGLE_PAIR
        return self.set_theme(dark if self.name == light else light)
