"""Glyph themes for the text grid."""

from .base import GlyphSet, Theme, LIGHT_GLYPHS, DARK_GLYPHS, load_theme, list_themes
from .manager import ThemeManager, THEME_KEY

__all__ = [
    "GlyphSet",
    "Theme",
    "LIGHT_GLYPHS",
    "DARK_GLYPHS",
    "load_theme",
    "list_themes",
    "ThemeManager",
    "THEME_KEY",
]
