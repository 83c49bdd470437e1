"""Configuration: runtime settings and glyph themes."""

from .settings import Settings, GameSettings, DisplaySettings, get_settings

__all__ = ["Settings", "GameSettings", "DisplaySettings", "get_settings"]
