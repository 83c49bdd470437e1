"""
Glyph set and theme loading utilities.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any
import logging

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlyphSet:
    """Characters used to draw one frame."""
    bird: str = "@"
    obstacle: str = "|"
    ground: str = "_"
    empty: str = " "

    def __post_init__(self) -> None:
        for name in ("bird", "obstacle", "ground", "empty"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"Glyph '{name}' must be a single character, got {value!r}")


LIGHT_GLYPHS = GlyphSet()
DARK_GLYPHS = GlyphSet(bird="■", obstacle="║", ground="═", empty=" ")


@dataclass
class Theme:
    """Complete theme configuration."""
    name: str = "light"
    description: str = ""
    glyphs: GlyphSet = field(default_factory=GlyphSet)

    @classmethod
    def from_yaml(cls, data: dict[str, Any]) -> "Theme":
        """Create theme from YAML data."""
        theme = cls(
            name=data.get("name", "light"),
            description=data.get("description", ""),
        )

        if "glyphs" in data:
            theme.glyphs = GlyphSet(**data["glyphs"])

        return theme


def _default_themes_path() -> Path:
    return Path(__file__).parent


def load_theme(theme_name: str, themes_path: Path | None = None) -> Theme:
    """
    Load a theme from YAML file.

    Args:
        theme_name: Name of the theme (without .yaml extension)
        themes_path: Path to themes directory

    Returns:
        Theme instance; the default glyphs if the file is missing or invalid
    """
    if themes_path is None:
        themes_path = _default_themes_path()

    theme_file = themes_path / f"{theme_name}.yaml"

    if not theme_file.exists():
        logger.warning(f"Theme '{theme_name}' not found, using default glyphs")
        return Theme(name=theme_name)

    try:
        with open(theme_file, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError("theme file must hold a mapping")
        return Theme.from_yaml(data)
    except (yaml.YAMLError, TypeError, ValueError) as e:
        logger.warning(f"Invalid theme file {theme_file}: {e}")
        return Theme(name=theme_name)


def list_themes(themes_path: Path | None = None) -> list[str]:
    """List available themes."""
    if themes_path is None:
        themes_path = _default_themes_path()

    return sorted(f.stem for f in themes_path.glob("*.yaml"))
