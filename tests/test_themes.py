import pytest

from flappyascii.config.themes import (
    DARK_GLYPHS,
    LIGHT_GLYPHS,
    THEME_KEY,
    GlyphSet,
    ThemeManager,
    list_themes,
    load_theme,
)
from flappyascii.storage import MemoryStore
from tests.conftest import BrokenStore


def test_bundled_themes_listed():
    assert {"light", "dark"} <= set(list_themes())


def test_bundled_yaml_matches_constants():
    assert load_theme("light").glyphs == LIGHT_GLYPHS
    assert load_theme("dark").glyphs == DARK_GLYPHS


def test_unknown_theme_falls_back_to_default_glyphs():
    theme = load_theme("does-not-exist")
    assert theme.glyphs == LIGHT_GLYPHS


def test_invalid_theme_file_falls_back(tmp_path):
    (tmp_path / "broken.yaml").write_text("glyphs:\n  bird: '@@'\n")
    (tmp_path / "listy.yaml").write_text("- a\n- b\n")
    assert load_theme("broken", tmp_path).glyphs == LIGHT_GLYPHS
    assert load_theme("listy", tmp_path).glyphs == LIGHT_GLYPHS


def test_custom_theme_directory(tmp_path):
    (tmp_path / "retro.yaml").write_text(
        "name: retro\nglyphs:\n  bird: 'o'\n  obstacle: '#'\n  ground: '='\n  empty: '.'\n"
    )
    theme = load_theme("retro", tmp_path)
    assert theme.name == "retro"
    assert theme.glyphs == GlyphSet(bird="o", obstacle="#", ground="=", empty=".")
    assert list_themes(tmp_path) == ["retro"]


@pytest.mark.parametrize("kwargs", [{"bird": ""}, {"ground": "=="}, {"empty": 0}])
def test_glyphs_must_be_single_characters(kwargs):
    with pytest.raises(ValueError):
        GlyphSet(**kwargs)


def test_toggle_flips_and_persists(store):
    themes = ThemeManager(default="light", store=store)
    assert themes.glyphs == LIGHT_GLYPHS

    assert themes.toggle() == DARK_GLYPHS
    assert themes.name == "dark"
    assert store.get(THEME_KEY) == "dark"

    assert themes.toggle() == LIGHT_GLYPHS
    assert store.get(THEME_KEY) == "light"


def test_saved_theme_wins_over_default():
    themes = ThemeManager(default="light", store=MemoryStore({THEME_KEY: "dark"}))
    assert themes.name == "dark"


def test_toggle_from_unknown_theme_goes_light():
    themes = ThemeManager(default="sepia")
    assert themes.toggle() == LIGHT_GLYPHS
    assert themes.name == "light"


def test_broken_store_does_not_block_theme_changes():
    themes = ThemeManager(default="light", store=BrokenStore())
    assert themes.toggle() == DARK_GLYPHS
