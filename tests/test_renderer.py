import numpy as np
import pytest

from flappyascii.config.themes import DARK_GLYPHS, LIGHT_GLYPHS, GlyphSet
from flappyascii.game import Bird, GameConfig, Obstacle, RunState
from flappyascii.graphics import GridRenderer
from flappyascii.graphics.text_utils import (
    draw_centered_text,
    draw_right_aligned_text,
    draw_text,
    grid_to_lines,
    new_grid,
)


def state_with(config, obstacles=(), started=True, **kwargs) -> RunState:
    return RunState(bird=Bird(14, config), obstacles=list(obstacles), has_started=started, **kwargs)


# text_utils

def test_draw_text_clips_at_edges():
    grid = new_grid(5, 2, ".")
    assert draw_text(grid, "abcdef", 2, 0) == 3
    assert draw_text(grid, "xyz", -2, 1) == 1
    assert draw_text(grid, "no", 0, 5) == 0
    assert grid_to_lines(grid) == ["..abc", "z...."]


def test_centered_and_right_aligned_text():
    grid = new_grid(10, 2, " ")
    draw_centered_text(grid, "ab", 0)
    draw_right_aligned_text(grid, "end", 1)
    assert grid_to_lines(grid) == ["    ab    ", "       end"]


def test_right_aligned_text_longer_than_grid_keeps_tail():
    grid = new_grid(4, 1, " ")
    draw_right_aligned_text(grid, "abcdef", 0)
    assert grid_to_lines(grid) == ["cdef"]


# Frames

def test_frame_has_fixed_size(renderer, config):
    lines = renderer.render_frame(state_with(config))
    assert len(lines) == config.screen_height
    assert all(len(line) == config.screen_width for line in lines)


def test_frame_draws_bird_ground_and_header(renderer, config):
    lines = renderer.render_frame(state_with(config, score=42, high_score=99))
    assert lines[14][config.bird_x] == "@"
    assert lines[-1] == "_" * config.screen_width
    assert lines[0].startswith("Score: 42")
    assert lines[0].endswith("High Score: 99")


def test_obstacle_fills_column_outside_gap(renderer, config):
    obstacle = Obstacle(40, config, gap_center=14)
    lines = renderer.render_frame(state_with(config, [obstacle]))
    column = [line[40] for line in lines]

    for row in range(1, config.screen_height - 1):
        expected = " " if 12 <= row <= 16 else "|"
        assert column[row] == expected, row
    assert column[-1] == "_"


def test_fractional_obstacle_drawn_at_floor_column(renderer, config):
    obstacle = Obstacle(40.7, config, gap_center=14)
    lines = renderer.render_frame(state_with(config, [obstacle]))
    assert lines[5][40] == "|"
    assert lines[5][41] == " "


@pytest.mark.parametrize("x", [-1, -0.5, 90, 120])
def test_obstacle_outside_grid_is_skipped(renderer, config, x):
    obstacle = Obstacle(x, config, gap_center=14)
    lines = renderer.render_frame(state_with(config, [obstacle]))
    assert all("|" not in line[1:] for line in lines[3:-1])


def test_instructions_only_before_start(renderer, config):
    idle = renderer.render_frame(state_with(config, started=False))
    assert idle[2].strip() == "Press SPACE to start"
    start = (config.screen_width - len("Press SPACE to start")) // 2
    assert idle[2][start:].startswith("Press SPACE")

    active = renderer.render_frame(state_with(config, started=True))
    assert "Press SPACE" not in "\n".join(active)


def test_header_truncated_on_narrow_grid():
    config = GameConfig(screen_width=12, bird_x=2)
    lines = GridRenderer(config).render_frame(
        RunState(bird=Bird(14, config), score=123, high_score=4567)
    )
    assert len(lines[0]) == 12
    assert lines[0].endswith("4567")


def test_glyph_set_is_a_parameter(renderer, config):
    state = state_with(config, [Obstacle(40, config, gap_center=14)])
    light = renderer.render_frame(state, LIGHT_GLYPHS)
    dark = renderer.render_frame(state, DARK_GLYPHS)

    assert light[14][config.bird_x] == "@"
    assert dark[14][config.bird_x] == "■"
    assert dark[5][40] == "║"
    assert dark[-1] == "═" * config.screen_width


def test_custom_empty_glyph_fills_background(renderer, config):
    glyphs = GlyphSet(bird="B", obstacle="#", ground="=", empty=".")
    lines = renderer.render_frame(state_with(config), glyphs)
    assert lines[10] == "." * config.screen_width


def test_rendering_does_not_touch_state(renderer, config):
    obstacle = Obstacle(40, config, gap_center=14)
    state = state_with(config, [obstacle], score=3)
    renderer.render(state)
    assert state.score == 3
    assert obstacle.x == 40
    assert state.bird.y == 14


# Game over

def test_game_over_layout(renderer, config):
    lines = renderer.render_game_over(15, 20)
    top = config.screen_height // 2 - 3
    assert [lines[top + i].strip() for i in range(4)] == [
        "GAME OVER",
        "Final Score: 15",
        "High Score: 20",
        "Press 'r' to restart",
    ]
    others = [line for i, line in enumerate(lines) if not top <= i < top + 4]
    assert all(line == " " * config.screen_width for line in others)


def test_game_over_lines_are_centred(renderer, config):
    lines = renderer.render_game_over(1, 1)
    row = lines[config.screen_height // 2 - 3]
    assert row.index("GAME OVER") == (config.screen_width - len("GAME OVER")) // 2


def test_render_dispatches_on_running_flag(renderer, config):
    state = state_with(config, score=5, high_score=8)
    assert renderer.render(state)[0].startswith("Score: 5")

    state.is_running = False
    assert "GAME OVER" in "\n".join(renderer.render(state))


def test_new_grid_is_numpy_char_array():
    grid = new_grid(3, 2, "x")
    assert grid.shape == (2, 3)
    assert np.all(grid == "x")
