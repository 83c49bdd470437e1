"""Grid renderer for Flappy ASCII.

Turns a ``RunState`` into ``screen_height`` strings of ``screen_width``
characters. The glyph set is a parameter of every call, so changing
theme is just rendering again with different glyphs.
"""

import logging

from flappyascii.config.themes.base import GlyphSet, LIGHT_GLYPHS
from flappyascii.game.config import GameConfig, DEFAULT_CONFIG
from flappyascii.game.entities import Bird, Obstacle
from flappyascii.game.state import RunState
from flappyascii.graphics.text_utils import (
    CharGrid,
    new_grid,
    draw_text,
    draw_centered_text,
    draw_right_aligned_text,
    grid_to_lines,
)

logger = logging.getLogger(__name__)

START_HINT = "Press SPACE to start"
START_HINT_ROW = 2
GAME_OVER_TEXT = "GAME OVER"
RESTART_HINT = "Press 'r' to restart"


class GridRenderer:
    """Draws frames and the game-over screen as lines of text."""

    def __init__(self, config: GameConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def render(self, state: RunState, glyphs: GlyphSet = LIGHT_GLYPHS) -> list[str]:
        """Render whichever screen matches the run: play field or game over."""
        if state.is_running:
            return self.render_frame(state, glyphs)
        return self.render_game_over(state.score, state.high_score, glyphs)

    def render_frame(self, state: RunState, glyphs: GlyphSet = LIGHT_GLYPHS) -> list[str]:
        grid = new_grid(self.config.screen_width, self.config.screen_height, glyphs.empty)

        self._draw_bird(grid, state.bird, glyphs)
        for obstacle in state.obstacles:
            self._draw_obstacle(grid, obstacle, glyphs)
        self._draw_ground(grid, glyphs)
        self._draw_header(grid, state.score, state.high_score)

        if not state.has_started:
            draw_centered_text(grid, START_HINT, START_HINT_ROW)

        return grid_to_lines(grid)

    def render_game_over(
        self,
        score: int,
        high_score: int,
        glyphs: GlyphSet = LIGHT_GLYPHS,
    ) -> list[str]:
        """Full-screen game-over layout, four centred lines."""
        grid = new_grid(self.config.screen_width, self.config.screen_height, glyphs.empty)

        lines = [
            GAME_OVER_TEXT,
            f"Final Score: {score}",
            f"High Score: {high_score}",
            RESTART_HINT,
        ]
        top = self.config.screen_height // 2 - 3
        for offset, text in enumerate(lines):
            draw_centered_text(grid, text, top + offset)

        return grid_to_lines(grid)

    def _draw_bird(self, grid: CharGrid, bird: Bird, glyphs: GlyphSet) -> None:
        row = min(max(bird.row, 0), self.config.screen_height - 1)
        grid[row, bird.x] = glyphs.bird

    def _draw_obstacle(self, grid: CharGrid, obstacle: Obstacle, glyphs: GlyphSet) -> None:
        if not 0 <= obstacle.x < self.config.screen_width:
            return
        column = obstacle.column
        for row in range(self.config.screen_height - 1):
            if not obstacle.in_gap(row):
                grid[row, column] = glyphs.obstacle

    def _draw_ground(self, grid: CharGrid, glyphs: GlyphSet) -> None:
        grid[self.config.floor_y, :] = glyphs.ground

    def _draw_header(self, grid: CharGrid, score: int, high_score: int) -> None:
        draw_text(grid, f"Score: {score}", 0, 0)
        draw_right_aligned_text(grid, f"High Score: {high_score}", 0)
