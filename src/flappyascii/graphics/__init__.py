"""Rendering pipeline for the text grid."""

from flappyascii.graphics.renderer import GridRenderer
from flappyascii.graphics.text_utils import (
    new_grid,
    draw_text,
    draw_centered_text,
    draw_right_aligned_text,
    grid_to_lines,
)

__all__ = [
    "GridRenderer",
    "new_grid",
    "draw_text",
    "draw_centered_text",
    "draw_right_aligned_text",
    "grid_to_lines",
]
