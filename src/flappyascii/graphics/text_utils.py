"""Text placement on character grids.

Grids are 2-D numpy arrays of single characters (``dtype="<U1"``),
indexed ``grid[row, column]``. Every helper clips to the grid so text
never wraps or raises when it does not fit.
"""

import numpy as np
from numpy.typing import NDArray

CharGrid = NDArray[np.str_]


def new_grid(width: int, height: int, fill: str = " ") -> CharGrid:
    """Create a grid filled with one character."""
    return np.full((height, width), fill, dtype="<U1")


def draw_text(grid: CharGrid, text: str, x: int, y: int) -> int:
    """Draw text starting at column ``x`` of row ``y``.

    Characters falling outside the grid are dropped.

    Returns:
        Number of characters actually written
    """
    height, width = grid.shape
    if not 0 <= y < height:
        return 0

    written = 0
    for i, char in enumerate(text):
        col = x + i
        if 0 <= col < width:
            grid[y, col] = char
            written += 1
    return written


def draw_centered_text(grid: CharGrid, text: str, y: int) -> int:
    """Draw text horizontally centred on row ``y``."""
    width = grid.shape[1]
    return draw_text(grid, text, (width - len(text)) // 2, y)


def draw_right_aligned_text(grid: CharGrid, text: str, y: int) -> int:
    """Draw text so its last character lands in the last column."""
    width = grid.shape[1]
    return draw_text(grid, text, width - len(text), y)


def grid_to_lines(grid: CharGrid) -> list[str]:
    """Join each row into a string."""
    return ["".join(row) for row in grid.tolist()]
