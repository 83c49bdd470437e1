"""
Simulated text display.

Keeps the latest frame in memory so the simulator window (or a test)
can read it back.
"""

from ...hardware.base import TextDisplay


class SimulatedTextDisplay(TextDisplay):
    """Frame buffer for character grids."""

    def __init__(self, cols: int, rows: int) -> None:
        self._cols = cols
        self._rows = rows
        self._lines: list[str] = [" " * cols for _ in range(rows)]
        self._frames_shown = 0

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def frames_shown(self) -> int:
        return self._frames_shown

    def show(self, lines: list[str]) -> None:
        self._lines = list(lines)
        self._frames_shown += 1

    def clear(self) -> None:
        self._lines = [" " * self._cols for _ in range(self._rows)]

    def get_lines(self) -> list[str]:
        """Get the current frame."""
        return list(self._lines)

    def get_text(self) -> str:
        return "\n".join(self._lines)
