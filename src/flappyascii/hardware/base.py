"""
Abstract base classes for display and input devices.

These interfaces define the contract that both the terminal host and
the simulator window implement.
"""

from abc import ABC, abstractmethod
from typing import Callable


class TextDisplay(ABC):
    """Render sink for character grids."""

    @property
    @abstractmethod
    def cols(self) -> int:
        """Number of character columns."""
        ...

    @property
    @abstractmethod
    def rows(self) -> int:
        """Number of character rows."""
        ...

    @abstractmethod
    def show(self, lines: list[str]) -> None:
        """Display a full frame, one string per row."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Clear the display."""
        ...


class KeyboardInput(ABC):
    """Source of single-key presses."""

    @abstractmethod
    def on_key(self, callback: Callable[[str], None]) -> Callable[[], None]:
        """
        Register key press callback.

        Returns:
            Function to unregister callback
        """
        ...

    @abstractmethod
    def start(self) -> None:
        """Begin delivering key presses."""
        ...

    @abstractmethod
    def stop(self) -> None:
        """Stop delivering key presses and restore the device."""
        ...
