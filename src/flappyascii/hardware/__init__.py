"""Output and input devices the game loop talks to."""

from .base import TextDisplay, KeyboardInput

__all__ = ["TextDisplay", "KeyboardInput"]
