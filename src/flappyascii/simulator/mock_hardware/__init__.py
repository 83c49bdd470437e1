"""In-memory devices for the simulator and tests."""

from .display import SimulatedTextDisplay

__all__ = ["SimulatedTextDisplay"]
