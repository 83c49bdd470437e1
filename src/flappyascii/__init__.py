"""Flappy ASCII - a flappy bird clone drawn as a grid of text characters."""

__version__ = "1.0.0"
