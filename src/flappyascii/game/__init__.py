"""Fixed-timestep game simulation: entities, run state and engine."""

from flappyascii.game.config import GameConfig, DEFAULT_CONFIG
from flappyascii.game.entities import Bird, Obstacle
from flappyascii.game.rng import RandomSource, SystemRandomSource, SeededRandomSource
from flappyascii.game.state import RunState
from flappyascii.game.engine import SimulationEngine

__all__ = [
    "GameConfig",
    "DEFAULT_CONFIG",
    "Bird",
    "Obstacle",
    "RandomSource",
    "SystemRandomSource",
    "SeededRandomSource",
    "RunState",
    "SimulationEngine",
]
