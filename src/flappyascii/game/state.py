"""Run state: everything the engine mutates, in one injectable object."""

from dataclasses import dataclass, field

from flappyascii.core.state import RunPhase, phase_for
from flappyascii.game.config import GameConfig, DEFAULT_CONFIG
from flappyascii.game.entities import Bird, Obstacle


@dataclass
class RunState:
    """Authoritative state of one run.

    Tests build one directly (with obstacles already in place) and hand it
    to the engine; the renderer and driver only read it.
    """

    bird: Bird
    obstacles: list[Obstacle] = field(default_factory=list)
    score: int = 0
    high_score: int = 0
    tick_counter: int = 0
    is_running: bool = True
    has_started: bool = False

    @classmethod
    def fresh(cls, config: GameConfig = DEFAULT_CONFIG, high_score: int = 0) -> "RunState":
        """State at the start of a run: centred bird, no obstacles."""
        return cls(bird=Bird(config.mid_y, config), high_score=high_score)

    @property
    def phase(self) -> RunPhase:
        return phase_for(self.is_running, self.has_started)
