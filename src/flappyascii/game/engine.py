"""
Fixed-timestep simulation engine.

The engine is the only thing that mutates ``RunState``. Each call to
``tick()`` advances the world by exactly one step:

    1. Update the bird (hover while idle, physics once started)
    2. Once started: spawn on cadence, advance/score/collide/retire obstacles
    3. Floor contact ends the run

A run ends one way only (``is_running`` true to false); after that the
sole remaining state change is the high score comparison, and further
ticks are ignored until ``restart()``.
"""

import logging
from typing import Any

from flappyascii.core.events import Event, EventBus, EventType
from flappyascii.core.state import PhaseTracker, RunPhase
from flappyascii.game.config import GameConfig, DEFAULT_CONFIG
from flappyascii.game.entities import Bird, Obstacle
from flappyascii.game.rng import RandomSource, SystemRandomSource
from flappyascii.game.state import RunState
from flappyascii.storage.high_score import HighScoreStore

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Owns and advances the run state."""

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        rng: RandomSource | None = None,
        high_scores: HighScoreStore | None = None,
        state: RunState | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config
        self.rng = rng or SystemRandomSource()
        self.high_scores = high_scores or HighScoreStore()
        self.event_bus = event_bus

        if state is None:
            self.state = RunState.fresh(config, high_score=self.high_scores.load())
            logger.info(f"Engine created, high score {self.state.high_score}")
        else:
            self.state = state
            logger.debug("Engine created with injected state")

        self.phases = PhaseTracker(self.state.phase)

    @property
    def is_running(self) -> bool:
        return self.state.is_running

    @property
    def phase(self) -> RunPhase:
        return self.state.phase

    # Run control

    def reset(self) -> None:
        """Start a new run; the high score carries over."""
        self.state.bird = Bird(self.config.mid_y, self.config)
        self.state.obstacles = []
        self.state.score = 0
        self.state.tick_counter = 0
        self.state.is_running = True
        self.state.has_started = False
        self.phases.observe(self.state.phase)
        logger.info("Run reset")

    def flap(self) -> bool:
        """
        Apply the start/flap input.

        The first accepted flap of a run also starts it.

        Returns:
            True if the input was applied
        """
        if not self.state.is_running:
            return False

        if not self.state.has_started:
            self.state.has_started = True
            self.phases.observe(self.state.phase)
            self._emit(EventType.RUN_STARTED)

        self.state.bird.flap()
        return True

    def restart(self) -> bool:
        """Reset the run, but only once the current one is over."""
        if self.state.is_running:
            return False
        self.reset()
        return True

    # Simulation

    def tick(self) -> bool:
        """
        Advance the world one fixed step.

        Returns:
            Whether the run is still alive
        """
        state = self.state
        if not state.is_running:
            return False

        state.bird.update(state.has_started)

        if state.has_started:
            state.tick_counter += 1
            if state.tick_counter % self.config.pipe_frequency == 0:
                self._spawn_obstacle()

            self._update_obstacles()

            if state.bird.y >= self.config.floor_y:
                logger.debug("Bird hit the ground")
                state.is_running = False

        if not state.is_running:
            self.phases.observe(state.phase)
            self.game_over()

        return state.is_running

    def _spawn_obstacle(self) -> None:
        obstacle = Obstacle(self.config.screen_width - 1, self.config, rng=self.rng)
        self.state.obstacles.append(obstacle)
        logger.debug(f"Spawned {obstacle!r} at tick {self.state.tick_counter}")

    def _update_obstacles(self) -> None:
        """Advance every obstacle, then score, collide and retire it."""
        state = self.state
        bird = state.bird
        remaining = []

        for obstacle in state.obstacles:
            obstacle.advance()

            if not obstacle.passed and obstacle.x < bird.x:
                obstacle.passed = True
                state.score += 1
                self._emit(EventType.OBSTACLE_PASSED, score=state.score)

            if obstacle.is_colliding_with(bird):
                logger.debug(f"Collision with {obstacle!r}")
                state.is_running = False

            if not obstacle.is_offscreen():
                remaining.append(obstacle)

        state.obstacles = remaining

    def game_over(self, score: int | None = None) -> bool:
        """
        Settle the finished run against the high score.

        Args:
            score: Final score, defaults to the current run's score

        Returns:
            True if a new high score was set
        """
        state = self.state
        final = state.score if score is None else score
        logger.info(f"Game over: score {final}, high score {state.high_score}")

        improved = final > state.high_score
        if improved:
            state.high_score = final
            self.high_scores.save(final)
            logger.info(f"New high score: {final}")
            self._emit(EventType.HIGH_SCORE, high_score=final)

        self._emit(EventType.GAME_OVER, score=final, high_score=state.high_score)
        return improved

    def _emit(self, event_type: EventType, **data: Any) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(Event(event_type, data=data, source="engine"))
