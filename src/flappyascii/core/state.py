"""
Run phases for a single play session.

Phases:
    IDLE: Bird hovers, waiting for the first flap
    ACTIVE: Gravity on, obstacles spawning and moving
    OVER: Fatal collision happened; terminal until restart
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class RunPhase(Enum):
    """Run-level phases."""
    IDLE = auto()
    ACTIVE = auto()
    OVER = auto()


def phase_for(is_running: bool, has_started: bool) -> RunPhase:
    """Map the two run flags onto a phase."""
    if not is_running:
        return RunPhase.OVER
    return RunPhase.ACTIVE if has_started else RunPhase.IDLE


PhaseListener = Callable[[RunPhase, RunPhase], None]


class PhaseTracker:
    """
    Watches run phase changes and notifies listeners.

    The engine owns the run flags; this class only validates and
    reports the resulting transitions.
    """

    VALID_TRANSITIONS: list[tuple[RunPhase, RunPhase]] = [
        (RunPhase.IDLE, RunPhase.ACTIVE),     # First flap
        (RunPhase.ACTIVE, RunPhase.OVER),     # Collision or floor
        (RunPhase.OVER, RunPhase.IDLE),       # Restart
        (RunPhase.ACTIVE, RunPhase.IDLE),     # Reset mid-run
    ]

    def __init__(self, initial_phase: RunPhase = RunPhase.IDLE) -> None:
        self._phase = initial_phase
        self._listeners: list[PhaseListener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)

    @property
    def phase(self) -> RunPhase:
        return self._phase

    def can_transition(self, to_phase: RunPhase) -> bool:
        """Check if transition to given phase is valid."""
        return (self._phase, to_phase) in self._valid_transitions

    def observe(self, new_phase: RunPhase) -> bool:
        """
        Record the phase the run is now in.

        Args:
            new_phase: Phase derived from the current run flags

        Returns:
            True if the phase changed
        """
        old_phase = self._phase
        if new_phase == old_phase:
            return False

        if not self.can_transition(new_phase):
            logger.warning(f"Unexpected run transition: {old_phase.name} -> {new_phase.name}")

        self._phase = new_phase

        logger.info(f"Run phase: {old_phase.name} -> {new_phase.name}")

        for listener in self._listeners:
            try:
                listener(old_phase, new_phase)
            except Exception as e:
                logger.error(f"Error in phase listener: {e}")

        return True

    def add_listener(self, callback: PhaseListener) -> None:
        """Add a phase change listener."""
        self._listeners.append(callback)
