"""Core framework components for Flappy ASCII."""

from .state import RunPhase, PhaseTracker, phase_for
from .events import EventBus, Event, EventType, event_for_key

__all__ = ["RunPhase", "PhaseTracker", "phase_for", "EventBus", "Event", "EventType", "event_for_key"]
