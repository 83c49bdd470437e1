"""
Game loop driver.

Paces the engine at a fixed minimum interval, applies input events as
they arrive and hands every frame to the render sink. Hosts (terminal,
simulator window) only push key events onto the bus and provide a
display.
"""

import asyncio
import logging
import time
from typing import Callable

from flappyascii.config.settings import Settings
from flappyascii.config.themes.manager import ThemeManager
from flappyascii.core.events import Event, EventBus, EventType
from flappyascii.game.engine import SimulationEngine
from flappyascii.game.rng import RandomSource, SeededRandomSource, SystemRandomSource
from flappyascii.graphics.renderer import GridRenderer
from flappyascii.hardware.base import TextDisplay
from flappyascii.storage.high_score import HighScoreStore, JsonFileStore

logger = logging.getLogger(__name__)

# Poll interval while waiting for a restart
IDLE_POLL_S = 0.02


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class GameLoop:
    """
    Fixed-interval driver around a ``SimulationEngine``.

    Frame pacing:
        ``on_frame(now_ms)`` may be called as often as the host likes.
        Calls that arrive sooner than ``tick_ms`` after the last processed
        frame are skipped without touching the run. Once a tick ends the
        run the loop disarms; only an accepted restart re-arms it.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        renderer: GridRenderer,
        themes: ThemeManager,
        display: TextDisplay | None = None,
        event_bus: EventBus | None = None,
        tick_ms: float = 100.0,
        clock: Callable[[], float] = monotonic_ms,
    ) -> None:
        self.engine = engine
        self.renderer = renderer
        self.themes = themes
        self.display = display
        self.event_bus = event_bus
        self.tick_ms = tick_ms
        self._clock = clock

        self._last_frame_ms: float | None = None
        self._armed = True
        self._running = False
        self._frame_count = 0

        if event_bus is not None:
            for event_type in (
                EventType.FLAP,
                EventType.RESTART,
                EventType.THEME_TOGGLE,
                EventType.SHUTDOWN,
            ):
                event_bus.subscribe(event_type, self.handle_event)

    @property
    def armed(self) -> bool:
        """Whether frames still advance the simulation."""
        return self._armed

    @property
    def running(self) -> bool:
        return self._running

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def on_frame(self, now_ms: float) -> bool:
        """
        Scheduling callback.

        Args:
            now_ms: Current time in milliseconds

        Returns:
            True if a tick was processed
        """
        if not self._armed:
            return False
        if self._last_frame_ms is not None and now_ms - self._last_frame_ms < self.tick_ms:
            return False
        self._last_frame_ms = now_ms

        alive = self.engine.tick()
        self._frame_count += 1
        self.redraw()

        if not alive:
            self._armed = False
            logger.info("Run over, ticks paused until restart")

        return True

    def handle_event(self, event: Event) -> bool:
        """
        Apply one input event immediately.

        Returns:
            True if the event changed anything
        """
        if event.type == EventType.FLAP:
            return self.engine.flap()

        if event.type == EventType.RESTART:
            if not self.engine.restart():
                return False
            self._armed = True
            self.redraw()
            return True

        if event.type == EventType.THEME_TOGGLE:
            self.themes.toggle()
            self.redraw()
            if self.event_bus is not None:
                self.event_bus.emit(Event(
                    EventType.THEME_CHANGED,
                    data={"theme": self.themes.name},
                    source="game_loop",
                ))
            return True

        if event.type == EventType.SHUTDOWN:
            self.stop()
            return True

        return False

    def redraw(self) -> list[str]:
        """Render the current state with the active glyphs and present it."""
        lines = self.renderer.render(self.engine.state, self.themes.glyphs)
        self.present(lines)
        return lines

    def present(self, lines: list[str]) -> None:
        """Hand a frame to the display; a missing or failing display is skipped."""
        if self.display is None:
            return
        try:
            self.display.show(lines)
        except Exception as e:
            logger.debug(f"Display unavailable: {e}")

    def _sleep_for(self, now_ms: float) -> float:
        if not self._armed or self._last_frame_ms is None:
            return IDLE_POLL_S
        remaining = self.tick_ms - (now_ms - self._last_frame_ms)
        return max(remaining, 1.0) / 1000.0

    async def run(self) -> None:
        """Run until a shutdown event or ``stop()``."""
        self._running = True
        logger.info(f"Game loop started ({self.tick_ms:.0f}ms per tick)")
        self.redraw()

        while self._running:
            if self.event_bus is not None:
                await self.event_bus.process_queue()
            if not self._running:
                break

            now = self._clock()
            self.on_frame(now)
            await asyncio.sleep(self._sleep_for(now))

        logger.info(f"Game loop stopped after {self._frame_count} frames")

    def stop(self) -> None:
        """Stop the loop at the next iteration."""
        self._running = False


def make_rng(seed: int | None) -> RandomSource:
    """Pick a seeded source for reproducible runs, OS entropy otherwise."""
    if seed is not None:
        logger.info(f"Using seeded obstacle placement (seed={seed})")
        return SeededRandomSource(seed)
    return SystemRandomSource()


def build_game(settings: Settings, display: TextDisplay | None = None) -> GameLoop:
    """Wire engine, renderer, themes and storage from settings."""
    store = JsonFileStore(settings.high_score_path)
    config = settings.game.to_config()
    event_bus = EventBus()

    engine = SimulationEngine(
        config=config,
        rng=make_rng(settings.seed),
        high_scores=HighScoreStore(store),
        event_bus=event_bus,
    )
    themes = ThemeManager(default=settings.theme, store=store)

    return GameLoop(
        engine=engine,
        renderer=GridRenderer(config),
        themes=themes,
        display=display,
        event_bus=event_bus,
        tick_ms=settings.display.tick_ms,
    )
