"""
Simulator window using pygame.

Shows the text grid in a desktop window with a monospace font.
"""

import pygame
import asyncio
import logging
from dataclasses import dataclass

from ..core.events import Event, EventType, event_for_key
from ..driver import GameLoop, monotonic_ms
from .mock_hardware.display import SimulatedTextDisplay

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    width: int = 1000
    height: int = 640
    title: str = "Flappy ASCII"
    fullscreen: bool = False
    fps: int = 60
    font_size: int = 18

    # Colors per theme
    light_background: tuple[int, int, int] = (245, 245, 240)
    light_foreground: tuple[int, int, int] = (30, 30, 30)
    dark_background: tuple[int, int, int] = (18, 18, 24)
    dark_foreground: tuple[int, int, int] = (220, 220, 230)


class SimulatorWindow:
    """
    Desktop host for the game loop.

    Keyboard Mapping:
        SPACE: Start / flap
        R: Restart after game over
        T: Toggle light/dark theme
        ESC / Q: Exit simulator
    """

    def __init__(self, game: GameLoop, config: WindowConfig | None = None) -> None:
        self.config = config or WindowConfig()
        self.game = game

        cfg = game.engine.config
        self.text_display = SimulatedTextDisplay(cfg.screen_width, cfg.screen_height)
        self.game.display = self.text_display

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._running = False

        if game.event_bus is not None:
            game.event_bus.subscribe(EventType.SHUTDOWN, self._on_shutdown)

    def _on_shutdown(self, event: Event) -> None:
        self.stop()

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        flags = pygame.DOUBLEBUF
        if self.config.fullscreen:
            flags |= pygame.FULLSCREEN

        self._screen = pygame.display.set_mode(
            (self.config.width, self.config.height),
            flags
        )
        self._clock = pygame.time.Clock()

        pygame.font.init()
        # DejaVu covers the box-drawing glyphs of the dark theme
        self._font = pygame.font.SysFont("dejavusansmono,menlo,consolas,monospace", self.config.font_size)

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Translate a key press into a game event."""
        if event.key == pygame.K_SPACE:
            key = " "
        elif event.key == pygame.K_ESCAPE:
            key = "\x1b"
        else:
            key = event.unicode

        game_event = event_for_key(key, source="simulator")
        if game_event is not None and self.game.event_bus is not None:
            self.game.event_bus.queue_event(game_event)

    def _colors(self) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
        if self.game.themes.name == "dark":
            return self.config.dark_background, self.config.dark_foreground
        return self.config.light_background, self.config.light_foreground

    def _render(self) -> None:
        """Draw the current frame centred in the window."""
        if not self._screen or not self._font:
            return

        background, foreground = self._colors()
        self._screen.fill(background)

        lines = self.text_display.get_lines()
        line_height = self._font.get_linesize()
        char_width = self._font.size("W")[0]
        top = max(0, (self.config.height - line_height * len(lines)) // 2)
        left = max(0, (self.config.width - char_width * self.text_display.cols) // 2)

        for i, line in enumerate(lines):
            surface = self._font.render(line, True, foreground, background)
            self._screen.blit(surface, (left, top + i * line_height))

        pygame.display.flip()

    async def run(self) -> None:
        """Main simulator loop."""
        self._init_pygame()
        self._running = True
        logger.info("Simulator started")

        self.game.redraw()
        while self._running:
            self._handle_events()

            if self.game.event_bus is not None:
                await self.game.event_bus.process_queue()

            if not self._running:
                break

            self.game.on_frame(monotonic_ms())
            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the simulator."""
        self._running = False
