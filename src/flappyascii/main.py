"""
Main entry point for Flappy ASCII.

Reads settings, configures logging and launches either the pygame
simulator window or the terminal host.
"""

import asyncio
import logging
import sys

from dotenv import load_dotenv

from flappyascii.config.settings import Settings, get_settings
from flappyascii.driver import build_game


def setup_logging(debug: bool = False, log_file: str | None = None) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        filename=log_file,
    )


async def run_simulator(settings: Settings) -> None:
    """Run the pygame simulator window."""
    from flappyascii.simulator.window import SimulatorWindow, WindowConfig

    display = settings.display
    config = WindowConfig(
        width=display.window_width,
        height=display.window_height,
        fullscreen=display.fullscreen,
        fps=display.fps,
        font_size=display.font_size,
        light_background=display.light_background,
        light_foreground=display.light_foreground,
        dark_background=display.dark_background,
        dark_foreground=display.dark_foreground,
    )

    window = SimulatorWindow(build_game(settings), config=config)
    await window.run()


async def run_terminal(settings: Settings) -> None:
    """Run inside the current terminal."""
    from flappyascii.core.events import event_for_key
    from flappyascii.hardware.terminal import TerminalDisplay, TerminalKeyboard

    game = build_game(settings)
    config = game.engine.config
    display = TerminalDisplay(config.screen_width, config.screen_height)
    keyboard = TerminalKeyboard()
    game.display = display

    def on_key(key: str) -> None:
        event = event_for_key(key, source="terminal")
        if event is not None and game.event_bus is not None:
            game.event_bus.queue_event(event)

    keyboard.on_key(on_key)
    keyboard.start()
    try:
        await game.run()
    finally:
        keyboard.stop()
        display.clear()


def main() -> None:
    """Main entry point."""
    load_dotenv()
    settings = get_settings()

    # Terminal frames share stdout, so logs go to a file there
    log_file = str(settings.log_file) if settings.is_terminal else None
    setup_logging(settings.debug, log_file)

    logger = logging.getLogger(__name__)
    logger.info("Flappy ASCII starting...")

    try:
        if settings.is_simulator:
            logger.info("Running in simulator mode")
            asyncio.run(run_simulator(settings))
        else:
            logger.info("Running in terminal mode")
            asyncio.run(run_terminal(settings))

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("Flappy ASCII stopped")


if __name__ == "__main__":
    main()
