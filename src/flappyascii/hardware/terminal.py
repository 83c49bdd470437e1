"""
Terminal host devices.

``TerminalDisplay`` redraws the grid in place with ANSI escapes;
``TerminalKeyboard`` puts stdin in cbreak mode and feeds single keys to
callbacks from the asyncio loop. POSIX terminals only.
"""

import asyncio
import logging
import os
import sys
import termios
import tty
from typing import Callable, TextIO

from .base import TextDisplay, KeyboardInput

logger = logging.getLogger(__name__)

CURSOR_HOME = "\x1b[H"
CLEAR_SCREEN = "\x1b[2J"
HIDE_CURSOR = "\x1b[?25l"
SHOW_CURSOR = "\x1b[?25h"


class TerminalDisplay(TextDisplay):
    """Draws frames to a text stream, overwriting the previous frame."""

    def __init__(self, cols: int, rows: int, stream: TextIO | None = None) -> None:
        self._cols = cols
        self._rows = rows
        self._stream = stream or sys.stdout
        self._cleared = False

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def rows(self) -> int:
        return self._rows

    def show(self, lines: list[str]) -> None:
        prefix = CURSOR_HOME
        if not self._cleared:
            prefix = HIDE_CURSOR + CLEAR_SCREEN + CURSOR_HOME
            self._cleared = True

        self._stream.write(prefix + "\n".join(lines) + "\n")
        self._stream.flush()

    def clear(self) -> None:
        self._stream.write(CLEAR_SCREEN + CURSOR_HOME + SHOW_CURSOR)
        self._stream.flush()
        self._cleared = False


class TerminalKeyboard(KeyboardInput):
    """Reads single key presses from a TTY without waiting for Enter."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdin
        self._callbacks: list[Callable[[str], None]] = []
        self._saved_attrs: list | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    def on_key(self, callback: Callable[[str], None]) -> Callable[[], None]:
        self._callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    def start(self) -> None:
        """Switch the TTY to cbreak mode and watch it from the running loop."""
        fd = self._stream.fileno()
        if os.isatty(fd):
            self._saved_attrs = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        else:
            logger.warning("stdin is not a TTY; keys arrive line by line")

        self._loop = asyncio.get_running_loop()
        self._loop.add_reader(fd, self._on_readable)
        logger.debug("Terminal keyboard started")

    def stop(self) -> None:
        fd = self._stream.fileno()
        if self._loop is not None:
            self._loop.remove_reader(fd)
            self._loop = None
        if self._saved_attrs is not None:
            termios.tcsetattr(fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None
        logger.debug("Terminal keyboard stopped")

    def _on_readable(self) -> None:
        fd = self._stream.fileno()
        raw = os.read(fd, 32)
        if not raw:
            # EOF on a pipe or redirected file
            if self._loop is not None:
                self._loop.remove_reader(fd)
            logger.info("stdin closed, no more keys")
            return
        data = raw.decode("utf-8", errors="ignore")
        for key in data:
            self.feed(key)

    def feed(self, key: str) -> None:
        """Deliver one key to every callback."""
        for callback in self._callbacks:
            try:
                callback(key)
            except Exception as e:
                logger.error(f"Error in key callback: {e}")
