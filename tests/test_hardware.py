import io
import os

from flappyascii.hardware.terminal import CLEAR_SCREEN, CURSOR_HOME, TerminalDisplay, TerminalKeyboard
from flappyascii.simulator.mock_hardware import SimulatedTextDisplay


def test_terminal_display_clears_once_then_homes_cursor():
    stream = io.StringIO()
    display = TerminalDisplay(3, 2, stream=stream)

    display.show(["abc", "def"])
    first = stream.getvalue()
    assert CLEAR_SCREEN in first
    assert first.endswith("abc\ndef\n")

    stream.truncate(0)
    stream.seek(0)
    display.show(["ghi", "jkl"])
    assert stream.getvalue() == CURSOR_HOME + "ghi\njkl\n"


def test_terminal_display_size():
    display = TerminalDisplay(90, 28, stream=io.StringIO())
    assert (display.cols, display.rows) == (90, 28)


def test_keyboard_feeds_callbacks_and_unsubscribes():
    keyboard = TerminalKeyboard(stream=io.StringIO())
    keys = []
    unsubscribe = keyboard.on_key(keys.append)

    keyboard.feed(" ")
    unsubscribe()
    keyboard.feed("r")

    assert keys == [" "]


def test_keyboard_callback_errors_are_contained():
    keyboard = TerminalKeyboard(stream=io.StringIO())
    keys = []

    def broken(key: str) -> None:
        raise ValueError(key)

    keyboard.on_key(broken)
    keyboard.on_key(keys.append)
    keyboard.feed("t")
    assert keys == ["t"]


def test_simulated_display_keeps_latest_frame():
    display = SimulatedTextDisplay(2, 2)
    assert display.get_lines() == ["  ", "  "]

    display.show(["ab", "cd"])
    assert display.get_text() == "ab\ncd"
    assert display.frames_shown == 1

    display.clear()
    assert display.get_lines() == ["  ", "  "]


class RecordingLoop:
    def __init__(self) -> None:
        self.removed: list[int] = []

    def remove_reader(self, fd: int) -> bool:
        self.removed.append(fd)
        return True


def test_keyboard_stops_reading_at_end_of_input():
    read_fd, write_fd = os.pipe()
    os.close(write_fd)
    with os.fdopen(read_fd, "r") as stream:
        keyboard = TerminalKeyboard(stream=stream)
        keys = []
        keyboard.on_key(keys.append)
        loop = RecordingLoop()
        keyboard._loop = loop

        keyboard._on_readable()

        assert loop.removed == [read_fd]
        assert keys == []
