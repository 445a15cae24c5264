"""
Terminal surface and keyboard input backed by blessed.

The terminal itself (fullscreen, raw mode, hidden cursor) is set up by
the caller with blessed's context managers; these classes only draw and
read keys.
"""

import logging
import sys
from typing import TextIO

from blessed import Terminal
from blessed.keyboard import Keystroke

from tflap.core.events import InputEvent
from tflap.hardware.base import Color, InputSource, Surface

logger = logging.getLogger(__name__)


class TerminalSurface(Surface):
    """
    Draws with blessed escape sequences.

    Output is collected in memory and written in one go on flush() to
    keep frames from tearing.
    """

    def __init__(self, term: Terminal, stream: TextIO | None = None) -> None:
        self.term = term
        self._stream = stream or sys.stdout
        self._pending: list[str] = []

    def clear(self) -> None:
        self._pending.append(self.term.home + self.term.clear)

    def move_to(self, col: int, row: int) -> None:
        self._pending.append(self.term.move_xy(col, row))

    def set_color(self, color: Color) -> None:
        self._pending.append(getattr(self.term, color.value))

    def print_text(self, text: str) -> None:
        self._pending.append(text)

    def reset_color(self) -> None:
        self._pending.append(self.term.normal)

    def flush(self) -> None:
        frame = "".join(self._pending)
        self._pending.clear()
        self._stream.write(frame)
        self._stream.flush()


def decode_keystroke(keystroke: Keystroke) -> InputEvent | None:
    """Convert a blessed keystroke into an InputEvent."""
    if not keystroke:
        return None

    if keystroke.is_sequence:
        return InputEvent(name=keystroke.name)

    char = str(keystroke)
    if len(char) == 1 and ord(char) < 32:
        # Raw mode delivers Ctrl+<letter> as control codes 1-26
        return InputEvent(key=chr(ord(char) + 96), ctrl=True)

    return InputEvent(key=char)


class TerminalInput(InputSource):
    """
    Reads key presses from a blessed terminal without blocking.

    blessed buffers every byte it reads, so kbhit() misses keys that
    arrived together. Pending keys are found by reading instead, and the
    keystroke is held until read() takes it.
    """

    # Seconds to wait for the rest of an escape sequence after ESC
    ESC_DELAY = 0.01

    def __init__(self, term: Terminal) -> None:
        self.term = term
        self._pending: Keystroke | None = None

    def _next_keystroke(self) -> Keystroke:
        return self.term.inkey(timeout=0, esc_delay=self.ESC_DELAY)

    def poll(self) -> bool:
        if self._pending is None:
            keystroke = self._next_keystroke()
            if keystroke:
                self._pending = keystroke
        return self._pending is not None

    def read(self) -> InputEvent | None:
        if self._pending is not None:
            keystroke, self._pending = self._pending, None
        else:
            keystroke = self._next_keystroke()
        event = decode_keystroke(keystroke)
        if event is not None:
            logger.debug(f"Key: {event}")
        return event
