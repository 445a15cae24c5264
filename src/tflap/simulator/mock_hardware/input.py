"""
Simulated input source.

Key presses are queued by the caller and handed out in order.
"""

from collections import deque
from typing import Iterable

from tflap.core.events import InputEvent
from tflap.hardware.base import InputSource


class ScriptedInput(InputSource):
    """
    Queue of pending events.

    None entries stand for non-key events (resize, mouse) that the
    source reads but cannot decode.
    """

    def __init__(self, events: Iterable[InputEvent | None] = ()) -> None:
        self._pending: deque[InputEvent | None] = deque(events)
        self.reads = 0

    def push(self, *events: InputEvent | None) -> None:
        self._pending.extend(events)

    def press(self, key: str, ctrl: bool = False) -> None:
        """Queue a character key press."""
        self.push(InputEvent(key=key, ctrl=ctrl))

    def press_named(self, name: str) -> None:
        """Queue a named key press."""
        self.push(InputEvent(name=name))

    @property
    def pending(self) -> int:
        return len(self._pending)

    def poll(self) -> bool:
        return bool(self._pending)

    def read(self) -> InputEvent | None:
        self.reads += 1
        if not self._pending:
            return None
        return self._pending.popleft()
