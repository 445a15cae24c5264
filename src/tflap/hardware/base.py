"""
Abstract base classes for the game's outer boundaries.

These interfaces define the contract that both the real terminal and
file implementations and the in-memory simulator stand-ins must follow.
"""

from abc import ABC, abstractmethod
from enum import Enum

from tflap.core.events import InputEvent


class Color(Enum):
    """Foreground colors used by the renderer."""
    GREEN = "green"
    YELLOW = "yellow"
    CYAN = "cyan"
    RED = "red"


class Surface(ABC):
    """Abstract base class for a character-cell draw surface."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the whole surface."""
        ...

    @abstractmethod
    def move_to(self, col: int, row: int) -> None:
        """Move the cursor to a cell."""
        ...

    @abstractmethod
    def set_color(self, color: Color) -> None:
        """Set the foreground color for subsequent text."""
        ...

    @abstractmethod
    def print_text(self, text: str) -> None:
        """Print text at the cursor."""
        ...

    @abstractmethod
    def reset_color(self) -> None:
        """Restore the default foreground color."""
        ...

    @abstractmethod
    def flush(self) -> None:
        """Push everything drawn so far to the output."""
        ...


class InputSource(ABC):
    """Abstract base class for a non-blocking key press source."""

    @abstractmethod
    def poll(self) -> bool:
        """Check, without waiting, whether an event is pending."""
        ...

    @abstractmethod
    def read(self) -> InputEvent | None:
        """
        Read the next pending event.

        Returns:
            The decoded key press, or None if the event is not a key press
        """
        ...


class HighScoreStore(ABC):
    """
    Abstract base class for best-score persistence.

    Implementations never raise: a missing or damaged value loads as 0
    and a failed save is dropped.
    """

    @abstractmethod
    def load(self) -> int:
        """Load the stored high score."""
        ...

    @abstractmethod
    def save(self, value: int) -> None:
        """Store a new high score."""
        ...
