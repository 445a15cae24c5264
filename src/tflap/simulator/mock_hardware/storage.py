"""Simulated high score store kept in memory."""

from tflap.hardware.base import HighScoreStore


class MemoryHighScoreStore(HighScoreStore):
    """Holds the high score for the lifetime of the object."""

    def __init__(self, value: int = 0) -> None:
        self.value = value
        self.saves: list[int] = []

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = value
        self.saves.append(value)
