import pytest

from tflap.game.game import Game
from tflap.simulator.mock_hardware import MemoryHighScoreStore, RecordingSurface, ScriptedInput


class FixedRandInt:
    """Returns a fixed value and records every requested range."""

    def __init__(self, value: int = 5) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def __call__(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return max(low, min(self.value, high))


class FakeClock:
    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def store():
    return MemoryHighScoreStore()


@pytest.fixture
def randint():
    return FixedRandInt(5)


@pytest.fixture
def game(store, randint):
    return Game(80, 20, store, randint=randint)


@pytest.fixture
def surface():
    return RecordingSurface(80, 20)


@pytest.fixture
def keys():
    return ScriptedInput()


def hover(game: Game) -> None:
    """Cancel gravity for the next tick so the bird keeps its row."""
    game.bird.velocity = -Game.GRAVITY


def crash(game: Game) -> None:
    """Drop the bird through the floor on the next tick."""
    game.bird.y = game.height - 0.1
    game.bird.velocity = 0.0
    game.advance_tick()
