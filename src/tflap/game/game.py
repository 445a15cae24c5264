"""Flappy simulation core.

Owns the bird and the pipes, advances the physics one fixed tick at a
time, spawns and culls pipes, detects collisions and keeps the score.
"""

import logging
import random
from typing import Callable

from tflap.core.state import GameState, StateMachine
from tflap.game.entities import PIPE_GAP, Bird, Pipe
from tflap.hardware.base import HighScoreStore

logger = logging.getLogger(__name__)

# Uniform integer in [low, high], both ends inclusive
RandInt = Callable[[int, int], int]


class Game:
    """A single-player run on a fixed width x height play area."""

    BIRD_X = 10
    GRAVITY = 0.3
    JUMP_VELOCITY = -1.5
    PIPE_SPACING = 40
    SPAWN_MARGIN = 20
    INITIAL_PIPES = 4
    GAP_MARGIN = 3

    def __init__(
        self,
        width: int,
        height: int,
        store: HighScoreStore,
        randint: RandInt = random.randint,
    ) -> None:
        self.width = width
        self.height = height
        self._store = store
        self._randint = randint

        self.bird = Bird(self._center_y())
        self.pipes: list[Pipe] = []
        self.score = 0
        self.high_score = store.load()
        self.is_new_record = False
        self._state = StateMachine(GameState.PLAYING)

        self._spawn_initial_pipes()
        logger.info(f"Game created: {width}x{height}, high score {self.high_score}")

    @property
    def state(self) -> GameState:
        return self._state.state

    def _center_y(self) -> float:
        return float(self.height // 2)

    def gap_range(self) -> tuple[int, int]:
        """Inclusive bounds for a pipe's gap_y, saturated for short screens."""
        high = max(self.height - (PIPE_GAP + self.GAP_MARGIN), 0)
        low = min(self.GAP_MARGIN, high)
        return low, high

    def _random_gap(self) -> int:
        low, high = self.gap_range()
        return self._randint(low, high)

    def _spawn_initial_pipes(self) -> None:
        for i in range(self.INITIAL_PIPES):
            x = self.width // 2 + i * self.PIPE_SPACING
            self.pipes.append(Pipe(x, self._random_gap()))

    def spawn_pipe(self) -> None:
        """Append a pipe one spacing after the last, or at the right edge."""
        if self.pipes:
            x = self.pipes[-1].x + self.PIPE_SPACING
        else:
            x = self.width
        self.pipes.append(Pipe(x, self._random_gap()))

    def advance_tick(self) -> None:
        if self.state != GameState.PLAYING:
            return

        self.bird.update(self.GRAVITY)

        if self.bird.y < 0 or self.bird.y >= self.height:
            logger.debug(f"Bird left the screen at y={self.bird.y:.2f}")
            self._game_over()
            return

        for pipe in self.pipes:
            pipe.update()
            if not pipe.passed and pipe.has_bird_passed(self.BIRD_X):
                pipe.passed = True
                self.score += 1

        bird_row = self.bird.row
        for pipe in self.pipes:
            if pipe.collides_with(self.BIRD_X, bird_row):
                logger.debug(f"Bird hit pipe at x={pipe.x} (gap {pipe.gap_y})")
                self._game_over()
                return

        self.pipes = [pipe for pipe in self.pipes if not pipe.is_offscreen()]

        if not self.pipes or self.pipes[-1].x < self.width - self.SPAWN_MARGIN:
            self.spawn_pipe()

    def jump(self) -> None:
        if self.state == GameState.PLAYING:
            self.bird.jump(self.JUMP_VELOCITY)

    def reset(self) -> None:
        """Start a new run, keeping the high score."""
        self.bird.reset(self._center_y())
        self.pipes = []
        self.score = 0
        self.is_new_record = False
        self._state.transition(GameState.PLAYING)
        self._spawn_initial_pipes()

    def check_and_save_highscore(self) -> None:
        if self.score > self.high_score:
            self.high_score = self.score
            self.is_new_record = True
            logger.info(f"New record: {self.score}")
            self._store.save(self.high_score)

    def _game_over(self) -> None:
        self._state.transition(GameState.GAME_OVER)
        self.check_and_save_highscore()
