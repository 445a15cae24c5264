"""
Loop driver for tflap.

Drains input, advances the simulation on a fixed tick, renders every
iteration and sleeps briefly to bound CPU use.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable

from tflap.core import events
from tflap.game.game import Game
from tflap.graphics.renderer import Renderer
from tflap.hardware.base import InputSource, Surface

logger = logging.getLogger(__name__)


@dataclass
class RunnerConfig:
    """Loop cadence."""
    # Seconds between simulation ticks
    tick_rate: float = 0.05
    # Seconds slept after every iteration
    loop_sleep: float = 0.005


class GameRunner:
    """
    Single-threaded game loop.

    Each iteration, in order:
    - drain every pending key press and apply its command
    - advance the game if at least one tick interval has passed
    - draw the current frame
    - sleep for loop_sleep

    A quit command ends run(). Errors raised by the surface or the input
    source propagate to the caller.
    """

    def __init__(
        self,
        game: Game,
        surface: Surface,
        input_source: InputSource,
        config: RunnerConfig | None = None,
        renderer: Renderer | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.game = game
        self.surface = surface
        self.input_source = input_source
        self.config = config or RunnerConfig()
        self.renderer = renderer or Renderer()
        self._clock = clock
        self._sleep = sleep

        self._running = False
        self._last_tick = 0.0
        self._tick_count = 0
        self._frame_count = 0

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def frame_count(self) -> int:
        return self._frame_count

    def run(self) -> None:
        """Run until a quit command arrives."""
        self._running = True
        self._last_tick = self._clock()
        logger.info("Game loop started")

        while self._running:
            self.step()
            if self._running:
                self._sleep(self.config.loop_sleep)

        logger.info(f"Game loop stopped after {self._tick_count} ticks")

    def step(self) -> None:
        """Run a single loop iteration."""
        for command in events.drain(self.input_source):
            if events.apply(self.game, command):
                self._running = False
                return

        now = self._clock()
        if now - self._last_tick >= self.config.tick_rate:
            self.game.advance_tick()
            self._tick_count += 1
            self._last_tick = now

        self.renderer.draw(self.game, self.surface)
        self._frame_count += 1
