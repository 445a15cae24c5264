"""Bird and pipe entities with their per-tick update rules."""

import math
from dataclasses import dataclass

PIPE_WIDTH = 6
PIPE_GAP = 8
PIPE_SPEED = 1


@dataclass
class Bird:
    y: float
    velocity: float = 0.0

    def jump(self, impulse: float) -> None:
        """Replace the current velocity with the jump impulse."""
        self.velocity = impulse

    def update(self, gravity: float) -> None:
        self.velocity += gravity
        self.y += self.velocity

    def reset(self, y: float) -> None:
        self.y = y
        self.velocity = 0.0

    @property
    def row(self) -> int:
        """Screen row the bird occupies."""
        return math.floor(self.y)


@dataclass
class Pipe:
    x: int
    gap_y: int
    passed: bool = False

    @property
    def right(self) -> int:
        return self.x + PIPE_WIDTH

    @property
    def gap_bottom(self) -> int:
        """First solid row below the gap."""
        return self.gap_y + PIPE_GAP

    def update(self) -> None:
        self.x -= PIPE_SPEED

    def is_offscreen(self) -> bool:
        return self.right <= 0

    def has_bird_passed(self, bird_x: int) -> bool:
        return bird_x > self.right

    def collides_with(self, bird_x: int, bird_row: int) -> bool:
        """
        Check a two-column bird footprint at (bird_x, bird_row) against
        the pipe. Rows inside [gap_y, gap_bottom) are safe.
        """
        overlaps = bird_x + 2 > self.x and bird_x < self.right
        in_gap = self.gap_y <= bird_row < self.gap_bottom
        return overlaps and not in_gap
