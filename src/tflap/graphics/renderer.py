"""Draws a game snapshot onto a character-cell surface."""

from tflap.core.state import GameState
from tflap.game.entities import PIPE_WIDTH
from tflap.game.game import Game
from tflap.hardware.base import Color, Surface

PIPE_CHAR = "█"
BIRD_CHAR = "@"

PIPE_COLOR = Color.GREEN
BIRD_COLOR = Color.YELLOW
STATUS_COLOR = Color.CYAN
RECORD_COLOR = Color.YELLOW
GAME_OVER_COLOR = Color.RED

STATUS_COL = 2
BOX_HALF_WIDTH = 12


def record_box(score: int) -> list[str]:
    """Game over box shown when the run set a new record."""
    return [
        "╔══════════════════════════╗",
        "║   *** NEW RECORD! ***    ║",
        f"║   Score: {score:5}            ║",
        "║                          ║",
        "║   R: Retry               ║",
        "║   Q: Quit                ║",
        "╚══════════════════════════╝",
    ]


def game_over_box(score: int, best: int) -> list[str]:
    """Game over box for an ordinary run."""
    return [
        "╔══════════════════════════╗",
        "║   GAME OVER!             ║",
        f"║   Score: {score:5}            ║",
        f"║   Best:  {best:5}            ║",
        "║                          ║",
        "║   R: Retry               ║",
        "║   Q: Quit                ║",
        "╚══════════════════════════╝",
    ]


class Renderer:
    """
    Translates the current game state into surface draw calls.

    Every frame is drawn from scratch: clear, pipes, bird, status line,
    then the game over box if the run has ended. Rows that would fall
    outside the play area are skipped, so very small terminals render
    a clipped frame instead of failing.
    """

    def draw(self, game: Game, surface: Surface) -> None:
        surface.clear()
        self._draw_pipes(game, surface)
        self._draw_bird(game, surface)
        self._draw_status(game, surface)

        if game.state == GameState.GAME_OVER:
            self._draw_game_over(game, surface)

        surface.reset_color()
        surface.flush()

    def _draw_pipes(self, game: Game, surface: Surface) -> None:
        surface.set_color(PIPE_COLOR)
        segment = PIPE_CHAR * PIPE_WIDTH

        for pipe in game.pipes:
            # Pipes partly past the left edge are not drawn
            if pipe.x < 0 or pipe.x >= game.width:
                continue

            for row in range(0, min(pipe.gap_y, game.height)):
                surface.move_to(pipe.x, row)
                surface.print_text(segment)

            for row in range(min(pipe.gap_bottom, game.height), game.height):
                surface.move_to(pipe.x, row)
                surface.print_text(segment)

    def _draw_bird(self, game: Game, surface: Surface) -> None:
        surface.set_color(BIRD_COLOR)
        row = game.bird.row
        if 0 <= row < game.height:
            surface.move_to(game.BIRD_X, row)
            surface.print_text(BIRD_CHAR)

    def _draw_status(self, game: Game, surface: Surface) -> None:
        if game.height < 1:
            return
        surface.set_color(STATUS_COLOR)
        surface.move_to(STATUS_COL, game.height - 1)
        surface.print_text(f"Score: {game.score}  High Score: {game.high_score}")

    def _draw_game_over(self, game: Game, surface: Surface) -> None:
        if game.is_new_record:
            surface.set_color(RECORD_COLOR)
            lines = record_box(game.score)
        else:
            surface.set_color(GAME_OVER_COLOR)
            lines = game_over_box(game.score, game.high_score)

        col = max(game.width // 2 - BOX_HALF_WIDTH, 0)
        top = game.height // 2 - 1

        for offset, line in enumerate(lines):
            row = top + offset
            if 0 <= row < game.height:
                surface.move_to(col, row)
                surface.print_text(line)
