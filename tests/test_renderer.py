import pytest

from tflap.game.entities import Pipe
from tflap.game.game import Game
from tflap.graphics.renderer import Renderer, game_over_box, record_box
from tflap.hardware.base import Color
from tflap.simulator.mock_hardware import MemoryHighScoreStore, RecordingSurface

from tests.conftest import FixedRandInt, crash


@pytest.fixture
def renderer():
    return Renderer()


def snapshot(game):
    return (
        game.state,
        game.score,
        game.high_score,
        game.is_new_record,
        game.bird.y,
        game.bird.velocity,
        [(pipe.x, pipe.gap_y, pipe.passed) for pipe in game.pipes],
    )


class TestFrame:
    def test_frame_is_cleared_first_and_flushed_last(self, renderer, game, surface):
        renderer.draw(game, surface)

        assert surface.calls[0] == ("clear",)
        assert surface.calls[-2:] == [("reset_color",), ("flush",)]
        assert surface.flush_count == 1

    def test_pipe_segments(self, renderer, game, surface):
        renderer.draw(game, surface)

        # Only the pipe at x=40 is on screen; its gap spans rows 5..12
        for row in range(0, 5):
            assert surface.frame[row][40:46] == "██████"
        for row in range(5, 13):
            assert surface.frame[row][40:46] == "      "
        for row in range(13, 20):
            assert surface.frame[row][40:46] == "██████"
        assert surface.color_at(40, 0) is Color.GREEN

    def test_pipe_at_right_edge_is_skipped(self, renderer, game, surface):
        renderer.draw(game, surface)
        assert "█" not in surface.frame[0][46:]

    def test_pipe_past_left_edge_is_not_drawn(self, renderer, game, surface):
        game.pipes = [Pipe(-3, 5)]
        renderer.draw(game, surface)
        assert not any("█" in line for line in surface.frame)

    def test_pipe_at_column_zero_is_drawn(self, renderer, game, surface):
        game.pipes = [Pipe(0, 5)]
        renderer.draw(game, surface)
        assert surface.frame[0][0:6] == "██████"

    def test_bird(self, renderer, game, surface):
        game.bird.y = 7.8
        renderer.draw(game, surface)

        assert surface.char_at(10, 7) == "@"
        assert surface.color_at(10, 7) is Color.YELLOW

    def test_bird_off_screen_is_not_drawn(self, renderer, game, surface):
        game.bird.y = -0.5
        renderer.draw(game, surface)
        assert "@" not in "".join(surface.frame)

    def test_status_line(self, renderer, randint, surface):
        game = Game(80, 20, MemoryHighScoreStore(12), randint=randint)
        game.score = 3
        renderer.draw(game, surface)

        assert surface.frame[19][2:].startswith("Score: 3  High Score: 12")
        assert surface.color_at(2, 19) is Color.CYAN

    def test_no_box_while_playing(self, renderer, game, surface):
        renderer.draw(game, surface)
        assert "GAME OVER!" not in "".join(surface.frame)

    def test_draw_does_not_change_the_game(self, renderer, game, surface):
        before = snapshot(game)
        renderer.draw(game, surface)
        renderer.draw(game, surface)
        assert snapshot(game) == before


class TestGameOverBox:
    def test_standard_box(self, renderer, randint, surface):
        game = Game(80, 20, MemoryHighScoreStore(10), randint=randint)
        game.score = 0
        crash(game)
        renderer.draw(game, surface)

        # Box starts at column 80 // 2 - 12 and row 20 // 2 - 1
        assert surface.frame[9][28:56] == "╔══════════════════════════╗"
        assert "GAME OVER!" in surface.frame[10]
        assert "Score:     0" in surface.frame[11]
        assert "Best:     10" in surface.frame[12]
        assert "R: Retry" in surface.frame[14]
        assert "Q: Quit" in surface.frame[15]
        assert surface.frame[16][28:56] == "╚══════════════════════════╝"
        assert surface.color_at(28, 9) is Color.RED

    def test_record_box(self, renderer, randint, surface):
        game = Game(80, 20, MemoryHighScoreStore(1), randint=randint)
        game.score = 3
        crash(game)
        renderer.draw(game, surface)

        assert "*** NEW RECORD! ***" in surface.frame[10]
        assert "Score:     3" in surface.frame[11]
        assert "Best:" not in "".join(surface.frame)
        assert "R: Retry" in surface.frame[13]
        assert "Q: Quit" in surface.frame[14]
        assert surface.color_at(28, 9) is Color.YELLOW

    def test_box_lines_have_equal_width(self):
        assert {len(line) for line in record_box(12345)} == {28}
        assert {len(line) for line in game_over_box(7, 99999)} == {28}


class TestSmallScreens:
    @pytest.mark.parametrize("width,height", [(10, 5), (20, 3), (1, 1), (30, 0)])
    def test_tiny_screens_render(self, renderer, width, height):
        game = Game(width, height, MemoryHighScoreStore(), randint=FixedRandInt(0))
        surface = RecordingSurface(width, height)

        renderer.draw(game, surface)
        crash(game)
        renderer.draw(game, surface)

        assert len(surface.frame) == height
        for call in surface.calls:
            if call[0] == "move_to":
                assert 0 <= call[2] < height
                assert call[1] >= 0
