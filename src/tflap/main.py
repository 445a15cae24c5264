"""
Main entry point for tflap.

Takes over the terminal, runs the game loop and always hands the
terminal back, whether the loop ends by quitting or by an error.
"""

import logging
import sys
from pathlib import Path

from tflap.config.settings import Settings, get_settings

MIN_WIDTH = 40
MIN_HEIGHT = 20


def setup_logging(debug: bool = False, log_file: Path | None = None) -> None:
    """
    Configure logging.

    The game owns the screen, so records go to log_file when one is set.
    Without one, only warnings reach stderr unless debug is on.
    """
    if log_file is not None:
        level = logging.DEBUG if debug else logging.INFO
        logging.basicConfig(
            level=level,
            filename=str(log_file),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S"
        )
    else:
        level = logging.DEBUG if debug else logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S"
        )


def run_terminal(settings: Settings) -> None:
    """Run the game on the controlling terminal."""
    from blessed import Terminal

    from tflap.game.game import Game
    from tflap.hardware.runner import GameRunner, RunnerConfig
    from tflap.hardware.storage import FileHighScoreStore
    from tflap.hardware.terminal import TerminalInput, TerminalSurface

    logger = logging.getLogger(__name__)

    term = Terminal()
    if term.width < MIN_WIDTH or term.height < MIN_HEIGHT:
        logger.warning(
            f"Terminal is {term.width}x{term.height}, "
            f"{MIN_WIDTH}x{MIN_HEIGHT} or larger recommended"
        )

    store = FileHighScoreStore(settings.highscore_path)
    config = RunnerConfig(
        tick_rate=settings.loop.tick_rate,
        loop_sleep=settings.loop.sleep,
    )

    with term.fullscreen(), term.raw(), term.hidden_cursor():
        # Size is captured once; resizes are not tracked
        game = Game(term.width, term.height, store)
        runner = GameRunner(
            game=game,
            surface=TerminalSurface(term),
            input_source=TerminalInput(term),
            config=config,
        )
        try:
            runner.run()
        finally:
            print(term.normal, end="", flush=True)


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug, settings.log_file)

    logger = logging.getLogger(__name__)
    logger.info("tflap starting...")

    try:
        run_terminal(settings)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("tflap stopped")


if __name__ == "__main__":
    main()
