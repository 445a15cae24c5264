"""
Input events and game commands for tflap.

Raw key presses are decoded by the input source into InputEvent objects,
translated into Commands here, and applied to the game.
"""

from dataclasses import dataclass
from enum import Enum, auto
import logging
from typing import TYPE_CHECKING

from tflap.core.state import GameState

if TYPE_CHECKING:
    from tflap.game.game import Game
    from tflap.hardware.base import InputSource

logger = logging.getLogger(__name__)


class Command(Enum):
    """Game commands."""
    JUMP = auto()
    RESTART = auto()
    QUIT = auto()


@dataclass(frozen=True)
class InputEvent:
    """
    A decoded key press.

    Attributes:
        key: Printable character, or None for named keys
        name: Named key (e.g. "KEY_ESCAPE"), or None for characters
        ctrl: Whether the control modifier was held
    """
    key: str | None = None
    name: str | None = None
    ctrl: bool = False


QUIT_KEYS = {"q", "Q"}
RESTART_KEYS = {"r", "R"}
QUIT_NAMES = {"KEY_ESCAPE"}


def translate(event: InputEvent) -> Command | None:
    """Map a key press to a command, or None if it is ignored."""
    if event.ctrl and event.key in ("c", "C"):
        return Command.QUIT
    if event.name in QUIT_NAMES:
        return Command.QUIT
    if event.key == " ":
        return Command.JUMP
    if event.key in RESTART_KEYS:
        return Command.RESTART
    if event.key in QUIT_KEYS:
        return Command.QUIT
    return None


def drain(source: "InputSource") -> list[Command]:
    """Read every pending event without waiting and return their commands."""
    commands = []
    while source.poll():
        event = source.read()
        if event is None:
            continue
        command = translate(event)
        if command is not None:
            commands.append(command)
    return commands


def apply(game: "Game", command: Command) -> bool:
    """
    Forward a command to the game.

    Returns:
        True if the command asks the process to quit
    """
    if command is Command.QUIT:
        logger.info("Quit requested")
        return True

    if command is Command.JUMP and game.state == GameState.PLAYING:
        game.jump()
    elif command is Command.RESTART and game.state == GameState.GAME_OVER:
        game.reset()

    return False
