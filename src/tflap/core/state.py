"""
State machine for a tflap run.

States:
    PLAYING: Bird is flying, the simulation advances every tick
    GAME_OVER: Bird has crashed, waiting for restart or quit
"""

from enum import Enum, auto
import logging

logger = logging.getLogger(__name__)


class GameState(Enum):
    """Game states."""
    PLAYING = auto()
    GAME_OVER = auto()


class StateMachine:
    """
    Tracks the game state and guards its transitions.

    Quitting is not a state: the loop driver exits from either state.
    """

    VALID_TRANSITIONS: list[tuple[GameState, GameState]] = [
        (GameState.PLAYING, GameState.GAME_OVER),  # Crash
        (GameState.GAME_OVER, GameState.PLAYING),  # Restart
    ]

    def __init__(self, initial_state: GameState = GameState.PLAYING) -> None:
        self._state = initial_state
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with state: {initial_state.name}")

    @property
    def state(self) -> GameState:
        """Get current state."""
        return self._state

    def can_transition(self, to_state: GameState) -> bool:
        """Check if transition to given state is valid."""
        return (self._state, to_state) in self._valid_transitions

    def transition(self, to_state: GameState) -> bool:
        """
        Attempt to transition to a new state.

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_state):
            logger.warning(
                f"Invalid transition: {self._state.name} -> {to_state.name}"
            )
            return False

        old_state = self._state
        self._state = to_state
        logger.info(f"State transition: {old_state.name} -> {to_state.name}")

        return True
