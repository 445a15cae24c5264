"""Core framework components for tflap."""

from .state import GameState, StateMachine
from .events import Command, InputEvent

__all__ = ["GameState", "StateMachine", "Command", "InputEvent"]
