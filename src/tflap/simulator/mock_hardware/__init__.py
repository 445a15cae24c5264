"""Mock hardware implementations for the simulator."""

from .display import RecordingSurface
from .input import ScriptedInput
from .storage import MemoryHighScoreStore

__all__ = [
    "RecordingSurface",
    "ScriptedInput",
    "MemoryHighScoreStore",
]
