"""Terminal, input and storage boundaries for tflap."""

from .base import Color, HighScoreStore, InputSource, Surface
from .storage import FileHighScoreStore

__all__ = [
    # Base classes
    "Color",
    "HighScoreStore",
    "InputSource",
    "Surface",
    # Implementations
    "FileHighScoreStore",
]
