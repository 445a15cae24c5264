"""Simulation core for tflap."""

from tflap.game.entities import Bird, Pipe, PIPE_GAP, PIPE_SPEED, PIPE_WIDTH
from tflap.game.game import Game

__all__ = ["Bird", "Pipe", "Game", "PIPE_GAP", "PIPE_SPEED", "PIPE_WIDTH"]
