"""tflap - a terminal flappy bird."""

__version__ = "0.1.0"
