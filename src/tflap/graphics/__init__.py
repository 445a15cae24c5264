"""Graphics module for tflap rendering."""

from tflap.graphics.renderer import Renderer

__all__ = ["Renderer"]
