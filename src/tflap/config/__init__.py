"""Configuration for tflap."""

from .settings import LoopSettings, Settings, get_settings

__all__ = ["LoopSettings", "Settings", "get_settings"]
