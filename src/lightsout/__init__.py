"""Lights Out puzzle package."""

__version__ = "0.1.0"

from .core.errors import OutOfRangeError
from .core.grid import Grid
from .core.game import LightsOutGame

__all__ = ["Grid", "LightsOutGame", "OutOfRangeError"]
