"""Core Lights Out logic."""

from .errors import OutOfRangeError
from .grid import Grid, MAX_DIMENSION, MIN_DIMENSION
from .game import LightsOutGame

__all__ = ["Grid", "LightsOutGame", "OutOfRangeError", "MIN_DIMENSION", "MAX_DIMENSION"]
