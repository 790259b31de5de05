"""Frontend interfaces for Lights Out."""

from .cli import CLILightsOut

__all__ = ["CLILightsOut"]
