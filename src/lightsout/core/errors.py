"""Errors raised by the Lights Out core."""

from typing import Tuple


class OutOfRangeError(ValueError):
    """Raised when an argument falls outside its permitted inclusive range.

    Attributes:
        argument: Name of the offending argument ("rows", "columns",
            "initial_count", "row" or "col")
        value: The rejected value
        bounds: Inclusive (low, high) range the value had to fall in
    """

    def __init__(self, argument: str, value: int, bounds: Tuple[int, int]) -> None:
        self.argument = argument
        self.value = value
        self.bounds = bounds
        low, high = bounds
        super().__init__(f"{argument} must be between {low} and {high}, got {value}")
