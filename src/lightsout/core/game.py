"""Lights Out play session."""

import logging
from collections import deque
from typing import Deque, Dict, List, Optional, Tuple

from .grid import Grid

logger = logging.getLogger(__name__)


class LightsOutGame:
    """A single play session on a Lights Out grid.

    Tracks the moves made so far so they can be undone or rolled back,
    and keeps a short history of lit counts after each move.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the session with a grid.

        Args:
            grid: The grid to play on; its current cells become the starting state
        """
        self.grid = grid
        self._initial_cells = grid.cells
        self._initial_lit_count = grid.lit_count
        self._move_history: List[Tuple[int, int]] = []
        self._lit_history: Deque[int] = deque(maxlen=1000)

        self._update_lit_history()

    @property
    def moves(self) -> int:
        """Number of moves made and not undone."""
        return len(self._move_history)

    @property
    def move_history(self) -> List[Tuple[int, int]]:
        """Moves made so far, oldest first."""
        return list(self._move_history)

    @property
    def lit_history(self) -> List[int]:
        """History of lit counts, starting with the initial count."""
        return list(self._lit_history)

    @property
    def lit_count(self) -> int:
        """Current number of lit cells."""
        return self.grid.lit_count

    @property
    def is_complete(self) -> bool:
        """Whether the puzzle has been solved."""
        return self.grid.is_complete

    def activate(self, row: int, col: int) -> bool:
        """Activate a cell and record the move.

        Args:
            row: Row index
            col: Column index

        Returns:
            True if the puzzle is complete after the move

        Raises:
            OutOfRangeError: If the position is outside the grid; nothing is recorded
        """
        self.grid.activate(row, col)
        self._move_history.append((row, col))
        self._update_lit_history()
        return self.is_complete

    def undo(self) -> Optional[Tuple[int, int]]:
        """Take back the most recent move.

        Returns:
            The (row, col) that was undone, or None if there were no moves
        """
        if not self._move_history:
            return None

        row, col = self._move_history.pop()
        self.grid.activate(row, col)
        self._update_lit_history()
        logger.debug("Undid move (%d, %d)", row, col)
        return (row, col)

    def reset(self) -> None:
        """Return the grid to its starting cells and forget all moves.

        The starting cells are restored directly, so changes made to
        ``grid`` outside the session are rolled back too.
        """
        self.grid.from_list(self._initial_cells)
        logger.debug("Reset after %d moves", len(self._move_history))

        self._move_history.clear()
        self._lit_history.clear()
        self._update_lit_history()

    def _update_lit_history(self) -> None:
        self._lit_history.append(self.lit_count)

    def get_statistics(self) -> Dict:
        """Get a summary of the session.

        Returns:
            Dictionary with move and lit-cell statistics
        """
        return {
            "moves": self.moves,
            "lit_count": self.lit_count,
            "initial_lit_count": self._initial_lit_count,
            "is_complete": self.is_complete,
            "grid_size": self.grid.shape,
            "lit_density": self.lit_count / self.grid.size,
        }
