"""Grid data structure for the Lights Out puzzle."""

import logging
import numbers
from typing import Iterator, List, Optional, Tuple, Union

import numpy as np
import torch
import torch.nn.functional as F

from .errors import OutOfRangeError

logger = logging.getLogger(__name__)

MIN_DIMENSION = 5
MAX_DIMENSION = 20

# Shared by every grid; a press toggles the cell and its four orthogonal neighbours
_PRESS_KERNEL = torch.tensor([[0, 1, 0], [1, 1, 1], [0, 1, 0]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


def _check_range(argument: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{argument} must be an integer, got {type(value).__name__}")
    if not low <= value <= high:
        raise OutOfRangeError(argument, value, (low, high))


class Grid:
    """Represents a rectangular Lights Out board.

    Every cell is either lit or unlit. Activating a cell toggles it and its
    orthogonal neighbours; edges do not wrap. The puzzle is complete once
    no cell is lit.
    """

    def __init__(self, rows: int, columns: int) -> None:
        """Initialize an empty grid with every cell unlit.

        An empty grid is already solved, so this is a building block for
        tests and for :meth:`with_random_lit` rather than a playable puzzle.

        Args:
            rows: Number of rows (5 to 20)
            columns: Number of columns (5 to 20)

        Raises:
            TypeError: If a dimension is not an integer
            OutOfRangeError: If either dimension is outside its bounds
        """
        _check_range("rows", rows, MIN_DIMENSION, MAX_DIMENSION)
        _check_range("columns", columns, MIN_DIMENSION, MAX_DIMENSION)

        self._rows = int(rows)
        self._columns = int(columns)
        self._cells = np.zeros((self._rows, self._columns), dtype=np.int8)

    @classmethod
    def with_random_lit(
        cls,
        rows: int,
        columns: int,
        initial_count: int,
        rng: Optional[np.random.Generator] = None,
    ) -> "Grid":
        """Create a grid with exactly ``initial_count`` randomly chosen cells lit.

        Cells are drawn uniformly at random; drawing an already lit cell is
        skipped, so the number of draws varies but the final count does not.

        Args:
            rows: Number of rows (5 to 20)
            columns: Number of columns (5 to 20)
            initial_count: Number of cells to light (1 to rows * columns - 1)
            rng: Random generator to draw cells from; a fresh one is used if omitted

        Returns:
            A new grid with ``lit_count == initial_count``

        Raises:
            TypeError: If a dimension or ``initial_count`` is not an integer
            OutOfRangeError: If a dimension or ``initial_count`` is out of bounds
        """
        grid = cls(rows, columns)
        _check_range("initial_count", initial_count, 1, grid.size - 1)

        if rng is None:
            rng = np.random.default_rng()

        lit = 0
        draws = 0
        while lit < initial_count:
            index = int(rng.integers(0, grid.size))
            draws += 1
            if not grid._cells.flat[index]:
                grid._cells.flat[index] = 1
                lit += 1

        logger.debug("Lit %d of %d cells in %d draws", initial_count, grid.size, draws)
        return grid

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (rows, columns)."""
        return (self._rows, self._columns)

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self._rows * self._columns

    @property
    def cells(self) -> np.ndarray:
        """Get a copy of the cell states as a boolean (rows, columns) array."""
        return self._cells.astype(bool)

    def _check_position(self, row: int, col: int) -> None:
        _check_range("row", row, 0, self._rows - 1)
        _check_range("col", col, 0, self._columns - 1)

    def cell_state(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row index (0 is the top row)
            col: Column index (0 is the leftmost column)

        Returns:
            True if the cell is lit, False if unlit

        Raises:
            OutOfRangeError: If the position is outside the grid
        """
        self._check_position(row, col)
        return bool(self._cells[row, col])

    def __getitem__(self, position: Tuple[int, int]) -> bool:
        """Get the state of the cell at ``grid[row, col]``."""
        row, col = position
        return self.cell_state(row, col)

    @property
    def lit_count(self) -> int:
        """Get the number of lit cells."""
        return int(np.count_nonzero(self._cells))

    @property
    def is_complete(self) -> bool:
        """Whether the puzzle is solved (no cell is lit)."""
        return self.lit_count == 0

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """Get the orthogonal neighbours of a cell that lie inside the grid.

        Args:
            row: Row index
            col: Column index

        Returns:
            List of (row, col) positions, between 2 and 4 entries

        Raises:
            OutOfRangeError: If the position is outside the grid
        """
        self._check_position(row, col)

        result = []
        if col > 0:
            result.append((row, col - 1))
        if col < self._columns - 1:
            result.append((row, col + 1))
        if row > 0:
            result.append((row - 1, col))
        if row < self._rows - 1:
            result.append((row + 1, col))
        return result

    def activate(self, row: int, col: int) -> None:
        """Toggle a cell and each of its orthogonal neighbours.

        Corner cells affect 3 cells in total, edge cells 4 and interior
        cells 5. Activating the same cell twice restores the previous state.

        Args:
            row: Row index
            col: Column index

        Raises:
            OutOfRangeError: If the position is outside the grid; the grid
                is left unchanged
        """
        targets = [(row, col)] + self.neighbors(row, col)
        for r, c in targets:
            self._cells[r, c] ^= 1

    def apply_presses(self, presses: Union[np.ndarray, List[List[int]]]) -> None:
        """Apply a whole matrix of activations at once.

        The result is the same as activating each cell ``presses[r][c]``
        times, in any order. Only the parity of each count matters.

        Args:
            presses: Array-like of non-negative counts with shape (rows, columns)

        Raises:
            ValueError: If the shape doesn't match or a count is negative
        """
        counts = np.asarray(presses, dtype=np.int64)
        if counts.shape != self.shape:
            raise ValueError(f"Press shape {counts.shape} doesn't match grid {self.shape}")
        if (counts < 0).any():
            raise ValueError("Press counts must be non-negative")

        # Zero padding keeps the plus-shaped kernel from wrapping at the edges
        parity = torch.from_numpy((counts % 2).astype(np.float32)).reshape(1, 1, self._rows, self._columns)
        toggles = F.conv2d(parity, _PRESS_KERNEL, padding=1)
        flips = toggles[0, 0].numpy().astype(np.int64) % 2

        self._cells ^= flips.astype(np.int8)
        logger.debug("Applied %d presses, %d cells flipped", int(counts.sum()), int(flips.sum()))

    def lit_cells(self) -> Iterator[Tuple[int, int]]:
        """Get coordinates of lit cells in row-major order.

        Yields:
            Tuples of (row, col)
        """
        coords = np.nonzero(self._cells)
        for r, c in zip(coords[0], coords[1]):
            yield (int(r), int(c))

    def copy(self) -> "Grid":
        """Create an independent grid with the same cell states."""
        other = Grid(self._rows, self._columns)
        other._cells[:] = self._cells
        return other

    def to_list(self) -> List[List[int]]:
        """Convert grid to nested row-major lists of 0/1."""
        return self._cells.tolist()

    def from_list(self, data: Union[np.ndarray, List[List[int]]]) -> None:
        """Restore cell states previously captured with :meth:`to_list` or :attr:`cells`.

        Args:
            data: Row-major cell states (0/1 or bool) with shape (rows, columns)

        Raises:
            ValueError: If the shape doesn't match or a value isn't 0 or 1
        """
        arr = np.asarray(data, dtype=np.int8)
        if arr.shape != self.shape:
            raise ValueError(f"Data shape {arr.shape} doesn't match grid {self.shape}")
        if not np.isin(arr, (0, 1)).all():
            raise ValueError("Cell states must be 0 or 1")

        self._cells[:] = arr

    def __eq__(self, other: object) -> bool:
        """Check if two grids have the same shape and cells."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __repr__(self) -> str:
        return f"Grid(rows={self._rows}, columns={self._columns}, lit={self.lit_count})"

    def __str__(self) -> str:
        """String representation showing lit cells as '*' and unlit as '.'."""
        return "\n".join("".join("*" if cell else "." for cell in row) for row in self._cells)
