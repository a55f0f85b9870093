"""Board representation for the Tetris playfield."""

from __future__ import annotations

from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from .tetromino import Shape


# Dimensions of the standard Tetris board.
WIDTH = 10
HEIGHT = 20

EMPTY = 0
FILLED = 1

Grid = NDArray[np.uint8]
Snapshot = Tuple[Tuple[bool, ...], ...]


def create_empty_grid(width: int = WIDTH, height: int = HEIGHT) -> Grid:
    """Return a new empty board grid filled with zeros."""

    return np.zeros((height, width), dtype=np.uint8)


class Board:
    """Tetris board holding the occupied cells.

    The active piece is not tracked here.  The game loop stamps it into the
    grid and erases it again every tick, so only locked cells survive between
    pieces.
    """

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.grid: Grid = create_empty_grid(width, height)

    def _footprint(self, shape: Shape, x: int, y: int) -> tuple[NDArray[np.intp], NDArray[np.intp]]:
        rows, cols = np.nonzero(shape)
        return rows + y, cols + x

    def _in_bounds(self, rows: NDArray[np.intp], cols: NDArray[np.intp]) -> NDArray[np.bool_]:
        return (rows >= 0) & (rows < self.height) & (cols >= 0) & (cols < self.width)

    def is_placement_valid(self, shape: Shape, x: int, y: int) -> bool:
        """Return ``True`` if ``shape`` anchored at column ``x``, row ``y`` fits.

        Every filled cell must land inside the board on an empty cell.  A shape
        with no filled cells always fits.
        """

        rows, cols = self._footprint(shape, x, y)
        if rows.size == 0:
            return True
        if not np.all(self._in_bounds(rows, cols)):
            return False
        return not np.any(self.grid[rows, cols])

    def stamp(self, shape: Shape, x: int, y: int) -> None:
        """Fill the board cells covered by ``shape`` at ``(x, y)``.

        Callers validate the placement first.

        Raises:
            IndexError: If any filled cell falls outside the board.
        """

        rows, cols = self._footprint(shape, x, y)
        if not np.all(self._in_bounds(rows, cols)):
            raise IndexError("Block out of bounds")
        self.grid[rows, cols] = FILLED

    def unstamp(self, shape: Shape, x: int, y: int) -> None:
        """Empty the board cells covered by ``shape`` at ``(x, y)``.

        Cells falling outside the board are skipped.
        """

        rows, cols = self._footprint(shape, x, y)
        inside = self._in_bounds(rows, cols)
        self.grid[rows[inside], cols[inside]] = EMPTY

    def compact_full_rows(self) -> int:
        """Remove completed rows and return how many were removed.

        Rows above each removed row shift down and empty rows are inserted at
        the top, so rows shifted into a cleared position are examined too.
        """

        full_rows = np.all(self.grid != EMPTY, axis=1)
        cleared = int(np.count_nonzero(full_rows))
        if cleared:
            remaining = self.grid[~full_rows]
            new_rows = np.zeros((cleared, self.width), dtype=self.grid.dtype)
            self.grid[:] = np.vstack((new_rows, remaining))
        return cleared

    def render(self) -> Snapshot:
        """Return a read-only, row-major snapshot of the cell states."""

        return tuple(tuple(bool(cell) for cell in row) for row in self.grid)
