"""Grid — the fixed-size canvas the sand lives on.

The Grid owns a 2D NumPy array of ``Cell`` values indexed as
``cells[row, col]`` with row 0 at the top.  Its dimensions are fixed at
construction; every coordinate access is bounds-checked.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from sandfall.world.cell import Cell


@dataclass
class Grid:
    """A rectangular array of cells.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        cells: Cell values as a ``(height, width)`` uint8 array.
    """

    width: int
    height: int
    cells: NDArray[np.uint8] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Allocate an all-empty grid."""
        if self.width <= 0 or self.height <= 0:
            msg = f"grid dimensions must be positive, got {self.width}x{self.height}"
            raise ValueError(msg)
        self.cells = np.full((self.height, self.width), Cell.EMPTY, dtype=np.uint8)

    def in_bounds(self, col: int, row: int) -> bool:
        """Return True if ``(col, row)`` addresses a cell of this grid."""
        return 0 <= col < self.width and 0 <= row < self.height

    def _check(self, col: int, row: int) -> None:
        if not self.in_bounds(col, row):
            msg = f"({col}, {row}) out of bounds for {self.width}x{self.height}"
            raise IndexError(msg)

    def cell_at(self, col: int, row: int) -> Cell:
        """Return the cell at ``(col, row)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        self._check(col, row)
        return Cell(int(self.cells[row, col]))

    def set_cell(self, col: int, row: int, cell: Cell) -> None:
        """Overwrite the cell at ``(col, row)``.

        Raises:
            IndexError: If coordinates are out of bounds.
        """
        self._check(col, row)
        self.cells[row, col] = cell

    def paint(self, col: int, row: int) -> bool:
        """Drop a grain of sand at ``(col, row)``.

        Out-of-range positions are ignored.

        Returns:
            True if sand was written.
        """
        if not self.in_bounds(col, row):
            return False
        self.cells[row, col] = Cell.SAND
        return True

    def clear(self) -> None:
        """Empty every cell, keeping the dimensions."""
        self.cells.fill(Cell.EMPTY)

    def sand_count(self) -> int:
        """Number of cells currently holding sand."""
        return int(np.count_nonzero(self.cells == Cell.SAND))

    def rows(self) -> Iterator[list[Cell]]:
        """Yield each row, top to bottom, as a list of cells."""
        for row in self.cells:
            yield [Cell(int(v)) for v in row]

    def copy(self) -> Grid:
        """Return an independent snapshot of this grid."""
        clone = Grid(width=self.width, height=self.height)
        clone.cells[:] = self.cells
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.cells, other.cells)
        )
