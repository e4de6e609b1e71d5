"""Gravity rule for sand grains.

Operates in place on the raw NumPy array inside a ``Grid``.  Kept apart
from the engine so the rule can be tested on bare grids.
"""

from __future__ import annotations

from sandfall.world.cell import Cell
from sandfall.world.grid import Grid

_EMPTY = Cell.EMPTY
_SAND = Cell.SAND


def sand_fall(grid: Grid) -> int:
    """Apply one tick of gravity to every grain on the grid.

    Rows are swept from the second-to-last up to the top, columns left
    to right.  Each grain tries, in order, the cell straight below, the
    cell below-left and the cell below-right, and takes the first empty
    one.  Destinations are always in a row that has already been swept,
    so no grain moves more than one row per call.

    The below-left move requires ``col > 1``: a grain in column 1 never
    slides into column 0.

    Args:
        grid: The grid to update in place.

    Returns:
        Number of grains that moved.
    """
    cells = grid.cells
    width = grid.width
    moved = 0

    for y in range(grid.height - 2, -1, -1):
        row, below = cells[y], cells[y + 1]
        for x in range(width):
            if row[x] != _SAND:
                continue

            if below[x] == _EMPTY:
                target = x
            elif x > 1 and below[x - 1] == _EMPTY:
                target = x - 1
            elif x + 1 < width and below[x + 1] == _EMPTY:
                target = x + 1
            else:
                continue

            row[x] = _EMPTY
            below[target] = _SAND
            moved += 1

    return moved
