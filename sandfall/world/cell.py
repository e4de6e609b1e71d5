"""Cell states for the sand grid.

Cells carry no payload; the grid stores them as small integers in a
NumPy array, so the enum values double as the stored representation.
"""

from __future__ import annotations

from enum import IntEnum


class Cell(IntEnum):
    """Contents of one grid tile."""

    EMPTY = 0
    SAND = 1

    @property
    def glyph(self) -> str:
        """Character used to draw this cell in a terminal."""
        return "*" if self is Cell.SAND else " "
