"""Tests for sandfall.world.grid and sandfall.world.cell."""

import numpy as np
import pytest

from sandfall.world.cell import Cell
from sandfall.world.grid import Grid


class TestCell:
    """Tests for the Cell enum."""

    def test_values(self) -> None:
        assert Cell.EMPTY == 0
        assert Cell.SAND == 1

    def test_glyphs(self) -> None:
        assert Cell.EMPTY.glyph == " "
        assert Cell.SAND.glyph == "*"


class TestGrid:
    """Tests for the Grid model."""

    def test_dimensions(self, small_grid: Grid) -> None:
        assert small_grid.width == 8
        assert small_grid.height == 8
        assert small_grid.cells.shape == (8, 8)

    def test_starts_empty(self, small_grid: Grid) -> None:
        assert small_grid.sand_count() == 0
        assert np.all(small_grid.cells == Cell.EMPTY)

    def test_non_rectangular_indexing(self) -> None:
        grid = Grid(width=5, height=3)
        grid.set_cell(4, 2, Cell.SAND)
        assert grid.cells[2, 4] == Cell.SAND
        assert grid.cell_at(4, 2) is Cell.SAND

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0), (-1, 3)])
    def test_invalid_dimensions(self, width: int, height: int) -> None:
        with pytest.raises(ValueError):
            Grid(width=width, height=height)

    def test_cell_at_out_of_bounds(self, small_grid: Grid) -> None:
        with pytest.raises(IndexError):
            small_grid.cell_at(8, 0)
        with pytest.raises(IndexError):
            small_grid.cell_at(0, -1)

    def test_set_cell_out_of_bounds(self, small_grid: Grid) -> None:
        with pytest.raises(IndexError):
            small_grid.set_cell(0, 8, Cell.SAND)

    def test_paint_in_bounds(self, small_grid: Grid) -> None:
        assert small_grid.paint(3, 5) is True
        assert small_grid.cell_at(3, 5) is Cell.SAND

    @pytest.mark.parametrize(("col", "row"), [(-1, 0), (0, -1), (8, 0), (0, 8)])
    def test_paint_out_of_bounds_ignored(
        self,
        small_grid: Grid,
        col: int,
        row: int,
    ) -> None:
        before = small_grid.copy()
        assert small_grid.paint(col, row) is False
        assert small_grid == before

    def test_clear(self, small_grid: Grid) -> None:
        small_grid.paint(1, 1)
        small_grid.paint(2, 2)
        small_grid.clear()
        assert small_grid.sand_count() == 0
        assert small_grid.cells.shape == (8, 8)

    def test_copy_is_independent(self, small_grid: Grid) -> None:
        clone = small_grid.copy()
        clone.paint(0, 0)
        assert small_grid.sand_count() == 0
        assert clone.sand_count() == 1
        assert clone != small_grid

    def test_rows(self) -> None:
        grid = Grid(width=3, height=2)
        grid.paint(1, 0)
        assert list(grid.rows()) == [
            [Cell.EMPTY, Cell.SAND, Cell.EMPTY],
            [Cell.EMPTY, Cell.EMPTY, Cell.EMPTY],
        ]
