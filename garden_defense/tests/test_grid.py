"""
Tests for the lawn grid.
"""
import pytest
from garden_defense.gameplay.grid import Grid
from garden_defense.gameplay.entities import Defender
from garden_defense.gameplay.definitions import DefenderKind, DEFENDER_TYPES
from garden_defense.gameplay.errors import InvalidCell, OccupiedCell, OutOfBounds


def make_defender(row, col, kind=DefenderKind.PEASHOOTER):
    return Defender(DEFENDER_TYPES[kind], row, col)


class TestGrid:
    """Tests for Grid class."""

    def test_create_grid(self):
        """Grid initializes with correct dimensions."""
        grid = Grid(5, 9)
        assert grid.rows == 5
        assert grid.cols == 9
        assert grid.occupied_count() == 0

    def test_in_bounds(self):
        """in_bounds correctly identifies valid coordinates."""
        grid = Grid(5, 9)

        assert grid.in_bounds(0, 0)
        assert grid.in_bounds(4, 8)

        assert not grid.in_bounds(-1, 0)
        assert not grid.in_bounds(0, -1)
        assert not grid.in_bounds(5, 0)
        assert not grid.in_bounds(0, 9)

    def test_can_place(self):
        """can_place is true only for empty in-bounds cells."""
        grid = Grid(5, 9)
        assert grid.can_place(2, 3)
        assert not grid.can_place(5, 3)

        grid.place_defender(make_defender(2, 3))
        assert not grid.can_place(2, 3)

    def test_place_defender(self):
        """Defenders land in the cell named by their row/col."""
        grid = Grid(5, 9)
        defender = make_defender(1, 4)

        grid.place_defender(defender)

        assert grid.get_defender(1, 4) is defender
        assert not grid.get_cell(1, 4).is_empty()

    def test_place_on_occupied_cell_raises(self):
        """A second defender can't share a cell; the first stays put."""
        grid = Grid(5, 9)
        first = make_defender(1, 4)
        grid.place_defender(first)

        with pytest.raises(OccupiedCell):
            grid.place_defender(make_defender(1, 4, DefenderKind.WALLNUT))

        assert grid.get_defender(1, 4) is first

    def test_place_out_of_bounds_raises(self):
        """Out-of-bounds placement is an InvalidCell."""
        grid = Grid(5, 9)
        with pytest.raises(OutOfBounds):
            grid.check_placeable(7, 0)
        with pytest.raises(InvalidCell):
            grid.place_defender(make_defender(0, 9))

    def test_remove_defender(self):
        """Removing returns the defender and empties the cell."""
        grid = Grid(5, 9)
        defender = make_defender(3, 3)
        grid.place_defender(defender)

        assert grid.remove_defender(3, 3) is defender
        assert grid.get_defender(3, 3) is None

    def test_remove_empty_is_noop(self):
        """Removing from an empty or missing cell does nothing."""
        grid = Grid(5, 9)
        assert grid.remove_defender(3, 3) is None
        assert grid.remove_defender(-1, 3) is None

    def test_iter_defenders_row_major(self):
        """Defenders iterate row by row, left to right."""
        grid = Grid(5, 9)
        d1 = make_defender(2, 1)
        d2 = make_defender(0, 5)
        d3 = make_defender(2, 0)
        for d in (d1, d2, d3):
            grid.place_defender(d)

        assert list(grid.iter_defenders()) == [d2, d3, d1]
