"""Tests for terrain_grid module."""

import pytest

from island_types import Adjacency, Cell, OutOfBoundsError, Terrain
from terrain_grid import Grid
from terrain_parser import parse_terrain_concise


class TestGridConstruction:
    """Tests for creating grids."""

    def test_default_grid_is_water(self) -> None:
        """A grid without terrain starts as all water, unlabeled."""
        grid = Grid(2, 3)
        assert grid.rows == 2
        assert grid.columns == 3
        assert len(grid) == 6
        assert all(cell.terrain is Terrain.WATER for cell in grid)
        assert all(cell.label is None for cell in grid)

    def test_cells_know_their_position(self) -> None:
        """Row-major storage stamps each cell with its coordinates."""
        grid = Grid(2, 3)
        assert [(cell.row, cell.col) for cell in grid] == [
            (0, 0), (0, 1), (0, 2),
            (1, 0), (1, 1), (1, 2),
        ]

    def test_cells_are_distinct_objects(self) -> None:
        """Mutating one cell leaves the others alone."""
        grid = Grid(1, 2)
        grid.get(0, 0).label = 4
        assert grid.get(0, 1).label is None

    def test_degenerate_single_cell(self) -> None:
        grid = Grid(1, 1, [Terrain.LAND])
        assert grid.get(0, 0).is_land

    @pytest.mark.parametrize("rows,columns", [(0, 3), (3, 0), (-1, 2), (2, -5)])
    def test_invalid_dimensions_raise(self, rows: int, columns: int) -> None:
        with pytest.raises(ValueError, match="Invalid grid size"):
            Grid(rows, columns)

    def test_terrain_length_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="Expected: 4 cells"):
            Grid(2, 2, [Terrain.LAND] * 3)


class TestGridAccess:
    """Tests for bounds-checked access."""

    def test_get_in_range(self) -> None:
        grid = parse_terrain_concise("*~|~*")
        assert grid.get(0, 0).is_land
        assert not grid.get(0, 1).is_land
        assert grid.get(1, 1).is_land

    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (2, 0), (0, 2), (5, 5)])
    def test_get_out_of_range_returns_none(self, row: int, col: int) -> None:
        grid = Grid(2, 2)
        assert grid.get(row, col) is None

    def test_get_index(self) -> None:
        grid = parse_terrain_concise("~~~|~~*")
        assert grid.get_index(5).is_land
        assert grid.get_index(5) is grid.get(1, 2)
        assert grid.get_index(-1) is None
        assert grid.get_index(6) is None

    def test_cell_at_raises_out_of_range(self) -> None:
        """Strict access treats out-of-range as a contract violation."""
        grid = Grid(2, 2)
        with pytest.raises(OutOfBoundsError, match=r"\(2, 0\)"):
            grid.cell_at(2, 0)

    def test_out_of_bounds_is_an_index_error(self) -> None:
        grid = Grid(1, 1)
        with pytest.raises(IndexError):
            grid.cell_at(0, 1)

    def test_set_restamps_position(self) -> None:
        """A stored cell takes the coordinates of its slot."""
        grid = Grid(2, 2)
        grid.set(1, 0, Cell(9, 9, Terrain.LAND))
        cell = grid.get(1, 0)
        assert cell.is_land
        assert (cell.row, cell.col) == (1, 0)

    def test_set_out_of_range_is_ignored(self) -> None:
        grid = Grid(2, 2)
        grid.set(2, 2, Cell(0, 0, Terrain.LAND))
        grid.set(-1, 0, Cell(0, 0, Terrain.LAND))
        assert grid.land_count() == 0

    def test_set_index(self) -> None:
        grid = Grid(2, 3)
        grid.set_index(4, Cell(0, 0, Terrain.LAND))
        grid.set_index(6, Cell(0, 0, Terrain.LAND))
        assert grid.get(1, 1).is_land
        assert grid.land_count() == 1

    def test_set_none_raises(self) -> None:
        grid = Grid(1, 1)
        with pytest.raises(TypeError):
            grid.set(0, 0, None)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            grid.set_index(0, None)  # type: ignore[arg-type]

    def test_positions_are_row_major(self) -> None:
        grid = Grid(2, 2)
        assert [(p.row, p.col) for p in grid.positions()] == [(0, 0), (0, 1), (1, 0), (1, 1)]


class TestGridReset:
    """Tests for clearing labels between scans."""

    def test_reset_clears_land_labels(self) -> None:
        grid = parse_terrain_concise("**|~*")
        for cell in grid:
            if cell.is_land:
                cell.label = 1
        assert grid.is_labeled()

        grid.reset()

        assert not grid.is_labeled()
        assert all(cell.label is None for cell in grid if cell.is_land)

    def test_reset_leaves_water_untouched(self) -> None:
        grid = parse_terrain_concise("*~")
        grid.get(0, 1).label = 7
        grid.reset()
        assert grid.get(0, 1).label == 7

    def test_reset_keeps_terrain(self) -> None:
        grid = parse_terrain_concise("*~*|~*~")
        before = grid.serialize()
        grid.reset()
        assert grid.serialize() == before


class TestGridNeighbors:
    """Tests for the neighbor delegation."""

    def test_neighbors_of_uses_scheme(self) -> None:
        grid = parse_terrain_concise("***|***|***")
        forward = grid.neighbors_of(1, 1, Adjacency.FORWARD)
        eight = grid.neighbors_of(1, 1, Adjacency.EIGHT)
        assert len(forward) == 4
        assert len(eight) == 8

    def test_neighbors_of_defaults_to_forward(self) -> None:
        grid = parse_terrain_concise("***|***")
        assert [(n.row, n.col) for n in grid.neighbors_of(1, 1)] == [(0, 0), (0, 1), (0, 2), (1, 2)]


class TestGridSerialization:
    """Tests for the Grid serialize/deserialize entry points."""

    def test_serialize_row_major(self) -> None:
        grid = parse_terrain_concise("**~|~~*|~~*")
        assert grid.serialize() == "*,*,~,~,~,*,~,~,*"

    def test_serialize_ignores_labels(self) -> None:
        grid = parse_terrain_concise("*~")
        grid.get(0, 0).label = 3
        assert grid.serialize() == "*,~"

    def test_round_trip(self) -> None:
        grid = parse_terrain_concise("*~~*|~**~|*~*~")
        restored = Grid.deserialize(grid.rows, grid.columns, grid.serialize())
        assert restored.rows == 3
        assert restored.columns == 4
        assert [c.terrain for c in restored] == [c.terrain for c in grid]
        assert all(c.label is None for c in restored)

    def test_round_trip_single_cell(self) -> None:
        grid = Grid(1, 1, [Terrain.LAND])
        restored = Grid.deserialize(1, 1, grid.serialize())
        assert restored.get(0, 0).is_land
