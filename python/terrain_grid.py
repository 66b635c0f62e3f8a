"""
Fixed-size terrain grid with bounds-checked access.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import replace

from island_types import Adjacency, Cell, CellPosition, OutOfBoundsError, Terrain
from neighbors import NeighborLocator

__all__ = ["Grid"]


class Grid:
    """
    A rows x columns grid of cells stored row-major.

    Every in-range (row, col) maps to exactly one Cell. Lenient accessors
    return None out of range; `cell_at` raises instead.
    """

    def __init__(self, rows: int, columns: int, terrain: Iterable[Terrain] | None = None) -> None:
        if rows < 1 or columns < 1:
            raise ValueError(
                f"Invalid grid size {rows}x{columns}\n"
                f"  Both rows and columns must be at least 1"
            )
        self.rows = rows
        self.columns = columns

        if terrain is None:
            values = [Terrain.WATER] * (rows * columns)
        else:
            values = list(terrain)
            if len(values) != rows * columns:
                raise ValueError(
                    f"Terrain length mismatch for a {rows}x{columns} grid\n"
                    f"  Expected: {rows * columns} cells\n"
                    f"  Got: {len(values)}"
                )

        self._cells: list[Cell] = [
            Cell(i // columns, i % columns, value) for i, value in enumerate(values)
        ]

    # =========================================================================
    # Access
    # =========================================================================

    @property
    def max_row_index(self) -> int:
        return self.rows - 1

    @property
    def max_column_index(self) -> int:
        return self.columns - 1

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.columns

    def index_in_bounds(self, index: int) -> bool:
        return 0 <= index < self.rows * self.columns

    def get(self, row: int, col: int) -> Cell | None:
        """Return the cell at (row, col), or None if out of range."""
        if not self.in_bounds(row, col):
            return None
        return self._cells[row * self.columns + col]

    def get_index(self, index: int) -> Cell | None:
        """Return the cell at a row-major linear index, or None if out of range."""
        if not self.index_in_bounds(index):
            return None
        return self._cells[index]

    def cell_at(self, row: int, col: int) -> Cell:
        """Return the cell at (row, col); out of range is a contract violation."""
        cell = self.get(row, col)
        if cell is None:
            raise OutOfBoundsError(
                f"Cell ({row}, {col}) is outside the {self.rows}x{self.columns} grid"
            )
        return cell

    def set(self, row: int, col: int, cell: Cell) -> None:
        """Store a cell at (row, col). Out-of-range writes are ignored."""
        if cell is None:
            raise TypeError("Grid.set requires a Cell, got None")
        if self.in_bounds(row, col):
            self._cells[row * self.columns + col] = replace(cell, row=row, col=col)

    def set_index(self, index: int, cell: Cell) -> None:
        """Store a cell at a linear index. Out-of-range writes are ignored."""
        if cell is None:
            raise TypeError("Grid.set_index requires a Cell, got None")
        if self.index_in_bounds(index):
            row, col = divmod(index, self.columns)
            self._cells[index] = replace(cell, row=row, col=col)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def positions(self) -> Iterator[CellPosition]:
        for r in range(self.rows):
            for c in range(self.columns):
                yield CellPosition(r, c)

    def land_count(self) -> int:
        return sum(1 for cell in self._cells if cell.is_land)

    def is_labeled(self) -> bool:
        """True if any land cell still carries a label from an earlier scan."""
        return any(cell.label is not None for cell in self._cells if cell.is_land)

    # =========================================================================
    # Labeling support
    # =========================================================================

    def neighbors_of(self, row: int, col: int, adjacency: Adjacency = Adjacency.FORWARD) -> list[Cell]:
        return NeighborLocator(adjacency).locate(self, row, col)

    def reset(self) -> None:
        """Clear every land cell's label so the same terrain can be scanned again."""
        for cell in self._cells:
            if cell.is_land:
                cell.label = None

    # =========================================================================
    # Serialization
    # =========================================================================

    def serialize(self) -> str:
        from terrain_parser import serialize_terrain

        return serialize_terrain(self)

    @classmethod
    def deserialize(cls, rows: int, columns: int, text: str) -> Grid:
        from terrain_parser import parse_terrain

        return parse_terrain(text, rows, columns)

    def __repr__(self) -> str:
        return f"Grid({self.rows}x{self.columns}, land={self.land_count()})"
