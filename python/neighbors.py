"""
Neighbor lookup for the single-pass labeling scan.

The scan visits cells row-major, top to bottom and left to right. Each scheme
lists the offsets whose land cells take part in a visit. Offsets above the
current row were already visited and resolve merges; offsets to the right or
below are not visited yet and get pre-seeded with the current label. The
west neighbor is never checked: when it was visited it already seeded the
current cell through its own east offset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from island_types import Adjacency, Cell

if TYPE_CHECKING:
    from terrain_grid import Grid

__all__ = ["NeighborLocator", "OFFSETS"]


OFFSETS: dict[Adjacency, tuple[tuple[int, int], ...]] = {
    Adjacency.FORWARD: ((-1, -1), (-1, 0), (-1, 1), (0, 1)),
    Adjacency.FOUR: ((-1, 0), (0, 1)),
    Adjacency.EIGHT: (
        (-1, -1), (-1, 0), (-1, 1),
        (0, -1), (0, 1),
        (1, -1), (1, 0), (1, 1),
    ),
}


class NeighborLocator:
    """Yields the land neighbors of a cell under one adjacency scheme."""

    def __init__(self, adjacency: Adjacency = Adjacency.FORWARD) -> None:
        self.adjacency = adjacency
        self.offsets = OFFSETS[adjacency]

    def locate(self, grid: Grid, row: int, col: int) -> list[Cell]:
        """Return land cells at this scheme's offsets, skipping off-grid ones."""
        results: list[Cell] = []
        for dr, dc in self.offsets:
            neighbor = grid.get(row + dr, col + dc)
            if neighbor is not None and neighbor.is_land:
                results.append(neighbor)
        return results

    def __repr__(self) -> str:
        return f"NeighborLocator({self.adjacency.name})"
