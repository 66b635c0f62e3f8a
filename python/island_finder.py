"""
Single-pass island counting over a terrain grid.

One row-major raster scan assigns labels to land cells, pre-seeds unvisited
neighbors and merges components as they meet. The island count is the number
of labels still alive in the registry when the scan ends.
"""

from __future__ import annotations

import logging
from typing import Callable

from island_types import Cell, CellPosition, ComponentLabel, ScanRules
from labels import LabelRegistry, LabelStyler
from neighbors import NeighborLocator
from terrain_grid import Grid

logger = logging.getLogger(__name__)

__all__ = ["IslandFinder", "OnChange"]

# Called inline whenever a cell's label is created or reassigned
OnChange = Callable[[Cell], None]


class IslandFinder:
    """
    Counts connected land components of a grid.

    Usage:
        finder = IslandFinder(grid, ScanRules(adjacency=Adjacency.EIGHT))
        count = finder.count(on_change=redraw)
        finder.networks  # alive id -> ComponentLabel

    Scanning a grid that still carries labels needs grid.reset() first.
    """

    def __init__(
        self,
        grid: Grid,
        rules: ScanRules | None = None,
        styler_factory: Callable[[], LabelStyler] = LabelStyler,
    ) -> None:
        self.grid = grid
        self.rules = rules if rules is not None else ScanRules()
        self.locator = NeighborLocator(self.rules.adjacency)
        self.styler_factory = styler_factory
        self.registry = LabelRegistry(styler_factory())

    def count(self, on_change: OnChange | None = None) -> int:
        """
        Scan the whole grid and return the number of islands.

        Args:
            on_change: Optional callback invoked with each cell whose label was
                created or reassigned, before the scan moves on

        Returns:
            Number of connected land components under the configured adjacency
        """
        self.registry = LabelRegistry(self.styler_factory())
        notify = on_change if on_change is not None else _ignore

        if self.grid.is_labeled():
            logger.warning("count: grid still carries labels from an earlier scan; call reset() first")

        for r in range(self.grid.rows):
            for c in range(self.grid.columns):
                self._visit(self.grid.cell_at(r, c), notify)

        if self.rules.canonicalize:
            self.relabel(on_change)

        logger.info(
            "count: %d islands on %dx%d grid (adjacency=%s, labels issued=%d)",
            len(self.registry),
            self.grid.rows,
            self.grid.columns,
            self.rules.adjacency.value,
            self.registry.counter,
        )
        return len(self.registry)

    def _visit(self, cell: Cell, notify: OnChange) -> None:
        if not cell.is_land:
            return

        registry = self.registry
        if cell.label is None:
            cell.label = registry.create().id
            notify(cell)

        for neighbor in self.locator.locate(self.grid, cell.row, cell.col):
            current = registry.find(cell.label)

            if neighbor.label is None:
                neighbor.label = current
                notify(neighbor)
                continue

            other = registry.find(neighbor.label)
            if other == current:
                continue

            survivor = registry.absorb(current, other)
            if other > current:
                neighbor.label = survivor
                notify(neighbor)
            else:
                cell.label = survivor
                notify(cell)

    # =========================================================================
    # Results
    # =========================================================================

    @property
    def networks(self) -> dict[int, ComponentLabel]:
        """Alive id -> label after the last scan."""
        return self.registry.labels()

    def label_of(self, cell: Cell) -> ComponentLabel | None:
        """Canonical label of a cell, following any merges since it was set."""
        return self.registry.resolve(cell.label)

    def components(self) -> dict[int, list[CellPosition]]:
        """Cell positions of each alive component, row-major within each."""
        result: dict[int, list[CellPosition]] = {label_id: [] for label_id in self.registry}
        for cell in self.grid:
            if cell.is_land and cell.label is not None:
                root = self.registry.find(cell.label)
                if root in result:
                    result[root].append(cell.position)
        return result

    def relabel(self, on_change: OnChange | None = None) -> int:
        """
        Point every land cell at its canonical id.

        Returns:
            Number of cells whose label changed
        """
        notify = on_change if on_change is not None else _ignore
        changed = 0
        for cell in self.grid:
            if not cell.is_land or cell.label is None:
                continue
            root = self.registry.find(cell.label)
            if root != cell.label:
                cell.label = root
                changed += 1
                notify(cell)
        logger.debug("relabel: %d stale cells rewritten", changed)
        return changed


def _ignore(cell: Cell) -> None:
    pass
