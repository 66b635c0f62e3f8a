"""
Random terrain generation.
"""

from __future__ import annotations

import logging
import random

from island_types import Terrain
from terrain_grid import Grid

logger = logging.getLogger(__name__)

__all__ = ["generate_terrain"]


def generate_terrain(rows: int, columns: int, coverage: float, seed: int | None = None) -> Grid:
    """
    Build a grid whose cells are land with probability `coverage`.

    Each cell is an independent draw from random.Random(seed), so the same
    seed reproduces the same terrain.

    Args:
        rows: Number of rows (at least 1)
        columns: Number of columns (at least 1)
        coverage: Land probability between 0.0 and 1.0 inclusive
        seed: Optional seed for reproducible terrain

    Returns:
        An unlabeled Grid
    """
    if not 0.0 <= coverage <= 1.0:
        raise ValueError(f"Coverage must be between 0.0 and 1.0, got {coverage}")

    rng = random.Random(seed)
    terrain = [
        Terrain.LAND if rng.random() < coverage else Terrain.WATER
        for _ in range(rows * columns)
    ]
    grid = Grid(rows, columns, terrain)

    logger.debug(
        "generate_terrain: %dx%d, coverage=%.2f, land=%d/%d",
        rows,
        columns,
        coverage,
        grid.land_count(),
        len(grid),
    )
    return grid
