"""
Shared type definitions for the island labeling system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Terrain(Enum):
    """Binary terrain classification. The value is the serialization token."""

    LAND = "*"
    WATER = "~"


class Adjacency(Enum):
    """Neighbor scheme used by the raster scan."""

    FORWARD = "forward"  # NW, N, NE already visited; E pre-seeded
    FOUR = "four"  # N already visited; E pre-seeded
    EIGHT = "eight"  # All eight surrounding cells, unvisited ones pre-seeded


# =============================================================================
# Errors
# =============================================================================


class OutOfBoundsError(IndexError):
    """A coordinate outside the grid was requested where a cell is required."""


class InvalidSerializedInput(ValueError):
    """A terrain string does not describe a grid of the expected shape."""


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class CellPosition:
    """A position within a grid."""

    row: int
    col: int


@dataclass(eq=False)
class Cell:
    """
    One grid cell.

    `label` is the id of the ComponentLabel this cell currently points at,
    or None while unlabeled. Several cells share a component by sharing an id.
    """

    row: int
    col: int
    terrain: Terrain = Terrain.WATER
    label: int | None = None

    @property
    def is_land(self) -> bool:
        return self.terrain is Terrain.LAND

    @property
    def position(self) -> CellPosition:
        return CellPosition(self.row, self.col)


@dataclass(frozen=True)
class ComponentLabel:
    """A provisional connected component and its display attributes."""

    id: int
    color: str | None = None  # simple_chalk style name, e.g. "greenBright"
    emoji: str | None = None


@dataclass(frozen=True)
class ScanRules:
    """Rules governing a labeling scan."""

    adjacency: Adjacency = Adjacency.FORWARD
    canonicalize: bool = False  # Rewrite stale cell ids to their survivor after the scan
