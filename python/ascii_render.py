"""
Text rendering of labeled terrain for debugging and the demo script.

Each cell is one character (or one emoji): labeled land shows its component,
unlabeled land and water show fixed markers.
"""

from __future__ import annotations

import logging
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from island_finder import IslandFinder
from island_types import Cell
from terrain_grid import Grid

logger = logging.getLogger(__name__)

__all__ = ["describe_networks", "render_grid"]

WATER_CHAR = "~"
LAND_CHAR = "#"
WATER_EMOJI = "🌀"
LAND_EMOJI = "🍺"


def _colorizer(color_name: str | None) -> Callable[[str], str]:
    if color_name is None:
        return lambda s: s
    return getattr(chalk, color_name, lambda s: s)


def render_cell(cell: Cell, finder: IslandFinder | None = None, use_emoji: bool = False, color: bool = True) -> str:
    """Render a single cell to its display string."""
    if not cell.is_land:
        return WATER_EMOJI if use_emoji else WATER_CHAR

    label = finder.label_of(cell) if finder is not None else None
    if label is None:
        return LAND_EMOJI if use_emoji else LAND_CHAR

    if use_emoji and label.emoji is not None:
        char = label.emoji
    else:
        # Last digit of the id keeps every cell one column wide
        char = str(label.id % 10)

    return _colorizer(label.color)(char) if color else char


def render_grid(grid: Grid, finder: IslandFinder | None = None, use_emoji: bool = False, color: bool = True) -> str:
    """
    Render a grid row by row.

    Args:
        grid: The grid to render
        finder: Finder whose registry resolves cell labels; without one every
            land cell renders as unlabeled
        use_emoji: Show label emojis instead of id digits
        color: Apply each label's simple_chalk color

    Returns:
        One line per grid row, joined by newlines
    """
    lines: list[str] = []
    for r in range(grid.rows):
        line_parts = [
            render_cell(grid.cell_at(r, c), finder, use_emoji, color)
            for c in range(grid.columns)
        ]
        lines.append("".join(line_parts))
    return "\n".join(lines)


def describe_networks(finder: IslandFinder) -> str:
    """List the alive components as '(id:emoji)' pairs, ascending by id."""
    return ",".join(
        f"({label_id}:{label.emoji if label.emoji is not None else '-'})"
        for label_id, label in finder.networks.items()
    )
