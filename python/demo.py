#!/usr/bin/env python3
"""
Demo of island counting on named layouts and random terrain.

Usage:
    python demo.py              # random 12x24 terrain
    python demo.py <layout>     # one of LAYOUTS
    python demo.py random 7     # random terrain with seed 7
"""

import logging
import sys

from ascii_render import describe_networks, render_grid
from island_finder import IslandFinder
from island_types import Adjacency, Cell, ScanRules
from terrain_generator import generate_terrain
from terrain_grid import Grid
from terrain_parser import parse_terrain_concise

LAYOUTS = dict(
    pair="**~|~~*|~~*",
    ring="*****|*~~~*|*~*~*|*~~~*|*****",
    comb="*~*~*~*|*~*~*~*|*******",
    checker="*~*~|~*~*|*~*~|~*~*",
)


def show(grid: Grid, adjacency: Adjacency) -> None:
    """Scan a grid and print its count, labeled render and networks."""
    finder = IslandFinder(grid, ScanRules(adjacency=adjacency, canonicalize=True))
    changes: list[Cell] = []
    count = finder.count(on_change=changes.append)

    print(f"Adjacency: {adjacency.name}  Islands: {count}  Label changes: {len(changes)}")
    print(render_grid(grid, finder, use_emoji=True))
    print(describe_networks(finder))
    print()
    grid.reset()


def main(grid: Grid) -> None:
    print(render_grid(grid))
    print()
    for adjacency in Adjacency:
        show(grid, adjacency)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    name = sys.argv[1] if len(sys.argv) > 1 else "random"
    if name == "random":
        seed = int(sys.argv[2]) if len(sys.argv) > 2 else None
        main(generate_terrain(12, 24, coverage=0.45, seed=seed))
    else:
        main(parse_terrain_concise(LAYOUTS[name]))
