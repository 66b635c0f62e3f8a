"""
Terrain string formats.

Provides two formats:
1. Token format: one token per cell ('*' land, '~' water) joined by ',' in
   row-major order. This is the only exchanged format; labels never cross it.
2. Concise format: one character per cell, rows separated by '|' or newlines.
"""

from __future__ import annotations

from island_types import InvalidSerializedInput, Terrain
from terrain_grid import Grid

__all__ = ["DELIMITER", "parse_terrain", "parse_terrain_concise", "serialize_terrain"]

DELIMITER = ","

CONCISE_CHARS: dict[str, Terrain] = {
    "*": Terrain.LAND,
    "#": Terrain.LAND,
    "~": Terrain.WATER,
    ".": Terrain.WATER,
}


def serialize_terrain(grid: Grid) -> str:
    """Encode the terrain of every cell, row-major, one token per cell."""
    return DELIMITER.join(cell.terrain.value for cell in grid)


def parse_terrain(text: str, rows: int, columns: int) -> Grid:
    """
    Decode a token string produced by serialize_terrain.

    Args:
        text: Tokens joined by DELIMITER
        rows: Number of rows of the encoded grid
        columns: Number of columns of the encoded grid

    Returns:
        A Grid with unlabeled cells in the same row-major order

    Raises:
        ValueError: If rows or columns is below 1
        InvalidSerializedInput: If the token count is not rows * columns, or a
            token is neither land nor water
    """
    if rows < 1 or columns < 1:
        raise ValueError(
            f"Invalid grid size {rows}x{columns}\n"
            f"  Both rows and columns must be at least 1"
        )

    tokens = text.split(DELIMITER)
    expected = rows * columns
    if len(tokens) != expected:
        raise InvalidSerializedInput(
            f"Token count mismatch for a {rows}x{columns} grid\n"
            f"  Expected: {expected} tokens\n"
            f"  Got: {len(tokens)} tokens"
        )

    terrain: list[Terrain] = []
    for index, token in enumerate(tokens):
        try:
            terrain.append(Terrain(token))
        except ValueError:
            row, col = divmod(index, columns)
            raise InvalidSerializedInput(
                f"Invalid terrain token: '{token}'\n"
                f"  Position: token {index} (row {row}, column {col})\n"
                f"  Valid tokens: '{Terrain.LAND.value}' (land), '{Terrain.WATER.value}' (water)"
            ) from None

    return Grid(rows, columns, terrain)


def parse_terrain_concise(definition: str) -> Grid:
    """
    Parse a grid from a concise single-character-per-cell layout.

    Format:
    - Rows separated by | or newlines; blank lines are ignored
    - Cell characters:
      * '*' or '#': Land
      * '~' or '.': Water
    - Short rows are padded with water to the longest row

    Example:
        "**~|~~*|~~*" -> 3x3 grid with land at (0,0), (0,1), (1,2), (2,2)

    Raises:
        InvalidSerializedInput: On an unknown character or an empty layout
    """
    row_strings = [
        row.strip()
        for line in definition.strip().split("\n")
        for row in line.split("|")
        if row.strip()
    ]
    if not row_strings:
        raise InvalidSerializedInput("Empty terrain definition")

    rows: list[list[Terrain]] = []
    for row_idx, row_str in enumerate(row_strings):
        row: list[Terrain] = []
        for col_idx, char in enumerate(row_str):
            if char not in CONCISE_CHARS:
                raise InvalidSerializedInput(
                    f"Invalid character '{char}'\n"
                    f"  Row {row_idx}: \"{row_str}\"\n"
                    f"  Position: column {col_idx}\n"
                    f"  Valid characters: '*' or '#' (land), '~' or '.' (water)"
                )
            row.append(CONCISE_CHARS[char])
        rows.append(row)

    # Pad rows to maximum length with water
    columns = max(len(row) for row in rows)
    for row in rows:
        row.extend([Terrain.WATER] * (columns - len(row)))

    return Grid(len(rows), columns, (terrain for row in rows for terrain in row))
