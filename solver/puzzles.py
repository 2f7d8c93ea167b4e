"""Named puzzle library plus parsing of grids from strings, flat lists, nested 9x9 lists and YAML files."""

# puzzles.py
# Grids may be written as 81-character strings ('0' or '.' = blank, whitespace ignored),
# flat lists of 81 ints, or 9 rows of 9 ints.
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import GridFormatError, UnknownPuzzleError

PuzzleLibrary = Mapping[str, Any]

PUZZLES: dict[str, str] = {
    # Sparse sample grid used throughout the unit tests.
    "puzzle1": """
        000006100
        430009000
        000000000
        008000020
        070010000
        000300009
        600000000
        000000054
        002507000
    """,
    "easy": """
        530070000
        600195000
        098000060
        800060003
        400803001
        700020006
        060000280
        000419005
        000080079
    """,
    "blank": "0" * 81,
    # Two 5s in the first row.
    "invalid": """
        530070005
        600195000
        098000060
        800060003
        400803001
        700020006
        060000280
        000419000
        000080079
    """,
}


def parse_grid(value: Any) -> list[int]:
    """Return a new flat 81-int grid, or raise GridFormatError."""
    if isinstance(value, str):
        chars = "".join(value.split())
        if len(chars) != 81:
            raise GridFormatError(f"expected 81 cells, got {len(chars)}")
        bad = sorted(set(chars) - set("0123456789."))
        if bad:
            raise GridFormatError(f"invalid characters in grid: {''.join(bad)!r}")
        return [0 if ch == "." else int(ch) for ch in chars]

    try:
        cells = list(value)
    except TypeError:
        raise GridFormatError(f"cannot read a grid from {type(value).__name__}") from None
    if len(cells) == 9 and all(isinstance(row, (list, tuple)) for row in cells):
        if any(len(row) != 9 for row in cells):
            raise GridFormatError("nested grid rows must have 9 cells each")
        cells = [v for row in cells for v in row]
    if len(cells) != 81:
        raise GridFormatError(f"expected 81 cells, got {len(cells)}")
    for i, v in enumerate(cells):
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 9:
            raise GridFormatError(f"cell {i} must be an int in 0..9, got {v!r}")
    return cells


def get_puzzle(name: str, library: PuzzleLibrary | None = None) -> list[int]:
    if library is None:
        library = PUZZLES
    if name not in library:
        raise UnknownPuzzleError(name, sorted(library))
    return parse_grid(library[name])


def load_puzzle_file(path: str | Path) -> dict[str, list[int]]:
    """Read a YAML mapping of puzzle name -> grid. Every grid is validated on load."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise GridFormatError(f"{path}: expected a mapping of puzzle names to grids")
    out = {}
    for name, grid in data.items():
        try:
            out[str(name)] = parse_grid(grid)
        except GridFormatError as e:
            raise GridFormatError(f"{path}: puzzle {name!r}: {e}") from e
    return out
