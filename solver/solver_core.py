"""Core Sudoku utilities: flat index math, group extraction, candidate computation and the two single-placement rules."""

# solver_core.py
# Human-style Sudoku utilities over a flat 81-cell grid:
# - index <-> (row, col, box) mapping and inverses
# - rows / columns / boxes of any 81-element sequence
# - candidate computation
# - naked singles & hidden singles (placements)
# Grid is a flat list of 81 ints (0..9). 0 = blank.

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from types_sudoku import Candidates, Grid, Move

T = TypeVar("T")

DIGITS = range(1, 10)
SIZE = 81


# --- index math -------------------------------------------------------------


def row_of(i: int) -> int:
    return i // 9


def col_of(i: int) -> int:
    return i % 9


def box_of(i: int) -> int:
    return (i // 3) % 3 + (i // 27) * 3


def position_in_row(i: int) -> int:
    return i % 9


def position_in_col(i: int) -> int:
    return i // 9


def position_in_box(i: int) -> int:
    return i % 3 + (i // 9 % 3) * 3


def index_from_row(row_number: int, position: int) -> int:
    return row_number * 9 + position


def index_from_col(col_number: int, position: int) -> int:
    return position * 9 + col_number


def index_from_box(box_number: int, position: int) -> int:
    """Flat index of the `position`-th cell (left->right, top->bottom) of box `box_number`."""
    return position % 3 + (position // 3) * 9 + (box_number % 3) * 3 + (box_number // 3) * 27


def rc_to_key(i: int) -> str:
    """1-based cell key for a flat index, e.g. 0 -> 'r1c1'."""
    return f"r{row_of(i) + 1}c{col_of(i) + 1}"


# --- groups -----------------------------------------------------------------


def rows(seq: Sequence[T]) -> list[list[T]]:
    return [list(seq[r * 9 : r * 9 + 9]) for r in range(9)]


def columns(seq: Sequence[T]) -> list[list[T]]:
    return [[seq[c + r * 9] for r in range(9)] for c in range(9)]


def boxes(seq: Sequence[T]) -> list[list[T]]:
    out = []
    for b in range(9):
        start = (b % 3) * 3 + (b // 3) * 27
        box: list[T] = []
        for r in range(3):
            box.extend(seq[start + r * 9 : start + r * 9 + 3])
        out.append(box)
    return out


def all_groups(seq: Sequence[T]) -> list[list[T]]:
    """All 27 groups: rows, then columns, then boxes."""
    return rows(seq) + columns(seq) + boxes(seq)


# (family name, group extractor, inverse index mapping)
FAMILIES: list[tuple[str, Callable[[Sequence], list[list]], Callable[[int, int], int]]] = [
    ("row", rows, index_from_row),
    ("column", columns, index_from_col),
    ("box", boxes, index_from_box),
]


# --- candidates & rules -----------------------------------------------------


def compute_candidates(grid: Grid) -> Candidates:
    row_groups = rows(grid)
    col_groups = columns(grid)
    box_groups = boxes(grid)
    cand: Candidates = []
    for i, v in enumerate(grid):
        if v != 0:
            cand.append([])
            continue
        used = set(row_groups[row_of(i)]) | set(col_groups[col_of(i)]) | set(box_groups[box_of(i)])
        cand.append([d for d in DIGITS if d not in used])
    return cand


def _placement(technique: str, i: int, digit: int, why: str, units: dict[str, str]) -> Move:
    return {
        "technique": technique,
        "type": "placement",
        "index": i,
        "cell": rc_to_key(i),
        "digit": digit,
        "explanation": {"why": why, "units": units},
    }


def find_naked_singles(grid: Grid, candidates: Candidates) -> list[Move]:
    moves = []
    for i, opts in enumerate(candidates):
        if grid[i] == 0 and len(opts) == 1:
            moves.append(
                _placement(
                    "naked_single",
                    i,
                    opts[0],
                    f"Only one candidate fits {rc_to_key(i)}.",
                    {"row": f"r{row_of(i) + 1}", "col": f"c{col_of(i) + 1}", "box": f"b{box_of(i) + 1}"},
                )
            )
    return moves


def find_hidden_singles(grid: Grid, candidates: Candidates) -> list[Move]:
    """For every row, column and box, place each digit that has exactly one candidate cell left.

    `candidates` is used as given, even if `grid` has been updated since it was computed.
    A cell can be proposed more than once when the same digit is hidden in several of its groups.
    """
    moves = []
    for family, groups_of, index_from in FAMILIES:
        for g, group in enumerate(groups_of(candidates)):
            for d in DIGITS:
                positions = [p for p, opts in enumerate(group) if d in opts]
                if len(positions) != 1:
                    continue
                i = index_from(g, positions[0])
                moves.append(
                    _placement(
                        "hidden_single",
                        i,
                        d,
                        f"Digit {d} appears in only one cell in {family} {g + 1}.",
                        {family: f"{family[0]}{g + 1}"},
                    )
                )
    return moves


def apply_moves(grid: Grid, moves: list[Move]) -> Grid:
    """Placements only; returns a new grid with every move's digit placed."""
    g2 = list(grid)
    for m in moves:
        g2[m["index"]] = m["digit"]
    return g2
