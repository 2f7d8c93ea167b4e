# types_sudoku.py
from __future__ import annotations

from typing import Any, TypedDict

Grid = list[int]
"""A 9x9 Sudoku grid as a flat list of 81 integers in row-major order (0 = empty)."""

Candidates = list[list[int]]
"""81 sorted candidate lists, one per cell; empty for filled cells."""


class Move(TypedDict, total=False):
    """A single placement proposed by a deduction rule."""

    technique: str  # 'naked_single' or 'hidden_single'
    type: str  # always 'placement'
    index: int  # flat cell index 0..80
    cell: str  # 1-based cell key, e.g. 'r4c7'
    digit: int  # the digit being placed
    explanation: dict[str, Any]  # 'why' sentence plus the units involved
