# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from solver.puzzles import PUZZLES, parse_grid  # noqa: E402

EASY_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


@pytest.fixture
def puzzle1():
    return parse_grid(PUZZLES["puzzle1"])


@pytest.fixture
def easy():
    return parse_grid(PUZZLES["easy"])


@pytest.fixture
def easy_solution():
    return parse_grid(EASY_SOLUTION)


@pytest.fixture
def contradictory():
    # Row 1 reads 1..7 with r1c8 and r1c9 both forced to 8 (9 sits in both of their columns).
    grid = [1, 2, 3, 4, 5, 6, 7, 0, 0] + [0] * 72
    grid[34] = 9  # r4c8
    grid[62] = 9  # r7c9
    return grid
