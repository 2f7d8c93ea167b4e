from __future__ import annotations

"""Grid validation and the propagation loop: repeat candidates -> naked singles -> hidden singles until the grid is full, stuck or contradictory. Also provides tool-friendly wrappers for the CLI and API."""


# sudoku_tools.py
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from types_sudoku import Candidates, Grid, Move

from .puzzles import parse_grid
from .solver_core import (
    DIGITS,
    all_groups,
    apply_moves,
    compute_candidates,
    find_hidden_singles,
    find_naked_singles,
)

log = logging.getLogger(__name__)

UNIT_PREFIXES = ("r", "c", "b")


def duplicates_in_unit(vals) -> set:
    seen = set()
    dups = set()
    for v in vals:
        if v == 0:
            continue
        if v in seen:
            dups.add(v)
        seen.add(v)
    return dups


def find_conflicts(grid: Grid) -> List[Dict]:
    """List every row/column/box holding a repeated non-zero digit, e.g. {'unit': 'r1', 'digits': [5]}."""
    issues = []
    for n, group in enumerate(all_groups(grid)):
        dups = duplicates_in_unit(group)
        if dups:
            unit = f"{UNIT_PREFIXES[n // 9]}{n % 9 + 1}"
            issues.append({"type": "duplicate", "unit": unit, "digits": sorted(dups)})
    return issues


def check_partial_result(grid: Grid) -> bool:
    return not find_conflicts(grid)


def check_result(grid: Grid) -> bool:
    """True when all 27 groups contain every digit 1..9."""
    return all(set(group) == set(DIGITS) for group in all_groups(grid))


def sanity_check(current: Grid, original: Optional[Grid] = None) -> Dict:
    issues = []
    if original is not None:
        for i, given in enumerate(original):
            if given != 0 and current[i] not in (0, given):
                issues.append(
                    {"type": "given_overwritten", "cell": f"r{i // 9 + 1}c{i % 9 + 1}", "given": given, "found": current[i]}
                )
    issues.extend(find_conflicts(current))
    return {"ok": len(issues) == 0, "issues": issues}


def compute_candidates_tool(current: Grid) -> Dict:
    """Compute candidate digits for each cell of the current grid. Returns {'candidates': [[...], ...]} with 81 lists."""
    return {"candidates": compute_candidates(current)}


class SolveStatus(str, Enum):
    SOLVED = "solved"
    STUCK = "stuck"
    INVALID = "invalid"
    INCONSISTENT = "inconsistent"
    RESULT_MISMATCH = "result_mismatch"


MESSAGES = {
    SolveStatus.SOLVED: "Puzzle solved!",
    SolveStatus.STUCK: "Puzzle not solved :(",
    SolveStatus.INVALID: "Invalid puzzle, no feasible solution",
    SolveStatus.INCONSISTENT: "Puzzle invalidated",
    SolveStatus.RESULT_MISMATCH: "Result invalid :(",
}


@dataclass
class SolveResult:
    status: SolveStatus
    grid: Grid
    passes: int = 0
    moves: List[Move] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def message(self) -> str:
        return MESSAGES[self.status]


def _append_unique(moves: List[Move], new_moves: List[Move]) -> None:
    seen = set((m["index"], m["digit"]) for m in moves)
    for m in new_moves:
        key = (m["index"], m["digit"])
        if key not in seen:
            moves.append(m)
            seen.add(key)


def conflicting_placements(moves: List[Move]) -> Dict[int, List[int]]:
    """Cells that were proposed more than one distinct digit, mapped to those digits."""
    digits: Dict[int, set] = {}
    for m in moves:
        digits.setdefault(m["index"], set()).add(m["digit"])
    return {i: sorted(ds) for i, ds in digits.items() if len(ds) > 1}


def propagate_once(grid: Grid) -> tuple[Grid, List[Move], Candidates]:
    """One propagation pass. Both rules read the candidates computed at the start of the pass.

    Returns (new grid, moves applied in order, the pass-start candidates). Each (cell, digit)
    placement appears once. The input grid is not modified.
    """
    candidates = compute_candidates(grid)
    naked = find_naked_singles(grid, candidates)
    grid = apply_moves(grid, naked)
    hidden = find_hidden_singles(grid, candidates)
    grid = apply_moves(grid, hidden)
    log.debug("pass: %d naked single(s), %d hidden single(s)", len(naked), len(hidden))
    moves: List[Move] = []
    _append_unique(moves, naked)
    _append_unique(moves, hidden)
    return grid, moves, candidates


def solve(puzzle: Sequence[int] | str) -> SolveResult:
    """Fill the puzzle using naked and hidden singles only.

    The caller's sequence is never modified; the returned result carries its own grid.
    Raises GridFormatError for input that is not 81 digits; every other outcome is a SolveStatus.
    """
    grid = parse_grid(puzzle)

    if not check_partial_result(grid):
        log.info("initial grid has duplicates: %s", find_conflicts(grid))
        return SolveResult(SolveStatus.INVALID, grid)

    passes = 0
    history: List[Move] = []
    while 0 in grid:
        grid, moves, _ = propagate_once(grid)
        passes += 1
        if not moves:
            log.info("stuck after %d pass(es) with %d empty cell(s)", passes, grid.count(0))
            return SolveResult(SolveStatus.STUCK, grid, passes, history)
        history.extend(m for m in moves if grid[m["index"]] == m["digit"])
        clashes = conflicting_placements(moves)
        if clashes:
            log.info("pass %d proposed several digits for one cell: %s", passes, clashes)
            return SolveResult(SolveStatus.INCONSISTENT, grid, passes, history)
        if not check_partial_result(grid):
            log.info("pass %d produced duplicates: %s", passes, find_conflicts(grid))
            return SolveResult(SolveStatus.INCONSISTENT, grid, passes, history)

    if not check_result(grid):
        log.warning("grid is full but fails the full check after %d pass(es)", passes)
        return SolveResult(SolveStatus.RESULT_MISMATCH, grid, passes, history)
    log.info("solved in %d pass(es)", passes)
    return SolveResult(SolveStatus.SOLVED, grid, passes, history)
