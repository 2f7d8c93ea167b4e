"""Command-line entry point: look up a named puzzle, run the propagation solver, print the outcome and the final grid (or a JSON report)."""

# solve_cli.py
# Usage:
#   sudoku-solve easy
#   sudoku-solve puzzle1 --verbose
#   sudoku-solve mine --puzzles my_puzzles.yaml --json --image out.png
#   python -m apps.cli.solve_cli easy --config solve.yaml
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Mapping, Optional, Sequence

import yaml

from solver.errors import UnknownPuzzleError
from solver.puzzles import PUZZLES, get_puzzle, load_puzzle_file
from solver.sudoku_tools import compute_candidates_tool, solve
from .config import build_config
from .grid_renderer import print_grid, render_png


def usage(known: Sequence[str]) -> str:
    names = "".join(f"\n  * {name}" for name in known)
    return f"Usage: sudoku-solve <puzzlename>\n Valid puzzlenames are:{names}"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="sudoku-solve", description="Solve a named Sudoku with naked and hidden singles.")
    ap.add_argument("puzzle", nargs="?", help="Puzzle name from the library")
    ap.add_argument("--config", type=str, default=None, help="YAML config file")
    ap.add_argument("--puzzles", type=str, default=None, help="Extra YAML puzzle library (name: grid)")
    ap.add_argument("--image", type=str, default=None, help="Also save the final board as an image")
    ap.add_argument("--empty", type=str, default=None, help="Character shown for empty cells")
    ap.add_argument("--json", action="store_true", default=None, help="Print a JSON report instead of the grid")
    ap.add_argument("--verbose", "-v", action="store_true", default=None, help="Debug logging for every pass")
    return ap


def main(argv: Optional[Sequence[str]] = None, library: Optional[Mapping[str, object]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = build_config(
            args.config,
            puzzles_file=args.puzzles,
            image_out=args.image,
            render_empty=args.empty,
            json=args.json,
            verbose=args.verbose,
        )
        puzzles = dict(PUZZLES if library is None else library)
        if cfg.puzzles_file:
            puzzles.update(load_puzzle_file(cfg.puzzles_file))
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.DEBUG if cfg.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if args.puzzle is None:
        print(usage(list(puzzles)), file=sys.stderr)
        return 2
    try:
        grid = get_puzzle(args.puzzle, puzzles)
    except UnknownPuzzleError as e:
        print(f"[error] {e}", file=sys.stderr)
        print(usage(list(puzzles)), file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"[error] puzzle {args.puzzle!r}: {e}", file=sys.stderr)
        return 2

    result = solve(grid)

    if cfg.image_out:
        render_png(result.grid, cfg.image_out, givens=grid)
        print(f"[ok] wrote {cfg.image_out}", file=sys.stderr)

    if cfg.json:
        cands = compute_candidates_tool(result.grid)["candidates"]
        payload = {
            "puzzle": args.puzzle,
            "status": result.status.value,
            "message": result.message,
            "passes": result.passes,
            "moves": result.moves,
            "grid": result.grid,
            "candidates_count": sum(len(c) for c in cands),
        }
        print(json.dumps(payload, indent=2))
    else:
        print(result.message)
        print_grid(result.grid, empty=cfg.render_empty)

    return 0 if result.solved else 1


if __name__ == "__main__":
    sys.exit(main())
