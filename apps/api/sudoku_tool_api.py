# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import List, Optional

from solver.errors import GridFormatError
from solver.puzzles import parse_grid
from solver.sudoku_tools import compute_candidates_tool, sanity_check, solve

app = FastAPI(title="Sudoku Propagation Solver API")


class GridModel(BaseModel):
    grid: List[int]


class SanityRequest(BaseModel):
    grid: List[int]
    original: Optional[List[int]] = None


def _grid_or_422(values):
    try:
        return parse_grid(values)
    except GridFormatError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(_grid_or_422(payload.grid))


@app.post("/sanity_check")
def api_sanity(payload: SanityRequest):
    original = _grid_or_422(payload.original) if payload.original is not None else None
    return sanity_check(_grid_or_422(payload.grid), original)


@app.post("/solve")
def api_solve(payload: GridModel):
    result = solve(_grid_or_422(payload.grid))
    return {
        "status": result.status.value,
        "message": result.message,
        "solved": result.solved,
        "passes": result.passes,
        "grid": result.grid,
        "moves": result.moves,
    }
