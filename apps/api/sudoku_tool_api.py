# sudoku_tool_api.py
# Optional FastAPI wrapper for the tool functions.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, field_validator

from solver.backtracking import SolverTimeout
from solver.generator import DIFFICULTIES, generate_puzzle
from solver.solver_core import normalize_grid
from solver.sudoku_tools import (
    compute_candidates_tool, find_conflicts, hint_tool, is_complete, is_valid, is_valid_move, propagate,
    sanity_check, solve,
)
from types_sudoku import Difficulty

log = logging.getLogger(__name__)

app = FastAPI(title="Sudoku Core Tool API")

GridRows = list[list[Optional[int]]]


class GridModel(BaseModel):
    grid: GridRows

    @field_validator("grid")
    @classmethod
    def _check_grid(cls, v):
        return normalize_grid(v)


class SolveRequest(GridModel):
    deadline_secs: Optional[float] = Field(default=None, gt=0)


class MoveCheckRequest(GridModel):
    row: int = Field(ge=0, le=8)
    col: int = Field(ge=0, le=8)
    value: int = Field(ge=1, le=9)


class PropagateRequest(GridModel):
    user_cells: list[tuple[int, int]]

    @field_validator("user_cells")
    @classmethod
    def _check_cells(cls, v):
        for r, c in v:
            if not (0 <= r <= 8 and 0 <= c <= 8):
                raise ValueError(f"coordinate out of range: {(r, c)}")
        return v


class GenerateRequest(BaseModel):
    difficulty: Difficulty = "medium"


class SanityRequest(BaseModel):
    original: GridRows
    current: GridRows

    @field_validator("original", "current")
    @classmethod
    def _check_grid(cls, v):
        return normalize_grid(v)


@app.get("/difficulties")
def api_difficulties():
    return {"difficulties": list(DIFFICULTIES)}


@app.post("/generate")
def api_generate(req: GenerateRequest):
    puzzle, solution = generate_puzzle(req.difficulty)
    return {"difficulty": req.difficulty, "puzzle": puzzle, "solution": solution}


@app.post("/solve")
def api_solve(req: SolveRequest):
    try:
        solution = solve(req.grid, deadline=req.deadline_secs)
    except SolverTimeout as exc:
        log.warning("solve timed out: %s", exc)
        raise HTTPException(status_code=408, detail=str(exc))
    return {"solution": solution}


@app.post("/hint")
def api_hint(payload: GridModel):
    return hint_tool(payload.grid)


@app.post("/propagate")
def api_propagate(req: PropagateRequest):
    grid, deduced = propagate(req.grid, [tuple(cell) for cell in req.user_cells])
    return {"grid": grid, "deduced": sorted(deduced)}


@app.post("/conflicts")
def api_conflicts(payload: GridModel):
    return {
        "conflicts": find_conflicts(payload.grid),
        "valid": is_valid(payload.grid),
        "complete": is_complete(payload.grid),
    }


@app.post("/is_valid_move")
def api_is_valid_move(req: MoveCheckRequest):
    return {"valid": is_valid_move(req.grid, req.row, req.col, req.value)}


@app.post("/sanity_check")
def api_sanity(req: SanityRequest):
    return sanity_check(req.original, req.current)


@app.post("/compute_candidates")
def api_cands(payload: GridModel):
    return compute_candidates_tool(payload.grid)
