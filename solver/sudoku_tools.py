"""Public functional API of the Sudoku core, plus tool-friendly wrappers that return plain dicts for the API and CLI layers."""

# sudoku_tools.py
from __future__ import annotations

from typing import Collection, Optional

from types_sudoku import Coord, Grid, Hint, Move, Puzzle

from . import backtracking, constraints, deduction, generator
from .solver_core import (
    InvalidGridError, clone_grid, compute_candidates, create_empty_grid, key_to_rc, normalize_grid, rc_to_key,
)

__all__ = [
    "InvalidGridError",
    "apply_move",
    "compute_candidates_tool",
    "copy_grid",
    "create_empty_grid",
    "find_conflicts",
    "generate_puzzle",
    "get_hint",
    "hint_tool",
    "is_complete",
    "is_valid",
    "is_valid_move",
    "propagate",
    "sanity_check",
    "solve",
]

copy_grid = clone_grid
is_valid_move = constraints.is_valid_placement
is_complete = constraints.is_complete
is_valid = constraints.is_grid_valid
find_conflicts = constraints.find_conflicts
get_hint = deduction.get_hint


def solve(grid: Grid, deadline: Optional[float] = None) -> Optional[Grid]:
    return backtracking.solve(grid, deadline=deadline)


def generate_puzzle(difficulty: str) -> Puzzle:
    return generator.generate_puzzle(difficulty)


def propagate(grid: Grid, user_cells: Collection[Coord]) -> tuple[Grid, frozenset[Coord]]:
    return deduction.propagate(grid, user_cells)


def sanity_check(original: Grid, current: Grid) -> dict:
    """Report givens that were overwritten and every duplicated value."""
    original = normalize_grid(original)
    current = normalize_grid(current)
    issues = []
    for r in range(9):
        for c in range(9):
            given = original[r][c]
            if given is not None and current[r][c] not in (None, given):
                issues.append({"type": "given_overwritten", "cell": rc_to_key(r, c),
                               "given": given, "found": current[r][c]})
    for conflict in constraints.find_conflicts(current):
        unit = {"row": "r", "column": "c", "box": "b"}[conflict["type"]] + str(conflict["index"] + 1)
        issues.append({"type": "duplicate", "unit": unit, "digits": [conflict["value"]],
                       "cells": [rc_to_key(r, c) for r, c in conflict["cells"]]})
    return {"ok": len(issues) == 0, "issues": issues}


def compute_candidates_tool(current: Grid) -> dict:
    """Compute candidate digits for each empty cell. Returns a dict like {'candidates': {'r1c2': [1, 2, 5], ...}}."""
    return {"candidates": compute_candidates(normalize_grid(current))}


def hint_tool(current: Grid) -> dict:
    hint: Optional[Hint] = deduction.get_hint(normalize_grid(current))
    if hint is not None:
        hint = dict(hint, cell=rc_to_key(hint["row"], hint["col"]))
    return {"hint": hint}


def apply_move(current: Grid, move: Move) -> dict:
    """Placement only; returns the new grid and its candidates."""
    g2 = normalize_grid(current)
    if "cell" in move:
        r, c = key_to_rc(move["cell"])
    else:
        r, c = move["row"], move["col"]
    g2[r][c] = move["digit"]
    return {"current": g2, "candidates": compute_candidates(g2)}
