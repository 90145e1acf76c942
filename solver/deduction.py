"""Naked-single deduction: hints for the player and fixed-point propagation for the auto-fill assistant."""

# deduction.py
from __future__ import annotations

from typing import Collection, Optional

from types_sudoku import Candidates, Coord, Grid, Hint, Move

from .constraints import is_valid_placement
from .solver_core import DIGITS, compute_candidates, create_empty_grid, empty_cells, key_to_rc, rc_to_key, which_box

ONLY_FIT_REASON = "This is the only number that fits in this cell."


def cell_candidates(grid: Grid, row: int, col: int) -> list[int]:
    return [d for d in DIGITS if is_valid_placement(grid, row, col, d)]


def find_naked_singles(grid: Grid, candidates: Optional[Candidates] = None) -> list[Move]:
    if candidates is None:
        candidates = compute_candidates(grid)
    moves: list[Move] = []
    for key, opts in candidates.items():
        if len(opts) == 1:
            r, c = key_to_rc(key)
            moves.append(
                {
                    "technique": "naked_single",
                    "type": "placement",
                    "cell": key,
                    "row": r,
                    "col": c,
                    "digit": opts[0],
                    "explanation": {
                        "why": f"Only one candidate fits {key}.",
                        "units": {"row": f"r{r + 1}", "col": f"c{c + 1}", "box": f"b{which_box(r, c) + 1}"},
                    },
                    "highlights": {"cells": [key]},
                }
            )
    return moves


def get_hint(grid: Grid) -> Optional[Hint]:
    """Suggest the easiest next cell.

    The first naked single in row-major order wins. Otherwise the cell with
    the fewest candidates is offered, ignoring cells where all nine digits
    still fit. If neither exists and some empty cell has no candidate at all,
    a 'no_candidates' hint points at it. None means there is nothing useful
    to say (full grid, or every empty cell is wide open).
    """
    best: Optional[Hint] = None
    dead: Optional[Coord] = None

    for r, c in empty_cells(grid):
        opts = cell_candidates(grid, r, c)
        if len(opts) == 1:
            return {
                "row": r,
                "col": c,
                "value": opts[0],
                "reason": ONLY_FIT_REASON,
                "technique": "naked_single",
                "candidates": opts,
            }
        if not opts:
            if dead is None:
                dead = (r, c)
            continue
        if len(opts) < len(DIGITS) and (best is None or len(opts) < len(best["candidates"])):
            best = {
                "row": r,
                "col": c,
                "value": opts[0],
                "reason": f"This cell has only {len(opts)} possibilities: {', '.join(map(str, opts))}.",
                "technique": "fewest_candidates",
                "candidates": opts,
            }

    if best is not None:
        return best
    if dead is not None:
        r, c = dead
        return {
            "row": r,
            "col": c,
            "value": None,
            "reason": f"No number fits {rc_to_key(r, c)}; the grid contains a contradiction.",
            "technique": "no_candidates",
            "candidates": [],
        }
    return None


def propagate(grid: Grid, user_cells: Collection[Coord]) -> tuple[Grid, frozenset[Coord]]:
    """Fill every naked single until none is left.

    Only the values at `user_cells` are trusted; any other filled value in
    `grid` is treated as an earlier deduction and recomputed from scratch.
    A user cell that is empty in `grid` stays empty. Returns the new grid
    and the coordinates that were deduced. Neither input is mutated.
    """
    user = set(user_cells)
    work = create_empty_grid()
    for r, c in user:
        work[r][c] = grid[r][c]

    deduced: set[Coord] = set()
    found = True
    while found:
        found = False
        # fills made earlier in a pass constrain the cells scanned after them
        for r, c in empty_cells(work):
            if (r, c) in user:
                continue
            opts = cell_candidates(work, r, c)
            if len(opts) == 1:
                work[r][c] = opts[0]
                deduced.add((r, c))
                found = True

    return work, frozenset(deduced)
