"""Interactive sessions: assisted solving, where forced cells are filled automatically from the player's own entries, and play-throughs of a generated puzzle with read-only givens and counted hints."""

# session.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from types_sudoku import Cell, Conflict, Coord, Difficulty, Grid, Hint

from .backtracking import solve
from .constraints import conflict_cells, find_conflicts, is_complete
from .deduction import get_hint, propagate
from .generator import generate_puzzle
from .solver_core import clone_grid, count_filled, create_empty_grid, filled_cells, rc_to_key

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionStats:
    filled_cells: int
    user_cells: int
    deduced_cells: int
    conflict_cells: int


class SolverSession:
    """Holds the player's entries and the grid derived from them.

    `user_grid` contains only values the player (or a loaded puzzle) put in.
    `grid` and `deduced` are recomputed by `propagate` after every change,
    so a cleared entry never leaves stale deductions behind.
    """

    def __init__(self, initial: Optional[Grid] = None, *, auto_deduce: bool = True) -> None:
        self.auto_deduce = auto_deduce
        self.user_grid: Grid = create_empty_grid()
        self.grid: Grid = create_empty_grid()
        self.deduced: frozenset[Coord] = frozenset()
        if initial is not None:
            self.load(initial)

    def _recompute(self) -> None:
        if self.auto_deduce:
            self.grid, self.deduced = propagate(self.user_grid, filled_cells(self.user_grid))
        else:
            self.grid, self.deduced = clone_grid(self.user_grid), frozenset()

    @property
    def user_cells(self) -> set[Coord]:
        return filled_cells(self.user_grid)

    def load(self, grid: Grid) -> None:
        self.user_grid = clone_grid(grid)
        self._recompute()

    def clear(self) -> None:
        self.load(create_empty_grid())

    def set_cell(self, row: int, col: int, value: Cell) -> bool:
        """Record a player entry (None clears). Deduced cells are read-only."""
        if (row, col) in self.deduced:
            log.warning("refusing to edit deduced cell %s; clear the cells it depends on first", rc_to_key(row, col))
            return False
        self.user_grid[row][col] = value
        self._recompute()
        return True

    def clear_cell(self, row: int, col: int) -> bool:
        return self.set_cell(row, col, None)

    def solve(self) -> bool:
        """Solve the current grid completely; every cell then counts as entered."""
        solution = solve(self.grid)
        if solution is None:
            log.info("current grid cannot be solved")
            return False
        self.load(solution)
        return True

    def hint(self) -> Optional[Hint]:
        return get_hint(self.grid)

    def conflicts(self) -> list[Conflict]:
        return find_conflicts(self.grid)

    def is_complete(self) -> bool:
        return is_complete(self.grid)

    def stats(self) -> SessionStats:
        filled = count_filled(self.grid)
        return SessionStats(
            filled_cells=filled,
            user_cells=filled - len(self.deduced),
            deduced_cells=len(self.deduced),
            conflict_cells=len(conflict_cells(self.grid)),
        )


class GameSession:
    """A play-through of one generated puzzle.

    `initial_grid` is the snapshot of the givens and never changes; edits
    go to `current`. Givens are read-only, and once the grid is complete
    every further edit is refused. Hints are placed as moves and counted.
    `restart` goes back to the givens but keeps the hint count.
    """

    def __init__(self, puzzle: Grid, solution: Optional[Grid] = None, difficulty: Optional[Difficulty] = None) -> None:
        self.initial_grid: Grid = clone_grid(puzzle)
        self.current: Grid = clone_grid(puzzle)
        self.solution = clone_grid(solution) if solution is not None else None
        self.difficulty = difficulty
        self.hints_used = 0
        self.completed = is_complete(self.current)

    @classmethod
    def new(cls, difficulty: Difficulty, rng: Optional[random.Random] = None) -> "GameSession":
        puzzle, solution = generate_puzzle(difficulty, rng)
        log.info("new %s game with %d givens", difficulty, count_filled(puzzle))
        return cls(puzzle, solution, difficulty)

    def is_given(self, row: int, col: int) -> bool:
        return self.initial_grid[row][col] is not None

    def set_cell(self, row: int, col: int, value: Cell) -> bool:
        """Place or clear (None) a digit. Returns False when the edit is refused."""
        if self.completed:
            log.warning("game is already complete; ignoring edit at %s", rc_to_key(row, col))
            return False
        if self.is_given(row, col):
            log.warning("refusing to edit given cell %s", rc_to_key(row, col))
            return False
        self.current[row][col] = value
        if is_complete(self.current):
            self.completed = True
            log.info("game complete after %d hint(s)", self.hints_used)
        return True

    def clear_cell(self, row: int, col: int) -> bool:
        return self.set_cell(row, col, None)

    def apply_hint(self) -> Optional[Hint]:
        """Place the next hinted digit. A hint without a value is returned but not placed."""
        if self.completed:
            return None
        hint = get_hint(self.current)
        if hint is None or hint["value"] is None:
            return hint
        self.hints_used += 1
        self.set_cell(hint["row"], hint["col"], hint["value"])
        return hint

    def restart(self) -> None:
        self.current = clone_grid(self.initial_grid)
        self.completed = is_complete(self.current)

    def conflicts(self) -> list[Conflict]:
        return find_conflicts(self.current)

    def is_completed(self) -> bool:
        return self.completed

    def mistakes(self) -> list[Coord]:
        """Entered cells that disagree with the stored solution."""
        if self.solution is None:
            return []
        return [
            (r, c)
            for r, c in sorted(filled_cells(self.current))
            if not self.is_given(r, c) and self.current[r][c] != self.solution[r][c]
        ]
