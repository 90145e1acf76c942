"""Plain exhaustive backtracking over empty cells (row-major, digits ascending), driven by an explicit frame stack instead of recursion."""

# backtracking.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from itertools import islice
from typing import Iterator, Optional

from types_sudoku import Grid

from .constraints import is_grid_valid, is_valid_placement
from .solver_core import clone_grid, empty_cells

log = logging.getLogger(__name__)

# how many search steps run between two deadline checks
_CHECK_EVERY = 1024


class SolverTimeout(RuntimeError):
    """Raised when a search runs past the caller's deadline."""


@dataclass
class SolveStats:
    assignments: int = 0
    backtracks: int = 0
    elapsed: float = 0.0


def iter_solutions(
    grid: Grid,
    *,
    deadline: Optional[float] = None,
    stats: Optional[SolveStats] = None,
) -> Iterator[Grid]:
    """Yield every completion of `grid` in search order.

    The input is never mutated; each yielded grid is an independent copy.
    A grid that already breaks a constraint yields nothing. `deadline` is a
    budget in seconds measured from the first step.
    """
    if stats is None:
        stats = SolveStats()
    if not is_grid_valid(grid):
        return

    work = clone_grid(grid)
    # Filling cells strictly in order means the next empty cell in row-major
    # scan is always empties[len(frames)].
    empties = empty_cells(work)
    frames: list[tuple[int, int, int]] = []  # (row, col, placed value)
    start_value = 1
    t0 = time.perf_counter()
    steps = 0

    while True:
        steps += 1
        if deadline is not None and steps % _CHECK_EVERY == 0:
            if time.perf_counter() - t0 > deadline:
                stats.elapsed = time.perf_counter() - t0
                raise SolverTimeout(f"search exceeded {deadline:.3f}s after {stats.assignments} assignments")

        if len(frames) == len(empties):
            stats.elapsed = time.perf_counter() - t0
            yield clone_grid(work)
            if not frames:
                return
            # resume: treat the found solution as a dead end and keep searching
            row, col, last = frames.pop()
            work[row][col] = None
            start_value = last + 1
            continue

        row, col = empties[len(frames)]
        for value in range(start_value, 10):
            if is_valid_placement(work, row, col, value):
                work[row][col] = value
                frames.append((row, col, value))
                stats.assignments += 1
                start_value = 1
                break
        else:
            if not frames:
                stats.elapsed = time.perf_counter() - t0
                return
            row, col, last = frames.pop()
            work[row][col] = None
            stats.backtracks += 1
            start_value = last + 1


def solve(
    grid: Grid,
    *,
    deadline: Optional[float] = None,
    stats: Optional[SolveStats] = None,
) -> Optional[Grid]:
    """Return the first solution of `grid`, or None if none exists."""
    if stats is None:
        stats = SolveStats()
    solution = next(iter_solutions(grid, deadline=deadline, stats=stats), None)
    log.debug(
        "solve: %s (assignments=%d, backtracks=%d, %.4fs)",
        "solved" if solution is not None else "no solution",
        stats.assignments, stats.backtracks, stats.elapsed,
    )
    return solution


def count_solutions(grid: Grid, limit: int = 2, *, deadline: Optional[float] = None) -> int:
    """Count solutions, stopping once `limit` have been found."""
    return sum(1 for _ in islice(iter_solutions(grid, deadline=deadline), limit))


def has_unique_solution(grid: Grid, *, deadline: Optional[float] = None) -> bool:
    return count_solutions(grid, limit=2, deadline=deadline) == 1
