"""Puzzle generation: build a full solution with the backtracking solver, then blank a difficulty-determined number of cells.

Difficulty is only a clue-count proxy. Blanked puzzles are not checked for a
unique solution; use backtracking.has_unique_solution if that matters.
"""

# generator.py
from __future__ import annotations

import logging
import random
from typing import Optional

from types_sudoku import Difficulty, Grid, Puzzle

from .backtracking import solve
from .solver_core import SIZE, clone_grid, create_empty_grid, iter_cells

log = logging.getLogger(__name__)

DIFFICULTIES: tuple[Difficulty, ...] = ("easy", "medium", "hard", "expert", "master", "extreme")

CELLS_TO_REMOVE: dict[str, int] = {
    "easy": 35,
    "medium": 45,
    "hard": 50,
    "expert": 55,
    "master": 60,
    "extreme": 65,
}


def cells_to_remove(difficulty: str) -> int:
    try:
        return CELLS_TO_REMOVE[difficulty]
    except KeyError:
        raise ValueError(f"Unknown difficulty {difficulty!r}; expected one of {', '.join(DIFFICULTIES)}") from None


def generate_complete(rng: random.Random) -> Grid:
    """Seed row 0 with a shuffled 1..9 and let the solver fill the rest."""
    grid = create_empty_grid()
    first_row = list(range(1, SIZE + 1))
    rng.shuffle(first_row)
    grid[0] = first_row
    solved = solve(grid)
    # any permutation in row 0 extends to a full grid
    assert solved is not None, f"no completion for first row {first_row}"
    return solved


def generate_puzzle(difficulty: str, rng: Optional[random.Random] = None) -> Puzzle:
    """Return (puzzle, solution) for `difficulty`.

    Without `rng`, a fresh independently seeded Random is used, so concurrent
    callers never share random state.
    """
    n_remove = cells_to_remove(difficulty)
    if rng is None:
        rng = random.Random()
    solution = generate_complete(rng)
    puzzle = clone_grid(solution)

    positions = list(iter_cells())
    rng.shuffle(positions)
    for r, c in positions[:n_remove]:
        puzzle[r][c] = None

    log.debug("generated %s puzzle: %d clues", difficulty, SIZE * SIZE - n_remove)
    return Puzzle(puzzle, solution)


def generate_batch(difficulty: str, count: int, seed: Optional[int] = None) -> list[Puzzle]:
    """Generate `count` puzzles; a `seed` makes the whole batch reproducible."""
    if count < 0:
        raise ValueError("count must be >= 0")
    cells_to_remove(difficulty)
    rng = random.Random(seed)
    puzzles = [generate_puzzle(difficulty, rng) for _ in range(count)]
    log.info("generated %d %s puzzle(s)", len(puzzles), difficulty)
    return puzzles
