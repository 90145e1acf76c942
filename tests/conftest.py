# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "apps", "solver" and "types_sudoku" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from solver.solver_core import parse_grid  # noqa: E402

CLASSIC_PUZZLE = (
    "53..7...."
    "6..195..."
    ".98....6."
    "8...6...3"
    "4..8.3..1"
    "7...2...6"
    ".6....28."
    "...419..5"
    "....8..79"
)

CLASSIC_SOLUTION = (
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
def puzzle():
    return parse_grid(CLASSIC_PUZZLE)


@pytest.fixture
def solution():
    return parse_grid(CLASSIC_SOLUTION)


@pytest.fixture
def diagonal_blanks(solution):
    """The solution with its main diagonal cleared: one blank per row, all naked singles."""
    grid = [row[:] for row in solution]
    for i in range(9):
        grid[i][i] = None
    return grid
