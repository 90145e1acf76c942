# types_sudoku.py
from __future__ import annotations

from typing import Any, Literal, NamedTuple, Optional, TypedDict

Cell = Optional[int]
"""A single cell value: 1..9, or None when empty."""

Grid = list[list[Cell]]
"""A 9x9 Sudoku grid as rows of optional integers (None = empty)."""

Coord = tuple[int, int]
"""A (row, col) coordinate, both 0-based."""

Candidates = dict[str, list[int]]
"""Map from cell label (e.g., 'r1c1') to a list of candidate digits (1..9)."""

Difficulty = Literal["easy", "medium", "hard", "expert", "master", "extreme"]

ScopeType = Literal["row", "column", "box"]


class Conflict(TypedDict):
    """A duplicated value inside one row, column or box."""

    type: ScopeType
    index: int  # 0-based row, column or box number
    value: int
    cells: list[Coord]  # every position holding the duplicated value


class Hint(TypedDict):
    """A suggestion from the deduction engine."""

    row: int
    col: int
    value: Optional[int]  # None only for 'no_candidates'
    reason: str
    technique: str  # 'naked_single', 'fewest_candidates' or 'no_candidates'
    candidates: list[int]


class Move(TypedDict, total=False):
    """A single placement, in the shape the tool wrappers and API exchange."""

    technique: str  # e.g., 'naked_single'
    type: str  # 'placement'
    cell: str  # target label (e.g., 'r4c7')
    row: int
    col: int
    digit: int
    explanation: dict[str, Any]
    highlights: dict[str, Any]


class Puzzle(NamedTuple):
    puzzle: Grid
    solution: Grid
