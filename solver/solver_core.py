"""Core Sudoku utilities used by the checker, solver and deduction engine: index math, peers, house iterators, candidates, and grid conversion helpers."""

# solver_core.py
# Grid is a 9x9 list of lists holding 1..9 or None (empty).
# Coordinates are 0-based (row, col); human-facing labels ('r1c1') are 1-based.
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from types_sudoku import Candidates, Cell, Coord, Grid

SIZE = 9
BOX = 3
DIGITS = range(1, SIZE + 1)
EMPTY_CHARS = ".0"


class InvalidGridError(ValueError):
    """Raised when input does not describe a 9x9 grid of empty cells or digits 1..9."""


def create_empty_grid() -> Grid:
    return [[None] * SIZE for _ in range(SIZE)]


def clone_grid(grid: Grid) -> Grid:
    return [row[:] for row in grid]


copy_grid = clone_grid


def get_cell(grid: Grid, row: int, col: int) -> Cell:
    return grid[row][col]


def set_cell(grid: Grid, row: int, col: int, value: Cell) -> None:
    grid[row][col] = value


def rc_to_key(row: int, col: int) -> str:
    return f"r{row + 1}c{col + 1}"


def key_to_rc(key: str) -> Coord:
    r = int(key.split("c")[0][1:])
    c = int(key.split("c")[1])
    return (r - 1, c - 1)


def which_box(row: int, col: int) -> int:
    return (row // BOX) * BOX + col // BOX


def row_values(grid: Grid, row: int) -> set:
    return {v for v in grid[row] if v is not None}


def col_values(grid: Grid, col: int) -> set:
    return {grid[r][col] for r in range(SIZE)} - {None}


def box_values(grid: Grid, row: int, col: int) -> set:
    r0 = BOX * (row // BOX)
    c0 = BOX * (col // BOX)
    return {grid[r0 + i][c0 + j] for i in range(BOX) for j in range(BOX)} - {None}


def unit_cells_row(row: int) -> list[Coord]:
    return [(row, c) for c in range(SIZE)]


def unit_cells_col(col: int) -> list[Coord]:
    return [(r, col) for r in range(SIZE)]


def unit_cells_box(box: int) -> list[Coord]:
    r0 = BOX * (box // BOX)
    c0 = BOX * (box % BOX)
    return [(r0 + i, c0 + j) for i in range(BOX) for j in range(BOX)]


def peers(row: int, col: int) -> set[Coord]:
    """Return the 20 coordinates sharing a row, column or box with (row, col)."""
    ps = set(unit_cells_row(row)) | set(unit_cells_col(col)) | set(unit_cells_box(which_box(row, col)))
    ps.discard((row, col))
    return ps


def iter_cells() -> Iterable[Coord]:
    for r in range(SIZE):
        for c in range(SIZE):
            yield (r, c)


def empty_cells(grid: Grid) -> list[Coord]:
    return [(r, c) for r, c in iter_cells() if grid[r][c] is None]


def filled_cells(grid: Grid) -> set[Coord]:
    return {(r, c) for r, c in iter_cells() if grid[r][c] is not None}


def count_filled(grid: Grid) -> int:
    return sum(1 for row in grid for v in row if v is not None)


def compute_candidates(grid: Grid) -> Candidates:
    cand = {}
    for r, c in empty_cells(grid):
        used = row_values(grid, r) | col_values(grid, c) | box_values(grid, r, c)
        cand[rc_to_key(r, c)] = [d for d in DIGITS if d not in used]
    return cand


# ----------------------------
# Conversion / boundary checks
# ----------------------------

def _normalize_value(value) -> Cell:
    if value is None or value == 0:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= SIZE:
        raise InvalidGridError(f"Cell values must be 1..9 or empty, got {value!r}")
    return value


def normalize_grid(rows: Sequence[Sequence[Optional[int]]]) -> Grid:
    """Validate the shape of `rows` and return a fresh grid.

    Accepts 0 or None for empty cells. Only values are checked, not Sudoku
    rules; duplicates are left for the constraint checker to report.
    """
    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise InvalidGridError("A grid must have exactly 9 rows of 9 cells")
    return [[_normalize_value(v) for v in row] for row in rows]


def flatten_grid(grid: Grid) -> list[Cell]:
    """81 optional values in row-major order."""
    return [v for row in grid for v in row]


def grid_from_flat(values: Sequence[Optional[int]]) -> Grid:
    if len(values) != SIZE * SIZE:
        raise InvalidGridError(f"Expected 81 values, got {len(values)}")
    return normalize_grid([values[r * SIZE:(r + 1) * SIZE] for r in range(SIZE)])


def parse_grid(text: str) -> Grid:
    """Parse an 81-character line ('.' or '0' for empty); whitespace and '|' are ignored."""
    chars = [ch for ch in text if not ch.isspace() and ch not in "|-+"]
    values: list[Cell] = []
    for ch in chars:
        if ch in EMPTY_CHARS:
            values.append(None)
        elif ch in "123456789":
            values.append(int(ch))
        else:
            raise InvalidGridError(f"Unexpected character {ch!r} in grid text")
    return grid_from_flat(values)


def format_grid_line(grid: Grid) -> str:
    return "".join("." if v is None else str(v) for v in flatten_grid(grid))


def format_grid(grid: Grid) -> str:
    lines = []
    for row_index in range(SIZE):
        row_str = ""
        for column_index in range(SIZE):
            val = grid[row_index][column_index]
            row_str += str(val) if val is not None else "."
            if column_index in (2, 5):
                row_str += " | "
            elif column_index < SIZE - 1:
                row_str += " "
        lines.append(row_str)
        if row_index in (2, 5):
            lines.append("-" * 21)
    return "\n".join(lines)
