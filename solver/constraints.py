"""Row/column/box uniqueness checks and conflict enumeration."""

# constraints.py
from __future__ import annotations

from types_sudoku import Conflict, Coord, Grid

from .solver_core import BOX, SIZE, unit_cells_box, unit_cells_col, unit_cells_row


def is_valid_placement(grid: Grid, row: int, col: int, value: int) -> bool:
    """Check row, column and box. The cell itself is skipped when scanning,
    so an already-filled cell can be re-validated in place.
    """
    for c in range(SIZE):
        if c != col and grid[row][c] == value:
            return False

    for r in range(SIZE):
        if r != row and grid[r][col] == value:
            return False

    box_row, box_col = (row // BOX) * BOX, (col // BOX) * BOX
    for r in range(box_row, box_row + BOX):
        for c in range(box_col, box_col + BOX):
            if (r != row or c != col) and grid[r][c] == value:
                return False

    return True


def _scopes():
    """Yield (type, index, cells) for the 27 scopes: rows, then columns, then boxes."""
    for i in range(SIZE):
        yield "row", i, unit_cells_row(i)
    for i in range(SIZE):
        yield "column", i, unit_cells_col(i)
    for i in range(SIZE):
        yield "box", i, unit_cells_box(i)


def _has_duplicate(grid: Grid, cells: list[Coord]) -> bool:
    seen = set()
    for r, c in cells:
        v = grid[r][c]
        if v is None:
            continue
        if v in seen:
            return True
        seen.add(v)
    return False


def is_grid_valid(grid: Grid) -> bool:
    """True iff no scope holds the same value twice. Empty cells are ignored."""
    return not any(_has_duplicate(grid, cells) for _, _, cells in _scopes())


def is_complete(grid: Grid) -> bool:
    if any(v is None for row in grid for v in row):
        return False
    return is_grid_valid(grid)


def find_conflicts(grid: Grid) -> list[Conflict]:
    """List every duplicated value per scope with *all* positions holding it.

    A cell may appear in up to three conflicts (its row, column and box).
    """
    conflicts: list[Conflict] = []
    for scope, index, cells in _scopes():
        by_value: dict[int, list[Coord]] = {}
        for r, c in cells:
            v = grid[r][c]
            if v is not None:
                by_value.setdefault(v, []).append((r, c))
        for value, positions in by_value.items():
            if len(positions) > 1:
                conflicts.append({"type": scope, "index": index, "value": value, "cells": positions})
    return conflicts


def conflict_cells(grid: Grid) -> set[Coord]:
    return {cell for conflict in find_conflicts(grid) for cell in conflict["cells"]}
