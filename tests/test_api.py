# tests/test_api.py
import pytest
from fastapi.testclient import TestClient

from apps.api.sudoku_tool_api import app
from solver.solver_core import create_empty_grid


@pytest.fixture
def client():
    return TestClient(app)


def test_difficulties(client):
    resp = client.get("/difficulties")
    assert resp.status_code == 200
    assert resp.json()["difficulties"][0] == "easy"


def test_generate(client):
    resp = client.post("/generate", json={"difficulty": "easy"})
    assert resp.status_code == 200
    body = resp.json()
    clues = sum(1 for row in body["puzzle"] for v in row if v is not None)
    assert clues == 81 - 35
    assert all(v is not None for row in body["solution"] for v in row)


def test_generate_rejects_unknown_difficulty(client):
    assert client.post("/generate", json={"difficulty": "nightmare"}).status_code == 422


def test_solve(client, puzzle, solution):
    resp = client.post("/solve", json={"grid": puzzle})
    assert resp.status_code == 200
    assert resp.json() == {"solution": solution}


def test_solve_unsolvable_is_not_an_error(client, puzzle):
    puzzle[0][2] = 5
    resp = client.post("/solve", json={"grid": puzzle})
    assert resp.status_code == 200
    assert resp.json() == {"solution": None}


def test_zero_means_empty(client, puzzle, solution):
    zeros = [[0 if v is None else v for v in row] for row in puzzle]
    assert client.post("/solve", json={"grid": zeros}).json() == {"solution": solution}


def test_malformed_grid_is_422(client):
    assert client.post("/solve", json={"grid": [[1, 2, 3]]}).status_code == 422
    bad = create_empty_grid()
    bad[0][0] = 12
    assert client.post("/hint", json={"grid": bad}).status_code == 422


def test_hint(client, solution):
    assert client.post("/hint", json={"grid": create_empty_grid()}).json() == {"hint": None}
    solution[2][3] = None
    hint = client.post("/hint", json={"grid": solution}).json()["hint"]
    assert hint["cell"] == "r3c4"
    assert hint["value"] == 3
    assert hint["technique"] == "naked_single"


def test_is_valid_move(client):
    grid = create_empty_grid()
    grid[0] = [5, 3, 4, 6, 7, 8, 9, 1, 2]
    assert client.post("/is_valid_move", json={"grid": grid, "row": 1, "col": 0, "value": 5}).json() == {"valid": False}
    assert client.post("/is_valid_move", json={"grid": grid, "row": 1, "col": 0, "value": 6}).json() == {"valid": True}
    assert client.post("/is_valid_move", json={"grid": grid, "row": 9, "col": 0, "value": 6}).status_code == 422


def test_conflicts(client):
    grid = create_empty_grid()
    grid[0][0] = grid[0][4] = 5
    body = client.post("/conflicts", json={"grid": grid}).json()
    assert body["valid"] is False
    assert body["complete"] is False
    assert body["conflicts"] == [{"type": "row", "index": 0, "value": 5, "cells": [[0, 0], [0, 4]]}]


def test_propagate(client, diagonal_blanks, solution):
    users = [[r, c] for r in range(9) for c in range(9) if r != c]
    body = client.post("/propagate", json={"grid": diagonal_blanks, "user_cells": users}).json()
    assert body["grid"] == solution
    assert body["deduced"] == [[i, i] for i in range(9)]

    resp = client.post("/propagate", json={"grid": diagonal_blanks, "user_cells": [[0, 9]]})
    assert resp.status_code == 422


def test_propagate_keeps_empty_user_cells_empty(client, diagonal_blanks):
    users = [[r, c] for r in range(9) for c in range(9)]
    body = client.post("/propagate", json={"grid": diagonal_blanks, "user_cells": users}).json()
    assert body["deduced"] == []
    assert body["grid"] == diagonal_blanks


def test_sanity_and_candidates(client, puzzle):
    assert client.post("/sanity_check", json={"original": puzzle, "current": puzzle}).json()["ok"] is True
    cands = client.post("/compute_candidates", json={"grid": puzzle}).json()["candidates"]
    assert cands["r5c5"] == [5]
