# tests/test_cli.py
import json

from apps.cli.demo_cli import main
from solver.solver_core import format_grid_line, parse_grid


def _run(capsys, argv):
    code = main(argv)
    return code, capsys.readouterr().out


def test_solve(capsys, puzzle, solution):
    code, out = _run(capsys, ["solve", "--grid", format_grid_line(puzzle)])
    assert code == 0
    payload = json.loads(out)
    assert payload["solved"] is True
    assert parse_grid(payload["solution"]) == solution
    assert payload["assignments"] >= 51


def test_solve_from_file(tmp_path, capsys, puzzle):
    path = tmp_path / "grid.txt"
    path.write_text(format_grid_line(puzzle), encoding="utf-8")
    code, out = _run(capsys, ["solve", "--grid-file", str(path)])
    assert code == 0
    assert json.loads(out)["solved"] is True


def test_generate_with_seed(capsys):
    code, out = _run(capsys, ["generate", "--difficulty", "master", "--count", "2", "--seed", "5"])
    assert code == 0
    puzzles = json.loads(out)["puzzles"]
    assert len(puzzles) == 2
    assert all(p["clues"] == 81 - 60 for p in puzzles)

    _, again = _run(capsys, ["generate", "--difficulty", "master", "--count", "2", "--seed", "5"])
    assert json.loads(again)["puzzles"] == puzzles


def test_generate_uses_config(tmp_path, capsys):
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("difficulty: hard\ncount: 1\nseed: 3\n", encoding="utf-8")
    code, out = _run(capsys, ["--config", str(cfg), "generate"])
    assert code == 0
    [p] = json.loads(out)["puzzles"]
    assert p["difficulty"] == "hard"
    assert p["clues"] == 81 - 50


def test_hint_and_propagate(capsys, diagonal_blanks, solution):
    line = format_grid_line(diagonal_blanks)
    code, out = _run(capsys, ["hint", "--grid", line])
    assert code == 0
    assert json.loads(out)["hint"]["technique"] == "naked_single"

    code, out = _run(capsys, ["propagate", "--grid", line])
    payload = json.loads(out)
    assert parse_grid(payload["grid"]) == solution
    assert len(payload["deduced"]) == 9


def test_check_reports_conflicts(capsys, puzzle):
    current = [row[:] for row in puzzle]
    current[0][2] = 3
    code, out = _run(capsys, ["check", "--grid", format_grid_line(current), "--original", format_grid_line(puzzle)])
    assert code == 0
    payload = json.loads(out)
    assert payload["valid"] is False
    assert len(payload["conflicts"]) == 2
    assert payload["sanity"]["ok"] is False


def test_bad_grid_exit_code(capsys):
    code, out = _run(capsys, ["solve", "--grid", "12345"])
    assert code == 2
    assert out == ""


def test_missing_grid_file_exit_code(tmp_path, capsys):
    code, out = _run(capsys, ["solve", "--grid-file", str(tmp_path / "nope.txt")])
    assert code == 2
    assert out == ""


def test_assist_reports_session_stats(capsys, diagonal_blanks, solution):
    code, out = _run(capsys, ["assist", "--grid", format_grid_line(diagonal_blanks)])
    assert code == 0
    payload = json.loads(out)
    assert parse_grid(payload["grid"]) == solution
    assert payload["deduced"] == [[i, i] for i in range(9)]
    assert payload["stats"] == {"filled_cells": 81, "user_cells": 72, "deduced_cells": 9, "conflict_cells": 0}
    assert payload["hint"] is None
    assert payload["complete"] is True


def test_play_applies_hints(capsys):
    code, out = _run(capsys, ["play", "--difficulty", "easy", "--seed", "4", "--hints", "1"])
    assert code == 0
    payload = json.loads(out)
    assert payload["hints_used"] == 1
    puzzle, current = parse_grid(payload["puzzle"]), parse_grid(payload["current"])
    assert sum(row.count(None) for row in puzzle) == 35
    assert sum(row.count(None) for row in current) == 34
    for hint in payload["hints"]:
        assert current[hint["row"]][hint["col"]] == hint["value"]
