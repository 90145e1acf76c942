"""Command-line front end for the Sudoku core: generate puzzles, solve, hint, propagate forced cells, run an assisted session, play a generated game, and check grids. Results are printed as JSON."""

# demo_cli.py
# Usage:
#   python -m apps.cli.demo_cli generate --difficulty hard --count 3 --seed 7
#   python -m apps.cli.demo_cli solve --grid "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
#   python -m apps.cli.demo_cli hint --grid <81 chars>
#   python -m apps.cli.demo_cli propagate --grid <81 chars>
#   python -m apps.cli.demo_cli assist --grid <81 chars>
#   python -m apps.cli.demo_cli play --difficulty easy --seed 1 --hints 2
#   python -m apps.cli.demo_cli check --grid <81 chars> [--original <81 chars>]
# Grids use '.' or '0' for empty cells; --grid-file reads the same text from a file.

import argparse
import json
import logging
import random
import sys
from dataclasses import asdict
from pathlib import Path

from cardinal_pythonlib.logs import main_only_quicksetup_rootlogger

from solver.backtracking import SolveStats, SolverTimeout, solve
from solver.config import load_config, merge_overrides
from solver.constraints import find_conflicts, is_complete, is_grid_valid
from solver.deduction import get_hint, propagate
from solver.generator import DIFFICULTIES, generate_batch
from solver.session import GameSession, SolverSession
from solver.solver_core import InvalidGridError, filled_cells, format_grid, format_grid_line, parse_grid
from solver.sudoku_tools import sanity_check

log = logging.getLogger(__name__)


def read_grid(args, text_attr="grid", file_attr="grid_file"):
    text = getattr(args, text_attr, None)
    path = getattr(args, file_attr, None)
    if path:
        text = Path(path).read_text(encoding="utf-8")
    if not text:
        raise InvalidGridError(f"--{text_attr.replace('_', '-')} or --{file_attr.replace('_', '-')} is required")
    return parse_grid(text)


def cmd_generate(args, cfg):
    puzzles = generate_batch(cfg.difficulty, int(cfg.count), seed=cfg.seed)
    out = []
    for i, (puzzle, solution) in enumerate(puzzles, 1):
        out.append({
            "index": i,
            "difficulty": cfg.difficulty,
            "clues": len(filled_cells(puzzle)),
            "puzzle": format_grid_line(puzzle),
            "solution": format_grid_line(solution),
        })
    return {"puzzles": out}


def cmd_solve(args, cfg):
    grid = read_grid(args)
    log.info("Solving:\n%s", format_grid(grid))
    stats = SolveStats()
    solution = solve(grid, deadline=cfg.solver.deadline_secs, stats=stats)
    if solution is None:
        log.error("Unable to solve!")
    else:
        log.info("Answer:\n%s", format_grid(solution))
    return {
        "solved": solution is not None,
        "solution": format_grid_line(solution) if solution is not None else None,
        "assignments": stats.assignments,
        "backtracks": stats.backtracks,
        "elapsed_secs": round(stats.elapsed, 4),
    }


def cmd_hint(args, cfg):
    return {"hint": get_hint(read_grid(args))}


def cmd_propagate(args, cfg):
    grid = read_grid(args)
    new_grid, deduced = propagate(grid, filled_cells(grid))
    log.info("Deduced %d cell(s):\n%s", len(deduced), format_grid(new_grid))
    return {"grid": format_grid_line(new_grid), "deduced": sorted(deduced)}


def cmd_assist(args, cfg):
    session = SolverSession(read_grid(args))
    stats = session.stats()
    log.info("Assisted grid (%d deduced):\n%s", stats.deduced_cells, format_grid(session.grid))
    return {
        "grid": format_grid_line(session.grid),
        "deduced": sorted(session.deduced),
        "stats": asdict(stats),
        "hint": session.hint(),
        "complete": session.is_complete(),
    }


def cmd_play(args, cfg):
    rng = random.Random(cfg.seed) if cfg.seed is not None else None
    game = GameSession.new(cfg.difficulty, rng)
    hints = [game.apply_hint() for _ in range(args.hints)]
    return {
        "difficulty": game.difficulty,
        "puzzle": format_grid_line(game.initial_grid),
        "current": format_grid_line(game.current),
        "hints": [h for h in hints if h is not None],
        "hints_used": game.hints_used,
        "completed": game.is_completed(),
    }


def cmd_check(args, cfg):
    grid = read_grid(args)
    payload = {
        "valid": is_grid_valid(grid),
        "complete": is_complete(grid),
        "conflicts": find_conflicts(grid),
    }
    if args.original:
        payload["sanity"] = sanity_check(parse_grid(args.original), grid)
    return payload


COMMANDS = {
    "generate": cmd_generate,
    "solve": cmd_solve,
    "hint": cmd_hint,
    "propagate": cmd_propagate,
    "assist": cmd_assist,
    "play": cmd_play,
    "check": cmd_check,
}


def build_parser():
    ap = argparse.ArgumentParser(description="Sudoku generator / solver / deduction assistant")
    ap.add_argument("--config", type=str, default=None, help="YAML file with defaults")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    sub = ap.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate puzzle/solution pairs")
    gen.add_argument("--difficulty", choices=DIFFICULTIES, default=None)
    gen.add_argument("--count", type=int, default=None)
    gen.add_argument("--seed", type=int, default=None)

    play = sub.add_parser("play", help="Start a game and take some hints")
    play.add_argument("--difficulty", choices=DIFFICULTIES, default=None)
    play.add_argument("--seed", type=int, default=None)
    play.add_argument("--hints", type=int, default=0, help="Number of hints to apply")

    for name in ("solve", "hint", "propagate", "assist", "check"):
        p = sub.add_parser(name)
        p.add_argument("--grid", type=str, default=None, help="81 characters, '.' or '0' for empty")
        p.add_argument("--grid-file", dest="grid_file", type=str, default=None)
        if name == "solve":
            p.add_argument("--deadline", type=float, default=None, help="Give up after this many seconds")
        if name == "check":
            p.add_argument("--original", type=str, default=None, help="Puzzle givens to check against")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_config(args.config)
    merge_overrides(
        cfg,
        difficulty=getattr(args, "difficulty", None),
        count=getattr(args, "count", None),
        seed=getattr(args, "seed", None),
    )
    merge_overrides(cfg.solver, deadline_secs=getattr(args, "deadline", None))
    level = logging.DEBUG if args.verbose else getattr(logging, str(cfg.log_level).upper(), logging.INFO)
    main_only_quicksetup_rootlogger(level=level)

    try:
        payload = COMMANDS[args.command](args, cfg)
    except (ValueError, OSError) as exc:
        log.error("%s", exc)
        return 2
    except SolverTimeout as exc:
        log.error("%s", exc)
        return 3
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
