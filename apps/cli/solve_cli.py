"""Command-line front end: read a puzzle, run the backtracking solver, and print the board (or a JSON payload) plus optional recent search steps."""

# solve_cli.py
# Usage:
#   python solve_cli.py --puzzle "53..7....6..195....98....6.8...6...34..8..6...2...3.6....28....419..5....8..79"
#   python solve_cli.py --file puzzle.txt --show_steps 3
#   python solve_cli.py --file puzzle.txt --json --config solver.yaml
#
# Exit codes: 0 solved, 1 no solution, 2 invalid input.

import argparse
import json
import sys
from pathlib import Path

from solver.backtracking import Solver
from solver.board import Board, cell_key, parse_grid
from solver.config import load_config
from solver.errors import SudokuError
from solver.render import print_board


def read_puzzle(args) -> str:
    if args.puzzle is not None:
        return args.puzzle
    return Path(args.file).read_text(encoding="utf-8")


def build_parser():
    ap = argparse.ArgumentParser(description="Solve a 9x9 Sudoku by backtracking.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--puzzle", type=str, help="81 characters, '0' or '.' for blanks")
    src.add_argument("--file", type=str, help="text file with the puzzle (81 chars or 9 lines)")
    ap.add_argument("--config", type=str, default=None, help="YAML config file")
    ap.add_argument("--max_steps", type=int, default=None, help="keep at most N snapshots")
    ap.add_argument("--show_steps", type=int, default=None, help="print the N most recent snapshots")
    ap.add_argument("--json", action="store_true", help="print a JSON payload instead of boards")
    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config, max_steps=args.max_steps, show_steps=args.show_steps)
        grid = parse_grid(read_puzzle(args))
        board = Board(grid)
    except (SudokuError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    solver = Solver(board, max_steps=cfg.max_steps)
    solution = solver.get_solution()
    steps = solver.get_steps()[: cfg.show_steps or 0]

    if args.json:
        payload = {
            "puzzle": grid,
            "solved": solution is not None,
            "solution": solution.get_board() if solution is not None else None,
            "steps": solver.step_count,
            "conflicts": board.find_conflicts(),
            "trace": [s.get_board() for s in steps],
        }
        if solution is not None:
            payload["placements"] = [
                {"cell": cell_key((r, c)), "digit": solution.get_board()[r][c]}
                for r in range(9)
                for c in range(9)
                if grid[r][c] == 0
            ]
        print(json.dumps(payload, indent=2))
        return 0 if solution is not None else 1

    print("Puzzle:")
    print_board(grid)
    print()
    for k, step in enumerate(steps):
        print(f"Step -{k} ({step.empty_count()} empty):")
        step.print()
        print()

    if solution is None:
        for issue in board.find_conflicts():
            print(f"Duplicate {issue['digits']} in {issue['unit']}: {', '.join(issue['cells'])}")
        print(f"No solution ({solver.step_count} steps explored).")
        return 1
    print(f"Solved in {solver.step_count} steps:")
    solution.print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
