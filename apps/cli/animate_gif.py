"""Create an animated GIF of a backtracking search, one frame per recorded board state."""

# animate_gif.py
# Solve a puzzle and animate the search trace.
# Usage:
#   python animate_gif.py --puzzle "53..7....6..195...." --out demo_export/search.gif \
#     --size 450 --step_ms 120 --end_ms 1500 --max_frames 200
#
# Frames run oldest first; long traces are sampled down to --max_frames,
# always ending on the final board.

import argparse
import sys
from pathlib import Path

from solver.backtracking import Solver
from solver.board import Board, parse_grid
from solver.config import load_config
from solver.errors import SudokuError
from solver.render import render_frames


def animate(frames, out_path, step_ms=120, end_ms=1500):
    durations = [step_ms] * len(frames)
    if frames:
        durations[-1] = max(durations[-1], end_ms)  # ensure last frame holds

    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    frames[0].save(
        out_path,
        save_all=True,
        append_images=frames[1:],
        duration=durations,
        loop=0,
        optimize=False,
        disposal=2,
    )
    print(f"Wrote {out_path} with {len(frames)} frames.")
    return out_path


def main(argv=None) -> int:
    """CLI entrypoint. Solves the puzzle, renders the recorded steps and encodes them into --out."""
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--puzzle", type=str)
    src.add_argument("--file", type=str)
    ap.add_argument("--out", type=str, default="demo_export/search.gif")
    ap.add_argument("--config", type=str, default=None)
    ap.add_argument("--size", type=int, default=None, help="final square size in px")
    ap.add_argument("--step_ms", type=int, default=None)
    ap.add_argument("--end_ms", type=int, default=None)
    ap.add_argument("--max_frames", type=int, default=None)
    args = ap.parse_args(argv)

    try:
        cfg = load_config(
            args.config,
            image_size=args.size,
            step_ms=args.step_ms,
            end_ms=args.end_ms,
            max_frames=args.max_frames,
        )
        text = args.puzzle if args.puzzle is not None else Path(args.file).read_text(encoding="utf-8")
        grid = parse_grid(text)
        board = Board(grid)
    except (SudokuError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    solver = Solver(board, max_steps=cfg.max_steps)
    solved = solver.get_solution() is not None
    steps = [s.get_board() for s in solver.get_steps()]
    print(f"{'Solved' if solved else 'No solution'} after {solver.step_count} steps.")

    frames = render_frames(steps, size=cfg.image_size, givens=grid, limit=cfg.max_frames)
    animate(frames, args.out, step_ms=cfg.step_ms, end_ms=cfg.end_ms)
    return 0 if solved else 1


if __name__ == "__main__":
    sys.exit(main())
