"""Depth-first backtracking over a Board, recording every board state the search enters (abandoned branches included)."""

from __future__ import annotations

from collections import deque

from types_sudoku import Grid, SolveReport

from .board import Board

DIGITS = range(1, 10)


class Solver:
    """Solve one Board in place.

    The history holds value copies of the board, newest first, so earlier
    entries keep the state they had when recorded. `max_steps` bounds how many
    snapshots are retained (oldest dropped first); it never cuts the search short.
    """

    def __init__(self, board: Board, max_steps: int | None = None):
        if max_steps is not None and max_steps < 1:
            raise ValueError(f"max_steps must be >= 1, got {max_steps}")
        self.board = board
        self.max_steps = max_steps
        self._steps: deque[Board] = deque(maxlen=max_steps)
        self._count = 0

    def get_solution(self) -> Board | None:
        self._steps.clear()
        self._count = 0

        if self.board.find_conflicts():
            # Duplicate givens can never be satisfied; placements are checked, givens are not.
            self._record(self.board)
            return None

        if self._solve(self.board):
            return self._steps[0]
        return None

    def get_steps(self) -> list[Board]:
        return list(self._steps)

    @property
    def step_count(self) -> int:
        """Snapshots recorded by the last run, including any dropped by max_steps."""
        return self._count

    def _record(self, board: Board) -> None:
        self._steps.appendleft(board.copy())
        self._count += 1

    def _solve(self, board: Board) -> bool:
        self._record(board)

        position = board.find_first_empty()
        if position is None:
            return True

        for digit in DIGITS:
            if board.is_valid(digit, position):
                board.place(digit, position)
                if self._solve(board):
                    return True
            board.place(0, position)
        return False


def solve_grid(grid: Grid, max_steps: int | None = None, trace: int = 0) -> SolveReport:
    """Solve a raw grid and summarize the outcome. `trace` keeps that many recent snapshots in the report."""
    board = Board(grid)
    solver = Solver(board, max_steps=max_steps)
    solution = solver.get_solution()
    report: SolveReport = {
        "solved": solution is not None,
        "solution": solution.get_board() if solution is not None else None,
        "steps": solver.step_count,
        "conflicts": board.find_conflicts(),
    }
    if trace:
        report["trace"] = [s.get_board() for s in solver.get_steps()[:trace]]
    return report
