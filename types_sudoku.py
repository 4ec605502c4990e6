# types_sudoku.py
from __future__ import annotations

from typing import Any, TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Position = tuple[int, int]
"""A (row, col) coordinate, both 0-based in [0, 8]."""


class SolveReport(TypedDict, total=False):
    """Outcome of one solve, shaped for the CLI & API layers."""

    solved: bool
    solution: Grid | None  # completed grid, or None when unsolvable
    steps: int  # snapshots recorded during the search (abandoned branches included)
    conflicts: list[dict[str, Any]]  # duplicate givens found before searching
    trace: list[Grid]  # most recent snapshots first (filled only on request)
