"""The 9x9 board: cell access, first-empty scan, and the row/column/box constraint check used by the backtracking solver. Also parses puzzle text into grids."""

from __future__ import annotations

from types_sudoku import Grid, Position

from .errors import InvalidBoardShape, InvalidDigit, InvalidPosition
from .render import render_text

SIZE = 9
BOX = 3
EMPTY = 0

# Characters ignored when reading puzzle text (rendered boards included).
_SEPARATORS = set(" \t\r\n|-+")


def cell_key(position: Position) -> str:
    """1-based 'r{row}c{col}' key used in JSON payloads."""
    r, c = position
    return f"r{r + 1}c{c + 1}"


def parse_grid(text: str) -> Grid:
    """Read a puzzle from an 81-character string or 9 lines of 9 characters.

    Digits 1-9 are givens, '0' or '.' marks a blank. Whitespace and the
    '|', '-', '+' separators of a rendered board are ignored.
    """
    cells = []
    for ch in text:
        if ch in _SEPARATORS:
            continue
        if ch == ".":
            cells.append(EMPTY)
        elif ch in "0123456789":
            cells.append(int(ch))
        else:
            raise InvalidDigit(f"Unexpected character {ch!r} in puzzle text")
    if len(cells) != SIZE * SIZE:
        raise InvalidBoardShape(f"Expected {SIZE * SIZE} cells, found {len(cells)}")
    return [cells[r * SIZE : (r + 1) * SIZE] for r in range(SIZE)]


def grid_to_string(grid: Grid) -> str:
    return "".join(str(v) for row in grid for v in row)


def _is_digit(value, lo: int = 0) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and lo <= value <= SIZE


def _in_range(index) -> bool:
    return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < SIZE


class Board:
    """A fixed-size, mutable-content Sudoku grid. 0 marks an empty cell.

    The shape is validated once here and never re-checked afterwards.
    """

    def __init__(self, grid: Grid):
        if not Board.is_valid_shape(grid):
            raise InvalidBoardShape()
        for r, row in enumerate(grid):
            for c, v in enumerate(row):
                if not _is_digit(v):
                    raise InvalidDigit(f"{cell_key((r, c))} must be an integer in 0..9, got {v!r}")
        self._grid: Grid = [list(row) for row in grid]

    @staticmethod
    def is_valid_shape(candidate) -> bool:
        """True iff `candidate` has exactly 9 rows of exactly 9 columns each."""
        try:
            return len(candidate) == SIZE and all(len(row) == SIZE for row in candidate)
        except TypeError:
            return False

    def get_board(self) -> Grid:
        """The live grid (shared state, not a copy)."""
        return self._grid

    def copy(self) -> Board:
        clone = Board.__new__(Board)
        clone._grid = [row[:] for row in self._grid]
        return clone

    def find_first_empty(self) -> Position | None:
        for r in range(SIZE):
            for c in range(SIZE):
                if self._grid[r][c] == EMPTY:
                    return (r, c)
        return None

    def empty_count(self) -> int:
        return sum(row.count(EMPTY) for row in self._grid)

    def is_complete(self) -> bool:
        return self.find_first_empty() is None

    def place(self, digit: int, position: Position) -> None:
        """Write `digit` at `position` without any Sudoku-rule check. 0 erases the cell."""
        r, c = self._check_position(position)
        if not _is_digit(digit):
            raise InvalidDigit(f"Cannot place {digit!r} at {cell_key(position)}")
        self._grid[r][c] = digit

    def is_valid(self, digit: int, position: Position) -> bool:
        """False if `digit` already sits in the row, column or 3x3 box of `position`."""
        r, c = self._check_position(position)
        if not _is_digit(digit, lo=1):
            raise InvalidDigit(f"Candidate digit must be in 1..9, got {digit!r}")
        grid = self._grid

        # row
        if digit in grid[r]:
            return False
        # column
        for i in range(SIZE):
            if grid[i][c] == digit:
                return False
        # box
        r0 = (r // BOX) * BOX
        c0 = (c // BOX) * BOX
        for i in range(r0, r0 + BOX):
            for j in range(c0, c0 + BOX):
                if grid[i][j] == digit:
                    return False
        return True

    def find_conflicts(self) -> list[dict]:
        """Report digits repeated within a row, column or box (blanks ignored)."""
        grid = self._grid
        issues = []

        def duplicates_in_unit(cells):
            seen = set()
            dups = set()
            for r, c in cells:
                v = grid[r][c]
                if v == EMPTY:
                    continue
                if v in seen:
                    dups.add(v)
                seen.add(v)
            if dups:
                return {
                    "digits": sorted(dups),
                    "cells": [cell_key((r, c)) for r, c in cells if grid[r][c] in dups],
                }
            return None

        units = []
        for r in range(SIZE):
            units.append((f"r{r + 1}", [(r, c) for c in range(SIZE)]))
        for c in range(SIZE):
            units.append((f"c{c + 1}", [(r, c) for r in range(SIZE)]))
        for b in range(SIZE):
            r0 = BOX * (b // BOX)
            c0 = BOX * (b % BOX)
            units.append((f"b{b + 1}", [(r0 + i, c0 + j) for i in range(BOX) for j in range(BOX)]))

        for name, cells in units:
            found = duplicates_in_unit(cells)
            if found:
                issues.append({"type": "duplicate", "unit": name, **found})
        return issues

    def print(self) -> None:
        print(render_text(self._grid))

    @staticmethod
    def _check_position(position: Position) -> Position:
        try:
            r, c = position
        except (TypeError, ValueError):
            raise InvalidPosition(f"Position must be a (row, col) pair, got {position!r}") from None
        if not (_in_range(r) and _in_range(c)):
            raise InvalidPosition(f"Position out of range: {position!r}")
        return r, c

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self):
        return f"Board('{grid_to_string(self._grid)}')"

    def __str__(self):
        return render_text(self._grid)
