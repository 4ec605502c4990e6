# sudoku_tool_api.py
# Optional FastAPI wrapper for the solver.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field
from typing import List, Optional

from solver.backtracking import solve_grid
from solver.board import Board
from solver.errors import SudokuError
from solver.render import render_text

app = FastAPI(title="Sudoku Backtracking Solver API")

# Retained snapshots per request when the caller sets no max_steps; the search itself is not cut short.
API_MAX_STEPS = 10000

class GridModel(BaseModel):
    grid: List[List[int]]

class SolveRequest(BaseModel):
    grid: List[List[int]]
    max_steps: Optional[int] = Field(default=None, ge=1, le=API_MAX_STEPS)
    trace: int = Field(default=0, ge=0)

class IsValidRequest(BaseModel):
    grid: List[List[int]]
    row: int
    col: int
    digit: int

def _board(grid) -> Board:
    try:
        return Board(grid)
    except SudokuError as e:
        raise HTTPException(status_code=422, detail=e.message) from e

@app.post("/solve")
def api_solve(req: SolveRequest):
    _board(req.grid)
    max_steps = req.max_steps if req.max_steps is not None else API_MAX_STEPS
    return solve_grid(req.grid, max_steps=max_steps, trace=req.trace)

@app.post("/is_valid")
def api_is_valid(req: IsValidRequest):
    board = _board(req.grid)
    try:
        return {"valid": board.is_valid(req.digit, (req.row, req.col))}
    except SudokuError as e:
        raise HTTPException(status_code=422, detail=e.message) from e

@app.post("/render")
def api_render(payload: GridModel):
    return {"text": render_text(_board(payload.grid).get_board())}
