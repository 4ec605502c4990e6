# tests/test_api.py
from fastapi.testclient import TestClient

from puzzles import DUPLICATE_GIVENS, PUZZLE, SOLUTION, grid
from apps.api.sudoku_tool_api import app

client = TestClient(app)


def test_solve_endpoint():
    r = client.post("/solve", json={"grid": grid(PUZZLE), "trace": 1})
    assert r.status_code == 200
    body = r.json()
    assert body["solved"] is True
    assert body["solution"] == grid(SOLUTION)
    assert body["trace"] == [grid(SOLUTION)]


def test_solve_endpoint_unsolvable():
    body = client.post("/solve", json={"grid": grid(DUPLICATE_GIVENS)}).json()
    assert body["solved"] is False
    assert body["solution"] is None
    assert body["conflicts"][0]["unit"] == "r1"


def test_bad_shape_is_422():
    r = client.post("/solve", json={"grid": [[0] * 9] * 8})
    assert r.status_code == 422
    assert r.json()["detail"] == "Board must be a 9x9 grid"


def test_is_valid_endpoint():
    r = client.post("/is_valid", json={"grid": grid(PUZZLE), "row": 0, "col": 2, "digit": 5})
    assert r.json() == {"valid": False}
    r = client.post("/is_valid", json={"grid": grid(PUZZLE), "row": 0, "col": 2, "digit": 4})
    assert r.json() == {"valid": True}
    r = client.post("/is_valid", json={"grid": grid(PUZZLE), "row": 9, "col": 2, "digit": 4})
    assert r.status_code == 422


def test_render_endpoint():
    r = client.post("/render", json={"grid": grid(PUZZLE)})
    assert r.json()["text"].splitlines()[3] == "-" * 29


def test_solve_history_is_bounded_by_default(monkeypatch):
    import apps.api.sudoku_tool_api as api

    seen = {}

    def fake_solve_grid(grid, max_steps=None, trace=0):
        seen["max_steps"] = max_steps
        return {"solved": False, "solution": None, "steps": 0, "conflicts": []}

    monkeypatch.setattr(api, "solve_grid", fake_solve_grid)
    client.post("/solve", json={"grid": grid(PUZZLE)})
    assert seen["max_steps"] == api.API_MAX_STEPS
    client.post("/solve", json={"grid": grid(PUZZLE), "max_steps": 7})
    assert seen["max_steps"] == 7


def test_solve_rejects_max_steps_above_limit():
    from apps.api.sudoku_tool_api import API_MAX_STEPS

    r = client.post("/solve", json={"grid": grid(PUZZLE), "max_steps": API_MAX_STEPS + 1})
    assert r.status_code == 422
