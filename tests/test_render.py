# tests/test_render.py
from puzzles import ONE_EMPTY, PUZZLE, SOLUTION, grid
from solver.board import Board
from solver.render import RULE, render_frames, render_image, render_text, sample_indices


def test_render_text_layout():
    lines = render_text(grid(SOLUTION)).split("\n")
    assert len(lines) == 11
    assert lines[0] == " 5  3  4 | 6  7  8 | 9  1  2 "
    assert lines[3] == RULE == "-" * 29
    assert lines[7] == RULE
    assert all(len(line) == 29 for line in lines)


def test_board_print_writes_rendering(capsys):
    Board(grid(PUZZLE)).print()
    out = capsys.readouterr().out
    assert out == render_text(grid(PUZZLE)) + "\n"
    assert " 0 " in out


def test_render_image_size_and_colors():
    im = render_image(grid(SOLUTION), size=450, givens=grid(ONE_EMPTY))
    assert im.size == (450, 450)
    assert im.mode == "RGB"
    # the one placed digit is drawn in green somewhere inside r5c5
    cell = 450 // 9
    box = im.crop((4 * cell, 4 * cell, 5 * cell, 5 * cell))
    assert any(g > 100 and r < 60 and b < 60 for r, g, b in box.getdata())


def test_sample_indices():
    assert sample_indices(5, None) == [0, 1, 2, 3, 4]
    assert sample_indices(5, 10) == [0, 1, 2, 3, 4]
    picked = sample_indices(100, 10)
    assert len(picked) == 10
    assert picked[0] == 0 and picked[-1] == 99
    assert sample_indices(100, 1) == [99]


def test_render_frames_oldest_first():
    steps = [grid(SOLUTION), grid(ONE_EMPTY)]  # newest first, as the solver returns them
    frames = render_frames(steps, size=90, givens=grid(ONE_EMPTY))
    assert len(frames) == 2
    assert list(frames[0].getdata()) == list(render_image(grid(ONE_EMPTY), size=90, givens=grid(ONE_EMPTY)).getdata())
