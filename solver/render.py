"""Rendering for grids: the plain-text board used by the CLI, and Pillow images used to animate a solver's step trace."""

from __future__ import annotations

from PIL import Image, ImageDraw, ImageFont

from types_sudoku import Grid

RULE = "-" * 29


def render_text(grid: Grid) -> str:
    """Text board with '|' between boxes and a dashed rule under every third row."""
    lines = []
    for r, row in enumerate(grid):
        parts = []
        for c, v in enumerate(row):
            if c % 3 == 0 and c != 0:
                parts.append("|")
            parts.append(f" {v} ")
        lines.append("".join(parts))
        if (r + 1) % 3 == 0 and r != 8:
            lines.append(RULE)
    return "\n".join(lines)


def print_board(grid: Grid) -> None:
    print(render_text(grid))


def load_font(size):
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default()


def render_image(grid: Grid, size: int = 450, givens: Grid | None = None) -> Image.Image:
    """Draw a grid as an RGB image. Givens in black, solver placements in green."""
    cell = size // 9
    W = H = cell * 9
    im = Image.new("RGB", (W, H), "white")
    d = ImageDraw.Draw(im)

    for k in range(10):
        width = 3 if k % 3 == 0 else 1
        d.line((k * cell, 0, k * cell, H), fill=(0, 0, 0), width=width)
        d.line((0, k * cell, W, k * cell), fill=(0, 0, 0), width=width)

    f = load_font(int(cell * 0.6))
    for r, row in enumerate(grid):
        for c, v in enumerate(row):
            if v == 0:
                continue
            given = givens is None or givens[r][c] != 0
            color = (0, 0, 0) if given else (0, 128, 0)
            cx = c * cell + cell // 2
            cy = r * cell + cell // 2
            d.text((cx, cy), str(v), fill=color, font=f, anchor="mm")
    return im


def sample_indices(n: int, limit: int | None) -> list[int]:
    """Evenly spaced indices into a sequence of length n; the last index is always kept."""
    if limit is None or n <= limit:
        return list(range(n))
    if limit <= 1:
        return [n - 1]
    step = (n - 1) / (limit - 1)
    return sorted({round(i * step) for i in range(limit)})


def render_frames(steps: list[Grid], size: int = 450, givens: Grid | None = None, limit: int | None = None):
    """Images for a step trace given most-recent-first, returned oldest first."""
    chronological = list(reversed(steps))
    return [render_image(chronological[i], size=size, givens=givens) for i in sample_indices(len(chronological), limit)]
