from __future__ import annotations

from types_sudoku import Grid

"""Rendering utilities for a flat 81-cell grid: a boxed text view for the terminal and a 900x900 board image."""


# grid_renderer.py
from typing import Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

LINE = "+-----------+-----------+-----------+"
EMPTY_LINE = "|           |           |           |"

CELL = 100  # 900/9
W = H = 900


def render_grid(grid: Grid, empty: str = ".") -> str:
    out = []
    for r in range(9):
        out.append(LINE if r % 3 == 0 else EMPTY_LINE)
        blocks = []
        for b in range(3):
            start = r * 9 + b * 3
            blocks.append("   ".join(str(v) if v else empty for v in grid[start : start + 3]))
        out.append(f"| {' | '.join(blocks)} |")
    out.append(LINE)
    return "\n".join(out)


def print_grid(grid: Grid, empty: str = ".") -> None:
    print()
    print(render_grid(grid, empty=empty))


def load_font(size):
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default(size=size)


def cell_center(i: int) -> tuple[int, int]:
    return (i % 9) * CELL + CELL // 2, (i // 9) * CELL + CELL // 2


def render_png(grid: Grid, out_path: str, givens: Optional[Sequence[int]] = None) -> str:
    """Draw the board and save it. Digits present in `givens` are black, the rest (deduced) green."""
    im = Image.new("RGB", (W, H), (255, 255, 255))
    d = ImageDraw.Draw(im)

    for k in range(10):
        width = 6 if k % 3 == 0 else 2
        d.line((k * CELL, 0, k * CELL, H), fill=(0, 0, 0), width=width)
        d.line((0, k * CELL, W, k * CELL), fill=(0, 0, 0), width=width)

    f = load_font(64)
    for i, v in enumerate(grid):
        if not v:
            continue
        given = givens is None or givens[i] != 0
        color = (0, 0, 0) if given else (0, 128, 0)
        d.text(cell_center(i), str(v), fill=color, font=f, anchor="mm")

    im.save(out_path)
    return out_path
