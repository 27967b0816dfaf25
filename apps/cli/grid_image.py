"""Draw the current board state as a PNG/JPEG: grid lines, givens, propagated digits, and the open candidates of unsolved cells as small 3x3 notes."""

from __future__ import annotations

# grid_image.py
# Render a board on a square canvas (default 900x900, 100 px per cell).
from PIL import Image, ImageDraw, ImageFont

from propagator.board import Board

GIVEN = (0, 0, 0)
FILLED = (0, 128, 0)
NOTE = (110, 110, 110)
LINE = (0, 0, 0)


def load_font(size):
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", size)
    except OSError:
        return ImageFont.load_default()


def cell_rect(r, c, cell, pad=0):
    x0 = c * cell + pad
    y0 = r * cell + pad
    return (x0, y0, x0 + cell - 2 * pad, y0 + cell - 2 * pad)


def draw_centered(d: ImageDraw.ImageDraw, center, text, font, fill):
    # no anchor=: the bitmap fallback font does not support it
    x0, y0, x1, y1 = d.textbbox((0, 0), text, font=font)
    d.text((center[0] - (x0 + x1) / 2, center[1] - (y0 + y1) / 2), text, fill=fill, font=font)


def draw_grid_lines(d: ImageDraw.ImageDraw, size: int, thin=2, heavy=5):
    cell = size / 9
    for i in range(10):
        th = heavy if i % 3 == 0 else thin
        x = round(i * cell)
        d.line([(x, 0), (x, size)], fill=LINE, width=th)
        d.line([(0, x), (size, x)], fill=LINE, width=th)


def draw_board(board: Board, out_path: str, size: int = 900) -> str:
    """Render `board` to `out_path`. Returns the path written."""
    size = size - size % 9
    cell = size // 9
    im = Image.new("RGB", (size, size), "white")
    d = ImageDraw.Draw(im)
    big = load_font(int(cell * 0.64))
    small = load_font(int(cell * 0.22))

    for cl in board.cells:
        x0, y0, x1, y1 = cell_rect(cl.row, cl.column, cell)
        if cl.value is not None:
            color = GIVEN if cl.given else FILLED
            draw_centered(d, ((x0 + x1) / 2, (y0 + y1) / 2), str(cl.value), big, color)
            continue
        third = cell / 3
        for digit in sorted(cl.candidates):
            i, j = divmod(digit - 1, 3)
            cx = x0 + third * j + third / 2
            cy = y0 + third * i + third / 2
            draw_centered(d, (cx, cy), str(digit), small, NOTE)

    draw_grid_lines(d, size)
    im.save(out_path)
    return out_path
