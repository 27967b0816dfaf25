"""Plain-text views of a board. All functions only read cell state."""

# render.py
# - render_compact: one line per cell ("r1c1 = 5", "r1c2 : 1 2 4")
# - render_detailed: 3x3 candidate block per cell (27 text rows)
# - render_grid: classic 9-line grid, optionally ANSI-colored (givens plain, filled cells blue)

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board
    from .cell import Cell

BLUE = "\033[94m"
DIM = "\033[90m"
RESET = "\033[0m"


def render_compact(board: Board) -> list[str]:
    lines = []
    for cell in board.cells:
        if cell.value is not None:
            tag = " (given)" if cell.given else ""
            lines.append(f"{cell.key} = {cell.value}{tag}")
        else:
            lines.append(f"{cell.key} : {' '.join(str(d) for d in sorted(cell.candidates))}")
    return lines


def _cell_block(cell: Cell) -> list[str]:
    if cell.value is not None:
        return ["   ", f" {cell.value} ", "   "]
    digits = [str(d) if d in cell.candidates else "." for d in range(1, 10)]
    return ["".join(digits[0:3]), "".join(digits[3:6]), "".join(digits[6:9])]


def render_detailed(board: Board) -> list[str]:
    """Each cell drawn as a 3x3 block of its open candidates; solved cells show the digit in the middle."""
    lines = []
    sep = "+".join(["-" * 11] * 3)
    for r, row in enumerate(board.rows):
        if r and r % 3 == 0:
            lines.append(sep)
        blocks = [_cell_block(cell) for cell in row.cells]
        for k in range(3):
            parts = [" ".join(b[k] for b in blocks[i : i + 3]) for i in (0, 3, 6)]
            lines.append("|".join(parts))
        if r % 3 != 2:
            lines.append("|".join([" " * 11] * 3))
    return lines


def render_grid(board: Board, color: bool = False) -> list[str]:
    lines = ["-" * 25]
    for r, row in enumerate(board.rows):
        if r and r % 3 == 0:
            lines.append("-" * 25)
        row_str = "| "
        for c, cell in enumerate(row.cells):
            if c and c % 3 == 0:
                row_str += "| "
            if cell.value is None:
                val_str = f"{DIM}.{RESET}" if color else "."
            elif cell.given or not color:
                val_str = str(cell.value)
            else:
                val_str = f"{BLUE}{cell.value}{RESET}"
            row_str += f"{val_str} "
        lines.append(row_str + "|")
    lines.append("-" * 25)
    return lines
