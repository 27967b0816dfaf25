"""Index math for the 9x9 board: linear index <-> (row, col, box), unit membership lists, and r1c1-style cell keys."""

# grid_index.py
# Internally everything is 0-based: index 0..80 row-major, row/col/box 0..8.
# Keys shown to users are 1-based ("r1c1", "r1", "c1", "b1").

SIZE = 9
CELLS = SIZE * SIZE
DIGITS = frozenset(range(1, SIZE + 1))

Position = tuple[int, int, int]  # (row, col, box)


def which_box(r: int, c: int) -> int:
    return 3 * (r // 3) + (c // 3)


def position(i: int) -> Position:
    r, c = divmod(i, SIZE)
    return (r, c, which_box(r, c))


def rc_to_index(r: int, c: int) -> int:
    return r * SIZE + c


def rc_to_key(r: int, c: int) -> str:
    return f"r{r + 1}c{c + 1}"


def unit_key(kind: str, index: int) -> str:
    return f"{kind[0]}{index + 1}"


def row_indices(r: int) -> tuple[int, ...]:
    return tuple(rc_to_index(r, c) for c in range(SIZE))


def column_indices(c: int) -> tuple[int, ...]:
    return tuple(rc_to_index(r, c) for r in range(SIZE))


def box_indices(b: int) -> tuple[int, ...]:
    r0 = 3 * (b // 3)
    c0 = 3 * (b % 3)
    return tuple(rc_to_index(r0 + i, c0 + j) for i in range(3) for j in range(3))
