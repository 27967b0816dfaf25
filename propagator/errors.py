"""Exceptions raised by the propagation engine. Every error carries enough positional context to point at the offending cell or unit."""

from __future__ import annotations

from .grid_index import rc_to_key, unit_key


class SudokuError(Exception):
    """Base class for everything the engine raises."""


class InvalidInputSize(SudokuError, ValueError):
    def __init__(self, size: int, detail: str | None = None) -> None:
        self.size = size
        super().__init__(detail or f"Expected 81 cells, got {size}.")


class InvalidCellValue(SudokuError, ValueError):
    def __init__(self, index: int, value: object) -> None:
        self.index = index
        self.value = value
        r, c = divmod(index, 9)
        super().__init__(f"Cell {rc_to_key(r, c)} holds {value!r}; expected a digit 1..9 or empty.")


class ContradictionError(SudokuError):
    """An unsolved cell ran out of candidates (or a solved cell was re-committed to another digit)."""

    def __init__(self, row: int, column: int, box: int, reason: str = "no candidates left") -> None:
        self.row = row
        self.column = column
        self.box = box
        super().__init__(f"Contradiction at {rc_to_key(row, column)} (box b{box + 1}): {reason}.")


class DuplicateValueError(SudokuError):
    """Two solved cells in one unit hold the same digit."""

    def __init__(self, kind: str, index: int, value: int) -> None:
        self.kind = kind
        self.index = index
        self.value = value
        super().__init__(f"Digit {value} appears more than once in {kind} {unit_key(kind, index)}.")
