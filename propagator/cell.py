"""A single board position: either a committed digit or the set of digits still possible for it."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import ContradictionError
from .grid_index import DIGITS, position, rc_to_key

if TYPE_CHECKING:
    from .board import Board


class Cell:
    def __init__(self, index: int, value: int | None = None, board: Board | None = None) -> None:
        self.index = index
        self.row, self.column, self.box = position(index)
        self.board = board
        self.given = value is not None
        self.value: int | None = value
        self.candidates: set[int] = set() if value is not None else set(DIGITS)

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Cell({self.key}={self.value})"
        return f"Cell({self.key}?{''.join(str(d) for d in sorted(self.candidates))})"

    @property
    def key(self) -> str:
        return rc_to_key(self.row, self.column)

    def is_solved(self) -> bool:
        return self.value is not None

    def eliminate(self, values, technique: str = "unit_reduction", unit: str | None = None) -> bool:
        """Drop `values` from the candidates. Returns True if anything was removed."""
        if self.value is not None:
            return False
        removed = self.candidates & set(values)
        if not removed:
            return False
        self.candidates -= removed
        if not self.candidates:
            raise ContradictionError(self.row, self.column, self.box)
        if self.board is not None and self.board.started():
            self.board.report(
                {
                    "technique": technique,
                    "type": "elimination",
                    "cell": self.key,
                    "eliminate": sorted(removed),
                    "unit": unit,
                }
            )
        return True

    def commit(self, v: int, technique: str = "naked_single", unit: str | None = None) -> None:
        # v is trusted to be a live candidate; the owning unit re-validates afterwards
        if self.value is not None:
            if self.value != v:
                raise ContradictionError(
                    self.row, self.column, self.box, f"already holds {self.value}, cannot become {v}"
                )
            return
        self.value = v
        self.candidates = set()
        if self.board is not None:
            self.board.notify(self, technique=technique, unit=unit)

    def try_force(self, unit: str | None = None) -> bool:
        if self.value is None and len(self.candidates) == 1:
            (v,) = self.candidates
            self.commit(v, technique="naked_single", unit=unit)
            return True
        return False
