# types_sudoku.py
from __future__ import annotations

from typing import TypedDict

Grid = list[list[int]]
"""A 9x9 Sudoku grid as rows of integers (0 = empty)."""

Values = list[int | None]
"""Flat row-major list of 81 cells: a digit 1..9 or None for an unknown cell."""

Candidates = dict[str, list[int]]
"""Map from cell key (e.g., 'r1c1') to the sorted candidate digits still open for it."""


class Event(TypedDict, total=False):
    """A single propagation action, reported to the board observer and the CLI/API layers."""

    index: int  # 1-based order in the solve
    technique: str  # 'naked_single', 'hidden_single', 'naked_pair', 'naked_triple', 'unit_reduction'
    type: str  # 'placement' or 'elimination'
    cell: str  # target cell (e.g., 'r4c7')
    digit: int  # for placements, the committed digit
    eliminate: list[int]  # for eliminations, the digits removed from `cell`
    unit: str | None  # unit that produced the action (e.g., 'r4', 'c7', 'b6')


class SolvePayload(TypedDict):
    """Tool-friendly result of a bounded propagation solve."""

    phase: str  # 'solved', 'stalled'
    solved: bool
    steps: int
    grid: Grid
    candidates: Candidates
    events: list[Event]
    render: list[str]
