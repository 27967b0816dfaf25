"""Tool-friendly helpers around the propagation board: puzzle text parsing, grid <-> flat value conversion, a sanity check for hand-edited grids, and a one-call solve that returns a JSON-ready payload. Used by the CLI and the HTTP API."""

# sudoku_tools.py
from __future__ import annotations

from types_sudoku import Event, Grid, SolvePayload, Values

from .board import MAX_STEPS, Board
from .grid_index import SIZE, box_indices, rc_to_key

UNKNOWN = set("0._*xX")
IGNORED = set("|-+")


def parse_puzzle(text: str) -> Values:
    """Read digits 1-9 as givens and 0 . _ * x as blanks; whitespace and | - + are skipped.

    The length is not checked here; Board() raises InvalidInputSize for anything but 81 cells.
    """
    values: Values = []
    for ch in text:
        if ch.isspace() or ch in IGNORED:
            continue
        if ch in UNKNOWN:
            values.append(None)
        elif ch in "123456789":
            values.append(int(ch))
        else:
            raise ValueError(f"Unexpected character {ch!r} in puzzle text")
    return values


def grid_to_values(grid: Grid) -> Values:
    return [v or None for row in grid for v in row]


def values_to_grid(values: Values) -> Grid:
    return [[v or 0 for v in values[r * SIZE : (r + 1) * SIZE]] for r in range(SIZE)]


def sanity_check(original: Grid, current: Grid) -> dict:
    issues = []
    for r in range(SIZE):
        for c in range(SIZE):
            if original[r][c] != 0 and current[r][c] not in (0, original[r][c]):
                issues.append(
                    {
                        "type": "given_overwritten",
                        "cell": rc_to_key(r, c),
                        "given": original[r][c],
                        "found": current[r][c],
                    }
                )

    def duplicates_in_unit(vals):
        seen = set()
        dups = set()
        for v in vals:
            if v == 0:
                continue
            if v in seen:
                dups.add(v)
            seen.add(v)
        return dups

    units = []
    for r in range(SIZE):
        units.append((f"r{r + 1}", [(r, c) for c in range(SIZE)]))
    for c in range(SIZE):
        units.append((f"c{c + 1}", [(r, c) for r in range(SIZE)]))
    for b in range(SIZE):
        units.append((f"b{b + 1}", [divmod(i, SIZE) for i in box_indices(b)]))
    for key, cells in units:
        vals = [current[r][c] for r, c in cells]
        dups = duplicates_in_unit(vals)
        if dups:
            bad = [rc_to_key(r, c) for r, c in cells if current[r][c] in dups]
            issues.append({"type": "duplicate", "unit": key, "digits": sorted(dups), "cells": bad})
    return {"ok": len(issues) == 0, "issues": issues}


def board_payload(board: Board, details: bool = False) -> SolvePayload:
    events: list[Event] = [
        {"index": e["index"], "technique": e["technique"], "type": e["type"], "cell": e["cell"], "digit": e["digit"]}
        for e in board.commits
    ]
    return {
        "phase": board.phase.value,
        "solved": board.is_solved(),
        "steps": board.steps,
        "grid": board.grid(),
        "candidates": board.candidates(),
        "events": events,
        "render": board.render(details=details),
    }


def solve_tool(values: Values, max_steps: int = MAX_STEPS, details: bool = False) -> SolvePayload:
    """Run a bounded propagation solve and return the final state. SudokuError propagates to the caller."""
    board = Board(values)
    board.start(max_steps=max_steps)
    return board_payload(board, details=details)
