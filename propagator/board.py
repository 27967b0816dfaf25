"""The 81-cell board: owns the cell arena and the row/column/box views over it, and drives propagation to a fixed point."""

# board.py
# Propagation order:
# - step(): for i in 0..8 run rows[i], columns[i], boxes[i], draining the commit queue after each
# - every commit queues its cell; draining re-runs that cell's row, column and box
# - start(): validate, then step() until solved, no change, or max_steps

from __future__ import annotations

import enum
import logging
from collections import deque
from collections.abc import Callable, Iterable

from types_sudoku import Candidates, Event, Grid, Values

from .cell import Cell
from .errors import InvalidCellValue, InvalidInputSize, SudokuError
from .grid_index import CELLS, DIGITS, SIZE, box_indices, column_indices, row_indices
from .render import render_compact, render_detailed
from .unit import Unit

log = logging.getLogger(__name__)

MAX_STEPS = 20

Observer = Callable[[Event], None]
StepHook = Callable[["Board"], None]


class SolvePhase(enum.Enum):
    NOT_STARTED = "not_started"
    SOLVING = "solving"
    SOLVED = "solved"
    STALLED = "stalled"
    FAILED = "failed"


def _checked(index: int, v) -> int | None:
    if v is None or v == 0:
        return None
    if isinstance(v, bool) or not isinstance(v, int) or v not in DIGITS:
        raise InvalidCellValue(index, v)
    return v


class Board:
    def __init__(self, values: Iterable[int | None], observer: Observer | None = None) -> None:
        values = list(values)
        if len(values) != CELLS:
            raise InvalidInputSize(len(values))
        self.cells = [Cell(i, _checked(i, v), board=self) for i, v in enumerate(values)]
        self.rows = [Unit("row", i, self.cells, row_indices(i)) for i in range(SIZE)]
        self.columns = [Unit("column", i, self.cells, column_indices(i)) for i in range(SIZE)]
        self.boxes = [Unit("box", i, self.cells, box_indices(i)) for i in range(SIZE)]
        self.observer = observer
        self.phase = SolvePhase.NOT_STARTED
        self.steps = 0
        self.commits: list[Event] = []
        self._pending: deque[Cell] = deque()

    @classmethod
    def from_grid(cls, grid: Grid, observer: Observer | None = None) -> Board:
        size = sum(len(row) for row in grid)
        if len(grid) != SIZE:
            raise InvalidInputSize(size, f"Expected 9 rows, got {len(grid)}.")
        for r, row in enumerate(grid):
            if len(row) != SIZE:
                raise InvalidInputSize(size, f"Row {r + 1} has {len(row)} cells; expected 9.")
        return cls([v for row in grid for v in row], observer=observer)

    def __repr__(self) -> str:
        return f"Board(phase={self.phase.value}, solved={sum(c.is_solved() for c in self.cells)}/81)"

    # ----- queries -------------------------------------------------------------

    def units(self) -> list[Unit]:
        return self.rows + self.columns + self.boxes

    def started(self) -> bool:
        return self.phase is not SolvePhase.NOT_STARTED

    def is_solved(self) -> bool:
        return all(c.value is not None for c in self.cells)

    def values(self) -> Values:
        return [c.value for c in self.cells]

    def grid(self) -> Grid:
        return [[c.value or 0 for c in row.cells] for row in self.rows]

    def candidates(self) -> Candidates:
        return {c.key: sorted(c.candidates) for c in self.cells if c.value is None}

    def state(self) -> tuple:
        """Hashable snapshot of every cell, used to detect steps that change nothing."""
        return tuple((c.value, frozenset(c.candidates)) for c in self.cells)

    def render(self, details: bool = False) -> list[str]:
        return render_detailed(self) if details else render_compact(self)

    # ----- notifications -------------------------------------------------------

    def notify(self, cell: Cell, technique: str = "naked_single", unit: str | None = None) -> None:
        """Called by a cell right after it commits; queues its row/column/box for re-propagation."""
        self._pending.append(cell)
        self.report(
            {"technique": technique, "type": "placement", "cell": cell.key, "digit": cell.value, "unit": unit}
        )

    def report(self, event: Event) -> None:
        if event.get("type") == "placement":
            event["index"] = len(self.commits) + 1
            self.commits.append(event)
        if self.observer is not None and self.started():
            self.observer(event)

    def _drain(self) -> None:
        while self._pending:
            cell = self._pending.popleft()
            for unit in (self.rows[cell.row], self.columns[cell.column], self.boxes[cell.box]):
                if unit.is_solved():
                    unit.validate()
                else:
                    unit.propagate()

    # ----- solving -------------------------------------------------------------

    def validate(self) -> None:
        for unit in self.units():
            unit.validate()

    def step(self) -> bool:
        """One sweep over all units. Returns True if any cell changed."""
        if self.is_solved():
            return False
        before = self.state()
        self.steps += 1
        log.debug("step %d", self.steps)
        for i in range(SIZE):
            for unit in (self.rows[i], self.columns[i], self.boxes[i]):
                unit.propagate()
                self._drain()
                if self.is_solved():
                    return True
        return self.state() != before

    def start(self, max_steps: int = MAX_STEPS, on_step: StepHook | None = None) -> SolvePhase:
        """Validate, then step until solved, nothing changes, or `max_steps` is reached.

        `on_step` is called with the board after every step, including the last one.
        """
        self.phase = SolvePhase.SOLVING
        try:
            self.validate()
            for _ in range(max_steps):
                if self.is_solved():
                    break
                changed = self.step()
                if on_step is not None:
                    on_step(self)
                if not changed:
                    break
        except SudokuError as e:
            self.phase = SolvePhase.FAILED
            log.error("Unable to solve: %s", e)
            raise
        if self.is_solved():
            self.phase = SolvePhase.SOLVED
            log.info("Solved after %d step(s), %d placement(s)", self.steps, len(self.commits))
        else:
            self.phase = SolvePhase.STALLED
            log.warning(
                "Propagation stalled after %d step(s) with %d cell(s) open",
                self.steps,
                sum(c.value is None for c in self.cells),
            )
        return self.phase
