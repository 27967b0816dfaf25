"""Row, column and box constraint groups. A unit holds positions into the board's shared cell list, never copies of cells, so a change made through one unit is seen by the other two units covering the same cell."""

from __future__ import annotations

import logging
from collections import Counter, defaultdict

from .cell import Cell
from .errors import ContradictionError, DuplicateValueError
from .grid_index import DIGITS, unit_key

log = logging.getLogger(__name__)

GROUP_TECHNIQUES = {2: "naked_pair", 3: "naked_triple"}


class Unit:
    """One of the 27 groups of nine cells that must hold each digit exactly once.

    ``kind`` is ``"row"``, ``"column"`` or ``"box"``; ``index`` is 0..8.
    ``arena`` is the board's flat list of 81 cells and ``positions`` the nine
    indices into it that make up this unit.
    """

    def __init__(self, kind: str, index: int, arena: list[Cell], positions: tuple[int, ...]) -> None:
        if len(positions) != 9:
            raise ValueError(f"A unit needs 9 positions, got {len(positions)}")
        self.kind = kind
        self.index = index
        self.arena = arena
        self.positions = positions

    def __repr__(self) -> str:
        return f"Unit({self.key})"

    @property
    def key(self) -> str:
        return unit_key(self.kind, self.index)

    @property
    def cells(self) -> list[Cell]:
        return [self.arena[p] for p in self.positions]

    def unsolved(self) -> list[Cell]:
        return [c for c in self.cells if c.value is None]

    def solved_values(self) -> list[int]:
        return [c.value for c in self.cells if c.value is not None]

    def is_solved(self) -> bool:
        return all(c.value is not None for c in self.cells)

    def validate(self) -> None:
        counts = Counter(self.solved_values())
        for v, n in sorted(counts.items()):
            if n > 1:
                raise DuplicateValueError(self.kind, self.index, v)

    def reduce_from_solved(self) -> bool:
        """Naked singles: strip solved digits from the other cells, then commit any cell left with one candidate."""
        changed = False
        placed = set(self.solved_values())
        if placed:
            for cell in self.unsolved():
                if cell.eliminate(placed, technique="unit_reduction", unit=self.key):
                    changed = True
        for cell in self.cells:
            if cell.try_force(unit=self.key):
                log.debug("%s: naked single %s=%d", self.key, cell.key, cell.value)
                changed = True
        return changed

    def assign_unique_candidates(self) -> bool:
        """Hidden singles: a digit open in exactly one unsolved cell of the unit must go there."""
        changed = False
        counts = Counter(d for cell in self.unsolved() for d in cell.candidates)
        last_holder = {d: cell for cell in self.unsolved() for d in cell.candidates}
        for d in sorted(DIGITS):
            if counts[d] != 1:
                continue
            # earlier commits in this loop may have moved things; re-reduce before placing
            if self.reduce_from_solved():
                changed = True
            holders = [cell for cell in self.unsolved() if d in cell.candidates]
            if not holders:
                if d in self.solved_values():
                    continue
                cell = last_holder[d]
                raise ContradictionError(cell.row, cell.column, cell.box, f"digit {d} has no place left in {self.key}")
            holders[0].commit(d, technique="hidden_single", unit=self.key)
            log.debug("%s: hidden single %s=%d", self.key, holders[0].key, d)
            changed = True
            self.validate()
        return changed

    def eliminate_groups(self, size: int) -> bool:
        """Naked pairs/triples: `size` cells sharing the same `size` candidates own those digits."""
        changed = False
        groups: dict[frozenset[int], list[Cell]] = defaultdict(list)
        for cell in self.unsolved():
            groups[frozenset(cell.candidates)].append(cell)
        for digits, members in list(groups.items()):
            if len(digits) != size or len(members) != size:
                continue
            if any(frozenset(m.candidates) != digits for m in members):
                continue
            technique = GROUP_TECHNIQUES.get(size, f"naked_group_{size}")
            for cell in self.unsolved():
                if frozenset(cell.candidates) == digits:
                    continue
                if cell.eliminate(digits, technique=technique, unit=self.key):
                    changed = True
        return changed

    def propagate(self) -> bool:
        """Full unit pass. Returns True if any cell changed."""
        self.validate()
        changed = self.reduce_from_solved()
        changed |= self.assign_unique_candidates()
        changed |= self.eliminate_groups(2)
        changed |= self.eliminate_groups(3)
        self.validate()
        return changed
