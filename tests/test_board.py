# tests/test_board.py
import pytest

from propagator.board import MAX_STEPS, Board, SolvePhase
from propagator.errors import ContradictionError, DuplicateValueError, InvalidCellValue, InvalidInputSize


def assert_units_complete(board):
    for unit in board.units():
        assert sorted(unit.solved_values()) == list(range(1, 10)), unit.key


def test_rejects_wrong_length():
    with pytest.raises(InvalidInputSize) as exc:
        Board([None] * 80)
    assert exc.value.size == 80
    with pytest.raises(InvalidInputSize):
        Board([None] * 82)


def test_rejects_bad_cell_values():
    values = [None] * 81
    values[5] = 10
    with pytest.raises(InvalidCellValue) as exc:
        Board(values)
    assert exc.value.index == 5
    values[5] = "7"
    with pytest.raises(InvalidCellValue):
        Board(values)


def test_zero_means_unknown():
    board = Board([0] * 81)
    assert all(c.value is None for c in board.cells)


def test_from_grid(easy_values):
    grid = [[v or 0 for v in easy_values[r * 9 : (r + 1) * 9]] for r in range(9)]
    board = Board.from_grid(grid)
    assert board.values() == easy_values
    assert board.grid() == grid
    with pytest.raises(InvalidInputSize) as exc:
        Board.from_grid(grid[:8])
    assert "Expected 9 rows, got 8" in str(exc.value)


def test_from_grid_names_the_ragged_row(easy_values):
    grid = [[v or 0 for v in easy_values[r * 9 : (r + 1) * 9]] for r in range(9)]
    grid[2].append(0)
    grid[5].pop()
    with pytest.raises(InvalidInputSize) as exc:
        Board.from_grid(grid)
    assert exc.value.size == 81
    assert "Row 3 has 10 cells" in str(exc.value)


def test_solves_easy_puzzle(easy_values, solution_values):
    board = Board(easy_values)
    assert not board.started()
    phase = board.start()
    assert phase is SolvePhase.SOLVED
    assert board.started()
    assert board.is_solved()
    assert board.values() == solution_values
    assert board.candidates() == {}
    assert 0 < board.steps <= MAX_STEPS
    assert len(board.commits) == sum(v is None for v in easy_values)
    assert_units_complete(board)


def test_already_solved_grid(solution_values):
    board = Board(solution_values)
    assert board.is_solved()
    before = board.state()
    assert board.step() is False
    assert board.state() == before
    assert board.steps == 0
    assert board.start() is SolvePhase.SOLVED
    assert board.commits == []


def test_step_is_idempotent_once_solved(easy_values):
    board = Board(easy_values)
    board.start()
    snapshot = board.state()
    steps = board.steps
    for _ in range(3):
        assert board.step() is False
    assert board.state() == snapshot
    assert board.steps == steps


def test_single_missing_digit_is_committed_in_one_step(solution_values):
    values = list(solution_values)
    values[40] = None  # r5c5 = 5
    board = Board(values)
    assert board.step() is True
    assert board.is_solved()
    assert board.cells[40].value == 5
    assert [(e["cell"], e["digit"]) for e in board.commits] == [("r5c5", 5)]


def test_step_commits_hidden_single():
    values = [None] * 81
    for r, c in ((6, 0), (7, 4), (0, 6), (3, 7)):
        values[r * 9 + c] = 9
    # by the time r9 is swept, 9 is ruled out of every cell but r9c9
    board = Board(values)
    assert board.step() is True
    first = board.commits[0]
    assert (first["cell"], first["digit"], first["technique"], first["unit"]) == ("r9c9", 9, "hidden_single", "r9")
    assert board.cells[80].value == 9


def test_on_step_sees_every_step(escargot_values):
    seen = []
    board = Board(escargot_values)
    board.start(max_steps=3, on_step=lambda b: seen.append(b.steps))
    assert seen == list(range(1, board.steps + 1))


def test_duplicate_in_row_aborts_with_row_index():
    values = [None] * 81
    values[3 * 9 + 0] = 5
    values[3 * 9 + 8] = 5
    board = Board(values)
    with pytest.raises(DuplicateValueError) as exc:
        board.start()
    assert exc.value.kind == "row"
    assert exc.value.index == 3
    assert board.phase is SolvePhase.FAILED


def test_empty_candidate_set_aborts_with_cell_position():
    values = [None] * 81
    for r, v in zip(range(1, 8), range(3, 10)):
        values[r * 9] = v  # c1 holds 3..9 below r1
    values[3] = 1
    values[6] = 2  # r1 holds 1 and 2, so r1c1 has nothing left
    board = Board(values)
    with pytest.raises(ContradictionError) as exc:
        board.start()
    assert (exc.value.row, exc.value.column, exc.value.box) == (0, 0, 0)
    assert board.phase is SolvePhase.FAILED


def test_stall_is_not_an_error(escargot_values):
    board = Board(escargot_values)
    phase = board.start()
    assert phase is SolvePhase.STALLED
    assert not board.is_solved()
    assert board.steps <= MAX_STEPS
    for cell in board.cells:
        if cell.value is None:
            assert cell.candidates
    for unit in board.units():
        unit.validate()


def test_stall_respects_step_bound(escargot_values):
    board = Board(escargot_values)
    board.start(max_steps=1)
    assert board.steps == 1
    assert board.phase is SolvePhase.STALLED


def test_candidate_sets_only_shrink(easy_values):
    board = Board(easy_values)
    previous = [(c.value, set(c.candidates)) for c in board.cells]
    while board.step():
        for (value, cands), cell in zip(previous, board.cells):
            if value is not None:
                assert cell.value == value
            elif cell.value is not None:
                assert cell.value in cands
            else:
                assert cell.candidates <= cands
                assert cell.candidates
        previous = [(c.value, set(c.candidates)) for c in board.cells]
    assert board.is_solved()


def test_solves_are_deterministic(easy_values):
    first = Board(easy_values)
    first.start()
    second = Board(list(easy_values))
    second.start()
    assert first.commits == second.commits
    assert first.state() == second.state()


def test_observer_sees_placements_and_eliminations(easy_values):
    seen = []
    board = Board(easy_values, observer=seen.append)
    board.start()
    placements = [e for e in seen if e["type"] == "placement"]
    assert placements == board.commits
    assert any(e["type"] == "elimination" for e in seen)
    assert {e["technique"] for e in placements} <= {"naked_single", "hidden_single"}


def test_render_does_not_mutate(escargot_values):
    board = Board(escargot_values)
    board.start()
    before = board.state()
    compact = board.render()
    detailed = board.render(details=True)
    assert board.state() == before
    assert len(compact) == 81
    assert compact[0] == "r1c1 = 1 (given)"
    assert len(detailed) == 9 * 3 + 6 + 2
