import pytest

from hexsudoku.core.errors import InternalInconsistency
from hexsudoku.core.grid import Grid
from hexsudoku.core.model import GridState, Step
from hexsudoku.core.ordering import Shuffled
from hexsudoku.core.steps import all_possible_steps, apply_forced_moves, classify, first_fork


def test_steps_sorted_by_candidate_count(classic_grid):
    steps = all_possible_steps(classic_grid)
    sizes = [len(s.candidates) for s in steps]
    assert sizes == sorted(sizes)
    assert len(steps) == sum(1 for _ in classic_grid.empty_cells())


def test_ties_keep_row_major_order():
    steps = all_possible_steps(Grid.empty(2))
    assert [s.coord for s in steps] == [(r, c) for r in range(4) for c in range(4)]
    assert all(s.candidates == (0, 1, 2, 3) for s in steps)


def test_shuffled_order_keeps_candidate_sets(classic_grid):
    plain = all_possible_steps(classic_grid)
    shuffled = all_possible_steps(classic_grid, Shuffled(seed=3))
    assert {s.coord: set(s.candidates) for s in plain} == {s.coord: set(s.candidates) for s in shuffled}
    assert [len(s.candidates) for s in plain] == [len(s.candidates) for s in shuffled]


def test_first_fork():
    steps = [Step((0, 0), (1,)), Step((0, 1), (2,)), Step((1, 0), (0, 3))]
    assert first_fork(steps) == 2
    assert first_fork(steps[:2]) is None


def test_classify():
    assert classify(Grid.from_text("0123/2301/1230/3012")) is GridState.SOLVED
    assert classify(Grid.from_text("012./..../...3/....")) is GridState.BLOCKED
    assert classify(Grid.from_text("0123/2301/1230/30.2")) is GridState.FORCED
    assert classify(Grid.empty(2)) is GridState.OPEN


def test_forced_moves_are_applied_together():
    grid = Grid.from_text("0.23/2301/1.30/3012")
    nxt = apply_forced_moves(grid)
    assert nxt.value_at(0, 1) == 1
    assert nxt.value_at(2, 1) == 2
    assert nxt.is_solved
    assert nxt.predecessor is grid
    assert grid.value_at(0, 1) is None


def test_forced_moves_read_the_same_input_grid():
    # (0, 0) and (0, 1) are both forced to 1; written together they clash
    grid = Grid.from_text("..23/.0../0.../....")
    assert not grid.is_blocked
    nxt = apply_forced_moves(grid)
    assert nxt.value_at(0, 0) == 1
    assert nxt.value_at(0, 1) == 1
    assert nxt.is_blocked


def test_no_forced_moves_is_idempotent():
    grid = Grid.empty(2)
    assert apply_forced_moves(grid) is None
    assert apply_forced_moves(grid) is None


def test_empty_candidate_set_is_an_internal_error():
    grid = Grid.from_text("012./..../...3/....")
    with pytest.raises(InternalInconsistency):
        apply_forced_moves(grid)
