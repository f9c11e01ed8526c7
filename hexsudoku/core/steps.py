"""Step derivation and forced-move batching.

Both are pure functions of a :class:`Grid`.  ``all_possible_steps`` lists
every empty cell with its candidates, most constrained first, and
``apply_forced_moves`` fills every single-candidate cell in one go.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .errors import InternalInconsistency
from .grid import Grid
from .model import GridState, Step
from .ordering import Orderer


def all_possible_steps(grid: Grid, order: Optional[Orderer] = None) -> List[Step]:
    steps = []
    for coord in grid.empty_cells():
        candidates = grid.candidates_at(*coord)
        if order is not None:
            candidates = order(candidates)
        steps.append(Step(coord, candidates))
    # sort() is stable, so ties stay in row-major order
    steps.sort(key=lambda step: len(step.candidates))
    return steps


def first_fork(steps: Sequence[Step]) -> Optional[int]:
    """Index of the first step with two or more candidates."""
    for i, step in enumerate(steps):
        if len(step.candidates) >= 2:
            return i
    return None


def classify(grid: Grid, steps: Optional[Sequence[Step]] = None) -> GridState:
    if grid.is_blocked:
        return GridState.BLOCKED
    if grid.is_solved:
        return GridState.SOLVED
    if steps is None:
        steps = all_possible_steps(grid)
    if not steps:
        # unfilled yet nothing to fill
        return GridState.BLOCKED
    if steps[0].is_forced:
        return GridState.FORCED
    return GridState.OPEN


def apply_forced_moves(grid: Grid, steps: Optional[Sequence[Step]] = None) -> Optional[Grid]:
    """Fill every forced cell at once, or return None if there is none.

    All forced values are read off the same input grid, so two forced cells
    may collide; the result is then blocked and the caller backtracks.
    """
    if steps is None:
        steps = all_possible_steps(grid)
    forced = [step for step in steps if len(step.candidates) <= 1]
    if any(not step.candidates for step in forced):
        raise InternalInconsistency(f"Error in possible steps: {forced}")
    if not forced:
        return None
    return grid.with_cells((step.coord, step.candidates[0]) for step in forced)
