"""Explicit-stack backtracking search.

The driver keeps a LIFO of :class:`SearchFrame` objects, each owning one
immutable :class:`Grid` and two cursors: ``try_index`` selects the cell being
branched on and ``candidate_cursor`` the next value to try for it.  Every
iteration looks at the top frame only and does exactly one of: backtrack,
stop on a solved grid, move to the next cell, push a grid with all forced
cells filled in, or push a grid with one candidate tried.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import InternalInconsistency
from .grid import Grid
from .model import FrameState, SearchStatus, Step
from .ordering import CandidateOrder, Orderer, make_orderer
from .steps import all_possible_steps, apply_forced_moves, first_fork

log = logging.getLogger(__name__)


@dataclass
class SearchFrame:
    """One level of the backtracking stack."""
    grid: Grid
    try_index: int = 0
    candidate_cursor: int = 0
    _steps: Optional[List[Step]] = field(default=None, init=False, repr=False)

    def steps(self, order: Optional[Orderer] = None) -> List[Step]:
        # Derived once: the cursors index into this exact list.
        if self._steps is None:
            self._steps = all_possible_steps(self.grid, order)
        return self._steps

    @property
    def state(self) -> FrameState:
        if self._steps is not None and self.try_index >= len(self._steps):
            return FrameState.EXHAUSTED
        if self.try_index == 0 and self.candidate_cursor == 0:
            return FrameState.FRESH
        return FrameState.TRYING


@dataclass
class SearchStats:
    iterations: int = 0
    forks: int = 0
    pruned: int = 0
    jumps: int = 0
    backtracks: int = 0
    max_depth: int = 1


@dataclass
class SearchResult:
    status: SearchStatus
    solution: Optional[Grid]
    stats: SearchStats
    path: List[Grid] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED


class SearchDriver:
    """Iterative depth-first search over a stack of frames.

    Forked grids that are blocked straight away are never pushed.
    """

    def __init__(self, grid: Grid, order: Optional[Orderer] = None) -> None:
        self.order = order
        self.stack: List[SearchFrame] = [SearchFrame(grid)]
        self.status = SearchStatus.RUNNING
        self.solution: Optional[Grid] = None
        self.stats = SearchStats()

    @property
    def depth(self) -> int:
        return len(self.stack)

    def _trace(self, msg: str, *args) -> None:
        log.debug(" " * self.depth + msg, *args)

    def _push(self, grid: Grid) -> None:
        self.stack.append(SearchFrame(grid))
        self.stats.max_depth = max(self.stats.max_depth, self.depth)

    def _pop(self) -> None:
        self.stack.pop()
        self.stats.backtracks += 1
        if not self.stack:
            self.status = SearchStatus.EXHAUSTED
            log.info("Search space exhausted after %d iterations: no solution", self.stats.iterations)

    def step(self) -> SearchStatus:
        """Run a single iteration and return the resulting status."""
        if self.status is not SearchStatus.RUNNING:
            return self.status
        if not self.stack:
            self.status = SearchStatus.EXHAUSTED
            return self.status

        self.stats.iterations += 1
        frame = self.stack[-1]
        grid = frame.grid

        if grid.is_blocked:
            self._trace("Backtracking: blocked !")
            self._pop()
            return self.status
        if grid.is_solved:
            self.solution = grid
            self.status = SearchStatus.SOLVED
            log.info("Solved after %d iterations (%d forks, %d backtracks)",
                     self.stats.iterations, self.stats.forks, self.stats.backtracks)
            return self.status

        steps = frame.steps(self.order)
        if frame.try_index >= len(steps):
            self._trace("Backtracking: no more tries !")
            self._pop()
            return self.status

        current = steps[frame.try_index]
        if frame.candidate_cursor >= len(current.candidates):
            frame.try_index += 1
            frame.candidate_cursor = 0
            return self.status

        fork = first_fork(steps)
        if fork is None or fork >= 1 and fork >= frame.try_index:
            self._trace("Jumping %d trivial choices !", len(steps) if fork is None else fork)
            frame.try_index = len(steps)
            # If we come back to this frame, these forced moves were wrong.
            frame.candidate_cursor = 0
            forced = apply_forced_moves(grid, steps)
            if forced is None:
                raise InternalInconsistency(f"no forced move to apply at depth {self.depth}")
            self.stats.jumps += 1
            self._push(forced)
            return self.status

        self._trace(
            "Forking %d/%d (%d/%d) (%d possible steps)",
            frame.try_index + 1, len(steps),
            frame.candidate_cursor + 1, len(current.candidates),
            sum(len(s.candidates) for s in steps[frame.try_index:]),
        )
        value = current.candidates[frame.candidate_cursor]
        frame.candidate_cursor += 1
        self.stats.forks += 1
        row, col = current.coord
        nxt = grid.with_cell(row, col, value)
        if nxt.is_blocked:
            self.stats.pruned += 1
        else:
            self._push(nxt)
        return self.status

    def run(self, max_iterations: Optional[int] = None) -> SearchResult:
        """Iterate until solved or exhausted, or until the budget is spent."""
        while self.status is SearchStatus.RUNNING:
            if max_iterations is not None and self.stats.iterations >= max_iterations:
                self.status = SearchStatus.ABANDONED
                log.warning("Giving up after %d iterations", self.stats.iterations)
                break
            self.step()
        return self.result()

    def result(self) -> SearchResult:
        return SearchResult(
            status=self.status,
            solution=self.solution,
            stats=self.stats,
            path=[frame.grid for frame in self.stack],
        )


def solve(grid: Grid, order: CandidateOrder | str = CandidateOrder.SHUFFLED,
          seed: Optional[int] = None, max_iterations: Optional[int] = None) -> SearchResult:
    """Search for a completion of ``grid``."""
    driver = SearchDriver(grid, make_orderer(order, seed))
    return driver.run(max_iterations=max_iterations)
