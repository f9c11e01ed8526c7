"""Row/column/block rule checks over whole grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .grid import Grid


@dataclass(frozen=True)
class Conflict:
    """A value appearing more than once in one unit."""
    unit: str  # "row", "col" or "block"
    index: int
    value: int


def units(grid: "Grid") -> Iterator[Tuple[str, int, List[Optional[int]]]]:
    """Yield every row, column and block as (unit, index, values)."""
    n, side = grid.size, grid.side
    for r in range(side):
        yield "row", r, list(grid.cells[r])
    for c in range(side):
        yield "col", c, [grid.cells[r][c] for r in range(side)]
    for b in range(side):
        r0, c0 = (b // n) * n, (b % n) * n
        yield "block", b, [grid.cells[r0 + i][c0 + j] for i in range(n) for j in range(n)]


def _duplicates(values: Iterable[Optional[int]]) -> List[int]:
    seen = set()
    dups = []
    for v in values:
        if v is None:
            continue
        if v in seen and v not in dups:
            dups.append(v)
        seen.add(v)
    return dups


def conflicts(grid: "Grid") -> List[Conflict]:
    result = []
    for unit, index, values in units(grid):
        for value in _duplicates(values):
            result.append(Conflict(unit, index, value))
    return result


def is_valid_solution(grid: "Grid") -> bool:
    """Every cell filled and every unit holds each value exactly once."""
    return grid.is_solved and not conflicts(grid)


def preserves_givens(puzzle: "Grid", solution: "Grid") -> bool:
    """True if every filled cell of ``puzzle`` has the same value in ``solution``."""
    return all(
        given is None or solution.cells[r][c] == given
        for r, row in enumerate(puzzle.cells)
        for c, given in enumerate(row)
    )
