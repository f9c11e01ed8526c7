"""Immutable Sudoku board snapshots."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from functools import cached_property
from typing import FrozenSet, Iterable, Iterator, Optional, Tuple

from ..notations import Notation, get_notation
from .errors import FormatError
from .model import Coordinate
from .rules import conflicts

EMPTY = None

Row = Tuple[Optional[int], ...]

_ROW_SEPARATOR = re.compile(r"[\n/]")


def fourth_root(count: int) -> int:
    """Integer fourth root of ``count`` or FormatError if there is none."""
    root = math.isqrt(math.isqrt(count))
    if count <= 0 or root ** 4 != count:
        raise FormatError(f"{count} cells do not form a square board (not a perfect fourth power)")
    return root


@dataclass(frozen=True)
class Grid:
    """One fully determined board state of side ``size * size``.

    ``predecessor`` points at the grid this one was derived from.  It only
    feeds change highlighting and takes no part in equality.
    """
    size: int
    cells: Tuple[Row, ...]
    predecessor: Optional["Grid"] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.size < 1:
            raise FormatError(f"block size must be positive, got {self.size}")
        side = self.side
        if len(self.cells) != side or any(len(row) != side for row in self.cells):
            raise FormatError(f"a board of block size {self.size} must be {side}x{side}")
        for row in self.cells:
            for value in row:
                if value is not EMPTY and not 0 <= value < side:
                    raise FormatError(f"cell value {value} outside 0..{side - 1}")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_text(cls, text: str, size: int | None = None,
                  notation: str | Notation = "hex") -> "Grid":
        """Parse rows of single-character cells.

        Rows are separated by newlines or ``/``; other whitespace is ignored.
        Without ``size`` the block size is the fourth root of the cell count.
        """
        rows = ["".join(line.split()) for line in _ROW_SEPARATOR.split(text)]
        rows = [row for row in rows if row]
        flat = "".join(rows)
        if size is None:
            size = fourth_root(len(flat))
        side = size * size
        if len(flat) != side * side:
            raise FormatError(f"expected {side * side} cells for block size {size}, got {len(flat)}")
        if len(rows) > 1 and any(len(row) != side for row in rows):
            raise FormatError(f"every row must hold exactly {side} cells")

        alphabet = get_notation(notation)
        if side > alphabet.max_side():
            raise FormatError(f"{alphabet.name} notation cannot spell a board of side {side}")
        values = [alphabet.decode(ch, side) for ch in flat]
        cells = tuple(tuple(values[r * side:(r + 1) * side]) for r in range(side))
        return cls(size, cells)

    @classmethod
    def empty(cls, size: int) -> "Grid":
        side = size * size
        return cls(size, tuple((EMPTY,) * side for _ in range(side)))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def side(self) -> int:
        return self.size * self.size

    def value_at(self, row: int, col: int) -> Optional[int]:
        return self.cells[row][col]

    def block_index(self, row: int, col: int) -> int:
        return (row // self.size) * self.size + col // self.size

    def row_values(self, row: int) -> FrozenSet[int]:
        return self._row_sets[row]

    def col_values(self, col: int) -> FrozenSet[int]:
        return self._col_sets[col]

    def block_values(self, block: int) -> FrozenSet[int]:
        return self._block_sets[block]

    def candidates_at(self, row: int, col: int) -> Tuple[int, ...]:
        """Values absent from the cell's row, column and block, ascending."""
        used = self._row_sets[row] | self._col_sets[col] | self._block_sets[self.block_index(row, col)]
        return tuple(v for v in range(self.side) if v not in used)

    def empty_cells(self) -> Iterator[Coordinate]:
        for r, row in enumerate(self.cells):
            for c, value in enumerate(row):
                if value is EMPTY:
                    yield Coordinate(r, c)

    @cached_property
    def _row_sets(self) -> Tuple[FrozenSet[int], ...]:
        return tuple(frozenset(v for v in row if v is not EMPTY) for row in self.cells)

    @cached_property
    def _col_sets(self) -> Tuple[FrozenSet[int], ...]:
        return tuple(
            frozenset(row[c] for row in self.cells if row[c] is not EMPTY)
            for c in range(self.side)
        )

    @cached_property
    def _block_sets(self) -> Tuple[FrozenSet[int], ...]:
        n = self.size
        sets = []
        for b in range(self.side):
            r0, c0 = (b // n) * n, (b % n) * n
            sets.append(frozenset(
                self.cells[r0 + i][c0 + j]
                for i in range(n) for j in range(n)
                if self.cells[r0 + i][c0 + j] is not EMPTY
            ))
        return tuple(sets)

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def with_cell(self, row: int, col: int, value: int) -> "Grid":
        return self.with_cells([(Coordinate(row, col), value)])

    def with_cells(self, assignments: Iterable[Tuple[Coordinate, int]]) -> "Grid":
        """Write several cells at once; the receiver becomes the predecessor."""
        rows = [list(row) for row in self.cells]
        for (r, c), value in assignments:
            rows[r][c] = value
        return Grid(self.size, tuple(tuple(row) for row in rows), predecessor=self)

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    @cached_property
    def is_solved(self) -> bool:
        return all(value is not EMPTY for row in self.cells for value in row)

    @cached_property
    def is_blocked(self) -> bool:
        """True if no completion of this grid can be valid.

        That is the case when an empty cell has no candidates left or when
        filled values already clash within a row, column or block.
        """
        if any(not self.candidates_at(r, c) for r, c in self.empty_cells()):
            return True
        return bool(conflicts(self))
