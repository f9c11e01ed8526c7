"""Boxed text rendering of grids, highlighting cells changed since the predecessor."""

from __future__ import annotations

from typing import List, Optional

from ..core.grid import Grid
from ..notations import Notation, get_notation

HIGHLIGHT = "\x1b[31m"
RESET = "\x1b[39m"


def _rule(left: str, mid: str, right: str, size: int) -> str:
    return left + mid.join("─" * (size + 2) for _ in range(size)) + right


def render(grid: Grid, notation: str | Notation = "hex", highlight: bool = True,
           previous: Optional[Grid] = None) -> str:
    """Draw ``grid`` with block separators.

    Cells whose value differs from ``previous`` (the grid's predecessor when
    not given) are wrapped in colour escapes unless ``highlight`` is off.
    """
    alphabet = get_notation(notation)
    n = grid.size
    if previous is None:
        previous = grid.predecessor
    if previous is not None and previous.size != n:
        previous = None

    lines: List[str] = [_rule("╭", "┬", "╮", n)]
    for r, row in enumerate(grid.cells):
        if r and r % n == 0:
            lines.append(_rule("├", "┼", "┤", n))
        chunks = []
        for b in range(n):
            text = ""
            for c in range(b * n, (b + 1) * n):
                symbol = alphabet.encode(row[c])
                if highlight and previous is not None and previous.cells[r][c] != row[c]:
                    symbol = HIGHLIGHT + symbol + RESET
                text += symbol
            chunks.append(text)
        lines.append("│ " + " │ ".join(chunks) + " │")
    lines.append(_rule("╰", "┴", "╯", n))
    return "\n".join(lines)


def render_plain(grid: Grid, notation: str | Notation = "hex") -> str:
    """One line of symbols per row, as accepted by ``Grid.from_text``."""
    alphabet = get_notation(notation)
    return "\n".join("".join(alphabet.encode(v) for v in row) for row in grid.cells)
