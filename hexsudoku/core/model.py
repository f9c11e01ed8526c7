from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Tuple


class Coordinate(NamedTuple):
    """Zero-based (row, col) position on the board."""
    row: int
    col: int


@dataclass(frozen=True)
class Step:
    """An empty cell together with the values still legal for it."""
    coord: Coordinate
    candidates: Tuple[int, ...]

    @property
    def is_forced(self) -> bool:
        return len(self.candidates) == 1


class GridState(str, Enum):
    """Classification of a grid by the step deriver."""
    SOLVED = "solved"
    BLOCKED = "blocked"
    FORCED = "forced"
    OPEN = "open"


class FrameState(str, Enum):
    """Progress of one search frame through its branches."""
    FRESH = "fresh"
    TRYING = "trying"
    EXHAUSTED = "exhausted"


class SearchStatus(str, Enum):
    """Overall state of a search run."""
    RUNNING = "running"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    ABANDONED = "abandoned"
