from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..core.errors import FormatError
from ..core.grid import Grid
from ..core.ordering import CandidateOrder

# ANSI colour escapes and the box-drawing block (U+2500..U+257F)
_MARKUP = re.compile(r"\x1b\[[0-9;]*m|[─-╿]")


@dataclass
class SolverOptions:
    candidate_order: CandidateOrder = CandidateOrder.SHUFFLED
    seed: Optional[int] = None
    max_iterations: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Dict[str, Any] | None) -> "SolverOptions":
        data = data or {}
        unknown = set(data) - {"candidate_order", "seed", "max_iterations"}
        if unknown:
            raise FormatError(f"unknown solver options: {', '.join(sorted(unknown))}")
        try:
            order = CandidateOrder(data.get("candidate_order", CandidateOrder.SHUFFLED))
        except ValueError:
            raise FormatError(f"invalid candidate_order {data['candidate_order']!r}") from None
        seed = data.get("seed")
        max_iterations = data.get("max_iterations")
        for key, value in (("seed", seed), ("max_iterations", max_iterations)):
            if value is not None and not isinstance(value, int):
                raise FormatError(f"option {key} must be an integer, got {value!r}")
        return cls(candidate_order=order, seed=seed, max_iterations=max_iterations)


@dataclass
class Puzzle:
    grid: Grid
    name: str = "puzzle"
    notation: str = "hex"
    options: SolverOptions = field(default_factory=SolverOptions)


def strip_markup(text: str) -> str:
    """Drop colour escapes and box-drawing characters from rendered output."""
    return _MARKUP.sub("", text)


def parse_grid(text: str, size: int | None = None, notation: str = "hex") -> Grid:
    """Parse puzzle text, tolerating the markup produced by the renderer."""
    return Grid.from_text(strip_markup(text), size=size, notation=notation)


def load_puzzle(path: str | Path) -> Puzzle:
    """Load a YAML puzzle description into a Puzzle object."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise FormatError(f"{path}: not valid YAML: {exc}") from exc

    if not isinstance(data, dict) or "grid" not in data:
        raise FormatError(f"{path}: puzzle file needs a 'grid' entry")

    notation = str(data.get("notation", "hex"))
    size = data.get("size")
    if size is not None and not isinstance(size, int):
        raise FormatError(f"{path}: size must be an integer, got {size!r}")
    text = data["grid"]
    if not isinstance(text, str):
        raise FormatError(f"{path}: grid must be a string (quote it or use a | block), got {text!r}")
    grid = parse_grid(text, size=size, notation=notation)
    options = SolverOptions.from_mapping(data.get("options"))

    return Puzzle(
        grid=grid,
        name=str(data.get("name", Path(path).stem)),
        notation=notation,
        options=options,
    )
