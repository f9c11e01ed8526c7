"""Order in which a cell's candidate values are tried."""

from __future__ import annotations

import random
from enum import Enum
from typing import Callable, Optional, Tuple

Orderer = Callable[[Tuple[int, ...]], Tuple[int, ...]]


class CandidateOrder(str, Enum):
    ASCENDING = "ascending"
    SHUFFLED = "shuffled"


def ascending(candidates: Tuple[int, ...]) -> Tuple[int, ...]:
    return tuple(sorted(candidates))


class Shuffled:
    """Random candidate order drawn from a private, optionally seeded RNG."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.rng = random.Random(seed)

    def __call__(self, candidates: Tuple[int, ...]) -> Tuple[int, ...]:
        values = list(candidates)
        self.rng.shuffle(values)
        return tuple(values)


def make_orderer(order: CandidateOrder | str = CandidateOrder.SHUFFLED,
                 seed: Optional[int] = None) -> Orderer:
    order = CandidateOrder(order)
    if order is CandidateOrder.ASCENDING:
        return ascending
    return Shuffled(seed)
