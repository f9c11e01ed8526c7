import pytest

from hexsudoku.core.grid import Grid

CLASSIC = "306508400/520000000/087000031/003010080/900863005/050090600/130000250/000000074/005206300"

HEX_DIGITS = "0123456789abcdef"


def pattern_solution(size):
    """A valid completed board: cell (r, c) holds (N*(r%N) + r//N + c) mod N²."""
    side = size * size
    return [[(size * (r % size) + r // size + c) % side for c in range(side)] for r in range(side)]


def hex16_text(blank=lambda r, c: (c - r) % 4 == 0):
    rows = pattern_solution(4)
    return "".join(
        "." if blank(r, c) else HEX_DIGITS[v]
        for r, row in enumerate(rows) for c, v in enumerate(row)
    )


@pytest.fixture
def classic_grid():
    return Grid.from_text(CLASSIC, notation="classic")


@pytest.fixture
def hex16_grid():
    return Grid.from_text(hex16_text())
