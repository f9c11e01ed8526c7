"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from ..core.errors import FormatError
from ..core.model import SearchStatus
from ..core.ordering import CandidateOrder
from ..core.search import solve
from ..notations import NOTATION_REGISTRY
from . import parser, render

log = logging.getLogger(__name__)

SAMPLE_PUZZLE = """
306508400
520000000
087000031
003010080
900863005
050090600
130000250
000000074
005206300
"""


def _load(args: argparse.Namespace) -> parser.Puzzle:
    if args.puzzle is not None:
        return parser.load_puzzle(Path(args.puzzle))
    if args.grid is not None:
        notation = args.notation or "hex"
        grid = parser.parse_grid(args.grid, size=args.size, notation=notation)
        return parser.Puzzle(grid=grid, name="command line", notation=notation)
    grid = parser.parse_grid(SAMPLE_PUZZLE, notation="classic")
    return parser.Puzzle(grid=grid, name="sample", notation="classic")


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Backtracking Sudoku solver for 9x9, 16x16 and other N²xN² boards")
    ap.add_argument("puzzle", nargs="?", default=None, help="Path to puzzle YAML")
    ap.add_argument("--grid", help="Puzzle text, rows separated by newlines or '/'")
    ap.add_argument("--notation", choices=sorted(NOTATION_REGISTRY), help="Cell alphabet of --grid (default: hex)")
    ap.add_argument("--size", type=int, help="Block size N (default: inferred)")
    ap.add_argument("--order", choices=[o.value for o in CandidateOrder], help="Candidate order")
    ap.add_argument("--seed", type=int, help="Seed for the shuffled candidate order")
    ap.add_argument("--max-iterations", type=int, help="Give up after this many search iterations")
    ap.add_argument("--show-path", action="store_true", help="Print every grid on the final search stack")
    ap.add_argument("--no-color", action="store_true", help="Do not highlight changed cells")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log every search step")
    args = ap.parse_args(argv)
    if args.puzzle is not None and (args.notation is not None or args.size is not None):
        ap.error("--notation and --size apply to --grid only; a puzzle file names its own")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        puz = _load(args)
    except (FormatError, OSError) as exc:
        log.error("Cannot read puzzle: %s", exc)
        return 2

    opts = puz.options
    order = args.order or opts.candidate_order
    seed = args.seed if args.seed is not None else opts.seed
    max_iterations = args.max_iterations if args.max_iterations is not None else opts.max_iterations

    print(f"Solving {puz.name} ({puz.grid.side}x{puz.grid.side}):")
    print(render.render(puz.grid, puz.notation, highlight=False))
    result = solve(puz.grid, order=order, seed=seed, max_iterations=max_iterations)

    if args.show_path:
        for grid in result.path:
            print(render.render(grid, puz.notation, highlight=not args.no_color))
            print()
    elif result.solved:
        print(render.render(result.solution, puz.notation, highlight=not args.no_color,
                            previous=puz.grid))

    stats = result.stats
    print(f"{result.status.value}: {stats.iterations} iterations, {stats.forks} forks, "
          f"{stats.jumps} jumps, {stats.backtracks} backtracks, max depth {stats.max_depth}")
    return 0 if result.status is SearchStatus.SOLVED else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
