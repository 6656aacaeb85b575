"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Tuple

from somacube.config import CFG
from somacube.core.board import Board
from somacube.core.bitmask import Bitmask
from somacube.core.model import PuzzleError
from somacube.core.placement import Placement
from somacube.core.search import Solver

from . import display, parser

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, CFG.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_fix(value: str) -> Tuple[int, int]:
    """``"ID"`` or ``"ID:INDEX"`` -> (piece id, placement index)."""
    head, _, tail = value.partition(":")
    try:
        return int(head), int(tail) if tail else 0
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ID or ID:INDEX, got {value!r}") from None


def resolve_fix(board: Board, fix: Tuple[int, int]) -> Tuple[int, Bitmask]:
    pid, index = fix
    pieces = board.by_id()
    if pid not in pieces:
        raise PuzzleError(f"--fix names piece {pid}, but the puzzle has ids 0..{len(pieces) - 1}")
    placements = pieces[pid].placements
    if not 0 <= index < len(placements):
        raise PuzzleError(f"piece {pid} has {len(placements)} placements, no index {index}")
    return pid, placements[index]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Enumerate every way a set of polycubes fills a cube")
    ap.add_argument("puzzle", help="Path to puzzle file (.yaml or name,size line format)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    ap.add_argument("--distinct", action="store_true", help="Report each configuration once")
    ap.add_argument("--corners", action="store_true", help="Cover the grid corners first")
    ap.add_argument("--fix", type=parse_fix, metavar="ID[:INDEX]", help="Pre-place one piece before searching")
    ap.add_argument("--count-only", action="store_true", help="Print only the number of solutions")
    ap.add_argument("--dedup", action="store_true", help="Drop repeated placement masks per piece")
    ap.add_argument("--no-color", action="store_true", help="Plain output")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    use_color = False if args.no_color else None

    try:
        puz = parser.load_puzzle(Path(args.puzzle))
        board = parser.build_board(puz, dedup=True if args.dedup else None)
        fix = args.fix or (parse_fix(str(puz.options["fix"])) if "fix" in puz.options else None)
        fixed = resolve_fix(board, fix) if fix else None
    except (PuzzleError, OSError, argparse.ArgumentTypeError) as exc:
        logger.error("cannot load %s: %s", args.puzzle, exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(display.render_header(board))
    for piece in board.pieces:
        print(display.piece_summary(piece, use_color))

    def show(placement: Placement, count: int) -> None:
        if args.count_only:
            return
        print(f"\nSolution {count}")
        print(display.render_solution(board, placement, use_color))

    solver = Solver(board, on_solution=show, mode="distinct" if args.distinct or puz.options.get("distinct") else None)
    corners = board.grid.corners() if args.corners or puz.options.get("corners") else None
    total = solver.run(corners=corners, fixed=fixed)
    print(f"\n{total} solutions")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
