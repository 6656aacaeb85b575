"""Backtracking enumeration of exact covers."""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Set, Tuple

from somacube.config import CFG, REPORT_MODES

from .bitmask import Bitmask
from .board import Board
from .constraints import is_valid, still_possible
from .placement import Placement

logger = logging.getLogger(__name__)

SolutionCallback = Callable[[Placement, int], None]


class Solver:
    """Enumerates every way the board's pieces fill its grid.

    In ``every`` mode each search leaf is reported, so one configuration is
    reported once per insertion order that reaches it.  ``distinct`` mode
    reports each piece assignment once.
    """

    def __init__(self, board: Board, on_solution: Optional[SolutionCallback] = None, mode: Optional[str] = None):
        mode = (mode or CFG.REPORT_MODE).strip().lower()
        if mode not in REPORT_MODES:
            raise ValueError(f"unknown report mode {mode!r}; expected one of {', '.join(REPORT_MODES)}")
        self.board = board
        self.pieces = board.by_id()
        self.on_solution = on_solution
        self.mode = mode
        self.solutions = 0
        self.nodes = 0
        self.pruned = 0
        self._seen: Set[frozenset] = set()

    def reset(self) -> None:
        self.solutions = 0
        self.nodes = 0
        self.pruned = 0
        self._seen.clear()

    def stats(self) -> Dict[str, int]:
        return {"solutions": self.solutions, "nodes": self.nodes, "pruned": self.pruned}

    def is_valid(self, placement: Placement, mask: Bitmask) -> bool:
        return is_valid(placement.occupancy, mask)

    def still_possible(self, occupancy: Bitmask, remaining: Sequence[int]) -> bool:
        return still_possible(self.pieces, occupancy, remaining)

    # ---------- search ----------

    def _report(self, placement: Placement) -> None:
        if self.mode == "distinct":
            key = placement.assignment()
            if key in self._seen:
                return
            self._seen.add(key)
        self.solutions += 1
        if CFG.PROGRESS_EVERY > 0 and self.solutions % CFG.PROGRESS_EVERY == 0:
            logger.info("%d solutions so far (%d nodes)", self.solutions, self.nodes)
        if self.on_solution is not None:
            self.on_solution(placement, self.solutions)

    def _moves(
        self, placement: Placement, remaining: Tuple[int, ...], corner: Optional[Bitmask] = None
    ) -> Iterator[Tuple[int, Bitmask, Tuple[int, ...]]]:
        """Yield (piece id, mask, ids left afterwards) for every move that survives pruning."""
        occupancy = placement.occupancy
        for pid in remaining:
            rest = tuple(r for r in remaining if r != pid)
            for mask in self.pieces[pid].placements:
                if not is_valid(occupancy, mask):
                    continue
                if corner is not None and not (mask & corner):
                    continue
                if not still_possible(self.pieces, occupancy | mask, rest):
                    self.pruned += 1
                    continue
                yield pid, mask, rest

    def solve(self, placement: Placement, remaining: Sequence[int]) -> None:
        """Try every remaining piece at every free placement, recursively."""
        remaining = tuple(remaining)
        self.nodes += 1
        if not remaining:
            if placement.occupancy.is_full():
                self._report(placement)
            return
        for pid, mask, rest in self._moves(placement, remaining):
            with placement.placed(pid, mask):
                self.solve(placement, rest)

    def corner_solve(self, placement: Placement, corners: Sequence[Bitmask], remaining: Sequence[int]) -> None:
        """Cover each listed corner cell first, then fall through to ``solve``."""
        corners = list(corners)
        remaining = tuple(remaining)
        if not corners:
            self.solve(placement, remaining)
            return
        corner = corners.pop()
        self.nodes += 1
        if placement.occupancy & corner:
            self.corner_solve(placement, corners, remaining)
            return
        for pid, mask, rest in self._moves(placement, remaining, corner=corner):
            with placement.placed(pid, mask):
                self.corner_solve(placement, corners, rest)

    # ---------- driver ----------

    def run(
        self,
        corners: Optional[Sequence[Bitmask]] = None,
        fixed: Optional[Tuple[int, Bitmask]] = None,
    ) -> int:
        """Enumerate from an empty board and return the number of reports.

        ``fixed`` pre-places one (piece id, mask) before searching, which
        removes whole-board rotations of the same answer.  ``corners`` switches
        to corner-first search.
        """
        self.reset()
        grid = self.board.grid
        placement = Placement(grid)
        remaining: List[int] = list(self.board.piece_ids)

        volume = self.board.volume()
        if volume != grid.cells:
            logger.warning(
                "pieces cover %d cells but the grid has %d; no exact cover exists",
                volume, grid.cells,
            )

        if fixed is not None:
            pid, mask = fixed
            if pid not in self.pieces:
                raise ValueError(f"cannot fix unknown piece id {pid}")
            if mask not in self.pieces[pid].placements:
                raise ValueError(f"{mask!r} is not a placement of piece {pid}")
            placement.push(pid, mask)
            remaining.remove(pid)
            logger.info("pre-placed piece %s at %r", pid, mask)

        logger.info(
            "searching %r: %d pieces on a %dx%dx%d grid (%s mode%s)",
            self.board.name, len(self.pieces), *grid.dims, self.mode,
            ", corners first" if corners else "",
        )
        started = time.time()
        if corners:
            self.corner_solve(placement, corners, remaining)
        else:
            self.solve(placement, remaining)
        logger.info(
            "search finished in %.2fs: %d solutions, %d nodes, %d pruned",
            time.time() - started, self.solutions, self.nodes, self.pruned,
        )
        return self.solutions
