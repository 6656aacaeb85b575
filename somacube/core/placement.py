"""Mutable search state: what is on the board and in which order it went down."""

from __future__ import annotations

from contextlib import contextmanager
from typing import FrozenSet, Iterator, List, Optional, Tuple

from .bitmask import Bitmask
from .grid import Grid

Decision = Tuple[int, Bitmask]


class Placement:
    """Occupancy plus the stack of (piece id, mask) decisions that produced it.

    ``occupancy`` is always the union of the masks on the stack.  Masks on the
    stack never overlap, so popping removes exactly the pushed bits via XOR.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.occupancy: Bitmask = grid.empty()
        self._stack: List[Decision] = []

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def decisions(self) -> Tuple[Decision, ...]:
        return tuple(self._stack)

    def placed_ids(self) -> Tuple[int, ...]:
        return tuple(pid for pid, _ in self._stack)

    def push(self, piece_id: int, mask: Bitmask) -> None:
        if self.occupancy & mask:
            raise ValueError(f"piece {piece_id} overlaps the current occupancy")
        self.occupancy = self.occupancy | mask
        self._stack.append((piece_id, mask))

    def pop(self) -> Decision:
        piece_id, mask = self._stack.pop()
        self.occupancy = self.occupancy ^ mask
        return piece_id, mask

    @contextmanager
    def placed(self, piece_id: int, mask: Bitmask) -> Iterator["Placement"]:
        """Push for the duration of the block; always undone on exit."""
        self.push(piece_id, mask)
        try:
            yield self
        finally:
            self.pop()

    def assignment(self) -> FrozenSet[Tuple[int, int]]:
        """Order-free key of the current configuration."""
        return frozenset((pid, mask.bits) for pid, mask in self._stack)

    def owner_of(self, index: int) -> Optional[int]:
        """Piece id covering cell ``index``, or None."""
        for pid, mask in self._stack:
            if mask.get_bit(index):
                return pid
        return None
