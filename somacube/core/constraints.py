"""Overlap and feasibility checks used to prune the search."""

from __future__ import annotations

from typing import Iterable, Mapping

from .bitmask import Bitmask
from .piece import Piece


def is_valid(occupancy: Bitmask, mask: Bitmask) -> bool:
    """True when ``mask`` shares no cell with ``occupancy``."""
    return not (occupancy & mask)


def can_place(piece: Piece, occupancy: Bitmask) -> bool:
    return any(is_valid(occupancy, mask) for mask in piece.placements)


def still_possible(pieces: Mapping[int, Piece], occupancy: Bitmask, remaining: Iterable[int]) -> bool:
    """False as soon as one remaining piece has no placement left.

    Each piece is checked on its own; two pieces that each still fit but
    cannot fit together are not detected here.
    """
    return all(can_place(pieces[pid], occupancy) for pid in remaining)
