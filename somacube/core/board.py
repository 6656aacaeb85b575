from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .grid import Grid
from .model import PuzzleError
from .piece import Piece


@dataclass(frozen=True)
class Board:
    """A named puzzle: the grid to fill and the pieces to fill it with."""
    name: str
    grid: Grid
    pieces: Tuple[Piece, ...]

    def __post_init__(self) -> None:
        ids = [p.piece_id for p in self.pieces]
        if len(set(ids)) != len(ids):
            raise PuzzleError(f"duplicate piece ids in puzzle {self.name!r}")

    @property
    def piece_ids(self) -> Tuple[int, ...]:
        return tuple(p.piece_id for p in self.pieces)

    def by_id(self) -> Dict[int, Piece]:
        return {p.piece_id: p for p in self.pieces}

    def volume(self) -> int:
        return sum(p.size for p in self.pieces)
