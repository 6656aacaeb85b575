from __future__ import annotations

import logging
import string
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from somacube.config import CFG

from .bitmask import Bitmask
from .grid import Grid
from .model import Color, PuzzleError
from .orientation import Orientation

logger = logging.getLogger(__name__)

CHAR_IDS = string.digits + string.ascii_uppercase
MAX_PIECES = len(CHAR_IDS)


def placements_for(orientations: Sequence[Orientation], grid: Grid, dedup: bool = False) -> List[Bitmask]:
    """Every in-bounds footprint of every orientation on ``grid``.

    Each orientation is tried at all S**3 offsets; an offset that pushes any
    block outside the grid is dropped whole.  The same footprint reached from
    two orientations is kept twice unless ``dedup`` is set.
    """
    out: List[Bitmask] = []
    seen = set()
    s = grid.size
    for ori in orientations:
        for dz in range(s):
            for dy in range(s):
                for dx in range(s):
                    mask = grid.empty()
                    for block in ori.translate(dx, dy, dz):
                        if not grid.contains(block):
                            break
                        mask = mask.set_bit(grid.index(block))
                    else:
                        if dedup:
                            if mask.bits in seen:
                                continue
                            seen.add(mask.bits)
                        out.append(mask)
    return out


@dataclass(frozen=True)
class Piece:
    """A puzzle piece with its orientations and placements fixed at build time."""
    piece_id: int
    name: str
    color: Color
    size: int
    orientations: Tuple[Orientation, ...]
    placements: Tuple[Bitmask, ...]

    def __post_init__(self) -> None:
        if not 0 <= self.piece_id < MAX_PIECES:
            raise PuzzleError(f"Invalid piece id {self.piece_id}: must be 0..{MAX_PIECES - 1}")

    @classmethod
    def build(
        cls,
        piece_id: int,
        name: str,
        color: Color,
        orientation: Orientation,
        grid: Grid,
        dedup: Optional[bool] = None,
    ) -> Piece:
        if dedup is None:
            dedup = CFG.DEDUP_PLACEMENTS
        orientations = tuple(orientation.all_orientations())
        placements = tuple(placements_for(orientations, grid, dedup=dedup))
        logger.debug(
            "piece %s (%s): %d blocks, %d orientations, %d placements",
            piece_id, name, len(orientation), len(orientations), len(placements),
        )
        return cls(
            piece_id=piece_id,
            name=name,
            color=color,
            size=len(orientation),
            orientations=orientations,
            placements=placements,
        )

    @property
    def char_id(self) -> str:
        return CHAR_IDS[self.piece_id]
