from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from somacube.config import CFG

from .bitmask import Bitmask
from .model import Block, PuzzleError


@dataclass(frozen=True)
class Grid:
    """A cube of ``size`` cells per edge; cell (x, y, z) is bit z*S*S + y*S + x."""
    size: int
    max_cells: Optional[int] = None

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise PuzzleError(f"grid edge must be positive, got {self.size}")
        limit = CFG.MAX_CELLS if self.max_cells is None else self.max_cells
        if self.cells > limit:
            raise PuzzleError(
                f"grid of edge {self.size} has {self.cells} cells, "
                f"more than the {limit}-cell occupancy bitmask"
            )

    @property
    def cells(self) -> int:
        return self.size ** 3

    @property
    def dims(self) -> Tuple[int, int, int]:
        return (self.size, self.size, self.size)

    def contains(self, block: Block) -> bool:
        s = self.size
        return 0 <= block.x < s and 0 <= block.y < s and 0 <= block.z < s

    def index(self, block: Block) -> int:
        s = self.size
        return block.z * s * s + block.y * s + block.x

    def empty(self) -> Bitmask:
        return Bitmask.empty(self.cells)

    def full(self) -> Bitmask:
        return Bitmask.full(self.cells)

    def cell_mask(self, block: Block) -> Bitmask:
        if not self.contains(block):
            raise PuzzleError(f"{block} lies outside a grid of edge {self.size}")
        return self.empty().set_bit(self.index(block))

    def corners(self) -> List[Bitmask]:
        """Single-cell masks for the eight vertices (fewer on an edge-1 grid)."""
        hi = self.size - 1
        seen: List[Bitmask] = []
        for z in (0, hi):
            for y in (0, hi):
                for x in (0, hi):
                    mask = self.cell_mask(Block(x, y, z))
                    if mask not in seen:
                        seen.append(mask)
        return seen
