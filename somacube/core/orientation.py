"""Piece orientations and the 24-element cube rotation walk."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, List, Tuple

from .model import Block


class Direction(Enum):
    """Primitive quarter turns used to walk the rotation group."""
    NEXT = "next"
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter-clockwise"


def _turn(block: Block, direction: Direction) -> Block:
    if direction is Direction.NEXT:
        return Block(block.x, block.z, -block.y)
    if direction is Direction.CLOCKWISE:
        return Block(block.z, block.y, -block.x)
    return Block(-block.z, block.y, block.x)


@dataclass(frozen=True)
class Orientation:
    """One rotation of a piece: its blocks in input order."""
    blocks: Tuple[Block, ...]

    @classmethod
    def of(cls, coords: Iterable[Tuple[int, int, int]]) -> Orientation:
        return cls(tuple(Block(int(x), int(y), int(z)) for x, y, z in coords))

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)

    def cells(self) -> FrozenSet[Block]:
        return frozenset(self.blocks)

    def normalise(self) -> Orientation:
        """Translate so the minimum coordinate on every axis is 0."""
        if not self.blocks:
            return self
        min_x = min(b.x for b in self.blocks)
        min_y = min(b.y for b in self.blocks)
        min_z = min(b.z for b in self.blocks)
        return Orientation(tuple(b.translate(-min_x, -min_y, -min_z) for b in self.blocks))

    def rotate(self, direction: Direction) -> Orientation:
        return Orientation(tuple(_turn(b, direction) for b in self.blocks))

    def translate(self, dx: int, dy: int, dz: int) -> Orientation:
        return Orientation(tuple(b.translate(dx, dy, dz) for b in self.blocks))

    def similar(self, other: Orientation) -> bool:
        """True when both hold exactly the same block coordinates."""
        return len(self.blocks) == len(other.blocks) and self.cells() == other.cells()

    def all_orientations(self) -> List[Orientation]:
        """Every distinct proper rotation of this shape, normalised.

        Spins three times about the vertical axis, then tips the shape onto the
        next face, six times over with the spin direction alternating.  That
        walk passes through all 24 cube rotations; repeats are dropped.
        """
        if not self.blocks:
            return []

        found: List[Orientation] = []

        def keep(candidate: Orientation) -> None:
            if all(not o.similar(candidate) for o in found):
                found.append(candidate)

        ori = self.normalise()
        found.append(ori)
        clockwise = True
        for _face in range(6):
            spin = Direction.CLOCKWISE if clockwise else Direction.COUNTER_CLOCKWISE
            for _turn_no in range(3):
                ori = ori.rotate(spin).normalise()
                keep(ori)
            ori = ori.rotate(Direction.NEXT).normalise()
            keep(ori)
            clockwise = not clockwise
        return found
