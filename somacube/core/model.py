from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class PuzzleError(ValueError):
    """Raised when a puzzle, grid or piece cannot be built."""


class Color(str, Enum):
    """Colour tag of a piece; only the display layer gives it meaning."""
    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"
    WHITE = "white"
    GREEN = "green"
    CYAN = "cyan"
    MAGENTA = "magenta"


@dataclass(frozen=True)
class Block:
    """One unit cube of a piece, as an integer grid coordinate."""
    x: int
    y: int
    z: int

    def __add__(self, other: Block) -> Block:
        return Block(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Block) -> Block:
        return Block(self.x - other.x, self.y - other.y, self.z - other.z)

    def translate(self, dx: int, dy: int, dz: int) -> Block:
        return Block(self.x + dx, self.y + dy, self.z + dz)

