"""Occupancy bitmask over the cells of a grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Bitmask:
    """Immutable bit vector of ``width`` cells backed by a Python int."""
    bits: int
    width: int

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError(f"bitmask width must be positive, got {self.width}")
        if self.bits < 0 or self.bits >> self.width:
            raise ValueError(f"bits {self.bits:#x} do not fit in {self.width} cells")

    @classmethod
    def _raw(cls, bits: int, width: int) -> Bitmask:
        # Unchecked; only for results of operations on already valid masks.
        mask = object.__new__(cls)
        object.__setattr__(mask, "bits", bits)
        object.__setattr__(mask, "width", width)
        return mask

    @classmethod
    def empty(cls, width: int) -> Bitmask:
        return cls(0, width)

    @classmethod
    def full(cls, width: int) -> Bitmask:
        return cls((1 << width) - 1, width)

    @classmethod
    def from_raw(cls, bits: int, width: int) -> Bitmask:
        return cls(int(bits), width)

    def _check(self, other: Bitmask) -> None:
        if self.width != other.width:
            raise ValueError(f"bitmask width mismatch: {self.width} vs {other.width}")

    def __and__(self, other: Bitmask) -> Bitmask:
        self._check(other)
        return Bitmask._raw(self.bits & other.bits, self.width)

    def __or__(self, other: Bitmask) -> Bitmask:
        self._check(other)
        return Bitmask._raw(self.bits | other.bits, self.width)

    def __xor__(self, other: Bitmask) -> Bitmask:
        self._check(other)
        return Bitmask._raw(self.bits ^ other.bits, self.width)

    def __invert__(self) -> Bitmask:
        return Bitmask._raw(~self.bits & ((1 << self.width) - 1), self.width)

    def __bool__(self) -> bool:
        return self.bits != 0

    def set_bit(self, index: int) -> Bitmask:
        if not 0 <= index < self.width:
            raise IndexError(f"bit {index} outside 0..{self.width - 1}")
        return Bitmask._raw(self.bits | (1 << index), self.width)

    def get_bit(self, index: int) -> bool:
        if not 0 <= index < self.width:
            raise IndexError(f"bit {index} outside 0..{self.width - 1}")
        return (self.bits >> index) & 1 == 1

    def count(self) -> int:
        return self.bits.bit_count()

    def is_full(self) -> bool:
        return self.bits == (1 << self.width) - 1

    def indices(self) -> Iterator[int]:
        """Indices of the set bits, lowest first."""
        bits = self.bits
        while bits:
            low = bits & -bits
            yield low.bit_length() - 1
            bits ^= low

    def __repr__(self) -> str:
        digits = (self.width + 3) // 4
        return f"Bitmask(0x{self.bits:0{digits}x}, width={self.width})"
