"""
bitlattice BitVector: a point of the Boolean hypercube {0,1}^N

A BitVector is an immutable, fixed-width tuple of booleans. Index 0 is the
most-significant coordinate, both for text and for integer conversion:

    BitVector.parse("10001")        -> <BitVector 10001>
    BitVector.from_uint(17, 5)      -> <BitVector 10001>

The vectors are ordered coordinatewise (the subset order): a <= b iff every
bit set in a is also set in b. Like frozenset, this is a partial order, so
two vectors can be neither <= nor >= each other. The traversal generators
(converge, midpoints, paths) only exist between comparable points and refuse
to be built otherwise.

Usage:
    a = BitVector.parse("10001")
    b = BitVector.parse("11111")
    a.distance(b)                   # 3
    list(a.converge(b))             # the 8 points of [a, b]
    list(a.paths(b))                # the 6 monotone paths a -> b
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

from bitlattice.converge import Converge, LowerShadow, UpperShadow
from bitlattice.errors import (
    BitOverflowError,
    IncomparableError,
    LengthMismatchError,
    NonBinaryError,
    WidthMismatchError,
)
from bitlattice.iterators import Horizon, Ones, Zeroes
from bitlattice.midpoints import Midpoints, rand_midpoint
from bitlattice.paths import Paths

# Integer widths accepted by from_uint (u8 .. u128)
SUPPORTED_WIDTHS = (8, 16, 32, 64, 128)


class Ordering(Enum):
    """Result of a partial comparison between two comparable points."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class BitVector:
    """An immutable point of {0,1}^N.

    Equality and hashing are structural. All binary operations require
    both operands to share the same width.
    """
    bits: tuple[bool, ...]

    def __post_init__(self) -> None:
        if isinstance(self.bits, str):
            raise TypeError(
                f"BitVector needs booleans, got text {self.bits!r}; use BitVector.parse"
            )
        bits = tuple(self.bits)
        for i, b in enumerate(bits):
            if b not in (0, 1):
                raise ValueError(f"Coordinate {i} is not a bit: {b!r}")
        object.__setattr__(self, "bits", tuple(bool(b) for b in bits))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def filled(cls, n: int, value: bool) -> BitVector:
        if n < 0:
            raise ValueError(f"Width must be non-negative, got {n}")
        return cls((bool(value),) * n)

    @classmethod
    def zero(cls, n: int) -> BitVector:
        """The bottom element: all coordinates false."""
        return cls.filled(n, False)

    @classmethod
    def one(cls, n: int) -> BitVector:
        """The top element: all coordinates true."""
        return cls.filled(n, True)

    @classmethod
    def parse(cls, text: str, n: Optional[int] = None) -> BitVector:
        """Parse a string of '0'/'1' characters.

        Raises LengthMismatchError if `n` is given and the string has a
        different length, NonBinaryError on any other character.
        """
        if n is not None and len(text) != n:
            raise LengthMismatchError(text, n)
        bits = []
        for i, c in enumerate(text):
            if c == "0":
                bits.append(False)
            elif c == "1":
                bits.append(True)
            else:
                raise NonBinaryError(text, i)
        return cls(tuple(bits))

    @classmethod
    def from_uint(cls, value: int, n: int, width: Optional[int] = None) -> BitVector:
        """Convert an unsigned integer of a supported width into N coordinates.

        Bit i of `value` lands at index n - 1 - i. If any set bit falls at
        i >= n the whole conversion fails with BitOverflowError.

        Args:
            value: Unsigned integer to convert
            n: Number of coordinates of the result
            width: Integer width in bits (8/16/32/64/128); defaults to the
                smallest supported width that holds `value`
        """
        if n < 0:
            raise ValueError(f"Width must be non-negative, got {n}")
        if value < 0:
            raise ValueError(f"Expected an unsigned integer, got {value}")
        if width is None:
            width = next((w for w in SUPPORTED_WIDTHS if value < 1 << w), None)
            if width is None:
                raise ValueError(f"{value:#x} exceeds the widest supported integer")
        elif width not in SUPPORTED_WIDTHS:
            raise ValueError(f"Unsupported integer width {width}, use one of {SUPPORTED_WIDTHS}")
        elif value >= 1 << width:
            raise ValueError(f"{value:#x} is not a u{width}")

        bits = [False] * n
        for i in range(width):
            if (value >> i) & 0x01:
                if i + 1 > n:
                    raise BitOverflowError(value, n)
                bits[n - i - 1] = True
        return cls(tuple(bits))

    def to_uint(self) -> int:
        """Inverse of from_uint: index 0 is the most-significant bit."""
        value = 0
        for b in self.bits:
            value = (value << 1) | int(b)
        return value

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.bits)

    def __getitem__(self, index: Union[int, slice]):
        return self.bits[index]

    def __iter__(self):
        return iter(self.bits)

    def set(self, index: int, value: bool = True) -> BitVector:
        """Return a copy with coordinate `index` set to `value`."""
        bits = list(self.bits)
        bits[index] = bool(value)
        return BitVector(tuple(bits))

    def set_all(self, indices: Iterable[int], value: bool = True) -> BitVector:
        """Return a copy with every coordinate in `indices` set to `value`."""
        bits = list(self.bits)
        for i in indices:
            bits[i] = bool(value)
        return BitVector(tuple(bits))

    def flip(self, index: int) -> BitVector:
        return self.set(index, not self.bits[index])

    def count_ones(self) -> int:
        return sum(self.bits)

    def count_zeroes(self) -> int:
        return len(self.bits) - sum(self.bits)

    def and_reduce(self) -> bool:
        """True iff every coordinate is set (the vector is the top)."""
        return all(self.bits)

    def or_reduce(self) -> bool:
        """True iff any coordinate is set (the vector is not the bottom)."""
        return any(self.bits)

    # ------------------------------------------------------------------
    # Bitwise algebra
    # ------------------------------------------------------------------

    def _check_width(self, other: BitVector) -> None:
        if len(self.bits) != len(other.bits):
            raise WidthMismatchError(len(self.bits), len(other.bits))

    def __and__(self, other: BitVector) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        self._check_width(other)
        return BitVector(tuple(a and b for a, b in zip(self.bits, other.bits)))

    def __or__(self, other: BitVector) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        self._check_width(other)
        return BitVector(tuple(a or b for a, b in zip(self.bits, other.bits)))

    def __xor__(self, other: BitVector) -> BitVector:
        if not isinstance(other, BitVector):
            return NotImplemented
        self._check_width(other)
        return BitVector(tuple(a != b for a, b in zip(self.bits, other.bits)))

    def __invert__(self) -> BitVector:
        return BitVector(tuple(not b for b in self.bits))

    def __lshift__(self, k: int) -> BitVector:
        """Move every coordinate k positions toward index 0."""
        if k < 0:
            raise ValueError(f"Negative shift: {k}")
        n = len(self.bits)
        if k >= n:
            return BitVector.zero(n)
        return BitVector(self.bits[k:] + (False,) * k)

    def __rshift__(self, k: int) -> BitVector:
        """Move every coordinate k positions away from index 0."""
        if k < 0:
            raise ValueError(f"Negative shift: {k}")
        n = len(self.bits)
        if k >= n:
            return BitVector.zero(n)
        return BitVector((False,) * k + self.bits[: n - k])

    # ------------------------------------------------------------------
    # Partial order
    # ------------------------------------------------------------------

    def __le__(self, other: BitVector) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        self._check_width(other)
        return all(b or not a for a, b in zip(self.bits, other.bits))

    def __ge__(self, other: BitVector) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return other.__le__(self)

    def __lt__(self, other: BitVector) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self <= other and self != other

    def __gt__(self, other: BitVector) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return other <= self and self != other

    def partial_cmp(self, other: BitVector) -> Optional[Ordering]:
        """Compare under the subset order; None when incomparable."""
        if self == other:
            return Ordering.EQUAL
        if self <= other:
            return Ordering.LESS
        if other <= self:
            return Ordering.GREATER
        return None

    def comparable(self, other: BitVector) -> bool:
        return self.partial_cmp(other) is not None

    def distance(self, other: BitVector) -> int:
        """Hamming distance to a comparable point.

        Raises IncomparableError for unrelated points: the distance is only
        meaningful along a chain of the lattice.
        """
        if not self.comparable(other):
            raise IncomparableError(self, other)
        return (self ^ other).count_ones()

    # ------------------------------------------------------------------
    # Traversal
    # ------------------------------------------------------------------

    def zeroes(self) -> Zeroes:
        return Zeroes(self)

    def ones(self) -> Ones:
        return Ones(self)

    def horizon(self, lower: bool) -> Horizon:
        return Horizon(self, lower)

    def upper_shadow(self) -> UpperShadow:
        return UpperShadow(self)

    def lower_shadow(self) -> LowerShadow:
        return LowerShadow(self)

    def converge(self, other: BitVector) -> Converge:
        return Converge(self, other)

    def midpoints(self, other: BitVector) -> Midpoints:
        return Midpoints(self, other)

    def rand_midpoint(self, other: BitVector, rng: Optional[random.Random] = None) -> BitVector:
        return rand_midpoint(self, other, rng)

    def paths(self, other: BitVector) -> Paths:
        return Paths(self, other)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return "".join("1" if b else "0" for b in self.bits)

    def __repr__(self) -> str:
        return f"<BitVector {self}>"
