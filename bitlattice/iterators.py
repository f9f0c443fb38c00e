"""
Neighbor iterators over a single BitVector.

Zeroes / Ones scan the coordinates left to right and yield indices.
Horizon is the "expand one step" primitive every traversal is built on:
the points one bit-flip away, moving strictly up or strictly down.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from bitlattice.bits import BitVector


class Zeroes:
    """Indices of the unset coordinates, in increasing order."""

    def __init__(self, bits: BitVector) -> None:
        self._bits = bits
        self._cursor = 0

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        while self._cursor < len(self._bits):
            i = self._cursor
            self._cursor += 1
            if not self._bits[i]:
                return i
        raise StopIteration


class Ones:
    """Indices of the set coordinates: the Zeroes of the complement."""

    def __init__(self, bits: BitVector) -> None:
        self._inner = Zeroes(~bits)

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        return next(self._inner)


class Horizon:
    """Points at Hamming distance 1 from `origin` in one direction.

    lower=False sets one unset bit at a time (toward the top),
    lower=True clears one set bit at a time (toward the bottom).
    An optional `mask` restricts the flipped coordinates to its set bits.
    """

    def __init__(
        self,
        origin: BitVector,
        lower: bool,
        mask: Optional[BitVector] = None,
    ) -> None:
        self.origin = origin
        self.lower = lower
        candidates = origin if lower else ~origin
        if mask is not None:
            candidates = candidates & mask
        self._indices = Ones(candidates)

    def __iter__(self) -> Iterator[BitVector]:
        return self

    def __next__(self) -> BitVector:
        i = next(self._indices)
        return self.origin.set(i, not self.lower)

    def __repr__(self) -> str:
        direction = "down" if self.lower else "up"
        return f"<Horizon {self.origin} {direction}>"
