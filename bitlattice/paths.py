"""
Monotone path enumeration between two comparable points.

A monotone path flips one differing coordinate per step, so every ordering
of the d differing coordinates is one path and there are d! of them. Paths
are produced depth-first from an explicit stack of (point, path-so-far)
pairs, in lexicographic order of the flipped indices; memory grows with the
number of partial paths in flight, never with d!.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator

from bitlattice.errors import IncomparableError

if TYPE_CHECKING:
    from bitlattice.bits import BitVector

logger = logging.getLogger(__name__)

Path = tuple["BitVector", ...]


class Paths:
    """Every monotone single-bit-flip path from `start` to `end`.

    Each path is a tuple [start, ..., end]. When `start` is the greater
    endpoint the walk runs upward internally and every path is reversed
    before it is emitted.
    """

    def __init__(self, start: BitVector, end: BitVector) -> None:
        if not start.comparable(end):
            raise IncomparableError(start, end)

        self.reversed = start > end
        if self.reversed:
            self.origin, self.target = end, start
        else:
            self.origin, self.target = start, end

        self._trivial = self.origin == self.target
        base: Path = (self.origin,)
        # Pushed in reverse so the lowest index is popped first
        self._pending: list[tuple[BitVector, Path]] = [
            (self.origin.set(i), base)
            for i in reversed(list((self.origin ^ self.target).ones()))
        ]
        logger.debug(
            "paths %s -> %s (distance=%d)",
            start, end, (self.origin ^ self.target).count_ones(),
        )

    def __iter__(self) -> Iterator[Path]:
        return self

    def __next__(self) -> Path:
        if self._trivial:
            self._trivial = False
            return (self.origin,)

        while self._pending:
            cursor, base = self._pending.pop()
            path = base + (cursor,)

            if cursor == self.target:
                return tuple(reversed(path)) if self.reversed else path

            remaining = list((cursor ^ self.target).ones())
            for i in reversed(remaining):
                self._pending.append((cursor.set(i), path))

        raise StopIteration
