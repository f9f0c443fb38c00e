"""
Interval enumeration over the Boolean lattice.

Converge(start, end) yields every point of the closed interval between two
comparable points exactly once, beginning with `start`. The traversal is a
breadth-first frontier expansion over the implicit Hasse diagram:

- pending: FIFO of per-point Horizon generators, restricted to the
  coordinates where start and end differ
- seen: every point already emitted

Each step resumes the horizon at the front of the queue until it produces
an unseen point, emits it, and schedules that point's own horizon at the
back. A point therefore contributes one horizon to the frontier, no matter
how many of its neighbors reach it, and the queue never holds more than
one entry per emitted point.

UpperShadow and LowerShadow are Converge against the global top, the latter
through the complement.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING, Iterator

from bitlattice.errors import IncomparableError
from bitlattice.iterators import Horizon

if TYPE_CHECKING:
    from bitlattice.bits import BitVector

logger = logging.getLogger(__name__)


class Converge:
    """Every point between `start` and `end`, each exactly once."""

    def __init__(self, start: BitVector, end: BitVector) -> None:
        if not start.comparable(end):
            raise IncomparableError(start, end)

        self.origin = start
        self.target = end
        # Walk down when the caller starts from the greater endpoint
        self.reversed = start > end
        self._diff = start ^ end
        self._seen: set[BitVector] = {start}
        self._pending: deque[Horizon] = deque(
            [Horizon(start, self.reversed, self._diff)]
        )
        self._expanded = 1
        self._started = False
        logger.debug(
            "converge %s -> %s (distance=%d)", start, end, self._diff.count_ones()
        )

    @property
    def size(self) -> int:
        """Number of points the traversal emits in total."""
        return 1 << self._diff.count_ones()

    @property
    def frontier(self) -> int:
        """Horizons currently waiting in the queue."""
        return len(self._pending)

    @property
    def expanded(self) -> int:
        """Horizons scheduled so far, one per emitted point."""
        return self._expanded

    def __iter__(self) -> Iterator[BitVector]:
        return self

    def __next__(self) -> BitVector:
        if not self._started:
            self._started = True
            return self.origin

        while self._pending:
            horizon = self._pending.popleft()
            for candidate in horizon:
                if candidate in self._seen:
                    continue
                self._seen.add(candidate)
                self._pending.append(Horizon(candidate, self.reversed, self._diff))
                self._expanded += 1
                self._pending.appendleft(horizon)
                return candidate

        raise StopIteration

    def __repr__(self) -> str:
        return f"<Converge {self.origin} -> {self.target} seen={len(self._seen)}>"


class UpperShadow:
    """The principal filter of `origin`: every point reachable by setting bits."""

    def __init__(self, origin: BitVector) -> None:
        self._inner = Converge(origin, type(origin).one(len(origin)))

    def __iter__(self) -> Iterator[BitVector]:
        return self

    def __next__(self) -> BitVector:
        return next(self._inner)


class LowerShadow:
    """The principal ideal of `origin`: every point reachable by clearing bits."""

    def __init__(self, origin: BitVector) -> None:
        self._inner = UpperShadow(~origin)

    def __iter__(self) -> Iterator[BitVector]:
        return self

    def __next__(self) -> BitVector:
        return ~next(self._inner)
