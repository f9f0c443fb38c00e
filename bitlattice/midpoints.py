"""
Midpoint combinatorics between two comparable points.

With d the distance between the endpoints, the midpoints are the points of
the interval at rank d/2 above the lesser endpoint (d even), or at ranks
floor(d/2) and floor(d/2) + 1 (d odd). These are the maximally informative
binary splits a learner can probe between two known points.
"""

from __future__ import annotations

import logging
import math
import random
from itertools import combinations
from typing import TYPE_CHECKING, Hashable, Iterator, Optional, Sequence, TypeVar

from bitlattice.errors import IncomparableError

if TYPE_CHECKING:
    from bitlattice.bits import BitVector

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)


def _normalize(start: BitVector, end: BitVector) -> tuple[BitVector, BitVector]:
    if not start.comparable(end):
        raise IncomparableError(start, end)
    if start > end:
        return end, start
    return start, end


class Midpoints:
    """Every point at the middle rank(s) of [start, end].

    Lower rank first, then upper rank; lexicographic index-combination
    order within a rank. Yields nothing when start == end; for a distance
    of 1 the two middle ranks are the endpoints themselves.
    """

    def __init__(self, start: BitVector, end: BitVector) -> None:
        self.origin, self.target = _normalize(start, end)
        indices = list((self.origin ^ self.target).ones())
        size = len(indices)
        self.distance = size

        if size == 0:
            self.ranks: tuple[int, ...] = ()
        elif size % 2 == 0:
            self.ranks = (size // 2,)
        else:
            self.ranks = (size // 2, size // 2 + 1)
        self._combs = [combinations(indices, k) for k in self.ranks]
        logger.debug(
            "midpoints %s -> %s (distance=%d, ranks=%s)",
            self.origin, self.target, size, self.ranks,
        )

    @property
    def size(self) -> int:
        """Number of points the enumeration yields in total."""
        return sum(math.comb(self.distance, k) for k in self.ranks)

    def __iter__(self) -> Iterator[BitVector]:
        return self

    def __next__(self) -> BitVector:
        while self._combs:
            for ones in self._combs[0]:
                return self.origin.set_all(ones)
            self._combs.pop(0)
        raise StopIteration


def rand_combination(
    items: Sequence[T], k: int, rng: Optional[random.Random] = None
) -> set[T]:
    """Uniformly sample a k-subset of distinct `items` (Floyd's algorithm)."""
    n = len(items)
    if not 0 <= k <= n:
        raise ValueError(f"Cannot choose {k} of {n} items")
    rng = rng or random.Random()

    chosen: set[T] = set()
    for j in range(n - k, n):
        t = rng.randint(0, j)
        if items[t] not in chosen:
            chosen.add(items[t])
        else:
            chosen.add(items[j])
    return chosen


def rand_midpoint(
    start: BitVector, end: BitVector, rng: Optional[random.Random] = None
) -> BitVector:
    """One midpoint of [start, end], uniformly at random.

    For odd distances both middle ranks hold the same number of points,
    so picking a rank with a fair coin keeps the choice uniform.
    Returns the point itself when start == end.
    """
    origin, target = _normalize(start, end)
    rng = rng or random.Random()
    indices = list((origin ^ target).ones())
    size = len(indices)
    if size == 0:
        return origin

    k = size // 2
    if size % 2 == 1:
        k += rng.randint(0, 1)
    return origin.set_all(rand_combination(indices, k, rng))
