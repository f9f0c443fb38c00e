"""
Monotone-function oracle and frontier learner.

These are the consumers of the lattice engine: a MonotoneFunction answers
membership queries for a fixed set of implicants, and a Learner probes it
at lattice midpoints to build a lower frontier (points known false) and an
upper frontier (points known true).

Usage:
    f = MonotoneFunction([BitVector.parse("1010")])
    learner = Learner(f, rng=random.Random(7))
    learner.iterate()
    learner.upper_frontier | learner.lower_frontier   # one probed point
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from bitlattice.bits import BitVector
from bitlattice.errors import WidthMismatchError

logger = logging.getLogger(__name__)

# Node labels shared with the graph exporter
LOWER = "L"
UPPER = "U"
EXCLUDED = "X"
UNKNOWN = ""


class MonotoneFunction:
    """A monotone Boolean function given by its implicants.

    f(x) is true iff some implicant a is contained in x (a & x == a).
    Implicants that strictly dominate another implicant are redundant and
    dropped, leaving only the minimal ones.
    """

    def __init__(self, implicants: Iterable[BitVector]) -> None:
        implicants = list(implicants)
        if not implicants:
            raise ValueError("A monotone function needs at least one implicant")

        width = len(implicants[0])
        for a in implicants:
            if len(a) != width:
                raise WidthMismatchError(width, len(a))

        self.width = width
        self.implicants: frozenset[BitVector] = frozenset(
            a for a in implicants if not any(a > b for b in implicants)
        )

    def __call__(self, x: BitVector) -> bool:
        return any(a & x == a for a in self.implicants)

    def __repr__(self) -> str:
        terms = ", ".join(sorted(str(a) for a in self.implicants))
        return f"<MonotoneFunction N={self.width} implicants=[{terms}]>"


class Learner:
    """Active learner for the frontiers of a monotone function."""

    def __init__(
        self,
        oracle: MonotoneFunction,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.oracle = oracle
        self.width = oracle.width
        self.lower_frontier: set[BitVector] = set()
        self.upper_frontier: set[BitVector] = set()
        self.iterations = 0
        self._rng = rng or random.Random()

    def iterate(self) -> None:
        """Advance one step.

        The first step probes a random midpoint of the whole cube, which
        splits the lattice as evenly as any single query can.
        """
        if self.iterations == 0:
            bottom = BitVector.zero(self.width)
            top = BitVector.one(self.width)
            x = bottom.rand_midpoint(top, self._rng)
            value = self.oracle(x)
            if value:
                self.upper_frontier.add(x)
            else:
                self.lower_frontier.add(x)
            logger.debug("probe %s -> %s", x, value)

        self.iterations += 1

    def classify(self, x: BitVector) -> str:
        """Label a point relative to the frontiers.

        "L" / "U" for frontier members, "X" for points strictly below a
        lower-frontier point or strictly above an upper-frontier point,
        "" for points the learner knows nothing about.
        """
        for implicant in self.lower_frontier:
            if x == implicant:
                return LOWER
            if x < implicant:
                return EXCLUDED
        for implicant in self.upper_frontier:
            if x == implicant:
                return UPPER
            if x > implicant:
                return EXCLUDED
        return UNKNOWN

    def __repr__(self) -> str:
        return (
            f"<Learner N={self.width} iterations={self.iterations} "
            f"lower={len(self.lower_frontier)} upper={len(self.upper_frontier)}>"
        )
