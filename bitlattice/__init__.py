"""
bitlattice - Boolean lattice toolkit
Points of the hypercube {0,1}^N under the subset order, and the lazy
generators that walk the structure between them.

Core: BitVector, its partial order, and its traversals (horizon, shadows,
      converge, midpoints, paths)
Consumers: MonotoneFunction oracle, frontier Learner, LatticeGraph export
"""

__version__ = "0.1.0"

from bitlattice.bits import BitVector, Ordering, SUPPORTED_WIDTHS
from bitlattice.errors import (
    LatticeError,
    IncomparableError,
    ParseBitsError,
    ParseFailure,
    LengthMismatchError,
    NonBinaryError,
    BitOverflowError,
    WidthMismatchError,
)
from bitlattice.iterators import Zeroes, Ones, Horizon
from bitlattice.converge import Converge, UpperShadow, LowerShadow
from bitlattice.midpoints import Midpoints, rand_combination, rand_midpoint
from bitlattice.paths import Paths
from bitlattice.oracle import MonotoneFunction, Learner
from bitlattice.graph import LatticeGraph, MAX_GRAPH_WIDTH

__all__ = [
    "BitVector",
    "Ordering",
    "SUPPORTED_WIDTHS",
    "LatticeError",
    "IncomparableError",
    "ParseBitsError",
    "ParseFailure",
    "LengthMismatchError",
    "NonBinaryError",
    "BitOverflowError",
    "WidthMismatchError",
    "Zeroes",
    "Ones",
    "Horizon",
    "Converge",
    "UpperShadow",
    "LowerShadow",
    "Midpoints",
    "rand_combination",
    "rand_midpoint",
    "Paths",
    "MonotoneFunction",
    "Learner",
    "LatticeGraph",
    "MAX_GRAPH_WIDTH",
]
