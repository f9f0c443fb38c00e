"""
bitlattice error taxonomy

Every failure in the lattice engine is deterministic and pure-data, so each
is raised exactly once where it is detected and never retried:

- IncomparableError: an order-dependent operation on an unrelated pair
- ParseBitsError: malformed textual input (LengthMismatch / NonBinary)
- BitOverflowError: integer conversion with a set bit beyond the width
- WidthMismatchError: binary operation between vectors of different widths
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class LatticeError(Exception):
    """Base class for all bitlattice errors."""


class IncomparableError(LatticeError, ValueError):
    """Two points have no partial-order relation."""

    def __init__(self, left: Any, right: Any):
        super().__init__(f"Incomparable points: {left} and {right}")
        self.left = left
        self.right = right


class ParseFailure(Enum):
    LENGTH_MISMATCH = "length_mismatch"
    NON_BINARY = "non_binary"


class ParseBitsError(LatticeError, ValueError):
    """Text could not be parsed into a BitVector."""
    kind: ParseFailure

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class LengthMismatchError(ParseBitsError):
    kind = ParseFailure.LENGTH_MISMATCH

    def __init__(self, text: str, expected: int):
        super().__init__(
            f"Expected {expected} characters, got {len(text)}: {text!r}", text
        )
        self.expected = expected


class NonBinaryError(ParseBitsError):
    kind = ParseFailure.NON_BINARY

    def __init__(self, text: str, position: int):
        super().__init__(
            f"Non-binary character {text[position]!r} at position {position}: {text!r}",
            text,
        )
        self.position = position


class BitOverflowError(LatticeError, OverflowError):
    """An integer has a set bit that does not fit in the vector width."""

    def __init__(self, value: int, width: int):
        super().__init__(f"{value:#x} does not fit in {width} coordinates")
        self.value = value
        self.width = width


class WidthMismatchError(LatticeError, ValueError):
    """Binary operation between vectors of different widths."""

    def __init__(self, left: int, right: int):
        super().__init__(f"Width mismatch: {left} vs {right}")
        self.left = left
        self.right = right
