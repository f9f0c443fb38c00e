"""
bitlattice Traversal Test Suite

Tests the lazy walkers over the implicit Hasse diagram:
1. Zeroes / Ones index scans
2. Horizon stepping (up, down, masked)
3. Interval convergence in both directions
4. Upper / lower shadows
"""

import itertools
import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bitlattice import BitVector, Converge, Horizon, IncomparableError


def bv(text: str) -> BitVector:
    return BitVector.parse(text)


def interval(a: BitVector, b: BitVector) -> set:
    """Brute-force closed interval between comparable points."""
    lo, hi = (a, b) if a <= b else (b, a)
    return {
        x
        for x in (BitVector(p) for p in itertools.product((False, True), repeat=len(a)))
        if lo <= x <= hi
    }


# --- Test 1: Zeroes / Ones ---

def test_zeroes_and_ones():
    v = bv("10010")
    assert list(v.zeroes()) == [1, 2, 4]
    assert list(v.ones()) == [0, 3]


def test_index_scans_restartable():
    v = bv("0110")
    it = v.zeroes()
    assert list(it) == [0, 3]
    assert list(it) == []
    assert list(v.zeroes()) == [0, 3]


def test_index_scans_on_constants():
    assert list(BitVector.one(3).zeroes()) == []
    assert list(BitVector.zero(3).ones()) == []
    assert list(BitVector.one(3).ones()) == [0, 1, 2]


# --- Test 2: Horizon ---

def test_horizon_up():
    assert list(bv("1001").horizon(False)) == [bv("1101"), bv("1011")]


def test_horizon_down():
    assert list(bv("1001").horizon(True)) == [bv("0001"), bv("1000")]


def test_horizon_steps_are_strict_and_adjacent():
    origin = bv("01010")
    for up in origin.horizon(False):
        assert up > origin
        assert origin.distance(up) == 1
    for down in origin.horizon(True):
        assert down < origin
        assert origin.distance(down) == 1


def test_horizon_at_bounds_is_empty():
    assert list(BitVector.one(4).horizon(False)) == []
    assert list(BitVector.zero(4).horizon(True)) == []


def test_horizon_mask():
    h = Horizon(bv("0000"), False, mask=bv("0101"))
    assert list(h) == [bv("0100"), bv("0001")]


# --- Test 3: Convergence ---

def test_converge_concrete():
    a, b = bv("10001"), bv("11111")
    points = list(a.converge(b))
    assert points[0] == a
    assert len(points) == 8
    assert len(set(points)) == 8
    assert b in points
    assert set(points) == interval(a, b)


def test_converge_both_directions_same_set():
    a, b = bv("10001"), bv("11111")
    up = list(a.converge(b))
    down = list(b.converge(a))
    assert down[0] == b
    assert len(down) == len(set(down)) == 8
    assert set(up) == set(down)


def test_converge_single_point():
    x = bv("0110")
    assert list(x.converge(x)) == [x]


def test_converge_size_matches_distance():
    for a, b in itertools.product([bv("0000"), bv("0100"), bv("0110"), bv("1111")], repeat=2):
        if not a.comparable(b):
            continue
        traversal = a.converge(b)
        assert traversal.size == 2 ** a.distance(b)
        points = list(traversal)
        assert len(points) == len(set(points)) == 2 ** a.distance(b)


def test_converge_whole_cube():
    points = list(BitVector.zero(6).converge(BitVector.one(6)))
    assert len(points) == 64
    assert len(set(points)) == 64


def test_converge_is_frontier_expansion():
    a, b = bv("000000"), bv("110111")
    emitted = []
    for x in a.converge(b):
        if emitted:
            assert any(x.comparable(y) and x.distance(y) == 1 for y in emitted)
        emitted.append(x)


def test_converge_ranks_never_decrease():
    ranks = [x.count_ones() for x in BitVector.zero(5).converge(BitVector.one(5))]
    assert ranks == sorted(ranks)


def test_converge_each_point_expands_once():
    traversal = Converge(BitVector.zero(10), BitVector.one(10))
    emitted = 0
    for _ in traversal:
        emitted += 1
        assert traversal.expanded == emitted
        assert traversal.frontier <= emitted
    assert emitted == traversal.size == 1024
    assert traversal.frontier == 0


def test_converge_rejects_incomparable_eagerly():
    with pytest.raises(IncomparableError):
        bv("1100").converge(bv("1010"))
    with pytest.raises(IncomparableError):
        Converge(bv("1100"), bv("0011"))


# --- Test 4: Shadows ---

def test_upper_shadow():
    origin = bv("0110")
    points = list(origin.upper_shadow())
    assert points[0] == origin
    assert len(points) == 2 ** origin.count_zeroes()
    assert set(points) == {bv("0110"), bv("1110"), bv("0111"), bv("1111")}


def test_lower_shadow():
    origin = bv("0110")
    points = list(origin.lower_shadow())
    assert points[0] == origin
    assert set(points) == {bv("0110"), bv("0100"), bv("0010"), bv("0000")}


def test_shadows_are_principal_filter_and_ideal():
    origin = bv("10100")
    assert set(origin.upper_shadow()) == interval(origin, BitVector.one(5))
    assert set(origin.lower_shadow()) == interval(BitVector.zero(5), origin)


def test_shadows_at_bounds():
    assert list(BitVector.one(3).upper_shadow()) == [BitVector.one(3)]
    assert list(BitVector.zero(3).lower_shadow()) == [BitVector.zero(3)]
    assert len(list(BitVector.zero(4).upper_shadow())) == 16
