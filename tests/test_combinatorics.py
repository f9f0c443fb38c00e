"""
bitlattice Combinatorics Test Suite

Tests rank-based enumeration between comparable points:
1. Midpoint enumeration (even / odd / empty distance)
2. Random combinations and random midpoints
3. Monotone path enumeration
"""

import math
import random
import sys
import os

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from bitlattice import BitVector, IncomparableError, Midpoints, Paths, rand_combination


def bv(text: str) -> BitVector:
    return BitVector.parse(text)


def expected_midpoints(d: int) -> int:
    if d == 0:
        return 0
    if d % 2 == 0:
        return math.comb(d, d // 2)
    return math.comb(d, d // 2) + math.comb(d, d // 2 + 1)


# --- Test 1: Midpoints ---

def test_midpoints_concrete_odd():
    a, b = bv("10001"), bv("11111")
    points = list(a.midpoints(b))
    assert points == [
        bv("11001"), bv("10101"), bv("10011"),
        bv("11101"), bv("11011"), bv("10111"),
    ]


def test_midpoints_full_cube_odd():
    points = list(BitVector.zero(5).midpoints(BitVector.one(5)))
    assert len(points) == 20
    assert len(set(points)) == 20
    ranks = [x.count_ones() for x in points]
    assert ranks == [2] * 10 + [3] * 10


def test_midpoints_even():
    points = list(BitVector.zero(4).midpoints(BitVector.one(4)))
    assert len(points) == 6
    assert all(x.count_ones() == 2 for x in points)


def test_midpoint_counts():
    for d in range(8):
        points = list(BitVector.zero(d).midpoints(BitVector.one(d)))
        assert len(points) == expected_midpoints(d), d


def test_midpoints_size_without_enumerating():
    for d in range(8):
        midpoints = Midpoints(BitVector.zero(d), BitVector.one(d))
        assert midpoints.size == expected_midpoints(d), d
        assert midpoints.size == len(list(midpoints))
    assert Midpoints(bv("0100"), bv("0110")).size == 2


def test_midpoints_equal_endpoints_yield_nothing():
    x = bv("0110")
    assert list(x.midpoints(x)) == []


def test_midpoints_distance_one_are_the_endpoints():
    a, b = bv("0100"), bv("0110")
    assert list(a.midpoints(b)) == [a, b]


def test_midpoints_order_independent():
    a, b = bv("0100010"), bv("1110111")
    assert list(a.midpoints(b)) == list(b.midpoints(a))


def test_midpoints_inside_interval():
    a, b = bv("0100010"), bv("1110111")
    d = a.distance(b)
    for x in a.midpoints(b):
        assert a <= x <= b
        assert a.distance(x) in (d // 2, d // 2 + 1)


def test_midpoints_incomparable():
    with pytest.raises(IncomparableError):
        bv("1100").midpoints(bv("1010"))
    with pytest.raises(IncomparableError):
        Midpoints(bv("1100"), bv("0011"))


# --- Test 2: Random Selection ---

def test_rand_combination():
    rng = random.Random(3)
    items = list(range(10))
    for k in range(11):
        chosen = rand_combination(items, k, rng)
        assert len(chosen) == k
        assert chosen <= set(items)


def test_rand_combination_too_many():
    with pytest.raises(ValueError):
        rand_combination([1, 2], 3)


def test_rand_midpoint_is_a_midpoint():
    a, b = bv("10001"), bv("11111")
    valid = set(a.midpoints(b))
    rng = random.Random(11)
    for _ in range(50):
        assert a.rand_midpoint(b, rng) in valid
        assert b.rand_midpoint(a, rng) in valid


def test_rand_midpoint_equal_endpoints():
    x = bv("0110")
    assert x.rand_midpoint(x) == x


def test_rand_midpoint_incomparable():
    with pytest.raises(IncomparableError):
        bv("1100").rand_midpoint(bv("1010"))


def test_rand_midpoint_distribution():
    n = 8
    bottom, top = BitVector.zero(n), BitVector.one(n)
    rng = random.Random(2024)
    samples = 4000
    counts = [0] * n
    for _ in range(samples):
        x = bottom.rand_midpoint(top, rng)
        assert x.count_ones() == n // 2
        for j in x.ones():
            counts[j] += 1
    for c in counts:
        assert abs(c / samples - 0.5) < 0.05


# --- Test 3: Paths ---

def test_paths_concrete():
    a, b = bv("10001"), bv("11111")
    paths = list(a.paths(b))
    assert len(paths) == 6
    assert len(set(paths)) == 6
    assert paths[0] == (bv("10001"), bv("11001"), bv("11101"), bv("11111"))
    for path in paths:
        assert len(path) == 4
        assert path[0] == a
        assert path[-1] == b
        for x, y in zip(path, path[1:]):
            assert x < y
            assert x.distance(y) == 1


def test_paths_reversed():
    a, b = bv("10001"), bv("11111")
    down = list(b.paths(a))
    assert len(down) == 6
    for path in down:
        assert path[0] == b
        assert path[-1] == a
    assert {tuple(reversed(p)) for p in down} == set(a.paths(b))


def test_paths_count_is_factorial():
    for d in range(6):
        bottom, top = BitVector.zero(d), BitVector.one(d)
        paths = list(bottom.paths(top))
        assert len(paths) == math.factorial(d)
        assert all(len(p) == d + 1 for p in paths)


def test_paths_single_point():
    x = bv("0110")
    assert list(x.paths(x)) == [(x,)]


def test_paths_incomparable():
    with pytest.raises(IncomparableError):
        bv("1100").paths(bv("1010"))
    with pytest.raises(IncomparableError):
        Paths(bv("1100"), bv("0011"))
