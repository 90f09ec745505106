# tests/test_arithmetic.py
"""
Addition and comparison on Zeckendorf digits, checked against Python ints.
"""

from __future__ import annotations

import logging
import random

import pytest

from zeckendorf.adder import add, add_all, add_magnitudes, align, subtract_magnitudes
from zeckendorf.codec import decode, encode, is_canonical
from zeckendorf.comparator import compare, compare_magnitude
from zeckendorf.value import ONE, ZERO, ZeckendorfValue

Z = ZeckendorfValue.from_int

SMALL = range(-40, 41)

# ---------- golden cases ------------------------------------------------------

SUMS = [
    (4, 4, 8),
    (1, 1, 2),
    (2, 2, 4),
    (3, 5, 8),
    (34, 4, 38),
    (5, -3, 2),
    (-5, 3, -2),
    (8, -1, 7),
    (2, -1, 1),
    (3, -1, 2),
    (100, -100, 0),
    (-21, -13, -34),
    (0, -7, -7),
    (1000, -999, 1),
]


@pytest.mark.parametrize("a,b,expected", SUMS, ids=[f"{a}+{b}" for a, b, _ in SUMS])
def test_add_golden(a, b, expected):
    result = add(Z(a), Z(b))
    assert result.to_int() == expected
    assert result == Z(expected)


def test_four_plus_four_equals_encoded_eight_digit_for_digit():
    result = add(Z(4), Z(4))
    assert result.digits == encode(8)
    assert result.digits == (1, 0, 0, 0, 0)


def test_positive_five_beats_negative_five():
    assert compare(Z(5), Z(-5)) == 1
    assert compare(Z(-5), Z(5)) == -1


# ---------- exhaustive small range -------------------------------------------

def test_addition_matches_integers():
    values = {n: Z(n) for n in SMALL}
    for a in SMALL:
        for b in SMALL:
            result = add(values[a], values[b])
            assert result.to_int() == a + b, (a, b)
            assert is_canonical(result.digits), (a, b)


def test_comparison_matches_integers():
    values = {n: Z(n) for n in SMALL}
    for a in SMALL:
        for b in SMALL:
            assert compare(values[a], values[b]) == (a > b) - (a < b), (a, b)


def test_addition_is_commutative():
    for a in SMALL:
        for b in SMALL:
            assert add(Z(a), Z(b)) == add(Z(b), Z(a))


def test_addition_is_associative_on_samples():
    rng = random.Random(20031105)
    for _ in range(300):
        a, b, c = (Z(rng.randint(-10 ** 6, 10 ** 6)) for _ in range(3))
        assert add(add(a, b), c) == add(a, add(b, c))


def test_zero_is_identity():
    for n in SMALL:
        assert add(ZERO, Z(n)) == Z(n)
        assert add(Z(n), ZERO) == Z(n)


def test_large_mixed_sign_sums():
    rng = random.Random(2012)
    for _ in range(100):
        a = rng.randint(-10 ** 40, 10 ** 40)
        b = rng.randint(-10 ** 40, 10 ** 40)
        assert add(Z(a), Z(b)).to_int() == a + b


def test_add_all_folds_from_zero():
    assert add_all([]) == ZERO
    assert add_all(Z(n) for n in range(1, 11)).to_int() == 55
    assert add_all([ONE, -ONE, ONE]) == ONE


# ---------- magnitude helpers ------------------------------------------------

def test_align_pads_on_the_left():
    assert align((1, 0, 1), (1,)) == ([1, 0, 1], [0, 0, 1])


def test_add_magnitudes_normalizes():
    assert add_magnitudes(encode(4), encode(4)) == encode(8)


@pytest.mark.parametrize("big,small", [(8, 1), (5, 3), (2, 1), (3, 1), (38, 37), (100, 1), (89, 55)])
def test_subtract_magnitudes(big, small):
    out = subtract_magnitudes(encode(big), encode(small))
    assert out == encode(big - small)


def test_subtract_magnitudes_every_small_pair():
    for big in range(1, 120):
        for small in range(0, big):
            out = subtract_magnitudes(encode(big), encode(small))
            assert decode(out) == big - small, (big, small)


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ((), (), 0),
        ((1,), (), 1),
        ((1, 0, 0), (1, 0, 1), -1),
        ((1, 0, 0, 0), (1, 0, 1), 1),
        ((1, 0, 1, 0), (1, 0, 1, 0), 0),
    ],
)
def test_compare_magnitude(a, b, expected):
    assert compare_magnitude(a, b) == expected


def test_mixed_sign_branch_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="zeckendorf.adder"):
        add(Z(5), Z(-3))
    assert any("mixed signs" in r.getMessage() for r in caplog.records)
