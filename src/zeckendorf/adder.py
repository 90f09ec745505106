# src/zeckendorf/adder.py
"""
Signed addition on Zeckendorf digits.

Like signs: pad to equal length, add digit-wise, normalize.
Unlike signs: subtract the smaller magnitude from the larger one digit-wise,
borrowing with F(k) = F(k-1) + F(k-2), normalize, keep the larger operand's sign.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from zeckendorf.comparator import compare_magnitude
from zeckendorf.normalizer import normalize
from zeckendorf.utility import InvariantViolation

if TYPE_CHECKING:
    from zeckendorf.value import ZeckendorfValue

logger = logging.getLogger(__name__)


def align(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], list[int]]:
    """Left-pad the shorter sequence with zeros so both share the F(2) position."""
    width = max(len(a), len(b))
    return [0] * (width - len(a)) + list(a), [0] * (width - len(b)) + list(b)


def add_magnitudes(a: Sequence[int], b: Sequence[int]) -> tuple[int, ...]:
    x, y = align(a, b)
    return normalize([p + q for p, q in zip(x, y)])


def _borrow(r: list[int], j: int) -> None:
    """
    Make r[j] (little-endian, currently -1) non-negative.

    Takes one unit from the nearest non-zero position above j and walks it
    down: each split leaves F(k-1) behind and carries F(k-2) further, until
    the unit lands on j (or on j and j-1 after overshooting by one).
    """
    m = j + 1
    while m < len(r) and r[m] == 0:
        m += 1
    if m == len(r):
        raise InvariantViolation(f"borrow at position {j} found no higher unit")

    r[m] -= 1
    pos = m
    while pos > j:
        if pos == 1:
            # F(3) = 2 = F(2) + F(2)
            r[0] += 1
            pos = 0
        else:
            r[pos - 1] += 1
            pos -= 2
    r[pos] += 1


def subtract_magnitudes(larger: Sequence[int], smaller: Sequence[int]) -> tuple[int, ...]:
    """larger - smaller for canonical digits with larger strictly bigger."""
    x, y = align(larger, smaller)
    r = [p - q for p, q in zip(reversed(x), reversed(y))]
    borrows = 0
    for j in range(len(r) - 1, -1, -1):
        if r[j] < 0:
            _borrow(r, j)
            borrows += 1
    logger.debug("subtraction over %d digits needed %d borrows", len(r), borrows)
    return normalize(r[::-1])


def add(a: ZeckendorfValue, b: ZeckendorfValue) -> ZeckendorfValue:
    from zeckendorf.value import ZERO, ZeckendorfValue

    if not a.sign:
        logger.debug("add: left operand is zero")
        return b
    if not b.sign:
        logger.debug("add: right operand is zero")
        return a

    if a.sign == b.sign:
        logger.debug("add: same sign %s", a.sign.name)
        return ZeckendorfValue(a.sign, add_magnitudes(a.digits, b.digits))

    order = compare_magnitude(a.digits, b.digits)
    logger.debug("add: mixed signs, magnitude order %d", order)
    if order == 0:
        return ZERO
    if order > 0:
        return ZeckendorfValue(a.sign, subtract_magnitudes(a.digits, b.digits))
    return ZeckendorfValue(b.sign, subtract_magnitudes(b.digits, a.digits))


def add_all(values: Iterable[ZeckendorfValue]) -> ZeckendorfValue:
    from zeckendorf.value import ZERO

    total = ZERO
    for v in values:
        total = add(total, v)
    return total
