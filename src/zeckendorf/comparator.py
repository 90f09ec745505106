# src/zeckendorf/comparator.py
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zeckendorf.value import ZeckendorfValue


def _cmp(x, y) -> int:
    return (x > y) - (x < y)


def compare_magnitude(a: Sequence[int], b: Sequence[int]) -> int:
    """
    -1, 0 or 1 as canonical digits `a` denote less, the same or more than `b`.

    Canonical sequences have no leading zero, so the longer one uses a larger
    Fibonacci term than the other can reach; equal lengths compare
    lexicographically from the most significant digit.
    """
    if len(a) != len(b):
        return _cmp(len(a), len(b))
    return _cmp(tuple(a), tuple(b))


def compare(a: ZeckendorfValue, b: ZeckendorfValue) -> int:
    """Total order of two values, consistent with their integer order."""
    if a.sign != b.sign:
        return _cmp(a.sign, b.sign)
    m = compare_magnitude(a.digits, b.digits)
    return -m if a.sign < 0 else m
