# src/zeckendorf/codec.py
"""
Conversion between integer magnitudes and Zeckendorf digit sequences.

Digits are most-significant first. In a sequence of length L the digit at
position i weighs F(L - i + 1), so the last digit weighs F(2) = 1:

    38 = 34 + 3 + 1 = F(9) + F(4) + F(2)  ->  (1, 0, 0, 0, 0, 1, 0, 1)
"""

from __future__ import annotations

import operator
from collections.abc import Sequence

from zeckendorf.fibonacci import FIBONACCI_OFFSET, shared_sequence
from zeckendorf.sign import Sign
from zeckendorf.utility import InvariantViolation


def weight_index(length: int, position: int) -> int:
    """Fibonacci index carried by `position` in a sequence of `length` digits."""
    return length - position - 1 + FIBONACCI_OFFSET


def encode(magnitude: int) -> tuple[int, ...]:
    """
    Greedy Zeckendorf encoding of a non-negative integer.

    Scans F(k), ..., F(2) from the largest term <= magnitude downwards and
    takes every term that still fits. The result is canonical; encode(0) == ().
    """
    n = operator.index(magnitude)
    if n < 0:
        raise ValueError(f"Zeckendorf encoding needs a magnitude >= 0, got {n}")

    digits: list[int] = []
    remainder = n
    for f in reversed(shared_sequence().upto(n)):
        if f <= remainder:
            digits.append(1)
            remainder -= f
        else:
            digits.append(0)

    if remainder:
        raise InvariantViolation(f"greedy encoding of {n} left remainder {remainder}")
    return tuple(digits)


def decode(digits: Sequence[int], sign: int = Sign.POSITIVE) -> int:
    """
    Weighted Fibonacci sum of `digits`, negated when sign < 0.

    Works on non-canonical sequences too (digits > 1, adjacent ones), which
    makes it the reference value for normalization.
    """
    fib = shared_sequence()
    length = len(digits)
    value = 0
    for i, d in enumerate(digits):
        if d:
            value += d * fib.term(weight_index(length, i))
    return -value if sign < 0 else value


def canonical_problem(digits: Sequence[int]) -> str | None:
    """Describe the first canonical-form violation in `digits`, or None."""
    prev = 0
    for i, d in enumerate(digits):
        if d not in (0, 1):
            return f"digit {d!r} at position {i} is not 0 or 1"
        if d and prev:
            return f"adjacent ones at positions {i - 1} and {i}"
        prev = d
    if digits and digits[0] != 1:
        return "leading zero digit"
    return None


def is_canonical(digits: Sequence[int]) -> bool:
    return canonical_problem(digits) is None


def check_canonical(digits: Sequence[int]) -> None:
    problem = canonical_problem(digits)
    if problem is not None:
        raise InvariantViolation(f"non-canonical Zeckendorf digits {tuple(digits)}: {problem}")


def fibonacci_terms(digits: Sequence[int]) -> list[tuple[int, int]]:
    """[(k, F(k)), ...] for every 1 digit, most significant first."""
    fib = shared_sequence()
    length = len(digits)
    out = []
    for i, d in enumerate(digits):
        if d:
            k = weight_index(length, i)
            out.append((k, fib.term(k)))
    return out
