# src/zeckendorf/normalizer.py
"""
Rewrite a raw digit sequence into canonical Zeckendorf form.

Raw sequences come out of digit-wise addition or borrowing: digits may be
larger than 1 and ones may sit next to each other. Two value-preserving
rules are applied until neither matches:

  carry   F(k) + F(k+1) = F(k+2)   two neighbouring units become one unit two places up
  split   F(k) = F(k-1) + F(k-2)   one unit of an overfull digit moves down two places

A split is always followed by the carry it enables, so an overfull digit
at F(k) effectively becomes 2F(k) = F(k+1) + F(k-2). At the bottom of the
sequence F(1) does not exist, so 2F(2) = F(3) and 2F(3) = F(4) + F(2) are
used instead.

Every rewrite moves value to a more significant position, so the digit
vector read from the top grows lexicographically and the loop terminates.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Sequence

from zeckendorf.codec import check_canonical
from zeckendorf.utility import InvariantViolation

logger = logging.getLogger(__name__)


def _grow(d: list[int], size: int) -> None:
    if len(d) < size:
        d.extend([0] * (size - len(d)))


def _carry(d: list[int], p: int) -> None:
    d[p] -= 1
    d[p + 1] -= 1
    d[p + 2] += 1


def _split(d: list[int], p: int) -> None:
    d[p] -= 1
    d[p - 1] += 1
    d[p - 2] += 1


def _rewrite_at(d: list[int], p: int) -> bool:
    """Apply one rule at little-endian position p. Returns False when none matches."""
    _grow(d, p + 3)
    if d[p] >= 2:
        if p >= 2:
            _split(d, p)
            _carry(d, p - 1)
        elif p == 1:
            d[1] -= 2
            d[2] += 1
            d[0] += 1
        else:
            d[0] -= 2
            d[1] += 1
        return True
    if d[p] and d[p + 1]:
        _carry(d, p)
        return True
    return False


def _little_endian(digits: Sequence[int]) -> list[int]:
    out = []
    for raw in reversed(digits):
        d = operator.index(raw)
        if d < 0:
            raise InvariantViolation(f"cannot normalize negative digit {d} in {tuple(digits)}")
        out.append(d)
    return out


def normalize(digits: Sequence[int]) -> tuple[int, ...]:
    """
    Canonical Zeckendorf digits (most significant first) with the same value as `digits`.

    Any non-negative digits are accepted; the result has no digit above 1,
    no adjacent ones and no leading zero, and is () for a zero value.
    """
    d = _little_endian(digits)

    pending = list(range(len(d)))
    queued = set(pending)
    rewrites = 0
    while pending:
        p = pending.pop()
        queued.discard(p)
        if not _rewrite_at(d, p):
            continue
        rewrites += 1
        # rules touch p-2..p+2; a carry at q reads q and q+1
        for q in range(max(0, p - 3), p + 3):
            if q not in queued:
                queued.add(q)
                pending.append(q)

    while d and d[-1] == 0:
        d.pop()
    result = tuple(reversed(d))

    check_canonical(result)
    logger.debug("normalized %d raw digits to %d in %d rewrites", len(digits), len(result), rewrites)
    return result
