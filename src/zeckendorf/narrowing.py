# src/zeckendorf/narrowing.py
"""
Narrowing conversions of exact integers to fixed-width targets.

Policy "raise" (the default) refuses values outside the target range with
ZeckendorfOverflowError; "saturate" clamps to the nearest representable
bound. Nothing wraps. The active policy comes from CONVERSION.OVERFLOW and
can be overridden per call.
"""

from __future__ import annotations

import sys

from zeckendorf.config import OVERFLOW_POLICIES
from zeckendorf.runtime import CFG
from zeckendorf.utility import ZeckendorfOverflowError

FLOAT_MAX = sys.float_info.max


def resolve_policy(policy: str | None = None) -> str:
    if policy is None:
        policy = CFG("CONVERSION.OVERFLOW", "raise")
    p = str(policy).strip().lower()
    if p not in OVERFLOW_POLICIES:
        raise ValueError(f"unknown overflow policy {policy!r}; expected one of {', '.join(OVERFLOW_POLICIES)}")
    return p


def to_fixed_int(value: int, bits: int, policy: str | None = None) -> int:
    lo, hi = -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
    if lo <= value <= hi:
        return value
    if resolve_policy(policy) == "saturate":
        return hi if value > hi else lo
    raise ZeckendorfOverflowError(f"value does not fit in int{bits} (range {lo}..{hi})")


def to_float(value: int, policy: str | None = None) -> float:
    try:
        return float(value)
    except OverflowError:
        pass
    if resolve_policy(policy) == "saturate":
        return FLOAT_MAX if value > 0 else -FLOAT_MAX
    raise ZeckendorfOverflowError("value is out of range for a double-precision float") from None
