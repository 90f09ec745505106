# src/zeckendorf/value.py
"""
ZeckendorfValue: an immutable signed integer stored as Zeckendorf digits.

Addition and comparison work on the digits themselves; decimal values are
only produced on request (int(), str(), repr()).
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from functools import total_ordering

from zeckendorf import narrowing
from zeckendorf.adder import add
from zeckendorf.codec import canonical_problem, decode, encode, fibonacci_terms
from zeckendorf.comparator import compare
from zeckendorf.fmt import abbr_int_fast
from zeckendorf.sign import Sign
from zeckendorf.utility import InvariantViolation, UserInputError, parse_decimal, stringify_guarded


@total_ordering
@dataclass(frozen=True, slots=True)
class ZeckendorfValue:
    """
    Signed integer as (sign, canonical digits), digits most significant first.

    Equality and hashing come from the (sign, digits) pair; Zeckendorf's
    theorem makes that pair unique for every integer.
    """

    sign: Sign
    digits: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "sign", Sign(self.sign))
        object.__setattr__(self, "digits", tuple(self.digits))
        problem = canonical_problem(self.digits)
        if problem is not None:
            raise InvariantViolation(f"non-canonical Zeckendorf digits {self.digits}: {problem}")
        if (self.sign == Sign.ZERO) != (not self.digits):
            raise InvariantViolation(f"sign {self.sign.name} does not match digits {self.digits}")

    # ---- construction ---------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> ZeckendorfValue:
        """From a decimal string '-?[0-9]+'; raises ZeckendorfFormatError otherwise."""
        return cls.from_int(parse_decimal(text))

    @classmethod
    def from_int(cls, n: int) -> ZeckendorfValue:
        n = operator.index(n)
        return cls(Sign.of(n), encode(abs(n)))

    @classmethod
    def of(cls, x: ZeckendorfValue | str | int) -> ZeckendorfValue:
        if isinstance(x, ZeckendorfValue):
            return x
        if isinstance(x, str):
            return cls.parse(x)
        return cls.from_int(x)

    # ---- arithmetic -----------------------------------------------------

    def __add__(self, other: object) -> ZeckendorfValue:
        if isinstance(other, ZeckendorfValue):
            return add(self, other)
        try:
            rhs = ZeckendorfValue.from_int(other)
        except TypeError:
            return NotImplemented
        return add(self, rhs)

    __radd__ = __add__

    def __neg__(self) -> ZeckendorfValue:
        return ZeckendorfValue(-self.sign, self.digits)

    def __pos__(self) -> ZeckendorfValue:
        return self

    def __abs__(self) -> ZeckendorfValue:
        return -self if self.sign < 0 else self

    # ---- ordering -------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ZeckendorfValue):
            return NotImplemented
        return compare(self, other) < 0

    def compare(self, other: ZeckendorfValue) -> int:
        return compare(self, other)

    # ---- conversions ----------------------------------------------------

    def to_int(self) -> int:
        return decode(self.digits, self.sign)

    __int__ = to_int
    __index__ = to_int

    def __bool__(self) -> bool:
        return self.sign != Sign.ZERO

    def __float__(self) -> float:
        return self.to_float()

    def to_int32(self, policy: str | None = None) -> int:
        return narrowing.to_fixed_int(self.to_int(), 32, policy)

    def to_int64(self, policy: str | None = None) -> int:
        return narrowing.to_fixed_int(self.to_int(), 64, policy)

    def to_float(self, policy: str | None = None) -> float:
        return narrowing.to_float(self.to_int(), policy)

    # ---- introspection --------------------------------------------------

    @property
    def signum(self) -> int:
        return int(self.sign)

    @property
    def weight(self) -> int:
        """Number of Fibonacci terms in the decomposition."""
        return sum(self.digits)

    @property
    def bits(self) -> str:
        return "".join(map(str, self.digits))

    def terms(self) -> list[int]:
        """Fibonacci values used, largest first."""
        return [f for _, f in fibonacci_terms(self.digits)]

    def __str__(self) -> str:
        return stringify_guarded(self.to_int(), "value")

    def __repr__(self) -> str:
        n = self.to_int()
        try:
            shown = stringify_guarded(n, "value")
        except UserInputError:
            shown = abbr_int_fast(n)
        sign = f"{self.signum:+d}" if self.sign else "0"
        return f"ZeckendorfValue({sign} ~ {self.bits or '0'} | {shown})"


ZERO = ZeckendorfValue(Sign.ZERO)
ONE = ZeckendorfValue(Sign.POSITIVE, (1,))
