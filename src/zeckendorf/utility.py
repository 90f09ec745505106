# -----------------------------------------------------------------------------
#  Utility functions: error types, decimal parsing and the digit guard
# -----------------------------------------------------------------------------

from __future__ import annotations

import re
import sys

from zeckendorf.runtime import CFG

_DECIMAL_RE = re.compile(r"-?[0-9]+", re.ASCII)


class UserInputError(Exception):
    pass


class ZeckendorfFormatError(UserInputError, ValueError):
    """Text is not a signed decimal integer."""


class ZeckendorfOverflowError(OverflowError):
    """A narrowing conversion does not fit its target type."""


class InvariantViolation(AssertionError):
    """A digit sequence broke the canonical Zeckendorf form. Always a bug."""


def dec_digits(n: int) -> int:
    """Exact decimal digit count without str(); handles negative n."""
    n = abs(n)
    if n == 0:
        return 1
    # floor(log10(n)) ~= floor(bitlen*log10(2))
    est = (n.bit_length() * 30103) // 100000
    p10 = 10 ** est
    if n < p10:
        while n < p10:
            est -= 1
            p10 //= 10
    else:
        p10 *= 10
        while n >= p10:
            est += 1
            p10 *= 10
    return est + 1


def _effective_digit_limit() -> int | None:
    """
    Effective decimal-digit limit for parsing and stringifying integers.

    - Primary source: profile setting BEHAVIOUR.MAX_DIGITS.
    - Secondary: Python's own guard (sys.get_int_max_str_digits); 0 means disabled.

    We return the tighter (smaller) of the two when both exist.
    """
    try:
        profile_limit = int(CFG("BEHAVIOUR.MAX_DIGITS", 100_000))
    except (TypeError, ValueError):
        profile_limit = None

    py_limit = sys.get_int_max_str_digits() or None

    if profile_limit is None:
        return py_limit
    if py_limit is None:
        return profile_limit
    return min(profile_limit, py_limit)


def _too_many_digits(label: str, limit: int) -> UserInputError:
    return UserInputError(
        f"{label} has more than {limit} decimal digits. "
        "Increase BEHAVIOUR.MAX_DIGITS in the profile or pass a smaller value."
    )


def stringify_guarded(n: int, label: str = "number") -> str:
    """Return str(n) or raise a friendly user error if it exceeds the digit guard."""
    limit = _effective_digit_limit()
    if limit is not None and dec_digits(n) > limit:
        raise _too_many_digits(label, limit)
    return str(n)


def parse_decimal(text: str) -> int:
    """
    Parse a signed radix-10 integer; the whole text must match -?[0-9]+.

    Raises ZeckendorfFormatError for anything else, UserInputError when the
    digit count is above the guard.
    """
    if not isinstance(text, str):
        raise ZeckendorfFormatError(f"expected a decimal string, got {type(text).__name__}")
    if not _DECIMAL_RE.fullmatch(text):
        raise ZeckendorfFormatError(f"Invalid input: {text!r} is not a decimal integer.")

    limit = _effective_digit_limit()
    if limit is not None and len(text.lstrip("-")) > limit:
        raise _too_many_digits("input", limit)
    return int(text)
