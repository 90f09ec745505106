# src/zeckendorf/fmt.py
from __future__ import annotations

from typing import TYPE_CHECKING

from colorama import Fore, Style

from zeckendorf.codec import fibonacci_terms
from zeckendorf.runtime import CFG
from zeckendorf.utility import dec_digits

if TYPE_CHECKING:
    from zeckendorf.value import ZeckendorfValue


def paint(text: str, color: str, *, bright: bool = False) -> str:
    if not CFG("DISPLAY.COLOR", True):
        return text
    return f"{color}{Style.BRIGHT if bright else ''}{text}{Style.RESET_ALL}"


def abbr_int_fast(n: int, head: int = 10, tail: int = 10, threshold: int = 35, ellipsis: str = "…") -> str:
    """Abbreviate very large ints as first<head>…last<tail> without str(n)."""
    if n == 0:
        return "0"

    sign = "-" if n < 0 else ""
    a = -n if n < 0 else n

    d = dec_digits(a)
    if d <= threshold or head + tail >= d:
        return sign + str(a)

    first = a // 10 ** (d - head)
    last = a % 10 ** tail
    return f"{sign}{first}{ellipsis}{last:0{tail}d}"


def fmt_int(n: int) -> str:
    threshold = int(CFG("DISPLAY.ABBREVIATE_OVER", 40))
    if threshold <= 0:
        return str(n)
    return abbr_int_fast(n, threshold=threshold)


def _abbr_bits(bits: str, max_len: int = 120, ell: str = "…") -> str:
    if max_len <= 0 or len(bits) <= max_len:
        return bits
    h = max_len // 2
    t = max_len - h
    return bits[:h] + ell + bits[-t:]


def format_decomposition(value: ZeckendorfValue, max_terms: int = 20) -> str:
    """
    '38 = 34 + 3 + 1 (F9 + F4 + F2)'; long decompositions show only the
    first and last three Fibonacci indices.
    """
    n = value.to_int()
    terms = fibonacci_terms(value.digits)
    if not terms:
        return "0 = 0"

    sign = "-" if value.sign < 0 else ""
    idxs = [f"F{k}" for k, _ in terms]
    if len(terms) <= max_terms:
        parts = " + ".join(fmt_int(f) for _, f in terms)
        body = f"{sign}({parts})" if sign and len(terms) > 1 else f"{sign}{parts}"
        body += f" ({' + '.join(idxs)})"
    else:
        body = f"{sign}({' + '.join(idxs[:3])} + … + {' + '.join(idxs[-3:])})"
    return f"{fmt_int(n)} = {body}"


def format_value(value: ZeckendorfValue) -> str:
    """Coloured one-liner for the CLI: decimal value and its digit string."""
    bits = _abbr_bits(value.bits or "0")
    return f"{paint(fmt_int(value.to_int()), Fore.CYAN, bright=True)}  {paint('z', Fore.YELLOW)}{bits}"
