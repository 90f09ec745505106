# src/zeckendorf/fibonacci.py
"""
Fibonacci terms F(0)=0, F(1)=1, F(k)=F(k-1)+F(k-2) as Python ints.

Zeckendorf digits use F(2)=1, F(3)=2, ... as their base; F(0) and F(1)
are only here so that term(n) is defined for every n >= 0.
"""

from __future__ import annotations

import threading
from functools import lru_cache

import gmpy2

from zeckendorf.runtime import CFG

FIBONACCI_OFFSET = 2  # index of the least-significant Zeckendorf weight


class FibonacciSequence:
    """
    On-demand Fibonacci terms.

    With memoize=True the computed terms are kept in an append-only list.
    Reads of known terms are lock-free; extension happens under a lock so
    concurrent callers never append the same index twice.
    """

    def __init__(self, memoize: bool = True):
        self.memoize = memoize
        self._terms: list[int] = [0, 1]
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"FibonacciSequence(memoize={self.memoize}, cached={len(self._terms)})"

    def __len__(self) -> int:
        return len(self._terms)

    def _extend_to(self, n: int) -> None:
        with self._lock:
            terms = self._terms
            while len(terms) <= n:
                terms.append(terms[-1] + terms[-2])

    def term(self, n: int) -> int:
        if n < 0:
            raise ValueError(f"Fibonacci index must be >= 0, got {n}")
        if not self.memoize:
            return int(gmpy2.fib(n))
        if n >= len(self._terms):
            self._extend_to(n)
        return self._terms[n]

    __getitem__ = term

    def upto(self, limit: int) -> list[int]:
        """Ascending [F(2), F(3), ...] of every term <= limit."""
        out: list[int] = []
        k = FIBONACCI_OFFSET
        f = self.term(k)
        while f <= limit:
            out.append(f)
            k += 1
            f = self.term(k)
        return out

    def index_of(self, value: int) -> int | None:
        """Smallest k >= 2 with F(k) == value, else None."""
        if value < 1:
            return None
        k = FIBONACCI_OFFSET
        f = self.term(k)
        while f < value:
            k += 1
            f = self.term(k)
        return k if f == value else None


@lru_cache(maxsize=1)
def shared_sequence() -> FibonacciSequence:
    """Process-wide sequence, created on first use and never invalidated."""
    memoize = CFG("FIBONACCI.MEMOIZE", True)
    return FibonacciSequence(memoize=bool(memoize))


def fibonacci(n: int) -> int:
    return shared_sequence().term(n)
