from __future__ import annotations

from enum import IntEnum


class Sign(IntEnum):
    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    @classmethod
    def of(cls, n: int) -> Sign:
        return cls((n > 0) - (n < 0))

    def __neg__(self) -> Sign:
        return Sign(-int(self))
