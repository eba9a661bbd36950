"""Total ordering for signed values.

Ordering is signed, not a naive compare of bit patterns: a value with the
sign bit set is below every value without it, and within one sign class the
unsigned order of the words matches the signed order.
"""

from __future__ import annotations

from enum import Enum, unique

from .bits import word_sign
from .types import SignedInt, T, require_same_width


@unique
class Ordering(Enum):
    LT = -1
    EQ = 0
    GT = 1


def cmp(a: SignedInt, b: SignedInt) -> Ordering:
    require_same_width("cmp", a, b)
    if a.bits == b.bits:
        return Ordering.EQ
    sa = word_sign(a.bits, a.WIDTH)
    sb = word_sign(b.bits, b.WIDTH)
    if sa != sb:
        return Ordering.LT if sa == 1 else Ordering.GT
    return Ordering.LT if a.bits < b.bits else Ordering.GT


def eq(a: SignedInt, b: SignedInt) -> bool:
    return cmp(a, b) is Ordering.EQ


def ne(a: SignedInt, b: SignedInt) -> bool:
    return cmp(a, b) is not Ordering.EQ


def lt(a: SignedInt, b: SignedInt) -> bool:
    return cmp(a, b) is Ordering.LT


def lte(a: SignedInt, b: SignedInt) -> bool:
    return cmp(a, b) is not Ordering.GT


def gt(a: SignedInt, b: SignedInt) -> bool:
    return cmp(a, b) is Ordering.GT


def gte(a: SignedInt, b: SignedInt) -> bool:
    return cmp(a, b) is not Ordering.LT


def min_(a: T, b: T) -> T:
    """Smaller operand; ties return *a*."""
    return b if lt(b, a) else a


def max_(a: T, b: T) -> T:
    """Larger operand; ties return *a*."""
    return b if gt(b, a) else a
