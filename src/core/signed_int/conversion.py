"""Range-checked construction of signed values from unsigned magnitudes."""

from __future__ import annotations

from .bits import overflow, twos_complement
from .types import SignedInt, T
from .widths import Width


def _require_word(name: str, u: int, w: Width) -> None:
    if not isinstance(u, int) or isinstance(u, bool):
        raise TypeError(f"{name} must be an int")
    if u < 0 or u > w.mask:
        raise ValueError(f"{name} must be an unsigned {w.bits}-bit word")


def from_magnitude(cls: type[T], u: int) -> T:
    """Non-negative value with magnitude *u*; overflow if u > 2^(W-1) - 1."""
    w = cls.WIDTH
    _require_word("u", u, w)
    if u > w.max_positive:
        raise overflow("from_magnitude", w, f"{u} > {w.max_positive}")
    return cls.pack(u)


def neg_from_magnitude(cls: type[T], u: int) -> T:
    """
    Value ``-u``; overflow if u > 2^(W-1).

    u == 2^(W-1) is accepted: its negation is exactly the minimum value's
    bit pattern.
    """
    w = cls.WIDTH
    _require_word("u", u, w)
    if u > w.min_negative_magnitude:
        raise overflow("neg_from_magnitude", w, f"{u} > {w.min_negative_magnitude}")
    return cls.pack(twos_complement(u, w))


def from_int(cls: type[T], n: int) -> T:
    """Value equal to the Python int *n*; overflow if out of range."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError("n must be an int")
    w = cls.WIDTH
    if n >= 0:
        if n > w.max_positive:
            raise overflow("from_int", w, f"{n} > {w.max_positive}")
        return from_magnitude(cls, n)
    if -n > w.min_negative_magnitude:
        raise overflow("from_int", w, f"{n} < -{w.min_negative_magnitude}")
    return neg_from_magnitude(cls, -n)


def to_int(v: SignedInt) -> int:
    return int(v)
