"""Arithmetic engine for the signed integer kernel.

Three flavours of add/sub/mul:
- `wrapping_*`: modulo 2^W, never fails,
- `overflowing_*`: wrapped result plus an overflow flag,
- checked (`add`, `sub`, `mul`): raise `SignedIntOverflowError` on overflow.

Division truncates toward zero (``-7 / 2 == -3``), and `mod` is defined by
``a - b * (a div b)``, so a non-zero remainder always takes the dividend's sign.
This is deliberately not Python's floor `//` / `%`.
"""

from __future__ import annotations

import logging

from .bits import abs_magnitude, overflow, twos_complement, word_sign
from .errors import DivisionByZeroError
from .types import SignedInt, T, require_same_width
from .widths import Width

_logger = logging.getLogger(__name__)


def _division_by_zero(op: str, w: Width) -> DivisionByZeroError:
    _logger.debug("signed_int_division_by_zero op=%s width=%s", op, w.bits)
    return DivisionByZeroError(op, w.bits)


# -- Addition / subtraction --------------------------------------------------

def wrapping_add(a: T, b: T) -> T:
    cls = require_same_width("wrapping_add", a, b)
    return cls.pack((a.bits + b.bits) & a.WIDTH.mask)


def overflowing_add(a: T, b: T) -> tuple[T, bool]:
    """
    Wrapped sum and overflow flag.

    Overflow iff both operands share a sign and the result's sign differs.
    """
    r = wrapping_add(a, b)
    w = a.WIDTH
    sa = word_sign(a.bits, w)
    sb = word_sign(b.bits, w)
    sr = word_sign(r.bits, w)
    return r, (sa == sb and sr != sa)


def add(a: T, b: T) -> T:
    r, overflowed = overflowing_add(a, b)
    if overflowed:
        raise overflow("add", a.WIDTH)
    return r


def wrapping_sub(a: T, b: T) -> T:
    cls = require_same_width("wrapping_sub", a, b)
    w = a.WIDTH
    return cls.pack((a.bits + twos_complement(b.bits, w)) & w.mask)


def overflowing_sub(a: T, b: T) -> tuple[T, bool]:
    """
    Wrapped difference and overflow flag.

    ``a - b`` is ``a + negate(b)``: overflow iff a and negate(b) share a sign
    and the result's sign differs. negate(MIN) wraps to MIN, so ``a - MIN``
    is handled directly: it overflows exactly when a is non-negative.
    """
    r = wrapping_sub(a, b)
    w = a.WIDTH
    sa = word_sign(a.bits, w)
    if b.bits == w.sign_bit:
        return r, sa == 0
    sr = word_sign(r.bits, w)
    snb = word_sign(twos_complement(b.bits, w), w)
    return r, (sa == snb and sr != sa)


def sub(a: T, b: T) -> T:
    r, overflowed = overflowing_sub(a, b)
    if overflowed:
        raise overflow("sub", a.WIDTH)
    return r


# -- Multiplication ----------------------------------------------------------

def _mul_magnitudes(op: str, a: SignedInt, b: SignedInt) -> tuple[bool, int]:
    """(negative, |a| * |b|) with the product held in an unbounded int."""
    require_same_width(op, a, b)
    product = abs_magnitude(a) * abs_magnitude(b)
    negative = product != 0 and word_sign(a.bits, a.WIDTH) != word_sign(b.bits, b.WIDTH)
    return negative, product


def overflowing_mul(a: T, b: T) -> tuple[T, bool]:
    """Low W bits of the true product, and whether the product was out of range."""
    negative, product = _mul_magnitudes("overflowing_mul", a, b)
    w = a.WIDTH
    low = product & w.mask
    if negative:
        return type(a).pack(twos_complement(low, w)), product > w.min_negative_magnitude
    return type(a).pack(low), product > w.max_positive


def wrapping_mul(a: T, b: T) -> T:
    return overflowing_mul(a, b)[0]


def mul(a: T, b: T) -> T:
    """
    Checked product.

    Positive results must be <= 2^(W-1) - 1, negative results <= 2^(W-1) in
    magnitude.
    """
    negative, product = _mul_magnitudes("mul", a, b)
    w = a.WIDTH
    if negative:
        if product > w.min_negative_magnitude:
            raise overflow("mul", w)
        return type(a).pack(twos_complement(product, w))
    if product > w.max_positive:
        raise overflow("mul", w)
    return type(a).pack(product)


# -- Division / modulo -------------------------------------------------------

def div(a: T, b: T) -> T:
    """
    Truncating division (round toward zero).

    Raises `DivisionByZeroError` for b == 0 and `SignedIntOverflowError` only
    for MIN / -1.
    """
    cls = require_same_width("div", a, b)
    w = a.WIDTH
    if b.bits == 0:
        raise _division_by_zero("div", w)
    q = abs_magnitude(a) // abs_magnitude(b)
    if word_sign(a.bits, w) != word_sign(b.bits, w):
        return cls.pack(twos_complement(q, w))
    if q > w.max_positive:
        raise overflow("div", w, "minimum value divided by -1")
    return cls.pack(q)


def mod(a: T, b: T) -> T:
    """Remainder of truncating division: ``a - b * (a div b)``."""
    require_same_width("mod", a, b)
    if b.bits == 0:
        raise _division_by_zero("mod", a.WIDTH)
    return sub(a, mul(b, div(a, b)))


def divmod_(a: T, b: T) -> tuple[T, T]:
    require_same_width("divmod", a, b)
    if b.bits == 0:
        raise _division_by_zero("divmod", a.WIDTH)
    q = div(a, b)
    return q, sub(a, mul(b, q))


# -- Power -------------------------------------------------------------------

def pow_(base: T, exponent: int) -> T:
    """
    Binary exponentiation through checked `mul`.

    ``exponent == 0`` yields 1 for every base, including 0. The base is only
    squared while set bits remain, so an unused final square cannot abort.
    """
    if not isinstance(base, SignedInt):
        raise TypeError("pow: base must be a SignedInt value")
    if not isinstance(exponent, int) or isinstance(exponent, bool):
        raise TypeError("pow: exponent must be an int")
    if exponent < 0:
        raise ValueError("pow: exponent must be non-negative")

    result = type(base).one()
    b = base
    e = exponent
    while e:
        if e & 1:
            result = mul(result, b)
        e >>= 1
        if e:
            b = mul(b, b)
    return result


# -- gcd / lcm ---------------------------------------------------------------

def _gcd_magnitude(x: int, y: int) -> int:
    while y:
        x, y = y, x % y
    return x


def gcd(a: T, b: T) -> T:
    """
    Greatest common divisor of the magnitudes (always non-negative).

    gcd(0, n) == |n|. Only a gcd of 2^(W-1) (operands MIN/MIN or MIN/0) is
    unrepresentable.
    """
    cls = require_same_width("gcd", a, b)
    w = a.WIDTH
    g = _gcd_magnitude(abs_magnitude(a), abs_magnitude(b))
    if g > w.max_positive:
        raise overflow("gcd", w)
    return cls.pack(g)


def lcm(a: T, b: T) -> T:
    """Least common multiple (non-negative); 0 if either operand is 0."""
    cls = require_same_width("lcm", a, b)
    w = a.WIDTH
    if a.bits == 0 or b.bits == 0:
        return cls.zero()
    ma = abs_magnitude(a)
    mb = abs_magnitude(b)
    m = (ma // _gcd_magnitude(ma, mb)) * mb
    if m > w.max_positive:
        raise overflow("lcm", w)
    return cls.pack(m)
