"""Bit/sign utilities for the signed integer kernel.

Word-level helpers (`word_sign`, `twos_complement`) operate on raw unsigned
words; the value-level helpers wrap them for `SignedInt`.
"""

from __future__ import annotations

import logging
import warnings

from .errors import SignedIntOverflowError
from .types import SignedInt, T, require_same_width
from .widths import Width

_logger = logging.getLogger(__name__)


# -- Word helpers ------------------------------------------------------------

def word_sign(bits: int, w: Width) -> int:
    """Top bit of a W-bit word (1 = negative)."""
    return 1 if bits & w.sign_bit else 0


def twos_complement(bits: int, w: Width) -> int:
    """Two's-complement negation of a W-bit word (0 negates to 0)."""
    if bits == 0:
        return 0
    return ((bits ^ w.mask) + 1) & w.mask


def overflow(op: str, w: Width, detail: str = "") -> SignedIntOverflowError:
    _logger.debug("signed_int_overflow op=%s width=%s", op, w.bits)
    return SignedIntOverflowError(op, w.bits, detail)


# -- Sign / magnitude --------------------------------------------------------

def sign(v: SignedInt) -> int:
    return word_sign(v.bits, v.WIDTH)


def is_neg(v: SignedInt) -> bool:
    return sign(v) == 1


def is_zero(v: SignedInt) -> bool:
    return v.bits == 0


def abs_magnitude(v: SignedInt) -> int:
    """Unsigned magnitude of *v*; total, since 2^(W-1) fits the unsigned word."""
    if is_neg(v):
        return twos_complement(v.bits, v.WIDTH)
    return v.bits


def abs_value(v: T) -> T:
    """
    Absolute value as a signed value.

    Fails for the minimum value: its magnitude 2^(W-1) has no positive
    W-bit representation.
    """
    if not is_neg(v):
        return v
    if v.bits == v.WIDTH.sign_bit:
        raise overflow("abs", v.WIDTH, "minimum value has no positive counterpart")
    return type(v).pack(twos_complement(v.bits, v.WIDTH))


def wrapping_neg(v: T) -> T:
    """Negation modulo 2^W (the minimum value negates to itself)."""
    return type(v).pack(twos_complement(v.bits, v.WIDTH))


def neg(v: T) -> T:
    if v.bits == v.WIDTH.sign_bit:
        raise overflow("neg", v.WIDTH, "minimum value has no positive counterpart")
    return wrapping_neg(v)


# -- Bitwise (deprecated) ----------------------------------------------------

def bit_and(a: T, b: T) -> T:
    """
    Bitwise AND of the two's-complement encodings.

    Deprecated: this is a bit-pattern operation, not an arithmetic one.
    """
    warnings.warn("bit_and operates on raw encodings and is deprecated", DeprecationWarning, stacklevel=2)
    cls = require_same_width("bit_and", a, b)
    return cls.pack(a.bits & b.bits)


def bit_or(a: T, b: T) -> T:
    """
    Bitwise OR of the two's-complement encodings.

    Deprecated: this is a bit-pattern operation, not an arithmetic one.
    """
    warnings.warn("bit_or operates on raw encodings and is deprecated", DeprecationWarning, stacklevel=2)
    cls = require_same_width("bit_or", a, b)
    return cls.pack(a.bits | b.bits)
