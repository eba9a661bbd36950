"""`signed_int`: fixed-width two's-complement signed integers over unsigned words.

One width-generic implementation serves every supported width
(`src/kernels/signed/signed_int_v1.yaml`):

    I8, I16, I32, I64, I128, I256

Values are immutable (frozen dataclasses holding one unsigned word). Every
operation is a pure function returning a new value or raising:
- `SignedIntOverflowError` when a result is not representable,
- `DivisionByZeroError` when dividing by zero.

Public API:
- construction: `from_magnitude`, `neg_from_magnitude`, `from_int`, `to_int`,
  `I*.pack`, `unpack`, `I*.zero`
- sign/magnitude: `sign`, `is_neg`, `is_zero`, `abs_value`, `abs_magnitude`, `neg`
- arithmetic: `add`/`sub`/`mul` (checked), `wrapping_*`, `overflowing_*`,
  `div`, `mod`, `divmod_`, `pow_`, `gcd`, `lcm`
- ordering: `cmp`, `eq`, `ne`, `lt`, `lte`, `gt`, `gte`, `min_`, `max_`
"""

from .arith import (
    add,
    div,
    divmod_,
    gcd,
    lcm,
    mod,
    mul,
    overflowing_add,
    overflowing_mul,
    overflowing_sub,
    pow_,
    sub,
    wrapping_add,
    wrapping_mul,
    wrapping_sub,
)
from .bits import abs_magnitude, abs_value, bit_and, bit_or, is_neg, is_zero, neg, sign, wrapping_neg
from .conversion import from_int, from_magnitude, neg_from_magnitude, to_int
from .errors import DivisionByZeroError, SignedIntError, SignedIntOverflowError, WidthConfigError
from .ordering import Ordering, cmp, eq, gt, gte, lt, lte, max_, min_, ne
from .types import BY_BITS, I8, I16, I32, I64, I128, I256, SignedInt, unpack
from .widths import SUPPORTED_WIDTHS, Width, width

__all__ = [
    "SignedInt",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "I256",
    "BY_BITS",
    "Width",
    "width",
    "SUPPORTED_WIDTHS",
    "unpack",
    "from_magnitude",
    "neg_from_magnitude",
    "from_int",
    "to_int",
    "sign",
    "is_neg",
    "is_zero",
    "abs_value",
    "abs_magnitude",
    "neg",
    "wrapping_neg",
    "bit_and",
    "bit_or",
    "add",
    "sub",
    "mul",
    "wrapping_add",
    "wrapping_sub",
    "wrapping_mul",
    "overflowing_add",
    "overflowing_sub",
    "overflowing_mul",
    "div",
    "mod",
    "divmod_",
    "pow_",
    "gcd",
    "lcm",
    "Ordering",
    "cmp",
    "eq",
    "ne",
    "lt",
    "lte",
    "gt",
    "gte",
    "min_",
    "max_",
    "SignedIntError",
    "SignedIntOverflowError",
    "DivisionByZeroError",
    "WidthConfigError",
]
