"""
Core integer kernels
"""

from .signed_int import (
    BY_BITS,
    I8,
    I16,
    I32,
    I64,
    I128,
    I256,
    DivisionByZeroError,
    SignedInt,
    SignedIntOverflowError,
)

__all__ = [
    "BY_BITS",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "I256",
    "SignedInt",
    "SignedIntOverflowError",
    "DivisionByZeroError",
]
