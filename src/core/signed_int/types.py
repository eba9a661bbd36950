"""Value types for the signed integer kernel.

`SignedInt` is a frozen dataclass over one unsigned W-bit word (`bits`)
interpreted as two's complement. Each supported width is a thin subclass that
only binds its `Width` descriptor:

    I8, I16, I32, I64, I128, I256

Every W-bit pattern is a legal value, so the only construction checks are on
the word itself (an int in ``[0, 2^W - 1]``). Range-checked construction from
magnitudes lives in `conversion.py`; `pack` is the unchecked escape hatch for
trusted internal composition.

Python's ``<``/``>`` operators are intentionally not defined: ordering is
signed, not bit-pattern, and is provided by `ordering.py`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, TypeVar

from .widths import Width, width

T = TypeVar("T", bound="SignedInt")


@dataclass(frozen=True)
class SignedInt:
    """Two's-complement signed integer of a fixed width."""

    WIDTH: ClassVar[Width]

    bits: int

    def __post_init__(self) -> None:
        w = getattr(type(self), "WIDTH", None)
        if w is None:
            raise TypeError("SignedInt is abstract; use a width class such as I64")
        if not isinstance(self.bits, int) or isinstance(self.bits, bool):
            raise TypeError("bits must be an int")
        if self.bits < 0 or self.bits > w.mask:
            raise ValueError(f"bits must be an unsigned {w.bits}-bit word")

    @classmethod
    def pack(cls: type[T], bits: int) -> T:
        """Reinterpret a raw W-bit word as a value (no range check)."""
        return cls(bits)

    @classmethod
    def zero(cls: type[T]) -> T:
        return cls(0)

    @classmethod
    def one(cls: type[T]) -> T:
        return cls(1)

    @classmethod
    def max_value(cls: type[T]) -> T:
        return cls(cls.WIDTH.max_positive)

    @classmethod
    def min_value(cls: type[T]) -> T:
        return cls(cls.WIDTH.sign_bit)

    def __int__(self) -> int:
        w = self.WIDTH
        if self.bits & w.sign_bit:
            return self.bits - (w.mask + 1)
        return self.bits

    def __index__(self) -> int:
        return int(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"


class I8(SignedInt):
    WIDTH = width(8)


class I16(SignedInt):
    WIDTH = width(16)


class I32(SignedInt):
    WIDTH = width(32)


class I64(SignedInt):
    WIDTH = width(64)


class I128(SignedInt):
    WIDTH = width(128)


class I256(SignedInt):
    WIDTH = width(256)


BY_BITS: dict[int, type[SignedInt]] = {cls.WIDTH.bits: cls for cls in (I8, I16, I32, I64, I128, I256)}


def unpack(value: SignedInt) -> int:
    """Raw W-bit word of *value*."""
    return value.bits


def require_same_width(op: str, a: SignedInt, b: SignedInt) -> type[SignedInt]:
    """Class shared by both operands; mixing widths is a TypeError."""
    if not isinstance(a, SignedInt) or not isinstance(b, SignedInt):
        raise TypeError(f"{op}: operands must be SignedInt values")
    if type(a) is not type(b):
        raise TypeError(f"{op}: width mismatch ({type(a).__name__} vs {type(b).__name__})")
    return type(a)
