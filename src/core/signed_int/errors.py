"""Exception types for the signed integer kernel.

Arithmetic failures subclass both ``SignedIntError`` and the matching builtin
(``OverflowError`` / ``ZeroDivisionError``) so callers can catch either.
"""

from __future__ import annotations


class SignedIntError(Exception):
    """Base class for all signed integer kernel errors."""


class SignedIntOverflowError(SignedIntError, OverflowError):
    """Raised when a value or result is not representable in the operand width."""

    def __init__(self, op: str, width: int, detail: str = "") -> None:
        self.op = op
        self.width = width
        msg = f"{op}: result not representable in i{width}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class DivisionByZeroError(SignedIntError, ZeroDivisionError):
    """Raised by div/mod when the divisor is zero."""

    def __init__(self, op: str, width: int) -> None:
        self.op = op
        self.width = width
        super().__init__(f"{op}: division by zero (i{width})")


class WidthConfigError(SignedIntError, ValueError):
    """Raised when the width table YAML is malformed or inconsistent."""
