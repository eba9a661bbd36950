#!/usr/bin/env python3
"""
Evaluate one signed integer kernel operation from the command line.

Operands are Python int literals (decimal or 0x/0b/0o prefixed, optionally
negative) converted into the chosen width with `from_int`. `pow` takes an
unsigned exponent as its second operand.

Output is a single JSON line; failures exit 1 with `"ok": false`.

Example:
  python3 tools/signed_int_calc.py --width 8 add 127 1
  python3 tools/signed_int_calc.py --width 64 div -- -7 2
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Callable

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.core import signed_int as si


BINARY_OPS: dict[str, Callable[..., Any]] = {
    "add": si.add,
    "sub": si.sub,
    "mul": si.mul,
    "div": si.div,
    "mod": si.mod,
    "divmod": si.divmod_,
    "wrapping_add": si.wrapping_add,
    "wrapping_sub": si.wrapping_sub,
    "wrapping_mul": si.wrapping_mul,
    "overflowing_add": si.overflowing_add,
    "overflowing_sub": si.overflowing_sub,
    "overflowing_mul": si.overflowing_mul,
    "gcd": si.gcd,
    "lcm": si.lcm,
    "cmp": si.cmp,
    "eq": si.eq,
    "lt": si.lt,
    "lte": si.lte,
    "gt": si.gt,
    "gte": si.gte,
    "min": si.min_,
    "max": si.max_,
}

UNARY_OPS: dict[str, Callable[..., Any]] = {
    "abs": si.abs_value,
    "abs_magnitude": si.abs_magnitude,
    "neg": si.neg,
    "sign": si.sign,
    "is_neg": si.is_neg,
    "is_zero": si.is_zero,
}


class CalcError(Exception):
    pass


def _parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError as exc:
        raise CalcError(f"not an integer literal: {text!r}") from exc


def _render(value: Any) -> Any:
    if isinstance(value, si.SignedInt):
        return int(value)
    if isinstance(value, si.Ordering):
        return value.name
    return value


def evaluate(*, bits: int, op: str, operands: list[str]) -> dict[str, Any]:
    """Run *op* on *operands* in width *bits*; kernel errors propagate."""
    if bits not in si.BY_BITS:
        raise CalcError(f"unsupported width: {bits} (supported: {list(si.SUPPORTED_WIDTHS)})")
    cls = si.BY_BITS[bits]
    out: dict[str, Any] = {"ok": True, "op": op, "width": bits}

    if op == "pow":
        if len(operands) != 2:
            raise CalcError("pow takes a base and an exponent")
        exponent = _parse_int(operands[1])
        if exponent < 0:
            raise CalcError("pow exponent must be non-negative")
        out["result"] = _render(si.pow_(si.from_int(cls, _parse_int(operands[0])), exponent))
        return out

    if op in UNARY_OPS:
        if len(operands) != 1:
            raise CalcError(f"{op} takes one operand")
        out["result"] = _render(UNARY_OPS[op](si.from_int(cls, _parse_int(operands[0]))))
        return out

    if op not in BINARY_OPS:
        raise CalcError(f"unknown op: {op}")
    if len(operands) != 2:
        raise CalcError(f"{op} takes two operands")
    a = si.from_int(cls, _parse_int(operands[0]))
    b = si.from_int(cls, _parse_int(operands[1]))
    res = BINARY_OPS[op](a, b)
    if op.startswith("overflowing_"):
        value, overflowed = res
        out["result"] = _render(value)
        out["overflowed"] = overflowed
    elif op == "divmod":
        out["result"] = [_render(x) for x in res]
    else:
        out["result"] = _render(res)
    return out


def main(argv: list[str] | None = None) -> int:
    ops = sorted([*BINARY_OPS, *UNARY_OPS, "pow"])
    p = argparse.ArgumentParser(description="Evaluate a fixed-width signed integer operation.")
    p.add_argument("--width", type=int, default=64, help="Bit width (default: 64)")
    p.add_argument("op", choices=ops, help="Operation name")
    p.add_argument("operands", nargs="+", help="Integer operands")
    args = p.parse_args(argv)

    try:
        out = evaluate(bits=int(args.width), op=str(args.op), operands=list(args.operands))
    except CalcError as exc:
        print(f"signed_int_calc error: {exc}", file=sys.stderr)
        return 2
    except si.SignedIntOverflowError as exc:
        print(json.dumps({"ok": False, "op": args.op, "width": args.width, "error": "overflow", "detail": str(exc)}))
        return 1
    except si.DivisionByZeroError as exc:
        print(json.dumps({"ok": False, "op": args.op, "width": args.width, "error": "division_by_zero", "detail": str(exc)}))
        return 1

    print(json.dumps(out))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
