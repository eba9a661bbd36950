"""
Width descriptors for the signed integer kernel.

The supported widths are declared in `src/kernels/signed/signed_int_v1.yaml`.
This module loads that table once, checks its boundary literals against the
two's-complement formulas, and exposes one `Width` per entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

import yaml

from .errors import WidthConfigError

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Width:
    """Constants for one W-bit two's-complement instantiation."""

    bits: int
    mask: int
    sign_bit: int
    max_positive: int
    min_negative_magnitude: int

    @classmethod
    def of(cls, bits: int) -> "Width":
        if not isinstance(bits, int) or isinstance(bits, bool):
            raise TypeError("bits must be an int")
        if bits <= 0 or bits % 8 != 0:
            raise ValueError(f"unsupported width: {bits} (must be a positive multiple of 8)")
        half = 1 << (bits - 1)
        return cls(
            bits=bits,
            mask=(1 << bits) - 1,
            sign_bit=half,
            max_positive=half - 1,
            min_negative_magnitude=half,
        )


def _table_path() -> Path:
    # src/core/signed_int/widths.py -> src/ -> kernels/signed/signed_int_v1.yaml
    return Path(__file__).resolve().parents[2] / "kernels" / "signed" / "signed_int_v1.yaml"


def _require_table_int(entry: Mapping[str, Any], key: str) -> int:
    v = entry.get(key)
    if not isinstance(v, int) or isinstance(v, bool):
        raise WidthConfigError(f"width entry field {key!r} must be an int")
    return v


def parse_width_table(obj: Any) -> dict[int, Width]:
    """
    Validate a decoded width table and build its descriptors.

    Every entry must declare `bits`, `max_positive` and `min_negative_magnitude`;
    the two boundary literals must equal 2^(bits-1) - 1 and 2^(bits-1).
    """
    if not isinstance(obj, Mapping):
        raise WidthConfigError("width table must be a mapping")
    entries = obj.get("widths")
    if not isinstance(entries, list) or not entries:
        raise WidthConfigError("width table must declare a non-empty 'widths' list")

    table: dict[int, Width] = {}
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise WidthConfigError("width entries must be mappings")
        bits = _require_table_int(entry, "bits")
        try:
            w = Width.of(bits)
        except ValueError as exc:
            raise WidthConfigError(str(exc)) from exc
        if bits in table:
            raise WidthConfigError(f"duplicate width: {bits}")
        if _require_table_int(entry, "max_positive") != w.max_positive:
            raise WidthConfigError(f"i{bits}: max_positive does not equal 2^{bits - 1} - 1")
        if _require_table_int(entry, "min_negative_magnitude") != w.min_negative_magnitude:
            raise WidthConfigError(f"i{bits}: min_negative_magnitude does not equal 2^{bits - 1}")
        table[bits] = w
    return table


@lru_cache(maxsize=1)
def load_width_table() -> Mapping[int, Width]:
    path = _table_path()
    obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    table = parse_width_table(obj)
    _logger.debug("width_table_loaded path=%s widths=%s", path.name, sorted(table))
    return table


def width(bits: int) -> Width:
    """Descriptor for a supported width (KeyError otherwise)."""
    table = load_width_table()
    if bits not in table:
        raise KeyError(f"unsupported width: {bits}")
    return table[bits]


SUPPORTED_WIDTHS: tuple[int, ...] = tuple(sorted(load_width_table()))
