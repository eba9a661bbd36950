"""Tests for construction, packing and conversion of signed values."""

from __future__ import annotations

import pytest

from src.core.signed_int import (
    BY_BITS,
    I8,
    I16,
    I64,
    I256,
    SignedInt,
    SignedIntOverflowError,
    abs_magnitude,
    from_int,
    from_magnitude,
    neg_from_magnitude,
    to_int,
    unpack,
)


# ---------------------------------------------------------------------------
# SignedInt value type
# ---------------------------------------------------------------------------

class TestSignedIntType:
    def test_pack_unpack(self):
        assert unpack(I8.pack(0xFF)) == 0xFF

    def test_pack_is_a_raw_reinterpretation(self):
        assert int(I8.pack(0xFF)) == -1
        assert int(I8.pack(0x80)) == -128
        assert int(I8.pack(0x7F)) == 127

    def test_repr(self):
        assert repr(I8.pack(0xFF)) == "I8(-1)"
        assert repr(I64.zero()) == "I64(0)"

    def test_bits_must_fit_the_word(self):
        with pytest.raises(ValueError):
            I8.pack(0x100)
        with pytest.raises(ValueError):
            I8.pack(-1)

    def test_bits_must_be_int(self):
        with pytest.raises(TypeError):
            I8.pack(True)
        with pytest.raises(TypeError):
            I8.pack("1")

    def test_base_class_is_abstract(self):
        with pytest.raises(TypeError):
            SignedInt(0)

    def test_immutable(self):
        v = I8.pack(1)
        with pytest.raises(AttributeError):
            v.bits = 2  # type: ignore[misc]

    def test_equality_is_per_width(self):
        assert I8.pack(1) == I8.pack(1)
        assert I8.pack(1) != I16.pack(1)

    def test_hashable(self):
        assert len({I8.pack(1), I8.pack(1), I8.pack(2)}) == 2

    def test_constants(self):
        assert I8.zero().bits == 0
        assert int(I8.one()) == 1
        assert int(I8.max_value()) == 127
        assert int(I8.min_value()) == -128
        assert int(I256.min_value()) == -(2**255)


# ---------------------------------------------------------------------------
# from_magnitude / neg_from_magnitude
# ---------------------------------------------------------------------------

class TestFromMagnitude:
    def test_zero(self):
        assert from_magnitude(I8, 0) == I8.zero()

    def test_max_positive(self):
        assert from_magnitude(I8, 127).bits == 0x7F

    def test_overflow_past_max_positive(self):
        with pytest.raises(SignedIntOverflowError):
            from_magnitude(I8, 128)

    def test_rejects_value_wider_than_the_word(self):
        with pytest.raises(ValueError):
            from_magnitude(I8, 256)

    def test_rejects_negative(self):
        with pytest.raises(ValueError):
            from_magnitude(I8, -1)

    def test_overflow_error_is_builtin_overflow(self):
        with pytest.raises(OverflowError):
            from_magnitude(I16, 32768)


class TestNegFromMagnitude:
    def test_zero_has_no_negative_zero(self):
        assert neg_from_magnitude(I8, 0) == I8.zero()

    def test_one(self):
        assert neg_from_magnitude(I8, 1).bits == 0xFF

    def test_minimum_value_boundary(self):
        v = neg_from_magnitude(I8, 128)
        assert v.bits == 0x80
        assert v == I8.min_value()

    def test_overflow_past_min_magnitude(self):
        with pytest.raises(SignedIntOverflowError):
            neg_from_magnitude(I8, 129)

    def test_every_width_boundary(self):
        for bits, cls in BY_BITS.items():
            assert neg_from_magnitude(cls, 1 << (bits - 1)).bits == 1 << (bits - 1)
            with pytest.raises(SignedIntOverflowError):
                neg_from_magnitude(cls, (1 << (bits - 1)) + 1)


class TestRoundTrip:
    def test_magnitude_round_trip_i8(self):
        for u in range(128):
            assert abs_magnitude(from_magnitude(I8, u)) == u
        for u in range(129):
            assert abs_magnitude(neg_from_magnitude(I8, u)) == u


# ---------------------------------------------------------------------------
# from_int / to_int
# ---------------------------------------------------------------------------

class TestFromInt:
    def test_positive(self):
        assert from_int(I8, 5) == from_magnitude(I8, 5)

    def test_negative(self):
        assert from_int(I8, -5) == neg_from_magnitude(I8, 5)

    def test_bounds(self):
        assert to_int(from_int(I8, -128)) == -128
        assert to_int(from_int(I8, 127)) == 127

    def test_out_of_range(self):
        with pytest.raises(SignedIntOverflowError):
            from_int(I8, 128)
        with pytest.raises(SignedIntOverflowError):
            from_int(I8, -129)
        with pytest.raises(SignedIntOverflowError):
            from_int(I8, 10**6)

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            from_int(I8, False)

    def test_full_i8_range_round_trips(self):
        for n in range(-128, 128):
            assert to_int(from_int(I8, n)) == n
