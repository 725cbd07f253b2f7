import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from softfloat.formats import (
    F32,
    F64,
    f32_from_bits,
    f32_to_bits,
    f64_from_bits,
    f64_to_bits,
)


def test_f32_layout_matches_bit_patterns():
    assert F32.exponent_bits == 8
    assert F32.exponent_max == 255
    assert F32.exponent_bias == 127
    assert f32_to_bits(-0.0) == F32.sign_mask == 0x80000000
    assert f32_to_bits(math.inf) == F32.exponent_mask == 0x7F800000
    assert F32.from_parts(False, 0, F32.significand_mask) == 0x007FFFFF
    assert F32.from_parts(False, F32.exponent_bias, 0) == 0x3F800000


def test_f64_layout_matches_bit_patterns():
    assert F64.exponent_bits == 11
    assert F64.exponent_bias == 1023
    assert f64_to_bits(-0.0) == F64.sign_mask == 0x8000000000000000
    assert f64_to_bits(math.inf) == F64.exponent_mask == 0x7FF0000000000000
    assert F64.from_parts(False, F64.exponent_max, 0) == 0x7FF0000000000000


def test_one_bit_patterns():
    assert f32_to_bits(1.0) == 0x3F800000
    assert f64_to_bits(1.0) == 0x3FF0000000000000


def test_from_parts_builds_one():
    assert F32.from_parts(False, F32.exponent_bias, 0) == f32_to_bits(1.0)
    assert F64.from_parts(True, F64.exponent_bias, 0) == f64_to_bits(-1.0)


@given(st.booleans(), st.integers(0, 255), st.integers(0, (1 << 23) - 1))
def test_from_parts_fields_round_trip(sign, exponent, significand):
    rep = F32.from_parts(sign, exponent, significand)
    assert bool(rep & F32.sign_mask) == sign
    assert (rep & F32.exponent_mask) >> F32.significand_bits == exponent
    assert rep & F32.significand_mask == significand


@pytest.mark.parametrize("fmt", [F32, F64])
def test_normalize_places_leading_bit(fmt):
    for significand in (1, 2, 3, fmt.significand_mask, fmt.quiet_bit):
        exponent, normalized = fmt.normalize(significand)
        assert normalized & fmt.implicit_bit
        assert normalized < 2 * fmt.implicit_bit
        assert normalized == significand << (1 - exponent)


@given(st.floats(allow_nan=False))
def test_f64_bits_round_trip(value):
    assert f64_from_bits(f64_to_bits(value)) == value


@given(st.floats(width=32, allow_nan=False))
def test_f32_bits_round_trip(value):
    assert f32_from_bits(f32_to_bits(value)) == value


def test_is_nan_and_subnormal():
    assert F64.is_nan(f64_to_bits(math.nan))
    assert not F64.is_nan(f64_to_bits(math.inf))
    assert F32.is_subnormal(f32_to_bits(1e-40))
    assert F32.is_subnormal(0)
    assert not F32.is_subnormal(f32_to_bits(1.0))


def test_eq_repr():
    assert F32.eq_repr(F32.qnan_rep, F32.qnan_rep | 1)
    assert not F32.eq_repr(0, F32.sign_mask)
    assert F32.eq_repr(f32_to_bits(2.0), f32_to_bits(2.0))


@given(st.integers(0, (1 << 32) - 1))
def test_to_signed_wraps_back(rep):
    signed = F32.to_signed(rep)
    assert signed % (1 << 32) == rep
    assert (signed < 0) == bool(rep & F32.sign_mask)


def test_from_bits_rejects_out_of_range():
    with pytest.raises(ValueError):
        f32_from_bits(1 << 32)
    with pytest.raises(ValueError):
        f64_from_bits(-1)


def test_f32_to_bits_overflow():
    with pytest.raises(OverflowError):
        f32_to_bits(1e300)