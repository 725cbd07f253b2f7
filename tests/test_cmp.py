import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from softfloat.cmp import Ordering, compare, unordered
from softfloat.formats import F32, F64, f32_to_bits, f64_to_bits


def _expected(x, y):
    if math.isnan(x) or math.isnan(y):
        return Ordering.UNORDERED
    if x < y:
        return Ordering.LESS
    if x == y:
        return Ordering.EQUAL
    return Ordering.GREATER


@given(st.floats(), st.floats())
def test_compare_f64_matches_native(x, y):
    assert compare(F64, f64_to_bits(x), f64_to_bits(y)) == _expected(x, y)


@given(st.floats(width=32), st.floats(width=32))
def test_compare_f32_matches_native(x, y):
    assert compare(F32, f32_to_bits(x), f32_to_bits(y)) == _expected(x, y)


@given(st.floats(), st.floats())
def test_unordered_matches_nan_presence(x, y):
    assert unordered(F64, f64_to_bits(x), f64_to_bits(y)) == (
        math.isnan(x) or math.isnan(y)
    )


@given(st.floats(allow_nan=False), st.floats(allow_nan=False))
def test_compare_is_antisymmetric(x, y):
    a, b = f64_to_bits(x), f64_to_bits(y)
    forward = compare(F64, a, b)
    backward = compare(F64, b, a)
    assert forward.le_abi() == -backward.le_abi()


def test_signed_zeros_are_equal():
    assert compare(F32, 0, F32.sign_mask) is Ordering.EQUAL
    assert compare(F64, F64.sign_mask, 0) is Ordering.EQUAL


def test_negative_values_reverse_order():
    assert compare(F64, f64_to_bits(-2.0), f64_to_bits(-1.0)) is Ordering.LESS
    assert compare(F32, f32_to_bits(-1.0), f32_to_bits(-2.0)) is Ordering.GREATER


@pytest.mark.parametrize(
    "ordering, le, ge",
    [
        (Ordering.LESS, -1, -1),
        (Ordering.EQUAL, 0, 0),
        (Ordering.GREATER, 1, 1),
        (Ordering.UNORDERED, 1, -1),
    ],
)
def test_abi_values(ordering, le, ge):
    assert ordering.le_abi() == le
    assert ordering.ge_abi() == ge


def test_nan_against_infinity():
    assert compare(F32, F32.qnan_rep, F32.inf_rep) is Ordering.UNORDERED
    assert unordered(F32, F32.inf_rep, F32.qnan_rep)
    assert not unordered(F32, F32.inf_rep, F32.inf_rep | F32.sign_mask)


def test_rejects_out_of_range_representation():
    with pytest.raises(ValueError):
        compare(F32, 0, 1 << 32)
    with pytest.raises(ValueError):
        unordered(F64, -1, 0)