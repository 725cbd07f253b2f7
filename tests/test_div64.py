import math

import pytest
from hypothesis import given, strategies as st

from softfloat.div64 import div, div64
from softfloat.formats import (
    F32,
    F64,
    FloatFormat,
    f32_from_bits,
    f32_to_bits,
    f64_from_bits,
    f64_to_bits,
)

finite = st.floats(allow_nan=False, allow_infinity=False)
nonzero_finite = finite.filter(lambda x: x != 0.0)


def _div_bits(x: float, y: float) -> int:
    return div64(f64_to_bits(x), f64_to_bits(y))


@given(finite, nonzero_finite)
def test_matches_host_division(x, y):
    assert _div_bits(x, y) == f64_to_bits(x / y)


@given(st.integers(min_value=0, max_value=F64.int_mask),
       st.integers(min_value=0, max_value=F64.int_mask))
def test_arbitrary_bits_match_host(a, b):
    x, y = f64_from_bits(a), f64_from_bits(b)
    result = div64(a, b)
    if math.isnan(x) or math.isnan(y) or (x == 0 and y == 0) or (
        math.isinf(x) and math.isinf(y)
    ):
        assert F64.is_nan(result)
    elif y == 0:
        assert result == F64.inf_rep | ((a ^ b) & F64.sign_mask)
    else:
        assert result == f64_to_bits(x / y)


@pytest.mark.parametrize(
    "x, y",
    [
        (6.0, 3.0),
        (1.0, 3.0),
        (-7.5, 2.5),
        (1.0, 10.0),
        (5e-324, 2.0),
        (5e-324, 3.0),
        (2.2250738585072014e-308, 3.0),
        (1e308, 1e-308),
        (1e-308, 1e308),
        (1.7976931348623157e308, 0.5),
    ],
)
def test_known_quotients(x, y):
    assert _div_bits(x, y) == f64_to_bits(x / y)


def test_exact_quotient():
    assert _div_bits(6.0, 3.0) == f64_to_bits(2.0)


def test_infinity_over_infinity_is_nan():
    assert div64(F64.inf_rep, F64.inf_rep) == F64.qnan_rep


def test_zero_over_zero_is_nan():
    assert div64(0, F64.sign_mask) == F64.qnan_rep


def test_division_by_zero_gives_signed_infinity():
    assert div64(f64_to_bits(1.0), F64.sign_mask) == F64.inf_rep | F64.sign_mask
    assert div64(f64_to_bits(-1.0), F64.sign_mask) == F64.inf_rep


def test_zero_dividend_gives_signed_zero():
    assert div64(0, f64_to_bits(-4.0)) == F64.sign_mask


def test_finite_over_infinity_is_zero():
    assert div64(f64_to_bits(3.0), F64.inf_rep | F64.sign_mask) == F64.sign_mask


def test_nan_operand_is_quieted():
    signaling = F64.inf_rep | 1
    assert div64(signaling, f64_to_bits(2.0)) == signaling | F64.quiet_bit
    assert div64(f64_to_bits(2.0), signaling) == signaling | F64.quiet_bit


@given(nonzero_finite)
def test_self_division_is_one(x):
    assert _div_bits(x, x) == f64_to_bits(1.0)


def test_rejects_out_of_range_representation():
    with pytest.raises(ValueError):
        div64(1 << 64, 0)
    with pytest.raises(ValueError):
        div64(0, -1)


def test_dispatch_to_double():
    assert div(F64, f64_to_bits(1.0), f64_to_bits(3.0)) == f64_to_bits(1.0 / 3.0)


def test_dispatch_to_single():
    a, b = f32_to_bits(6.0), f32_to_bits(3.0)
    assert div(F32, a, b) == f32_to_bits(2.0)


@given(st.floats(width=32, allow_nan=False, allow_infinity=False),
       st.floats(width=32, allow_nan=False, allow_infinity=False, min_value=1.0, max_value=4.0))
def test_dispatch_single_matches_rounded_host(x, y):
    a, b = f32_to_bits(x), f32_to_bits(y)
    expected = f32_to_bits(f32_from_bits(a) / f32_from_bits(b))
    assert div(F32, a, b) == expected


def test_dispatch_rejects_other_formats():
    with pytest.raises(ValueError):
        div(FloatFormat(16, 10), 0, 0)