"""Conversions between integers and soft-float bit representations."""

from __future__ import annotations

from softfloat.formats import FloatFormat

__all__ = [
    "unsigned_to_float",
    "signed_to_float",
    "float_to_unsigned",
    "float_to_signed",
]

_WIDTHS = (32, 64, 128)


def _check_width(width: int) -> None:
    if width not in _WIDTHS:
        raise ValueError(f"unsupported integer width: {width!r}")


def _check_rep(fmt: FloatFormat, rep: int) -> None:
    if not 0 <= rep <= fmt.int_mask:
        raise ValueError(f"not a {fmt.bits}-bit representation: {rep!r}")


def _magnitude_to_bits(fmt: FloatFormat, magnitude: int) -> int:
    """Round a non-negative integer to the nearest value of ``fmt``, ties to even."""
    if magnitude == 0:
        return 0
    n = magnitude.bit_length()
    precision = fmt.significand_bits + 1
    if n <= precision:
        m = magnitude << (precision - n)
    else:
        drop = n - precision
        m = magnitude >> drop
        remainder = magnitude & ((1 << drop) - 1)
        half = 1 << (drop - 1)
        if remainder > half or (remainder == half and m & 1):
            m += 1
    exponent = fmt.exponent_bias + n - 1
    # Added, not or-ed, so a carry out of the significand bumps the exponent.
    result = ((exponent - 1) << fmt.significand_bits) + m
    return min(result, fmt.inf_rep)


def unsigned_to_float(fmt: FloatFormat, value: int, width: int) -> int:
    """Convert an unsigned ``width``-bit integer to the bits of ``fmt``."""
    _check_width(width)
    if not 0 <= value < 1 << width:
        raise ValueError(f"not an unsigned {width}-bit integer: {value!r}")
    return _magnitude_to_bits(fmt, value)


def signed_to_float(fmt: FloatFormat, value: int, width: int) -> int:
    """Convert a signed ``width``-bit integer to the bits of ``fmt``."""
    _check_width(width)
    if not -(1 << (width - 1)) <= value < 1 << (width - 1):
        raise ValueError(f"not a signed {width}-bit integer: {value!r}")
    sign = fmt.sign_mask if value < 0 else 0
    return _magnitude_to_bits(fmt, abs(value)) | sign


def _truncated_magnitude(fmt: FloatFormat, abs_rep: int) -> int:
    """Integer part of a finite value of at least one, given without its sign."""
    exponent = abs_rep >> fmt.significand_bits
    significand = (abs_rep & fmt.significand_mask) | fmt.implicit_bit
    shift = exponent - fmt.exponent_bias - fmt.significand_bits
    return significand << shift if shift >= 0 else significand >> -shift


def float_to_unsigned(fmt: FloatFormat, rep: int, width: int) -> int:
    """Truncate to an unsigned ``width``-bit integer.

    Values below one, negative values and NaN give zero; values too large,
    infinity included, saturate to the largest integer.
    """
    _check_width(width)
    _check_rep(fmt, rep)
    sb = fmt.significand_bits
    bias = fmt.exponent_bias
    if rep < bias << sb:
        return 0
    if rep < (bias + width) << sb:
        return _truncated_magnitude(fmt, rep)
    if rep <= fmt.inf_rep:
        return (1 << width) - 1
    return 0


def float_to_signed(fmt: FloatFormat, rep: int, width: int) -> int:
    """Truncate toward zero to a signed ``width``-bit integer.

    Out-of-range values, infinities included, saturate; NaN gives zero.
    """
    _check_width(width)
    _check_rep(fmt, rep)
    sb = fmt.significand_bits
    bias = fmt.exponent_bias
    abs_rep = rep & fmt.abs_mask
    negative = bool(rep & fmt.sign_mask)
    if abs_rep < bias << sb:
        return 0
    if abs_rep < (bias + width - 1) << sb:
        magnitude = _truncated_magnitude(fmt, abs_rep)
        return -magnitude if negative else magnitude
    if abs_rep <= fmt.inf_rep:
        return -(1 << (width - 1)) if negative else (1 << (width - 1)) - 1
    return 0