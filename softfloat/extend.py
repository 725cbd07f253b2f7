"""Widening conversion between soft-float formats."""

from __future__ import annotations

from softfloat.formats import FloatFormat

__all__ = ["extend"]


def extend(src: FloatFormat, dst: FloatFormat, a: int) -> int:
    """Convert the bits ``a`` of format ``src`` to the wider format ``dst``.

    The conversion is exact; NaN payloads are carried over left-aligned.
    """
    if (
        dst.bits < src.bits
        or dst.significand_bits < src.significand_bits
        or dst.exponent_bias < src.exponent_bias
    ):
        raise ValueError("destination format must be at least as wide as the source")
    if not 0 <= a <= src.int_mask:
        raise ValueError(f"not a {src.bits}-bit representation: {a!r}")

    src_min_normal = src.implicit_bit
    src_infinity = src.exponent_mask
    src_qnan = src.significand_mask
    src_nan_code = src_qnan - 1

    dst_sb = dst.significand_bits
    sign_bits_delta = dst_sb - src.significand_bits
    exp_bias_delta = dst.exponent_bias - src.exponent_bias

    a_abs = a & src.abs_mask
    abs_result = 0

    if a_abs - src_min_normal >= 0 and a_abs - src_min_normal < src_infinity - src_min_normal:
        # Normal: shift the fields into place and rebias the exponent.
        abs_result = (a_abs << sign_bits_delta) + (exp_bias_delta << dst_sb)
    elif a_abs >= src_infinity:
        # Infinity or NaN: keep the payload, right-aligned in the new field.
        abs_result = dst.exponent_max << dst_sb
        abs_result |= (a_abs & src_qnan) << sign_bits_delta
        abs_result |= (a_abs & src_nan_code) << sign_bits_delta
    elif a_abs != 0:
        # Denormal: renormalize and drop the leading one.
        scale = src_min_normal.bit_length() - a_abs.bit_length()
        abs_result = a_abs << (sign_bits_delta + scale)
        abs_result = (abs_result ^ dst.implicit_bit) | (
            (exp_bias_delta - scale + 1) << dst_sb
        )

    sign_result = (a & src.sign_mask) << (dst.bits - src.bits)
    return (abs_result | sign_result) & dst.int_mask