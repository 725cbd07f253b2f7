"""Narrowing conversion between soft-float formats."""

from __future__ import annotations

from softfloat.formats import FloatFormat

__all__ = ["truncate"]


def truncate(src: FloatFormat, dst: FloatFormat, a: int) -> int:
    """Convert the bits ``a`` of format ``src`` to the narrower format ``dst``.

    Rounds to nearest, ties to even. Values too large become infinity, values
    too small become denormals or zero, and NaNs stay quiet NaNs with their
    payload truncated.
    """
    if (
        dst.bits > src.bits
        or dst.significand_bits > src.significand_bits
        or dst.exponent_bias > src.exponent_bias
    ):
        raise ValueError("destination format must be at most as wide as the source")
    if not 0 <= a <= src.int_mask:
        raise ValueError(f"not a {src.bits}-bit representation: {a!r}")

    mask = src.int_mask
    src_sb = src.significand_bits
    dst_sb = dst.significand_bits
    sign_bits_delta = src_sb - dst_sb

    round_mask = (1 << sign_bits_delta) - 1
    halfway = 1 << (sign_bits_delta - 1) if sign_bits_delta else 0
    src_qnan = 1 << (src_sb - 1)
    src_nan_code = src_qnan - 1
    dst_qnan = 1 << (dst_sb - 1)
    dst_nan_code = dst_qnan - 1

    underflow = (src.exponent_bias + 1 - dst.exponent_bias) << src_sb
    overflow = (src.exponent_bias + dst.exponent_max - dst.exponent_bias) << src_sb

    a_abs = a & src.abs_mask
    sign = a & src.sign_mask

    if ((a_abs - underflow) & mask) < ((a_abs - overflow) & mask):
        # Within the normal range of the destination: shift and rebias.
        abs_result = a_abs >> sign_bits_delta
        abs_result -= (src.exponent_bias - dst.exponent_bias) << dst_sb
        round_bits = a_abs & round_mask
        if round_bits > halfway:
            abs_result += 1
        elif round_bits == halfway:
            abs_result += abs_result & 1
    elif a_abs > src.inf_rep:
        # NaN: quiet it and keep what fits of the payload.
        abs_result = dst.exponent_max << dst_sb
        abs_result |= dst_qnan
        abs_result |= dst_nan_code & ((a_abs & src_nan_code) >> sign_bits_delta)
    elif a_abs >= overflow:
        abs_result = dst.exponent_max << dst_sb
    else:
        # Underflow or exact zero: denormalize with a sticky bit.
        a_exp = a_abs >> src_sb
        shift = src.exponent_bias - dst.exponent_bias - a_exp + 1
        significand = (a & src.significand_mask) | src.implicit_bit
        if shift > src_sb:
            abs_result = 0
        else:
            sticky = int(((significand << (src.bits - shift)) & mask) != 0)
            denormalized = (significand >> shift) | sticky
            abs_result = denormalized >> sign_bits_delta
            round_bits = denormalized & round_mask
            if round_bits > halfway:
                abs_result += 1
            elif round_bits == halfway:
                abs_result += abs_result & 1

    sign_result = sign >> (src.bits - dst.bits)
    return (abs_result | sign_result) & dst.int_mask