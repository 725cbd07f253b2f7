"""Soft-float single-precision division on bit representations."""

from __future__ import annotations

from softfloat.formats import F32

__all__ = ["div32"]

_MASK = F32.int_mask
_FULL_ITERATIONS = 3
_RECIPROCAL_PRECISION = 10
# (3/4 + 1/sqrt(2)) - 1 truncated to 32 fractional bits.
_C = 0x7504F333


def _check(rep: int) -> None:
    if not 0 <= rep <= _MASK:
        raise ValueError(f"not a 32-bit representation: {rep!r}")


def div32(a: int, b: int) -> int:
    """Return the bits of the single-precision quotient ``a / b``.

    Rounds to nearest, ties to even. The reciprocal of the divisor is refined
    with Newton-Raphson iterations in fixed point and the quotient is then
    corrected from the residual.
    """
    _check(a)
    _check(b)

    fmt = F32
    bits = fmt.bits
    significand_bits = fmt.significand_bits
    max_exponent = fmt.exponent_max
    implicit_bit = fmt.implicit_bit
    significand_mask = fmt.significand_mask
    inf_rep = fmt.inf_rep
    quiet_bit = fmt.quiet_bit

    a_exponent = (a >> significand_bits) & max_exponent
    b_exponent = (b >> significand_bits) & max_exponent
    quotient_sign = (a ^ b) & fmt.sign_mask

    a_significand = a & significand_mask
    b_significand = b & significand_mask
    scale = 0

    # Zero, denormal, infinity or NaN on either side.
    if not 0 < a_exponent < max_exponent or not 0 < b_exponent < max_exponent:
        a_abs = a & fmt.abs_mask
        b_abs = b & fmt.abs_mask

        if a_abs > inf_rep:
            return a | quiet_bit
        if b_abs > inf_rep:
            return b | quiet_bit

        if a_abs == inf_rep:
            return fmt.qnan_rep if b_abs == inf_rep else a_abs | quotient_sign
        if b_abs == inf_rep:
            return quotient_sign

        if a_abs == 0:
            return fmt.qnan_rep if b_abs == 0 else quotient_sign
        if b_abs == 0:
            return inf_rep | quotient_sign

        if a_abs < implicit_bit:
            exponent, a_significand = fmt.normalize(a_significand)
            scale += exponent
        if b_abs < implicit_bit:
            exponent, b_significand = fmt.normalize(b_significand)
            scale -= exponent

    a_significand |= implicit_bit
    b_significand |= implicit_bit

    written_exponent = a_exponent - b_exponent + scale + fmt.exponent_bias
    # Divisor as a UQ1.31 fixed-point number in [1, 2).
    b_uq1 = (b_significand << (bits - significand_bits - 1)) & _MASK

    # Initial reciprocal estimate x0 = 3/4 + 1/sqrt(2) - b/2 as UQ0.32,
    # refined by x <- x * (2 - x * b).
    x_uq0 = (_C - b_uq1) & _MASK
    for _ in range(_FULL_ITERATIONS):
        corr_uq1 = (-((x_uq0 * b_uq1) >> bits)) & _MASK
        x_uq0 = ((x_uq0 * corr_uq1) >> (bits - 1)) & _MASK

    # Account for possible overflow, then bias the estimate below 1/b.
    x_uq0 = (x_uq0 - 2) & _MASK
    x_uq0 = (x_uq0 - _RECIPROCAL_PRECISION) & _MASK

    quotient = (x_uq0 * ((a_significand << 1) & _MASK)) >> bits

    if quotient < implicit_bit << 1:
        residual = (
            ((a_significand << (significand_bits + 1)) & _MASK)
            - ((quotient * b_significand) & _MASK)
        ) & _MASK
        a_significand = (a_significand << 1) & _MASK
        written_exponent -= 1
    else:
        quotient >>= 1
        residual = (
            ((a_significand << significand_bits) & _MASK)
            - ((quotient * b_significand) & _MASK)
        ) & _MASK

    if written_exponent >= max_exponent:
        return inf_rep | quotient_sign

    if written_exponent > 0:
        abs_result = quotient & significand_mask
        abs_result |= written_exponent << significand_bits
        residual = (residual << 1) & _MASK
    else:
        if significand_bits + written_exponent < 0:
            return quotient_sign
        abs_result = quotient >> ((1 - written_exponent) % bits)
        shifted = (a_significand << ((significand_bits + written_exponent) % bits)) & _MASK
        product = (((abs_result * b_significand) & _MASK) << 1) & _MASK
        residual = (shifted - product) & _MASK

    # Round to nearest; adding the low bit turns the comparison into
    # "greater or equal" for odd results, which breaks ties to even.
    residual = (residual + (abs_result & 1)) & _MASK
    if residual > b_significand:
        abs_result += 1

    return (abs_result | quotient_sign) & _MASK