"""Soft-float multiplication on bit representations."""

from __future__ import annotations

from softfloat.formats import FloatFormat

__all__ = ["mul"]


def _check(fmt: FloatFormat, rep: int) -> None:
    if not 0 <= rep <= fmt.int_mask:
        raise ValueError(f"not a {fmt.bits}-bit representation: {rep!r}")


def mul(fmt: FloatFormat, a: int, b: int) -> int:
    """Return the bits of ``a * b``, rounded to nearest, ties to even."""
    _check(fmt, a)
    _check(fmt, b)

    mask = fmt.int_mask
    bits = fmt.bits
    significand_bits = fmt.significand_bits
    max_exponent = fmt.exponent_max
    implicit_bit = fmt.implicit_bit
    significand_mask = fmt.significand_mask
    sign_bit = fmt.sign_mask
    inf_rep = fmt.inf_rep
    quiet_bit = fmt.quiet_bit

    a_exponent = (a >> significand_bits) & max_exponent
    b_exponent = (b >> significand_bits) & max_exponent
    product_sign = (a ^ b) & sign_bit

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
            return a_abs | product_sign if b_abs else fmt.qnan_rep
        if b_abs == inf_rep:
            return b_abs | product_sign if a_abs else fmt.qnan_rep

        if a_abs == 0 or b_abs == 0:
            return product_sign

        if a_abs < implicit_bit:
            exponent, a_significand = fmt.normalize(a_significand)
            scale += exponent
        if b_abs < implicit_bit:
            exponent, b_significand = fmt.normalize(b_significand)
            scale += exponent

    a_significand |= implicit_bit
    b_significand |= implicit_bit

    # Left-align one operand so the product's leading one lands on the
    # implicit bit of the high word, or one place below it.
    product = a_significand * ((b_significand << fmt.exponent_bits) & mask)
    product_low = product & mask
    product_high = product >> bits

    product_exponent = a_exponent + b_exponent + scale - fmt.exponent_bias

    if product_high & implicit_bit:
        product_exponent += 1
    else:
        product_high = ((product_high << 1) | (product_low >> (bits - 1))) & mask
        product_low = (product_low << 1) & mask

    if product_exponent >= max_exponent:
        return inf_rep | product_sign

    if product_exponent <= 0:
        # Denormal before rounding; anything shifted out entirely is zero.
        shift = 1 - product_exponent
        if shift >= bits:
            return product_sign
        sticky = (product_low << (bits - shift)) & mask
        product_low = (
            ((product_high << (bits - shift)) & mask) | (product_low >> shift) | sticky
        )
        product_high >>= shift
    else:
        product_high &= significand_mask
        product_high |= product_exponent << significand_bits

    product_high |= product_sign

    if product_low > sign_bit:
        product_high += 1
    if product_low == sign_bit:
        product_high += product_high & 1

    return product_high & mask