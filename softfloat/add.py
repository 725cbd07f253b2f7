"""Soft-float addition and subtraction on bit representations."""

from __future__ import annotations

from softfloat.formats import FloatFormat

__all__ = ["add", "sub"]


def _check(fmt: FloatFormat, rep: int) -> None:
    if not 0 <= rep <= fmt.int_mask:
        raise ValueError(f"not a {fmt.bits}-bit representation: {rep!r}")


def add(fmt: FloatFormat, a: int, b: int) -> int:
    """Return the bits of ``a + b``, rounded to nearest, ties to even."""
    _check(fmt, a)
    _check(fmt, b)

    mask = fmt.int_mask
    bits = fmt.bits
    significand_bits = fmt.significand_bits
    implicit_bit = fmt.implicit_bit
    significand_mask = fmt.significand_mask
    sign_bit = fmt.sign_mask
    exponent_mask = fmt.exponent_mask
    inf_rep = fmt.inf_rep
    quiet_bit = fmt.quiet_bit

    a_abs = a & fmt.abs_mask
    b_abs = b & fmt.abs_mask

    # Zero, infinity or NaN on either side.
    if ((a_abs - 1) & mask) >= inf_rep - 1 or ((b_abs - 1) & mask) >= inf_rep - 1:
        if a_abs > inf_rep:
            return a_abs | quiet_bit
        if b_abs > inf_rep:
            return b_abs | quiet_bit
        if a_abs == inf_rep:
            return fmt.qnan_rep if (a ^ b) == sign_bit else a
        if b_abs == inf_rep:
            return b
        if a_abs == 0:
            return a & b if b_abs == 0 else b
        if b_abs == 0:
            return a

    # Make a the operand with the larger magnitude.
    if b_abs > a_abs:
        a, b = b, a

    a_exponent = (a & exponent_mask) >> significand_bits
    b_exponent = (b & exponent_mask) >> significand_bits
    a_significand = a & significand_mask
    b_significand = b & significand_mask

    if a_exponent == 0:
        a_exponent, a_significand = fmt.normalize(a_significand)
    if b_exponent == 0:
        b_exponent, b_significand = fmt.normalize(b_significand)

    result_sign = a & sign_bit
    subtraction = bool((a ^ b) & sign_bit)

    # Room for round, guard and sticky bits.
    a_significand = ((a_significand | implicit_bit) << 3) & mask
    b_significand = ((b_significand | implicit_bit) << 3) & mask

    align = a_exponent - b_exponent
    if align:
        if align < bits:
            sticky = int(((b_significand << (bits - align)) & mask) != 0)
            b_significand = (b_significand >> align) | sticky
        else:
            b_significand = 1

    if subtraction:
        a_significand = (a_significand - b_significand) & mask
        if a_significand == 0:
            return 0
        if a_significand < implicit_bit << 3:
            shift = (implicit_bit << 3).bit_length() - a_significand.bit_length()
            a_significand <<= shift
            a_exponent -= shift
    else:
        a_significand += b_significand
        if a_significand & (implicit_bit << 4):
            sticky = a_significand & 1
            a_significand = (a_significand >> 1) | sticky
            a_exponent += 1

    if a_exponent >= fmt.exponent_max:
        return inf_rep | result_sign

    if a_exponent <= 0:
        # Denormal result before rounding.
        shift = 1 - a_exponent
        if shift < bits:
            sticky = int(((a_significand << (bits - shift)) & mask) != 0)
            a_significand = (a_significand >> shift) | sticky
        else:
            a_significand = int(a_significand != 0)
        a_exponent = 0

    round_guard_sticky = a_significand & 0x7

    result = (a_significand >> 3) & significand_mask
    result |= a_exponent << significand_bits
    result |= result_sign

    if round_guard_sticky > 0x4:
        result += 1
    if round_guard_sticky == 0x4:
        result += result & 1

    return result & mask


def sub(fmt: FloatFormat, a: int, b: int) -> int:
    """Return the bits of ``a - b``."""
    _check(fmt, b)
    return add(fmt, a, b ^ fmt.sign_mask)