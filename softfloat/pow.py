"""Integer powers of soft-float values."""

from __future__ import annotations

from softfloat.formats import FloatFormat
from softfloat.mul import mul

__all__ = ["powi"]

_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1


def _div_round_even(num: int, den: int) -> int:
    quotient, remainder = divmod(num, den)
    if 2 * remainder > den or (2 * remainder == den and quotient & 1):
        quotient += 1
    return quotient


def _round_ratio(fmt: FloatFormat, num: int, den: int) -> int:
    """Bits of the positive ratio ``num / den``, rounded to nearest, ties to even."""
    sb = fmt.significand_bits
    k = num.bit_length() - den.bit_length()
    if (num << max(-k, 0)) < (den << max(k, 0)):
        k -= 1
    biased = k + fmt.exponent_bias
    if biased >= fmt.exponent_max:
        return fmt.inf_rep
    scale = fmt.exponent_bias + sb - 1 if biased <= 0 else sb - k
    if scale >= 0:
        m = _div_round_even(num << scale, den)
    else:
        m = _div_round_even(num, den << -scale)
    if biased <= 0:
        # A carry into the implicit bit yields the smallest normal, as wanted.
        return m
    return min(((biased - 1) << sb) + m, fmt.inf_rep)


def _reciprocal(fmt: FloatFormat, rep: int) -> int:
    sign = rep & fmt.sign_mask
    magnitude = rep & fmt.abs_mask
    if magnitude > fmt.inf_rep:
        return rep | fmt.quiet_bit
    if magnitude == fmt.inf_rep:
        return sign
    if magnitude == 0:
        return fmt.inf_rep | sign
    exponent = magnitude >> fmt.significand_bits
    significand = magnitude & fmt.significand_mask
    if exponent:
        significand |= fmt.implicit_bit
    else:
        exponent = 1
    shift = exponent - fmt.exponent_bias - fmt.significand_bits
    # value = significand * 2**shift, so 1/value = 2**-shift / significand
    if shift <= 0:
        num, den = 1 << -shift, significand
    else:
        num, den = 1, significand << shift
    return _round_ratio(fmt, num, den) | sign


def powi(fmt: FloatFormat, a: int, b: int) -> int:
    """Return the bits of ``a`` raised to the signed 32-bit integer power ``b``.

    Uses square-and-multiply; a negative power takes the reciprocal at the end.
    """
    if not 0 <= a <= fmt.int_mask:
        raise ValueError(f"not a {fmt.bits}-bit representation: {a!r}")
    if not _I32_MIN <= b <= _I32_MAX:
        raise ValueError(f"power out of 32-bit range: {b!r}")

    remaining = abs(b)
    result = fmt.from_parts(False, fmt.exponent_bias, 0)
    base = a
    while True:
        if remaining & 1:
            result = mul(fmt, result, base)
        remaining >>= 1
        if remaining == 0:
            break
        base = mul(fmt, base, base)

    return _reciprocal(fmt, result) if b < 0 else result