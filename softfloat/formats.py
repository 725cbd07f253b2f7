"""IEEE-754 binary format descriptions and bit-level helpers."""

from __future__ import annotations

import struct
from dataclasses import dataclass

__all__ = [
    "FloatFormat",
    "F32",
    "F64",
    "f32_to_bits",
    "f32_from_bits",
    "f64_to_bits",
    "f64_from_bits",
]


@dataclass(frozen=True)
class FloatFormat:
    """A binary floating-point format, described by its total and significand widths.

    Values of the format are handled as their raw bit representations,
    unsigned integers in ``range(2 ** bits)``.
    """

    bits: int
    significand_bits: int

    @property
    def exponent_bits(self) -> int:
        return self.bits - self.significand_bits - 1

    @property
    def exponent_max(self) -> int:
        return (1 << self.exponent_bits) - 1

    @property
    def exponent_bias(self) -> int:
        return self.exponent_max >> 1

    @property
    def int_mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def sign_mask(self) -> int:
        return 1 << (self.bits - 1)

    @property
    def abs_mask(self) -> int:
        return self.sign_mask - 1

    @property
    def significand_mask(self) -> int:
        return (1 << self.significand_bits) - 1

    @property
    def implicit_bit(self) -> int:
        return 1 << self.significand_bits

    @property
    def exponent_mask(self) -> int:
        return self.int_mask & ~(self.sign_mask | self.significand_mask)

    @property
    def inf_rep(self) -> int:
        return self.exponent_mask

    @property
    def quiet_bit(self) -> int:
        return self.implicit_bit >> 1

    @property
    def qnan_rep(self) -> int:
        return self.exponent_mask | self.quiet_bit

    def normalize(self, significand: int) -> tuple[int, int]:
        """Shift a significand so its leading one sits on the implicit bit.

        Returns ``(exponent, significand)`` where the exponent is the one a
        denormal would need to keep the value unchanged.
        """
        leading_zeros = self.bits - significand.bit_length()
        implicit_zeros = self.bits - self.implicit_bit.bit_length()
        shift = leading_zeros - implicit_zeros
        return 1 - shift, (significand << shift) & self.int_mask

    def from_parts(self, sign: bool, exponent: int, significand: int) -> int:
        """Assemble a representation from a sign, a biased exponent and a fraction."""
        return (
            (int(bool(sign)) << (self.bits - 1))
            | ((exponent << self.significand_bits) & self.exponent_mask)
            | (significand & self.significand_mask)
        )

    def is_nan(self, rep: int) -> bool:
        return (rep & self.abs_mask) > self.inf_rep

    def is_subnormal(self, rep: int) -> bool:
        """True when the exponent field is zero (zeros included)."""
        return (rep & self.exponent_mask) == 0

    def eq_repr(self, a: int, b: int) -> bool:
        """Bitwise equality, treating every NaN as equal to every other NaN."""
        if self.is_nan(a) and self.is_nan(b):
            return True
        return a == b

    def to_signed(self, rep: int) -> int:
        """Reinterpret a representation as a two's-complement signed integer."""
        rep &= self.int_mask
        return rep - (1 << self.bits) if rep & self.sign_mask else rep


F32 = FloatFormat(32, 23)
F64 = FloatFormat(64, 52)


def f32_to_bits(value: float) -> int:
    """Round a Python float to single precision and return its bits.

    Raises OverflowError if the value is finite but too large for single precision.
    """
    return struct.unpack("<I", struct.pack("<f", value))[0]


def f32_from_bits(bits: int) -> float:
    if not 0 <= bits <= F32.int_mask:
        raise ValueError(f"not a 32-bit representation: {bits!r}")
    return struct.unpack("<f", struct.pack("<I", bits))[0]


def f64_to_bits(value: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def f64_from_bits(bits: int) -> float:
    if not 0 <= bits <= F64.int_mask:
        raise ValueError(f"not a 64-bit representation: {bits!r}")
    return struct.unpack("<d", struct.pack("<Q", bits))[0]