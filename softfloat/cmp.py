"""Soft-float comparisons on bit representations."""

from __future__ import annotations

import enum

from softfloat.formats import FloatFormat

__all__ = ["Ordering", "compare", "unordered"]


class Ordering(enum.Enum):
    """The outcome of comparing two floating-point values."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    UNORDERED = "unordered"

    def le_abi(self) -> int:
        """Result as returned by ``le``/``lt``/``eq``/``ne`` style routines."""
        return _LE_ABI[self]

    def ge_abi(self) -> int:
        """Result as returned by ``ge``/``gt`` style routines."""
        return _GE_ABI[self]


_LE_ABI = {
    Ordering.LESS: -1,
    Ordering.EQUAL: 0,
    Ordering.GREATER: 1,
    Ordering.UNORDERED: 1,
}

_GE_ABI = {
    Ordering.LESS: -1,
    Ordering.EQUAL: 0,
    Ordering.GREATER: 1,
    Ordering.UNORDERED: -1,
}


def _check(fmt: FloatFormat, rep: int) -> None:
    if not 0 <= rep <= fmt.int_mask:
        raise ValueError(f"not a {fmt.bits}-bit representation: {rep!r}")


def compare(fmt: FloatFormat, a: int, b: int) -> Ordering:
    """Compare two representations as floating-point values."""
    _check(fmt, a)
    _check(fmt, b)
    a_abs = a & fmt.abs_mask
    b_abs = b & fmt.abs_mask

    if a_abs > fmt.inf_rep or b_abs > fmt.inf_rep:
        return Ordering.UNORDERED

    if a_abs | b_abs == 0:
        return Ordering.EQUAL

    a_signed = fmt.to_signed(a)
    b_signed = fmt.to_signed(b)

    # With at least one operand non-negative, integer order matches float order;
    # with both negative it is reversed.
    if a_signed & b_signed >= 0:
        if a_signed < b_signed:
            return Ordering.LESS
        if a_signed == b_signed:
            return Ordering.EQUAL
        return Ordering.GREATER
    if a_signed > b_signed:
        return Ordering.LESS
    if a_signed == b_signed:
        return Ordering.EQUAL
    return Ordering.GREATER


def unordered(fmt: FloatFormat, a: int, b: int) -> bool:
    """True when either operand is NaN."""
    _check(fmt, a)
    _check(fmt, b)
    return (a & fmt.abs_mask) > fmt.inf_rep or (b & fmt.abs_mask) > fmt.inf_rep