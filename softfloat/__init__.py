"""Bit-exact software IEEE-754 binary32 and binary64 arithmetic on bit patterns."""

__version__ = "0.1.0"

__all__ = ["formats", "add", "cmp", "conv", "extend", "trunc", "mul", "pow", "div32", "div64"]