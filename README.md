# softfloat

Software IEEE-754 arithmetic for single (binary32) and double (binary64)
precision. Every operation works on the raw integer bit pattern of a float and
returns a bit pattern. Results are bit-exact with round-to-nearest,
ties-to-even, and the host FPU is never used for the arithmetic.

## Installation

```
pip install softfloat
```

## Quick example

```python
from softfloat.formats import F32, f32_to_bits, f32_from_bits
from softfloat.add import add

bits = add(F32, f32_to_bits(1.5), f32_to_bits(2.25))
assert f32_from_bits(bits) == 3.75
```

## Formats

`softfloat.formats` defines `FloatFormat`, a frozen dataclass that describes a
binary format by its total width (`bits`) and its significand width
(`significand_bits`). The exponent width, bias and the usual masks are
available as properties: `sign_mask`, `abs_mask`, `significand_mask`,
`implicit_bit`, `exponent_mask`, `inf_rep`, `quiet_bit`, `qnan_rep` and others.

The module provides two ready-made formats, `F32` and `F64`.

`FloatFormat` has these methods:

- `normalize(significand)` shifts a denormal significand so that its leading
  one sits on the implicit bit, and returns `(exponent, significand)`.
- `from_parts(sign, exponent, significand)` assembles a bit pattern.
- `is_nan(rep)` tells whether a pattern is a NaN.
- `is_subnormal(rep)` is true when the exponent field is zero, and so also
  for zeros.
- `eq_repr(a, b)` compares bit patterns and counts any two NaNs as equal.
- `to_signed(rep)` reinterprets a pattern as a two's-complement integer.

The functions `f32_to_bits`, `f32_from_bits`, `f64_to_bits` and
`f64_from_bits` convert between Python floats and bit patterns.
`f32_to_bits` raises `OverflowError` for a finite value that is too large for
single precision. The `*_from_bits` functions raise `ValueError` for an
integer that is outside the format's width.

## Operations

Each operation takes one or more bit patterns and returns a bit pattern. An
operand outside the format's width raises `ValueError`.

| Module | Functions |
| --- | --- |
| `softfloat.add` | `add(fmt, a, b)`, `sub(fmt, a, b)` |
| `softfloat.mul` | `mul(fmt, a, b)` |
| `softfloat.div32` | `div32(a, b)`: single precision |
| `softfloat.div64` | `div64(a, b)`: double precision; `div(fmt, a, b)` for `F32` or `F64` |
| `softfloat.pow` | `powi(fmt, a, b)`: raise to a signed 32-bit integer power |
| `softfloat.cmp` | `compare(fmt, a, b)` returns an `Ordering`; `unordered(fmt, a, b)` |
| `softfloat.conv` | `unsigned_to_float`, `signed_to_float`, `float_to_unsigned`, `float_to_signed` |
| `softfloat.extend` | `extend(src, dst, a)`: exact widening to a larger format |
| `softfloat.trunc` | `truncate(src, dst, a)`: narrowing to a smaller format, with rounding |

Any NaN operand gives a quiet NaN. Operations that have no defined value, such
as `inf - inf`, `0 * inf`, `0 / 0` and `inf / inf`, return the format's
canonical quiet NaN (`qnan_rep`).

`powi` works by square-and-multiply. For a negative power it takes the
correctly rounded reciprocal at the end.

`compare` returns one of `Ordering.LESS`, `EQUAL`, `GREATER` or `UNORDERED`.
It treats `+0` and `-0` as equal. `Ordering.le_abi()` and `Ordering.ge_abi()`
give the integers that `le`/`ge` style comparison routines return. An
unordered result maps to `1` for `le_abi()` and to `-1` for `ge_abi()`.

In the conversions, the `width` argument is the integer size in bits: 32, 64
or 128. Integer-to-float conversions round to nearest, ties to even.
Float-to-integer conversions truncate toward zero and saturate at the integer
limits, infinities included, and NaN converts to zero. In `float_to_unsigned`,
negative values also convert to zero.

`extend` keeps a NaN payload. `truncate` quiets a NaN and keeps as much of its
payload as fits. Both raise `ValueError` if the formats are the wrong way
round.

## What it does not do

The package supports round-to-nearest-even only. It sets no exception or
status flags. It has no square root and no fused multiply-add, and it does not
parse or format decimal strings. Division is available for `F32` and `F64`
only.

## Development

```
pip install -e ".[test]"
pytest
```