# decimal96

A decimal number type built on a 96-bit unsigned integer mantissa, a
scale (the number of digits after the decimal point) and a sign. It
packs into four 32-bit words and offers addition, subtraction,
multiplication, division, comparison, rounding and conversion to and
from `int` and `float`.

The package has no third-party dependencies.

## Installation

```
pip install decimal96
```

To run the test suite, install the test extra:

```
pip install "decimal96[test]"
pytest
```

## Layout of a value

`decimal96.core.Decimal96` is a frozen dataclass with three fields:
`mantissa` (0 to 2**96 - 1), `scale` and `negative`. Its value is
`(-1 if negative else 1) * mantissa / 10 ** scale`.

The scale is stored in an 8-bit field, so any scale from 0 to 255 can be
held, but arithmetic treats scales above 28 (`MAX_SCALE`) as out of
range.

As four 32-bit words (`Decimal96.from_bits` and `Decimal96.to_bits`):

- words 0 to 2: the mantissa, least significant word first;
- word 3: bits 16–23 hold the scale, bit 31 holds the sign.

`negated()`, `with_scale()` and `with_sign()` return modified copies;
values are immutable. `str()` gives the plain decimal text, for example
`-2.86`.

## Usage

```python
from decimal96.core import Decimal96
from decimal96.arithmetic import add, sub, mul, div
from decimal96.compare import is_equal, is_less
from decimal96.rounding import truncate, floor, round_value, negate
from decimal96.convert import from_int, to_int, from_float, to_float

a = Decimal96.from_bits([13, 0, 0, 0]).with_scale(1)    # 1.3
b = Decimal96.from_bits([286, 0, 0, 0]).with_scale(2)   # 2.86

total = add(a, b)                                        # 4.16
assert is_equal(total, Decimal96.from_bits([416, 0, 0, 0]).with_scale(2))

q = div(from_int(10), from_int(8))                       # 1.25
assert to_float(q) == 1.25

x = Decimal96.from_bits([7464923, 0, 0, 0]).with_scale(5)   # 74.64923
assert to_int(round_value(x)) == 75
assert to_int(floor(negate(x))) == -75
assert to_int(truncate(x)) == 74
```

## Modules

- `decimal96.core` – `Decimal96`, the error classes and the constants
  `MANTISSA_BITS`, `MAX_MANTISSA` and `MAX_SCALE`.
- `decimal96.compare` – `align_scales`, `is_less`, `is_less_or_equal`,
  `is_greater`, `is_greater_or_equal`, `is_equal`, `is_not_equal`.
- `decimal96.arithmetic` – `add`, `sub`, `mul`, `div` and `bank_round`.
- `decimal96.rounding` – `truncate`, `floor`, `round_value` (halves
  round away from zero) and `negate`.
- `decimal96.convert` – `from_int`, `to_int`, `from_float`, `to_float`.

## Comparison

The comparison functions bring both operands to a common scale with
`align_scales` before comparing mantissas. The smaller-scaled operand is
multiplied up when the other has its top three mantissa bits clear;
otherwise the larger-scaled operand is divided down, dropping digits.
Positive and negative zero compare equal.

For two negative values `is_less` inverts the magnitude comparison, so
`is_less(x, x)` is true when `x` is negative.

The `==` operator on `Decimal96` compares the fields, not the numeric
value: `1.0` and `1` are equal by `is_equal` but not by `==`.

## Arithmetic

- `add` and `sub`: when a sum overflows and the aligned operands carry a
  fractional scale, both are reduced by one digit with `bank_round` and
  the addition is retried.
- `mul`: the scales add; a product wider than 96 bits or a scale above
  28 raises.
- `div`: produces up to 28 fractional digits; division by zero of
  either sign raises `DivisionByZeroError`.

## Conversion

- `from_int` accepts a 32-bit signed integer; anything outside that
  range raises `ConversionError`, and a non-`int` raises `TypeError`.
- `to_int` discards the fractional digits; a mantissa of 2**32 or more
  raises `ConversionError`.
- `from_float` rounds the value to single precision and keeps seven
  significant digits. NaN, infinities, non-zero values closer to zero
  than 1e-28 and values too large for the mantissa raise
  `ConversionError`.
- `to_float` returns a single-precision value.

## Errors

Operations that cannot produce a result raise a subclass of
`DecimalError` (itself an `ArithmeticError`) from `decimal96.core`:

- `TooLargeError` – the result is too large or tends to positive infinity;
- `TooSmallError` – the result is too large in magnitude and negative;
- `DivisionByZeroError` – division by zero (also a `ZeroDivisionError`);
- `ConversionError` – a value cannot be converted (also a `ValueError`).

Each class carries a numeric `code`: 1, 2, 3 and 1 respectively.

## What it does not do

The package is a library only: there is no command-line tool. `Decimal96`
does not overload the arithmetic or ordering operators; use the
functions above.