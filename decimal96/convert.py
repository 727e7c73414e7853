"""Conversions between 96-bit decimals and machine integers and floats."""

from __future__ import annotations

import math
import struct
from typing import Optional, Tuple

from decimal96.arithmetic import _mul, sub
from decimal96.core import MAX_MANTISSA, ConversionError, Decimal96
from decimal96.rounding import truncate

_INT32_MIN = -(1 << 31)
_INT32_MAX = (1 << 31) - 1
_LOW_WORD_LIMIT = 1 << 32
_NO_SIGN_BIT = 0x7FFFFFFF
_SMALLEST_FLOAT = 1e-28
_FLOAT_DECIMALS = 34
_SIGNIFICANT_DIGITS = 7
_TEN = Decimal96(10)


def _to_float32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def from_int(value: int) -> Decimal96:
    """Convert a 32-bit signed integer to a decimal."""
    if not isinstance(value, int):
        raise TypeError(f"expected an int, got {type(value).__name__}")
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ConversionError(f"{value} does not fit in a 32-bit signed integer")
    return Decimal96(abs(value), negative=value < 0)


def to_int(value: Decimal96) -> int:
    """Convert a decimal to an integer, discarding the fractional digits.

    Only mantissas that fit in one 32-bit word are accepted; the integer part
    keeps its low 31 bits.
    """
    if value.mantissa >= _LOW_WORD_LIMIT:
        raise ConversionError(f"{value} does not fit in a 32-bit integer")
    magnitude = (value.mantissa // 10**value.scale) & _NO_SIGN_BIT
    return -magnitude if value.negative else magnitude


def _eighth_significant(text: str) -> Optional[int]:
    """Return the position of the eighth significant digit, if there is one."""
    count = 0
    for position, char in enumerate(text):
        if char == ".":
            continue
        if count or char != "0":
            count += 1
        if count == _SIGNIFICANT_DIGITS + 1:
            return position
    return None


def _increment(text: str) -> str:
    """Add one unit in the last place of a digit string that may hold a point."""
    chars = list(text)
    for position in reversed(range(len(chars))):
        if chars[position] == ".":
            continue
        if chars[position] != "9":
            chars[position] = chr(ord(chars[position]) + 1)
            return "".join(chars)
        chars[position] = "0"
    return "1" + "".join(chars)


def _keep_significant(text: str) -> str:
    """Round an unsigned fixed-point string to seven significant digits."""
    dot = text.index(".")
    position = _eighth_significant(text)
    if position is None:
        return text
    if position < dot:
        head = text[:position]
        if text[position] >= "5":
            head = _increment(head)
            if len(head) > position:
                # A carry out of the leading digit does not lengthen the
                # integer part.
                head = "1"
        return head.ljust(dot, "0") + "."
    kept = text[:position]
    if text[position] >= "5":
        kept = _increment(kept)
    return kept


def _digits_to_mantissa(digits: str) -> Tuple[int, bool]:
    """Accumulate decimal digits into a mantissa; report whether the last shift overflowed."""
    mantissa = 0
    failed = False
    last = len(digits) - 1
    for index, char in enumerate(digits):
        mantissa = (mantissa + int(char)) & MAX_MANTISSA
        if index != last:
            product, error = _mul(Decimal96(mantissa), _TEN)
            mantissa = product.mantissa
            failed = error is not None
    return mantissa, failed


def from_float(value: float) -> Decimal96:
    """Convert a single-precision float to a decimal of seven significant digits."""
    try:
        single = _to_float32(float(value))
    except OverflowError as exc:
        raise ConversionError(f"{value} is out of single-precision range") from exc
    if math.isnan(single) or math.isinf(single):
        raise ConversionError(f"{value} has no decimal value")
    if 0 < abs(single) < _SMALLEST_FLOAT:
        raise ConversionError(f"{value} is too small for a decimal")

    text = _keep_significant(format(abs(single), f".{_FLOAT_DECIMALS}f"))
    text = text.rstrip("0")
    scale = len(text) - text.index(".") - 1
    mantissa, failed = _digits_to_mantissa(text.replace(".", ""))
    if failed:
        raise ConversionError(f"{value} is too large for a decimal")
    return Decimal96(mantissa, scale, single < 0)


def to_float(value: Decimal96) -> float:
    """Convert a decimal to a single-precision float."""
    integral = truncate(value)
    result = float(integral.mantissa)
    if value.scale:
        fraction = sub(value, integral)
        fractional = float(fraction.mantissa)
        for _ in range(value.scale):
            fractional /= 10
        result = _to_float32(fractional) + float(integral.mantissa)
    single = _to_float32(result)
    return -single if value.negative else single