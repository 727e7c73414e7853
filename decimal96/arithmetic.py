"""Addition, subtraction, multiplication and division of 96-bit decimals."""

from __future__ import annotations

from typing import Optional, Tuple, Type

from decimal96.compare import align_scales, is_equal, is_less
from decimal96.core import (
    MAX_MANTISSA,
    MAX_SCALE,
    Decimal96,
    DecimalError,
    DivisionByZeroError,
    TooLargeError,
    TooSmallError,
)

_Outcome = Tuple[Decimal96, Optional[Type[DecimalError]]]

_TEN = Decimal96(10)
_ZERO = Decimal96(0)
_NEGATIVE_ZERO = Decimal96(0, negative=True)
_DIVISION_LIMIT = Decimal96(MAX_MANTISSA, 1)
_LOW_WORD = 0xFFFFFFFF
_SIGNED_WORD_LIMIT = 1 << 31


def _overflow_error(negative: bool) -> Type[DecimalError]:
    return TooSmallError if negative else TooLargeError


def _divmod_mantissa(dividend: int, divisor: int) -> Tuple[int, int]:
    """Shift-and-subtract long division on 96-bit registers.

    Matches ``divmod`` except when the divisor exceeds 2**95, where the
    partial remainder may lose its top bit while being shifted.
    """
    quotient = 0
    remainder = 0
    for position in reversed(range(dividend.bit_length())):
        remainder |= (dividend >> position) & 1
        quotient = (quotient << 1) & MAX_MANTISSA
        if remainder >= divisor:
            remainder -= divisor
            quotient |= 1
        if position:
            remainder = (remainder << 1) & MAX_MANTISSA
    return quotient, remainder


def _mul(a: Decimal96, b: Decimal96) -> _Outcome:
    """Multiply, returning the result and the error class, if any.

    On overflow the partial mantissa accumulated so far is returned without
    sign or scale; an out-of-range scale likewise drops both.
    """
    negative = a.negative != b.negative
    scale = a.scale + b.scale
    total = 0
    overflow = False
    for shift in range(b.mantissa.bit_length()):
        if not (b.mantissa >> shift) & 1:
            continue
        term = a.mantissa << shift
        if term > MAX_MANTISSA:
            overflow = True
            break
        total += term
        if total > MAX_MANTISSA:
            total &= MAX_MANTISSA
            overflow = True
            break
    if overflow or scale > MAX_SCALE:
        return Decimal96(total), _overflow_error(negative)
    return Decimal96(total, scale, negative), None


def _times_ten(mantissa: int) -> int:
    return _mul(Decimal96(mantissa), _TEN)[0].mantissa


def _add(a: Decimal96, b: Decimal96) -> _Outcome:
    """Add, returning the result and the error class, if any."""
    a_negative, b_negative = a.negative, b.negative
    a, b = align_scales(a, b)
    scale = a.scale
    error: Optional[Type[DecimalError]] = None
    if a_negative == b_negative:
        total = a.mantissa + b.mantissa
        result = Decimal96(total & MAX_MANTISSA, negative=a_negative)
        if total > MAX_MANTISSA:
            error = _overflow_error(a_negative)
            if a_negative:
                result = Decimal96(0)
    elif a.mantissa <= b.mantissa:
        result = Decimal96(b.mantissa - a.mantissa, negative=b_negative)
    else:
        result = Decimal96(a.mantissa - b.mantissa, negative=a_negative)

    if error is not None and a.scale != 0:
        return _add(bank_round(a), bank_round(b))
    return result.with_scale(scale), error


def bank_round(value: Decimal96) -> Decimal96:
    """Drop one decimal digit of scale, keeping the sign.

    The quotient by ten is incremented when its low 32-bit word, read as a
    signed integer, is above five, or is five with an odd quotient.
    """
    if value.scale == 0:
        raise ValueError("bank_round needs a value with a non-zero scale")
    quotient = value.mantissa // 10
    low_word = quotient & _LOW_WORD
    if 5 < low_word < _SIGNED_WORD_LIMIT or (low_word == 5 and quotient % 2 == 1):
        quotient = (quotient + 1) & MAX_MANTISSA
    return Decimal96(quotient, value.scale - 1, value.negative)


def add(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a + b``.

    When the sum overflows and the operands carry a fractional scale, both
    are rounded down one digit and the addition is retried.
    """
    result, error = _add(a, b)
    if error is not None:
        raise error(f"{a} + {b} is out of range")
    return result


def sub(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a - b``."""
    return add(a, b.negated())


def mul(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a * b``; raise when the product or its scale is out of range."""
    result, error = _mul(a, b)
    if error is not None:
        raise error(f"{a} * {b} is out of range")
    return result


def div(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a / b`` with up to 28 fractional digits."""
    if is_equal(b, _ZERO) or is_equal(b, _NEGATIVE_ZERO):
        raise DivisionByZeroError(f"{a} / {b}: division by zero")
    negative = a.negative != b.negative
    scale = a.scale - b.scale
    divisor = b.mantissa

    quotient, remainder = _divmod_mantissa(a.mantissa, divisor)
    digits = 0
    while digits < MAX_SCALE and remainder:
        if not is_less(Decimal96(quotient), _DIVISION_LIMIT):
            break
        remainder = _times_ten(remainder)
        digit, remainder = _divmod_mantissa(remainder, divisor)
        quotient = (_times_ten(quotient) + digit) & MAX_MANTISSA
        digits += 1
    scale += digits

    while scale > MAX_SCALE:
        quotient //= 10
        scale -= 1
    while scale < 0:
        quotient = _times_ten(quotient)
        scale += 1
    return Decimal96(quotient, scale, negative)