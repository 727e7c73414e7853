"""Truncation, floor, rounding and negation of 96-bit decimals."""

from __future__ import annotations

from decimal96.arithmetic import _add, sub
from decimal96.compare import is_equal, is_greater_or_equal
from decimal96.core import MAX_MANTISSA, Decimal96

_ONE = Decimal96(1)
_HALF = Decimal96(5, 1)


def truncate(value: Decimal96) -> Decimal96:
    """Return the integer part of ``value``, discarding every fractional digit."""
    if value.scale == 0:
        return value
    return Decimal96(value.mantissa // 10**value.scale, 0, value.negative)


def floor(value: Decimal96) -> Decimal96:
    """Return the nearest integer towards negative infinity."""
    result = truncate(value)
    if value.negative and not is_equal(value, result):
        result = Decimal96((result.mantissa + 1) & MAX_MANTISSA)
    return result.with_sign(value.negative)


def round_value(value: Decimal96) -> Decimal96:
    """Return the nearest integer; halves round away from zero."""
    magnitude = value.with_sign(False)
    integral = truncate(magnitude)
    fraction = sub(magnitude, integral)
    if is_greater_or_equal(fraction, _HALF):
        result = _add(integral, _ONE)[0]
    else:
        result = integral
    return result.with_scale(0).with_sign(value.negative)


def negate(value: Decimal96) -> Decimal96:
    """Return ``value`` multiplied by minus one."""
    return value.negated()