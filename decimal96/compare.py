"""Scale alignment and the comparison operations."""

from __future__ import annotations

from typing import Tuple

from decimal96.core import MANTISSA_BITS, MAX_MANTISSA, MAX_SCALE, Decimal96

_ALIGN_HEADROOM = 1 << (MANTISSA_BITS - 3)
_OVERFLOW = 1 << MANTISSA_BITS


def _times_ten(value: Decimal96) -> Decimal96:
    """Multiply by ten with the wrap-around and flag loss of the bitwise multiplier.

    On overflow or an out-of-range scale the result keeps only the partial
    mantissa and drops both sign and scale.
    """
    doubled = value.mantissa << 1
    if doubled >= _OVERFLOW:
        return Decimal96(0)
    eightfold = value.mantissa << 3
    if eightfold >= _OVERFLOW:
        return Decimal96(doubled)
    total = doubled + eightfold
    if total >= _OVERFLOW:
        return Decimal96(total & MAX_MANTISSA)
    if value.scale > MAX_SCALE:
        return Decimal96(total)
    return Decimal96(total, value.scale, value.negative)


def _raise_lower(lower: Decimal96, higher: Decimal96) -> Tuple[Decimal96, Decimal96]:
    """Bring ``lower`` (the smaller scale) and ``higher`` to one scale."""
    steps = higher.scale - lower.scale
    if higher.mantissa < _ALIGN_HEADROOM:
        for _ in range(steps):
            lower = _times_ten(lower)
        return lower.with_scale(higher.scale), higher
    if steps:
        mantissa = higher.mantissa
        for _ in range(steps):
            mantissa //= 10
        higher = Decimal96(mantissa)
    return lower, higher.with_scale(lower.scale)


def align_scales(a: Decimal96, b: Decimal96) -> Tuple[Decimal96, Decimal96]:
    """Return ``a`` and ``b`` brought to a common scale.

    The smaller-scaled value is multiplied up when the larger-scaled one has
    its top three mantissa bits clear; otherwise the larger-scaled value is
    divided down, dropping digits.
    """
    if a.scale < b.scale:
        return _raise_lower(a, b)
    b_aligned, a_aligned = _raise_lower(b, a)
    return a_aligned, b_aligned


def is_less(a: Decimal96, b: Decimal96) -> bool:
    """Return whether ``a`` is less than ``b``.

    For two negative values the magnitude comparison is inverted, so equal
    negative values compare as not-less only when their magnitudes differ.
    """
    if a.negative != b.negative:
        return a.negative
    negative = a.negative
    if a.scale != b.scale:
        a, b = align_scales(a, b)
    less = a.mantissa < b.mantissa
    return not less if negative else less


def is_equal(a: Decimal96, b: Decimal96) -> bool:
    """Return whether ``a`` equals ``b``; zeros of either sign are equal."""
    if a.negative != b.negative:
        return a.mantissa == 0 and b.mantissa == 0
    a, b = align_scales(a, b)
    return a.mantissa == b.mantissa


def is_less_or_equal(a: Decimal96, b: Decimal96) -> bool:
    """Return whether ``a`` is less than or equal to ``b``."""
    return is_less(a, b) or is_equal(a, b)


def is_greater(a: Decimal96, b: Decimal96) -> bool:
    """Return whether ``a`` is greater than ``b``."""
    return not is_less_or_equal(a, b)


def is_greater_or_equal(a: Decimal96, b: Decimal96) -> bool:
    """Return whether ``a`` is greater than or equal to ``b``."""
    return is_greater(a, b) or is_equal(a, b)


def is_not_equal(a: Decimal96, b: Decimal96) -> bool:
    """Return whether ``a`` differs from ``b``."""
    return not is_equal(a, b)