"""The 96-bit decimal value type and the errors raised by decimal operations."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Tuple

MANTISSA_BITS = 96
MAX_MANTISSA = (1 << MANTISSA_BITS) - 1
MAX_SCALE = 28

_WORD_MASK = 0xFFFFFFFF
_SIGN_BIT = 1 << 31
_SCALE_SHIFT = 16
_SCALE_FIELD = 0xFF


class DecimalError(ArithmeticError):
    """Base class for errors reported by decimal operations."""

    code = 1


class TooLargeError(DecimalError):
    """The result is too large or tends to positive infinity."""

    code = 1


class TooSmallError(DecimalError):
    """The result is too small or tends to negative infinity."""

    code = 2


class DivisionByZeroError(DecimalError, ZeroDivisionError):
    """Division by zero."""

    code = 3


class ConversionError(DecimalError, ValueError):
    """A value cannot be converted to or from a decimal."""

    code = 1


@dataclass(frozen=True)
class Decimal96:
    """A decimal number: a 96-bit unsigned mantissa, a power-of-ten scale and a sign.

    The value is ``(-1 if negative else 1) * mantissa / 10 ** scale``.
    The scale occupies an 8-bit field, so any value from 0 to 255 is stored,
    though arithmetic treats scales above 28 as out of range.
    """

    mantissa: int = 0
    scale: int = 0
    negative: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.mantissa, int) or not 0 <= self.mantissa <= MAX_MANTISSA:
            raise ValueError(f"mantissa must fit in {MANTISSA_BITS} unsigned bits")
        if not isinstance(self.scale, int) or not 0 <= self.scale <= _SCALE_FIELD:
            raise ValueError(f"scale must be between 0 and {_SCALE_FIELD}")
        object.__setattr__(self, "negative", bool(self.negative))

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> "Decimal96":
        """Build a value from four 32-bit words: low, middle, high, flags."""
        words = tuple(bits)
        if len(words) != 4:
            raise ValueError("exactly four 32-bit words are required")
        low, middle, high, flags = (word & _WORD_MASK for word in words)
        return cls(
            mantissa=low | (middle << 32) | (high << 64),
            scale=(flags >> _SCALE_SHIFT) & _SCALE_FIELD,
            negative=bool(flags & _SIGN_BIT),
        )

    def to_bits(self) -> Tuple[int, int, int, int]:
        """Return the four unsigned 32-bit words: low, middle, high, flags."""
        flags = self.scale << _SCALE_SHIFT
        if self.negative:
            flags |= _SIGN_BIT
        return (
            self.mantissa & _WORD_MASK,
            (self.mantissa >> 32) & _WORD_MASK,
            (self.mantissa >> 64) & _WORD_MASK,
            flags,
        )

    def negated(self) -> "Decimal96":
        """Return the value with its sign flipped."""
        return replace(self, negative=not self.negative)

    def with_scale(self, scale: int) -> "Decimal96":
        """Return the same mantissa and sign under another scale."""
        return replace(self, scale=scale)

    def with_sign(self, negative: bool) -> "Decimal96":
        """Return the same mantissa and scale with the given sign."""
        return replace(self, negative=negative)

    def __str__(self) -> str:
        digits = str(self.mantissa)
        if self.scale:
            digits = digits.rjust(self.scale + 1, "0")
            digits = f"{digits[:-self.scale]}.{digits[-self.scale:]}"
        return f"-{digits}" if self.negative else digits