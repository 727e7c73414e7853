import pytest

from decimal96.arithmetic import add, bank_round, div, mul, sub
from decimal96.compare import is_equal, is_greater, is_less
from decimal96.core import (
    MAX_MANTISSA,
    Decimal96,
    DivisionByZeroError,
    TooLargeError,
    TooSmallError,
)


def dec(mantissa, scale=0, negative=False):
    return Decimal96(mantissa, scale, negative)


def words(low, middle, high, scale=0, negative=False):
    return dec(low | (middle << 32) | (high << 64), scale, negative)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (dec(13, 1), dec(286, 2), dec(416, 2)),
        (dec(MAX_MANTISSA), dec(MAX_MANTISSA, negative=True), dec(0)),
        (words(0xFFFFFFFF, 0xFFFFFFFF, 0, 1), dec(2, 1), words(1, 0, 1, 1)),
        (dec(13, 2), dec(286, 1), dec(2873, 2)),
        (dec(1), dec(MAX_MANTISSA, 1), words(0x9999999A, 0x99999999, 0x19999999)),
        (dec(MAX_MANTISSA, 1), dec(1), words(0x9999999A, 0x99999999, 0x19999999)),
        (dec(13, 2, True), dec(286, 1), dec(2847, 2)),
        (dec(13, 1, True), dec(286, 2, True), dec(416, 2, True)),
        (dec(1614, 3), dec(46071, 2), dec(462324, 3)),
    ],
)
def test_add(a, b, expected):
    assert is_equal(add(a, b), expected)


def test_add_overflow_raises_too_large():
    with pytest.raises(TooLargeError):
        add(dec(1), dec(MAX_MANTISSA))


def test_add_negative_overflow_raises_too_small():
    with pytest.raises(TooSmallError):
        add(dec(MAX_MANTISSA, negative=True), dec(2, negative=True))


def test_add_overflow_with_scale_is_rounded_and_retried():
    result = add(dec(MAX_MANTISSA, 1), dec(MAX_MANTISSA, 1))
    assert result.scale == 0
    assert not result.negative
    assert is_less(result, dec(MAX_MANTISSA))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (dec(13, 1, True), dec(286, 2, True), dec(156, 2)),
        (dec(13, 1, True), dec(286, 2), dec(416, 2, True)),
        (
            dec(MAX_MANTISSA, negative=True),
            dec(2, negative=True),
            words(0xFFFFFFFD, 0xFFFFFFFF, 0xFFFFFFFF, negative=True),
        ),
        (dec(64071, 4), dec(5919, 1), dec(5854929, 4, True)),
    ],
)
def test_sub(a, b, expected):
    assert is_equal(sub(a, b), expected)


def test_sub_negative_overflow_raises_too_small():
    with pytest.raises(TooSmallError):
        sub(dec(MAX_MANTISSA, negative=True), dec(2))


def test_sub_then_add_round_trips():
    a, b = dec(64071, 4), dec(5919, 1)
    assert is_equal(add(sub(a, b), b), a)


def test_sub_of_value_from_itself_is_zero():
    value = dec(123456789, 3, True)
    assert is_equal(sub(value, value), dec(0))


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (dec(5), dec(7), dec(35)),
        (dec(0xFFFFFFFF), dec(0xFFFFFFFF), words(1, 0xFFFFFFFE, 0)),
        (dec(17, negative=True), dec(0), dec(0)),
    ],
)
def test_mul(a, b, expected):
    assert is_equal(mul(a, b), expected)


def test_mul_with_scales_and_signs_matches_words():
    a = words(123456, 123, 0, scale=2)
    b = words(654321, 654, 0, scale=3, negative=True)
    expected = Decimal96.from_bits((0xCEDABE40, 0x99C0C5D, 0x13A3A, 0x80050000))
    assert mul(a, b) == expected


def test_mul_overflow_raises_too_large():
    with pytest.raises(TooLargeError):
        mul(dec(MAX_MANTISSA), dec(2))


def test_mul_negative_overflow_raises_too_small():
    with pytest.raises(TooSmallError):
        mul(dec(MAX_MANTISSA), dec(2, negative=True))


def test_mul_scale_out_of_range_raises():
    with pytest.raises(TooLargeError):
        mul(dec(1, 20), dec(1, 20))
    with pytest.raises(TooSmallError):
        mul(dec(1, 20, True), dec(1, 20))


def test_mul_is_commutative():
    a, b = dec(123456, 2), dec(654321, 3, True)
    assert mul(a, b) == mul(b, a)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (dec(35, 1), dec(5, 2), dec(70)),
        (
            words(0x88888888, 0x88888888, 0x88888888),
            dec(2, negative=True),
            words(0x44444444, 0x44444444, 0x44444444, negative=True),
        ),
        (dec(10, negative=True), dec(8, negative=True), dec(125, 2)),
        (dec(10), dec(1, 2), dec(1000)),
    ],
)
def test_div(a, b, expected):
    assert is_equal(div(a, b), expected)


def test_div_by_zero_raises():
    with pytest.raises(DivisionByZeroError):
        div(dec(15, negative=True), dec(0))


def test_div_by_negative_zero_raises():
    with pytest.raises(DivisionByZeroError):
        div(dec(15), dec(0, 3, True))


def test_div_by_zero_is_a_zero_division_error():
    with pytest.raises(ZeroDivisionError):
        div(dec(1), dec(0))


def test_div_by_one_keeps_value():
    value = dec(987654321, 4, True)
    assert is_equal(div(value, dec(1)), value)


def test_div_then_mul_round_trips_exact_quotient():
    a, b = dec(10, negative=True), dec(8, negative=True)
    assert is_equal(mul(div(a, b), b), a)


def test_div_result_scale_stays_in_range():
    result = div(dec(1), dec(3))
    assert result.scale <= 28
    assert is_greater(result, dec(0))


def test_bank_round_drops_one_digit():
    assert bank_round(dec(125, 1)) == dec(13)


def test_bank_round_keeps_sign_and_lowers_scale():
    result = bank_round(dec(120, 2, True))
    assert result.scale == 1
    assert result.negative


def test_bank_round_keeps_quotient_with_high_low_word():
    assert bank_round(dec(MAX_MANTISSA, 3)) == dec(MAX_MANTISSA // 10, 2)


def test_bank_round_requires_scale():
    with pytest.raises(ValueError):
        bank_round(dec(125))