import pytest

from decimal96.core import MAX_MANTISSA, Decimal96


def test_from_bits_reads_low_word():
    value = Decimal96.from_bits([2147483647, 0, 0, 0])
    assert value.mantissa == 2147483647
    assert value.scale == 0
    assert value.negative is False


def test_from_bits_reads_sign_and_scale_from_flags():
    value = Decimal96.from_bits([0xCEDABE40, 0x99C0C5D, 0x13A3A, 0x80050000])
    assert value.negative is True
    assert value.scale == 5
    assert value.to_bits() == (0xCEDABE40, 0x99C0C5D, 0x13A3A, 0x80050000)


def test_from_bits_masks_signed_words():
    assert Decimal96.from_bits([-1, -1, -1, 0]) == Decimal96.from_bits(
        [0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0]
    )


def test_full_mantissa_round_trip():
    value = Decimal96.from_bits([0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0])
    assert value.mantissa == MAX_MANTISSA
    assert Decimal96.from_bits(value.to_bits()) == value


@pytest.mark.parametrize(
    "value",
    [
        Decimal96(0),
        Decimal96(416, 2),
        Decimal96(MAX_MANTISSA, 28, True),
        Decimal96(1, 255, True),
    ],
)
def test_to_bits_round_trip(value):
    assert Decimal96.from_bits(value.to_bits()) == value


def test_from_bits_rejects_wrong_length():
    with pytest.raises(ValueError):
        Decimal96.from_bits([1, 2, 3])


def test_mantissa_out_of_range():
    with pytest.raises(ValueError):
        Decimal96(MAX_MANTISSA + 1)
    with pytest.raises(ValueError):
        Decimal96(-1)


def test_scale_out_of_range():
    with pytest.raises(ValueError):
        Decimal96(1, 256)
    with pytest.raises(ValueError):
        Decimal96(1).with_scale(-1)


def test_negated_twice_is_identity():
    value = Decimal96(49135648, 1, True)
    assert value.negated().negative is False
    assert value.negated().negated() == value


def test_with_scale_keeps_sign_and_mantissa():
    value = Decimal96(13, 0, True).with_scale(2)
    assert value == Decimal96(13, 2, True)


def test_with_sign():
    value = Decimal96(286, 1)
    assert value.with_sign(True) == Decimal96(286, 1, True)
    assert value.with_sign(True).with_sign(False) == value


def test_str_places_decimal_point():
    assert str(Decimal96(416, 2)) == "4.16"
    assert str(Decimal96(9, 1, True)) == "-0.9"