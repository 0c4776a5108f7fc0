import math

import pytest

from wiringcore.common import (
    BitOrder,
    PinMode,
    PinStatus,
    bit,
    bit_clear,
    bit_read,
    bit_set,
    bit_toggle,
    bit_write,
    constrain,
    degrees,
    high_byte,
    low_byte,
    make_word,
    map_value,
    radians,
    sq,
)


def test_enum_lookup_by_value():
    assert PinStatus(1) is PinStatus.HIGH
    assert PinMode(2) is PinMode.INPUT_PULLUP
    assert BitOrder(1) is BitOrder.MSBFIRST


@pytest.mark.parametrize("amt", [-5, 0, 3, 10, 20])
def test_constrain_stays_in_range(amt):
    result = constrain(amt, 0, 10)
    assert 0 <= result <= 10
    if 0 <= amt <= 10:
        assert result == amt


def test_constrain_returns_bounds():
    assert constrain(-1, 2, 8) == 2
    assert constrain(99, 2, 8) == 8


def test_radians_degrees_round_trip():
    for deg in (0.0, 45.0, 90.0, 180.0, 360.0):
        assert degrees(radians(deg)) == pytest.approx(deg)
    assert radians(180.0) == pytest.approx(math.pi)


def test_sq():
    assert sq(7) == 49
    assert sq(-3) == sq(3)


@pytest.mark.parametrize("word", [0, 0x1234, 0xFFFF, 0x00FF, 0xFF00])
def test_bytes_and_make_word_round_trip(word):
    assert make_word(high_byte(word), low_byte(word)) == word


def test_make_word_single_truncates():
    assert make_word(0x12345) == 0x2345


def test_make_word_wrong_arity():
    with pytest.raises(TypeError):
        make_word()
    with pytest.raises(TypeError):
        make_word(1, 2, 3)


def test_bit_operations():
    assert bit(0) == 1
    assert bit(7) == 128
    value = bit_set(0, 3)
    assert bit_read(value, 3) == 1
    assert bit_clear(value, 3) == 0
    assert bit_toggle(bit_toggle(0b1010, 1), 1) == 0b1010
    assert bit_write(0, 5, True) == bit(5)
    assert bit_write(0xFF, 5, 0) == 0xFF & ~bit(5)


def test_bit_negative_index_rejected():
    with pytest.raises(ValueError):
        bit(-1)
    with pytest.raises(ValueError):
        bit_read(1, -1)


def test_map_value_endpoints():
    assert map_value(0, 0, 1023, 0, 255) == 0
    assert map_value(1023, 0, 1023, 0, 255) == 255
    assert map_value(0, 0, 10, 10, 0) == 10


def test_map_value_truncates_toward_zero():
    assert map_value(-1, 0, 10, 0, 3) == 0


def test_map_value_empty_input_range():
    with pytest.raises(ZeroDivisionError):
        map_value(1, 5, 5, 0, 10)