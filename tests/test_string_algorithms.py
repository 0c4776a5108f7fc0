import math

import pytest

from wiringcore.string_algorithms import (
    index_of,
    last_index_of,
    parse_double,
    parse_long,
    trim_whitespace,
)


def test_index_of_finds_after_prefix():
    prefix, target = "hello ", "world"
    assert index_of(prefix + target, target) == len(prefix)


def test_index_of_respects_from_index():
    text = "abcabc"
    first = index_of(text, "b")
    second = index_of(text, "b", first + 1)
    assert second > first
    assert text[second] == "b"
    assert index_of(text, "b", second + 1) == -1


def test_index_of_past_end_is_not_found():
    assert index_of("abc", "a", len("abc")) == -1
    assert index_of("", "") == -1


def test_index_of_missing_target():
    assert index_of("abc", "z") == -1


def test_index_of_negative_start_rejected():
    with pytest.raises(ValueError):
        index_of("abc", "a", -1)


def test_last_index_of_char_default():
    part = "abc"
    assert last_index_of(part + part, "a") == len(part)


def test_last_index_of_char_limited():
    part = "abc"
    text = part + part
    assert last_index_of(text, "a", len(part) - 1) == 0


def test_last_index_of_char_past_end():
    assert last_index_of("abc", "a", len("abc")) == -1
    assert last_index_of("", "a") == -1


def test_last_index_of_string_default():
    part = "xyz"
    text = part + "-" + part
    assert last_index_of(text, part) == len(part) + 1


def test_last_index_of_string_clamps_start():
    part = "xy"
    text = part + part
    assert last_index_of(text, part, 1000) == len(part)


def test_last_index_of_string_start_may_overlap_end():
    text = "aXYb"
    # An occurrence starting at from_index counts even if it runs past it.
    assert last_index_of(text, "XY", 1) == 1
    assert last_index_of(text, "XY", 0) == -1


def test_last_index_of_empty_or_too_long_target():
    assert last_index_of("abc", "") == -1
    assert last_index_of("ab", "abc") == -1


def test_last_index_of_negative_start_rejected():
    with pytest.raises(ValueError):
        last_index_of("abc", "bc", -2)


def test_trim_whitespace():
    assert trim_whitespace(" \t\v\fx y\r\n ") == "x y"
    assert trim_whitespace(" \t\n") == ""


def test_parse_long_round_trip():
    for number in (0, 7, -123456, 2147483647, -2147483648):
        assert parse_long(str(number)) == number


def test_parse_long_prefix_and_whitespace():
    assert parse_long("  \t+42abc") == 42
    assert parse_long("-17 and more") == -17


def test_parse_long_without_digits():
    assert parse_long("abc") == 0
    assert parse_long("-") == 0
    assert parse_long("") == 0


def test_parse_double_round_trip():
    for number in (0.0, 1.5, -3.25, 1e-7, 6.02e23):
        assert parse_double(repr(number)) == number


def test_parse_double_prefix():
    assert parse_double("  2.5volts") == 2.5
    assert parse_double("1e") == 1.0
    assert parse_double(".5") == 0.5


def test_parse_double_hex_matches_fromhex():
    assert parse_double("0x1.8p3") == float.fromhex("0x1.8p3")


def test_parse_double_special_values():
    assert parse_double("inf") == math.inf
    assert parse_double("-Infinity") == -math.inf
    assert math.isnan(parse_double("nan"))


def test_parse_double_without_number():
    assert parse_double("volts") == 0.0
    assert parse_double("") == 0.0