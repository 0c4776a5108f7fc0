import time

import pytest

from wiringcore.stream import LookaheadMode, MemoryStream, Stream


def test_memory_stream_read_and_peek():
    s = MemoryStream(b"ab")
    assert s.available() == 2
    assert s.peek() == ord("a")
    assert s.read() == ord("a")
    assert s.read() == ord("b")
    assert s.read() is None
    assert s.peek() is None


def test_default_stream_timeout_and_memory_timeout():
    assert MemoryStream(b"").timeout == 0
    s = MemoryStream(b"", timeout=25)
    assert s.timeout == 25
    with pytest.raises(ValueError):
        s.set_timeout(-1)


def test_timeout_waits_before_giving_up():
    s = MemoryStream(b"", timeout=50)
    start = time.monotonic()
    assert s.read_string() == ""
    assert time.monotonic() - start >= 0.045


def test_find_consumes_through_target():
    s = MemoryStream(b"hello world")
    assert s.find("wor") is True
    assert s.read_string() == "ld"


def test_find_missing_consumes_everything():
    s = MemoryStream(b"hello")
    assert s.find("xyz") is False
    assert s.available() == 0


def test_find_single_byte_target():
    s = MemoryStream(b"a:b")
    assert s.find(ord(":")) is True
    assert s.read_string() == "b"


def test_find_with_overlapping_prefix():
    s = MemoryStream(b"111112rest")
    assert s.find("11112") is True
    assert s.read_string() == "rest"


def test_find_with_partial_restart():
    s = MemoryStream(b"ababac")
    assert s.find("abac") is True
    assert s.available() == 0


def test_find_until_target_first():
    s = MemoryStream(b"key=value;")
    assert s.find_until("=", ";") is True
    assert s.read_string() == "value;"


def test_find_until_terminator_first():
    s = MemoryStream(b"a;b=c")
    assert s.find_until("=", ";") is False
    assert s.read_string() == "b=c"


def test_find_multi_returns_first_seen_index():
    s = MemoryStream(b"..xyz..abc")
    assert s.find_multi(["abc", "xyz"]) == 1


def test_find_multi_empty_target_matches_immediately():
    s = MemoryStream(b"data")
    assert s.find_multi(["zz", ""]) == 1
    assert s.available() == 4


def test_find_multi_timeout_gives_none():
    s = MemoryStream(b"nothing")
    assert s.find_multi(["abc"]) is None


def test_parse_int_skips_leading_junk():
    s = MemoryStream(b"abc-123xyz")
    assert s.parse_int() == -123
    assert s.read_string() == "xyz"


def test_parse_int_skip_none_leaves_stream():
    s = MemoryStream(b"  42")
    assert s.parse_int(LookaheadMode.SKIP_NONE) == 0
    assert s.available() == 4


def test_parse_int_skip_whitespace():
    assert MemoryStream(b" \t\r\n42").parse_int(LookaheadMode.SKIP_WHITESPACE) == 42
    s = MemoryStream(b"x42")
    assert s.parse_int(LookaheadMode.SKIP_WHITESPACE) == 0
    assert s.available() == 3


def test_parse_int_with_ignore_char():
    s = MemoryStream(b"1,234 next")
    assert s.parse_int(ignore=",") == 1234
    assert s.read_string() == " next"


def test_parse_int_empty_is_zero():
    assert MemoryStream(b"").parse_int() == 0


def test_parse_float_values():
    assert MemoryStream(b"3.25").parse_float() == pytest.approx(3.25)
    assert MemoryStream(b"abc -0.5").parse_float() == pytest.approx(-0.5)
    assert MemoryStream(b"17").parse_float() == pytest.approx(17.0)


def test_parse_float_stops_at_second_dot():
    s = MemoryStream(b"1.2.3")
    assert s.parse_float() == pytest.approx(1.2, rel=1e-6)
    assert s.read_string() == ".3"


def test_parse_float_empty_is_zero():
    assert MemoryStream(b"none").parse_float() == 0.0


def test_invalid_ignore_char():
    with pytest.raises(ValueError):
        MemoryStream(b"1").parse_int(ignore="ab")


def test_read_bytes():
    s = MemoryStream(b"abcdef")
    assert s.read_bytes(3) == b"abc"
    assert s.read_bytes(10) == b"def"
    assert s.read_bytes(1) == b""


def test_read_bytes_until_consumes_terminator():
    s = MemoryStream(b"ab,cd")
    assert s.read_bytes_until(",", 10) == b"ab"
    assert s.read_string() == "cd"


def test_read_bytes_until_respects_length():
    s = MemoryStream(b"abcdef,")
    assert s.read_bytes_until(",", 2) == b"ab"
    assert s.available() == 5


def test_read_string_until():
    s = MemoryStream("line one\nline two")
    assert s.read_string_until("\n") == "line one"
    assert s.read_string_until("\n") == "line two"


def test_read_string_until_rejects_long_terminator():
    with pytest.raises(ValueError):
        MemoryStream(b"abc").read_string_until("ab")


def test_stream_prints_to_output():
    s = MemoryStream()
    count = s.print(42)
    assert s.getvalue() == b"42"
    assert count == 2


def test_stream_is_abstract():
    with pytest.raises(TypeError):
        Stream()