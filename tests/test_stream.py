import time

import pytest

from sketchcore.stream import BytesStream, LookaheadMode


def test_parse_int_skips_leading_text():
    s = BytesStream(b"abc  -42x")
    assert s.parse_int() == -42
    assert s.read() == ord("x")


def test_parse_int_skip_none_leaves_stream_untouched():
    s = BytesStream(b"a12")
    assert s.parse_int(LookaheadMode.SKIP_NONE) == 0
    assert s.read() == ord("a")


def test_parse_int_skip_whitespace():
    assert BytesStream(b" \t\r\n7").parse_int(LookaheadMode.SKIP_WHITESPACE) == 7
    s = BytesStream(b"x7")
    assert s.parse_int(LookaheadMode.SKIP_WHITESPACE) == 0
    assert s.available() == 2


def test_parse_int_with_ignore_character():
    assert BytesStream(b"1,234;").parse_int(ignore=",") == 1234


def test_parse_int_empty_stream_returns_zero():
    assert BytesStream(b"").parse_int() == 0


def test_parse_float_values():
    assert BytesStream(b"x3.25 ").parse_float() == 3.25
    assert BytesStream(b"-0.5").parse_float() == -0.5


def test_parse_float_stops_at_second_dot():
    s = BytesStream(b"1.2.3")
    assert s.parse_float() == pytest.approx(1.2, rel=1e-6)
    assert s.read() == ord(".")


def test_parse_float_leading_dot():
    assert BytesStream(b".5").parse_float() == 0.5


def test_find_consumes_through_target():
    s = BytesStream(b"hello world!")
    assert s.find("world") is True
    assert s.read() == ord("!")


def test_find_missing_consumes_everything():
    s = BytesStream(b"hello")
    assert s.find("xyz") is False
    assert s.available() == 0


def test_find_with_partial_overlap():
    assert BytesStream(b"11112").find("1112") is True
    assert BytesStream(b"ababac").find(b"abac") is True


def test_find_until_stops_at_terminator():
    s = BytesStream(b"axb")
    assert s.find_until("b", "x") is False
    assert s.read() == ord("b")
    assert BytesStream(b"abx").find_until("b", "x") is True


def test_find_multi_returns_index_of_first_match():
    assert BytesStream(b"hotdog cat").find_multi(["cat", "dog"]) == 1
    assert BytesStream(b"nothing").find_multi(["cat", "dog"]) == -1


def test_find_multi_empty_target_matches_at_once():
    s = BytesStream(b"abc")
    assert s.find_multi(["zzz", ""]) == 1
    assert s.available() == 3


def test_read_bytes():
    s = BytesStream(b"abcdef")
    assert s.read_bytes(3) == b"abc"
    assert s.read_bytes(10) == b"def"
    assert s.read_bytes(4) == b""


def test_read_bytes_until_consumes_terminator():
    s = BytesStream(b"ab,cd")
    assert s.read_bytes_until(",", 10) == b"ab"
    assert s.read() == ord("c")


def test_read_bytes_until_respects_length():
    s = BytesStream(b"abcd,")
    assert s.read_bytes_until(",", 2) == b"ab"
    assert s.available() == 3


def test_read_strings():
    s = BytesStream(b"line1\nrest")
    assert s.read_string_until("\n") == "line1"
    assert s.read_string() == "rest"


def test_feed_round_trip():
    s = BytesStream()
    s.feed("xyz")
    assert s.peek() == ord("x")
    assert s.read_string() == "xyz"
    assert s.read() == -1


def test_timeout_waits_before_giving_up():
    s = BytesStream(timeout=50)
    start = time.monotonic()
    assert s.read_bytes(1) == b""
    assert time.monotonic() - start >= 0.04


def test_negative_timeout_rejected():
    with pytest.raises(ValueError):
        BytesStream(timeout=-1)


def test_printing_goes_to_output():
    s = BytesStream()
    assert s.print(12) == 2
    s.println("ok")
    assert bytes(s.output) == b"12ok\r\n"