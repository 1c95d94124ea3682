import pytest

from sketchcore.common import (
    PI,
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
    map_range,
    radians,
    sq,
)


@pytest.mark.parametrize("amt,low,high,expected", [(5, 0, 10, 5), (-1, 0, 10, 0), (11, 0, 10, 10)])
def test_constrain(amt, low, high, expected):
    assert constrain(amt, low, high) == expected


def test_radians_and_degrees():
    assert radians(180) == pytest.approx(PI)
    assert degrees(PI) == pytest.approx(180)


@pytest.mark.parametrize("value", [-30.0, 0.0, 45.0, 720.5])
def test_degrees_radians_round_trip(value):
    assert degrees(radians(value)) == pytest.approx(value)


def test_sq():
    assert sq(-3) == 9
    assert sq(1.5) == pytest.approx(1.5 * 1.5)


@pytest.mark.parametrize("word", [0, 1, 0x00FF, 0xFF00, 0x1234, 0xFFFF])
def test_bytes_make_word_round_trip(word):
    assert make_word(high_byte(word), low_byte(word)) == word
    assert make_word(word) == word
    assert 0 <= low_byte(word) <= 0xFF
    assert 0 <= high_byte(word) <= 0xFF


def test_make_word_truncates_bytes():
    assert make_word(0x1FF, 0x2FF) == make_word(0xFF, 0xFF)
    assert make_word(0x1FFFF) == make_word(0xFFFF)


def test_make_word_argument_count():
    with pytest.raises(TypeError):
        make_word()
    with pytest.raises(TypeError):
        make_word(1, 2, 3)


@pytest.mark.parametrize("n", range(0, 32, 5))
def test_bit_helpers(n):
    assert bit_read(bit(n), n) == 1
    assert bit_read(bit_set(0, n), n) == 1
    assert bit_clear(bit_set(0, n), n) == 0
    assert bit_toggle(bit_toggle(0x5A5A, n), n) == 0x5A5A
    assert bit_write(0, n, True) == bit(n)
    assert bit_write(bit(n), n, 0) == 0


def test_bit_set_keeps_other_bits():
    value = 0b1010
    assert bit_read(bit_set(value, 0), 1) == 1
    assert bit_read(bit_set(value, 0), 0) == 1


def test_map_range_midpoint():
    assert map_range(5, 0, 10, 0, 100) == 50


@pytest.mark.parametrize("args", [(0, 10, 20, 40), (-5, 5, 100, 0), (1, 1000, -3, 3)])
def test_map_range_endpoints(args):
    in_min, in_max, out_min, out_max = args
    assert map_range(in_min, in_min, in_max, out_min, out_max) == out_min
    assert map_range(in_max, in_min, in_max, out_min, out_max) == out_max


def test_map_range_truncates_toward_zero():
    assert map_range(-1, 0, 10, 0, 3) == 0


def test_map_range_empty_input_range():
    with pytest.raises(ZeroDivisionError):
        map_range(3, 4, 4, 0, 10)