import pytest

from sketchcore.strsearch import (
    index_of,
    last_index_of,
    remove,
    replace,
    substring,
    trim,
)

TEXT = "one.two.three.two"


def test_index_of_finds_target():
    r = index_of(TEXT, "two")
    assert TEXT[r:r + 3] == "two"
    assert "two" not in TEXT[:r]


def test_index_of_from_index_skips_earlier():
    first = index_of(TEXT, "two")
    second = index_of(TEXT, "two", first + 1)
    assert second > first
    assert TEXT[second:second + 3] == "two"


def test_index_of_missing_and_past_end():
    assert index_of(TEXT, "four") == -1
    assert index_of(TEXT, "o", len(TEXT)) == -1
    assert index_of("", "") == -1


def test_index_of_negative_is_huge():
    assert index_of(TEXT, "o", -1) == -1


def test_last_index_of_char_respects_limit():
    r = last_index_of(TEXT, ".", 6)
    assert r <= 6
    assert TEXT[r] == "."
    assert "." not in TEXT[r + 1:7]


def test_last_index_of_char_default_is_last():
    assert last_index_of(TEXT, ".") == TEXT.rfind(".")


def test_last_index_of_char_past_end_fails():
    assert last_index_of(TEXT, ".", len(TEXT)) == -1
    assert last_index_of("", "x") == -1


def test_last_index_of_string_default_and_clamp():
    assert last_index_of(TEXT, "two") == TEXT.rfind("two")
    assert last_index_of(TEXT, "two", 1000) == TEXT.rfind("two")


def test_last_index_of_string_start_bound():
    first = TEXT.find("two")
    assert last_index_of(TEXT, "two", first) == first
    assert last_index_of(TEXT, "two", first - 1) == -1


@pytest.mark.parametrize("text,target", [("", "ab"), ("abc", ""), ("ab", "abc")])
def test_last_index_of_string_degenerate(text, target):
    assert last_index_of(text, target, 0) == -1


def test_substring_swaps_and_clamps():
    assert substring(TEXT, 8, 4) == substring(TEXT, 4, 8) == TEXT[4:8]
    assert substring(TEXT, 4, 1000) == TEXT[4:]
    assert substring(TEXT, 4) == TEXT[4:]
    assert substring(TEXT, len(TEXT)) == ""


def test_replace_same_length_matches_forward():
    assert replace(TEXT, "two", "TWO") == TEXT.replace("two", "TWO")


def test_replace_longer():
    assert replace(TEXT, "two", "twenty") == TEXT.replace("two", "twenty")


def test_replace_shorter_single_and_odd_count():
    text = "x-ab-y"
    assert replace(text, "ab", "c") == text.replace("ab", "c")
    text3 = "ab.ab.ab"
    assert replace(text3, "ab", "c") == text3.replace("ab", "c")


def test_replace_shorter_even_count_is_unchanged():
    text = "abab"
    assert replace(text, "ab", "c") == text


def test_replace_overlapping_scans_backwards():
    assert replace("aaa", "aa", "b") == "ab"


def test_replace_degenerate_inputs():
    assert replace("", "a", "b") == ""
    assert replace(TEXT, "", "x") == TEXT
    assert replace(TEXT, "zzz", "y") == TEXT


def test_remove_variants():
    assert remove(TEXT, 3) == TEXT[:3]
    assert remove(TEXT, 1, 2) == TEXT[:1] + TEXT[3:]
    assert remove(TEXT, 5, 1000) == TEXT[:5]
    assert remove(TEXT, len(TEXT)) == TEXT
    assert remove(TEXT, 2, 0) == TEXT


def test_trim():
    inner = "x y"
    assert trim(" \t\v\f" + inner + "\r\n") == inner
    assert trim(" \t\r\n") == ""
    assert trim(inner) == inner