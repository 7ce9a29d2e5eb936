import pytest

from pushswap.strings import (
    bounded_concat,
    bounded_copy,
    compare_n,
    find_bounded,
    find_char,
    rfind_char,
)


@pytest.mark.parametrize("s,c", [("hello", "l"), ("hello", "h"), ("abcabc", "c")])
def test_find_char_returns_first_occurrence(s, c):
    index = find_char(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_find_char_missing_is_none():
    assert find_char("hello", "z") is None


def test_find_char_nul_finds_end():
    assert find_char("hello", "\0") == len("hello")
    assert find_char("hello", 0) == len("hello")


def test_find_char_accepts_code():
    assert find_char("hello", ord("e")) == find_char("hello", "e")


def test_find_char_rejects_long_string():
    with pytest.raises(ValueError):
        find_char("hello", "he")


@pytest.mark.parametrize("s,c", [("hello", "l"), ("abcabc", "a"), ("xyz", "z")])
def test_rfind_char_returns_last_occurrence(s, c):
    index = rfind_char(s, c)
    assert s[index] == c
    assert c not in s[index + 1 :]


def test_rfind_char_missing_and_nul():
    assert rfind_char("hello", "q") is None
    assert rfind_char("", "\0") == 0


def test_compare_n_equal_prefix():
    assert compare_n("abcdef", "abcxyz", 3) == 0


def test_compare_n_zero_length():
    assert compare_n("a", "b", 0) == 0


def test_compare_n_sign():
    assert compare_n("abc", "abd", 3) < 0
    assert compare_n("abd", "abc", 3) > 0


def test_compare_n_antisymmetric():
    assert compare_n("apple", "apply", 5) == -compare_n("apply", "apple", 5)


def test_compare_n_shorter_string_is_smaller():
    assert compare_n("ab", "abc", 10) == -ord("c")
    assert compare_n("abc", "abc", 100) == 0


def test_find_bounded_found_within_length():
    haystack = "Foo Bar Baz"
    index = find_bounded(haystack, "Bar", len(haystack))
    assert haystack[index : index + 3] == "Bar"


def test_find_bounded_needle_crossing_limit():
    haystack = "Foo Bar Baz"
    index = haystack.find("Bar")
    assert find_bounded(haystack, "Bar", index + 2) is None
    assert find_bounded(haystack, "Bar", index + 3) == index


def test_find_bounded_empty_needle():
    assert find_bounded("anything", "", 0) == 0


def test_find_bounded_missing():
    assert find_bounded("abc", "zz", 10) is None


def test_bounded_copy_fits():
    assert bounded_copy("hello", 10) == ("hello", len("hello"))


def test_bounded_copy_truncates():
    copied, total = bounded_copy("hello", 3)
    assert len(copied) == 2
    assert "hello".startswith(copied)
    assert total == len("hello")


def test_bounded_copy_zero_size():
    assert bounded_copy("hello", 0) == ("", len("hello"))


def test_bounded_concat_fits():
    result, total = bounded_concat("foo", "bar", 20)
    assert result == "foo" + "bar"
    assert total == len("foobar")


def test_bounded_concat_truncates():
    result, total = bounded_concat("foo", "bar", 5)
    assert len(result) == 4
    assert result.startswith("foo")
    assert total == len("foobar")


def test_bounded_concat_size_not_larger_than_dst():
    assert bounded_concat("foobar", "xy", 3) == ("foobar", 3 + len("xy"))


def test_bounded_concat_zero_size():
    assert bounded_concat("foo", "bar", 0) == ("foo", len("bar"))