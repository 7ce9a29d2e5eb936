import string

import pytest

from pushswap.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_alpha_matches_ascii_letters(c):
    assert is_alpha(c) == (c in string.ascii_letters)
    assert is_alpha(ord(c)) == (c in string.ascii_letters)


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_digit_matches_ascii_digits(c):
    assert is_digit(c) == (c in string.digits)


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_alnum_is_alpha_or_digit(c):
    assert is_alnum(c) == (is_alpha(c) or is_digit(c))


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_alnum("ß") is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(31) is False
    assert is_print(127) is False


@pytest.mark.parametrize("c", ALL_ASCII)
def test_is_print_matches_printable_without_whitespace_controls(c):
    expected = c in string.printable and (c == " " or not c.isspace())
    assert is_print(c) == expected


@pytest.mark.parametrize("c", string.ascii_lowercase)
def test_to_upper_lowercase_letters(c):
    assert to_upper(c) == c.upper()
    assert to_upper(ord(c)) == ord(c.upper())


@pytest.mark.parametrize("c", string.ascii_uppercase)
def test_to_lower_uppercase_letters(c):
    assert to_lower(c) == c.lower()
    assert to_lower(ord(c)) == ord(c.lower())


@pytest.mark.parametrize("c", string.digits + string.punctuation + " é")
def test_case_conversion_leaves_others_unchanged(c):
    assert to_upper(c) == c
    assert to_lower(c) == c


@pytest.mark.parametrize("c", string.ascii_letters)
def test_case_round_trip(c):
    assert to_lower(to_upper(c)) == c.lower()
    assert to_upper(to_lower(c)) == c.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")