import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


def test_is_alpha_matches_ascii_letters():
    letters = {ord(ch) for ch in string.ascii_letters}
    assert {c for c in CODES if is_alpha(c)} == letters


def test_is_digit_matches_ascii_digits():
    digits = {ord(ch) for ch in string.digits}
    assert {c for c in CODES if is_digit(c)} == digits


def test_is_alnum_is_union_of_alpha_and_digit():
    for c in CODES:
        assert is_alnum(c) == (is_alpha(c) or is_digit(c))


def test_is_ascii_range():
    assert {c for c in CODES if is_ascii(c)} == set(range(0, 128))


def test_is_print_range():
    assert {c for c in CODES if is_print(c)} == set(range(32, 127))


def test_string_and_int_forms_agree():
    for c in range(128):
        ch = chr(c)
        assert is_alpha(ch) == is_alpha(c)
        assert is_digit(ch) == is_digit(c)
        assert is_print(ch) == is_print(c)


def test_to_upper_on_lowercase_letters():
    for ch in string.ascii_lowercase:
        assert to_upper(ch) == ch.upper()
        assert to_upper(ord(ch)) == ord(ch.upper())


def test_to_lower_on_uppercase_letters():
    for ch in string.ascii_uppercase:
        assert to_lower(ch) == ch.lower()
        assert to_lower(ord(ch)) == ord(ch.lower())


def test_case_conversion_leaves_others_unchanged():
    others = [c for c in CODES if not is_alpha(c)]
    for c in others:
        assert to_upper(c) == c
        assert to_lower(c) == c


def test_non_ascii_letters_untouched():
    assert to_upper("é") == "é"
    assert to_lower("É") == "É"


def test_case_round_trip():
    for ch in string.ascii_letters:
        assert to_lower(to_upper(ch)) == ch.lower()
        assert to_upper(to_lower(ch)) == ch.upper()


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        to_upper(1.5)