import string

import pytest

from minishell.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ALL_ASCII = [chr(code) for code in range(128)]


def test_is_alpha_matches_ascii_letters():
    letters = set(string.ascii_letters)
    assert [ch for ch in ALL_ASCII if is_alpha(ch)] == sorted(letters)


def test_is_alpha_boundaries_by_code():
    assert is_alpha(65) and is_alpha(90) and is_alpha(97) and is_alpha(122)
    assert not is_alpha(64) and not is_alpha(91)
    assert not is_alpha(96) and not is_alpha(123)


def test_is_alpha_rejects_non_ascii_letter():
    assert is_alpha("é") is False


def test_is_digit_matches_ascii_digits():
    assert "".join(ch for ch in ALL_ASCII if is_digit(ch)) == string.digits


def test_is_digit_boundaries_by_code():
    assert is_digit(48) and is_digit(57)
    assert not is_digit(47) and not is_digit(58)


def test_is_alnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_ascii_range():
    assert all(is_ascii(ch) for ch in ALL_ASCII)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_is_print_matches_printable_range():
    printable = [ch for ch in ALL_ASCII if is_print(ch)]
    assert printable[0] == " "
    assert printable[-1] == "~"
    assert len(printable) == 126 - 32 + 1


def test_is_print_excludes_control_characters():
    assert not is_print("\t")
    assert not is_print("\n")
    assert not is_print(127)


@pytest.mark.parametrize(
    "lower,upper", list(zip(string.ascii_lowercase, string.ascii_uppercase))
)
def test_case_conversion_on_letters(lower, upper):
    assert to_upper(lower) == upper
    assert to_lower(upper) == lower
    assert to_upper(upper) == upper
    assert to_lower(lower) == lower


def test_case_conversion_leaves_non_letters():
    for ch in ALL_ASCII:
        if not is_alpha(ch):
            assert to_upper(ch) == ch
            assert to_lower(ch) == ch


def test_case_conversion_keeps_int_type():
    assert to_upper(97) == 65
    assert to_lower(90) == 122
    assert to_upper(200) == 200


def test_case_round_trip_by_code():
    for code in range(128):
        if is_alpha(code):
            assert to_lower(to_upper(code)) == to_lower(code)
            assert to_upper(to_lower(code)) == to_upper(code)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        to_lower(None)