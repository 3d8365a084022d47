import pytest

from minikit.chars import (
    atoi,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    tolower,
    toupper,
)

ASCII = [chr(code) for code in range(128)]


@pytest.mark.parametrize("c", ASCII)
def test_classification_agrees_with_str_methods(c):
    assert isalpha(c) == c.isalpha()
    assert isdigit(c) == c.isdigit()
    assert isalnum(c) == c.isalnum()
    assert isprint(c) == c.isprintable()
    assert isascii(c) is True


@pytest.mark.parametrize("c", ASCII)
def test_case_conversion_agrees_with_str_methods(c):
    assert tolower(c) == c.lower()
    assert toupper(c) == c.upper()


def test_integer_codes_are_accepted_and_returned():
    assert tolower(ord("G")) == ord("g")
    assert toupper(ord("g")) == ord("G")
    assert isalpha(ord("z"))
    assert not isdigit(ord("z"))


def test_non_ascii_codes():
    assert not isascii(128)
    assert not isascii(-1)
    assert not isprint(127)
    assert tolower(200) == 200
    assert toupper("é") == "é"


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")


def test_wrong_type_is_rejected():
    with pytest.raises(TypeError):
        isdigit(1.5)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("   -42", -42),
        ("\t\n\v\f\r 17", 17),
        ("+12abc", 12),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
        ("", 0),
        ("abc", 0),
        ("--5", 0),
        ("- 5", 0),
    ],
)
def test_atoi(text, expected):
    assert atoi(text) == expected


def test_atoi_positive_overflow_gives_minus_one():
    assert atoi("2147483648") == -1
    assert atoi("99999999999999") == -1


def test_atoi_negative_overflow_gives_zero():
    assert atoi("-2147483649") == 0


@pytest.mark.parametrize("n", [0, 7, -7, 1000, -2147483648, 2147483647])
def test_itoa_round_trips_through_atoi(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_rejects_non_integers():
    with pytest.raises(TypeError):
        itoa("12")