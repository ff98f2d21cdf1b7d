import pytest

from minitalk.numbers import INT_MAX, INT_MIN, atoi, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 42, -5678, 1234535388, INT_MAX, INT_MIN])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_minimum():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(INT_MAX + 1)
    with pytest.raises(OverflowError):
        itoa(INT_MIN - 1)


def test_atoi_skips_whitespace_and_plus():
    assert atoi(" \t\n\v\f\r+17abc") == 17


def test_atoi_negative():
    assert atoi("   -5678") == -5678


def test_atoi_double_sign_is_zero():
    assert atoi("--1234535388") == 0


def test_atoi_no_digits_is_zero():
    assert atoi("hello") == 0
    assert atoi("") == 0


def test_atoi_stops_at_non_digit():
    assert atoi("12 34") == 12


def test_atoi_wraps_to_int32():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == INT_MIN


def test_atoi_space_between_sign_and_digits():
    assert atoi("- 5") == 0