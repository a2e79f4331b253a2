import pytest

from pushswap.numbers import INT_MAX, INT_MIN, abs_int, atoi, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 42, -42, 1000, INT_MAX, INT_MIN])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_text():
    assert itoa(-42) == "-42"
    assert itoa(0) == "0"
    assert itoa(INT_MIN) == "-2147483648"


def test_atoi_skips_space_and_sign():
    assert atoi("  \t\n-42abc") == -42
    assert atoi("+7") == 7
    assert atoi("\v\f\r 15") == 15


def test_atoi_without_digits_is_zero():
    assert atoi("") == 0
    assert atoi("abc") == 0
    assert atoi("--1") == 0
    assert atoi("+-1") == 0


def test_atoi_stops_at_first_non_digit():
    assert atoi("12 34") == 12


def test_atoi_wraps_to_32_bits():
    assert atoi(str(INT_MAX + 1)) == INT_MIN
    assert atoi(str(INT_MIN - 1)) == INT_MAX


def test_atoi_clamps_beyond_64_bits():
    assert atoi("99999999999999999999") == -1
    assert atoi("-99999999999999999999") == 0


def test_abs_int():
    assert abs_int(-5) == 5
    assert abs_int(5) == 5
    assert abs_int(0) == 0
    assert abs_int(INT_MIN) == 0
    assert abs_int(-INT_MAX) == INT_MAX