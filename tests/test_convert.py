import pytest

from solong.convert import atoi, itoa


def test_atoi_plain_number():
    assert atoi("42") == 42


def test_atoi_skips_all_whitespace_kinds():
    assert atoi(" \n\t\v\f\r  -42") == -42


def test_atoi_plus_sign():
    assert atoi("+17") == 17


def test_atoi_stops_at_first_non_digit():
    assert atoi("123abc456") == 123


def test_atoi_no_digits_gives_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("   ") == 0


def test_atoi_only_one_sign_allowed():
    assert atoi("--5") == 0
    assert atoi("+-5") == 0


def test_atoi_space_after_sign_ends_parse():
    assert atoi("- 5") == 0


def test_atoi_int_limits_from_source():
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483647") == 2147483647


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, -1, 9, 10, -10, 12345, -98765, 2147483647, -2147483648])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [1, 9, 10, 99, 100, 123456])
def test_itoa_sign_and_length(n):
    assert itoa(-n) == "-" + itoa(n)
    assert itoa(n).isdigit()


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")
    with pytest.raises(TypeError):
        itoa(1.5)