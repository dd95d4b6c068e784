import pytest

from ach_transactions.nacha import FieldError
from ach_transactions.nacha.fields import (
    alpha,
    calculate_check_digit,
    check_max,
    numeric,
    parse_int,
    valid_routing_number,
)


def test_alpha_pads_right_and_truncates():
    assert alpha("ABC", 5) == "ABC  "
    assert alpha("ABCDEFG", 5) == "ABCDE"
    assert alpha(None, 3) == "   "


def test_numeric_pads_left_and_keeps_low_order_digits():
    assert numeric(42, 5) == "00042"
    assert numeric("7", 3) == "007"
    assert numeric(123456789012, 10) == "3456789012"
    assert numeric(None, 2) == "00"


@pytest.mark.parametrize(
    ("routing", "digit"),
    [("12345678", 0), ("09100001", 9), ("07192321", 3)],
)
def test_calculate_check_digit(routing: str, digit: int):
    assert calculate_check_digit(routing) == digit


def test_valid_routing_number():
    assert valid_routing_number("123456780")
    assert not valid_routing_number("123456789")
    assert not valid_routing_number("12345678")
    assert not valid_routing_number("12345678A")


def test_calculate_check_digit_rejects_short_input():
    with pytest.raises(ValueError):
        calculate_check_digit("1234")


def test_parse_int_blank_is_zero_and_rejects_letters():
    assert parse_int("   ", record="R", field="F") == 0
    assert parse_int("0042", record="R", field="F") == 42
    with pytest.raises(FieldError) as excinfo:
        parse_int("12A4", record="R", field="F")
    assert excinfo.value.field == "F"


def test_check_max_rejects_negative_and_overflow():
    check_max("R", "F", 999, 3)
    with pytest.raises(FieldError):
        check_max("R", "F", 1000, 3)
    with pytest.raises(FieldError):
        check_max("R", "F", -1, 3)
