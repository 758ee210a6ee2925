"""Tests for amount parsing and card masking."""

from decimal import Decimal
import pytest

from oopconcepts.utils.amount_parser import parse_amount
from oopconcepts.utils.masking import mask_card_number


@pytest.mark.parametrize(
    "amount_str,expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("1,234.56", Decimal("1234.56")),
        ("  500.00 ", Decimal("500.00")),
        ("-50", Decimal("-50")),
        ("€10", Decimal("10")),
    ],
)
def test_parse_amount(amount_str, expected):
    """Test parsing the supported amount formats."""
    assert parse_amount(amount_str) == expected


@pytest.mark.parametrize("amount_str", ["", "   ", "abc", "1.2.3", "nan", "Infinity"])
def test_parse_amount_invalid(amount_str):
    """Test that invalid amounts raise ValueError."""
    with pytest.raises(ValueError):
        parse_amount(amount_str)


def test_parse_amount_keeps_scale():
    """Test that trailing zeros survive parsing."""
    assert str(parse_amount("500.00")) == "500.00"


@pytest.mark.parametrize(
    "card_number,expected",
    [
        ("4111 1111 1111 1234", "**** **** **** 1234"),
        ("4111111111111234", "************1234"),
        ("4111-1111-1111-1234", "****-****-****-1234"),
        ("**** **** **** 1234", "**** **** **** 1234"),
        ("1234", "1234"),
    ],
)
def test_mask_card_number(card_number, expected):
    """Test that only the last four digits stay visible."""
    assert mask_card_number(card_number) == expected


def test_parse_amount_error_message():
    """Test that parse errors name the original input."""
    with pytest.raises(ValueError, match=r"Could not parse amount '\$abc'"):
        parse_amount(" $abc ")
