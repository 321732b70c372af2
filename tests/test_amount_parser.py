"""Tests for amount and quantity parsing."""

from decimal import Decimal

import pytest

from compustore.utils.amount_parser import parse_amount, parse_quantity


@pytest.mark.parametrize(
    "text,expected",
    [
        ("250", Decimal("250")),
        ("19.99", Decimal("19.99")),
        ("$1,234.50", Decimal("1234.50")),
        (" 3000 ", Decimal("3000")),
        ("0", Decimal("0")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "-5", "NaN", "Infinity"])
def test_parse_amount_rejects(text):
    with pytest.raises(ValueError):
        parse_amount(text)


def test_parse_quantity():
    assert parse_quantity("10") == 10
    assert parse_quantity(" 0 ") == 0


@pytest.mark.parametrize("text", ["", "1.5", "-1", "ten"])
def test_parse_quantity_rejects(text):
    with pytest.raises(ValueError):
        parse_quantity(text)
