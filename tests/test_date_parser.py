"""Tests for date parsing and named periods."""

import pytest
from datetime import date, timedelta
from dateutil.relativedelta import relativedelta
from compustore.utils.date_parser import parse_date, get_date_range


def test_parse_absolute_date():
    """Test parsing ISO dates."""
    assert parse_date("2024-09-07") == date(2024, 9, 7)


def test_parse_relative_words():
    today = date.today()
    assert parse_date("today") == today
    assert parse_date("Yesterday") == today - timedelta(days=1)
    assert parse_date(" tomorrow ") == today + timedelta(days=1)


def test_parse_standard_formats():
    """Test parsing various standard date formats."""
    # These should all work via dateutil parser
    assert parse_date("September 7, 2024") == date(2024, 9, 7)
    assert parse_date("09/07/2024") == date(2024, 9, 7)


@pytest.mark.parametrize("text", ["", "   ", "not-a-date", "2024-13-45"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_date(text)


def test_get_date_range_this_week():
    today = date.today()
    start, end = get_date_range("this-week")
    assert start == today - timedelta(days=today.weekday())
    assert start.weekday() == 0  # Monday
    assert end == today


def test_get_date_range_this_month_and_year():
    today = date.today()
    assert get_date_range("this-month") == (date(today.year, today.month, 1), today)
    assert get_date_range("this-year") == (date(today.year, 1, 1), today)


def test_get_date_range_last_month():
    """Test get_date_range for last-month."""
    today = date.today()
    start, end = get_date_range("last-month")
    expected_start = (today - relativedelta(months=1)).replace(day=1)
    assert start == expected_start
    assert end == today.replace(day=1) - timedelta(days=1)
    assert (end.year, end.month) == (expected_start.year, expected_start.month)


def test_get_date_range_last_year():
    today = date.today()
    assert get_date_range("last-year") == (date(today.year - 1, 1, 1), date(today.year - 1, 12, 31))


def test_get_date_range_invalid_period():
    """Test get_date_range with invalid period."""
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-decade")
