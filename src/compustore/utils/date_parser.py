"""Date parsing utilities for sale dates and listing filters."""

from datetime import date, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta


def parse_date(date_str: str) -> date:
    """Parse a sale date.

    Accepts ISO dates ("2024-09-07"), the other formats dateutil understands
    ("07/09/2024", "Sep 7 2024") and the words "today", "yesterday" and
    "tomorrow".

    Raises:
        ValueError: If the string cannot be parsed
    """
    text = date_str.strip().lower()
    if not text:
        raise ValueError("Empty date string")

    today = date.today()
    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }
    if text in relative_dates:
        return relative_dates[text]

    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str) -> tuple[date, date]:
    """Get (start, end) dates for a named period ending today or in the past.

    Supported periods: this-week, this-month, this-year, last-month, last-year.

    Raises:
        ValueError: If the period is not recognized
    """
    period = period.strip().lower()
    today = date.today()

    if period == "this-week":
        return (today - timedelta(days=today.weekday()), today)
    if period == "this-month":
        return (today.replace(day=1), today)
    if period == "this-year":
        return (today.replace(month=1, day=1), today)
    if period == "last-month":
        first_of_month = today.replace(day=1)
        return (first_of_month - relativedelta(months=1), first_of_month - timedelta(days=1))
    if period == "last-year":
        first_of_year = today.replace(month=1, day=1)
        return (first_of_year - relativedelta(years=1), first_of_year - timedelta(days=1))

    raise ValueError(
        f"Unknown period: '{period}'. Supported periods: "
        "this-week, this-month, this-year, last-month, last-year"
    )
