"""Utility functions for compustore."""

from compustore.utils.date_parser import parse_date, get_date_range
from compustore.utils.amount_parser import parse_amount, parse_quantity
from compustore.utils.fields import require_token

__all__ = ["parse_date", "get_date_range", "parse_amount", "parse_quantity", "require_token"]
