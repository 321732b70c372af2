"""Amount and quantity parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse a money amount (price, salary, sale total) into a Decimal.

    Accepts "123.45", "$123.45" and "1,234.56". Amounts may not be negative.

    Raises:
        ValueError: If the string is empty, malformed or negative
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = re.sub(r"[$€£¥\s]", "", amount_str).replace(",", "")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if amount < 0:
        raise ValueError(f"Amount cannot be negative: '{amount_str}'")
    return amount


def parse_quantity(quantity_str: str) -> int:
    """Parse a non-negative whole quantity.

    Raises:
        ValueError: If the string is not a non-negative integer
    """
    try:
        quantity = int(quantity_str.strip())
    except (AttributeError, ValueError):
        raise ValueError(f"Could not parse quantity '{quantity_str}'")
    if quantity < 0:
        raise ValueError(f"Quantity cannot be negative: '{quantity_str}'")
    return quantity
