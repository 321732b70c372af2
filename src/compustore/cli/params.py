"""Click parameter types for interactive prompts."""

import click

from compustore.utils.amount_parser import parse_amount, parse_quantity
from compustore.utils.date_parser import parse_date


class AmountType(click.ParamType):
    """Non-negative money amount, parsed into a Decimal."""

    name = "amount"

    def convert(self, value, param, ctx):
        try:
            return parse_amount(str(value))
        except ValueError as e:
            self.fail(str(e), param, ctx)


class QuantityType(click.ParamType):
    """Non-negative whole quantity."""

    name = "quantity"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return parse_quantity(value)
        except ValueError as e:
            self.fail(str(e), param, ctx)


class DateType(click.ParamType):
    """Date in any format accepted by parse_date."""

    name = "date"

    def convert(self, value, param, ctx):
        try:
            return parse_date(str(value))
        except ValueError as e:
            self.fail(str(e), param, ctx)


AMOUNT = AmountType()
QUANTITY = QuantityType()
DATE = DateType()
