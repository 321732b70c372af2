"""Domain model entities for compustore.

These are pure data classes representing the store's records, independent of
how they are persisted. They are frozen: when one record embeds another (a
Product its Supplier, a Sale its Customer and Seller, a line item its Sale and
Product) it holds a snapshot taken at recording time, and later edits to the
source record never reach records that were already written.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Supplier:
    """Supplier domain entity."""

    id: int = 0
    name: str = ""
    phone: str = ""
    email: str = ""
    type: str = ""


@dataclass(frozen=True)
class Product:
    """Product domain entity, identified by its code."""

    code: str
    name: str
    price: Decimal
    quantity: int
    description: str
    category: str
    supplier: Supplier = field(default_factory=Supplier)
    active: bool = True


@dataclass(frozen=True)
class Seller:
    """Seller domain entity.

    ``sales_amount`` is entered by the operator; it is not derived from the
    recorded sales.
    """

    name: str
    surname: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    salary: Decimal = Decimal("0")
    sales_amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class Customer:
    """Customer domain entity."""

    name: str
    surname: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    tax_id: str = ""


@dataclass(frozen=True)
class Sale:
    """Sale header with customer and seller snapshots."""

    number: int
    date: date
    customer: Customer
    total: Decimal
    seller: Seller


@dataclass(frozen=True)
class SaleLineItem:
    """Sale line item with sale and product snapshots."""

    number: int
    sale: Sale
    product: Product
    quantity: int
    subtotal: Decimal


@dataclass(frozen=True)
class CustomerSalesTotal:
    """Accumulated sale totals for one customer (report row)."""

    customer: Customer
    total: Decimal
