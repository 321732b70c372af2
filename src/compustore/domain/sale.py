"""Sale domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from compustore.database.record_store import RecordStore
from compustore.domain.entities import Sale, SaleLineItem
from compustore.domain.errors import (
    NotFoundError,
    ValidationError,
    customer_not_found,
    product_not_found,
    sale_not_found,
    seller_not_found,
)

logger = logging.getLogger(__name__)


class SaleService:
    """Service for recording and querying sales."""

    def __init__(self, store: RecordStore):
        """Initialize sale service.

        Args:
            store: Record store instance
        """
        self.store = store

    def create_sale(
        self,
        number: int,
        sale_date: date,
        customer_name: str,
        total: Decimal,
        seller_name: str,
    ) -> Sale:
        """Record a sale header.

        Customer and seller are looked up by exact name and embedded as
        snapshots. Both lookups happen before anything is recorded, so a miss
        leaves the sale list unchanged. Sale numbers are not required to be
        unique.

        Args:
            number: Sale number
            sale_date: Date of the sale
            customer_name: Name of an existing customer
            total: Sale total as entered by the operator
            seller_name: Name of an existing seller

        Returns:
            The recorded sale

        Raises:
            NotFoundError: If the customer or the seller does not exist
            ValidationError: If the total is negative
        """
        if total < 0:
            raise ValidationError("Sale total cannot be negative")

        customer = self.store.find_customer_by_name(customer_name.strip())
        if customer is None:
            raise NotFoundError(customer_not_found(customer_name))

        seller = self.store.find_seller_by_name(seller_name.strip())
        if seller is None:
            raise NotFoundError(seller_not_found(seller_name))

        if self.store.has_sale_number(number):
            logger.warning("Sale number %s is already in use; recording a duplicate", number)

        sale = Sale(number=number, date=sale_date, customer=customer, total=total, seller=seller)
        self.store.add_sale(sale)
        return sale

    def add_line_item(self, sale_number: int, product_code: str, quantity: int) -> SaleLineItem:
        """Add a line item to a recorded sale.

        Items attach to the most recent sale with that number. Detail numbers
        count from 1 within that sale, even when an earlier sale reused the
        number. The subtotal is computed from the product price at entry time
        and is never recomputed.

        Raises:
            NotFoundError: If the sale or the product does not exist
            ValidationError: If the quantity is not positive
        """
        if quantity <= 0:
            raise ValidationError("Quantity must be at least 1")

        sale = self.store.find_sale(sale_number)
        if sale is None:
            raise NotFoundError(sale_not_found(sale_number))

        product = self.store.get_product(product_code.strip())
        if product is None:
            raise NotFoundError(product_not_found(product_code))

        existing = [i for i in self.store.line_items_for(sale_number) if i.sale is sale]
        item = SaleLineItem(
            number=len(existing) + 1,
            sale=sale,
            product=product,
            quantity=quantity,
            subtotal=product.price * quantity,
        )
        self.store.add_sale_item(item)
        return item

    def list_sales(
        self, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[Sale]:
        """List sales, optionally restricted to a date range (inclusive)."""
        sales = self.store.list_sales()
        if start_date is not None:
            sales = [s for s in sales if s.date >= start_date]
        if end_date is not None:
            sales = [s for s in sales if s.date <= end_date]
        return sales

    def list_line_items(self) -> list[SaleLineItem]:
        """List every recorded line item."""
        return self.store.list_sale_items()

    def line_items_for(self, sale_number: int) -> list[SaleLineItem]:
        """List line items of one sale number."""
        return self.store.line_items_for(sale_number)
