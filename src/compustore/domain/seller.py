"""Seller domain service."""

from decimal import Decimal
from typing import Optional

from compustore.database.record_store import RecordStore
from compustore.domain.entities import Seller
from compustore.domain.errors import ValidationError
from compustore.utils.fields import require_token


class SellerService:
    """Service for managing sellers."""

    def __init__(self, store: RecordStore):
        """Initialize seller service.

        Args:
            store: Record store instance
        """
        self.store = store

    def create_seller(
        self,
        name: str,
        surname: str,
        phone: str,
        email: str,
        address: str,
        salary: Decimal,
        sales_amount: Decimal,
    ) -> Seller:
        """Register a seller.

        The seller is appended to the seller list and queued as a new
        arrival. ``sales_amount`` is stored as entered.

        Raises:
            ValidationError: If a text field is empty or contains whitespace,
                or an amount is negative
        """
        if salary < 0 or sales_amount < 0:
            raise ValidationError("Salary and sales amount cannot be negative")

        seller = Seller(
            name=require_token(name, "Seller name"),
            surname=require_token(surname, "Seller surname"),
            phone=require_token(phone, "Seller phone"),
            email=require_token(email, "Seller email"),
            address=require_token(address, "Seller address"),
            salary=salary,
            sales_amount=sales_amount,
        )
        self.store.add_seller(seller)
        return seller

    def list_sellers(self) -> list[Seller]:
        """List all sellers."""
        return self.store.list_sellers()

    def peek_new_seller(self) -> Optional[Seller]:
        """Return the oldest new-arrival seller, leaving it queued."""
        return self.store.peek_new_seller()
