"""Product domain service."""

import logging
from decimal import Decimal
from typing import Optional

from compustore.database.record_store import RecordStore
from compustore.domain.entities import Product, Supplier
from compustore.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_product_code,
    product_not_found,
)
from compustore.utils.fields import require_token

logger = logging.getLogger(__name__)


class ProductService:
    """Service for managing products."""

    def __init__(self, store: RecordStore):
        """Initialize product service.

        Args:
            store: Record store instance
        """
        self.store = store

    def product_exists(self, code: str) -> bool:
        """Check if a product code is already in use."""
        return self.store.has_product(code.strip())

    def create_product(
        self,
        code: str,
        name: str,
        price: Decimal,
        quantity: int,
        description: str,
        category: str,
        supplier_id: int,
        active: bool = True,
    ) -> Product:
        """Create a product.

        The supplier queue is scanned for ``supplier_id``; the matching
        supplier is embedded as a snapshot and stays in the queue. If no
        supplier matches, the product carries an empty supplier.

        Args:
            code: Unique product code
            name: Product name
            price: Unit price
            quantity: Units in stock
            description: Product description
            category: Category name
            supplier_id: Id of the supplier to embed
            active: Status flag

        Returns:
            The created product

        Raises:
            ConflictError: If the code already exists
            ValidationError: If a text field is empty or contains whitespace
        """
        code = require_token(code, "Product code")
        if self.store.has_product(code):
            raise ConflictError(duplicate_product_code(code))
        _check_stock(price, quantity)

        supplier = self.store.find_supplier(supplier_id)
        if supplier is None:
            logger.warning("No supplier with id %s; product %s has no supplier", supplier_id, code)
            supplier = Supplier()

        product = Product(
            code=code,
            name=require_token(name, "Product name"),
            price=price,
            quantity=quantity,
            description=require_token(description, "Product description"),
            category=require_token(category, "Product category"),
            supplier=supplier,
            active=active,
        )
        self.store.add_product(product)
        return product

    def update_product(
        self,
        code: str,
        name: str,
        price: Decimal,
        quantity: int,
        description: str,
        category: str,
        active: bool,
    ) -> Product:
        """Replace every editable field of a product.

        The embedded supplier snapshot is kept.

        Returns:
            The updated product

        Raises:
            NotFoundError: If the product does not exist
            ValidationError: If a text field is empty or contains whitespace
        """
        code = code.strip()
        current = self.store.get_product(code)
        if current is None:
            raise NotFoundError(product_not_found(code))
        _check_stock(price, quantity)

        product = Product(
            code=code,
            name=require_token(name, "Product name"),
            price=price,
            quantity=quantity,
            description=require_token(description, "Product description"),
            category=require_token(category, "Product category"),
            supplier=current.supplier,
            active=active,
        )
        self.store.replace_product(product)
        return product

    def delete_product(self, code: str) -> Product:
        """Delete a product.

        Returns:
            The deleted product

        Raises:
            NotFoundError: If the product does not exist
        """
        return self.store.remove_product(code.strip())

    def get_product(self, code: str) -> Optional[Product]:
        """Get product by code."""
        return self.store.get_product(code.strip())

    def list_products(self) -> list[Product]:
        """List all products."""
        return self.store.list_products()

    def list_categories(self) -> list[str]:
        """List categories that hold products."""
        return self.store.list_categories()

    def list_products_in_category(self, category: str) -> list[Product]:
        """List products of one category."""
        return self.store.list_products_in_category(category.strip())


def _check_stock(price: Decimal, quantity: int) -> None:
    if price < 0:
        raise ValidationError("Price cannot be negative")
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative")
