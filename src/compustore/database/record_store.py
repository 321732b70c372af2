"""In-memory record store.

``RecordStore`` holds the canonical collection of every entity kind for the
lifetime of a session. Products are kept in an ordered dict keyed by code,
which doubles as the code index, together with a category index. Both are
changed only inside ``add_product``, ``replace_product`` and
``remove_product``, so the set of codes in the canonical map always equals the
set of codes across the category buckets.
"""

import logging
from collections import deque
from typing import Optional

from compustore.domain.entities import (
    Customer,
    Product,
    Sale,
    SaleLineItem,
    Seller,
    Supplier,
)
from compustore.domain.errors import (
    ConflictError,
    NotFoundError,
    duplicate_product_code,
    product_not_found,
)

logger = logging.getLogger(__name__)


class RecordStore:
    """Canonical collections and derived indices for all entity kinds."""

    def __init__(self):
        self._products: dict[str, Product] = {}
        self._products_by_category: dict[str, list[Product]] = {}
        self._suppliers: deque[Supplier] = deque()
        self._sellers: list[Seller] = []
        self._new_sellers: deque[Seller] = deque()
        self._customers: list[Customer] = []
        self._new_customers: deque[Customer] = deque()
        self._sales: list[Sale] = []
        self._sale_items: list[SaleLineItem] = []

    # Product operations
    def has_product(self, code: str) -> bool:
        """Check if a product with the given code exists."""
        return code in self._products

    def get_product(self, code: str) -> Optional[Product]:
        """Get product by code."""
        return self._products.get(code)

    def list_products(self) -> list[Product]:
        """List products in insertion order."""
        return list(self._products.values())

    def list_categories(self) -> list[str]:
        """List categories that currently hold at least one product."""
        return list(self._products_by_category)

    def list_products_in_category(self, category: str) -> list[Product]:
        """List products in one category, in insertion order."""
        return list(self._products_by_category.get(category, []))

    def add_product(self, product: Product) -> None:
        """Add a product to the canonical map and the category index.

        Raises:
            ConflictError: If the code is already present
        """
        if product.code in self._products:
            raise ConflictError(duplicate_product_code(product.code))
        self._products[product.code] = product
        self._products_by_category.setdefault(product.category, []).append(product)
        logger.debug("Indexed product %s under category %s", product.code, product.category)

    def replace_product(self, product: Product) -> Product:
        """Replace the product with the same code. Returns the previous record.

        The canonical map keeps the product's position. If the category is
        unchanged the record is replaced in place inside its bucket, otherwise
        it moves to the end of the new category's bucket.

        Raises:
            NotFoundError: If no product has that code
        """
        old = self._products.get(product.code)
        if old is None:
            raise NotFoundError(product_not_found(product.code))

        self._products[product.code] = product
        if old.category == product.category:
            bucket = self._products_by_category[old.category]
            bucket[:] = [product if p.code == product.code else p for p in bucket]
        else:
            self._drop_from_category(old)
            self._products_by_category.setdefault(product.category, []).append(product)
        logger.debug(
            "Re-indexed product %s (%s -> %s)", product.code, old.category, product.category
        )
        return old

    def remove_product(self, code: str) -> Product:
        """Remove a product from the canonical map and the category index.

        Raises:
            NotFoundError: If no product has that code
        """
        product = self._products.pop(code, None)
        if product is None:
            raise NotFoundError(product_not_found(code))
        self._drop_from_category(product)
        logger.debug("Removed product %s from category %s", code, product.category)
        return product

    def _drop_from_category(self, product: Product) -> None:
        bucket = [p for p in self._products_by_category[product.category] if p.code != product.code]
        if bucket:
            self._products_by_category[product.category] = bucket
        else:
            del self._products_by_category[product.category]

    # Supplier operations
    def enqueue_supplier(self, supplier: Supplier) -> None:
        """Append a supplier at the back of the pending queue."""
        self._suppliers.append(supplier)

    def list_suppliers(self) -> list[Supplier]:
        """List suppliers in queue order."""
        return list(self._suppliers)

    def find_supplier(self, supplier_id: int) -> Optional[Supplier]:
        """Scan the whole supplier queue for an id.

        The queue is left untouched. When several suppliers share the id the
        last one in queue order is returned.
        """
        found = None
        for supplier in self._suppliers:
            if supplier.id == supplier_id:
                found = supplier
        return found

    # Seller operations
    def add_seller(self, seller: Seller) -> None:
        """Append a seller and enqueue it as a new arrival."""
        self._sellers.append(seller)
        self._new_sellers.append(seller)

    def load_seller(self, seller: Seller) -> None:
        """Append a persisted seller without treating it as a new arrival."""
        self._sellers.append(seller)

    def list_sellers(self) -> list[Seller]:
        """List sellers in insertion order."""
        return list(self._sellers)

    def find_seller_by_name(self, name: str) -> Optional[Seller]:
        """Return the first seller whose name equals ``name``."""
        return next((s for s in self._sellers if s.name == name), None)

    def peek_new_seller(self) -> Optional[Seller]:
        """Return the oldest new-arrival seller without removing it."""
        return self._new_sellers[0] if self._new_sellers else None

    # Customer operations
    def add_customer(self, customer: Customer) -> None:
        """Append a customer and enqueue it as a new arrival."""
        self._customers.append(customer)
        self._new_customers.append(customer)

    def load_customer(self, customer: Customer) -> None:
        """Append a persisted customer without treating it as a new arrival."""
        self._customers.append(customer)

    def list_customers(self) -> list[Customer]:
        """List customers in insertion order."""
        return list(self._customers)

    def find_customer_by_name(self, name: str) -> Optional[Customer]:
        """Return the first customer whose name equals ``name``."""
        return next((c for c in self._customers if c.name == name), None)

    def peek_new_customer(self) -> Optional[Customer]:
        """Return the oldest new-arrival customer without removing it."""
        return self._new_customers[0] if self._new_customers else None

    # Sale operations
    def add_sale(self, sale: Sale) -> None:
        """Append a sale header."""
        self._sales.append(sale)

    def list_sales(self) -> list[Sale]:
        """List sales in insertion order."""
        return list(self._sales)

    def find_sale(self, number: int) -> Optional[Sale]:
        """Return the most recently recorded sale with the given number."""
        return next((s for s in reversed(self._sales) if s.number == number), None)

    def has_sale_number(self, number: int) -> bool:
        """Check if any sale carries the given number."""
        return any(s.number == number for s in self._sales)

    def add_sale_item(self, item: SaleLineItem) -> None:
        """Append a sale line item."""
        self._sale_items.append(item)

    def list_sale_items(self) -> list[SaleLineItem]:
        """List all line items in insertion order."""
        return list(self._sale_items)

    def line_items_for(self, sale_number: int) -> list[SaleLineItem]:
        """List line items recorded against a sale number."""
        return [item for item in self._sale_items if item.sale.number == sale_number]
