"""Load and save a whole RecordStore through a Storage backend.

Storage backends return name-only snapshots for embedded records. Loading
links them back to the full records loaded alongside them: a product's
supplier by name, a sale's customer and seller by name, a line item's sale by
number and product by code. A reference that matches nothing keeps its
name-only snapshot.

Only the product code of a line item is stored, so a reloaded line item
shows the product as it is now: a name or price changed after the sale
replaces the one seen at entry time. The subtotal is stored and keeps its
entry-time value. Likewise, line items of a reused sale number all link to
the most recent sale with that number.
"""

import logging
from dataclasses import replace

from compustore.database.base import CorruptRecordError, EntityKind, Storage
from compustore.database.record_store import RecordStore
from compustore.domain.errors import ConflictError

logger = logging.getLogger(__name__)


def load_store(storage: Storage) -> RecordStore:
    """Build a RecordStore from everything persisted in ``storage``."""
    store = RecordStore()

    suppliers_by_name = {}
    for supplier in storage.load(EntityKind.SUPPLIERS):
        store.enqueue_supplier(supplier)
        suppliers_by_name.setdefault(supplier.name, supplier)

    for product in storage.load(EntityKind.PRODUCTS):
        supplier = suppliers_by_name.get(product.supplier.name) if product.supplier.name else None
        if supplier is not None:
            product = replace(product, supplier=supplier)
        try:
            store.add_product(product)
        except ConflictError as e:
            raise CorruptRecordError(f"Stored products: {e}") from e

    for customer in storage.load(EntityKind.CUSTOMERS):
        store.load_customer(customer)

    for seller in storage.load(EntityKind.SELLERS):
        store.load_seller(seller)

    for sale in storage.load(EntityKind.SALES):
        customer = store.find_customer_by_name(sale.customer.name) or sale.customer
        seller = store.find_seller_by_name(sale.seller.name) or sale.seller
        store.add_sale(replace(sale, customer=customer, seller=seller))

    unresolved = 0
    for item in storage.load(EntityKind.SALE_ITEMS):
        sale = store.find_sale(item.sale.number)
        product = store.get_product(item.product.code)
        if sale is None or product is None:
            unresolved += 1
        store.add_sale_item(
            replace(item, sale=sale or item.sale, product=product or item.product)
        )
    if unresolved:
        logger.warning("%d sale line items reference missing sales or products", unresolved)

    return store


def save_store(storage: Storage, store: RecordStore) -> None:
    """Persist every collection of ``store``, replacing what was stored."""
    storage.save(EntityKind.PRODUCTS, store.list_products())
    storage.save(EntityKind.CUSTOMERS, store.list_customers())
    storage.save(EntityKind.SALES, store.list_sales())
    storage.save(EntityKind.SELLERS, store.list_sellers())
    storage.save(EntityKind.SUPPLIERS, store.list_suppliers())
    storage.save(EntityKind.SALE_ITEMS, store.list_sale_items())
