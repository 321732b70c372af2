"""Supplier domain service."""

from compustore.database.record_store import RecordStore
from compustore.domain.entities import Supplier
from compustore.domain.errors import ConflictError, duplicate_supplier_id
from compustore.utils.fields import require_token


class SupplierService:
    """Service for managing the supplier queue."""

    def __init__(self, store: RecordStore):
        self.store = store

    def add_supplier(
        self, supplier_id: int, name: str, phone: str, email: str, type: str = ""
    ) -> Supplier:
        """Add a supplier to the back of the queue.

        Raises:
            ConflictError: If a supplier with the same id is queued
            ValidationError: If a text field is empty or contains whitespace
        """
        if self.store.find_supplier(supplier_id) is not None:
            raise ConflictError(duplicate_supplier_id(supplier_id))

        supplier = Supplier(
            id=supplier_id,
            name=require_token(name, "Supplier name"),
            phone=require_token(phone, "Supplier phone"),
            email=require_token(email, "Supplier email"),
            type=type.strip(),
        )
        self.store.enqueue_supplier(supplier)
        return supplier

    def list_suppliers(self) -> list[Supplier]:
        """List suppliers in queue order."""
        return self.store.list_suppliers()
