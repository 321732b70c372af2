"""Abstract persistence interface."""

from abc import ABC, abstractmethod
from enum import Enum
from datetime import date
from decimal import Decimal
from typing import Any, Sequence

from compustore.domain.entities import Customer, Product, Sale, Seller


class EntityKind(str, Enum):
    """Kinds of records that are persisted, one file or table each."""

    PRODUCTS = "products"
    CUSTOMERS = "customers"
    SALES = "sales"
    SELLERS = "sellers"
    SUPPLIERS = "suppliers"
    SALE_ITEMS = "sale_items"


class CorruptRecordError(ValueError):
    """A persisted record could not be decoded."""


class Storage(ABC):
    """Abstract storage backend for compustore.

    A backend loads and saves whole collections, one entity kind at a time.
    Loading a kind that was never saved yields an empty list. Saving replaces
    everything previously stored for that kind.

    Loaded records embed name-only snapshots (a product's supplier, a sale's
    customer and seller, a line item's sale and product); linking them back to
    full records is done by ``compustore.database.persistence.load_store``.
    """

    @abstractmethod
    def connect(self) -> None:
        """Open the backend."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Release any resources held by the backend."""
        pass

    @abstractmethod
    def load(self, kind: EntityKind) -> list[Any]:
        """Load all records of a kind, in stored order."""
        pass

    @abstractmethod
    def save(self, kind: EntityKind, records: Sequence[Any]) -> None:
        """Replace all stored records of a kind."""
        pass


def placeholder_sale(number: int) -> Sale:
    """Sale snapshot carrying only its number, as loaded from storage."""
    return Sale(
        number=number,
        date=date.min,
        customer=Customer(name=""),
        total=Decimal("0"),
        seller=Seller(name=""),
    )


def placeholder_product(code: str) -> Product:
    """Product snapshot carrying only its code, as loaded from storage."""
    return Product(
        code=code, name="", price=Decimal("0"), quantity=0, description="", category=""
    )
