"""Flat text file storage.

One file per entity kind, one record per line, fields separated by a single
space, no header. Field order:

    products.txt    code name price quantity description category supplier_name active
    customers.txt   name surname phone email address tax_id
    sales.txt       sale_number date customer_name total seller_name
    sellers.txt     name surname phone email address salary sales_amount
    suppliers.txt   id name phone email
    sale_items.txt  sale_number detail_number product_code quantity subtotal

Fields are positional and unescaped. An empty value is written as ``-`` so a
line always has the full field count; values containing whitespace, and a
literal ``-``, cannot be encoded and are rejected.
"""

import logging
import re
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Callable, Sequence

from compustore.database.base import (
    CorruptRecordError,
    EntityKind,
    Storage,
    placeholder_product,
    placeholder_sale,
)
from compustore.domain.entities import (
    Customer,
    Product,
    Sale,
    SaleLineItem,
    Seller,
    Supplier,
)
from compustore.utils.date_parser import parse_date
from compustore.utils.fields import EMPTY_FIELD

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


def encode_field(value: Any) -> str:
    """Render one field value as a token."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, date):
        return value.isoformat()
    text = str(value)
    if text == "":
        return EMPTY_FIELD
    if text == EMPTY_FIELD:
        raise ValueError(f"Field value '{EMPTY_FIELD}' is reserved for empty values and cannot be stored")
    if _WHITESPACE.search(text):
        raise ValueError(f"Field value '{text}' contains whitespace and cannot be stored")
    return text


def decode_text(token: str) -> str:
    """Turn a token back into a text value."""
    return "" if token == EMPTY_FIELD else token


def _decode_int(token: str) -> int:
    return int(token)


def _decode_decimal(token: str) -> Decimal:
    try:
        return Decimal(token)
    except InvalidOperation:
        raise ValueError(f"invalid decimal '{token}'")


def _decode_bool(token: str) -> bool:
    if token not in ("0", "1"):
        raise ValueError(f"invalid flag '{token}'")
    return token == "1"


# Encoders: record -> list of field values in file order
def _encode_product(p: Product) -> list[Any]:
    return [p.code, p.name, p.price, p.quantity, p.description, p.category, p.supplier.name, p.active]


def _encode_customer(c: Customer) -> list[Any]:
    return [c.name, c.surname, c.phone, c.email, c.address, c.tax_id]


def _encode_sale(s: Sale) -> list[Any]:
    return [s.number, s.date, s.customer.name, s.total, s.seller.name]


def _encode_seller(s: Seller) -> list[Any]:
    return [s.name, s.surname, s.phone, s.email, s.address, s.salary, s.sales_amount]


def _encode_supplier(s: Supplier) -> list[Any]:
    return [s.id, s.name, s.phone, s.email]


def _encode_sale_item(i: SaleLineItem) -> list[Any]:
    return [i.sale.number, i.number, i.product.code, i.quantity, i.subtotal]


# Decoders: list of tokens -> record
def _decode_product(f: list[str]) -> Product:
    return Product(
        code=decode_text(f[0]),
        name=decode_text(f[1]),
        price=_decode_decimal(f[2]),
        quantity=_decode_int(f[3]),
        description=decode_text(f[4]),
        category=decode_text(f[5]),
        supplier=Supplier(name=decode_text(f[6])),
        active=_decode_bool(f[7]),
    )


def _decode_customer(f: list[str]) -> Customer:
    return Customer(*(decode_text(token) for token in f))


def _decode_sale(f: list[str]) -> Sale:
    return Sale(
        number=_decode_int(f[0]),
        date=parse_date(f[1]),
        customer=Customer(name=decode_text(f[2])),
        total=_decode_decimal(f[3]),
        seller=Seller(name=decode_text(f[4])),
    )


def _decode_seller(f: list[str]) -> Seller:
    return Seller(
        name=decode_text(f[0]),
        surname=decode_text(f[1]),
        phone=decode_text(f[2]),
        email=decode_text(f[3]),
        address=decode_text(f[4]),
        salary=_decode_decimal(f[5]),
        sales_amount=_decode_decimal(f[6]),
    )


def _decode_supplier(f: list[str]) -> Supplier:
    return Supplier(
        id=_decode_int(f[0]),
        name=decode_text(f[1]),
        phone=decode_text(f[2]),
        email=decode_text(f[3]),
    )


def _decode_sale_item(f: list[str]) -> SaleLineItem:
    return SaleLineItem(
        number=_decode_int(f[1]),
        sale=placeholder_sale(_decode_int(f[0])),
        product=placeholder_product(decode_text(f[2])),
        quantity=_decode_int(f[3]),
        subtotal=_decode_decimal(f[4]),
    )


CODECS: dict[EntityKind, tuple[int, Callable[[Any], list[Any]], Callable[[list[str]], Any]]] = {
    EntityKind.PRODUCTS: (8, _encode_product, _decode_product),
    EntityKind.CUSTOMERS: (6, _encode_customer, _decode_customer),
    EntityKind.SALES: (5, _encode_sale, _decode_sale),
    EntityKind.SELLERS: (7, _encode_seller, _decode_seller),
    EntityKind.SUPPLIERS: (4, _encode_supplier, _decode_supplier),
    EntityKind.SALE_ITEMS: (5, _encode_sale_item, _decode_sale_item),
}


def encode_record(kind: EntityKind, record: Any) -> str:
    """Encode one record as a line (without the newline)."""
    _, encode, _ = CODECS[kind]
    return " ".join(encode_field(value) for value in encode(record))


def decode_record(kind: EntityKind, line: str) -> Any:
    """Decode one line into a record.

    Raises:
        ValueError: If the field count or a field value is wrong
    """
    field_count, _, decode = CODECS[kind]
    fields = line.split()
    if len(fields) != field_count:
        raise ValueError(f"expected {field_count} fields, found {len(fields)}")
    return decode(fields)


class TextFileStorage(Storage):
    """Storage backend writing one text file per entity kind."""

    def __init__(self, data_dir: str):
        """Initialize text file storage.

        Args:
            data_dir: Directory holding the record files
        """
        self.data_dir = Path(data_dir)

    def path_for(self, kind: EntityKind) -> Path:
        """Return the file used for an entity kind."""
        return self.data_dir / f"{kind.value}.txt"

    def connect(self) -> None:
        """Create the data directory if needed."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def disconnect(self) -> None:
        """Files are opened per call, so there is nothing to release."""
        pass

    def load(self, kind: EntityKind) -> list[Any]:
        """Load all records of a kind.

        Raises:
            CorruptRecordError: If a line cannot be decoded
        """
        path = self.path_for(kind)
        if not path.exists():
            logger.debug("No %s file at %s, starting empty", kind.value, path)
            return []

        records = []
        with path.open("r", encoding="utf-8") as fh:
            for line_number, line in enumerate(fh, start=1):
                if not line.strip():
                    continue
                try:
                    records.append(decode_record(kind, line))
                except ValueError as e:
                    raise CorruptRecordError(f"{path}:{line_number}: {e}") from e

        logger.info("Loaded %d %s from %s", len(records), kind.value, path)
        return records

    def save(self, kind: EntityKind, records: Sequence[Any]) -> None:
        """Overwrite the file of a kind with the given records."""
        path = self.path_for(kind)
        lines = [encode_record(kind, record) + "\n" for record in records]
        with path.open("w", encoding="utf-8") as fh:
            fh.writelines(lines)
        logger.info("Saved %d %s to %s", len(records), kind.value, path)
