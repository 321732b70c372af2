"""Tests for the flat text file storage."""

from datetime import date
from decimal import Decimal

import pytest

from compustore.database.base import CorruptRecordError, EntityKind
from compustore.database.textfile import decode_record, encode_record
from compustore.domain.entities import Customer, Product, Sale, Seller, Supplier


def test_missing_file_loads_empty(text_storage):
    for kind in EntityKind:
        assert text_storage.load(kind) == []


def test_product_line_layout():
    product = Product(
        code="P1",
        name="Mouse",
        price=Decimal("9.99"),
        quantity=3,
        description="usb",
        category="Peripherals",
        supplier=Supplier(id=4, name="Acme"),
        active=False,
    )

    assert encode_record(EntityKind.PRODUCTS, product) == "P1 Mouse 9.99 3 usb Peripherals Acme 0"


def test_sale_line_layout():
    sale = Sale(
        number=7,
        date=date(2024, 9, 7),
        customer=Customer(name="Ana", surname="Lopez"),
        total=Decimal("120.50"),
        seller=Seller(name="Luis"),
    )

    assert encode_record(EntityKind.SALES, sale) == "7 2024-09-07 Ana 120.50 Luis"


def test_empty_field_written_as_placeholder():
    product = Product("P1", "Mouse", Decimal("1"), 1, "usb", "Peripherals")

    line = encode_record(EntityKind.PRODUCTS, product)

    assert line == "P1 Mouse 1 1 usb Peripherals - 1"
    assert decode_record(EntityKind.PRODUCTS, line).supplier == Supplier()


def test_whitespace_in_field_cannot_be_encoded():
    customer = Customer("Ana", "Lopez", "1", "a@a.test", "Main St", "1")
    with pytest.raises(ValueError, match="whitespace"):
        encode_record(EntityKind.CUSTOMERS, customer)


def test_round_trip_all_kinds(text_storage):
    supplier = Supplier(id=1, name="Acme", phone="555", email="a@a.test")
    product = Product("P1", "Mouse", Decimal("9.99"), 3, "usb", "Peripherals", Supplier(name="Acme"), True)
    customer = Customer("Ana", "Lopez", "555-1", "ana@a.test", "Main_St", "123-4")
    seller = Seller("Luis", "Perez", "555-2", "luis@a.test", "Oak_Ave", Decimal("3000.00"), Decimal("12.5"))
    sale = Sale(3, date(2024, 9, 7), Customer(name="Ana"), Decimal("19.98"), Seller(name="Luis"))

    text_storage.save(EntityKind.SUPPLIERS, [supplier])
    text_storage.save(EntityKind.PRODUCTS, [product])
    text_storage.save(EntityKind.CUSTOMERS, [customer])
    text_storage.save(EntityKind.SELLERS, [seller])
    text_storage.save(EntityKind.SALES, [sale])

    assert text_storage.load(EntityKind.SUPPLIERS) == [supplier]
    assert text_storage.load(EntityKind.PRODUCTS) == [product]
    assert text_storage.load(EntityKind.CUSTOMERS) == [customer]
    assert text_storage.load(EntityKind.SELLERS) == [seller]
    assert text_storage.load(EntityKind.SALES) == [sale]


def test_supplier_type_is_not_persisted(text_storage):
    text_storage.save(EntityKind.SUPPLIERS, [Supplier(id=1, name="Acme", phone="1", email="e", type="x")])

    assert text_storage.load(EntityKind.SUPPLIERS)[0].type == ""


def test_save_overwrites_file(text_storage):
    customers = [
        Customer("Ana", "Lopez", "1", "a@a.test", "A", "1"),
        Customer("Bea", "Diaz", "2", "b@b.test", "B", "2"),
    ]
    text_storage.save(EntityKind.CUSTOMERS, customers)
    text_storage.save(EntityKind.CUSTOMERS, customers[1:])

    assert text_storage.load(EntityKind.CUSTOMERS) == customers[1:]
    assert text_storage.path_for(EntityKind.CUSTOMERS).read_text().count("\n") == 1


def test_blank_lines_are_skipped(text_storage):
    text_storage.path_for(EntityKind.SUPPLIERS).write_text("\n1 Acme 555 a@a.test\n\n")

    assert text_storage.load(EntityKind.SUPPLIERS) == [
        Supplier(id=1, name="Acme", phone="555", email="a@a.test")
    ]


def test_wrong_field_count_is_reported(text_storage):
    path = text_storage.path_for(EntityKind.PRODUCTS)
    path.write_text("P1 Mouse 9.99 3 usb Peripherals Acme 1\nP2 Gaming Mouse 9.99 3 usb Peripherals Acme 1\n")

    with pytest.raises(CorruptRecordError, match=r"products\.txt:2: expected 8 fields, found 9"):
        text_storage.load(EntityKind.PRODUCTS)


def test_bad_number_is_reported(text_storage):
    text_storage.path_for(EntityKind.SALES).write_text("x 2024-09-07 Ana 1 Luis\n")

    with pytest.raises(CorruptRecordError, match=r"sales\.txt:1"):
        text_storage.load(EntityKind.SALES)


def test_legacy_date_format_is_accepted(text_storage):
    text_storage.path_for(EntityKind.SALES).write_text("1 09/07/2024 Ana 10 Luis\n")

    assert text_storage.load(EntityKind.SALES)[0].date == date(2024, 9, 7)


def test_empty_field_marker_cannot_be_encoded():
    customer = Customer("Ana", "-", "1", "a@a.test", "Main_St", "1")
    with pytest.raises(ValueError, match="reserved"):
        encode_record(EntityKind.CUSTOMERS, customer)
