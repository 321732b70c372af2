"""Tests for ProductService."""

from decimal import Decimal

import pytest

from compustore.domain.entities import Supplier
from compustore.domain.errors import ConflictError, NotFoundError, ValidationError


def create(product_service, code="P1", category="CPU", supplier_id=1, **overrides):
    fields = dict(
        code=code,
        name="Ryzen-5",
        price=Decimal("150.00"),
        quantity=4,
        description="6-core",
        category=category,
        supplier_id=supplier_id,
    )
    fields.update(overrides)
    return product_service.create_product(**fields)


def test_create_product_embeds_supplier_snapshot(product_service, supplier_service, sample_supplier):
    product = create(product_service, supplier_id=1)

    assert product.supplier == sample_supplier
    # The supplier stays queued after being embedded
    assert supplier_service.list_suppliers() == [sample_supplier]


def test_create_product_scans_queue_without_reordering(product_service, supplier_service):
    first = supplier_service.add_supplier(1, "Acme", "1", "a@a.test")
    second = supplier_service.add_supplier(2, "Globex", "2", "g@g.test")
    third = supplier_service.add_supplier(3, "Initech", "3", "i@i.test")

    product = create(product_service, supplier_id=2)

    assert product.supplier == second
    assert supplier_service.list_suppliers() == [first, second, third]


def test_create_product_with_unknown_supplier(product_service):
    product = create(product_service, supplier_id=99)

    assert product.supplier == Supplier()
    assert product_service.get_product("P1") == product


def test_create_duplicate_code_rejected(product_service):
    create(product_service, code="P1")

    assert product_service.product_exists("P1")
    with pytest.raises(ConflictError, match="already exists"):
        create(product_service, code="P1", category="GPU")

    assert len(product_service.list_products()) == 1
    assert product_service.list_categories() == ["CPU"]


@pytest.mark.parametrize("field", ["code", "name", "description", "category"])
def test_create_rejects_whitespace_in_fields(product_service, field):
    with pytest.raises(ValidationError):
        create(product_service, **{field: "two words"})
    assert product_service.list_products() == []


def test_create_rejects_negative_quantity(product_service):
    with pytest.raises(ValidationError):
        create(product_service, quantity=-1)


def test_update_product_replaces_fields_and_keeps_supplier(product_service, sample_product):
    updated = product_service.update_product(
        code="P100",
        name="Ryzen-9",
        price=Decimal("400"),
        quantity=2,
        description="12-core",
        category="HighEnd",
        active=False,
    )

    assert updated.supplier == sample_product.supplier
    assert product_service.get_product("P100") == updated
    assert product_service.list_products_in_category("CPU") == []
    assert product_service.list_products_in_category("HighEnd") == [updated]


def test_update_missing_product(product_service):
    with pytest.raises(NotFoundError, match="does not exist"):
        product_service.update_product("X", "n", Decimal("1"), 1, "d", "c", True)


def test_delete_product(product_service, sample_product):
    deleted = product_service.delete_product("P100")

    assert deleted == sample_product
    assert product_service.get_product("P100") is None
    assert product_service.list_categories() == []


def test_delete_missing_product_reports_does_not_exist(product_service, sample_product):
    with pytest.raises(NotFoundError, match="Product P999 does not exist"):
        product_service.delete_product("P999")

    assert product_service.list_products() == [sample_product]
    assert product_service.list_products_in_category("CPU") == [sample_product]
