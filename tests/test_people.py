"""Tests for customer, seller and supplier services."""

from datetime import date
from decimal import Decimal

import pytest

from compustore.domain.errors import ConflictError, ValidationError


class TestCustomerService:
    def test_create_customer_is_listed_and_new(self, customer_service, sample_customer):
        assert customer_service.list_customers() == [sample_customer]
        assert customer_service.peek_new_customer() == sample_customer

    def test_peek_does_not_consume(self, customer_service, sample_customer):
        customer_service.create_customer("Bea", "Diaz", "2", "b@b.test", "Pine_4", "77")

        assert customer_service.peek_new_customer() == sample_customer
        assert customer_service.peek_new_customer() == sample_customer

    def test_no_new_customers(self, customer_service):
        assert customer_service.peek_new_customer() is None

    def test_rejects_field_with_spaces(self, customer_service):
        with pytest.raises(ValidationError, match="cannot contain spaces"):
            customer_service.create_customer("Ana", "Lopez", "1", "a@a.test", "Main St 1", "1")
        assert customer_service.list_customers() == []

    def test_sales_totals_per_customer(
        self, customer_service, sale_service, sample_customer, sample_seller, sample_sale
    ):
        other = customer_service.create_customer("Bea", "Diaz", "2", "b@b.test", "Pine_4", "77")
        sale_service.create_sale(2, date(2024, 9, 8), "Ana", Decimal("25.50"), "Luis")

        totals = {row.customer.name: row.total for row in customer_service.customer_sales_totals()}

        assert totals == {"Ana": Decimal("525.50"), other.name: Decimal("0")}


class TestSellerService:
    def test_create_seller(self, seller_service, sample_seller):
        assert seller_service.list_sellers() == [sample_seller]
        assert seller_service.peek_new_seller() == sample_seller
        assert sample_seller.sales_amount == Decimal("0")

    def test_sales_amount_is_not_derived_from_sales(self, seller_service, sale_service, sample_sale):
        assert seller_service.list_sellers()[0].sales_amount == Decimal("0")

    def test_rejects_negative_salary(self, seller_service):
        with pytest.raises(ValidationError):
            seller_service.create_seller("Luis", "Perez", "1", "l@l.test", "Oak_2", Decimal("-1"), Decimal("0"))


class TestSupplierService:
    def test_add_suppliers_in_queue_order(self, supplier_service):
        acme = supplier_service.add_supplier(1, "Acme", "1", "a@a.test", type="wholesale")
        globex = supplier_service.add_supplier(2, "Globex", "2", "g@g.test")

        assert supplier_service.list_suppliers() == [acme, globex]
        assert acme.type == "wholesale"

    def test_duplicate_supplier_id_rejected(self, supplier_service, sample_supplier):
        with pytest.raises(ConflictError, match="Supplier with id 1 already exists"):
            supplier_service.add_supplier(1, "Other", "9", "o@o.test")
        assert supplier_service.list_suppliers() == [sample_supplier]


def test_customer_fields_cannot_be_the_empty_marker(customer_service):
    with pytest.raises(ValidationError, match="cannot be '-'"):
        customer_service.create_customer("Ana", "-", "-", "a@a.test", "-", "-")
    assert customer_service.list_customers() == []
