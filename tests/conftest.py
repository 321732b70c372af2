"""Shared pytest fixtures for compustore tests."""

from datetime import date
from decimal import Decimal

import pytest

from compustore.database.factories import create_text_storage
from compustore.database.record_store import RecordStore
from compustore.domain.customer import CustomerService
from compustore.domain.product import ProductService
from compustore.domain.sale import SaleService
from compustore.domain.seller import SellerService
from compustore.domain.supplier import SupplierService


@pytest.fixture
def data_dir(tmp_path):
    """Return an empty directory for data files."""
    path = tmp_path / "data"
    path.mkdir()
    return path


@pytest.fixture
def text_storage(data_dir):
    """Create a text file storage in a temporary directory."""
    storage = create_text_storage(data_dir=str(data_dir))
    storage.connect()
    yield storage
    storage.disconnect()


@pytest.fixture
def store():
    """Create an empty record store."""
    return RecordStore()


@pytest.fixture
def product_service(store):
    return ProductService(store)


@pytest.fixture
def supplier_service(store):
    return SupplierService(store)


@pytest.fixture
def seller_service(store):
    return SellerService(store)


@pytest.fixture
def customer_service(store):
    return CustomerService(store)


@pytest.fixture
def sale_service(store):
    return SaleService(store)


@pytest.fixture
def sample_supplier(supplier_service):
    """Queue a sample supplier."""
    return supplier_service.add_supplier(
        supplier_id=1, name="Acme", phone="555-0100", email="sales@acme.test"
    )


@pytest.fixture
def sample_product(product_service, sample_supplier):
    """Create a sample product supplied by the sample supplier."""
    return product_service.create_product(
        code="P100",
        name="Ryzen-7",
        price=Decimal("250.00"),
        quantity=10,
        description="8-core_processor",
        category="CPU",
        supplier_id=sample_supplier.id,
    )


@pytest.fixture
def sample_customer(customer_service):
    return customer_service.create_customer(
        name="Ana",
        surname="Lopez",
        phone="555-0101",
        email="ana@example.test",
        address="Main_St_1",
        tax_id="1234567-8",
    )


@pytest.fixture
def sample_seller(seller_service):
    return seller_service.create_seller(
        name="Luis",
        surname="Perez",
        phone="555-0102",
        email="luis@store.test",
        address="Oak_Ave_2",
        salary=Decimal("3000"),
        sales_amount=Decimal("0"),
    )


@pytest.fixture
def sample_sale(sale_service, sample_customer, sample_seller):
    return sale_service.create_sale(
        number=1,
        sale_date=date(2024, 9, 7),
        customer_name=sample_customer.name,
        total=Decimal("500.00"),
        seller_name=sample_seller.name,
    )


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
