"""Mapper functions to convert between domain entities and SQLAlchemy models.

Embedded snapshots are reduced to their name or code on the way in and come
back as name-only (or code-only) snapshots on the way out, as with the text
files.
"""

from compustore.domain import entities as domain
from compustore.database.models import (
    Customer as ORMCustomer,
    Product as ORMProduct,
    Sale as ORMSale,
    SaleItem as ORMSaleItem,
    Seller as ORMSeller,
    Supplier as ORMSupplier,
)
from compustore.database.base import placeholder_product, placeholder_sale


def product_to_domain(orm_product: ORMProduct) -> domain.Product:
    """Convert SQLAlchemy Product model to domain Product entity."""
    return domain.Product(
        code=orm_product.code,
        name=orm_product.name,
        price=orm_product.price,
        quantity=orm_product.quantity,
        description=orm_product.description,
        category=orm_product.category,
        supplier=domain.Supplier(name=orm_product.supplier_name),
        active=orm_product.active,
    )


def product_to_orm(product: domain.Product) -> ORMProduct:
    """Convert domain Product entity to SQLAlchemy Product model."""
    return ORMProduct(
        code=product.code,
        name=product.name,
        price=product.price,
        quantity=product.quantity,
        description=product.description,
        category=product.category,
        supplier_name=product.supplier.name,
        active=product.active,
    )


def customer_to_domain(orm_customer: ORMCustomer) -> domain.Customer:
    """Convert SQLAlchemy Customer model to domain Customer entity."""
    return domain.Customer(
        name=orm_customer.name,
        surname=orm_customer.surname,
        phone=orm_customer.phone,
        email=orm_customer.email,
        address=orm_customer.address,
        tax_id=orm_customer.tax_id,
    )


def customer_to_orm(customer: domain.Customer) -> ORMCustomer:
    """Convert domain Customer entity to SQLAlchemy Customer model."""
    return ORMCustomer(
        name=customer.name,
        surname=customer.surname,
        phone=customer.phone,
        email=customer.email,
        address=customer.address,
        tax_id=customer.tax_id,
    )


def seller_to_domain(orm_seller: ORMSeller) -> domain.Seller:
    """Convert SQLAlchemy Seller model to domain Seller entity."""
    return domain.Seller(
        name=orm_seller.name,
        surname=orm_seller.surname,
        phone=orm_seller.phone,
        email=orm_seller.email,
        address=orm_seller.address,
        salary=orm_seller.salary,
        sales_amount=orm_seller.sales_amount,
    )


def seller_to_orm(seller: domain.Seller) -> ORMSeller:
    """Convert domain Seller entity to SQLAlchemy Seller model."""
    return ORMSeller(
        name=seller.name,
        surname=seller.surname,
        phone=seller.phone,
        email=seller.email,
        address=seller.address,
        salary=seller.salary,
        sales_amount=seller.sales_amount,
    )


def supplier_to_domain(orm_supplier: ORMSupplier) -> domain.Supplier:
    """Convert SQLAlchemy Supplier model to domain Supplier entity."""
    return domain.Supplier(
        id=orm_supplier.supplier_id,
        name=orm_supplier.name,
        phone=orm_supplier.phone,
        email=orm_supplier.email,
        type=orm_supplier.type,
    )


def supplier_to_orm(supplier: domain.Supplier) -> ORMSupplier:
    """Convert domain Supplier entity to SQLAlchemy Supplier model."""
    return ORMSupplier(
        supplier_id=supplier.id,
        name=supplier.name,
        phone=supplier.phone,
        email=supplier.email,
        type=supplier.type,
    )


def sale_to_domain(orm_sale: ORMSale) -> domain.Sale:
    """Convert SQLAlchemy Sale model to domain Sale entity."""
    return domain.Sale(
        number=orm_sale.number,
        date=orm_sale.sale_date,
        customer=domain.Customer(name=orm_sale.customer_name),
        total=orm_sale.total,
        seller=domain.Seller(name=orm_sale.seller_name),
    )


def sale_to_orm(sale: domain.Sale) -> ORMSale:
    """Convert domain Sale entity to SQLAlchemy Sale model."""
    return ORMSale(
        number=sale.number,
        sale_date=sale.date,
        customer_name=sale.customer.name,
        total=sale.total,
        seller_name=sale.seller.name,
    )


def sale_item_to_domain(orm_item: ORMSaleItem) -> domain.SaleLineItem:
    """Convert SQLAlchemy SaleItem model to domain SaleLineItem entity."""
    return domain.SaleLineItem(
        number=orm_item.detail_number,
        sale=placeholder_sale(orm_item.sale_number),
        product=placeholder_product(orm_item.product_code),
        quantity=orm_item.quantity,
        subtotal=orm_item.subtotal,
    )


def sale_item_to_orm(item: domain.SaleLineItem) -> ORMSaleItem:
    """Convert domain SaleLineItem entity to SQLAlchemy SaleItem model."""
    return ORMSaleItem(
        sale_number=item.sale.number,
        detail_number=item.number,
        product_code=item.product.code,
        quantity=item.quantity,
        subtotal=item.subtotal,
    )
