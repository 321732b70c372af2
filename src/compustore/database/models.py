"""SQLAlchemy models for the compustore database backend.

Tables mirror the text file layout: embedded records are stored by name or
code only. ``id`` is a surrogate key that preserves insertion order.
"""

from decimal import Decimal

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    Integer,
    String,
    TypeDecorator,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class ExactDecimal(TypeDecorator):
    """Decimal stored as its exact text, so any number of places round-trips."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return None if value is None else str(value)

    def process_result_value(self, value, dialect):
        return None if value is None else Decimal(value)


class Product(Base):
    """Product model."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    code = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    price = Column(ExactDecimal, nullable=False)
    quantity = Column(Integer, nullable=False)
    description = Column(String, nullable=False)
    category = Column(String, nullable=False)
    supplier_name = Column(String, nullable=False, default="")
    active = Column(Boolean, nullable=False, default=True)


class Customer(Base):
    """Customer model."""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    surname = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=False)
    address = Column(String, nullable=False)
    tax_id = Column(String, nullable=False)


class Seller(Base):
    """Seller model."""

    __tablename__ = "sellers"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    surname = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=False)
    address = Column(String, nullable=False)
    salary = Column(ExactDecimal, nullable=False)
    sales_amount = Column(ExactDecimal, nullable=False)


class Supplier(Base):
    """Supplier model."""

    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True)
    supplier_id = Column(Integer, nullable=False)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=False)
    type = Column(String, nullable=False, default="")


class Sale(Base):
    """Sale header model."""

    __tablename__ = "sales"

    id = Column(Integer, primary_key=True)
    number = Column(Integer, nullable=False)
    sale_date = Column(Date, nullable=False)
    customer_name = Column(String, nullable=False)
    total = Column(ExactDecimal, nullable=False)
    seller_name = Column(String, nullable=False)


class SaleItem(Base):
    """Sale line item model."""

    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True)
    sale_number = Column(Integer, nullable=False)
    detail_number = Column(Integer, nullable=False)
    product_code = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)
    subtotal = Column(ExactDecimal, nullable=False)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
