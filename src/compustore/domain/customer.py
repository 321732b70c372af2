"""Customer domain service."""

from decimal import Decimal
from typing import Optional

from compustore.database.record_store import RecordStore
from compustore.domain.entities import Customer, CustomerSalesTotal
from compustore.utils.fields import require_token


class CustomerService:
    """Service for managing customers."""

    def __init__(self, store: RecordStore):
        """Initialize customer service.

        Args:
            store: Record store instance
        """
        self.store = store

    def create_customer(
        self, name: str, surname: str, phone: str, email: str, address: str, tax_id: str
    ) -> Customer:
        """Register a customer and queue it as a new arrival.

        Raises:
            ValidationError: If a field is empty or contains whitespace
        """
        customer = Customer(
            name=require_token(name, "Customer name"),
            surname=require_token(surname, "Customer surname"),
            phone=require_token(phone, "Customer phone"),
            email=require_token(email, "Customer email"),
            address=require_token(address, "Customer address"),
            tax_id=require_token(tax_id, "Customer tax id"),
        )
        self.store.add_customer(customer)
        return customer

    def list_customers(self) -> list[Customer]:
        """List all customers."""
        return self.store.list_customers()

    def peek_new_customer(self) -> Optional[Customer]:
        """Return the oldest new-arrival customer, leaving it queued."""
        return self.store.peek_new_customer()

    def customer_sales_totals(self) -> list[CustomerSalesTotal]:
        """Sum recorded sale totals per customer.

        Sales are matched on the customer name, the only customer field that
        survives persistence. The result is for display and is never stored.
        """
        totals: dict[str, Decimal] = {}
        for sale in self.store.list_sales():
            totals[sale.customer.name] = totals.get(sale.customer.name, Decimal("0")) + sale.total

        return [
            CustomerSalesTotal(customer=customer, total=totals.get(customer.name, Decimal("0")))
            for customer in self.store.list_customers()
        ]
