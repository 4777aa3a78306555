"""
Bank Registry Module

Registers customers and looks them up by ID.
"""

from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Mapping
import threading

from .customers import Customer
from .exceptions import CustomerNotFoundError
from .logging_config import get_logger, log_action
from .money import ZERO


class Bank:
    """In-memory registry of customers"""

    def __init__(self):
        self._customers: Dict[str, Customer] = {}
        self._lock = threading.RLock()
        self.logger = get_logger("minibank.bank")

    def register_customer(self, name: str, email: str, phone_number: str) -> Customer:
        """
        Create and register a new customer

        Raises:
            InvalidCustomerDetailsError: If name, email or phone number is invalid
        """
        customer = Customer(name=name, email=email, phone_number=phone_number)

        with self._lock:
            self._customers[customer.customer_id] = customer

        log_action(
            self.logger, "info", "Customer registered",
            action="register_customer", resource=customer.customer_id
        )
        return customer

    def get_customer(self, customer_id: str) -> Customer:
        with self._lock:
            customer = self._customers.get(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)
        return customer

    def get_all_customers(self) -> Mapping[str, Customer]:
        """Read-only snapshot of customer ID -> customer"""
        with self._lock:
            return MappingProxyType(dict(self._customers))

    def get_total_deposits(self) -> Decimal:
        """Sum of every customer's total balance"""
        with self._lock:
            customers = list(self._customers.values())
        return sum((customer.get_total_balance() for customer in customers), ZERO)
