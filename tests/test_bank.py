"""
Test suite for bank module

Tests customer registration and lookup.
"""

import pytest
from decimal import Decimal

from minibank.accounts import SavingsAccount, CheckingAccount
from minibank.bank import Bank
from minibank.exceptions import CustomerNotFoundError, InvalidCustomerDetailsError


class TestBank:
    """Test Bank registry"""

    def setup_method(self):
        """Set up test fixtures"""
        self.bank = Bank()

    def test_register_and_get_customer(self):
        customer = self.bank.register_customer("Jane Doe", "jane@example.com", "555-0100")

        assert self.bank.get_customer(customer.customer_id) is customer
        assert dict(self.bank.get_all_customers()) == {customer.customer_id: customer}

    def test_invalid_registration(self):
        with pytest.raises(InvalidCustomerDetailsError):
            self.bank.register_customer("Jane Doe", "no-at-sign", "555-0100")

        assert len(self.bank.get_all_customers()) == 0

    def test_unknown_customer(self):
        with pytest.raises(CustomerNotFoundError, match="NOPE"):
            self.bank.get_customer("NOPE")

    def test_customers_view_read_only(self):
        self.bank.register_customer("Jane Doe", "jane@example.com", "555-0100")
        customers = self.bank.get_all_customers()

        with pytest.raises(TypeError):
            customers["x"] = None

    def test_total_deposits(self):
        assert self.bank.get_total_deposits() == Decimal('0')

        jane = self.bank.register_customer("Jane Doe", "jane@example.com", "555-0100")
        john = self.bank.register_customer("John Roe", "john@example.com", "555-0101")
        jane_savings = SavingsAccount("Jane Doe", 1000)
        john_checking = CheckingAccount("John Roe", 500)
        jane.add_account(jane_savings)
        john.add_account(john_checking)

        jane_savings.transfer(john_checking, 250)

        assert jane.get_total_balance() == Decimal('750')
        assert john.get_total_balance() == Decimal('750')
        assert self.bank.get_total_deposits() == Decimal('1500')
