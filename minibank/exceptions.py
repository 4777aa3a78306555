"""
Banking Exceptions Module

Domain errors raised by accounts and customers. All derive from ValueError
so callers that treat rule violations as ValueError keep working.
"""

from decimal import Decimal
from typing import Optional


class BankingError(ValueError):
    """Base class for banking domain errors"""


class InvalidAmountError(BankingError):
    """Amount is not positive or exceeds the single transaction limit"""


class InsufficientFundsError(BankingError):
    """Withdrawal or transfer would take the balance below its floor"""

    def __init__(self, message: str, balance: Optional[Decimal] = None,
                 requested: Optional[Decimal] = None):
        super().__init__(message)
        self.balance = balance
        self.requested = requested


class AccountNotFoundError(BankingError):
    """No account registered under the given ID"""

    def __init__(self, account_id: str):
        super().__init__(f"Account with ID {account_id} not found")
        self.account_id = account_id


class AccountLimitExceededError(BankingError):
    """Customer already holds the maximum number of accounts"""

    def __init__(self, limit: int):
        super().__init__(f"Customer can have a maximum of {limit} accounts")
        self.limit = limit


class InvalidCustomerDetailsError(BankingError):
    """Customer name, email or phone number failed validation"""


class InvalidAccountDetailsError(BankingError):
    """Account holder or opening balance failed validation"""


class CustomerNotFoundError(BankingError):
    """No customer registered under the given ID"""

    def __init__(self, customer_id: str):
        super().__init__(f"Customer not found: {customer_id}")
        self.customer_id = customer_id
