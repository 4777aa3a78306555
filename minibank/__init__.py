"""
Minibank

An in-memory banking model: savings and checking accounts, customers
holding several accounts, and an append-only transaction ledger per
account. All monetary values use Decimal.
"""

from .accounts import Account, AccountType, CheckingAccount, SavingsAccount
from .bank import Bank
from .customers import Customer
from .exceptions import (
    AccountLimitExceededError,
    AccountNotFoundError,
    BankingError,
    CustomerNotFoundError,
    InsufficientFundsError,
    InvalidAccountDetailsError,
    InvalidAmountError,
    InvalidCustomerDetailsError,
)
from .transactions import TransactionRecord, TransactionType

__version__ = "1.0.0"

__all__ = [
    "Account",
    "AccountType",
    "SavingsAccount",
    "CheckingAccount",
    "Customer",
    "Bank",
    "TransactionRecord",
    "TransactionType",
    "BankingError",
    "InvalidAmountError",
    "InsufficientFundsError",
    "AccountNotFoundError",
    "AccountLimitExceededError",
    "InvalidCustomerDetailsError",
    "InvalidAccountDetailsError",
    "CustomerNotFoundError",
]
