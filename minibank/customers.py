"""
Customer Management Module

Customer profiles holding a bounded set of accounts indexed by account ID,
with balance aggregation and filtering by account type.
"""

from decimal import Decimal
from datetime import date
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Union
import threading

from .accounts import Account, AccountType
from .config import get_config
from .exceptions import (
    AccountLimitExceededError, AccountNotFoundError, InvalidCustomerDetailsError
)
from .logging_config import get_logger, log_action
from .money import ZERO, format_currency
from .transactions import generate_id


logger = get_logger("minibank.customers")


@dataclass(eq=False)
class Customer:
    """
    Bank customer with up to ``max_accounts`` accounts

    Accounts are kept in insertion order. Equality and hashing use the
    customer ID only.
    """
    name: str
    email: str
    phone_number: str
    customer_id: str = field(default_factory=generate_id)
    registration_date: date = field(default_factory=date.today)
    max_accounts: int = field(
        default_factory=lambda: get_config().max_accounts_per_customer, init=False
    )
    _accounts: Dict[str, Account] = field(default_factory=dict, init=False, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, init=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise InvalidCustomerDetailsError("Customer name cannot be null or empty")

        if not isinstance(self.email, str) or "@" not in self.email:
            raise InvalidCustomerDetailsError("Invalid email address")

        if not isinstance(self.phone_number, str) or not self.phone_number.strip():
            raise InvalidCustomerDetailsError("Phone number cannot be null or empty")

    def add_account(self, account: Account) -> str:
        """
        Register an account with this customer

        Args:
            account: Account to add

        Returns:
            The account ID

        Raises:
            AccountLimitExceededError: If the customer already holds max_accounts accounts
        """
        with self._lock:
            if len(self._accounts) >= self.max_accounts:
                log_action(
                    logger, "warning", "Rejected add_account: limit reached",
                    action="add_account", resource=self.customer_id,
                    extra={"limit": self.max_accounts}
                )
                raise AccountLimitExceededError(self.max_accounts)

            self._accounts[account.account_id] = account

        log_action(
            logger, "info", "Account added to customer",
            action="add_account", resource=self.customer_id,
            extra={"account_id": account.account_id, "account_type": account.account_type.value}
        )
        return account.account_id

    def get_account(self, account_id: str) -> Account:
        """Get account by ID, raising AccountNotFoundError if absent"""
        with self._lock:
            account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFoundError(account_id)
        return account

    def remove_account(self, account_id: str) -> Account:
        """Remove and return an account"""
        with self._lock:
            account = self._accounts.pop(account_id, None)
        if account is None:
            raise AccountNotFoundError(account_id)

        log_action(
            logger, "info", "Account removed from customer",
            action="remove_account", resource=self.customer_id,
            extra={"account_id": account_id}
        )
        return account

    def get_all_accounts(self) -> Mapping[str, Account]:
        """Read-only snapshot of account ID -> account"""
        with self._lock:
            return MappingProxyType(dict(self._accounts))

    def get_account_count(self) -> int:
        with self._lock:
            return len(self._accounts)

    def get_accounts_by_type(self, account_type: Union[AccountType, str]) -> List[str]:
        """
        Get IDs of accounts of the given type, in the order they were added

        Matching is case-insensitive; an unrecognised type matches nothing.
        """
        wanted = account_type.value if isinstance(account_type, AccountType) else str(account_type)
        wanted = wanted.strip().upper()

        with self._lock:
            return [
                account_id for account_id, account in self._accounts.items()
                if account.account_type.value.upper() == wanted
            ]

    def get_total_balance(self) -> Decimal:
        """Sum of balances across all accounts"""
        with self._lock:
            accounts = list(self._accounts.values())
        return sum((account.get_balance() for account in accounts), ZERO)

    def get_summary(self) -> str:
        return (
            "Customer Summary:\n"
            f"  ID: {self.customer_id}\n"
            f"  Name: {self.name}\n"
            f"  Email: {self.email}\n"
            f"  Phone: {self.phone_number}\n"
            f"  Registration Date: {self.registration_date.isoformat()}\n"
            f"  Number of Accounts: {self.get_account_count()}\n"
            f"  Total Balance: {format_currency(self.get_total_balance())}"
        )

    def __str__(self) -> str:
        return self.get_summary()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self.customer_id == other.customer_id

    def __hash__(self) -> int:
        return hash(self.customer_id)
