"""
Account Management Module

Savings and checking accounts with validated deposits, withdrawals and
transfers. Each account owns its balance and an append-only transaction
history, both guarded by a per-account lock.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum
from typing import List, Optional, Tuple
import threading

from .exceptions import (
    InsufficientFundsError, InvalidAccountDetailsError, InvalidAmountError
)
from .logging_config import get_logger, log_action
from .money import Number, ZERO, format_currency, to_decimal, validate_amount
from .transactions import TransactionRecord, TransactionType, generate_id


logger = get_logger("minibank.accounts")


class AccountType(Enum):
    """Account variants"""
    SAVINGS = "SAVINGS"
    CHECKING = "CHECKING"


class Account(ABC):
    """
    Base account with balance arithmetic and transaction history

    Variants supply the interest policy and the details text. Withdrawal
    policy can be widened by overriding ``_can_withdraw``.
    """

    def __init__(
        self,
        account_holder: str,
        initial_balance: Number,
        interest_rate: Number,
        account_type: AccountType
    ):
        self._validate_input(account_holder, initial_balance)

        self._account_id = generate_id()
        self._account_holder = account_holder
        self._account_type = account_type
        self._interest_rate = to_decimal(interest_rate)
        self._balance = to_decimal(initial_balance)
        self._transactions: List[TransactionRecord] = []
        self._lock = threading.RLock()

        if self._balance > ZERO:
            self._record(TransactionType.INITIAL_DEPOSIT, self._balance, "Account opening deposit")

        log_action(
            logger, "info", f"Account opened: {account_type.value}",
            action="open_account", resource=self._account_id,
            extra={"initial_balance": str(self._balance)}
        )

    @staticmethod
    def _validate_input(account_holder: str, initial_balance: Number) -> None:
        if account_holder is None or not str(account_holder).strip():
            raise InvalidAccountDetailsError("Account holder name cannot be null or empty")
        try:
            opening = to_decimal(initial_balance)
        except InvalidAmountError:
            raise InvalidAccountDetailsError(f"Invalid initial balance: {initial_balance!r}")
        if opening < ZERO:
            raise InvalidAccountDetailsError("Initial balance cannot be negative")

    @property
    def account_id(self) -> str:
        return self._account_id

    @property
    def account_holder(self) -> str:
        return self._account_holder

    @property
    def account_type(self) -> AccountType:
        return self._account_type

    @property
    def interest_rate(self) -> Decimal:
        """Annual interest rate as a fraction (0.04 = 4%)"""
        return self._interest_rate

    @property
    def balance(self) -> Decimal:
        return self.get_balance()

    def get_balance(self) -> Decimal:
        """Get current balance"""
        with self._lock:
            return self._balance

    def get_transaction_history(self) -> Tuple[TransactionRecord, ...]:
        """Get a snapshot of the transaction history, oldest first"""
        with self._lock:
            return tuple(self._transactions)

    def deposit(self, amount: Number) -> None:
        """
        Deposit money into the account

        Args:
            amount: Amount to deposit

        Raises:
            InvalidAmountError: If amount <= 0 or above the transaction limit
        """
        value = self._validate_amount(amount, "deposit")

        with self._lock:
            self._balance += value
            self._record(TransactionType.DEPOSIT, value, "Deposit to account")

        self._log_movement("deposit", value)

    def withdraw(self, amount: Number) -> None:
        """
        Withdraw money from the account

        Args:
            amount: Amount to withdraw

        Raises:
            InvalidAmountError: If amount <= 0 or above the transaction limit
            InsufficientFundsError: If the withdrawal policy rejects the amount
        """
        value = self._validate_amount(amount, "withdraw")

        with self._lock:
            if not self._can_withdraw(value):
                self._reject("withdraw", value)
                raise InsufficientFundsError(
                    f"Insufficient funds. Current balance: {format_currency(self._balance)}, "
                    f"Requested amount: {format_currency(value)}",
                    balance=self._balance, requested=value
                )
            self._balance -= value
            self._record(TransactionType.WITHDRAW, value, "Withdrawal from account")

        self._log_movement("withdraw", value)

    def transfer(self, destination_account: 'Account', amount: Number) -> None:
        """
        Transfer money to another account

        Both account locks are held for the whole operation, acquired in
        account ID order. Only the source balance is checked; overdraft is
        not available to transfers.

        Args:
            destination_account: Account to credit
            amount: Amount to move

        Raises:
            InvalidAmountError: If amount <= 0 or above the transaction limit
            InsufficientFundsError: If source balance is below amount
        """
        if not isinstance(destination_account, Account):
            raise TypeError("Destination must be an Account")

        value = self._validate_amount(amount, "transfer")

        first, second = sorted((self, destination_account), key=lambda a: a.account_id)
        with first._lock, second._lock:
            if self._balance < value:
                self._reject("transfer", value)
                raise InsufficientFundsError(
                    f"Insufficient funds for transfer. Current balance: {format_currency(self._balance)}, "
                    f"Transfer amount: {format_currency(value)}",
                    balance=self._balance, requested=value
                )

            self._balance -= value
            self._record(
                TransactionType.TRANSFER_OUT, value,
                f"Transfer to {destination_account.account_holder}"
            )

            destination_account._balance += value
            destination_account._record(
                TransactionType.TRANSFER_IN, value,
                f"Transfer from {self._account_holder}"
            )

        log_action(
            logger, "info", "Transfer completed",
            action="transfer", resource=self._account_id,
            extra={"destination": destination_account.account_id, "amount": str(value)}
        )

    @abstractmethod
    def apply_interest(self) -> None:
        """Apply one month of interest"""

    @abstractmethod
    def get_account_details(self) -> str:
        """Formatted summary of the account"""

    def _can_withdraw(self, amount: Decimal) -> bool:
        return self._balance >= amount

    def _monthly_interest(self) -> Decimal:
        return self._balance * self._interest_rate / 12

    def _validate_amount(self, amount: Number, action: str) -> Decimal:
        try:
            return validate_amount(amount)
        except InvalidAmountError as e:
            log_action(
                logger, "warning", f"Rejected {action}: {e}",
                action=action, resource=self._account_id
            )
            raise

    def _record(self, transaction_type: TransactionType, amount: Decimal,
                description: str) -> TransactionRecord:
        record = TransactionRecord(transaction_type, amount, description)
        self._transactions.append(record)
        return record

    def _reject(self, action: str, amount: Decimal) -> None:
        log_action(
            logger, "warning", f"Rejected {action}: insufficient funds",
            action=action, resource=self._account_id,
            extra={"balance": str(self._balance), "requested": str(amount)}
        )

    def _log_movement(self, action: str, amount: Decimal) -> None:
        log_action(
            logger, "info", f"{action.capitalize()} completed",
            action=action, resource=self._account_id,
            extra={"amount": str(amount)}
        )

    def __str__(self) -> str:
        return self.get_account_details()


class SavingsAccount(Account):
    """
    Savings account with a higher interest rate

    Minimum balance and the monthly withdrawal cap are advisory: they are
    reported but never block a withdrawal. The withdrawal counter is only
    changed through increment_withdrawal_count/reset_withdrawal_count.
    """

    DEFAULT_INTEREST_RATE = Decimal('0.04')
    MINIMUM_BALANCE = Decimal('500')
    MAX_MONTHLY_WITHDRAWALS = 6

    def __init__(self, account_holder: str, initial_balance: Number,
                 interest_rate: Optional[Number] = None):
        if interest_rate is None:
            interest_rate = self.DEFAULT_INTEREST_RATE
        super().__init__(account_holder, initial_balance, interest_rate, AccountType.SAVINGS)
        self._withdrawal_count = 0

    def apply_interest(self) -> None:
        """Add one twelfth of the annual rate to the balance"""
        with self._lock:
            interest = self._monthly_interest()
            self._balance += interest

        log_action(
            logger, "info", "Interest applied",
            action="apply_interest", resource=self._account_id,
            extra={"interest": str(interest)}
        )

    def is_maintaining_minimum_balance(self) -> bool:
        return self.get_balance() >= self.MINIMUM_BALANCE

    def get_minimum_balance(self) -> Decimal:
        return self.MINIMUM_BALANCE

    def get_max_monthly_withdrawals(self) -> int:
        return self.MAX_MONTHLY_WITHDRAWALS

    def get_withdrawal_count(self) -> int:
        with self._lock:
            return self._withdrawal_count

    def increment_withdrawal_count(self) -> None:
        with self._lock:
            self._withdrawal_count += 1

    def reset_withdrawal_count(self) -> None:
        """Reset the counter, usually at the start of a month"""
        with self._lock:
            self._withdrawal_count = 0

    def get_account_details(self) -> str:
        with self._lock:
            return (
                "Savings Account Details:\n"
                f"  Account ID: {self._account_id}\n"
                f"  Holder: {self._account_holder}\n"
                f"  Balance: {format_currency(self._balance)}\n"
                f"  Interest Rate: {self._interest_rate * 100:.2f}%\n"
                f"  Minimum Balance: {format_currency(self.MINIMUM_BALANCE)}\n"
                f"  Monthly Withdrawals: {self._withdrawal_count}/{self.MAX_MONTHLY_WITHDRAWALS}"
            )


class CheckingAccount(Account):
    """
    Checking account with overdraft protection

    Withdrawals may take the balance down to -OVERDRAFT_LIMIT. The overdraft
    in use is a snapshot refreshed only by update_overdraft().
    """

    DEFAULT_INTEREST_RATE = Decimal('0.01')
    OVERDRAFT_LIMIT = Decimal('500')
    OVERDRAFT_FEE_RATE = Decimal('0.05')  # Monthly, on overdraft used

    def __init__(self, account_holder: str, initial_balance: Number,
                 interest_rate: Optional[Number] = None):
        if interest_rate is None:
            interest_rate = self.DEFAULT_INTEREST_RATE
        super().__init__(account_holder, initial_balance, interest_rate, AccountType.CHECKING)
        self._overdraft_used = ZERO

    def apply_interest(self) -> None:
        """
        Apply one month of interest, then charge the overdraft fee

        The fee is OVERDRAFT_FEE_RATE of the overdraft recorded by the last
        update_overdraft() call.
        """
        with self._lock:
            interest = self._monthly_interest()
            self._balance += interest

            fee = ZERO
            if self._overdraft_used > ZERO:
                fee = self._overdraft_used * self.OVERDRAFT_FEE_RATE
                self._balance -= fee

        log_action(
            logger, "info", "Interest applied",
            action="apply_interest", resource=self._account_id,
            extra={"interest": str(interest), "overdraft_fee": str(fee)}
        )

    def can_withdraw_with_overdraft(self, amount: Number) -> bool:
        """Check if amount fits within balance plus remaining overdraft"""
        value = to_decimal(amount)
        with self._lock:
            return self._balance + self.OVERDRAFT_LIMIT - self._overdraft_used >= value

    def _can_withdraw(self, amount: Decimal) -> bool:
        return self.can_withdraw_with_overdraft(amount)

    def get_available_balance(self) -> Decimal:
        """Balance plus the overdraft still available"""
        with self._lock:
            return self._balance + (self.OVERDRAFT_LIMIT - self._overdraft_used)

    def get_overdraft_limit(self) -> Decimal:
        return self.OVERDRAFT_LIMIT

    def get_overdraft_used(self) -> Decimal:
        with self._lock:
            return self._overdraft_used

    def get_remaining_overdraft(self) -> Decimal:
        with self._lock:
            return self.OVERDRAFT_LIMIT - self._overdraft_used

    def update_overdraft(self) -> None:
        """Recompute overdraft used from the current balance"""
        with self._lock:
            self._overdraft_used = -self._balance if self._balance < ZERO else ZERO

    def get_account_details(self) -> str:
        with self._lock:
            return (
                "Checking Account Details:\n"
                f"  Account ID: {self._account_id}\n"
                f"  Holder: {self._account_holder}\n"
                f"  Balance: {format_currency(self._balance)}\n"
                f"  Interest Rate: {self._interest_rate * 100:.2f}%\n"
                f"  Overdraft Limit: {format_currency(self.OVERDRAFT_LIMIT)}\n"
                f"  Overdraft Used: {format_currency(self._overdraft_used)}\n"
                f"  Available Balance: {format_currency(self.get_available_balance())}"
            )
