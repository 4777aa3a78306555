"""
Transaction Ledger Module

Immutable ledger entries recorded by accounts for every balance-affecting
event: opening deposits, deposits, withdrawals and both halves of a transfer.
Entries are never modified or deleted once created.
"""

from decimal import Decimal
from datetime import datetime
from dataclasses import dataclass, field
from typing import Any, Dict
from enum import Enum
import threading
import uuid

from .money import format_currency, to_decimal, ZERO


class TransactionType(Enum):
    """Kinds of ledger entries"""
    INITIAL_DEPOSIT = "INITIAL_DEPOSIT"  # Opening balance
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRANSFER_OUT = "TRANSFER_OUT"        # Source side of a transfer
    TRANSFER_IN = "TRANSFER_IN"          # Destination side of a transfer


def generate_id() -> str:
    """Random 128-bit identifier for accounts, customers and transactions"""
    return str(uuid.uuid4())


_clock_lock = threading.Lock()
_last_timestamp = datetime.min


def _next_timestamp() -> datetime:
    """Wall clock time that never goes backwards within the process"""
    global _last_timestamp
    with _clock_lock:
        now = datetime.now()
        if now < _last_timestamp:
            now = _last_timestamp
        _last_timestamp = now
        return now


@dataclass(frozen=True)
class TransactionRecord:
    """
    One ledger entry

    The amount is always the magnitude moved; the direction comes from the
    transaction type.
    """
    transaction_type: TransactionType
    amount: Decimal
    description: str
    transaction_id: str = field(default_factory=generate_id)
    timestamp: datetime = field(default_factory=_next_timestamp)

    def __post_init__(self):
        if not isinstance(self.transaction_type, TransactionType):
            object.__setattr__(self, 'transaction_type', TransactionType(self.transaction_type))

        amount = to_decimal(self.amount)
        if amount <= ZERO:
            raise ValueError("Transaction amount must be positive")
        object.__setattr__(self, 'amount', amount)

    def get_details(self) -> str:
        """Format for display"""
        return (
            f"[{self.transaction_id}] {self.timestamp:%Y-%m-%d %H:%M:%S} - "
            f"Type: {self.transaction_type.value}, "
            f"Amount: {format_currency(self.amount)}, "
            f"Description: {self.description}"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary"""
        return {
            'transaction_id': self.transaction_id,
            'transaction_type': self.transaction_type.value,
            'amount': str(self.amount),
            'timestamp': self.timestamp.isoformat(),
            'description': self.description,
        }

    def __str__(self) -> str:
        return self.get_details()
