"""
Money Handling Module

Decimal coercion, rounding and formatting for account balances and
transaction amounts. NEVER uses float for monetary values.
"""

from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, getcontext
from typing import Optional, Union

from .config import get_config
from .exceptions import InvalidAmountError

# Set global decimal context for financial precision
getcontext().prec = 28

CENTS = Decimal('0.01')
ZERO = Decimal('0')

Number = Union[Decimal, int, float, str]


def to_decimal(value: Number) -> Decimal:
    """
    Convert a numeric value to Decimal without float artifacts

    Args:
        value: Decimal, int, float or numeric string

    Returns:
        Decimal value

    Raises:
        InvalidAmountError: If value is not a finite number
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Cannot convert {value!r} to an amount")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise InvalidAmountError(f"Cannot convert {value!r} to an amount")

    if not result.is_finite():
        raise InvalidAmountError(f"Amount must be a finite number, got {value!r}")
    return result


def round_currency(value: Decimal) -> Decimal:
    """Round to two decimal places, half up"""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal) -> str:
    """Format for display, e.g. $1,234.56 or -$20.00"""
    rounded = round_currency(value)
    if rounded < ZERO:
        return f"-${-rounded:,.2f}"
    return f"${rounded:,.2f}"


def validate_amount(amount: Number, maximum: Optional[Decimal] = None) -> Decimal:
    """
    Validate a transaction amount and return it as Decimal

    Args:
        amount: Amount to move
        maximum: Upper bound (inclusive); configured limit if not provided

    Returns:
        The amount as Decimal

    Raises:
        InvalidAmountError: If amount <= 0 or amount > maximum
    """
    value = to_decimal(amount)
    if maximum is None:
        maximum = to_decimal(get_config().max_transaction_amount)

    if value <= ZERO:
        raise InvalidAmountError("Transaction amount must be greater than 0")
    if value > maximum:
        raise InvalidAmountError(
            f"Transaction amount cannot exceed {format_currency(maximum)}"
        )
    return value
