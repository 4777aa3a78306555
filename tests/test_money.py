"""
Test suite for money module

Tests Decimal coercion, rounding, display formatting and the shared
transaction amount rule.
"""

import pytest
from decimal import Decimal

from minibank.exceptions import InvalidAmountError
from minibank.money import (
    to_decimal, round_currency, format_currency, validate_amount
)


class TestToDecimal:
    """Test conversion of numeric input to Decimal"""

    def test_converts_supported_types(self):
        """Test int, float, str and Decimal inputs"""
        assert to_decimal(100) == Decimal('100')
        assert to_decimal(0.1) == Decimal('0.1')  # No float artifacts
        assert to_decimal("250.75") == Decimal('250.75')
        assert to_decimal(Decimal('3.14')) == Decimal('3.14')

    def test_rejects_non_numeric(self):
        """Test that garbage input is rejected"""
        with pytest.raises(InvalidAmountError):
            to_decimal("abc")

        with pytest.raises(InvalidAmountError):
            to_decimal(True)

        with pytest.raises(InvalidAmountError):
            to_decimal(float('nan'))

        with pytest.raises(InvalidAmountError):
            to_decimal("Infinity")


class TestFormatting:
    """Test rounding and display"""

    def test_round_half_up(self):
        assert round_currency(Decimal('100.555')) == Decimal('100.56')
        assert round_currency(Decimal('100.554')) == Decimal('100.55')
        assert round_currency(Decimal('4719.583333')) == Decimal('4719.58')

    def test_format_currency(self):
        """Test dollar formatting with thousands separators"""
        assert format_currency(Decimal('1234.5')) == "$1,234.50"
        assert format_currency(Decimal('0')) == "$0.00"
        assert format_currency(Decimal('-200')) == "-$200.00"
        assert format_currency(Decimal('1000000')) == "$1,000,000.00"


class TestValidateAmount:
    """Test the transaction amount rule 0 < amount <= 1,000,000"""

    def test_valid_amounts(self):
        assert validate_amount(Decimal('0.01')) == Decimal('0.01')
        assert validate_amount(1_000_000) == Decimal('1000000')
        assert validate_amount("42.50") == Decimal('42.50')

    def test_invalid_amounts(self):
        """Test zero, negative and oversized amounts"""
        with pytest.raises(InvalidAmountError, match="greater than 0"):
            validate_amount(0)

        with pytest.raises(InvalidAmountError, match="greater than 0"):
            validate_amount(-5)

        with pytest.raises(InvalidAmountError, match="cannot exceed"):
            validate_amount(1_000_001)

    def test_explicit_maximum(self):
        """Test overriding the configured maximum"""
        assert validate_amount(50, maximum=Decimal('50')) == Decimal('50')

        with pytest.raises(InvalidAmountError, match=r"\$50\.00"):
            validate_amount(Decimal('50.01'), maximum=Decimal('50'))
