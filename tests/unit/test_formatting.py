"""Tests for yen formatting."""

from decimal import Decimal

import pytest

from payout.formatting import format_fee, format_number, format_price


class TestFormatNumber:
    """Tests for thousands grouping."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, "0"),
            (999, "999"),
            (1_000, "1,000"),
            (1_234_567, "1,234,567"),
            (100_000_000, "100,000,000"),
            (1234.9, "1,234"),
            (-1234.5, "-1,235"),
            (Decimal("3420.99"), "3,420"),
        ],
    )
    def test_numbers(self, value, expected):
        """Numbers are floored and grouped."""
        assert format_number(value) == expected

    @pytest.mark.parametrize("value", [None, "1000", True, float("nan"), float("inf"), Decimal("NaN")])
    def test_non_numbers(self, value):
        """Anything that is not a finite number formats as zero."""
        assert format_number(value) == "0"


class TestFormatPriceAndFee:
    """Tests for yen suffix and fee sign."""

    def test_price(self):
        """Prices get the yen suffix."""
        assert format_price(3_420) == "3,420円"

    @pytest.mark.parametrize("fee", [880, -880])
    def test_fee(self, fee):
        """Fees are always shown as a deduction."""
        assert format_fee(fee) == "-880円"

    def test_zero_fee(self):
        """A zero fee still carries the minus sign."""
        assert format_fee(0) == "-0円"
