"""Tests for the static fee tables."""

from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from payout.fees import (
    DEFAULT_FEE_SCHEDULE,
    NOTE_PAYMENT_METHODS,
    FeeSchedule,
    NoteFeeConfig,
    PaymentMethod,
)


class TestNotePaymentMethods:
    """Tests for note's payment method table."""

    @pytest.mark.parametrize(
        "method,rate",
        [
            (PaymentMethod.CREDIT, "0.05"),
            (PaymentMethod.CARRIER, "0.15"),
            (PaymentMethod.PAYPAY, "0.07"),
            (PaymentMethod.AMAZONPAY, "0.07"),
            (PaymentMethod.NOTEPOINT, "0.10"),
            (PaymentMethod.PAYPAL, "0.065"),
        ],
    )
    def test_rate(self, method, rate):
        """Each method carries its processor fee rate."""
        assert NoteFeeConfig().rates[method] == Decimal(rate)

    def test_canonical_order(self):
        """Table order is fixed, not sorted by fee."""
        assert [entry.method.value for entry in NOTE_PAYMENT_METHODS] == [
            "credit",
            "carrier",
            "paypay",
            "amazonpay",
            "notepoint",
            "paypal",
        ]

    def test_every_method_has_a_label(self):
        """Every row has a display label."""
        assert all(entry.label for entry in NOTE_PAYMENT_METHODS)


class TestDefaultSchedule:
    """Tests for the default fee schedule."""

    def test_single_rates(self):
        """Commission rates for tips, Brain and Coconala."""
        assert DEFAULT_FEE_SCHEDULE.tips.content_fee_rate == Decimal("0.14")
        assert DEFAULT_FEE_SCHEDULE.brain.content_fee_rate == Decimal("0.12")
        assert DEFAULT_FEE_SCHEDULE.coconala.sales_fee_rate == Decimal("0.22")
        assert DEFAULT_FEE_SCHEDULE.note.platform_usage_rate == Decimal("0.10")

    def test_fixed_fees_are_zero(self):
        """Every transfer and withdrawal fee is zero."""
        schedule = DEFAULT_FEE_SCHEDULE

        assert schedule.note.transfer_fee == 0
        assert schedule.tips.transfer_fee_normal == 0
        assert schedule.tips.transfer_fee_plus == 0
        assert schedule.brain.withdrawal_fee == 0
        assert schedule.coconala.transfer_fee_under_3000 == 0
        assert schedule.coconala.transfer_fee_over_3000 == 0

    def test_coconala_threshold(self):
        """Coconala's tier threshold is 3,000 yen."""
        assert DEFAULT_FEE_SCHEDULE.coconala.tier_threshold == 3_000

    def test_equal_to_fresh_schedule(self):
        """The default instance matches a freshly built schedule."""
        assert FeeSchedule() == DEFAULT_FEE_SCHEDULE

    def test_immutable(self):
        """Fee tables cannot be modified."""
        with pytest.raises(FrozenInstanceError):
            DEFAULT_FEE_SCHEDULE.brain.withdrawal_fee = 275  # type: ignore[misc]
