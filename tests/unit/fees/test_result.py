"""Tests for the result value objects."""

from dataclasses import FrozenInstanceError, replace

import pytest

from payout.fees import PaymentMethod, calculate_note


class TestNoteResult:
    """Tests for NoteResult derived fields."""

    def test_for_method(self):
        """Rows can be looked up by payment method."""
        result = calculate_note(4_000)

        row = result.for_method(PaymentMethod.PAYPAL)
        assert row.name == PaymentMethod.PAYPAL
        assert row.label == "PayPal決済"
        assert row.service_fee == 260

    def test_for_method_missing(self):
        """Looking up a method that was not calculated raises KeyError."""
        result = calculate_note(4_000)
        trimmed = replace(result, payment_methods=result.payment_methods[:1])

        with pytest.raises(KeyError):
            trimmed.for_method(PaymentMethod.PAYPAL)

    def test_summary_follows_rows(self):
        """Derived fields are recomputed from the rows."""
        result = calculate_note(4_000)
        credit_only = replace(result, payment_methods=result.payment_methods[:1])

        assert credit_only.min_amount == 3_420
        assert credit_only.max_amount == 3_420
        assert credit_only.platform_fee == 380


class TestImmutability:
    """Results are frozen."""

    def test_result_frozen(self, result_4000):
        """Top-level result cannot be modified."""
        with pytest.raises(FrozenInstanceError):
            result_4000.price = 1  # type: ignore[misc]

    def test_rows_frozen(self, result_4000):
        """Per-method rows cannot be modified."""
        row = result_4000.note.payment_methods[0]
        with pytest.raises(FrozenInstanceError):
            row.final_net_amount = 0  # type: ignore[misc]

    def test_rows_are_a_tuple(self, result_4000):
        """The row sequence itself is immutable."""
        assert isinstance(result_4000.note.payment_methods, tuple)
