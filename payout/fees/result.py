"""Fee calculation result types.

Every result is a frozen dataclass built fresh for each calculation.
Amounts are whole yen.
"""

from dataclasses import dataclass
from decimal import Decimal

from payout.fees.config import PaymentMethod


@dataclass(frozen=True)
class PaymentMethodResult:
    """note payout for a single payment method.

    Attributes:
        name: Payment method tag
        label: Display label for the method
        rate: Processor fee rate that was applied
        service_fee: Processor fee, floor(price * rate)
        platform_fee: note usage fee on the amount left after the processor fee
        net_amount_before_transfer: Amount left after both fees
        final_net_amount: Payout after the transfer fee, never negative
    """

    name: PaymentMethod
    label: str
    rate: Decimal
    service_fee: int
    platform_fee: int
    net_amount_before_transfer: int
    final_net_amount: int


@dataclass(frozen=True)
class NoteResult:
    """note payout across all payment methods.

    The summary figures are derived from ``payment_methods`` on access, so
    they always agree with the per-method rows.
    """

    transfer_fee: int
    payment_methods: tuple[PaymentMethodResult, ...]

    @property
    def platform_fee(self) -> int:
        """Usage fee averaged over the payment methods, rounded down."""
        total = sum(method.platform_fee for method in self.payment_methods)
        return total // len(self.payment_methods)

    @property
    def min_amount(self) -> int:
        """Lowest payout across payment methods."""
        return min(method.final_net_amount for method in self.payment_methods)

    @property
    def max_amount(self) -> int:
        """Highest payout across payment methods."""
        return max(method.final_net_amount for method in self.payment_methods)

    def for_method(self, method: PaymentMethod) -> PaymentMethodResult:
        """Look up the row for a payment method.

        Raises:
            KeyError: If the method was not part of the calculation
        """
        for row in self.payment_methods:
            if row.name == method:
                return row
        raise KeyError(method)


@dataclass(frozen=True)
class TipsResult:
    """tips payout for both membership plans."""

    content_fee: int
    after_fee: int
    transfer_fee_normal: int
    transfer_fee_plus: int
    net_amount_normal: int
    net_amount_plus: int

    @property
    def net_amount(self) -> int:
        """Displayed payout (plus membership)."""
        return self.net_amount_plus


@dataclass(frozen=True)
class BrainResult:
    """Brain payout."""

    content_fee: int
    after_fee: int
    withdrawal_fee: int
    net_amount: int


@dataclass(frozen=True)
class CoconalaResult:
    """Coconala payout for both transfer-fee tiers plus the applicable one.

    Attributes:
        sales_fee: Sales commission
        after_fee: Amount left after the commission; selects the tier
        transfer_fee_under_3000: Lower tier transfer fee
        transfer_fee_over_3000: Upper tier transfer fee
        net_amount_under_3000: Payout under the lower tier
        net_amount_over_3000: Payout under the upper tier
        actual_transfer_fee: Transfer fee of the tier that applies
        actual_net_amount: Payout of the tier that applies
    """

    sales_fee: int
    after_fee: int
    transfer_fee_under_3000: int
    transfer_fee_over_3000: int
    net_amount_under_3000: int
    net_amount_over_3000: int
    actual_transfer_fee: int
    actual_net_amount: int

    @property
    def net_amount(self) -> int:
        """Displayed payout (the applicable tier)."""
        return self.actual_net_amount


@dataclass(frozen=True)
class CalculationResult:
    """Payouts on every platform for one sale price."""

    price: int
    note: NoteResult
    tips: TipsResult
    brain: BrainResult
    coconala: CoconalaResult
