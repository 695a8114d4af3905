"""Static fee tables for each platform."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from payout.constants import COCONALA_TIER_THRESHOLD, NOTE_PLATFORM_USAGE_RATE


class PaymentMethod(str, Enum):
    """Payment methods a note buyer can use."""

    CREDIT = "credit"
    CARRIER = "carrier"
    PAYPAY = "paypay"
    AMAZONPAY = "amazonpay"
    NOTEPOINT = "notepoint"
    PAYPAL = "paypal"


@dataclass(frozen=True)
class PaymentMethodRate:
    """One row of note's payment processor fee table.

    Attributes:
        method: Payment method tag
        label: Display label shown next to the method's payout
        rate: Processor fee rate charged on the sale price
    """

    method: PaymentMethod
    label: str
    rate: Decimal


# Canonical order: renderers index the per-method results by position
NOTE_PAYMENT_METHODS: tuple[PaymentMethodRate, ...] = (
    PaymentMethodRate(PaymentMethod.CREDIT, "クレジットカード決済", Decimal("0.05")),
    PaymentMethodRate(PaymentMethod.CARRIER, "携帯キャリア決済", Decimal("0.15")),
    PaymentMethodRate(PaymentMethod.PAYPAY, "PayPay決済", Decimal("0.07")),
    PaymentMethodRate(PaymentMethod.AMAZONPAY, "Amazon Pay決済", Decimal("0.07")),
    PaymentMethodRate(PaymentMethod.NOTEPOINT, "noteポイント決済", Decimal("0.10")),
    PaymentMethodRate(PaymentMethod.PAYPAL, "PayPal決済", Decimal("0.065")),
)


@dataclass(frozen=True)
class NoteFeeConfig:
    """note fees: a processor fee per payment method, then a flat usage fee.

    Attributes:
        payment_methods: Processor fee table in canonical order
        platform_usage_rate: Usage fee rate applied after the processor fee
        transfer_fee: Fixed fee per payout (currently 0)
    """

    payment_methods: tuple[PaymentMethodRate, ...] = NOTE_PAYMENT_METHODS
    platform_usage_rate: Decimal = NOTE_PLATFORM_USAGE_RATE
    transfer_fee: int = 0

    @property
    def rates(self) -> dict[PaymentMethod, Decimal]:
        """Processor fee rate keyed by payment method."""
        return {entry.method: entry.rate for entry in self.payment_methods}


@dataclass(frozen=True)
class TipsFeeConfig:
    """tips fees.

    The two transfer fees belong to the normal and plus membership plans
    and are adjusted independently of each other.
    """

    content_fee_rate: Decimal = Decimal("0.14")
    transfer_fee_normal: int = 0
    transfer_fee_plus: int = 0


@dataclass(frozen=True)
class BrainFeeConfig:
    """Brain fees."""

    content_fee_rate: Decimal = Decimal("0.12")
    withdrawal_fee: int = 0


@dataclass(frozen=True)
class CoconalaFeeConfig:
    """Coconala content market fees.

    Attributes:
        sales_fee_rate: Sales commission rate
        transfer_fee_under_3000: Transfer fee when the post-fee amount is below
            the tier threshold
        transfer_fee_over_3000: Transfer fee when the post-fee amount is at or
            above the tier threshold
        tier_threshold: Post-fee amount that selects the upper tier
    """

    sales_fee_rate: Decimal = Decimal("0.22")
    transfer_fee_under_3000: int = 0
    transfer_fee_over_3000: int = 0
    tier_threshold: int = COCONALA_TIER_THRESHOLD


@dataclass(frozen=True)
class FeeSchedule:
    """Fee tables for all four platforms."""

    note: NoteFeeConfig = field(default_factory=NoteFeeConfig)
    tips: TipsFeeConfig = field(default_factory=TipsFeeConfig)
    brain: BrainFeeConfig = field(default_factory=BrainFeeConfig)
    coconala: CoconalaFeeConfig = field(default_factory=CoconalaFeeConfig)


# Default schedule instance
DEFAULT_FEE_SCHEDULE = FeeSchedule()
