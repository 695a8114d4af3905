"""Pydantic models for the calculation API.

Field aliases follow the camelCase names the result renderer reads
(``platformFee``, ``paymentMethods``, ``finalNetAmount`` ...). All models
can be built straight from the engine's result dataclasses.
"""

from pydantic import BaseModel, Field

from payout.fees.config import PaymentMethod
from payout.fees.result import CalculationResult
from payout.models.types import RawPrice, Yen
from payout.price import PriceValidation
from payout.ranking import RankedPlatform, rank_by_net_amount

_SCHEMA_CONFIG = {"populate_by_name": True, "from_attributes": True}


class CalculationRequest(BaseModel):
    """Body of /calculate and /validate."""

    price: RawPrice = None


class PaymentMethodPayout(BaseModel):
    """note payout for one payment method."""

    name: PaymentMethod
    label: str
    rate: float = Field(description="Processor fee rate")
    service_fee: Yen = Field(alias="serviceFee")
    platform_fee: Yen = Field(alias="platformFee")
    net_amount_before_transfer: Yen = Field(alias="netAmountBeforeTransfer")
    final_net_amount: Yen = Field(alias="finalNetAmount")

    model_config = _SCHEMA_CONFIG


class NotePayout(BaseModel):
    """note payouts, one row per payment method in canonical order."""

    platform_fee: Yen = Field(
        alias="platformFee",
        description="Usage fee averaged over payment methods, rounded down",
    )
    transfer_fee: Yen = Field(alias="transferFee")
    payment_methods: list[PaymentMethodPayout] = Field(alias="paymentMethods")
    min_amount: Yen = Field(alias="minAmount")
    max_amount: Yen = Field(alias="maxAmount")

    model_config = _SCHEMA_CONFIG


class TipsPayout(BaseModel):
    """tips payout for both membership plans."""

    content_fee: Yen = Field(alias="contentFee")
    after_fee: Yen = Field(alias="afterFee")
    transfer_fee_normal: Yen = Field(alias="transferFeeNormal")
    transfer_fee_plus: Yen = Field(alias="transferFeePlus")
    net_amount_normal: Yen = Field(alias="netAmountNormal")
    net_amount_plus: Yen = Field(alias="netAmountPlus")
    net_amount: Yen = Field(alias="netAmount", description="Plus membership payout")

    model_config = _SCHEMA_CONFIG


class BrainPayout(BaseModel):
    """Brain payout."""

    content_fee: Yen = Field(alias="contentFee")
    after_fee: Yen = Field(alias="afterFee")
    withdrawal_fee: Yen = Field(alias="withdrawalFee")
    net_amount: Yen = Field(alias="netAmount")

    model_config = _SCHEMA_CONFIG


class CoconalaPayout(BaseModel):
    """Coconala payout for both tiers and the applicable one."""

    sales_fee: Yen = Field(alias="salesFee")
    after_fee: Yen = Field(alias="afterFee")
    transfer_fee_under_3000: Yen = Field(alias="transferFeeUnder3000")
    transfer_fee_over_3000: Yen = Field(alias="transferFeeOver3000")
    net_amount_under_3000: Yen = Field(alias="netAmountUnder3000")
    net_amount_over_3000: Yen = Field(alias="netAmountOver3000")
    actual_transfer_fee: Yen = Field(alias="actualTransferFee")
    actual_net_amount: Yen = Field(alias="actualNetAmount")
    net_amount: Yen = Field(alias="netAmount", description="Payout of the applicable tier")

    model_config = _SCHEMA_CONFIG


class CalculationPayload(BaseModel):
    """Payouts on every platform for one price."""

    price: int = Field(ge=1, description="Normalized sale price in yen")
    note: NotePayout
    tips: TipsPayout
    brain: BrainPayout
    coconala: CoconalaPayout

    model_config = _SCHEMA_CONFIG


class RankingEntry(BaseModel):
    """One platform in the payout ranking."""

    platform: str
    display_name: str = Field(alias="displayName")
    net_amount: Yen = Field(alias="netAmount")

    model_config = _SCHEMA_CONFIG

    @classmethod
    def from_ranked(cls, entry: RankedPlatform) -> "RankingEntry":
        """Create from a ranking entry."""
        return cls.model_validate(entry)


class CalculationResponse(BaseModel):
    """Response of /calculate.

    ``result`` is null when the price could not be used; there is no
    separate error field.
    """

    result: CalculationPayload | None = None
    ranking: list[RankingEntry] = Field(default_factory=list)

    model_config = _SCHEMA_CONFIG

    @classmethod
    def empty(cls) -> "CalculationResponse":
        """Create a response carrying no result."""
        return cls(result=None, ranking=[])

    @classmethod
    def from_result(cls, result: CalculationResult | None) -> "CalculationResponse":
        """Build the response for an engine result (or None)."""
        if result is None:
            return cls.empty()
        return cls(
            result=CalculationPayload.model_validate(result),
            ranking=[RankingEntry.from_ranked(entry) for entry in rank_by_net_amount(result)],
        )


class ValidationResponse(BaseModel):
    """Response of /validate."""

    is_valid: bool = Field(alias="isValid")
    message: str = ""

    model_config = _SCHEMA_CONFIG

    @classmethod
    def from_validation(cls, validation: PriceValidation) -> "ValidationResponse":
        """Create from a price validation outcome."""
        return cls.model_validate(validation)
