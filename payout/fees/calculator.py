"""Per-platform fee calculators and the all-platform aggregator.

Each calculator is a pure function of a normalized price. Percentage fees
are computed with exact decimal arithmetic and rounded down to whole yen:

    fee = floor(price * rate)

Payouts are never negative: every transfer or withdrawal fee is
subtracted under a max(0, ...) guard.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_FLOOR, Decimal

import structlog

from payout.constants import DECIMAL_HIGH_PREC_CONTEXT
from payout.fees.config import (
    DEFAULT_FEE_SCHEDULE,
    BrainFeeConfig,
    CoconalaFeeConfig,
    FeeSchedule,
    NoteFeeConfig,
    TipsFeeConfig,
)
from payout.fees.result import (
    BrainResult,
    CalculationResult,
    CoconalaResult,
    NoteResult,
    PaymentMethodResult,
    TipsResult,
)
from payout.price import normalize_price

logger = structlog.get_logger()


def floor_fee(amount: int, rate: Decimal) -> int:
    """Percentage fee on an amount, rounded down to whole yen."""
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        return int((Decimal(amount) * rate).to_integral_value(rounding=ROUND_FLOOR))


def _require_price(price: int) -> None:
    if isinstance(price, bool) or not isinstance(price, int) or price < 1:
        raise ValueError(f"Price must be a positive integer, got {price!r}")


def calculate_note(price: int, config: NoteFeeConfig | None = None) -> NoteResult:
    """Calculate note payouts for every payment method.

    Per method:
        service_fee = floor(price * method_rate)
        platform_fee = floor((price - service_fee) * 0.10)
        final_net_amount = max(0, price - service_fee - platform_fee - transfer_fee)

    Args:
        price: Normalized sale price
        config: Fee table. Uses the default schedule if not provided.

    Returns:
        NoteResult with one row per payment method, in canonical order

    Raises:
        ValueError: If price is not a positive integer
    """
    _require_price(price)
    config = config or DEFAULT_FEE_SCHEDULE.note
    if not config.payment_methods:
        raise ValueError("note fee table has no payment methods")

    rows = []
    for entry in config.payment_methods:
        service_fee = floor_fee(price, entry.rate)
        after_service_fee = price - service_fee
        platform_fee = floor_fee(after_service_fee, config.platform_usage_rate)
        net_before_transfer = after_service_fee - platform_fee
        rows.append(
            PaymentMethodResult(
                name=entry.method,
                label=entry.label,
                rate=entry.rate,
                service_fee=service_fee,
                platform_fee=platform_fee,
                net_amount_before_transfer=net_before_transfer,
                final_net_amount=max(0, net_before_transfer - config.transfer_fee),
            )
        )

    return NoteResult(transfer_fee=config.transfer_fee, payment_methods=tuple(rows))


def calculate_tips(price: int, config: TipsFeeConfig | None = None) -> TipsResult:
    """Calculate tips payouts for the normal and plus membership plans.

    Raises:
        ValueError: If price is not a positive integer
    """
    _require_price(price)
    config = config or DEFAULT_FEE_SCHEDULE.tips

    content_fee = floor_fee(price, config.content_fee_rate)
    after_fee = price - content_fee

    return TipsResult(
        content_fee=content_fee,
        after_fee=after_fee,
        transfer_fee_normal=config.transfer_fee_normal,
        transfer_fee_plus=config.transfer_fee_plus,
        net_amount_normal=max(0, after_fee - config.transfer_fee_normal),
        net_amount_plus=max(0, after_fee - config.transfer_fee_plus),
    )


def calculate_brain(price: int, config: BrainFeeConfig | None = None) -> BrainResult:
    """Calculate the Brain payout.

    Raises:
        ValueError: If price is not a positive integer
    """
    _require_price(price)
    config = config or DEFAULT_FEE_SCHEDULE.brain

    content_fee = floor_fee(price, config.content_fee_rate)
    after_fee = price - content_fee

    return BrainResult(
        content_fee=content_fee,
        after_fee=after_fee,
        withdrawal_fee=config.withdrawal_fee,
        net_amount=max(0, after_fee - config.withdrawal_fee),
    )


def calculate_coconala(price: int, config: CoconalaFeeConfig | None = None) -> CoconalaResult:
    """Calculate the Coconala payout.

    The transfer-fee tier is selected by the amount left after the sales
    fee, not by the sale price. The upper tier pays out the post-fee amount
    as is; only the lower tier subtracts its transfer fee.

    Args:
        price: Normalized sale price
        config: Fee table. Uses the default schedule if not provided.

    Returns:
        CoconalaResult with both tiers and the applicable one

    Raises:
        ValueError: If price is not a positive integer
    """
    _require_price(price)
    config = config or DEFAULT_FEE_SCHEDULE.coconala

    sales_fee = floor_fee(price, config.sales_fee_rate)
    after_fee = price - sales_fee

    net_amount_under = max(0, after_fee - config.transfer_fee_under_3000)
    net_amount_over = after_fee

    if after_fee >= config.tier_threshold:
        actual_transfer_fee = config.transfer_fee_over_3000
        actual_net_amount = net_amount_over
    else:
        actual_transfer_fee = config.transfer_fee_under_3000
        actual_net_amount = net_amount_under

    return CoconalaResult(
        sales_fee=sales_fee,
        after_fee=after_fee,
        transfer_fee_under_3000=config.transfer_fee_under_3000,
        transfer_fee_over_3000=config.transfer_fee_over_3000,
        net_amount_under_3000=net_amount_under,
        net_amount_over_3000=net_amount_over,
        actual_transfer_fee=actual_transfer_fee,
        actual_net_amount=actual_net_amount,
    )


def calculate_all_platforms(
    raw_price: object,
    schedule: FeeSchedule | None = None,
) -> CalculationResult | None:
    """Calculate payouts on every platform for a raw sale price.

    The price is normalized first (see payout.price.normalize_price).
    This function never raises: invalid input and unexpected internal
    errors both come back as None, and a result is either complete or
    not returned at all.

    Args:
        raw_price: Sale price as entered (string or number)
        schedule: Fee tables. Uses DEFAULT_FEE_SCHEDULE if not provided.

    Returns:
        CalculationResult for the normalized price, or None
    """
    price = normalize_price(raw_price)
    if price <= 0:
        logger.debug("calculation_skipped_invalid_price", raw_type=type(raw_price).__name__)
        return None

    schedule = schedule or DEFAULT_FEE_SCHEDULE

    try:
        result = CalculationResult(
            price=price,
            note=calculate_note(price, schedule.note),
            tips=calculate_tips(price, schedule.tips),
            brain=calculate_brain(price, schedule.brain),
            coconala=calculate_coconala(price, schedule.coconala),
        )
        logger.debug(
            "platforms_calculated",
            price=price,
            note_range=(result.note.min_amount, result.note.max_amount),
            tips=result.tips.net_amount,
            brain=result.brain.net_amount,
            coconala=result.coconala.net_amount,
        )
    except Exception:
        logger.exception("calculation_failed", price=price)
        return None

    return result
