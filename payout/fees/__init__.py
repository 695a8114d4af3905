"""Fee calculation for the creator payout comparison.

This module provides the four per-platform calculators and the aggregator:
- note: six payment methods, each with its own processor fee, plus a flat
  usage fee
- tips, Brain: a single content fee
- Coconala: a sales fee and a transfer-fee tier chosen by the post-fee amount

Usage:
    from payout.fees import calculate_all_platforms

    result = calculate_all_platforms("4000")
    if result is not None:
        low, high = result.note.min_amount, result.note.max_amount
"""

from payout.fees.calculator import (
    calculate_all_platforms,
    calculate_brain,
    calculate_coconala,
    calculate_note,
    calculate_tips,
    floor_fee,
)
from payout.fees.config import (
    DEFAULT_FEE_SCHEDULE,
    NOTE_PAYMENT_METHODS,
    BrainFeeConfig,
    CoconalaFeeConfig,
    FeeSchedule,
    NoteFeeConfig,
    PaymentMethod,
    PaymentMethodRate,
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

__all__ = [
    # Calculators
    "calculate_all_platforms",
    "calculate_note",
    "calculate_tips",
    "calculate_brain",
    "calculate_coconala",
    "floor_fee",
    # Config
    "FeeSchedule",
    "DEFAULT_FEE_SCHEDULE",
    "NoteFeeConfig",
    "TipsFeeConfig",
    "BrainFeeConfig",
    "CoconalaFeeConfig",
    "PaymentMethod",
    "PaymentMethodRate",
    "NOTE_PAYMENT_METHODS",
    # Results
    "CalculationResult",
    "NoteResult",
    "PaymentMethodResult",
    "TipsResult",
    "BrainResult",
    "CoconalaResult",
]
