"""Pydantic models for the payout API."""

from payout.models.calculation import (
    BrainPayout,
    CalculationPayload,
    CalculationRequest,
    CalculationResponse,
    CoconalaPayout,
    NotePayout,
    PaymentMethodPayout,
    RankingEntry,
    TipsPayout,
    ValidationResponse,
)
from payout.models.types import RawPrice, Yen

__all__ = [
    # Types
    "RawPrice",
    "Yen",
    # Request/response models
    "CalculationRequest",
    "CalculationResponse",
    "ValidationResponse",
    "CalculationPayload",
    "NotePayout",
    "PaymentMethodPayout",
    "TipsPayout",
    "BrainPayout",
    "CoconalaPayout",
    "RankingEntry",
]
