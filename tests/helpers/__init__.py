"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Reference prices and expected payouts
- factories: Fee schedule and result factory functions
"""

from tests.helpers.constants import (
    COCONALA_FIRST_UPPER_TIER_PRICE,
    COCONALA_LAST_LOWER_TIER_PRICE,
    MAX_PRICE,
    MIN_PRICE,
    PRICE_4000_NOTE_MAX,
    PRICE_4000_NOTE_MIN,
    PRICE_4000_NOTE_PLATFORM_FEE,
    PRICE_4000_NOTE_ROWS,
)
from tests.helpers.factories import make_result, make_schedule

__all__ = [
    # Constants
    "MIN_PRICE",
    "MAX_PRICE",
    "COCONALA_LAST_LOWER_TIER_PRICE",
    "COCONALA_FIRST_UPPER_TIER_PRICE",
    "PRICE_4000_NOTE_ROWS",
    "PRICE_4000_NOTE_PLATFORM_FEE",
    "PRICE_4000_NOTE_MIN",
    "PRICE_4000_NOTE_MAX",
    # Factories
    "make_schedule",
    "make_result",
]
