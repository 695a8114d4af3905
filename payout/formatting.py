"""Yen amount formatting."""

import math
from decimal import ROUND_FLOOR, Decimal

YEN_SUFFIX = "円"


def format_number(value: object) -> str:
    """Round down and group thousands with commas.

    Anything that is not a finite number formats as "0".

    Examples:
        format_number(1234567)  # "1,234,567"
        format_number(1234.9)   # "1,234"
    """
    if isinstance(value, bool):
        return "0"
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        if not math.isfinite(value):
            return "0"
        return f"{math.floor(value):,}"
    if isinstance(value, Decimal):
        if not value.is_finite():
            return "0"
        return f"{int(value.to_integral_value(rounding=ROUND_FLOOR)):,}"
    return "0"


def format_price(value: object) -> str:
    """Format an amount as yen, e.g. "3,420円"."""
    return f"{format_number(value)}{YEN_SUFFIX}"


def format_fee(value: object) -> str:
    """Format a fee as a deduction, e.g. "-880円"."""
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        value = abs(value)
    return f"-{format_number(value)}{YEN_SUFFIX}"
