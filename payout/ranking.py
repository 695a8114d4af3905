"""Result validation and ranking of platforms by payout."""

from dataclasses import dataclass
from decimal import Decimal

from payout.constants import PLATFORM_KEYS
from payout.fees.result import CalculationResult

PLATFORM_DISPLAY_NAMES = {
    "note": "note",
    "tips": "tips",
    "brain": "Brain",
    "coconala": "ココナラコンテンツマーケット",
}


@dataclass(frozen=True)
class RankedPlatform:
    """One entry of the payout ranking."""

    platform: str
    display_name: str
    net_amount: int


def get_platform_display_name(platform: str) -> str:
    """Display name for a platform key, or the key itself if unknown."""
    return PLATFORM_DISPLAY_NAMES.get(platform, platform)


def is_valid(result: object) -> bool:
    """Check that a calculation result is complete enough to display.

    True only if every platform result is present and truthy and the price
    is a positive number. The result is not modified.

    Args:
        result: Value returned by calculate_all_platforms(), possibly None

    Returns:
        True if the result can be displayed or exported
    """
    if result is None:
        return False

    for platform in PLATFORM_KEYS:
        if not getattr(result, platform, None):
            return False

    price = getattr(result, "price", None)
    if isinstance(price, bool) or not isinstance(price, (int, float, Decimal)):
        return False
    return price > 0


def rank_by_net_amount(result: CalculationResult | None) -> list[RankedPlatform]:
    """Rank platforms by payout, highest first.

    note pays out a range; it is ranked by its upper bound. note is added
    after the other three, and the sort is stable, so on a tie it comes
    after any platform it ties with.

    Args:
        result: Value returned by calculate_all_platforms(), possibly None

    Returns:
        Ranked entries, or an empty list if the result is not valid
    """
    if not is_valid(result):
        return []

    entries = [
        RankedPlatform(
            platform=platform,
            display_name=get_platform_display_name(platform),
            net_amount=getattr(result, platform).net_amount,
        )
        for platform in ("tips", "brain", "coconala")
    ]
    entries.append(
        RankedPlatform(
            platform="note",
            display_name=get_platform_display_name("note"),
            net_amount=result.note.max_amount,
        )
    )

    return sorted(entries, key=lambda entry: entry.net_amount, reverse=True)
