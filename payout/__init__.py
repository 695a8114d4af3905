"""Creator payout calculator for note, tips, Brain and Coconala."""

from payout.fees import CalculationResult, calculate_all_platforms
from payout.price import normalize_price, validate_price_range
from payout.ranking import RankedPlatform, is_valid, rank_by_net_amount

__version__ = "0.1.0"
__all__ = [
    "CalculationResult",
    "RankedPlatform",
    "calculate_all_platforms",
    "is_valid",
    "normalize_price",
    "rank_by_net_amount",
    "validate_price_range",
    "__version__",
]
