"""Shared prices and expected payouts for tests.

Usage:
    from tests.helpers import PRICE_4000_NOTE_ROWS
    # or
    from tests.helpers.constants import PRICE_4000_NOTE_ROWS
"""

# =============================================================================
# Reference prices
# =============================================================================

# Smallest and largest accepted prices
MIN_PRICE = 1
MAX_PRICE = 100_000_000

# Coconala: floor(3844 * 0.22) = 845 -> 2999 left (lower tier)
#           floor(3845 * 0.22) = 845 -> 3000 left (upper tier)
COCONALA_LAST_LOWER_TIER_PRICE = 3_844
COCONALA_FIRST_UPPER_TIER_PRICE = 3_845

# =============================================================================
# Expected payouts at 4,000 yen
# =============================================================================

# (method, service_fee, platform_fee, final_net_amount) in canonical order
PRICE_4000_NOTE_ROWS = [
    ("credit", 200, 380, 3_420),
    ("carrier", 600, 340, 3_060),
    ("paypay", 280, 372, 3_348),
    ("amazonpay", 280, 372, 3_348),
    ("notepoint", 400, 360, 3_240),
    ("paypal", 260, 374, 3_366),
]

# sum(platform fees) = 2198, 2198 // 6 = 366
PRICE_4000_NOTE_PLATFORM_FEE = 366
PRICE_4000_NOTE_MIN = 3_060
PRICE_4000_NOTE_MAX = 3_420

PRICE_4000_TIPS_CONTENT_FEE = 560
PRICE_4000_TIPS_NET = 3_440
PRICE_4000_BRAIN_CONTENT_FEE = 480
PRICE_4000_BRAIN_NET = 3_520
PRICE_4000_COCONALA_SALES_FEE = 880
PRICE_4000_COCONALA_NET = 3_120
