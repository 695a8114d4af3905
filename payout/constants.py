"""Engine-wide constants for the creator payout calculator.

Amounts are whole yen. The per-platform fee tables live in
payout.fees.config; this module only holds the bounds and thresholds
that several modules share.
"""

import decimal
from decimal import Decimal

# Accepted sale price range (1 yen to 100 million yen)
PRICE_MIN = 1
PRICE_MAX = 100_000_000

# Returned by the normalizer for any input it cannot turn into a price
INVALID_PRICE = 0

# note charges its platform usage fee on the amount left after the
# payment processor's cut
NOTE_PLATFORM_USAGE_RATE = Decimal("0.10")

# Coconala picks its transfer-fee tier from the post-fee amount
COCONALA_TIER_THRESHOLD = 3_000

# Platform keys in the order results are assembled
PLATFORM_KEYS = ("note", "tips", "brain", "coconala")

# Fee products stay well under 20 significant digits; this context keeps
# them exact whatever precision the caller's thread context has
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=40)
