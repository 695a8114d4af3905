"""Sale price parsing, normalization and range checks.

The normalizer never raises: anything it cannot turn into a price comes
back as INVALID_PRICE (0). Out-of-range values are clamped, not rejected.
Callers that need rejection check with validate_price_range() first.
"""

import decimal
import re
from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal, InvalidOperation

import structlog

from payout.constants import DECIMAL_HIGH_PREC_CONTEXT, INVALID_PRICE, PRICE_MAX, PRICE_MIN

logger = structlog.get_logger()

# Full-width digits (０-９) map onto ASCII digits
_FULLWIDTH_DIGITS = str.maketrans("０１２３４５６７８９", "0123456789")

# ASCII decimal or exponent notation only: no underscores, no non-ASCII
# digits, no Infinity/NaN spellings
_NUMBER_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")

MESSAGE_NOT_A_NUMBER = "有効な数値を入力してください"
MESSAGE_BELOW_MINIMUM = "1円以上の価格を入力してください"
MESSAGE_ABOVE_MAXIMUM = "価格は1億円以下で入力してください"


@dataclass(frozen=True)
class PriceValidation:
    """Outcome of a price range check.

    Attributes:
        is_valid: True if the price is within the accepted range
        message: User-facing reason when invalid, empty otherwise
    """

    is_valid: bool
    message: str = ""

    @classmethod
    def ok(cls) -> "PriceValidation":
        """Create a passing validation."""
        return cls(is_valid=True)

    @classmethod
    def rejected(cls, message: str) -> "PriceValidation":
        """Create a failing validation with a reason."""
        return cls(is_valid=False, message=message)


def parse_number(value: object) -> Decimal | None:
    """Parse a raw price value into a finite Decimal.

    Accepts int, float, Decimal and numeric strings written with ASCII
    digits (surrounding whitespace and exponent notation allowed).
    Thousands separators, underscores and full-width digits are rejected;
    use clean_price_input() for free-form text. Booleans are not numbers.

    Args:
        value: Raw input value

    Returns:
        The parsed number, or None if the value is absent, empty,
        non-numeric or not finite
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(value)
    elif isinstance(value, str):
        text = value.strip()
        if not _NUMBER_PATTERN.fullmatch(text):
            return None
        try:
            number = Decimal(text)
        except (InvalidOperation, ValueError):
            return None
    else:
        return None

    if not number.is_finite():
        return None
    return number


def is_valid_number(value: object) -> bool:
    """True if the value parses to a finite number greater than zero."""
    number = parse_number(value)
    return number is not None and number > 0


def normalize_price(value: object) -> int:
    """Normalize a raw input value to a whole-yen price.

    Valid input is floored to an integer and clamped to
    [PRICE_MIN, PRICE_MAX]. Anything else normalizes to INVALID_PRICE.

    Args:
        value: String or number entered by the user

    Returns:
        Price in yen, or INVALID_PRICE (0)
    """
    number = parse_number(value)
    if number is None or number <= 0:
        logger.debug("price_normalization_rejected", raw_type=type(value).__name__)
        return INVALID_PRICE

    if number >= PRICE_MAX:
        price = PRICE_MAX
    else:
        with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
            floored = int(number.to_integral_value(rounding=ROUND_FLOOR))
        price = max(floored, PRICE_MIN)

    if price != number:
        logger.debug("price_clamped", raw=str(number), price=price)
    return price


def validate_price_range(value: object) -> PriceValidation:
    """Check that a raw value is a price within the accepted range.

    Unlike normalize_price(), this rejects out-of-range values instead of
    clamping them.

    Args:
        value: String or number entered by the user

    Returns:
        PriceValidation with a user-facing message when invalid
    """
    number = parse_number(value)
    if number is None or number <= 0:
        return PriceValidation.rejected(MESSAGE_NOT_A_NUMBER)

    if number < PRICE_MIN:
        return PriceValidation.rejected(MESSAGE_BELOW_MINIMUM)
    if number > PRICE_MAX:
        return PriceValidation.rejected(MESSAGE_ABOVE_MAXIMUM)
    return PriceValidation.ok()


def clean_price_input(text: object) -> str:
    """Reduce free-form price text to a plain digit string.

    Full-width digits become ASCII, every other character is dropped and
    leading zeros are removed.

    Examples:
        clean_price_input("１,２００円")  # "1200"
        clean_price_input("007")          # "7"
        clean_price_input("abc")          # "0"

    Args:
        text: Raw text from an input field

    Returns:
        Digit string ("0" if no digits remain), or "" for non-string input
    """
    if not isinstance(text, str):
        return ""

    digits = "".join(ch for ch in text.translate(_FULLWIDTH_DIGITS) if "0" <= ch <= "9")
    return digits.lstrip("0") or "0"
