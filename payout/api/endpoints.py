"""API endpoints for the payout calculator."""

from collections.abc import Callable

import structlog
from fastapi import APIRouter, Depends

from payout.fees.calculator import calculate_all_platforms
from payout.fees.result import CalculationResult
from payout.models.calculation import (
    CalculationRequest,
    CalculationResponse,
    ValidationResponse,
)
from payout.price import validate_price_range

logger = structlog.get_logger()

router = APIRouter()

# Takes a raw price, returns a complete result or None
Engine = Callable[[object], CalculationResult | None]


def get_engine() -> Engine:
    """Dependency provider for the calculation engine.

    Override this in tests to inject a different engine:
        app.dependency_overrides[get_engine] = lambda: fake_engine

    Returns:
        The function used to calculate payouts.
    """
    return calculate_all_platforms


@router.post("/calculate")
async def calculate(
    request: CalculationRequest,
    engine: Engine = Depends(get_engine),
) -> CalculationResponse:
    """Calculate payouts on every platform for a sale price.

    The price is normalized, so out-of-range values are clamped. Clients
    that want rejection call /validate first.

    Args:
        request: Body carrying the raw price
        engine: Injected engine (via FastAPI Depends)

    Returns:
        CalculationResponse with the result and ranking.

    Error Handling:
        - Invalid request schema: Returns 422 Validation Error (Pydantic)
        - Unusable price: Returns 200 with a null result
        - Engine exception: Logs error, returns 200 with a null result
    """
    logger.info("received_calculation_request", price=request.price)

    try:
        result = engine(request.price)
    except Exception:
        logger.exception(
            "engine_error",
            price=request.price,
            message="Engine raised an exception, returning empty result",
        )
        return CalculationResponse.empty()

    response = CalculationResponse.from_result(result)

    logger.info(
        "returning_calculation",
        price=result.price if result is not None else None,
        has_result=result is not None,
        top_platform=response.ranking[0].platform if response.ranking else None,
    )
    return response


@router.post("/validate")
async def validate(request: CalculationRequest) -> ValidationResponse:
    """Check a sale price against the accepted range without clamping it."""
    return ValidationResponse.from_validation(validate_price_range(request.price))
