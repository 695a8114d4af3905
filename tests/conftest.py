"""Pytest configuration and fixtures."""

import pytest

from payout.fees import CalculationResult
from tests.helpers.factories import make_result


@pytest.fixture
def result_4000() -> CalculationResult:
    """Result for a 4,000 yen sale."""
    return make_result(4_000)


@pytest.fixture
def result_1() -> CalculationResult:
    """Result for the smallest accepted price."""
    return make_result(1)
