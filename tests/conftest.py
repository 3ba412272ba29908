"""Pytest configuration and fixtures."""

import pytest

from splitroute.routing.types import VenueState
from tests.helpers import (
    CLMM_LIQUIDITY,
    CPMM_RESERVE,
    SQRT_PRICE_081,
    SQRT_PRICE_121,
    SQRT_PRICE_ONE,
    make_venue,
)


@pytest.fixture
def scenario_venue() -> VenueState:
    """Spot 1.0, limit 0.81, L = 10M, R0 = R1 = 1M (token0 -> token1)."""
    return VenueState(
        sqrt_price_x96=SQRT_PRICE_ONE,
        sqrt_price_limit_x96=SQRT_PRICE_081,
        liquidity=CLMM_LIQUIDITY,
        reserve0=CPMM_RESERVE,
        reserve1=CPMM_RESERVE,
    )


@pytest.fixture
def scenario_venue_one_for_zero() -> VenueState:
    """Mirror of scenario_venue with the limit at 1.21 (token1 -> token0)."""
    return VenueState(
        sqrt_price_x96=SQRT_PRICE_ONE,
        sqrt_price_limit_x96=SQRT_PRICE_121,
        liquidity=CLMM_LIQUIDITY,
        reserve0=CPMM_RESERVE,
        reserve1=CPMM_RESERVE,
    )


@pytest.fixture(params=[True, False], ids=["zero_for_one", "one_for_zero"])
def direction(request: pytest.FixtureRequest) -> bool:
    """Run a test in both trade directions."""
    return request.param


@pytest.fixture
def venue_for_direction(direction: bool) -> VenueState:
    """Default venue with the limit on the correct side for ``direction``."""
    return make_venue(zero_for_one=direction)
