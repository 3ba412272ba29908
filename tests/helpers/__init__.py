"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Prices and venue depths
- factories: Venue and request factory functions
"""

from tests.helpers.constants import (
    CLMM_LIQUIDITY,
    CPMM_RESERVE,
    DEEP_LIQUIDITY,
    DEEP_RESERVE,
    SQRT_PRICE_081,
    SQRT_PRICE_121,
    SQRT_PRICE_FOUR,
    SQRT_PRICE_ONE,
)
from tests.helpers.factories import make_split_request, make_venue, solver_args

__all__ = [
    # Constants
    "SQRT_PRICE_ONE",
    "SQRT_PRICE_081",
    "SQRT_PRICE_121",
    "SQRT_PRICE_FOUR",
    "CLMM_LIQUIDITY",
    "CPMM_RESERVE",
    "DEEP_LIQUIDITY",
    "DEEP_RESERVE",
    # Factories
    "make_venue",
    "make_split_request",
    "solver_args",
]
