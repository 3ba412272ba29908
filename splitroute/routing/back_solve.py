"""Back-solve a stopping price into per-venue amounts.

Each venue is moved from the shared spot to the stopping price on its own
curve. Inputs come from the price move; outputs come from each venue's
canonical swap formula applied to that input (CPMM) or price move (CLMM).
"""

from __future__ import annotations

from splitroute.amm.base import LegQuote
from splitroute.amm.concentrated import concentrated
from splitroute.amm.constant_product import constant_product
from splitroute.routing.types import VenueState


def back_solve(venue: VenueState, sqrt_star_x96: int, zero_for_one: bool) -> tuple[LegQuote, LegQuote]:
    """Amounts each venue routes to reach ``sqrt_star_x96``.

    Args:
        venue: Shared entry state
        sqrt_star_x96: Stopping price, between the spot and the limit
        zero_for_one: True when token0 is sold

    Returns:
        (clmm_leg, cpmm_leg)

    Raises:
        ZeroDenominator: If the CLMM token0 delta meets a zero price product
        Underflow: If the stopping price is on the wrong side of the spot
    """
    v3 = concentrated.quote_to_price(venue.clmm, venue.sqrt_price_x96, sqrt_star_x96, zero_for_one)
    v2 = constant_product.quote_to_price(venue.cpmm, venue.sqrt_price_x96, sqrt_star_x96, zero_for_one)
    return v3, v2
