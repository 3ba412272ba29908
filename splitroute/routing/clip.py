"""Rounding clip: trim a split that overshoots the caller's bound.

The stopping price is floored in Q64.96, so summing the two legs can land a
unit or two past the bound. One unit over is tolerated. Anything beyond that
is taken back down to the bound itself, in venue order:

1. The CPMM leg absorbs as much as it can. Its paired amount is re-quoted
   with the exact CPMM formula (forward for exact-in, inverse for exact-out).
2. If the CPMM leg runs dry it is zeroed, and the rest comes off the CLMM
   leg. The CLMM stopping price is re-derived from the trimmed amount and
   the paired amount is re-derived from that price.
"""

from __future__ import annotations

import structlog

from splitroute.amm.base import LegQuote, SplitLeg
from splitroute.amm.concentrated import concentrated
from splitroute.amm.constant_product import constant_product
from splitroute.routing.types import VenueState
from splitroute.safe_int import S

logger = structlog.get_logger()

# Overshoot tolerated before clipping, in smallest token units
ROUNDING_TOLERANCE = 1


def _bounded_amount(leg: LegQuote, exact_in: bool) -> int:
    return leg.amount_in if exact_in else leg.amount_out


def _requote(calc: SplitLeg, pool: object, venue: VenueState, amount: int, zero_for_one: bool, exact_in: bool) -> LegQuote:
    if exact_in:
        return calc.quote_exact_input(pool, venue.sqrt_price_x96, amount, zero_for_one)
    return calc.quote_exact_output(pool, venue.sqrt_price_x96, amount, zero_for_one)


def clip_to_bound(
    venue: VenueState,
    zero_for_one: bool,
    v3: LegQuote,
    v2: LegQuote,
    bound: int,
    exact_in: bool,
) -> tuple[LegQuote, LegQuote, bool]:
    """Bring the bounded side of the split back within ``bound``.

    Args:
        venue: Shared entry state
        zero_for_one: True when token0 is sold
        v3: CLMM leg from the back-solve
        v2: CPMM leg from the back-solve
        bound: amount_in_max (exact_in) or amount_out_max (exact_out)
        exact_in: Which side of the split the bound applies to

    Returns:
        (clmm_leg, cpmm_leg, clipped)
    """
    spent = _bounded_amount(v3, exact_in) + _bounded_amount(v2, exact_in)
    if spent <= bound + ROUNDING_TOLERANCE:
        return v3, v2, False

    excess = (S(spent) - bound).value
    cpmm_amount = _bounded_amount(v2, exact_in)

    if excess <= cpmm_amount:
        trimmed = (S(cpmm_amount) - excess).value
        logger.debug(
            "split_clip_cpmm",
            exact_in=exact_in,
            bound=bound,
            spent=spent,
            excess=excess,
            cpmm_amount=trimmed,
        )
        v2 = _requote(constant_product, venue.cpmm, venue, trimmed, zero_for_one, exact_in)
        return v3, v2, True

    remainder = (S(excess) - cpmm_amount).value
    trimmed = (S(_bounded_amount(v3, exact_in)) - remainder).value
    logger.debug(
        "split_clip_clmm",
        exact_in=exact_in,
        bound=bound,
        spent=spent,
        excess=excess,
        clmm_amount=trimmed,
    )
    v2 = LegQuote.empty(venue.sqrt_price_x96)
    v3 = _requote(concentrated, venue.clmm, venue, trimmed, zero_for_one, exact_in)
    return v3, v2, True
