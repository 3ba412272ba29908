"""Entry points: split one swap across a CLMM window and a CPMM.

Both entry points run the same single pass:

1. Short-circuit a zero amount to an empty split (no validation).
2. Validate field widths, non-empty venues and the limit side.
3. Solve the closed-form stopping price (input- or output-capped).
4. Back-solve per-venue amounts at that price.
5. Clip any rounding overshoot past the bound.
6. Narrow every amount into the 64-bit token domain.

Everything is a pure function of the arguments; nothing is cached.
"""

from __future__ import annotations

import structlog

from splitroute.routing.back_solve import back_solve
from splitroute.routing.clip import clip_to_bound
from splitroute.routing.guards import check_leg, narrow_split, validate_request
from splitroute.routing.stopping_price import stopping_price_for_input, stopping_price_for_output
from splitroute.routing.types import Split, SplitQuote, VenueState

logger = structlog.get_logger()


def _solve(amount: int, zero_for_one: bool, venue: VenueState, exact_in: bool) -> SplitQuote:
    if amount == 0:
        logger.debug("split_zero_amount", exact_in=exact_in)
        return SplitQuote(split=Split.zero(), sqrt_price_x96=venue.sqrt_price_x96, exact_in=exact_in)

    validate_request(amount, zero_for_one, venue)

    if exact_in:
        sqrt_star = stopping_price_for_input(amount, zero_for_one, venue)
    else:
        sqrt_star = stopping_price_for_output(amount, zero_for_one, venue)

    v3, v2 = back_solve(venue, sqrt_star, zero_for_one)
    check_leg("v3", v3)
    check_leg("v2", v2)

    v3, v2, clipped = clip_to_bound(venue, zero_for_one, v3, v2, amount, exact_in)
    split = narrow_split(v3, v2)

    return SplitQuote(
        split=split,
        sqrt_price_x96=sqrt_star,
        exact_in=exact_in,
        limit_binds=sqrt_star == venue.sqrt_price_limit_x96,
        clipped=clipped,
    )


def quote_for_input(
    amount_in_max: int,
    zero_for_one: bool,
    sqrt_price_x96: int,
    sqrt_price_limit_x96: int,
    liquidity: int,
    reserve0: int,
    reserve1: int,
) -> SplitQuote:
    """Split a spend of at most ``amount_in_max`` and report the stopping price.

    Args:
        amount_in_max: Spend cap (uint64)
        zero_for_one: True when selling token0 for token1
        sqrt_price_x96: Shared spot of both venues (Q64.96, uint160)
        sqrt_price_limit_x96: Caller's limit, strictly on the trade side of the spot
        liquidity: CLMM active liquidity (uint128)
        reserve0: CPMM token0 reserve (uint64)
        reserve1: CPMM token1 reserve (uint64)

    Returns:
        SplitQuote with ``split.total_in <= amount_in_max + 1``

    Raises:
        EmptyVenue: If liquidity or a reserve is zero
        InvalidLimitSide: If the limit is not strictly on the trade side
        DomainOverflow: If an argument or result leaves its fixed-width domain
        ZeroDenominator: If the CLMM back-solve meets a zero price product
    """
    venue = VenueState(
        sqrt_price_x96=sqrt_price_x96,
        sqrt_price_limit_x96=sqrt_price_limit_x96,
        liquidity=liquidity,
        reserve0=reserve0,
        reserve1=reserve1,
    )
    return _solve(amount_in_max, zero_for_one, venue, exact_in=True)


def quote_for_output(
    amount_out_max: int,
    zero_for_one: bool,
    sqrt_price_x96: int,
    sqrt_price_limit_x96: int,
    liquidity: int,
    reserve0: int,
    reserve1: int,
) -> SplitQuote:
    """Split a request for at most ``amount_out_max`` and report the stopping price.

    Same arguments and errors as quote_for_input, with the cap on the output
    side: ``split.total_out <= amount_out_max + 1``.
    """
    venue = VenueState(
        sqrt_price_x96=sqrt_price_x96,
        sqrt_price_limit_x96=sqrt_price_limit_x96,
        liquidity=liquidity,
        reserve0=reserve0,
        reserve1=reserve1,
    )
    return _solve(amount_out_max, zero_for_one, venue, exact_in=False)


def split_for_input(
    amount_in_max: int,
    zero_for_one: bool,
    sqrt_price_x96: int,
    sqrt_price_limit_x96: int,
    liquidity: int,
    reserve0: int,
    reserve1: int,
) -> Split:
    """Input-capped split; see quote_for_input."""
    return quote_for_input(
        amount_in_max, zero_for_one, sqrt_price_x96, sqrt_price_limit_x96, liquidity, reserve0, reserve1
    ).split


def split_for_output(
    amount_out_max: int,
    zero_for_one: bool,
    sqrt_price_x96: int,
    sqrt_price_limit_x96: int,
    liquidity: int,
    reserve0: int,
    reserve1: int,
) -> Split:
    """Output-capped split; see quote_for_output."""
    return quote_for_output(
        amount_out_max, zero_for_one, sqrt_price_x96, sqrt_price_limit_x96, liquidity, reserve0, reserve1
    ).split
