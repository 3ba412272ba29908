"""Closed-form stopping price for a two-venue split.

Both venues start at the same spot. Moving that spot from sqrtP0 to sqrtStar
costs each venue an amount proportional to the same price factor, so the
combined curve collapses to one venue with a combined depth:

    token0 in:  dx_total = (sqrtP0 / sqrtStar - 1) * K0,  K0 = R0 + L * 2^96 / sqrtP0
    token1 in:  dy_total = (sqrtStar / sqrtP0 - 1) * K1,  K1 = R1 + L * sqrtP0 / 2^96

and the output side is the same pair with the roles swapped. Inverting these
gives the stopping price in closed form; at that price the next unit costs
the same on both venues. The limit is applied last and always wins.

K0 and K1 are never materialised with their own rounding. They are carried
scaled so that every term is an exact integer:

    K0 * sqrtP0 = R0 * sqrtP0 + L * 2^96
    K1 * 2^96   = R1 * 2^96 + L * sqrtP0
"""

from __future__ import annotations

import structlog

from splitroute.constants import Q96
from splitroute.math.full_math import mul_div
from splitroute.routing.types import VenueState
from splitroute.safe_int import S

logger = structlog.get_logger()

# Operand width of mul_div
WORD_BITS = 256


def token0_depth(venue: VenueState) -> int:
    """Combined token0 depth K0, scaled by sqrtP0."""
    return venue.reserve0 * venue.sqrt_price_x96 + venue.liquidity * Q96


def token1_depth_x96(venue: VenueState) -> int:
    """Combined token1 depth K1, scaled by 2^96."""
    return venue.reserve1 * Q96 + venue.liquidity * venue.sqrt_price_x96


def _scaled_price(sqrt_p0: int, numerator: int, denominator: int) -> int:
    """sqrtP0 * numerator / denominator, floored.

    The token1 depth carries L * sqrtP0 and can pass 256 bits. Both terms are
    then shifted down by the same amount. They differ only by an amount term
    far below the depth, so the quotient moves by at most one unit and the
    caller clamps it to the limit.
    """
    shift = max(numerator.bit_length(), denominator.bit_length()) - WORD_BITS
    if shift > 0:
        numerator >>= shift
        denominator >>= shift
    return mul_div(sqrt_p0, numerator, denominator)


def _pin_to_limit(venue: VenueState, reason: str, **context: object) -> int:
    logger.debug(
        "stopping_price_clamped_to_limit",
        sqrt_price_x96=venue.sqrt_price_x96,
        sqrt_price_limit_x96=venue.sqrt_price_limit_x96,
        reason=reason,
        **context,
    )
    return venue.sqrt_price_limit_x96


def stopping_price_for_input(amount_in: int, zero_for_one: bool, venue: VenueState) -> int:
    """Stopping price after spending ``amount_in`` across both venues.

    zero_for_one: sqrtStar = sqrtP0 / (1 + amount_in / K0), at least the limit
    one_for_zero: sqrtStar = sqrtP0 * (1 + amount_in / K1), at most the limit

    Crossing is decided on the exact rational value before any division, so
    a floored result never lands on the wrong side of the limit.
    """
    sqrt_p0 = venue.sqrt_price_x96
    sqrt_lim = venue.sqrt_price_limit_x96

    if zero_for_one:
        depth = token0_depth(venue)
        denominator = depth + amount_in * sqrt_p0
        if sqrt_p0 * depth < sqrt_lim * denominator:
            return _pin_to_limit(venue, "input_crosses_limit", amount_in=amount_in)
        return _scaled_price(sqrt_p0, depth, denominator)

    depth = token1_depth_x96(venue)
    numerator = depth + amount_in * Q96
    if sqrt_p0 * numerator > sqrt_lim * depth:
        return _pin_to_limit(venue, "input_crosses_limit", amount_in=amount_in)
    return min(_scaled_price(sqrt_p0, numerator, depth), sqrt_lim)


def stopping_price_for_output(amount_out: int, zero_for_one: bool, venue: VenueState) -> int:
    """Stopping price after taking ``amount_out`` across both venues.

    zero_for_one: sqrtStar = sqrtP0 * (C - amount_out) / C,  C = K1
    one_for_zero: sqrtStar = sqrtP0 * C / (C - amount_out),  C = K0

    An output at or past the capacity C cannot be delivered before the limit,
    so the limit binds outright.
    """
    sqrt_p0 = venue.sqrt_price_x96
    sqrt_lim = venue.sqrt_price_limit_x96

    if zero_for_one:
        capacity = token1_depth_x96(venue)
        taken = amount_out * Q96
        if taken >= capacity:
            return _pin_to_limit(venue, "output_exceeds_capacity", amount_out=amount_out)
        remaining = (S(capacity) - taken).value
        if sqrt_p0 * remaining < sqrt_lim * capacity:
            return _pin_to_limit(venue, "output_crosses_limit", amount_out=amount_out)
        return max(_scaled_price(sqrt_p0, remaining, capacity), sqrt_lim)

    capacity = token0_depth(venue)
    taken = amount_out * sqrt_p0
    if taken >= capacity:
        return _pin_to_limit(venue, "output_exceeds_capacity", amount_out=amount_out)
    remaining = (S(capacity) - taken).value
    if sqrt_p0 * capacity > sqrt_lim * remaining:
        return _pin_to_limit(venue, "output_crosses_limit", amount_out=amount_out)
    return _scaled_price(sqrt_p0, capacity, remaining)
