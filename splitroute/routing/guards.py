"""Precondition checks and 64-bit narrowing for the split solver.

Token ledgers downstream are fixed at 64 bits, so every amount that leaves
the solver is narrowed with an explicit check. Truncation would silently
misstate the trade; overflow is surfaced as DomainOverflow instead.
"""

from __future__ import annotations

from splitroute.amm.base import LegQuote
from splitroute.errors import DomainOverflow, EmptyVenue, InvalidLimitSide
from splitroute.routing.types import Split, VenueState
from splitroute.safe_int import S, UintOverflow


def narrow(field: str, value: int, bits: int = 64) -> int:
    """Narrow ``value`` to ``bits`` unsigned bits.

    Raises:
        DomainOverflow: If the value is negative or too wide
    """
    try:
        return S(value).to_uint(bits)
    except UintOverflow as err:
        raise DomainOverflow(field, value, bits) from err


def check_domains(amount: int, venue: VenueState) -> None:
    """Validate the width of every request field."""
    narrow("amount", amount)
    narrow("sqrt_price_x96", venue.sqrt_price_x96, 160)
    narrow("sqrt_price_limit_x96", venue.sqrt_price_limit_x96, 160)
    narrow("liquidity", venue.liquidity, 128)
    narrow("reserve0", venue.reserve0)
    narrow("reserve1", venue.reserve1)


def check_venues(venue: VenueState) -> None:
    """Both venues must hold something to route against.

    Raises:
        EmptyVenue: If L, R0 or R1 is zero
    """
    if venue.liquidity == 0:
        raise EmptyVenue("CLMM liquidity is zero")
    if venue.reserve0 == 0 or venue.reserve1 == 0:
        raise EmptyVenue(f"CPMM reserves are empty: ({venue.reserve0}, {venue.reserve1})")


def check_limit_side(venue: VenueState, zero_for_one: bool) -> None:
    """The limit must lie strictly below the spot when selling token0, above otherwise.

    Raises:
        InvalidLimitSide: If the limit is on the spot or past it the wrong way
    """
    if zero_for_one and venue.sqrt_price_limit_x96 >= venue.sqrt_price_x96:
        raise InvalidLimitSide(
            f"limit {venue.sqrt_price_limit_x96} must be below spot {venue.sqrt_price_x96} for token0 -> token1"
        )
    if not zero_for_one and venue.sqrt_price_limit_x96 <= venue.sqrt_price_x96:
        raise InvalidLimitSide(
            f"limit {venue.sqrt_price_limit_x96} must be above spot {venue.sqrt_price_x96} for token1 -> token0"
        )


def validate_request(amount: int, zero_for_one: bool, venue: VenueState) -> None:
    """Run every precondition in order: domains, venues, limit side."""
    check_domains(amount, venue)
    check_venues(venue)
    check_limit_side(venue, zero_for_one)


def check_leg(name: str, leg: LegQuote) -> None:
    """Fail fast when an intermediate leg amount leaves the token domain."""
    narrow(f"in_{name}", leg.amount_in)
    narrow(f"out_{name}", leg.amount_out)


def narrow_split(v3: LegQuote, v2: LegQuote) -> Split:
    """Build the 64-bit Split from the two legs."""
    return Split(
        in_v3=narrow("in_v3", v3.amount_in),
        in_v2=narrow("in_v2", v2.amount_in),
        out_v3=narrow("out_v3", v3.amount_out),
        out_v2=narrow("out_v2", v2.amount_out),
    )
