"""Optimal two-venue trade splitting between a CLMM window and a CPMM."""

from splitroute.errors import DomainOverflow, EmptyVenue, InvalidLimitSide, SplitError, ZeroDenominator
from splitroute.math.sqrt_price import implied_sqrt_q96
from splitroute.routing import (
    Split,
    SplitQuote,
    VenueState,
    quote_for_input,
    quote_for_output,
    split_for_input,
    split_for_output,
)

__version__ = "0.1.0"
__all__ = [
    "Split",
    "SplitQuote",
    "VenueState",
    "split_for_input",
    "split_for_output",
    "quote_for_input",
    "quote_for_output",
    "implied_sqrt_q96",
    "SplitError",
    "EmptyVenue",
    "InvalidLimitSide",
    "DomainOverflow",
    "ZeroDenominator",
    "__version__",
]
