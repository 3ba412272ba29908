"""Two-venue split routing.

This module provides the solver that splits one swap between a single-window
CLMM and a fee-free CPMM sharing a spot price:
- stopping_price: closed-form stopping price for input or output caps
- back_solve: per-venue amounts at a stopping price
- clip: rounding correction against the caller's bound
- guards: preconditions and 64-bit narrowing
- split: the public entry points
"""

from splitroute.routing.split import quote_for_input, quote_for_output, split_for_input, split_for_output
from splitroute.routing.types import Split, SplitQuote, VenueState

__all__ = [
    "Split",
    "SplitQuote",
    "VenueState",
    "quote_for_input",
    "quote_for_output",
    "split_for_input",
    "split_for_output",
]
