"""Base classes for the two venue legs of a split."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LegQuote:
    """Amounts routed through one venue, and the venue price they imply."""

    amount_in: int
    amount_out: int
    # Venue spot after the leg executes (Q64.96)
    sqrt_price_x96: int

    @classmethod
    def empty(cls, sqrt_price_x96: int) -> "LegQuote":
        """A leg that routes nothing and leaves the price where it is."""
        return cls(amount_in=0, amount_out=0, sqrt_price_x96=sqrt_price_x96)


class SplitLeg(ABC):
    """Swap math for one venue of a two-venue split.

    Every venue starts at the shared spot ``sqrt_price_x96``. The back-solver
    asks each leg what it takes to move that spot to a common stopping price;
    the clip pass asks for exact-input or exact-output re-quotes after it
    trims a leg.
    """

    @abstractmethod
    def quote_to_price(
        self,
        pool: Any,
        sqrt_price_x96: int,
        sqrt_target_x96: int,
        zero_for_one: bool,
    ) -> LegQuote:
        """Input needed to move the spot to the target, and the output it buys.

        Args:
            pool: Venue state
            sqrt_price_x96: Shared spot price before the trade
            sqrt_target_x96: Stopping price, on the trade side of the spot
            zero_for_one: True when token0 is sold

        Returns:
            LegQuote whose price is the target
        """
        ...

    @abstractmethod
    def quote_exact_input(
        self,
        pool: Any,
        sqrt_price_x96: int,
        amount_in: int,
        zero_for_one: bool,
    ) -> LegQuote:
        """Output and resulting price for a fixed input."""
        ...

    @abstractmethod
    def quote_exact_output(
        self,
        pool: Any,
        sqrt_price_x96: int,
        amount_out: int,
        zero_for_one: bool,
    ) -> LegQuote:
        """Required input and resulting price for a fixed output."""
        ...
