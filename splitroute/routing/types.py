"""Type definitions for the split solver."""

from __future__ import annotations

from dataclasses import dataclass

from splitroute.amm.concentrated import ConcentratedPool
from splitroute.amm.constant_product import ConstantProductPool


@dataclass(frozen=True)
class VenueState:
    """Entry state shared by both venues at the moment of the trade.

    Both venues start at the same spot ``sqrt_price_x96``; the caller's limit
    must sit strictly on the trade side of it.
    """

    sqrt_price_x96: int
    sqrt_price_limit_x96: int
    liquidity: int  # CLMM: dy / d(sqrtP) inside the active window
    reserve0: int  # CPMM token0 reserve
    reserve1: int  # CPMM token1 reserve

    @property
    def clmm(self) -> ConcentratedPool:
        return ConcentratedPool(liquidity=self.liquidity)

    @property
    def cpmm(self) -> ConstantProductPool:
        return ConstantProductPool(reserve0=self.reserve0, reserve1=self.reserve1)

    def get_reserves(self, zero_for_one: bool) -> tuple[int, int]:
        """Get CPMM reserves ordered as (reserve_in, reserve_out)."""
        return self.cpmm.get_reserves(zero_for_one)


@dataclass(frozen=True)
class Split:
    """Per-venue amounts of a two-venue split, all within uint64.

    ``v3`` is the concentrated-liquidity leg, ``v2`` the constant-product leg.
    Outputs are always derived from the inputs and the venue state.
    """

    in_v3: int
    in_v2: int
    out_v3: int
    out_v2: int

    @property
    def total_in(self) -> int:
        return self.in_v3 + self.in_v2

    @property
    def total_out(self) -> int:
        return self.out_v3 + self.out_v2

    @classmethod
    def zero(cls) -> Split:
        """A split that routes nothing."""
        return cls(in_v3=0, in_v2=0, out_v3=0, out_v2=0)


@dataclass(frozen=True)
class SplitQuote:
    """A split together with the stopping price it was solved at."""

    split: Split
    sqrt_price_x96: int  # Stopping price before any clip re-quote
    exact_in: bool
    # True when the caller's price limit, not the amount bound, stopped the solve
    limit_binds: bool = False
    # True when the rounding clip trimmed a leg
    clipped: bool = False


__all__ = ["VenueState", "Split", "SplitQuote"]
