"""Concentrated-liquidity (CLMM) leg math for a single active window.

Within one window liquidity is constant, so L = dy / d(sqrtP) and the token
deltas between two prices have closed forms:

    token0: L * |sqrtB - sqrtA| / (sqrtA * sqrtB / 2^96)
    token1: L * |sqrtB - sqrtA| / 2^96

The window is assumed wide enough to hold the whole trade.
"""

from __future__ import annotations

from dataclasses import dataclass

from splitroute.amm.base import LegQuote, SplitLeg
from splitroute.math.sqrt_price import (
    amount0_delta,
    amount1_delta,
    next_sqrt_price_from_input,
    next_sqrt_price_from_output,
)


@dataclass(frozen=True)
class ConcentratedPool:
    """Active liquidity of a single-window concentrated-liquidity pool."""

    liquidity: int


class Concentrated(SplitLeg):
    """Constant-liquidity CLMM swap math inside one window."""

    def amount_in_to_price(
        self,
        liquidity: int,
        sqrt_price_x96: int,
        sqrt_target_x96: int,
        zero_for_one: bool,
    ) -> int:
        """Input token moved between the spot and the target, floored.

        Raises:
            ZeroDenominator: If a token0 delta meets a zero price product
        """
        if zero_for_one:
            return amount0_delta(sqrt_price_x96, sqrt_target_x96, liquidity)
        return amount1_delta(sqrt_price_x96, sqrt_target_x96, liquidity)

    def amount_out_to_price(
        self,
        liquidity: int,
        sqrt_price_x96: int,
        sqrt_target_x96: int,
        zero_for_one: bool,
    ) -> int:
        """Output token released between the spot and the target, floored."""
        if zero_for_one:
            return amount1_delta(sqrt_price_x96, sqrt_target_x96, liquidity)
        return amount0_delta(sqrt_price_x96, sqrt_target_x96, liquidity)

    def quote_to_price(
        self,
        pool: ConcentratedPool,
        sqrt_price_x96: int,
        sqrt_target_x96: int,
        zero_for_one: bool,
    ) -> LegQuote:
        return LegQuote(
            amount_in=self.amount_in_to_price(pool.liquidity, sqrt_price_x96, sqrt_target_x96, zero_for_one),
            amount_out=self.amount_out_to_price(pool.liquidity, sqrt_price_x96, sqrt_target_x96, zero_for_one),
            sqrt_price_x96=sqrt_target_x96,
        )

    def quote_exact_input(
        self,
        pool: ConcentratedPool,
        sqrt_price_x96: int,
        amount_in: int,
        zero_for_one: bool,
    ) -> LegQuote:
        """Re-derive the stopping price from a fixed input, then the output."""
        if amount_in == 0:
            return LegQuote.empty(sqrt_price_x96)
        sqrt_next = next_sqrt_price_from_input(sqrt_price_x96, pool.liquidity, amount_in, zero_for_one)
        return LegQuote(
            amount_in=amount_in,
            amount_out=self.amount_out_to_price(pool.liquidity, sqrt_price_x96, sqrt_next, zero_for_one),
            sqrt_price_x96=sqrt_next,
        )

    def quote_exact_output(
        self,
        pool: ConcentratedPool,
        sqrt_price_x96: int,
        amount_out: int,
        zero_for_one: bool,
    ) -> LegQuote:
        """Re-derive the stopping price from a fixed output, then the input."""
        if amount_out == 0:
            return LegQuote.empty(sqrt_price_x96)
        sqrt_next = next_sqrt_price_from_output(sqrt_price_x96, pool.liquidity, amount_out, zero_for_one)
        return LegQuote(
            amount_in=self.amount_in_to_price(pool.liquidity, sqrt_price_x96, sqrt_next, zero_for_one),
            amount_out=amount_out,
            sqrt_price_x96=sqrt_next,
        )


# Singleton instance
concentrated = Concentrated()
