"""Constant-product (CPMM) leg math.

The CPMM leg uses the invariant x * y = k with no fee. When the CPMM and the
CLMM share a spot price, the CPMM reserve on the input side scales with the
inverse price move: bringing the spot from sqrtP0 to sqrtStar takes
``R_in * (sqrtP0 / sqrtStar - 1)`` of token0, or
``R_in * (sqrtStar / sqrtP0 - 1)`` of token1.
"""

from __future__ import annotations

from dataclasses import dataclass

from splitroute.amm.base import LegQuote, SplitLeg
from splitroute.errors import EmptyVenue
from splitroute.math.full_math import mul_div
from splitroute.math.sqrt_price import implied_sqrt_q96
from splitroute.safe_int import S


@dataclass(frozen=True)
class ConstantProductPool:
    """Reserves of a fee-free constant-product pool."""

    reserve0: int
    reserve1: int

    def get_reserves(self, zero_for_one: bool) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if zero_for_one:
            return self.reserve0, self.reserve1
        return self.reserve1, self.reserve0


class ConstantProduct(SplitLeg):
    """Fee-free constant-product swap math.

    Formula: amount_out = (amount_in * reserve_out) / (reserve_in + amount_in)
    """

    def get_amount_out(self, amount_in: int, reserve_in: int, reserve_out: int) -> int:
        """Output for an exact input, floored.

        Args:
            amount_in: Input token amount
            reserve_in: Reserve of input token in pool
            reserve_out: Reserve of output token in pool

        Returns:
            Output token amount
        """
        if amount_in <= 0:
            return 0
        numerator = S(amount_in) * S(reserve_out)
        denominator = S(reserve_in) + S(amount_in)
        return (numerator // denominator).value

    def get_amount_in(self, amount_out: int, reserve_in: int, reserve_out: int) -> int:
        """Exact inverse of get_amount_out: the least input yielding amount_out.

        Formula: amount_in = ceil(res_in * out / (res_out - out))

        Raises:
            EmptyVenue: If amount_out would drain the output reserve
        """
        if amount_out <= 0:
            return 0
        if amount_out >= reserve_out:
            raise EmptyVenue(f"cannot take {amount_out} from reserve {reserve_out}")
        numerator = S(reserve_in) * S(amount_out)
        denominator = S(reserve_out) - S(amount_out)
        return numerator.ceiling_div(denominator).value

    def amount_in_to_price(
        self,
        reserve_in: int,
        sqrt_price_x96: int,
        sqrt_target_x96: int,
        zero_for_one: bool,
    ) -> int:
        """Input that moves the pool spot from sqrt_price_x96 to sqrt_target_x96.

        zero_for_one: R0 * (sqrtP0 - sqrtStar) / sqrtStar
        one_for_zero: R1 * (sqrtStar - sqrtP0) / sqrtP0

        Raises:
            Underflow: If the target is on the wrong side of the spot
        """
        if zero_for_one:
            delta = S(sqrt_price_x96) - sqrt_target_x96
            return mul_div(reserve_in, delta.value, sqrt_target_x96)
        delta = S(sqrt_target_x96) - sqrt_price_x96
        return mul_div(reserve_in, delta.value, sqrt_price_x96)

    def spot_after(self, pool: ConstantProductPool, amount_in: int, amount_out: int, zero_for_one: bool) -> int:
        """Spot price implied by the reserves after a swap."""
        reserve_in, reserve_out = pool.get_reserves(zero_for_one)
        new_in = (S(reserve_in) + amount_in).value
        new_out = (S(reserve_out) - amount_out).value
        if zero_for_one:
            return implied_sqrt_q96(new_in, new_out)
        return implied_sqrt_q96(new_out, new_in)

    def quote_to_price(
        self,
        pool: ConstantProductPool,
        sqrt_price_x96: int,
        sqrt_target_x96: int,
        zero_for_one: bool,
    ) -> LegQuote:
        reserve_in, reserve_out = pool.get_reserves(zero_for_one)
        amount_in = self.amount_in_to_price(reserve_in, sqrt_price_x96, sqrt_target_x96, zero_for_one)
        amount_out = self.get_amount_out(amount_in, reserve_in, reserve_out)
        return LegQuote(amount_in=amount_in, amount_out=amount_out, sqrt_price_x96=sqrt_target_x96)

    def quote_exact_input(
        self,
        pool: ConstantProductPool,
        sqrt_price_x96: int,
        amount_in: int,
        zero_for_one: bool,
    ) -> LegQuote:
        if amount_in == 0:
            return LegQuote.empty(sqrt_price_x96)
        reserve_in, reserve_out = pool.get_reserves(zero_for_one)
        amount_out = self.get_amount_out(amount_in, reserve_in, reserve_out)
        return LegQuote(
            amount_in=amount_in,
            amount_out=amount_out,
            sqrt_price_x96=self.spot_after(pool, amount_in, amount_out, zero_for_one),
        )

    def quote_exact_output(
        self,
        pool: ConstantProductPool,
        sqrt_price_x96: int,
        amount_out: int,
        zero_for_one: bool,
    ) -> LegQuote:
        if amount_out == 0:
            return LegQuote.empty(sqrt_price_x96)
        reserve_in, reserve_out = pool.get_reserves(zero_for_one)
        amount_in = self.get_amount_in(amount_out, reserve_in, reserve_out)
        return LegQuote(
            amount_in=amount_in,
            amount_out=amount_out,
            sqrt_price_x96=self.spot_after(pool, amount_in, amount_out, zero_for_one),
        )


# Singleton instance
constant_product = ConstantProduct()
