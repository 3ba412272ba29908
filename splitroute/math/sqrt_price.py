"""Q64.96 square-root price math for a single-window CLMM.

Token deltas between two prices, and the price reached after adding or
removing an amount of either token at constant liquidity. Prices only move
within one window; crossing initialized ticks is not modelled.

Rounding follows the usual pool convention: the next price is rounded so the
pool never delivers more than the liquidity backs.
"""

from __future__ import annotations

from splitroute.constants import Q96, Q192, RESOLUTION
from splitroute.errors import DomainOverflow, EmptyVenue, ZeroDenominator
from splitroute.math.full_math import isqrt, mul_div, mul_div_rounding_up
from splitroute.safe_int import S

__all__ = [
    "implied_sqrt_q96",
    "amount0_delta",
    "amount1_delta",
    "next_sqrt_price_from_amount0_rounding_up",
    "next_sqrt_price_from_amount1_rounding_down",
    "next_sqrt_price_from_input",
    "next_sqrt_price_from_output",
]


def implied_sqrt_q96(base: int, quote: int) -> int:
    """Square root of quote/base in Q64.96.

    Used to build a spot price from raw reserves: for a CPMM with reserves
    (R0, R1) the shared spot is ``implied_sqrt_q96(R0, R1)``.

    Args:
        base: Base-token amount (token0 reserve)
        quote: Quote-token amount (token1 reserve)

    Returns:
        floor(sqrt(quote / base) * 2^96)

    Raises:
        EmptyVenue: If base is zero
        DomainOverflow: If the root does not fit in 160 bits
    """
    if base == 0:
        raise EmptyVenue("implied price needs a non-zero base amount")
    ratio_x192 = mul_div(quote, Q192, base)
    root = isqrt(ratio_x192)
    if not S(root).is_uint(160):
        raise DomainOverflow("sqrt_price_x96", root, 160)
    return root


def _ordered(sqrt_a: int, sqrt_b: int) -> tuple[int, int]:
    return (sqrt_a, sqrt_b) if sqrt_a <= sqrt_b else (sqrt_b, sqrt_a)


def amount0_delta(sqrt_a: int, sqrt_b: int, liquidity: int) -> int:
    """Token0 moved between two prices: L * |b - a| / (a * b / 2^96), floored.

    Raises:
        ZeroDenominator: If the price product floors to zero
    """
    lower, upper = _ordered(sqrt_a, sqrt_b)
    denominator = mul_div(lower, upper, Q96)
    if denominator == 0:
        raise ZeroDenominator(f"price product is zero: {lower} * {upper} / 2^96")
    return mul_div(liquidity, (S(upper) - lower).value, denominator)


def amount1_delta(sqrt_a: int, sqrt_b: int, liquidity: int) -> int:
    """Token1 moved between two prices: L * |b - a| / 2^96, floored."""
    lower, upper = _ordered(sqrt_a, sqrt_b)
    return mul_div(liquidity, (S(upper) - lower).value, Q96)


def next_sqrt_price_from_amount0_rounding_up(sqrt_price_x96: int, liquidity: int, amount: int, add: bool) -> int:
    """Price after adding (price falls) or removing (price rises) token0.

    Computes L * sqrtP / (L ± amount * sqrtP) with L scaled by 2^96, rounded up.

    Raises:
        EmptyVenue: If removing at least the whole token0 side of the window
    """
    if amount == 0:
        return sqrt_price_x96
    numerator1 = liquidity << RESOLUTION
    product = amount * sqrt_price_x96
    if add:
        return mul_div_rounding_up(numerator1, sqrt_price_x96, numerator1 + product)
    if product >= numerator1:
        raise EmptyVenue(f"cannot remove {amount} token0 from liquidity {liquidity}")
    return mul_div_rounding_up(numerator1, sqrt_price_x96, numerator1 - product)


def next_sqrt_price_from_amount1_rounding_down(sqrt_price_x96: int, liquidity: int, amount: int, add: bool) -> int:
    """Price after adding (price rises) or removing (price falls) token1.

    Computes sqrtP ± amount * 2^96 / L, rounded down.

    Raises:
        EmptyVenue: If removing at least the whole token1 side of the window
    """
    if add:
        return sqrt_price_x96 + mul_div(amount, Q96, liquidity)
    quotient = mul_div_rounding_up(amount, Q96, liquidity)
    if quotient >= sqrt_price_x96:
        raise EmptyVenue(f"cannot remove {amount} token1 from liquidity {liquidity}")
    return sqrt_price_x96 - quotient


def next_sqrt_price_from_input(sqrt_price_x96: int, liquidity: int, amount_in: int, zero_for_one: bool) -> int:
    """Price after swapping ``amount_in`` into the window."""
    if zero_for_one:
        return next_sqrt_price_from_amount0_rounding_up(sqrt_price_x96, liquidity, amount_in, add=True)
    return next_sqrt_price_from_amount1_rounding_down(sqrt_price_x96, liquidity, amount_in, add=True)


def next_sqrt_price_from_output(sqrt_price_x96: int, liquidity: int, amount_out: int, zero_for_one: bool) -> int:
    """Price after taking ``amount_out`` of the output token from the window."""
    if zero_for_one:
        return next_sqrt_price_from_amount1_rounding_down(sqrt_price_x96, liquidity, amount_out, add=False)
    return next_sqrt_price_from_amount0_rounding_up(sqrt_price_x96, liquidity, amount_out, add=False)
