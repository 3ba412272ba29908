"""Mathematical primitives for the split solver.

This package provides the integer kernels every price computation is built on:
- full_math: 512-bit-safe multiply-divide and exact integer square root
- sqrt_price: Q64.96 price stepping and token deltas for a single CLMM window
"""

from splitroute.math.full_math import MulDivOverflow, isqrt, mul_div, mul_div_rounding_up
from splitroute.math.sqrt_price import implied_sqrt_q96

__all__ = ["MulDivOverflow", "isqrt", "mul_div", "mul_div_rounding_up", "implied_sqrt_q96"]
