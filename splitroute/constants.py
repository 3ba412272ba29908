"""Fixed-point and integer-width constants for the split solver.

Prices are square roots in Q64.96: an unsigned integer whose real value is
``sqrt_price_x96 / 2**96``. Token amounts live in the 64-bit ledger domain.
"""

# Q64.96 resolution
RESOLUTION = 96
Q96 = 1 << RESOLUTION
Q192 = 1 << (2 * RESOLUTION)

# Integer widths of the external interface
UINT64_MAX = 2**64 - 1  # token amounts and CPMM reserves
UINT128_MAX = 2**128 - 1  # CLMM liquidity
UINT160_MAX = 2**160 - 1  # sqrt prices
UINT256_MAX = 2**256 - 1  # full-math operands and quotients

__all__ = [
    "RESOLUTION",
    "Q96",
    "Q192",
    "UINT64_MAX",
    "UINT128_MAX",
    "UINT160_MAX",
    "UINT256_MAX",
]
