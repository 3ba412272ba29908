"""Full-precision 256-bit multiply-divide and integer square root.

This module mirrors the word-level behaviour of the on-chain FullMath library:
operands are 256-bit words, the product is carried as a 512-bit (prod1, prod0)
pair, and a quotient that does not fit back into 256 bits is rejected rather
than truncated. Python integers are unbounded, so every word operation below
is masked explicitly to keep results bit-identical to the 256-bit reference.
"""

from __future__ import annotations

from splitroute.constants import UINT256_MAX
from splitroute.safe_int import DivisionByZero, SafeIntError, Uint256Overflow

__all__ = [
    "MulDivOverflow",
    "mul_div",
    "mul_div_rounding_up",
    "isqrt",
]

_MASK = UINT256_MAX
_WORD_BITS = 256

# Newton steps for the modular inverse: the seed is correct to 4 bits and each
# step doubles that, so six steps reach 256 bits.
_INVERSE_STEPS = 6


class MulDivOverflow(SafeIntError):
    """Quotient of a full-precision multiply-divide exceeds 256 bits."""

    pass


def _require_word(name: str, value: int) -> None:
    if value < 0 or value > _MASK:
        raise Uint256Overflow(f"{name} is not a uint256 word: {value}")


def _mul512(a: int, b: int) -> tuple[int, int]:
    """Return the 512-bit product of two words as (prod0, prod1) = (low, high)."""
    product = a * b
    return product & _MASK, product >> _WORD_BITS


def mul_div(a: int, b: int, denominator: int) -> int:
    """Calculate floor(a * b / denominator) without intermediate truncation.

    The product may exceed 256 bits; the quotient may not.

    Args:
        a: Multiplicand (uint256)
        b: Multiplier (uint256)
        denominator: Divisor (uint256, non-zero)

    Returns:
        The 256-bit floored quotient

    Raises:
        DivisionByZero: If denominator is zero
        MulDivOverflow: If the quotient does not fit in 256 bits
        Uint256Overflow: If an operand is not a uint256 word
    """
    _require_word("a", a)
    _require_word("b", b)
    _require_word("denominator", denominator)
    if denominator == 0:
        raise DivisionByZero(f"mul_div by zero: {a} * {b} // 0")

    prod0, prod1 = _mul512(a, b)

    # Short-circuit: the product fits in one word
    if prod1 == 0:
        return prod0 // denominator

    # The high word must be strictly below the denominator or the quotient
    # spills past 256 bits
    if denominator <= prod1:
        raise MulDivOverflow(f"mul_div overflow: {a} * {b} // {denominator}")

    # Make the 512-bit value exactly divisible by subtracting the remainder
    remainder = (a * b) % denominator
    if remainder > prod0:
        prod1 -= 1
    prod0 = (prod0 - remainder) & _MASK

    # Strip the power of two out of the denominator
    twos = denominator & -denominator
    denominator //= twos
    prod0 //= twos

    # Shift in the bits of prod1: twos becomes 2^256 / twos
    twos = ((0 - twos) & _MASK) // twos + 1
    prod0 |= (prod1 * twos) & _MASK

    # Denominator is now odd, so it has an inverse modulo 2^256
    inv = ((3 * denominator) ^ 2) & _MASK
    for _ in range(_INVERSE_STEPS):
        inv = (inv * (2 - denominator * inv)) & _MASK

    return (prod0 * inv) & _MASK


def mul_div_rounding_up(a: int, b: int, denominator: int) -> int:
    """Calculate ceil(a * b / denominator) with full precision.

    Raises:
        DivisionByZero: If denominator is zero
        MulDivOverflow: If the rounded quotient does not fit in 256 bits
    """
    result = mul_div(a, b, denominator)
    if (a * b) % denominator > 0:
        if result >= _MASK:
            raise MulDivOverflow(f"mul_div_rounding_up overflow: {a} * {b} // {denominator}")
        result += 1
    return result


def isqrt(x: int) -> int:
    """Exact floor square root of a uint256.

    Seeds Newton-Raphson with the power of two 2^ceil(bits/2), which is never
    below the root, so the iterates decrease monotonically onto the floor.
    A final check steps back by one if the last iterate overshot.

    Raises:
        Uint256Overflow: If x is negative or wider than 256 bits
    """
    _require_word("x", x)
    if x < 2:
        return x

    z = 1 << ((x.bit_length() + 1) >> 1)
    # Strictly decreasing from a seed within 2x of the root; quadratic
    # convergence ends it in a few steps for 256-bit x.
    while True:
        y = (z + x // z) >> 1
        if y >= z:
            break
        z = y

    if z * z > x:
        z -= 1
    return z
