"""Shared type definitions for split quote models.

Integers travel over the wire as decimal strings so 64/128/160-bit values
survive JSON clients that only have doubles.
"""

from collections.abc import Callable
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from splitroute.constants import UINT64_MAX, UINT128_MAX, UINT160_MAX


def _uint_validator(bits: int, limit: int) -> Callable[[Any], str]:
    def validate(value: Any) -> str:
        """Validate that a value is a uint of the given width as a decimal string.

        Raises:
            ValueError: If value is not a non-negative integer within range
        """
        # Accept int directly (bool is an int subclass, reject it)
        if isinstance(value, int) and not isinstance(value, bool):
            int_value = value
        elif isinstance(value, str):
            try:
                int_value = int(value)
            except ValueError as err:
                raise ValueError(f"Uint{bits} must be a decimal integer string: '{value}'") from err
        else:
            raise ValueError(f"Uint{bits} must be string or int, got {type(value).__name__}")

        if int_value < 0:
            raise ValueError(f"Uint{bits} cannot be negative: {value}")
        if int_value > limit:
            raise ValueError(f"Uint{bits} overflow: {value} > 2^{bits}-1")
        return str(int_value)

    return validate


validate_uint64 = _uint_validator(64, UINT64_MAX)
validate_uint128 = _uint_validator(128, UINT128_MAX)
validate_uint160 = _uint_validator(160, UINT160_MAX)

# Token amounts and CPMM reserves
Uint64 = Annotated[
    str,
    BeforeValidator(validate_uint64),
    Field(description="64-bit unsigned integer as decimal string"),
]

# CLMM liquidity
Uint128 = Annotated[
    str,
    BeforeValidator(validate_uint128),
    Field(description="128-bit unsigned integer as decimal string"),
]

# Q64.96 square-root prices
Uint160 = Annotated[
    str,
    BeforeValidator(validate_uint160),
    Field(description="160-bit unsigned integer as decimal string"),
]
