"""Safe integer wrapper for split-solver arithmetic.

The solver never relies on wrapping arithmetic. Every subtraction that must
stay non-negative, every division and every narrowing into a fixed-width
domain goes through SafeInt, which raises instead of producing a silently
wrong value:
- Division by zero raises DivisionByZero
- Subtraction underflow raises Underflow
- Narrowing past 64/128/160/256 bits raises UintOverflow

Usage pattern:
    from splitroute.safe_int import S

    def cpmm_delta(reserve: int, sqrt_p0: int, sqrt_star: int) -> int:
        # Wrap at entry
        delta = S(sqrt_p0) - sqrt_star  # Raises if sqrt_star > sqrt_p0

        # Unwrap at exit, narrowed to the token domain
        return (S(reserve) * delta // sqrt_star).to_uint64()
"""

from __future__ import annotations

from splitroute.constants import UINT64_MAX, UINT128_MAX, UINT160_MAX, UINT256_MAX


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce negative result."""

    pass


class UintOverflow(SafeIntError):
    """Value does not fit the requested unsigned width."""

    def __init__(self, message: str, bits: int) -> None:
        super().__init__(message)
        self.bits = bits


class Uint256Overflow(UintOverflow):
    """Value exceeds uint256 maximum."""

    def __init__(self, message: str) -> None:
        super().__init__(message, 256)


_WIDTH_MAX = {
    64: UINT64_MAX,
    128: UINT128_MAX,
    160: UINT160_MAX,
    256: UINT256_MAX,
}


class SafeInt:
    """Integer with safe arithmetic operations.

    Wraps an integer and provides arithmetic operators that raise
    descriptive errors instead of producing invalid results. Values are
    unbounded while wrapped; width is only enforced when narrowing with
    to_uint64() / to_uint160() / to_uint256().

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return SafeInt(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"Underflow: {other} - {self._value} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> SafeInt:
        return SafeInt(other * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

    def __lshift__(self, bits: int) -> SafeInt:
        return SafeInt(self._value << bits)

    def __rshift__(self, bits: int) -> SafeInt:
        return SafeInt(self._value >> bits)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def ceiling_div(self, other: SafeInt | int) -> SafeInt:
        """Ceiling division (rounds up).

        Equivalent to: (self + other - 1) // other

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Ceiling division by zero: {self._value}")
        return SafeInt((self._value + other_val - 1) // other_val)

    def to_uint(self, bits: int) -> int:
        """Convert to int, validating it fits in ``bits`` unsigned bits.

        Raises:
            UintOverflow: If value is negative or exceeds 2^bits-1
            ValueError: If ``bits`` is not one of 64, 128, 160, 256
        """
        try:
            limit = _WIDTH_MAX[bits]
        except KeyError:
            raise ValueError(f"Unsupported width: {bits}") from None
        if self._value < 0:
            raise UintOverflow(f"Negative value cannot be uint{bits}: {self._value}", bits)
        if self._value > limit:
            if bits == 256:
                raise Uint256Overflow(f"Value exceeds uint256 max: {self._value}")
            raise UintOverflow(f"Value exceeds uint{bits} max: {self._value}", bits)
        return self._value

    def to_uint64(self) -> int:
        """Narrow to the 64-bit token domain."""
        return self.to_uint(64)

    def to_uint160(self) -> int:
        """Narrow to the sqrt-price domain."""
        return self.to_uint(160)

    def to_uint256(self) -> int:
        return self.to_uint(256)

    def is_uint(self, bits: int) -> bool:
        """Check if value fits in ``bits`` unsigned bits without raising."""
        return 0 <= self._value <= _WIDTH_MAX[bits]


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
