"""Split solver error classes.

Every failure is immediate; the solver never retries. Callers treat any of
these as "no executable split under these constraints".
"""


class SplitError(Exception):
    """Base error for split solver operations."""

    pass


class EmptyVenue(SplitError):
    """A venue has nothing to route against (zero liquidity or reserve)."""

    pass


class InvalidLimitSide(SplitError):
    """Price limit is not strictly on the trade side of the spot price."""

    pass


class DomainOverflow(SplitError):
    """A value does not fit its fixed-width token or price domain."""

    def __init__(self, field: str, value: int, bits: int) -> None:
        super().__init__(f"{field} does not fit in uint{bits}: {value}")
        self.field = field
        self.value = value
        self.bits = bits


class ZeroDenominator(SplitError):
    """CLMM back-solve hit a zero price product."""

    pass
