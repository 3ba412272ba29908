"""Pydantic models for the split quote service."""

from __future__ import annotations

from pydantic import BaseModel, Field

from splitroute.models.types import Uint64, Uint128, Uint160
from splitroute.routing.types import SplitQuote


class SplitRequest(BaseModel):
    """Venue state and bound for a single split quote.

    ``amount`` is the spend cap on the exact-in endpoint and the output cap
    on the exact-out endpoint.
    """

    amount: Uint64 = Field(description="amountInMax or amountOutMax")
    zero_for_one: bool = Field(alias="zeroForOne", description="True when selling token0 for token1")
    sqrt_price_x96: Uint160 = Field(alias="sqrtPriceX96", description="Shared spot price (Q64.96)")
    sqrt_price_limit_x96: Uint160 = Field(alias="sqrtPriceLimitX96", description="Caller's price limit (Q64.96)")
    liquidity: Uint128 = Field(description="CLMM active liquidity")
    reserve0: Uint64 = Field(description="CPMM token0 reserve")
    reserve1: Uint64 = Field(description="CPMM token1 reserve")

    model_config = {"populate_by_name": True}

    def solver_args(self) -> tuple[int, bool, int, int, int, int, int]:
        """Positional arguments for split_for_input / split_for_output."""
        return (
            int(self.amount),
            self.zero_for_one,
            int(self.sqrt_price_x96),
            int(self.sqrt_price_limit_x96),
            int(self.liquidity),
            int(self.reserve0),
            int(self.reserve1),
        )


class SplitResponse(BaseModel):
    """Per-venue amounts of a split, plus how the solve stopped."""

    in_v3: Uint64 = Field(alias="inV3", description="Input routed to the CLMM leg")
    in_v2: Uint64 = Field(alias="inV2", description="Input routed to the CPMM leg")
    out_v3: Uint64 = Field(alias="outV3", description="Output from the CLMM leg")
    out_v2: Uint64 = Field(alias="outV2", description="Output from the CPMM leg")
    sqrt_price_x96: Uint160 = Field(alias="sqrtPriceX96", description="Stopping price (Q64.96)")
    limit_binds: bool = Field(alias="limitBinds", description="Price limit stopped the solve")
    clipped: bool = Field(description="Rounding clip trimmed a leg")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_quote(cls, quote: SplitQuote) -> SplitResponse:
        split = quote.split
        return cls(
            in_v3=split.in_v3,
            in_v2=split.in_v2,
            out_v3=split.out_v3,
            out_v2=split.out_v2,
            sqrt_price_x96=quote.sqrt_price_x96,
            limit_binds=quote.limit_binds,
            clipped=quote.clipped,
        )


class SqrtPriceRequest(BaseModel):
    """Raw amounts to turn into a Q64.96 square-root price."""

    base: Uint64 = Field(description="Base-token amount (token0)")
    quote: Uint64 = Field(description="Quote-token amount (token1)")


class SqrtPriceResponse(BaseModel):
    sqrt_price_x96: Uint160 = Field(alias="sqrtPriceX96")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """Body returned when the solver rejects a request."""

    error: str = Field(description="Error class name, e.g. InvalidLimitSide")
    detail: str
