"""Pydantic models for the split quote service."""

from splitroute.models.quote import (
    ErrorResponse,
    SplitRequest,
    SplitResponse,
    SqrtPriceRequest,
    SqrtPriceResponse,
)
from splitroute.models.types import Uint64, Uint128, Uint160

__all__ = [
    # Types
    "Uint64",
    "Uint128",
    "Uint160",
    # Quote models
    "SplitRequest",
    "SplitResponse",
    "SqrtPriceRequest",
    "SqrtPriceResponse",
    "ErrorResponse",
]
