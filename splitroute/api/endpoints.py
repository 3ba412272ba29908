"""API endpoints for the split quote service."""

import structlog
from fastapi import APIRouter

from splitroute.math.sqrt_price import implied_sqrt_q96
from splitroute.models.quote import (
    ErrorResponse,
    SplitRequest,
    SplitResponse,
    SqrtPriceRequest,
    SqrtPriceResponse,
)
from splitroute.routing.split import quote_for_input, quote_for_output

logger = structlog.get_logger()

router = APIRouter()

# Solver rejections are returned as 422 with an ErrorResponse body
ERROR_RESPONSES: dict[int | str, dict[str, object]] = {422: {"model": ErrorResponse}}


@router.post("/split/exact-in", responses=ERROR_RESPONSES)
def split_exact_in(request: SplitRequest) -> SplitResponse:
    """Split a spend of at most ``amount`` across the CLMM and CPMM legs.

    Runs inline: the solve is a single pure integer pass.

    Error Handling:
        - Invalid request schema: 422 Validation Error (Pydantic)
        - Solver rejection (empty venue, limit side, overflow): 422 ErrorResponse
    """
    logger.info(
        "received_split_quote",
        mode="exact_in",
        amount=request.amount,
        zero_for_one=request.zero_for_one,
    )
    response = SplitResponse.from_quote(quote_for_input(*request.solver_args()))
    logger.info(
        "returning_split_quote",
        mode="exact_in",
        total_in=int(response.in_v3) + int(response.in_v2),
        limit_binds=response.limit_binds,
        clipped=response.clipped,
    )
    return response


@router.post("/split/exact-out", responses=ERROR_RESPONSES)
def split_exact_out(request: SplitRequest) -> SplitResponse:
    """Split a request for at most ``amount`` of output across both legs."""
    logger.info(
        "received_split_quote",
        mode="exact_out",
        amount=request.amount,
        zero_for_one=request.zero_for_one,
    )
    response = SplitResponse.from_quote(quote_for_output(*request.solver_args()))
    logger.info(
        "returning_split_quote",
        mode="exact_out",
        total_out=int(response.out_v3) + int(response.out_v2),
        limit_binds=response.limit_binds,
        clipped=response.clipped,
    )
    return response


@router.post("/sqrt-price", responses=ERROR_RESPONSES)
def sqrt_price(request: SqrtPriceRequest) -> SqrtPriceResponse:
    """Q64.96 square root of quote/base, e.g. a CPMM spot from its reserves."""
    return SqrtPriceResponse(sqrt_price_x96=implied_sqrt_q96(int(request.base), int(request.quote)))
