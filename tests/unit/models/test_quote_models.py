"""Tests for the request and response models."""

import pytest
from pydantic import ValidationError

from splitroute.constants import Q96, UINT64_MAX, UINT128_MAX, UINT160_MAX
from splitroute.models.quote import ErrorResponse, SplitRequest, SplitResponse, SqrtPriceRequest, SqrtPriceResponse
from splitroute.models.types import validate_uint64, validate_uint128, validate_uint160
from splitroute.routing.types import Split, SplitQuote
from tests.helpers import SQRT_PRICE_081, make_split_request


class TestUintValidators:
    """Tests for the decimal-string integer validators."""

    def test_accepts_int_and_string(self):
        assert validate_uint64(42) == "42"
        assert validate_uint64("42") == "42"

    def test_bounds(self):
        assert validate_uint64(UINT64_MAX) == str(UINT64_MAX)
        assert validate_uint128(UINT128_MAX) == str(UINT128_MAX)
        assert validate_uint160(UINT160_MAX) == str(UINT160_MAX)

    @pytest.mark.parametrize(
        ("validator", "value"),
        [
            (validate_uint64, UINT64_MAX + 1),
            (validate_uint128, str(UINT128_MAX + 1)),
            (validate_uint160, UINT160_MAX + 1),
        ],
    )
    def test_overflow(self, validator, value):
        with pytest.raises(ValueError, match="overflow"):
            validator(value)

    @pytest.mark.parametrize("value", [-1, "-5", "1.5", "abc", 1.0, None, True])
    def test_rejects(self, value):
        with pytest.raises(ValueError):
            validate_uint64(value)


class TestSplitRequest:
    """Tests for SplitRequest parsing."""

    def test_parse_camel_case(self):
        request = SplitRequest.model_validate(make_split_request())
        assert request.amount == "50000"
        assert request.zero_for_one is True
        assert request.sqrt_price_x96 == str(Q96)
        assert request.sqrt_price_limit_x96 == str(SQRT_PRICE_081)
        assert request.liquidity == "10000000"

    def test_populate_by_name(self):
        request = SplitRequest(
            amount=1,
            zero_for_one=False,
            sqrt_price_x96=Q96,
            sqrt_price_limit_x96=2 * Q96,
            liquidity=1,
            reserve0=1,
            reserve1=1,
        )
        assert request.sqrt_price_limit_x96 == str(2 * Q96)

    def test_solver_args(self):
        request = SplitRequest.model_validate(make_split_request())
        assert request.solver_args() == (50_000, True, Q96, SQRT_PRICE_081, 10_000_000, 1_000_000, 1_000_000)

    def test_amount_overflow_rejected(self):
        with pytest.raises(ValidationError):
            SplitRequest.model_validate(make_split_request(amount=UINT64_MAX + 1))

    def test_missing_field_rejected(self):
        body = make_split_request()
        del body["reserve1"]
        with pytest.raises(ValidationError):
            SplitRequest.model_validate(body)


class TestResponses:
    """Tests for response serialization."""

    def test_split_response_from_quote(self):
        quote = SplitQuote(
            split=Split(in_v3=3, in_v2=2, out_v3=1, out_v2=0),
            sqrt_price_x96=Q96,
            exact_in=True,
            limit_binds=True,
        )
        data = SplitResponse.from_quote(quote).model_dump(by_alias=True)
        assert data == {
            "inV3": "3",
            "inV2": "2",
            "outV3": "1",
            "outV2": "0",
            "sqrtPriceX96": str(Q96),
            "limitBinds": True,
            "clipped": False,
        }

    def test_sqrt_price_models(self):
        request = SqrtPriceRequest.model_validate({"base": "1", "quote": 4})
        assert (request.base, request.quote) == ("1", "4")
        assert SqrtPriceResponse(sqrt_price_x96=Q96).model_dump(by_alias=True) == {"sqrtPriceX96": str(Q96)}

    def test_error_response(self):
        body = ErrorResponse(error="EmptyVenue", detail="CLMM liquidity is zero")
        assert body.model_dump() == {"error": "EmptyVenue", "detail": "CLMM liquidity is zero"}
