"""Integration tests for the split quote API."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from splitroute.api.main import MAX_REQUEST_SIZE, app
from splitroute.constants import Q96
from tests.helpers import make_split_request


@pytest.fixture
def client() -> Iterator[TestClient]:
    """Create a test client for the API."""
    yield TestClient(app)


class TestHealthEndpoint:
    def test_health_returns_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestSplitEndpoints:
    """Tests for /split/exact-in and /split/exact-out."""

    def test_exact_in(self, client):
        response = client.post("/split/exact-in", json=make_split_request(amount=50_000))
        assert response.status_code == 200
        assert response.json() == {
            "inV3": "45454",
            "inV2": "4545",
            "outV3": "45248",
            "outV2": "4524",
            "sqrtPriceX96": str(Q96 * 220 // 221),
            "limitBinds": False,
            "clipped": False,
        }

    def test_exact_out(self, client):
        response = client.post("/split/exact-out", json=make_split_request(amount=40_000, zero_for_one=False))
        assert response.status_code == 200
        data = response.json()
        assert (data["inV3"], data["inV2"], data["outV3"], data["outV2"]) == ("36496", "3649", "36363", "3635")
        assert data["sqrtPriceX96"] == str(Q96 * 275 // 274)

    def test_limit_binds_reported(self, client):
        response = client.post("/split/exact-in", json=make_split_request(amount=10_000_000))
        assert response.status_code == 200
        assert response.json()["limitBinds"] is True

    def test_zero_amount(self, client):
        response = client.post("/split/exact-out", json=make_split_request(amount=0))
        assert response.status_code == 200
        assert response.json()["outV3"] == "0"


class TestSolverRejections:
    """Solver errors come back as 422 ErrorResponse bodies."""

    def test_invalid_limit_side(self, client):
        body = make_split_request(sqrt_price_limit_x96=2 * Q96)
        response = client.post("/split/exact-in", json=body)
        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "InvalidLimitSide"
        assert "must be below spot" in data["detail"]

    def test_empty_venue(self, client):
        response = client.post("/split/exact-out", json=make_split_request(liquidity=0))
        assert response.status_code == 422
        assert response.json()["error"] == "EmptyVenue"

    def test_domain_overflow(self, client):
        body = make_split_request(
            amount=2 * 10**18 - 1,
            zero_for_one=False,
            sqrt_price_limit_x96=2**150,
            liquidity=10**18,
            reserve0=10**18,
            reserve1=10**18,
        )
        response = client.post("/split/exact-out", json=body)
        assert response.status_code == 422
        assert response.json()["error"] == "DomainOverflow"


class TestRequestValidation:
    """Malformed requests are rejected by the schema before the solver runs."""

    def test_missing_field(self, client):
        body = make_split_request()
        del body["sqrtPriceX96"]
        response = client.post("/split/exact-in", json=body)
        assert response.status_code == 422
        assert "detail" in response.json()

    def test_negative_amount(self, client):
        response = client.post("/split/exact-in", json=make_split_request(amount=-1))
        assert response.status_code == 422

    def test_oversized_request_returns_413(self, client):
        response = client.post(
            "/split/exact-in",
            json=make_split_request(),
            headers={"Content-Length": str(MAX_REQUEST_SIZE + 1)},
        )
        assert response.status_code == 413
        assert response.json()["detail"] == "Request too large"


class TestSqrtPriceEndpoint:
    def test_perfect_square(self, client):
        response = client.post("/sqrt-price", json={"base": "1", "quote": "4"})
        assert response.status_code == 200
        assert response.json() == {"sqrtPriceX96": str(2 * Q96)}

    def test_zero_base(self, client):
        response = client.post("/sqrt-price", json={"base": "0", "quote": "4"})
        assert response.status_code == 422
        assert response.json()["error"] == "EmptyVenue"
