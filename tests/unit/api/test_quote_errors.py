"""Unit tests for quote endpoint error handling."""

import json
import time
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from liquidity_router.api import endpoints
from liquidity_router.api.endpoints import get_router
from liquidity_router.api.main import app
from liquidity_router.constants import MAX_REQUEST_BYTES, MAX_VENUES_PER_REQUEST
from liquidity_router.router import LiquidityRouter
from tests.helpers import RAY, SOL, USDC, pool_payload, quote_payload


@pytest.fixture
def mock_client():
    """Create a test client; tests install their own router override."""
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestQuoteRejections:
    def test_no_route_returns_404(self, client):
        response = client.post(
            "/quote", json=quote_payload([pool_payload("usdc-ray", USDC, RAY)])
        )
        assert response.status_code == 404
        assert response.json()["detail"] == f"No route from {SOL} to {USDC}"

    def test_same_token_returns_422(self, client):
        response = client.post("/quote", json=quote_payload(token_out=SOL))
        assert response.status_code == 422

    def test_zero_amount_returns_422(self, client):
        response = client.post("/quote", json=quote_payload(amount_in=0))
        assert response.status_code == 422

    def test_bad_schema_returns_422(self, client):
        response = client.post("/quote", json={"tokenIn": SOL})
        assert response.status_code == 422

    def test_oversized_request_returns_413(self, client):
        response = client.post(
            "/quote",
            json=quote_payload(),
            headers={"Content-Length": str(20 * 1024 * 1024)},
        )
        assert response.status_code == 413
        assert str(MAX_VENUES_PER_REQUEST) in response.json()["detail"]

    def test_too_many_venues_returns_422(self, client):
        venues = [pool_payload(f"pool-{i}") for i in range(MAX_VENUES_PER_REQUEST + 1)]
        response = client.post("/quote", json=quote_payload(venues))
        assert response.status_code == 422

    def test_largest_allowed_snapshot_fits_the_body_limit(self):
        venues = [pool_payload(f"pool-{i:04d}") for i in range(MAX_VENUES_PER_REQUEST)]
        body = json.dumps(quote_payload(venues)).encode()
        assert len(body) <= MAX_REQUEST_BYTES


class TestRouterFailures:
    def test_slow_router_returns_504(self, mock_client, monkeypatch):
        """Routing that overruns the timeout is abandoned."""
        monkeypatch.setattr(endpoints, "QUOTE_TIMEOUT_SECONDS", 0.05)

        def slow_find_routes(*_args, **_kwargs):
            time.sleep(0.5)
            return []

        mock_router = MagicMock(spec=LiquidityRouter)
        mock_router.find_routes.side_effect = slow_find_routes
        app.dependency_overrides[get_router] = lambda: mock_router

        response = mock_client.post("/quote", json=quote_payload())
        assert response.status_code == 504
        assert response.json()["detail"] == "Routing timed out"

    def test_unexpected_error_returns_500(self, mock_client):
        """Unexpected failures are logged and reported without internals."""
        mock_router = MagicMock(spec=LiquidityRouter)
        mock_router.find_routes.side_effect = RuntimeError("Boom! This should be caught.")
        app.dependency_overrides[get_router] = lambda: mock_router

        response = mock_client.post("/quote", json=quote_payload())
        assert response.status_code == 500
        assert "Boom" not in response.json()["detail"]

    def test_arguments_reach_router(self, mock_client):
        mock_router = MagicMock(spec=LiquidityRouter)
        mock_router.find_routes.return_value = []
        app.dependency_overrides[get_router] = lambda: mock_router

        mock_client.post("/quote", json=quote_payload(amount_in=42, strategy="split", maxHops=3))

        args, kwargs = mock_router.find_routes.call_args
        assert args[1:] == (SOL, USDC, 42)
        assert kwargs["max_hops"] == 3
        assert [s.value for s in kwargs["strategies"]] == ["split"]
