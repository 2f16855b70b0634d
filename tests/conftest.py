"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from liquidity_router.api.endpoints import get_router
from liquidity_router.api.main import app
from liquidity_router.config import RouterConfig
from liquidity_router.router import LiquidityRouter
from liquidity_router.venues import ConstantProductVenue, VenueSnapshot
from tests.helpers import RAY, SOL, USDC, make_pool, make_snapshot


@pytest.fixture
def sol_usdc_pool() -> ConstantProductVenue:
    """A 1,000 SOL / 50,000 USDC pool with a 0.25% fee."""
    return make_pool("sol-usdc")


@pytest.fixture
def two_pool_snapshot() -> VenueSnapshot:
    """Two SOL/USDC pools at the same price with different depth and fees."""
    return make_snapshot(
        make_pool("deep", reserve_a=1_000 * 10**9, reserve_b=50_000 * 10**9, fee_bps=10),
        make_pool("shallow", reserve_a=750 * 10**9, reserve_b=37_500 * 10**9, fee_bps=20),
    )


@pytest.fixture
def chain_snapshot() -> VenueSnapshot:
    """SOL-USDC and USDC-RAY pools only; SOL reaches RAY through USDC."""
    return make_snapshot(
        make_pool("sol-usdc", SOL, USDC),
        make_pool("usdc-ray", USDC, RAY, reserve_a=100_000 * 10**9, reserve_b=50_000 * 10**9),
    )


@pytest.fixture
def router() -> LiquidityRouter:
    """A router with the default configuration."""
    return LiquidityRouter(RouterConfig())


@pytest.fixture
def client(router: LiquidityRouter) -> Iterator[TestClient]:
    """API client with the router dependency pinned to the default configuration."""
    app.dependency_overrides[get_router] = lambda: router
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
