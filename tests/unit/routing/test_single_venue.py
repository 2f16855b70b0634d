"""Tests for the single-venue router."""

import pytest

from liquidity_router.amm.constant_product import quote_output
from liquidity_router.errors import InvalidRequest, NoRouteFound
from liquidity_router.routing import SingleVenueRouter, Strategy
from liquidity_router.venues import VenueSnapshot
from tests.helpers import (
    ONE_SOL,
    RAY,
    SOL,
    SOL_RESERVE,
    USDC,
    USDC_RESERVE,
    make_orderbook,
    make_pool,
    make_snapshot,
)


@pytest.fixture
def single_router() -> SingleVenueRouter:
    return SingleVenueRouter()


class TestFindBestRoute:
    """Tests for SingleVenueRouter.find_best_route."""

    def test_single_pool(self, single_router, sol_usdc_pool):
        route = single_router.find_best_route(
            make_snapshot(sol_usdc_pool), SOL, USDC, 10 * ONE_SOL
        )
        assert route.strategy is Strategy.SINGLE
        assert route.hops[0].venue_id == "sol-usdc"
        assert route.amount_out == quote_output(10 * ONE_SOL, SOL_RESERVE, USDC_RESERVE, 25)
        assert route.price_impact_bps == 124

    def test_picks_highest_output(self, single_router):
        """Same reserves, lower fee wins."""
        snapshot = make_snapshot(
            make_pool("expensive", fee_bps=30),
            make_pool("cheap", fee_bps=5),
            make_pool("middle", fee_bps=25),
        )
        route = single_router.find_best_route(snapshot, SOL, USDC, ONE_SOL)
        assert route.hops[0].venue_id == "cheap"

    def test_first_venue_wins_ties(self, single_router):
        snapshot = make_snapshot(make_pool("first"), make_pool("second"))
        route = single_router.find_best_route(snapshot, SOL, USDC, ONE_SOL)
        assert route.hops[0].venue_id == "first"

    def test_reverse_oriented_venue(self, single_router):
        """A USDC/SOL venue is used in its B-to-A direction."""
        snapshot = make_snapshot(
            make_pool("reversed", USDC, SOL, reserve_a=USDC_RESERVE, reserve_b=SOL_RESERVE)
        )
        route = single_router.find_best_route(snapshot, SOL, USDC, 10 * ONE_SOL)
        assert route.amount_out == quote_output(10 * ONE_SOL, SOL_RESERVE, USDC_RESERVE, 25)
        assert route.hops[0].token_in == SOL

    def test_orderbook_can_win(self, single_router):
        """A tight book beats an AMM whose fee and slippage cost more."""
        snapshot = make_snapshot(
            make_pool("amm"),
            make_orderbook("book", best_bid=49_990_000, best_ask=50_010_000),
        )
        route = single_router.find_best_route(snapshot, SOL, USDC, 10 * ONE_SOL)
        assert route.hops[0].venue_id == "book"
        assert route.amount_out == 10 * ONE_SOL * 49_990_000 // 1_000_000

    def test_illiquid_venue_excluded(self, single_router):
        """Trading more than half the input reserve is refused."""
        snapshot = make_snapshot(make_pool("small", reserve_a=10 * ONE_SOL))
        with pytest.raises(NoRouteFound):
            single_router.find_best_route(snapshot, SOL, USDC, 6 * ONE_SOL)

    def test_broken_venues_excluded(self, single_router):
        """Empty and mis-configured venues are skipped, not fatal."""
        snapshot = make_snapshot(
            make_pool("empty", reserve_b=0),
            make_pool("bad-fee", fee_bps=10_000),
            make_pool("good"),
        )
        route = single_router.find_best_route(snapshot, SOL, USDC, ONE_SOL)
        assert route.hops[0].venue_id == "good"

    def test_no_matching_venue(self, single_router):
        snapshot = make_snapshot(make_pool("usdc-ray", USDC, RAY))
        with pytest.raises(NoRouteFound):
            single_router.find_best_route(snapshot, SOL, USDC, ONE_SOL)

    def test_zero_output_is_not_a_route(self, single_router):
        """An input too small to buy a single unit finds no route."""
        snapshot = make_snapshot(make_pool(reserve_a=10**12, reserve_b=10))
        with pytest.raises(NoRouteFound):
            single_router.find_best_route(snapshot, SOL, USDC, 1)

    def test_degenerate_requests(self, single_router, sol_usdc_pool):
        snapshot = make_snapshot(sol_usdc_pool)
        with pytest.raises(InvalidRequest):
            single_router.find_best_route(snapshot, SOL, SOL, ONE_SOL)
        with pytest.raises(InvalidRequest):
            single_router.find_best_route(snapshot, SOL, USDC, 0)
        with pytest.raises(InvalidRequest):
            single_router.find_best_route(VenueSnapshot(), SOL, USDC, ONE_SOL)

    def test_liquidity_fraction_configurable(self):
        strict = SingleVenueRouter(amm_max_input_bps=100)
        snapshot = make_snapshot(make_pool())
        with pytest.raises(NoRouteFound):
            strict.find_best_route(snapshot, SOL, USDC, 11 * ONE_SOL)
        assert strict.find_best_route(snapshot, SOL, USDC, 10 * ONE_SOL).amount_out > 0


class TestFindAllRoutes:
    """Tests for SingleVenueRouter.find_all_routes."""

    def test_sorted_best_first(self, single_router):
        snapshot = make_snapshot(
            make_pool("p30", fee_bps=30),
            make_pool("p5", fee_bps=5),
            make_pool("p25", fee_bps=25),
        )
        routes = single_router.find_all_routes(snapshot, SOL, USDC, ONE_SOL)
        assert [r.hops[0].venue_id for r in routes] == ["p5", "p25", "p30"]
        assert routes[0].amount_out >= routes[1].amount_out >= routes[2].amount_out

    def test_excludes_unviable(self, single_router):
        snapshot = make_snapshot(make_pool("ok"), make_pool("empty", reserve_a=0))
        routes = single_router.find_all_routes(snapshot, SOL, USDC, ONE_SOL)
        assert [r.hops[0].venue_id for r in routes] == ["ok"]

    def test_empty_when_nothing_matches(self, single_router):
        snapshot = make_snapshot(make_pool("usdc-ray", USDC, RAY))
        assert single_router.find_all_routes(snapshot, SOL, USDC, ONE_SOL) == []
