"""Route aggregation across strategies.

LiquidityRouter runs the single-venue, split and multi-hop strategies
against one snapshot and ranks what they return. Strategies are independent
and read-only, so their order only matters for ties: SINGLE, then SPLIT,
then MULTIHOP, and the earlier route wins an exact tie.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from liquidity_router.config import DEFAULT_ROUTER_CONFIG, RouterConfig
from liquidity_router.errors import InvalidRequest, NoRouteFound
from liquidity_router.routing import (
    MultiHopRouter,
    Route,
    SingleVenueRouter,
    SplitRouter,
    Strategy,
)
from liquidity_router.routing.multihop import validate_max_hops
from liquidity_router.routing.types import validate_request
from liquidity_router.venues import VenueSnapshot

logger = structlog.get_logger()

ALL_STRATEGIES = (Strategy.SINGLE, Strategy.SPLIT, Strategy.MULTIHOP)


class LiquidityRouter:
    """Finds the best route for a trade over a venue snapshot.

    Usage:
        router = LiquidityRouter()
        route = router.find_best_route(snapshot, "SOL", "USDC", 10_000_000_000)
    """

    def __init__(self, config: RouterConfig = DEFAULT_ROUTER_CONFIG) -> None:
        self.config = config
        self.single = SingleVenueRouter(amm_max_input_bps=config.amm_max_input_bps)
        self.split = SplitRouter(
            step_percent=config.split_step_percent,
            max_venues=config.split_max_venues,
            method=config.split_method,
            amm_max_input_bps=config.amm_max_input_bps,
        )
        self.multihop = MultiHopRouter(
            max_hops=config.max_hops,
            amm_max_input_bps=config.amm_max_input_bps,
        )

    def find_routes(
        self,
        snapshot: VenueSnapshot,
        token_in: str,
        token_out: str,
        amount_in: int,
        strategies: Iterable[Strategy] | None = None,
        max_hops: int | None = None,
    ) -> list[Route]:
        """Run each requested strategy and return their routes, best first.

        A strategy that finds no route is left out of the result.

        Args:
            snapshot: Venues to route over
            token_in: Asset sold
            token_out: Asset bought
            amount_in: Exact input amount
            strategies: Strategies to run (default: all three)
            max_hops: Hop limit for multi-hop (default: config.max_hops)

        Returns:
            Routes ordered by rank; empty if no strategy found one

        Raises:
            InvalidRequest: For a degenerate request or hop limit
        """
        selected = tuple(ALL_STRATEGIES if strategies is None else strategies)
        if not selected:
            raise InvalidRequest("At least one strategy is required")
        validate_request(snapshot, token_in, token_out, amount_in)
        if max_hops is not None:
            validate_max_hops(max_hops)

        routes: list[Route] = []
        for strategy in selected:
            try:
                if strategy is Strategy.SINGLE:
                    route = self.single.find_best_route(snapshot, token_in, token_out, amount_in)
                elif strategy is Strategy.SPLIT:
                    route = self.split.find_best_route(snapshot, token_in, token_out, amount_in)
                elif strategy is Strategy.MULTIHOP:
                    route = self.multihop.find_best_route(
                        snapshot, token_in, token_out, amount_in, max_hops
                    )
                else:
                    raise TypeError(f"Unknown strategy: {strategy!r}")
            except NoRouteFound:
                logger.debug("strategy_found_no_route", strategy=strategy.value)
                continue
            logger.info(
                "strategy_route_found",
                strategy=strategy.value,
                amount_out=route.amount_out,
                hops=route.hop_count,
                price_impact_bps=route.price_impact_bps,
            )
            routes.append(route)

        # sorted() is stable, so strategy order breaks exact ties
        return sorted(routes, key=lambda r: r.rank_key(), reverse=True)

    def find_best_route(
        self,
        snapshot: VenueSnapshot,
        token_in: str,
        token_out: str,
        amount_in: int,
        strategies: Iterable[Strategy] | None = None,
        max_hops: int | None = None,
    ) -> Route:
        """Return the highest-ranked route over the requested strategies.

        Raises:
            InvalidRequest: For a degenerate request or hop limit
            NoRouteFound: If no strategy found a route
        """
        routes = self.find_routes(snapshot, token_in, token_out, amount_in, strategies, max_hops)
        if not routes:
            raise NoRouteFound(f"No route from {token_in} to {token_out} for {amount_in}")
        return routes[0]

    def minimum_output(self, route: Route, slippage_bps: int | None = None) -> int:
        """Minimum output an executor should accept for a route."""
        return route.minimum_output(
            self.config.slippage_bps if slippage_bps is None else slippage_bps
        )


__all__ = ["ALL_STRATEGIES", "LiquidityRouter"]
