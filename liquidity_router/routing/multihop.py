"""Multi-hop routing through intermediate assets."""

from __future__ import annotations

import structlog

from liquidity_router.constants import (
    DEFAULT_AMM_MAX_INPUT_BPS,
    DEFAULT_MAX_HOPS,
    MAX_HOPS_LIMIT,
)
from liquidity_router.errors import InvalidRequest, NoRouteFound
from liquidity_router.routing.pathfinding import Edge, PathFinder, TokenGraph
from liquidity_router.routing.single import quote_venue
from liquidity_router.routing.types import Quote, Route, select_best, validate_request
from liquidity_router.venues import VenueSnapshot

logger = structlog.get_logger()


def validate_max_hops(max_hops: int) -> None:
    """Check a hop limit.

    Raises:
        InvalidRequest: If max_hops is outside [1, MAX_HOPS_LIMIT]
    """
    if max_hops < 1 or max_hops > MAX_HOPS_LIMIT:
        raise InvalidRequest(f"max_hops must be in [1, {MAX_HOPS_LIMIT}], got {max_hops}")


class MultiHopRouter:
    """Routes through chains of venues, e.g. SOL -> USDC -> RAY.

    Each hop is priced with the previous hop's realized output as its input.
    """

    def __init__(
        self,
        max_hops: int = DEFAULT_MAX_HOPS,
        amm_max_input_bps: int = DEFAULT_AMM_MAX_INPUT_BPS,
    ) -> None:
        """Initialize the multi-hop router.

        Args:
            max_hops: Default hop limit for searches
            amm_max_input_bps: Largest share of an AMM's input reserve a hop
                may consume

        Raises:
            InvalidRequest: If max_hops is outside [1, MAX_HOPS_LIMIT]
        """
        validate_max_hops(max_hops)
        self.max_hops = max_hops
        self.amm_max_input_bps = amm_max_input_bps

    def simulate_path(self, path: list[Edge], amount_in: int) -> list[Quote] | None:
        """Price a path hop by hop, feeding each output into the next hop.

        Returns:
            One quote per hop, or None if any hop is illiquid or yields
            nothing
        """
        steps: list[Quote] = []
        current_amount = amount_in
        for i, edge in enumerate(path):
            quote = quote_venue(edge.venue, current_amount, edge.direction, self.amm_max_input_bps)
            if quote is None:
                logger.debug(
                    "path_discarded",
                    hop=i,
                    venue=edge.venue.venue_id,
                    amount_in=current_amount,
                )
                return None
            steps.append(quote)
            current_amount = quote.amount_out
        return steps

    def find_all_routes(
        self,
        snapshot: VenueSnapshot,
        token_in: str,
        token_out: str,
        amount_in: int,
        max_hops: int | None = None,
    ) -> list[Route]:
        """Get a route for every viable path, in BFS order (shortest first).

        Raises:
            InvalidRequest: For a degenerate request or hop limit
        """
        hops = self.max_hops if max_hops is None else max_hops
        validate_max_hops(hops)
        validate_request(snapshot, token_in, token_out, amount_in)

        finder = PathFinder(TokenGraph.from_snapshot(snapshot))
        routes = []
        for path in finder.find_all_paths(token_in, token_out, hops):
            steps = self.simulate_path(path, amount_in)
            if steps is not None:
                routes.append(Route.multihop(steps))
        return routes

    def find_best_route(
        self,
        snapshot: VenueSnapshot,
        token_in: str,
        token_out: str,
        amount_in: int,
        max_hops: int | None = None,
    ) -> Route:
        """Find the path with the most output.

        Ties go to fewer hops, then lower compounded impact, then the path
        found first.

        Raises:
            InvalidRequest: For a degenerate request or hop limit
            NoRouteFound: If no path within the hop limit can take the trade
        """
        routes = self.find_all_routes(snapshot, token_in, token_out, amount_in, max_hops)

        best = select_best(routes)
        if best is None:
            raise NoRouteFound(
                f"No path from {token_in} to {token_out} within "
                f"{self.max_hops if max_hops is None else max_hops} hops"
            )
        logger.debug(
            "multihop_route_selected",
            path=best.path,
            amount_out=best.amount_out,
            candidates=len(routes),
        )
        return best


__all__ = ["MultiHopRouter", "validate_max_hops"]
