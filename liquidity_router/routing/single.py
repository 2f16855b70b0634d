"""Single-venue routing."""

from __future__ import annotations

import structlog

from liquidity_router.constants import DEFAULT_AMM_MAX_INPUT_BPS
from liquidity_router.errors import NoRouteFound, RouterError
from liquidity_router.routing.types import Quote, Route, validate_request
from liquidity_router.venues import (
    AnyVenue,
    Direction,
    VenueSnapshot,
    calculate_output,
    has_sufficient_liquidity,
)

logger = structlog.get_logger()


def quote_venue(
    venue: AnyVenue,
    amount_in: int,
    direction: Direction,
    max_input_bps: int = DEFAULT_AMM_MAX_INPUT_BPS,
) -> Quote | None:
    """Price a trade on one venue, or None if the venue cannot take it.

    Venues that fail the liquidity check, fail to price, or return nothing
    are excluded rather than reported as errors.
    """
    if not has_sufficient_liquidity(venue, amount_in, direction, max_input_bps):
        logger.debug(
            "venue_skipped",
            venue=venue.venue_id,
            amount_in=amount_in,
            reason="insufficient_liquidity",
        )
        return None
    try:
        amount_out, impact = calculate_output(venue, amount_in, direction)
    except RouterError as e:
        logger.debug("venue_skipped", venue=venue.venue_id, amount_in=amount_in, reason=str(e))
        return None
    if amount_out == 0:
        logger.debug("venue_skipped", venue=venue.venue_id, amount_in=amount_in, reason="zero_output")
        return None
    return Quote(
        venue=venue,
        direction=direction,
        amount_in=amount_in,
        amount_out=amount_out,
        price_impact_bps=impact,
    )


class SingleVenueRouter:
    """Finds the best route that trades the whole amount on one venue.

    Linear in the number of venues; the first venue wins ties on output.
    """

    def __init__(self, amm_max_input_bps: int = DEFAULT_AMM_MAX_INPUT_BPS) -> None:
        """Initialize the router.

        Args:
            amm_max_input_bps: Largest share of an AMM's input reserve a
                trade may consume
        """
        self.amm_max_input_bps = amm_max_input_bps

    def quotes(
        self,
        snapshot: VenueSnapshot,
        token_in: str,
        token_out: str,
        amount_in: int,
    ) -> list[Quote]:
        """Quote every venue on the pair that can take amount_in, in snapshot order."""
        result = []
        for venue, direction in snapshot.matching(token_in, token_out):
            quote = quote_venue(venue, amount_in, direction, self.amm_max_input_bps)
            if quote is not None:
                result.append(quote)
        return result

    def find_best_route(
        self,
        snapshot: VenueSnapshot,
        token_in: str,
        token_out: str,
        amount_in: int,
    ) -> Route:
        """Find the venue giving the most output for amount_in.

        Raises:
            InvalidRequest: For a degenerate request
            NoRouteFound: If no venue on the pair can take the trade
        """
        validate_request(snapshot, token_in, token_out, amount_in)

        best: Quote | None = None
        for quote in self.quotes(snapshot, token_in, token_out, amount_in):
            if best is None or quote.amount_out > best.amount_out:
                best = quote

        if best is None:
            raise NoRouteFound(f"No venue can trade {amount_in} {token_in} for {token_out}")
        return Route.single(best)

    def find_all_routes(
        self,
        snapshot: VenueSnapshot,
        token_in: str,
        token_out: str,
        amount_in: int,
    ) -> list[Route]:
        """Get every viable single-venue route, best output first.

        Returns an empty list when no venue can take the trade.

        Raises:
            InvalidRequest: For a degenerate request
        """
        validate_request(snapshot, token_in, token_out, amount_in)
        quotes = self.quotes(snapshot, token_in, token_out, amount_in)
        # sorted() is stable, so snapshot order breaks ties
        quotes = sorted(quotes, key=lambda q: q.amount_out, reverse=True)
        return [Route.single(q) for q in quotes]


__all__ = ["SingleVenueRouter", "quote_venue"]
