"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from liquidity_router.constants import BPS_DENOMINATOR, U64_MAX
from liquidity_router.errors import InvalidRequest
from liquidity_router.venues import AnyVenue, Direction, VenueSnapshot


class Strategy(str, Enum):
    """How a route was constructed."""

    SINGLE = "single"
    SPLIT = "split"
    MULTIHOP = "multihop"


@dataclass(frozen=True)
class Quote:
    """Result of pricing one trade on one venue."""

    venue: AnyVenue
    direction: Direction
    amount_in: int
    amount_out: int
    price_impact_bps: int

    @property
    def token_in(self) -> str:
        return self.venue.token_in(self.direction)

    @property
    def token_out(self) -> str:
        return self.venue.token_out(self.direction)


@dataclass(frozen=True)
class RouteHop:
    """One leg of a route: a trade on a single venue."""

    venue_id: str
    venue_kind: str
    token_in: str
    token_out: str
    amount_in: int
    amount_out: int
    price_impact_bps: int
    fee_bps: int

    @classmethod
    def from_quote(cls, quote: Quote) -> RouteHop:
        return cls(
            venue_id=quote.venue.venue_id,
            venue_kind=quote.venue.kind.value,
            token_in=quote.token_in,
            token_out=quote.token_out,
            amount_in=quote.amount_in,
            amount_out=quote.amount_out,
            price_impact_bps=quote.price_impact_bps,
            fee_bps=quote.venue.fee_bps,
        )


@dataclass(frozen=True)
class Route:
    """A complete way of trading amount_in of token_in for token_out.

    For SINGLE and MULTIHOP routes the hops run in sequence, each feeding the
    next. For SPLIT routes the hops are parallel legs over the same pair whose
    inputs sum to amount_in.
    """

    strategy: Strategy
    token_in: str
    token_out: str
    amount_in: int
    amount_out: int
    price_impact_bps: int
    hops: tuple[RouteHop, ...]

    @classmethod
    def single(cls, quote: Quote) -> Route:
        """Build a one-hop route from a venue quote."""
        return cls(
            strategy=Strategy.SINGLE,
            token_in=quote.token_in,
            token_out=quote.token_out,
            amount_in=quote.amount_in,
            amount_out=quote.amount_out,
            price_impact_bps=quote.price_impact_bps,
            hops=(RouteHop.from_quote(quote),),
        )

    @classmethod
    def split(cls, legs: list[Quote]) -> Route:
        """Build a split route from parallel quotes over one pair.

        Impact is the input-weighted average of the legs' impacts.
        """
        if not legs:
            raise ValueError("Split route needs at least one leg")
        return cls(
            strategy=Strategy.SPLIT,
            token_in=legs[0].token_in,
            token_out=legs[0].token_out,
            amount_in=sum(leg.amount_in for leg in legs),
            amount_out=sum(leg.amount_out for leg in legs),
            price_impact_bps=weighted_impact_bps(
                [(leg.amount_in, leg.price_impact_bps) for leg in legs]
            ),
            hops=tuple(RouteHop.from_quote(leg) for leg in legs),
        )

    @classmethod
    def multihop(cls, steps: list[Quote]) -> Route:
        """Build a sequential route; each step's input is the previous step's output.

        Impact is compounded across steps.
        """
        if not steps:
            raise ValueError("Multi-hop route needs at least one step")
        return cls(
            strategy=Strategy.MULTIHOP,
            token_in=steps[0].token_in,
            token_out=steps[-1].token_out,
            amount_in=steps[0].amount_in,
            amount_out=steps[-1].amount_out,
            price_impact_bps=compound_impact_bps([step.price_impact_bps for step in steps]),
            hops=tuple(RouteHop.from_quote(step) for step in steps),
        )

    @property
    def hop_count(self) -> int:
        return len(self.hops)

    @property
    def is_direct(self) -> bool:
        """Check if this route is a single trade on a single venue."""
        return len(self.hops) == 1

    @property
    def path(self) -> list[str]:
        """Assets visited in order (sequential routes only)."""
        if self.strategy is Strategy.SPLIT:
            return [self.token_in, self.token_out]
        return [self.hops[0].token_in] + [hop.token_out for hop in self.hops]

    @property
    def venues_used(self) -> int:
        """Number of distinct venues the route touches."""
        return len({hop.venue_id for hop in self.hops})

    @property
    def effective_price(self) -> Decimal:
        """Output received per unit of input."""
        if self.amount_in == 0:
            return Decimal(0)
        return Decimal(self.amount_out) / Decimal(self.amount_in)

    def rank_key(self) -> tuple[int, int, int]:
        """Sort key: more output, then fewer hops, then less impact."""
        return (self.amount_out, -self.hop_count, -self.price_impact_bps)

    def better_than(self, other: Route) -> bool:
        """Check if this route strictly outranks other."""
        return self.rank_key() > other.rank_key()

    def minimum_output(self, slippage_bps: int) -> int:
        """Lowest acceptable output after a slippage tolerance.

        Raises:
            InvalidRequest: If slippage_bps is outside [0, 10000]
        """
        if slippage_bps < 0 or slippage_bps > BPS_DENOMINATOR:
            raise InvalidRequest(f"Slippage must be in [0, {BPS_DENOMINATOR}] bps")
        return self.amount_out * (BPS_DENOMINATOR - slippage_bps) // BPS_DENOMINATOR


def weighted_impact_bps(legs: list[tuple[int, int]]) -> int:
    """Average impact of parallel legs, weighted by each leg's input amount.

    Args:
        legs: (amount_in, price_impact_bps) per leg
    """
    total_in = sum(amount for amount, _ in legs)
    if total_in == 0:
        return 0
    return sum(amount * impact for amount, impact in legs) // total_in


def compound_impact_bps(impacts: list[int]) -> int:
    """Combine sequential impacts multiplicatively.

    The retained value after n hops is prod(10000 - impact_i) / 10000^(n-1);
    the retained fraction is floored so the combined impact is never
    understated.
    """
    if not impacts:
        return 0
    product = 1
    for impact in impacts:
        product *= BPS_DENOMINATOR - min(impact, BPS_DENOMINATOR)
    retained = product // BPS_DENOMINATOR ** (len(impacts) - 1)
    return BPS_DENOMINATOR - retained


def select_best(routes: list[Route]) -> Route | None:
    """Pick the best route; the earliest one wins ties."""
    best: Route | None = None
    for route in routes:
        if best is None or route.better_than(best):
            best = route
    return best


def validate_request(snapshot: VenueSnapshot, token_in: str, token_out: str, amount_in: int) -> None:
    """Reject degenerate routing requests before any search.

    Raises:
        InvalidRequest: For an empty snapshot, identical assets, or an amount
            that is not a positive u64
    """
    if not snapshot:
        raise InvalidRequest("Venue snapshot is empty")
    if token_in == token_out:
        raise InvalidRequest(f"Input and output asset are the same: {token_in}")
    if amount_in <= 0:
        raise InvalidRequest(f"Input amount must be positive, got {amount_in}")
    if amount_in > U64_MAX:
        raise InvalidRequest(f"Input amount does not fit u64: {amount_in}")


__all__ = [
    "Quote",
    "Route",
    "RouteHop",
    "Strategy",
    "compound_impact_bps",
    "select_best",
    "validate_request",
    "weighted_impact_bps",
]
