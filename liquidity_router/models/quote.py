"""Pydantic models for quote requests and responses."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, model_validator

from liquidity_router.constants import MAX_HOPS_LIMIT, MAX_VENUES_PER_REQUEST
from liquidity_router.models.types import Bps, TokenId, Uint64
from liquidity_router.models.venues import VenueModel
from liquidity_router.routing import Route, RouteHop, Strategy
from liquidity_router.venues import VenueSnapshot


class StrategyChoice(str, Enum):
    """Which routing strategies a quote request runs."""

    SINGLE = "single"
    SPLIT = "split"
    MULTIHOP = "multihop"
    ALL = "all"

    def strategies(self) -> list[Strategy] | None:
        """Routing strategies to run; None means all of them."""
        if self is StrategyChoice.ALL:
            return None
        return [Strategy(self.value)]


class QuoteRequest(BaseModel):
    """A request to route an exact input over a venue snapshot."""

    venues: list[VenueModel] = Field(min_length=1, max_length=MAX_VENUES_PER_REQUEST)
    token_in: TokenId = Field(alias="tokenIn")
    token_out: TokenId = Field(alias="tokenOut")
    amount_in: Uint64 = Field(alias="amountIn")
    strategy: StrategyChoice = StrategyChoice.ALL
    max_hops: int | None = Field(default=None, ge=1, le=MAX_HOPS_LIMIT, alias="maxHops")
    slippage_bps: Bps | None = Field(default=None, alias="slippageBps")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def check_unique_venue_ids(self) -> QuoteRequest:
        ids = [venue.id for venue in self.venues]
        if len(ids) != len(set(ids)):
            raise ValueError("Venue ids must be unique")
        return self

    def snapshot(self) -> VenueSnapshot:
        """Build the engine's venue snapshot from the request."""
        return VenueSnapshot.of(venue.to_venue() for venue in self.venues)


class RouteHopModel(BaseModel):
    """One leg of a quoted route."""

    venue_id: str = Field(alias="venueId")
    venue_kind: str = Field(alias="venueKind")
    token_in: str = Field(alias="tokenIn")
    token_out: str = Field(alias="tokenOut")
    amount_in: Uint64 = Field(alias="amountIn")
    amount_out: Uint64 = Field(alias="amountOut")
    price_impact_bps: int = Field(alias="priceImpactBps")
    fee_bps: int = Field(alias="feeBps")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_hop(cls, hop: RouteHop) -> RouteHopModel:
        return cls(
            venue_id=hop.venue_id,
            venue_kind=hop.venue_kind,
            token_in=hop.token_in,
            token_out=hop.token_out,
            amount_in=str(hop.amount_in),
            amount_out=str(hop.amount_out),
            price_impact_bps=hop.price_impact_bps,
            fee_bps=hop.fee_bps,
        )


class RouteModel(BaseModel):
    """A quoted route."""

    strategy: Strategy
    token_in: str = Field(alias="tokenIn")
    token_out: str = Field(alias="tokenOut")
    amount_in: Uint64 = Field(alias="amountIn")
    amount_out: Uint64 = Field(alias="amountOut")
    price_impact_bps: int = Field(alias="priceImpactBps")
    effective_price: str = Field(
        alias="effectivePrice",
        description="Output per unit of input, as a decimal string.",
    )
    hops: list[RouteHopModel]

    model_config = {"populate_by_name": True}

    @classmethod
    def from_route(cls, route: Route) -> RouteModel:
        return cls(
            strategy=route.strategy,
            token_in=route.token_in,
            token_out=route.token_out,
            amount_in=str(route.amount_in),
            amount_out=str(route.amount_out),
            price_impact_bps=route.price_impact_bps,
            effective_price=str(route.effective_price),
            hops=[RouteHopModel.from_hop(hop) for hop in route.hops],
        )


class QuoteResponse(BaseModel):
    """The best route for a quote request, plus the other strategies' routes."""

    route: RouteModel
    minimum_amount_out: Uint64 = Field(
        alias="minimumAmountOut",
        description="Output after the slippage tolerance; the executor's floor.",
    )
    alternatives: list[RouteModel] = Field(default_factory=list)

    model_config = {"populate_by_name": True}
