"""Pydantic models for venue snapshots sent to the quote API."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Discriminator, Field, Tag

from liquidity_router.models.types import FeeBps, TokenId, Uint64
from liquidity_router.venues import (
    ConcentratedVenue,
    ConstantProductVenue,
    OrderbookVenue,
)


class ConstantProductVenueModel(BaseModel):
    """A constant product pool snapshot."""

    kind: Literal["constant_product"] = "constant_product"
    id: str = Field(min_length=1, description="Unique pool identifier.")
    token_a: TokenId = Field(alias="tokenA")
    token_b: TokenId = Field(alias="tokenB")
    reserve_a: Uint64 = Field(alias="reserveA")
    reserve_b: Uint64 = Field(alias="reserveB")
    fee_bps: FeeBps = Field(default=25, alias="feeBps")

    model_config = {"populate_by_name": True}

    def to_venue(self) -> ConstantProductVenue:
        return ConstantProductVenue(
            venue_id=self.id,
            token_a=self.token_a,
            token_b=self.token_b,
            reserve_a=int(self.reserve_a),
            reserve_b=int(self.reserve_b),
            fee_bps=self.fee_bps,
        )


class ConcentratedVenueModel(BaseModel):
    """A concentrated-liquidity pool snapshot with its current fee."""

    kind: Literal["concentrated"] = "concentrated"
    id: str = Field(min_length=1, description="Unique pool identifier.")
    token_a: TokenId = Field(alias="tokenA")
    token_b: TokenId = Field(alias="tokenB")
    reserve_a: Uint64 = Field(alias="reserveA")
    reserve_b: Uint64 = Field(alias="reserveB")
    fee_bps: FeeBps = Field(alias="feeBps")

    model_config = {"populate_by_name": True}

    def to_venue(self) -> ConcentratedVenue:
        return ConcentratedVenue(
            venue_id=self.id,
            token_a=self.token_a,
            token_b=self.token_b,
            reserve_a=int(self.reserve_a),
            reserve_b=int(self.reserve_b),
            fee_bps=self.fee_bps,
        )


class OrderbookVenueModel(BaseModel):
    """An orderbook market reduced to its top of book.

    Prices are scaled by 1e6. Selling token A fills at the bid and selling
    token B fills at the ask; either way the output is input * price / 1e6.
    """

    kind: Literal["orderbook"] = "orderbook"
    id: str = Field(min_length=1, description="Unique market identifier.")
    token_a: TokenId = Field(alias="tokenA")
    token_b: TokenId = Field(alias="tokenB")
    best_bid: Uint64 = Field(alias="bestBid")
    best_ask: Uint64 = Field(alias="bestAsk")
    max_input: Uint64 | None = Field(
        default=None,
        alias="maxInput",
        description="Largest input the top of book absorbs. Unbounded if omitted.",
    )

    model_config = {"populate_by_name": True}

    def to_venue(self) -> OrderbookVenue:
        return OrderbookVenue(
            venue_id=self.id,
            token_a=self.token_a,
            token_b=self.token_b,
            best_bid=int(self.best_bid),
            best_ask=int(self.best_ask),
            max_input=None if self.max_input is None else int(self.max_input),
        )


def _get_venue_kind(
    v: dict[str, Any] | ConstantProductVenueModel | ConcentratedVenueModel | OrderbookVenueModel,
) -> str:
    """Discriminator function for the Venue union type."""
    if isinstance(v, dict):
        return str(v.get("kind", "constant_product"))
    return v.kind


# Discriminated union: Pydantic will use the 'kind' field to determine the type
VenueModel = Annotated[
    Annotated[ConstantProductVenueModel, Tag("constant_product")]
    | Annotated[ConcentratedVenueModel, Tag("concentrated")]
    | Annotated[OrderbookVenueModel, Tag("orderbook")],
    Discriminator(_get_venue_kind),
]
