"""Venue variants.

A venue is an immutable snapshot of one liquidity source for a single asset
pair. The set of variants is closed: code that prices a venue dispatches over
AnyVenue exhaustively (see venues.pricing).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias

from liquidity_router.constants import (
    BPS_DENOMINATOR,
    DEFAULT_CONSTANT_PRODUCT_FEE_BPS,
)


class Direction(str, Enum):
    """Trade direction relative to a venue's (token_a, token_b) pair."""

    A_TO_B = "a_to_b"
    B_TO_A = "b_to_a"

    @property
    def reversed(self) -> Direction:
        return Direction.B_TO_A if self is Direction.A_TO_B else Direction.A_TO_B


class VenueKind(str, Enum):
    """Pricing model of a venue."""

    CONSTANT_PRODUCT = "constant_product"
    CONCENTRATED = "concentrated"
    ORDERBOOK = "orderbook"


class _PairMixin:
    """Asset-pair helpers shared by all venue variants."""

    token_a: str
    token_b: str

    def asset_pair(self) -> tuple[str, str]:
        """Return the venue's (token_a, token_b) pair."""
        return self.token_a, self.token_b

    def direction_for(self, token_in: str, token_out: str) -> Direction | None:
        """Get the direction that sells token_in for token_out.

        Returns:
            The matching Direction, or None if the venue does not trade the pair
        """
        if token_in == self.token_a and token_out == self.token_b:
            return Direction.A_TO_B
        if token_in == self.token_b and token_out == self.token_a:
            return Direction.B_TO_A
        return None

    def token_in(self, direction: Direction) -> str:
        return self.token_a if direction is Direction.A_TO_B else self.token_b

    def token_out(self, direction: Direction) -> str:
        return self.token_b if direction is Direction.A_TO_B else self.token_a


@dataclass(frozen=True)
class ConstantProductVenue(_PairMixin):
    """A constant product (x * y = k) pool.

    Attributes:
        venue_id: Unique identifier of the pool (e.g. its account key)
        token_a: First asset of the pair
        token_b: Second asset of the pair
        reserve_a: Reserve of token_a
        reserve_b: Reserve of token_b
        fee_bps: Fee in basis points taken from the input (25 = 0.25%)
    """

    kind: ClassVar[VenueKind] = VenueKind.CONSTANT_PRODUCT

    venue_id: str
    token_a: str
    token_b: str
    reserve_a: int
    reserve_b: int
    fee_bps: int = DEFAULT_CONSTANT_PRODUCT_FEE_BPS

    def get_reserves(self, direction: Direction) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if direction is Direction.A_TO_B:
            return self.reserve_a, self.reserve_b
        return self.reserve_b, self.reserve_a


@dataclass(frozen=True)
class ConcentratedVenue(_PairMixin):
    """A concentrated-liquidity pool with a per-instance fee.

    Priced with the constant product invariant over its active reserves.
    Tick-level liquidity is not modelled.
    """

    kind: ClassVar[VenueKind] = VenueKind.CONCENTRATED

    venue_id: str
    token_a: str
    token_b: str
    reserve_a: int
    reserve_b: int
    fee_bps: int

    def get_reserves(self, direction: Direction) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        if direction is Direction.A_TO_B:
            return self.reserve_a, self.reserve_b
        return self.reserve_b, self.reserve_a


@dataclass(frozen=True)
class OrderbookVenue(_PairMixin):
    """An orderbook market approximated by its best bid and ask.

    Prices are scaled by PRICE_PRECISION. A trade returns the input times
    the quoted price: the bid when selling token_a, the ask when selling
    token_b. The book is not walked.

    Attributes:
        max_input: Largest input the book is assumed to absorb at the top
            of book, or None for no bound
    """

    kind: ClassVar[VenueKind] = VenueKind.ORDERBOOK

    venue_id: str
    token_a: str
    token_b: str
    best_bid: int
    best_ask: int
    max_input: int | None = None

    @property
    def spread_bps(self) -> int:
        """Bid/ask spread relative to the bid, capped at 100%."""
        if self.best_bid == 0:
            return BPS_DENOMINATOR
        spread = max(self.best_ask - self.best_bid, 0)
        return min(spread * BPS_DENOMINATOR // self.best_bid, BPS_DENOMINATOR)

    @property
    def fee_bps(self) -> int:
        # The spread is what the taker pays on an orderbook.
        return self.spread_bps


# Union type for all venue types
AnyVenue: TypeAlias = ConstantProductVenue | ConcentratedVenue | OrderbookVenue

__all__ = [
    "AnyVenue",
    "ConcentratedVenue",
    "ConstantProductVenue",
    "Direction",
    "OrderbookVenue",
    "VenueKind",
]
