"""Venue variants, pricing dispatch and snapshots."""

from .pricing import (
    calculate_output,
    has_sufficient_liquidity,
    quote_required_input,
    tradable_directions,
)
from .snapshot import VenueSnapshot
from .types import (
    AnyVenue,
    ConcentratedVenue,
    ConstantProductVenue,
    Direction,
    OrderbookVenue,
    VenueKind,
)

__all__ = [
    "AnyVenue",
    "ConcentratedVenue",
    "ConstantProductVenue",
    "Direction",
    "OrderbookVenue",
    "VenueKind",
    "VenueSnapshot",
    "calculate_output",
    "has_sufficient_liquidity",
    "quote_required_input",
    "tradable_directions",
]
