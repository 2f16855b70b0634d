"""Pydantic models for the quote API."""

from .health import HealthResponse, RequestLimitsModel, RouterConfigModel
from .quote import QuoteRequest, QuoteResponse, RouteHopModel, RouteModel, StrategyChoice
from .types import Uint64, validate_uint64
from .venues import (
    ConcentratedVenueModel,
    ConstantProductVenueModel,
    OrderbookVenueModel,
    VenueModel,
)

__all__ = [
    "ConcentratedVenueModel",
    "ConstantProductVenueModel",
    "HealthResponse",
    "OrderbookVenueModel",
    "QuoteRequest",
    "QuoteResponse",
    "RequestLimitsModel",
    "RouteHopModel",
    "RouteModel",
    "RouterConfigModel",
    "StrategyChoice",
    "Uint64",
    "VenueModel",
    "validate_uint64",
]
