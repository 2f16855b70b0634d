"""Routing strategies and route types."""

from .multihop import MultiHopRouter
from .pathfinding import Edge, PathFinder, TokenGraph
from .single import SingleVenueRouter
from .split import SplitMethod, SplitRouter
from .types import Quote, Route, RouteHop, Strategy, select_best

__all__ = [
    "Edge",
    "MultiHopRouter",
    "PathFinder",
    "Quote",
    "Route",
    "RouteHop",
    "SingleVenueRouter",
    "SplitMethod",
    "SplitRouter",
    "Strategy",
    "TokenGraph",
    "select_best",
]
