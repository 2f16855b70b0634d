"""Liquidity router: best-execution routing across DEX venues."""

from liquidity_router.config import DEFAULT_ROUTER_CONFIG, RouterConfig
from liquidity_router.errors import (
    ArithmeticOverflow,
    EmptyPool,
    InsufficientLiquidity,
    InvalidFee,
    InvalidRequest,
    NoRouteFound,
    RouterError,
)
from liquidity_router.router import LiquidityRouter
from liquidity_router.routing import Route, RouteHop, Strategy
from liquidity_router.venues import (
    ConcentratedVenue,
    ConstantProductVenue,
    Direction,
    OrderbookVenue,
    VenueSnapshot,
)

__version__ = "0.1.0"
__all__ = [
    "ArithmeticOverflow",
    "ConcentratedVenue",
    "ConstantProductVenue",
    "DEFAULT_ROUTER_CONFIG",
    "Direction",
    "EmptyPool",
    "InsufficientLiquidity",
    "InvalidFee",
    "InvalidRequest",
    "LiquidityRouter",
    "NoRouteFound",
    "OrderbookVenue",
    "Route",
    "RouteHop",
    "RouterConfig",
    "RouterError",
    "Strategy",
    "VenueSnapshot",
    "__version__",
]
