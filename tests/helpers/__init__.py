"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Token mints and common amounts
- factories: Venue, snapshot and API payload factory functions
"""

from tests.helpers.constants import (
    BONK,
    ONE_SOL,
    RAY,
    SOL,
    SOL_RESERVE,
    TOKEN_DECIMALS,
    USDC,
    USDC_RESERVE,
)
from tests.helpers.factories import (
    make_concentrated,
    make_orderbook,
    make_pool,
    make_snapshot,
    pool_payload,
    quote_payload,
)

__all__ = [
    # Constants
    "SOL",
    "USDC",
    "RAY",
    "BONK",
    "ONE_SOL",
    "SOL_RESERVE",
    "USDC_RESERVE",
    "TOKEN_DECIMALS",
    # Factories
    "make_pool",
    "make_concentrated",
    "make_orderbook",
    "make_snapshot",
    "pool_payload",
    "quote_payload",
]
