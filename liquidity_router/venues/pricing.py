"""Venue pricing dispatch.

Every function here handles each AnyVenue variant explicitly and raises
TypeError for anything else, so adding a variant means extending every
dispatch in this module.
"""

from __future__ import annotations

from liquidity_router.amm import constant_product
from liquidity_router.constants import (
    BPS_DENOMINATOR,
    DEFAULT_AMM_MAX_INPUT_BPS,
    PRICE_PRECISION,
)
from liquidity_router.errors import InsufficientLiquidity
from liquidity_router.safe_int import S
from liquidity_router.venues.types import (
    AnyVenue,
    ConcentratedVenue,
    ConstantProductVenue,
    Direction,
    OrderbookVenue,
)


def calculate_output(venue: AnyVenue, amount_in: int, direction: Direction) -> tuple[int, int]:
    """Quote an exact-input trade on a venue.

    Args:
        venue: Venue to price against
        amount_in: Input amount of the direction's input token
        direction: Which side of the pair is sold

    Returns:
        Tuple of (amount_out, price_impact_bps)

    Raises:
        EmptyPool, InvalidFee: For malformed AMM snapshots
        InsufficientLiquidity: For an orderbook side with no price
        ArithmeticOverflow: If the amounts do not fit their widths
    """
    if isinstance(venue, (ConstantProductVenue, ConcentratedVenue)):
        reserve_in, reserve_out = venue.get_reserves(direction)
        amount_out = constant_product.quote_output(
            amount_in, reserve_in, reserve_out, venue.fee_bps
        )
        impact = constant_product.price_impact_bps(
            amount_in, amount_out, reserve_in, reserve_out
        )
        return amount_out, impact
    elif isinstance(venue, OrderbookVenue):
        return _orderbook_output(venue, amount_in, direction)
    else:
        raise TypeError(f"Unknown venue type: {type(venue)}")


def quote_required_input(venue: AnyVenue, amount_out: int, direction: Direction) -> int:
    """Calculate the smallest input that yields at least amount_out on a venue.

    Raises:
        InsufficientLiquidity: If the venue cannot provide amount_out
        ArithmeticOverflow: If the required input does not fit u64
    """
    if isinstance(venue, (ConstantProductVenue, ConcentratedVenue)):
        reserve_in, reserve_out = venue.get_reserves(direction)
        return constant_product.quote_required_input(
            amount_out, reserve_in, reserve_out, venue.fee_bps
        )
    elif isinstance(venue, OrderbookVenue):
        price = _orderbook_price(venue, direction)
        required = (S.from_u64(amount_out) * PRICE_PRECISION).ceiling_div(price)
        return required.to_u64()
    else:
        raise TypeError(f"Unknown venue type: {type(venue)}")


def has_sufficient_liquidity(
    venue: AnyVenue,
    amount_in: int,
    direction: Direction,
    max_input_bps: int = DEFAULT_AMM_MAX_INPUT_BPS,
) -> bool:
    """Check whether a venue can absorb amount_in without excessive slippage.

    AMM venues accept at most max_input_bps of their input-side reserve.
    Orderbook venues need a price on the traded side and accept up to their
    max_input, if one is set.
    """
    if isinstance(venue, (ConstantProductVenue, ConcentratedVenue)):
        reserve_in, reserve_out = venue.get_reserves(direction)
        if reserve_in == 0 or reserve_out == 0:
            return False
        return amount_in * BPS_DENOMINATOR <= reserve_in * max_input_bps
    elif isinstance(venue, OrderbookVenue):
        price = venue.best_bid if direction is Direction.A_TO_B else venue.best_ask
        if price <= 0:
            return False
        return venue.max_input is None or amount_in <= venue.max_input
    else:
        raise TypeError(f"Unknown venue type: {type(venue)}")


def tradable_directions(venue: AnyVenue) -> list[Direction]:
    """List the directions in which a venue currently quotes.

    AMM venues trade both ways when both reserves are non-zero; an orderbook
    side trades only when it has a price.
    """
    if isinstance(venue, (ConstantProductVenue, ConcentratedVenue)):
        if venue.reserve_a == 0 or venue.reserve_b == 0:
            return []
        return [Direction.A_TO_B, Direction.B_TO_A]
    elif isinstance(venue, OrderbookVenue):
        directions = []
        if venue.best_bid > 0:
            directions.append(Direction.A_TO_B)
        if venue.best_ask > 0:
            directions.append(Direction.B_TO_A)
        return directions
    else:
        raise TypeError(f"Unknown venue type: {type(venue)}")


def _orderbook_price(venue: OrderbookVenue, direction: Direction) -> int:
    price = venue.best_bid if direction is Direction.A_TO_B else venue.best_ask
    if price <= 0:
        raise InsufficientLiquidity(
            f"Orderbook {venue.venue_id} has no {'bid' if direction is Direction.A_TO_B else 'ask'}"
        )
    return price


def _orderbook_output(
    venue: OrderbookVenue, amount_in: int, direction: Direction
) -> tuple[int, int]:
    price = _orderbook_price(venue, direction)
    amount = S.from_u64(amount_in)
    if not amount:
        return 0, 0

    # Both sides scale the input by the quoted price: bid when selling
    # token_a, ask when selling token_b
    amount_out = amount * price // PRICE_PRECISION
    return amount_out.to_u64(), venue.spread_bps


__all__ = [
    "calculate_output",
    "has_sufficient_liquidity",
    "quote_required_input",
    "tradable_directions",
]
