"""Constant product AMM math.

Pools price trades with the invariant x * y = k, after taking the fee from
the input amount:

    amount_in_after_fee = amount_in * (10000 - fee_bps) // 10000
    amount_out = amount_in_after_fee * reserve_out // (reserve_in + amount_in_after_fee)

Both divisions floor, so the trader never receives more than the real-valued
result. Amounts and reserves are u64; products are computed in u128 through
SafeInt and narrowed back with an explicit overflow check.
"""

from __future__ import annotations

from liquidity_router.constants import BPS_DENOMINATOR
from liquidity_router.errors import EmptyPool, InsufficientLiquidity, InvalidFee
from liquidity_router.safe_int import S


def validate_fee_bps(fee_bps: int) -> None:
    """Check that a fee lies in [0, 10000) basis points.

    Raises:
        InvalidFee: If the fee is negative or 100% or more
    """
    if fee_bps < 0 or fee_bps >= BPS_DENOMINATOR:
        raise InvalidFee(f"Fee must be in [0, {BPS_DENOMINATOR}) bps, got {fee_bps}")


def _validate_reserves(reserve_in: int, reserve_out: int) -> None:
    if reserve_in == 0 or reserve_out == 0:
        raise EmptyPool(f"Empty pool: reserve_in={reserve_in}, reserve_out={reserve_out}")


def quote_output(amount_in: int, reserve_in: int, reserve_out: int, fee_bps: int) -> int:
    """Calculate the output amount for an exact input.

    Args:
        amount_in: Input token amount
        reserve_in: Reserve of input token in pool
        reserve_out: Reserve of output token in pool
        fee_bps: Pool fee in basis points (25 = 0.25%)

    Returns:
        Output token amount (0 for a zero input)

    Raises:
        InvalidFee: If fee_bps is outside [0, 10000)
        EmptyPool: If either reserve is zero
        ArithmeticOverflow: If an input does not fit u64
    """
    validate_fee_bps(fee_bps)
    _validate_reserves(reserve_in, reserve_out)

    amount = S.from_u64(amount_in)
    r_in = S.from_u64(reserve_in)
    r_out = S.from_u64(reserve_out)
    if not amount:
        return 0

    after_fee = amount * (BPS_DENOMINATOR - fee_bps) // BPS_DENOMINATOR
    amount_out = after_fee * r_out // (r_in + after_fee)
    return amount_out.to_u64()


def quote_required_input(amount_out: int, reserve_in: int, reserve_out: int, fee_bps: int) -> int:
    """Calculate the smallest input that yields at least amount_out.

    Inverts quote_output exactly, rounding up at each step:
    - net input needed: ceil(amount_out * reserve_in / (reserve_out - amount_out))
    - gross input: ceil(net * 10000 / (10000 - fee_bps))

    Because the result is the minimum, quote_required_input(quote_output(x)) <= x.

    Raises:
        InvalidFee: If fee_bps is outside [0, 10000)
        EmptyPool: If either reserve is zero
        InsufficientLiquidity: If amount_out >= reserve_out
        ArithmeticOverflow: If the required input does not fit u64
    """
    validate_fee_bps(fee_bps)
    _validate_reserves(reserve_in, reserve_out)

    out = S.from_u64(amount_out)
    r_in = S.from_u64(reserve_in)
    r_out = S.from_u64(reserve_out)
    if not out:
        return 0
    if out >= r_out:
        raise InsufficientLiquidity(
            f"Requested output {amount_out} exceeds reserve {reserve_out}"
        )

    net_in = (out * r_in).ceiling_div(r_out - out)
    gross_in = (net_in * BPS_DENOMINATOR).ceiling_div(BPS_DENOMINATOR - fee_bps)
    return gross_in.to_u64()


def price_impact_bps(amount_in: int, amount_out: int, reserve_in: int, reserve_out: int) -> int:
    """Calculate price impact in basis points.

    Compares the execution price (amount_out / amount_in) with the spot price
    (reserve_out / reserve_in). The execution/spot ratio is floored to whole
    basis points, so any shortfall against spot shows as at least 1 bps.

        impact = 10000 - floor(amount_out * reserve_in * 10000 / (amount_in * reserve_out))

    Returns:
        Non-negative impact in bps (0 for a zero input)

    Raises:
        EmptyPool: If either reserve is zero
        ArithmeticOverflow: If an intermediate exceeds u128
    """
    _validate_reserves(reserve_in, reserve_out)

    a_in = S.from_u64(amount_in)
    a_out = S.from_u64(amount_out)
    if not a_in:
        return 0

    realized = a_out * S.from_u64(reserve_in)
    spot = a_in * S.from_u64(reserve_out)
    ratio_bps = (realized * BPS_DENOMINATOR // spot).value
    if ratio_bps >= BPS_DENOMINATOR:
        return 0
    return BPS_DENOMINATOR - ratio_bps


__all__ = [
    "quote_output",
    "quote_required_input",
    "price_impact_bps",
    "validate_fee_bps",
]
