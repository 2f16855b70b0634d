"""Shared type definitions for the quote API models."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from liquidity_router.constants import BPS_DENOMINATOR, U64_MAX


def validate_uint64(value: Any) -> str:
    """Validate that a value is a valid uint64 decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        Valid uint64 as decimal string

    Raises:
        ValueError: If value is not a valid non-negative integer within uint64 range
    """
    # Accept int directly
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise ValueError(f"Uint64 cannot be negative: {value}")
        if value > U64_MAX:
            raise ValueError(f"Uint64 overflow: {value} > 2^64-1")
        return str(value)

    if not isinstance(value, str):
        raise ValueError(f"Uint64 must be string or int, got {type(value).__name__}")

    if not value.isdigit():
        raise ValueError(f"Uint64 must be a decimal integer string: '{value}'")

    if int(value) > U64_MAX:
        raise ValueError(f"Uint64 overflow: {value} > 2^64-1")

    return value


# 64-bit unsigned integer as decimal string (validated)
Uint64 = Annotated[
    str,
    BeforeValidator(validate_uint64),
    Field(description="64-bit unsigned integer as decimal string"),
]

# Opaque asset key (e.g. a base58 mint address); compared exactly
TokenId = Annotated[str, Field(min_length=1)]

# Fee or tolerance in basis points
Bps = Annotated[int, Field(ge=0, le=BPS_DENOMINATOR)]

# Venue fee in basis points; 100% is not a valid fee
FeeBps = Annotated[int, Field(ge=0, lt=BPS_DENOMINATOR)]
