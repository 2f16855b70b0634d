"""AMM pricing math."""

from .constant_product import (
    price_impact_bps,
    quote_output,
    quote_required_input,
    validate_fee_bps,
)

__all__ = [
    "quote_output",
    "quote_required_input",
    "price_impact_bps",
    "validate_fee_bps",
]
