"""Numeric constants and routing defaults.

Centralizes integer widths, fixed-point scales and the default routing policy
so that venues, routers and configuration agree on them.
"""

# Basis points denominator (10000 bps = 100%)
BPS_DENOMINATOR = 10_000

# Fixed-point scale for orderbook bid and ask prices
PRICE_PRECISION = 1_000_000

# Amounts and reserves are 64-bit on the ledger; intermediate products are
# computed in 128-bit width before narrowing back.
U64_MAX = 2**64 - 1
U128_MAX = 2**128 - 1

# Split routing: allocation granularity in percent, and how many venues
# (ranked by single-venue output) enter the combinatorial search.
DEFAULT_SPLIT_STEP_PERCENT = 10
DEFAULT_SPLIT_MAX_VENUES = 4

# Multi-hop routing
DEFAULT_MAX_HOPS = 2
MAX_HOPS_LIMIT = 3

# Largest share of the input-side reserve a single AMM trade may consume
DEFAULT_AMM_MAX_INPUT_BPS = 5_000

# Default slippage tolerance applied when deriving a minimum output (1%)
DEFAULT_SLIPPAGE_BPS = 100

# Fee defaults per venue family (bps)
DEFAULT_CONSTANT_PRODUCT_FEE_BPS = 25

# Quote API: a request carries its whole venue snapshot, so the body size
# limit is derived from a cap on the number of venues.
MAX_VENUES_PER_REQUEST = 1_000
VENUE_PAYLOAD_BYTES = 512  # one JSON venue with base58 mints and u64 strings
REQUEST_OVERHEAD_BYTES = 4 * 1024
MAX_REQUEST_BYTES = MAX_VENUES_PER_REQUEST * VENUE_PAYLOAD_BYTES + REQUEST_OVERHEAD_BYTES
