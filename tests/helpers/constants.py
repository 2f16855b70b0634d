"""Shared token constants for tests.

Mint keys are case-sensitive base58 strings and are used as-is.

Usage:
    from tests.helpers import SOL, USDC
    # or
    from tests.helpers.constants import SOL, USDC
"""

# =============================================================================
# Mints
# =============================================================================

SOL = "So11111111111111111111111111111111111111112"  # Wrapped SOL (9 decimals)
USDC = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"  # USD Coin (6 decimals)
RAY = "4k3Dyjzvzp8eMZWUXbBCjEvwSkkk59S5iCNLY3QrkX6R"  # Raydium (6 decimals)
BONK = "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263"  # Bonk (5 decimals)

TOKEN_DECIMALS = {
    SOL: 9,
    USDC: 6,
    RAY: 6,
    BONK: 5,
}

# =============================================================================
# Common amounts (SOL and USDC both in 9-decimal units, as in the router docs)
# =============================================================================

ONE_SOL = 10**9
SOL_RESERVE = 1_000 * ONE_SOL  # 1,000 SOL
USDC_RESERVE = 50_000 * ONE_SOL  # 50,000 USDC
