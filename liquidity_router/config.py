"""Routing configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from liquidity_router.constants import (
    BPS_DENOMINATOR,
    DEFAULT_AMM_MAX_INPUT_BPS,
    DEFAULT_MAX_HOPS,
    DEFAULT_SLIPPAGE_BPS,
    DEFAULT_SPLIT_MAX_VENUES,
    DEFAULT_SPLIT_STEP_PERCENT,
    MAX_HOPS_LIMIT,
)
from liquidity_router.routing.split import SplitMethod


@dataclass(frozen=True)
class RouterConfig:
    """Centralized configuration for route search.

    This dataclass holds every tunable routing policy, making it easy to test
    with different configurations and ensuring all strategies agree.

    Attributes:
        split_step_percent: Split allocation granularity (default: 10%)
        split_max_venues: Venues considered by the split search (default: 4)
        split_method: ENUMERATE (exhaustive) or GREEDY (marginal units)
        max_hops: Default hop limit for multi-hop search (default: 2, max 3)
        amm_max_input_bps: Largest share of an AMM's input-side reserve one
            trade may consume (default: 5000 = 50%)
        slippage_bps: Tolerance used to derive a route's minimum output
            (default: 100 = 1%)
    """

    split_step_percent: int = DEFAULT_SPLIT_STEP_PERCENT
    split_max_venues: int = DEFAULT_SPLIT_MAX_VENUES
    split_method: SplitMethod = SplitMethod.ENUMERATE

    max_hops: int = DEFAULT_MAX_HOPS

    amm_max_input_bps: int = DEFAULT_AMM_MAX_INPUT_BPS
    slippage_bps: int = DEFAULT_SLIPPAGE_BPS

    def __post_init__(self) -> None:
        if self.split_step_percent <= 0 or 100 % self.split_step_percent != 0:
            raise ValueError(
                f"split_step_percent must divide 100, got {self.split_step_percent}"
            )
        if self.split_max_venues < 1:
            raise ValueError(f"split_max_venues must be positive, got {self.split_max_venues}")
        if not 1 <= self.max_hops <= MAX_HOPS_LIMIT:
            raise ValueError(f"max_hops must be in [1, {MAX_HOPS_LIMIT}], got {self.max_hops}")
        if not 0 < self.amm_max_input_bps <= BPS_DENOMINATOR:
            raise ValueError(
                f"amm_max_input_bps must be in (0, {BPS_DENOMINATOR}], "
                f"got {self.amm_max_input_bps}"
            )
        if not 0 <= self.slippage_bps <= BPS_DENOMINATOR:
            raise ValueError(
                f"slippage_bps must be in [0, {BPS_DENOMINATOR}], got {self.slippage_bps}"
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RouterConfig:
        """Build a config from ROUTER_* environment variables.

        Unset variables keep their defaults:
        - ROUTER_SPLIT_STEP_PERCENT
        - ROUTER_SPLIT_MAX_VENUES
        - ROUTER_SPLIT_METHOD (enumerate | greedy)
        - ROUTER_MAX_HOPS
        - ROUTER_AMM_MAX_INPUT_BPS
        - ROUTER_SLIPPAGE_BPS

        Raises:
            ValueError: If a variable is not a valid value
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            split_step_percent=_int_var(env, "ROUTER_SPLIT_STEP_PERCENT", defaults.split_step_percent),
            split_max_venues=_int_var(env, "ROUTER_SPLIT_MAX_VENUES", defaults.split_max_venues),
            split_method=SplitMethod(env.get("ROUTER_SPLIT_METHOD", defaults.split_method.value)),
            max_hops=_int_var(env, "ROUTER_MAX_HOPS", defaults.max_hops),
            amm_max_input_bps=_int_var(env, "ROUTER_AMM_MAX_INPUT_BPS", defaults.amm_max_input_bps),
            slippage_bps=_int_var(env, "ROUTER_SLIPPAGE_BPS", defaults.slippage_bps),
        )


def _int_var(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"{name} must be an integer: '{raw}'") from err


# Default configuration instance
DEFAULT_ROUTER_CONFIG = RouterConfig()
