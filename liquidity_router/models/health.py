"""Pydantic models for the health endpoint."""

from __future__ import annotations

from pydantic import BaseModel, Field

from liquidity_router.config import RouterConfig
from liquidity_router.routing import SplitMethod


class RouterConfigModel(BaseModel):
    """The routing policy a running service quotes with."""

    split_step_percent: int = Field(alias="splitStepPercent")
    split_max_venues: int = Field(alias="splitMaxVenues")
    split_method: SplitMethod = Field(alias="splitMethod")
    max_hops: int = Field(alias="maxHops")
    amm_max_input_bps: int = Field(alias="ammMaxInputBps")
    slippage_bps: int = Field(alias="slippageBps")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_config(cls, config: RouterConfig) -> RouterConfigModel:
        return cls(
            split_step_percent=config.split_step_percent,
            split_max_venues=config.split_max_venues,
            split_method=config.split_method,
            max_hops=config.max_hops,
            amm_max_input_bps=config.amm_max_input_bps,
            slippage_bps=config.slippage_bps,
        )


class RequestLimitsModel(BaseModel):
    """Bounds enforced on every quote request."""

    max_venues: int = Field(alias="maxVenues")
    max_request_bytes: int = Field(alias="maxRequestBytes")
    quote_timeout_seconds: float = Field(alias="quoteTimeoutSeconds")

    model_config = {"populate_by_name": True}


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    config: RouterConfigModel
    limits: RequestLimitsModel
