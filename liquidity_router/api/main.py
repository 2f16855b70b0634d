"""FastAPI application serving route quotes.

Every quote request carries its own venue snapshot, so the body size limit
is derived from the venue cap (MAX_VENUES_PER_REQUEST) rather than fixed.
"""

import os

import structlog
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from liquidity_router import __version__
from liquidity_router.api import endpoints
from liquidity_router.api.endpoints import get_router
from liquidity_router.constants import MAX_REQUEST_BYTES, MAX_VENUES_PER_REQUEST
from liquidity_router.models.health import HealthResponse, RequestLimitsModel, RouterConfigModel
from liquidity_router.router import LiquidityRouter

logger = structlog.get_logger()

app = FastAPI(
    title="Liquidity Router",
    description="Best-execution routing across constant product, concentrated and orderbook venues",
    version=__version__,
)
app.include_router(endpoints.router)


@app.middleware("http")
async def limit_snapshot_size(request: Request, call_next):  # type: ignore[no-untyped-def]
    """Reject bodies too large to hold MAX_VENUES_PER_REQUEST venues."""
    content_length = request.headers.get("content-length")
    if content_length is not None and content_length.isdigit():
        size = int(content_length)
        if size > MAX_REQUEST_BYTES:
            logger.info("request_body_rejected", size=size, limit=MAX_REQUEST_BYTES)
            return JSONResponse(
                status_code=413,
                content={
                    "detail": (
                        f"Request body of {size} bytes exceeds {MAX_REQUEST_BYTES} "
                        f"(at most {MAX_VENUES_PER_REQUEST} venues)"
                    )
                },
            )
    return await call_next(request)


@app.get("/health")
async def health(router_instance: LiquidityRouter = Depends(get_router)) -> HealthResponse:
    """Report liveness, the active routing policy and the request limits."""
    return HealthResponse(
        version=__version__,
        config=RouterConfigModel.from_config(router_instance.config),
        limits=RequestLimitsModel(
            max_venues=MAX_VENUES_PER_REQUEST,
            max_request_bytes=MAX_REQUEST_BYTES,
            quote_timeout_seconds=endpoints.QUOTE_TIMEOUT_SECONDS,
        ),
    )


def run() -> None:
    """Serve the quote API with uvicorn.

    ROUTER_HOST and ROUTER_PORT set the bind address (default
    127.0.0.1:8000); ROUTER_LOG_LEVEL sets uvicorn's log level. The routing
    policy is read from the variables listed in RouterConfig.from_env.
    """
    host = os.environ.get("ROUTER_HOST", "127.0.0.1")
    port = int(os.environ.get("ROUTER_PORT", "8000"))
    logger.info("starting_quote_api", host=host, port=port, version=__version__)
    uvicorn.run(app, host=host, port=port, log_level=os.environ.get("ROUTER_LOG_LEVEL", "info"))


if __name__ == "__main__":
    run()
