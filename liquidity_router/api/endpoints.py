"""API endpoints for the liquidity router."""

import asyncio
import os
from functools import partial

import structlog
from fastapi import APIRouter, Depends, HTTPException

from liquidity_router.config import RouterConfig
from liquidity_router.errors import EmptyPool, InvalidFee, InvalidRequest
from liquidity_router.models.quote import QuoteRequest, QuoteResponse, RouteModel
from liquidity_router.router import LiquidityRouter

logger = structlog.get_logger()

router = APIRouter()

# Upper bound on how long one quote may run in the executor
QUOTE_TIMEOUT_SECONDS = float(os.environ.get("ROUTER_QUOTE_TIMEOUT_SECONDS", "5.0"))

_default_router: LiquidityRouter | None = None


def get_router() -> LiquidityRouter:
    """Dependency provider for the router instance.

    Override this in tests to inject a differently configured router:
        app.dependency_overrides[get_router] = lambda: LiquidityRouter(config)

    Returns:
        The router configured from ROUTER_* environment variables.
    """
    global _default_router
    if _default_router is None:
        _default_router = LiquidityRouter(RouterConfig.from_env())
    return _default_router


@router.post("/quote")
async def quote(
    request: QuoteRequest,
    router_instance: LiquidityRouter = Depends(get_router),
) -> QuoteResponse:
    """Quote the best route for an exact-input trade.

    Error Handling:
        - Invalid request schema: 422 Validation Error (Pydantic)
        - Degenerate request or malformed venue: 422
        - No venue or path can take the trade: 404
        - Routing exceeded QUOTE_TIMEOUT_SECONDS: 504
        - Anything else: logged with traceback, 500
    """
    logger.info(
        "received_quote_request",
        token_in=request.token_in,
        token_out=request.token_out,
        amount_in=request.amount_in,
        venue_count=len(request.venues),
        strategy=request.strategy.value,
    )

    try:
        snapshot = request.snapshot()
        loop = asyncio.get_event_loop()
        routes = await asyncio.wait_for(
            loop.run_in_executor(
                None,
                partial(
                    router_instance.find_routes,
                    snapshot,
                    request.token_in,
                    request.token_out,
                    int(request.amount_in),
                    strategies=request.strategy.strategies(),
                    max_hops=request.max_hops,
                ),
            ),
            timeout=QUOTE_TIMEOUT_SECONDS,
        )
    except TimeoutError:
        logger.warning(
            "quote_timeout",
            token_in=request.token_in,
            token_out=request.token_out,
            timeout_seconds=QUOTE_TIMEOUT_SECONDS,
        )
        raise HTTPException(status_code=504, detail="Routing timed out") from None
    except (InvalidRequest, InvalidFee, EmptyPool, ValueError) as e:
        logger.info("quote_rejected", reason=str(e))
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception:
        logger.exception(
            "quote_error",
            token_in=request.token_in,
            token_out=request.token_out,
            venue_count=len(request.venues),
        )
        raise HTTPException(status_code=500, detail="Internal routing error") from None

    if not routes:
        logger.info("no_route_found", token_in=request.token_in, token_out=request.token_out)
        raise HTTPException(
            status_code=404,
            detail=f"No route from {request.token_in} to {request.token_out}",
        )

    best = routes[0]
    minimum_out = router_instance.minimum_output(best, request.slippage_bps)

    logger.info(
        "returning_quote",
        strategy=best.strategy.value,
        amount_out=best.amount_out,
        minimum_amount_out=minimum_out,
        hops=best.hop_count,
        alternatives=len(routes) - 1,
    )

    return QuoteResponse(
        route=RouteModel.from_route(best),
        minimum_amount_out=str(minimum_out),
        alternatives=[RouteModel.from_route(r) for r in routes[1:]],
    )
