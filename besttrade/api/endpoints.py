"""API endpoints for best-trade selection."""

import os

import structlog
from fastapi import APIRouter, Depends, HTTPException

from besttrade.api.schemas import BestTradeRequest, BestTradeResponse
from besttrade.errors import BestTradeError
from besttrade.models.currency import Currency, CurrencyAmount
from besttrade.models.route import Route
from besttrade.models.trade import TradeType
from besttrade.routing.routes import RouteSet
from besttrade.selection.config import DEFAULT_SELECTOR_CONFIG, SelectorConfig
from besttrade.selection.selector import BestTradeSelector

logger = structlog.get_logger()

router = APIRouter()

# Fewer-hops threshold in basis points
# Configurable via environment variable BESTTRADE_LESS_HOPS_THRESHOLD_BIPS
_THRESHOLD_BIPS = os.environ.get("BESTTRADE_LESS_HOPS_THRESHOLD_BIPS")
SELECTOR_CONFIG = (
    SelectorConfig.from_threshold_bips(int(_THRESHOLD_BIPS))
    if _THRESHOLD_BIPS
    else DEFAULT_SELECTOR_CONFIG
)


def get_selector() -> BestTradeSelector:
    """Dependency provider for the selector instance.

    Override this in tests to inject a selector with a custom config:
        app.dependency_overrides[get_selector] = lambda: selector
    """
    return BestTradeSelector(SELECTOR_CONFIG)


def _build_route_set(
    request: BestTradeRequest,
    currency_in: Currency | None,
    currency_out: Currency | None,
) -> RouteSet:
    """Build routes for the request; empty when either currency is missing."""
    if currency_in is None or currency_out is None:
        return RouteSet.empty(loading=request.routes_loading)
    routes = tuple(
        Route.from_pools([pool.to_pool() for pool in route.pools], currency_in, currency_out)
        for route in request.routes
    )
    return RouteSet(routes=routes, loading=request.routes_loading)


@router.post("/best-trade")
async def best_trade(
    request: BestTradeRequest,
    selector: BestTradeSelector = Depends(get_selector),
) -> BestTradeResponse:
    """Select the best route for a swap from caller-supplied routes and quotes.

    Error Handling:
        - Invalid request schema or misaligned quotes: 422 (Pydantic)
        - Routes that do not connect the currencies: 422
        - Missing amount or currency: state "invalid"
    """
    logger.info(
        "received_best_trade_request",
        trade_type=request.trade_type.value,
        route_count=len(request.routes),
        routes_loading=request.routes_loading,
    )

    currency_in = request.currency_in.to_currency() if request.currency_in is not None else None
    currency_out = request.currency_out.to_currency() if request.currency_out is not None else None
    fixed_currency = currency_in if request.trade_type is TradeType.EXACT_INPUT else currency_out

    try:
        route_set = _build_route_set(request, currency_in, currency_out)
        amount = (
            CurrencyAmount.from_raw(fixed_currency, request.amount)
            if request.amount is not None and fixed_currency is not None
            else None
        )
    except BestTradeError as e:
        logger.warning("best_trade_request_rejected", error=str(e))
        raise HTTPException(status_code=422, detail=str(e)) from e

    quotes = [quote.to_record() for quote in request.quotes]
    if request.trade_type is TradeType.EXACT_INPUT:
        selection = selector.best_trade_exact_in(amount, currency_out, route_set, quotes)
    else:
        selection = selector.best_trade_exact_out(currency_in, amount, route_set, quotes)

    logger.info(
        "returning_best_trade",
        state=selection.state.value,
        hops=selection.trade.hop_count if selection.trade is not None else None,
    )
    return BestTradeResponse.from_selection(selection)
