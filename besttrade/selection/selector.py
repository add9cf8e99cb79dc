"""Best single-route trade selection for exact-input and exact-output swaps.

BestTradeSelector is a pure function of its inputs: given the candidate
routes and the current quote records it classifies readiness, reduces the
candidates to one winner and builds the trade. It keeps no state between
calls, so a reactive caller can re-invoke it on every input change.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from besttrade.models.currency import Currency, CurrencyAmount
from besttrade.models.route import Route
from besttrade.models.trade import Trade, TradeType
from besttrade.quoting.requests import build_quote_requests
from besttrade.quoting.types import QuoteRecord, QuoteRequest
from besttrade.routing.routes import RouteSet
from besttrade.selection.config import DEFAULT_SELECTOR_CONFIG, SelectorConfig
from besttrade.selection.reducer import BestRoute, best_route_exact_in, best_route_exact_out
from besttrade.selection.state import TradeSelection, TradeState, aggregate_state

logger = structlog.get_logger()


def build_trade(
    route: Route,
    trade_type: TradeType,
    fixed_amount: CurrencyAmount,
    other_currency: Currency,
    computed_raw: int,
) -> Trade:
    """Wrap the quoted amount and build the trade for a winning route.

    Args:
        route: Winning route
        trade_type: Which side the caller fixed
        fixed_amount: The caller's amount (input for exact input, output for exact output)
        other_currency: Currency of the quoted side
        computed_raw: Quoted amount for the other side

    Returns:
        Trade with both amounts in the route's currencies
    """
    if trade_type is TradeType.EXACT_INPUT:
        return Trade.create_unchecked_trade(
            route=route,
            trade_type=trade_type,
            input_amount=fixed_amount,
            output_amount=CurrencyAmount(currency=other_currency, raw=computed_raw),
        )
    return Trade.create_unchecked_trade(
        route=route,
        trade_type=trade_type,
        input_amount=CurrencyAmount(currency=other_currency, raw=computed_raw),
        output_amount=fixed_amount,
    )


class BestTradeSelector:
    """Selects the best trade from candidate routes and their quotes.

    Args:
        config: Ratio constants. Defaults to DEFAULT_SELECTOR_CONFIG.
    """

    def __init__(self, config: SelectorConfig | None = None) -> None:
        self.config = config if config is not None else DEFAULT_SELECTOR_CONFIG

    # --- Quote requests ---

    def quote_requests_exact_in(
        self,
        route_set: RouteSet,
        amount_in: CurrencyAmount | None,
    ) -> tuple[QuoteRequest, ...]:
        """Quoter requests for an exact-input swap, aligned with route_set."""
        raw = amount_in.raw if amount_in is not None else None
        return build_quote_requests(route_set.routes, raw, exact_output=False)

    def quote_requests_exact_out(
        self,
        route_set: RouteSet,
        amount_out: CurrencyAmount | None,
    ) -> tuple[QuoteRequest, ...]:
        """Quoter requests for an exact-output swap, aligned with route_set."""
        raw = amount_out.raw if amount_out is not None else None
        return build_quote_requests(route_set.routes, raw, exact_output=True)

    # --- Selection ---

    def best_trade_exact_in(
        self,
        amount_in: CurrencyAmount | None,
        currency_out: Currency | None,
        route_set: RouteSet,
        quotes: Sequence[QuoteRecord],
    ) -> TradeSelection:
        """Best trade for swapping exactly `amount_in` into `currency_out`.

        Args:
            amount_in: Amount to swap in
            currency_out: Desired output currency
            route_set: Candidate routes
            quotes: Output-amount quotes aligned with route_set.routes

        Returns:
            TradeSelection; trade is set only for VALID and SYNCING
        """
        state = aggregate_state(
            inputs_present=amount_in is not None and currency_out is not None,
            routes_loading=route_set.loading,
            quotes_loading=any(quote.loading for quote in quotes),
        )
        if state is not None:
            return TradeSelection(state=state)

        assert amount_in is not None and currency_out is not None
        best = best_route_exact_in(route_set.routes, quotes, self.config)
        return self._finish(best, TradeType.EXACT_INPUT, amount_in, currency_out, quotes)

    def best_trade_exact_out(
        self,
        currency_in: Currency | None,
        amount_out: CurrencyAmount | None,
        route_set: RouteSet,
        quotes: Sequence[QuoteRecord],
    ) -> TradeSelection:
        """Best trade for receiving exactly `amount_out` by paying `currency_in`.

        Args:
            currency_in: Currency to pay with
            amount_out: Amount to receive
            route_set: Candidate routes
            quotes: Input-amount quotes aligned with route_set.routes

        Returns:
            TradeSelection; trade is set only for VALID and SYNCING
        """
        state = aggregate_state(
            inputs_present=amount_out is not None and currency_in is not None,
            routes_loading=route_set.loading,
            quotes_loading=any(quote.loading for quote in quotes),
            any_invalid=any(not quote.valid for quote in quotes),
        )
        if state is not None:
            return TradeSelection(state=state)

        assert amount_out is not None and currency_in is not None
        best = best_route_exact_out(route_set.routes, quotes, self.config)
        return self._finish(best, TradeType.EXACT_OUTPUT, amount_out, currency_in, quotes)

    def _finish(
        self,
        best: BestRoute | None,
        trade_type: TradeType,
        fixed_amount: CurrencyAmount,
        other_currency: Currency,
        quotes: Sequence[QuoteRecord],
    ) -> TradeSelection:
        if best is None:
            logger.debug(
                "best_trade_no_route",
                trade_type=trade_type.value,
                quote_count=len(quotes),
            )
            return TradeSelection.no_route_found()

        syncing = any(quote.syncing for quote in quotes)
        trade = build_trade(best.route, trade_type, fixed_amount, other_currency, best.amount)
        logger.debug(
            "best_trade_selected",
            trade_type=trade_type.value,
            route=str(best.route),
            hops=best.route.hop_count,
            amount=best.amount,
            route_index=best.index,
            candidates=len(quotes),
            syncing=syncing,
        )
        return TradeSelection(
            state=TradeState.SYNCING if syncing else TradeState.VALID,
            trade=trade,
        )


__all__ = ["BestTradeSelector", "build_trade"]
