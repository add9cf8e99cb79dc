"""Best-trade selection: readiness aggregation, route reduction, trade building."""

from besttrade.selection.config import DEFAULT_SELECTOR_CONFIG, SelectorConfig
from besttrade.selection.reducer import BestRoute, best_route_exact_in, best_route_exact_out
from besttrade.selection.selector import BestTradeSelector, build_trade
from besttrade.selection.state import TradeSelection, TradeState, aggregate_state

__all__ = [
    "SelectorConfig",
    "DEFAULT_SELECTOR_CONFIG",
    "BestRoute",
    "best_route_exact_in",
    "best_route_exact_out",
    "BestTradeSelector",
    "build_trade",
    "TradeSelection",
    "TradeState",
    "aggregate_state",
]
