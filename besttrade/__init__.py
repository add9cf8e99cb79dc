"""Best single-route trade selection for token swaps."""

from besttrade.selection import BestTradeSelector, TradeSelection, TradeState

__version__ = "0.1.0"
__all__ = ["BestTradeSelector", "TradeSelection", "TradeState", "__version__"]
