"""Trade records produced by best-trade selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from besttrade.models.currency import CurrencyAmount
from besttrade.models.route import Route


class TradeType(str, Enum):
    """Which side of the swap the caller fixed."""

    EXACT_INPUT = "exactInput"  # Input amount fixed, output quoted
    EXACT_OUTPUT = "exactOutput"  # Output amount fixed, input quoted


@dataclass(frozen=True)
class Trade:
    """An immutable single-route trade.

    Built without re-simulating the route: the amounts are taken as quoted.
    """

    route: Route
    trade_type: TradeType
    input_amount: CurrencyAmount
    output_amount: CurrencyAmount

    @classmethod
    def create_unchecked_trade(
        cls,
        route: Route,
        trade_type: TradeType,
        input_amount: CurrencyAmount,
        output_amount: CurrencyAmount,
    ) -> Trade:
        """Create a trade from already-quoted amounts without re-checking them."""
        return cls(
            route=route,
            trade_type=trade_type,
            input_amount=input_amount,
            output_amount=output_amount,
        )

    @property
    def hop_count(self) -> int:
        return self.route.hop_count


__all__ = ["TradeType", "Trade"]
