"""Selection outcome types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from besttrade.models.trade import Trade


class TradeState(str, Enum):
    """Overall status of a best-trade selection."""

    LOADING = "loading"  # Routes or quotes still in flight
    INVALID = "invalid"  # Missing caller input or malformed lookups
    NO_ROUTE_FOUND = "noRouteFound"  # Everything settled, no usable quote
    VALID = "valid"
    SYNCING = "syncing"  # Usable trade, but some quotes are stale


@dataclass(frozen=True)
class TradeSelection:
    """Result of one selection call. trade is set only for VALID and SYNCING."""

    state: TradeState
    trade: Trade | None = None

    @classmethod
    def no_route_found(cls) -> TradeSelection:
        return cls(state=TradeState.NO_ROUTE_FOUND)


def aggregate_state(
    inputs_present: bool,
    routes_loading: bool,
    quotes_loading: bool,
    any_invalid: bool = False,
) -> TradeState | None:
    """Classify readiness before any amounts are compared.

    Checks run in order: missing inputs or invalid lookups, then loading.

    Args:
        inputs_present: Fixed-side amount and other currency are both supplied
        routes_loading: Route discovery still running
        quotes_loading: At least one quote lookup still in flight
        any_invalid: At least one lookup was malformed (exact output only)

    Returns:
        INVALID or LOADING, or None if reduction should proceed
    """
    if not inputs_present or any_invalid:
        return TradeState.INVALID
    if routes_loading or quotes_loading:
        return TradeState.LOADING
    return None


__all__ = ["TradeState", "TradeSelection", "aggregate_state"]
