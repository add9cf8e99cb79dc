"""Best-route reduction over aligned (route, quote) pairs.

Both directions fold left to right, skipping quotes without an amount and
adopting the first usable one. After that a candidate replaces the current
best when its amount is strictly better, or when it is not better but uses
fewer hops and is within the fewer-hops threshold.

The two threshold tests are not mirror images:

    exact input:  Percent(best, candidate) - one_bips < threshold
    exact output: one_hundred_percent - Percent(candidate, best) > threshold
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from besttrade.math import Percent
from besttrade.models.route import Route
from besttrade.quoting.types import QuoteRecord
from besttrade.selection.config import DEFAULT_SELECTOR_CONFIG, SelectorConfig


@dataclass(frozen=True)
class BestRoute:
    """Winning route and its quoted amount."""

    route: Route
    amount: int
    index: int  # Position in the route list


def _prefers_fewer_hops(
    current: BestRoute,
    candidate: Route,
    result_better: bool,
    within_threshold: bool,
) -> bool:
    hops_current_best = current.route.hop_count
    return (
        not result_better
        and bool(hops_current_best)
        and within_threshold
        and candidate.hop_count < hops_current_best
    )


def best_route_exact_in(
    routes: Sequence[Route],
    quotes: Sequence[QuoteRecord],
    config: SelectorConfig = DEFAULT_SELECTOR_CONFIG,
) -> BestRoute | None:
    """Pick the route with the highest quoted output.

    Args:
        routes: Candidate routes
        quotes: Quote records aligned with routes (amount = output amount)
        config: Ratio constants

    Returns:
        BestRoute, or None if no quote has an amount
    """
    best: BestRoute | None = None
    for i, (route, quote) in enumerate(zip(routes, quotes, strict=True)):
        if quote.amount is None:
            continue

        if best is None:
            best = BestRoute(route=route, amount=quote.amount, index=i)
            continue

        amount_ratio = Percent(best.amount, quote.amount)
        within_threshold = amount_ratio.subtract(config.one_bips).less_than(
            config.less_hops_threshold
        )
        result_better = best.amount < quote.amount

        if result_better or _prefers_fewer_hops(best, route, result_better, within_threshold):
            best = BestRoute(route=route, amount=quote.amount, index=i)

    return best


def best_route_exact_out(
    routes: Sequence[Route],
    quotes: Sequence[QuoteRecord],
    config: SelectorConfig = DEFAULT_SELECTOR_CONFIG,
) -> BestRoute | None:
    """Pick the route with the lowest quoted input.

    Args:
        routes: Candidate routes
        quotes: Quote records aligned with routes (amount = input amount)
        config: Ratio constants

    Returns:
        BestRoute, or None if no quote has an amount
    """
    best: BestRoute | None = None
    for i, (route, quote) in enumerate(zip(routes, quotes, strict=True)):
        if quote.amount is None:
            continue

        if best is None:
            best = BestRoute(route=route, amount=quote.amount, index=i)
            continue

        amount_ratio = Percent(quote.amount, best.amount)
        within_threshold = config.one_hundred_percent.subtract(amount_ratio).greater_than(
            config.less_hops_threshold
        )
        result_better = best.amount > quote.amount

        if result_better or _prefers_fewer_hops(best, route, result_better, within_threshold):
            best = BestRoute(route=route, amount=quote.amount, index=i)

    return best


__all__ = ["BestRoute", "best_route_exact_in", "best_route_exact_out"]
