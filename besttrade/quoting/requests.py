"""Per-route quote request construction."""

from __future__ import annotations

from functools import lru_cache

from besttrade.models.route import Route, encode_route_to_path
from besttrade.quoting.types import QuoteRequest


@lru_cache(maxsize=256)
def build_quote_requests(
    routes: tuple[Route, ...],
    amount: int | None,
    exact_output: bool,
) -> tuple[QuoteRequest, ...]:
    """Build one quoter request per route, aligned with `routes`.

    Memoized on (routes, amount, direction) so repeated selections over the
    same inputs reuse the encoded paths.

    Args:
        routes: Candidate routes
        amount: Raw fixed-side amount, or None if not yet supplied
        exact_output: True to encode paths for quoteExactOutput

    Returns:
        Tuple of QuoteRequest; every request has amount=None if amount is None
    """
    hex_amount = hex(amount) if amount is not None else None
    return tuple(
        QuoteRequest(path=encode_route_to_path(route, exact_output), amount=hex_amount)
        for route in routes
    )


__all__ = ["build_quote_requests"]
