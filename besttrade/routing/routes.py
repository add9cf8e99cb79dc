"""Candidate route discovery for a currency pair."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Protocol

import structlog

from besttrade.constants import DEFAULT_MAX_HOPS
from besttrade.models.currency import Currency, Token
from besttrade.models.pool import Pool
from besttrade.models.route import Route

logger = structlog.get_logger()


@dataclass(frozen=True)
class RouteSet:
    """Ordered candidate routes for one currency pair.

    Attributes:
        routes: Candidate routes, in the order quotes will be aligned to
        loading: True while the provider is still discovering routes
    """

    routes: tuple[Route, ...] = field(default_factory=tuple)
    loading: bool = False

    def __post_init__(self) -> None:
        # Routes key the quote request cache and must be hashable
        object.__setattr__(self, "routes", tuple(self.routes))

    def __len__(self) -> int:
        return len(self.routes)

    @classmethod
    def empty(cls, loading: bool = False) -> RouteSet:
        return cls(routes=(), loading=loading)


class RouteProvider(Protocol):
    """Protocol for route discovery.

    Implementations return every single-path route worth quoting between
    two currencies. Either currency may be None while the caller is still
    collecting input.
    """

    def get_routes(
        self,
        currency_in: Currency | None,
        currency_out: Currency | None,
    ) -> RouteSet:
        """Get candidate routes between two currencies.

        Args:
            currency_in: Currency being sold
            currency_out: Currency being bought

        Returns:
            RouteSet, empty if either currency is missing or unconnected
        """
        ...


def compute_all_routes(
    currency_in: Currency,
    currency_out: Currency,
    pools: Sequence[Pool],
    max_hops: int = DEFAULT_MAX_HOPS,
) -> list[Route]:
    """Enumerate every route between two currencies through the given pools.

    Depth-first search over pools, never using a pool twice in one route.
    Routes are returned in discovery order, which follows the order of
    `pools`; shorter routes are not guaranteed to come first.

    Args:
        currency_in: Currency being sold
        currency_out: Currency being bought
        pools: Known pools
        max_hops: Maximum number of pools in a route

    Returns:
        All routes with 1..max_hops pools
    """
    token_in = currency_in.wrapped
    token_out = currency_out.wrapped
    if token_in == token_out or max_hops < 1:
        return []

    routes: list[Route] = []

    def _search(current: Token, path: list[Pool], used: set[int]) -> None:
        for i, pool in enumerate(pools):
            if i in used or not pool.involves_token(current):
                continue
            next_token = pool.get_token_out(current)
            if next_token == token_out:
                routes.append(Route.from_pools([*path, pool], currency_in, currency_out))
            elif len(path) + 1 < max_hops:
                path.append(pool)
                used.add(i)
                _search(next_token, path, used)
                path.pop()
                used.discard(i)

    _search(token_in, [], set())
    return routes


class PoolRouteProvider:
    """Route provider backed by an in-memory list of pools.

    Routes are recomputed on every call; the pool list can be replaced with
    set_pools as liquidity is discovered. While `loading` is set, returned
    route sets are flagged as loading.
    """

    def __init__(
        self,
        pools: Iterable[Pool] = (),
        max_hops: int = DEFAULT_MAX_HOPS,
        loading: bool = False,
    ) -> None:
        self._pools: tuple[Pool, ...] = tuple(pools)
        self.max_hops = max_hops
        self.loading = loading

    @property
    def pools(self) -> tuple[Pool, ...]:
        return self._pools

    def set_pools(self, pools: Iterable[Pool], loading: bool = False) -> None:
        """Replace the known pools."""
        self._pools = tuple(pools)
        self.loading = loading

    def get_routes(
        self,
        currency_in: Currency | None,
        currency_out: Currency | None,
    ) -> RouteSet:
        if currency_in is None or currency_out is None:
            return RouteSet.empty()

        routes = compute_all_routes(currency_in, currency_out, self._pools, self.max_hops)
        logger.debug(
            "routes_computed",
            currency_in=str(currency_in),
            currency_out=str(currency_out),
            pool_count=len(self._pools),
            route_count=len(routes),
        )
        return RouteSet(routes=tuple(routes), loading=self.loading)


__all__ = ["RouteSet", "RouteProvider", "compute_all_routes", "PoolRouteProvider"]
