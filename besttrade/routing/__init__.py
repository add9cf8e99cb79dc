"""Route discovery."""

from besttrade.routing.routes import (
    PoolRouteProvider,
    RouteProvider,
    RouteSet,
    compute_all_routes,
)

__all__ = ["RouteSet", "RouteProvider", "PoolRouteProvider", "compute_all_routes"]
