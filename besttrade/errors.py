"""Error classes for route and amount construction.

The selection engine itself never raises; these errors are raised when
building the inputs it consumes (routes, currency amounts).
"""


class BestTradeError(Exception):
    """Base error for best-trade operations."""

    pass


class InvalidRouteError(BestTradeError):
    """Pools do not form a connected path between the route currencies."""

    pass


class InvalidAmountError(BestTradeError):
    """Amount is negative or does not fit in uint256."""

    pass
