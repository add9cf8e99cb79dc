"""Domain models: currencies, pools, routes and trades."""

from besttrade.models.currency import Currency, CurrencyAmount, NativeCurrency, Token
from besttrade.models.pool import Pool
from besttrade.models.route import Route, encode_route_to_path
from besttrade.models.trade import Trade, TradeType
from besttrade.models.types import normalize_address

__all__ = [
    "Currency",
    "CurrencyAmount",
    "NativeCurrency",
    "Token",
    "Pool",
    "Route",
    "encode_route_to_path",
    "Trade",
    "TradeType",
    "normalize_address",
]
