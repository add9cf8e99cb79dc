"""Test helpers module for shared test utilities.

- constants: Token addresses and metadata
- factories: Token, pool, route, amount and quote factory functions
"""

from tests.helpers.constants import DAI, TOKEN_DECIMALS, USDC, USDT, WBTC, WETH
from tests.helpers.factories import (
    make_amount,
    make_path_route,
    make_pool,
    make_route,
    make_token,
    quote,
)

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "USDT",
    "WBTC",
    "TOKEN_DECIMALS",
    # Factories
    "make_token",
    "make_pool",
    "make_route",
    "make_path_route",
    "make_amount",
    "quote",
]
