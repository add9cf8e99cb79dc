"""Selection constants and well-known contract addresses.

Centralizes the ratio constants used when comparing route quotes and the
mainnet addresses used by the quoter and path encoder.
"""

from besttrade.math import Percent
from besttrade.models.currency import NativeCurrency, Token
from besttrade.models.types import is_valid_address

# One basis point, used as a rounding allowance when comparing exact-input quotes
ONE_BIPS = Percent(1, 10_000)

ONE_HUNDRED_PERCENT = Percent(1, 1)

# A route with fewer hops wins when its quote is within this slack of the best one
BETTER_TRADE_LESS_HOPS_THRESHOLD = Percent(50, 10_000)

# Route enumeration depth used by PoolRouteProvider
DEFAULT_MAX_HOPS = 2


def _validate_address(name: str, address: str) -> str:
    """Validate and return a well-known address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# UniswapV3 Quoter (V1, path-based quoteExactInput/quoteExactOutput), mainnet
QUOTER_ADDRESS = _validate_address("Quoter", "0xb27308f9f90d607463bb33ea1bebb41c27ce5ab6")

# Wrapped native token on mainnet (lowercase for consistency)
WETH = _validate_address("WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")

# Native currency on mainnet, wrapped as WETH inside pool paths
ETHER = NativeCurrency(
    symbol="ETH",
    name="Ether",
    decimals=18,
    wrapped=Token(address=WETH, decimals=18, symbol="WETH", name="Wrapped Ether"),
)
