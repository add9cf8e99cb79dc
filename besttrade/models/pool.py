"""Pool references used to build routes."""

from __future__ import annotations

from dataclasses import dataclass

from besttrade.errors import InvalidRouteError
from besttrade.models.currency import Token


@dataclass(frozen=True)
class Pool:
    """A concentrated liquidity pool between two tokens at one fee tier.

    Only identity is kept here (tokens and fee). Pricing is delegated to the
    quoter, so no liquidity or tick state is stored. Tokens are held in
    sorted order (token0 < token1) regardless of construction order.
    """

    token0: Token
    token1: Token
    fee: int  # Fee in Uniswap units (e.g., 3000 for 0.3%)

    def __post_init__(self) -> None:
        if self.fee < 0 or self.fee >= 2**24:
            raise ValueError(f"Pool fee does not fit in uint24: {self.fee}")
        if self.token0 == self.token1:
            raise InvalidRouteError(f"Pool tokens must differ: {self.token0.address}")
        if not self.token0.sorts_before(self.token1):
            token0, token1 = self.token1, self.token0
            object.__setattr__(self, "token0", token0)
            object.__setattr__(self, "token1", token1)

    def involves_token(self, token: Token) -> bool:
        return token == self.token0 or token == self.token1

    def get_token_out(self, token_in: Token) -> Token:
        """Get the output token for a given input token."""
        if token_in == self.token0:
            return self.token1
        elif token_in == self.token1:
            return self.token0
        else:
            raise ValueError(f"Token {token_in} not in pool")


__all__ = ["Pool"]
