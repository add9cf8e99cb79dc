"""Single-path routes through pools and their quoter path encoding."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from eth_abi.packed import encode_packed

from besttrade.errors import InvalidRouteError
from besttrade.models.currency import Currency, Token
from besttrade.models.pool import Pool


@dataclass(frozen=True)
class Route:
    """An ordered path of pools from an input currency to an output currency.

    token_path holds the wrapped tokens visited, starting with the input
    currency's token and ending with the output currency's token, so
    len(token_path) == len(pools) + 1.

    Build routes with Route.from_pools, which derives the token path and
    checks that consecutive pools connect.
    """

    pools: tuple[Pool, ...]
    token_path: tuple[Token, ...]
    input: Currency
    output: Currency

    def __post_init__(self) -> None:
        if len(self.token_path) < 2:
            raise InvalidRouteError(f"Route needs at least 2 tokens, got {len(self.token_path)}")
        if len(self.token_path) != len(self.pools) + 1:
            raise InvalidRouteError(
                f"Token path length {len(self.token_path)} does not match "
                f"{len(self.pools)} pools"
            )

    @classmethod
    def from_pools(
        cls,
        pools: Sequence[Pool],
        input_currency: Currency,
        output_currency: Currency,
    ) -> Route:
        """Build a route by walking pools from the input currency.

        Args:
            pools: Pools in swap order
            input_currency: Currency sold into the first pool
            output_currency: Currency received from the last pool

        Returns:
            Route with the derived token path

        Raises:
            InvalidRouteError: If pools is empty or does not connect the currencies
        """
        if not pools:
            raise InvalidRouteError("Route needs at least one pool")

        current = input_currency.wrapped
        if not pools[0].involves_token(current):
            raise InvalidRouteError(f"Input {input_currency} not in first pool")

        path = [current]
        for i, pool in enumerate(pools):
            if not pool.involves_token(current):
                raise InvalidRouteError(f"Pool {i} does not contain {current}")
            current = pool.get_token_out(current)
            path.append(current)

        if current != output_currency.wrapped:
            raise InvalidRouteError(f"Route ends at {current}, expected {output_currency}")

        return cls(
            pools=tuple(pools),
            token_path=tuple(path),
            input=input_currency,
            output=output_currency,
        )

    @property
    def hop_count(self) -> int:
        """Number of pool traversals."""
        return len(self.token_path) - 1

    @property
    def is_multihop(self) -> bool:
        return self.hop_count > 1

    def __str__(self) -> str:
        return " -> ".join(str(token) for token in self.token_path)


def encode_route_to_path(route: Route, exact_output: bool) -> str:
    """Encode a route as a packed quoter path.

    The path interleaves 20-byte token addresses with 3-byte fee tiers:
    token0 | fee0 | token1 | fee1 | token2 ... Exact-output quotes walk the
    path backwards, so the order is reversed for them.

    Args:
        route: Route to encode
        exact_output: True for quoteExactOutput, False for quoteExactInput

    Returns:
        0x-prefixed hex of the packed path
    """
    tokens = list(route.token_path)
    fees = [pool.fee for pool in route.pools]
    if exact_output:
        tokens.reverse()
        fees.reverse()

    types = ["address"]
    values: list[bytes | int] = [bytes.fromhex(tokens[0].address[2:])]
    for fee, token in zip(fees, tokens[1:], strict=True):
        types.extend(["uint24", "address"])
        values.extend([fee, bytes.fromhex(token.address[2:])])

    return "0x" + encode_packed(types, values).hex()


__all__ = ["Route", "encode_route_to_path"]
