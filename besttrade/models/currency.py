"""Currencies and raw currency amounts.

A currency is either the chain's native currency or an issued token. The
two variants share the `is_native` tag so callers branch on it explicitly
rather than inspecting types. Pools only ever hold tokens, so the native
currency carries the token that wraps it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from typing import Union

from besttrade.errors import InvalidAmountError
from besttrade.models.types import normalize_address, parse_uint256


@dataclass(frozen=True)
class Token:
    """An issued token, identified by its (normalized) address.

    Equality and hashing use the address only; symbol, name and decimals
    are display metadata.
    """

    address: str
    decimals: int = field(default=18, compare=False)
    symbol: str | None = field(default=None, compare=False)
    name: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", normalize_address(self.address))
        if self.decimals < 0 or self.decimals > 255:
            raise ValueError(f"Token decimals out of range: {self.decimals}")

    @property
    def is_native(self) -> bool:
        return False

    @property
    def wrapped(self) -> Token:
        """Tokens wrap to themselves."""
        return self

    def sorts_before(self, other: Token) -> bool:
        """Check if this token is token0 of a pool containing both tokens."""
        if self.address == other.address:
            raise ValueError(f"Cannot sort identical tokens: {self.address}")
        return int(self.address, 16) < int(other.address, 16)

    def __str__(self) -> str:
        return self.symbol or self.address


@dataclass(frozen=True)
class NativeCurrency:
    """The chain's native currency (e.g. ETH), wrapped by a token in pools."""

    symbol: str
    wrapped: Token = field(compare=False)
    decimals: int = 18
    name: str | None = field(default=None, compare=False)

    @property
    def is_native(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.symbol


Currency = Union[NativeCurrency, Token]


@dataclass(frozen=True)
class CurrencyAmount:
    """A raw, non-negative integer amount of a currency.

    Attributes:
        currency: The native currency or token the amount is denominated in
        raw: Amount in the currency's smallest unit
    """

    currency: Currency
    raw: int

    def __post_init__(self) -> None:
        if isinstance(self.raw, bool) or not isinstance(self.raw, int):
            raise InvalidAmountError(f"Amount must be int, got {type(self.raw).__name__}")
        try:
            parse_uint256(self.raw)
        except ValueError as err:
            raise InvalidAmountError(str(err)) from err

    @classmethod
    def from_raw(cls, currency: Currency, raw: int | str) -> CurrencyAmount:
        """Build an amount from an int or a decimal digit string.

        Raises:
            InvalidAmountError: If the value is not a non-negative uint256
        """
        try:
            value = parse_uint256(raw)
        except ValueError as err:
            raise InvalidAmountError(str(err)) from err
        return cls(currency=currency, raw=value)

    def to_hex(self) -> str:
        """Serialize the raw amount as a 0x-prefixed hex big integer (e.g. "0x3e8")."""
        return hex(self.raw)

    def to_exact(self) -> str:
        """Format the amount in whole units using the currency's decimals."""
        if self.raw == 0:
            return "0"
        with localcontext() as ctx:
            ctx.prec = 100
            value = Decimal(self.raw).scaleb(-self.currency.decimals)
            return format(value.normalize(), "f")

    def __str__(self) -> str:
        return f"{self.to_exact()} {self.currency}"


__all__ = ["Token", "NativeCurrency", "Currency", "CurrencyAmount"]
