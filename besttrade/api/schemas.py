"""Pydantic models for the best-trade HTTP API."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Discriminator, Field, Tag, model_validator

from besttrade.constants import ETHER
from besttrade.models.currency import Currency, Token
from besttrade.models.pool import Pool
from besttrade.models.trade import Trade, TradeType
from besttrade.models.types import Address, Uint256
from besttrade.quoting.types import QuoteRecord
from besttrade.selection.state import TradeSelection, TradeState


class TokenCurrency(BaseModel):
    """An issued token."""

    kind: Literal["token"] = "token"
    address: Address = Field(description="Token address (0x-prefixed)")
    decimals: int = Field(default=18, ge=0, le=255)
    symbol: str | None = None
    name: str | None = None

    def to_currency(self) -> Token:
        return Token(
            address=self.address,
            decimals=self.decimals,
            symbol=self.symbol,
            name=self.name,
        )


class NativeCurrencyModel(BaseModel):
    """The chain's native currency (ETH on mainnet)."""

    kind: Literal["native"] = "native"

    def to_currency(self) -> Currency:
        return ETHER


def _get_currency_kind(v: dict[str, Any] | TokenCurrency | NativeCurrencyModel) -> str:
    """Discriminator function for the currency union."""
    if isinstance(v, dict):
        return str(v.get("kind", "token"))
    return v.kind


CurrencyModel = Annotated[
    Annotated[TokenCurrency, Tag("token")] | Annotated[NativeCurrencyModel, Tag("native")],
    Discriminator(_get_currency_kind),
]


class PoolModel(BaseModel):
    """A pool hop, identified by its two tokens and fee tier."""

    token_a: Address = Field(alias="tokenA")
    token_b: Address = Field(alias="tokenB")
    fee: int = Field(ge=0, lt=2**24, description="Fee in hundredths of a bip (3000 = 0.3%)")

    model_config = {"populate_by_name": True}

    def to_pool(self) -> Pool:
        return Pool(token0=Token(address=self.token_a), token1=Token(address=self.token_b), fee=self.fee)


class RouteModel(BaseModel):
    """A candidate route as an ordered list of pools."""

    pools: list[PoolModel] = Field(min_length=1)


class QuoteModel(BaseModel):
    """Quote lookup status for one route."""

    amount: Uint256 | None = None
    loading: bool = False
    valid: bool = True
    syncing: bool = False

    def to_record(self) -> QuoteRecord:
        return QuoteRecord(
            amount=int(self.amount) if self.amount is not None else None,
            loading=self.loading,
            valid=self.valid,
            syncing=self.syncing,
        )


class BestTradeRequest(BaseModel):
    """Candidate routes and their quotes for one swap."""

    trade_type: TradeType = Field(alias="tradeType")
    amount: Uint256 | None = Field(
        default=None,
        description="Fixed-side amount: input for exactInput, output for exactOutput.",
    )
    currency_in: CurrencyModel | None = Field(default=None, alias="currencyIn")
    currency_out: CurrencyModel | None = Field(default=None, alias="currencyOut")
    routes: list[RouteModel] = Field(default_factory=list)
    routes_loading: bool = Field(default=False, alias="routesLoading")
    quotes: list[QuoteModel] = Field(default_factory=list)

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def _quotes_aligned_with_routes(self) -> "BestTradeRequest":
        if len(self.quotes) != len(self.routes):
            raise ValueError(
                f"quotes must align with routes: {len(self.quotes)} quotes, {len(self.routes)} routes"
            )
        return self


class TradeModel(BaseModel):
    """The selected trade."""

    trade_type: TradeType = Field(alias="tradeType")
    route: list[Address] = Field(description="Token path from input to output")
    fees: list[int] = Field(description="Fee tier of each hop")
    hops: int
    input_amount: Uint256 = Field(alias="inputAmount")
    output_amount: Uint256 = Field(alias="outputAmount")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_trade(cls, trade: Trade) -> "TradeModel":
        return cls(
            trade_type=trade.trade_type,
            route=[token.address for token in trade.route.token_path],
            fees=[pool.fee for pool in trade.route.pools],
            hops=trade.hop_count,
            input_amount=str(trade.input_amount.raw),
            output_amount=str(trade.output_amount.raw),
        )


class BestTradeResponse(BaseModel):
    """Selection outcome."""

    state: TradeState
    trade: TradeModel | None = None

    model_config = {"populate_by_name": True}

    @classmethod
    def from_selection(cls, selection: TradeSelection) -> "BestTradeResponse":
        trade = TradeModel.from_trade(selection.trade) if selection.trade is not None else None
        return cls(state=selection.state, trade=trade)
