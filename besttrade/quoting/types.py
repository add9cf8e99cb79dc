"""Quote lookup requests and per-route quote records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuoteRequest:
    """One quoter lookup: an encoded route path and a hex amount.

    Attributes:
        path: 0x-prefixed packed path (see encode_route_to_path)
        amount: 0x-prefixed hex amount, or None when the caller has not
                supplied the fixed-side amount yet
    """

    path: str
    amount: str | None

    @property
    def valid(self) -> bool:
        """True if the lookup has all of its parameters."""
        return self.amount is not None

    @property
    def amount_int(self) -> int | None:
        return int(self.amount, 16) if self.amount is not None else None


@dataclass(frozen=True)
class QuoteRecord:
    """Status of the quote lookup for one route.

    Attributes:
        amount: Quoted output (exact input) or input (exact output) amount.
                None while the lookup is in flight, or if it reverted.
        loading: Lookup in flight with no result yet
        valid: Lookup parameters were well-formed
        syncing: A newer lookup is pending; amount (if any) is stale
    """

    amount: int | None = None
    loading: bool = False
    valid: bool = True
    syncing: bool = False

    @classmethod
    def invalid(cls) -> QuoteRecord:
        return cls(amount=None, loading=False, valid=False, syncing=False)

    @classmethod
    def pending(cls) -> QuoteRecord:
        return cls(amount=None, loading=True, valid=True, syncing=True)


__all__ = ["QuoteRequest", "QuoteRecord"]
