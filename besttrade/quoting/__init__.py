"""Quote lookups: request building, quoters and batch tracking."""

from besttrade.quoting.batch import QuoteBatch
from besttrade.quoting.quoter import QUOTER_ABI, MockQuoter, Quoter, QuoteKey, Web3Quoter
from besttrade.quoting.requests import build_quote_requests
from besttrade.quoting.types import QuoteRecord, QuoteRequest

__all__ = [
    "QuoteRequest",
    "QuoteRecord",
    "build_quote_requests",
    "Quoter",
    "QuoteKey",
    "MockQuoter",
    "Web3Quoter",
    "QUOTER_ABI",
    "QuoteBatch",
]
