"""Batched, block-aware tracking of per-route quote lookups.

QuoteBatch plays the role of a multicall state: the caller sets the
current requests (one per route), lookups complete independently, and
records() reports one QuoteRecord per request describing what is known
right now. Results are keyed by request rather than by position, so a
route whose request did not change keeps its result when the route list
is rebuilt, and a changed request starts over as loading.

A result fetched at an older block than the latest known block is stale:
its amount is still reported, with syncing=True, until a fresh result
arrives.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from besttrade.quoting.quoter import Quoter
from besttrade.quoting.types import QuoteRecord, QuoteRequest

logger = structlog.get_logger()


@dataclass(frozen=True)
class _LookupResult:
    """Amount returned for a request and the block it was fetched at."""

    amount: int | None
    block_number: int


class QuoteBatch:
    """Tracks quote lookups for a list of routes in one swap direction.

    Args:
        exact_output: True if lookups are quoteExactOutput calls
    """

    def __init__(self, exact_output: bool = False) -> None:
        self.exact_output = exact_output
        self._requests: tuple[QuoteRequest, ...] = ()
        self._results: dict[QuoteRequest, _LookupResult] = {}
        self._latest_block: int | None = None

    @property
    def requests(self) -> tuple[QuoteRequest, ...]:
        return self._requests

    @property
    def latest_block(self) -> int | None:
        return self._latest_block

    def set_requests(self, requests: Sequence[QuoteRequest]) -> None:
        """Replace the current requests.

        Results for requests no longer present are dropped.
        """
        self._requests = tuple(requests)
        current = set(self._requests)
        self._results = {req: res for req, res in self._results.items() if req in current}

    def set_latest_block(self, block_number: int) -> None:
        """Advance the latest known block. Older block numbers are ignored."""
        if self._latest_block is None or block_number > self._latest_block:
            self._latest_block = block_number

    def receive(self, request: QuoteRequest, amount: int | None, block_number: int) -> None:
        """Store a lookup result.

        Results for requests that are no longer current are discarded, as are
        results older than the one already stored.

        Args:
            request: The request that was looked up
            amount: Quoted amount, or None if the lookup reverted
            block_number: Block the lookup was executed against
        """
        if request not in self._requests:
            logger.debug("quote_result_discarded", path=request.path, block_number=block_number)
            return
        existing = self._results.get(request)
        if existing is not None and existing.block_number > block_number:
            return
        self._results[request] = _LookupResult(amount=amount, block_number=block_number)

    def pending_requests(self) -> list[QuoteRequest]:
        """Valid requests with no result or a stale one, deduplicated, in order."""
        pending: list[QuoteRequest] = []
        seen: set[QuoteRequest] = set()
        for request in self._requests:
            if not request.valid or request in seen:
                continue
            seen.add(request)
            result = self._results.get(request)
            if (
                result is None
                or self._latest_block is None
                or result.block_number < self._latest_block
            ):
                pending.append(request)
        return pending

    def _record(self, request: QuoteRequest) -> QuoteRecord:
        if not request.valid:
            return QuoteRecord.invalid()
        result = self._results.get(request)
        if result is None or self._latest_block is None:
            return QuoteRecord.pending()
        return QuoteRecord(
            amount=result.amount,
            loading=False,
            valid=True,
            syncing=result.block_number < self._latest_block,
        )

    def records(self) -> list[QuoteRecord]:
        """One QuoteRecord per current request, positionally aligned."""
        return [self._record(request) for request in self._requests]

    def _lookup(self, quoter: Quoter, request: QuoteRequest) -> int | None:
        amount = request.amount_int
        assert amount is not None  # pending_requests only yields valid requests
        if self.exact_output:
            return quoter.quote_exact_output(request.path, amount)
        return quoter.quote_exact_input(request.path, amount)

    async def refresh(self, quoter: Quoter, block_number: int) -> list[QuoteRecord]:
        """Run every pending lookup concurrently against `block_number`.

        Quoter calls are blocking, so each runs in the default executor.
        Requests replaced while lookups are in flight have their results
        discarded by receive(). A lookup that raises is logged and settles
        as a reverted quote, so one failing path never blocks the others.

        Args:
            quoter: Quoter to price requests with
            block_number: Block the lookups are executed against

        Returns:
            Records after all lookups have settled
        """
        self.set_latest_block(block_number)
        pending = self.pending_requests()
        if not pending:
            return self.records()

        loop = asyncio.get_running_loop()
        results = await asyncio.gather(
            *(loop.run_in_executor(None, self._lookup, quoter, request) for request in pending),
            return_exceptions=True,
        )
        failed = 0
        for request, result in zip(pending, results, strict=True):
            if isinstance(result, Exception):
                logger.warning(
                    "quote_lookup_failed",
                    path=request.path,
                    amount=request.amount,
                    block_number=block_number,
                    error=str(result),
                )
                result = None
            elif isinstance(result, BaseException):
                raise result
            if result is None:
                failed += 1
            self.receive(request, result, block_number)

        logger.info(
            "quote_batch_refreshed",
            block_number=block_number,
            lookups=len(pending),
            failed=failed,
            exact_output=self.exact_output,
        )
        return self.records()


__all__ = ["QuoteBatch"]
