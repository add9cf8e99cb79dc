"""Tests for block-aware quote batch tracking."""

import asyncio

from besttrade.quoting import MockQuoter, QuoteBatch, QuoteKey, QuoteRecord, QuoteRequest

REQ_A = QuoteRequest(path="0xaa", amount="0x3e8")
REQ_B = QuoteRequest(path="0xbb", amount="0x3e8")
REQ_NO_AMOUNT = QuoteRequest(path="0xcc", amount=None)


class TestQuoteBatchRecords:
    """Tests for record state derived from requests, results and blocks."""

    def test_empty_batch(self):
        assert QuoteBatch().records() == []

    def test_new_requests_are_loading(self):
        batch = QuoteBatch()
        batch.set_requests([REQ_A, REQ_B])
        batch.set_latest_block(10)

        assert batch.records() == [QuoteRecord.pending(), QuoteRecord.pending()]
        assert all(r.loading and r.syncing and r.valid for r in batch.records())

    def test_request_without_amount_is_invalid(self):
        batch = QuoteBatch()
        batch.set_requests([REQ_NO_AMOUNT])
        batch.set_latest_block(10)

        (record,) = batch.records()
        assert record.valid is False
        assert record.loading is False
        assert record.amount is None

    def test_fresh_result(self):
        batch = QuoteBatch()
        batch.set_requests([REQ_A])
        batch.set_latest_block(10)
        batch.receive(REQ_A, 990, block_number=10)

        assert batch.records() == [QuoteRecord(amount=990, loading=False, valid=True, syncing=False)]

    def test_stale_result_is_syncing(self):
        """A result from an older block stays attached while marked syncing."""
        batch = QuoteBatch()
        batch.set_requests([REQ_A])
        batch.set_latest_block(10)
        batch.receive(REQ_A, 990, block_number=10)
        batch.set_latest_block(11)

        (record,) = batch.records()
        assert record.amount == 990
        assert record.syncing is True
        assert record.loading is False

    def test_reverted_lookup_has_no_amount(self):
        batch = QuoteBatch()
        batch.set_requests([REQ_A])
        batch.set_latest_block(10)
        batch.receive(REQ_A, None, block_number=10)

        (record,) = batch.records()
        assert record.amount is None
        assert record.loading is False

    def test_no_latest_block_is_loading(self):
        batch = QuoteBatch()
        batch.set_requests([REQ_A])
        batch.receive(REQ_A, 990, block_number=10)
        assert batch.records()[0].loading is True

    def test_latest_block_never_decreases(self):
        batch = QuoteBatch()
        batch.set_latest_block(10)
        batch.set_latest_block(9)
        assert batch.latest_block == 10

    def test_older_result_does_not_replace_newer(self):
        batch = QuoteBatch()
        batch.set_requests([REQ_A])
        batch.set_latest_block(11)
        batch.receive(REQ_A, 1000, block_number=11)
        batch.receive(REQ_A, 900, block_number=10)
        assert batch.records()[0].amount == 1000


class TestQuoteBatchRequests:
    """Tests for request replacement and pending lookups."""

    def test_unchanged_request_keeps_result(self):
        batch = QuoteBatch()
        batch.set_requests([REQ_A])
        batch.set_latest_block(10)
        batch.receive(REQ_A, 990, block_number=10)

        batch.set_requests([REQ_B, REQ_A])
        records = batch.records()
        assert records[0].loading is True
        assert records[1].amount == 990

    def test_changed_request_starts_loading(self):
        batch = QuoteBatch()
        batch.set_requests([REQ_A])
        batch.set_latest_block(10)
        batch.receive(REQ_A, 990, block_number=10)

        batch.set_requests([QuoteRequest(path="0xaa", amount="0x7d0")])
        assert batch.records()[0] == QuoteRecord.pending()

    def test_result_for_superseded_request_discarded(self):
        batch = QuoteBatch()
        batch.set_requests([REQ_B])
        batch.set_latest_block(10)
        batch.receive(REQ_A, 990, block_number=10)

        batch.set_requests([REQ_A])
        assert batch.records()[0].loading is True

    def test_pending_requests(self):
        """Pending excludes invalid and fresh requests and deduplicates."""
        batch = QuoteBatch()
        batch.set_requests([REQ_A, REQ_NO_AMOUNT, REQ_B, REQ_A])
        batch.set_latest_block(10)
        batch.receive(REQ_B, 5, block_number=10)

        assert batch.pending_requests() == [REQ_A]

        batch.set_latest_block(11)
        assert batch.pending_requests() == [REQ_A, REQ_B]


class TestQuoteBatchRefresh:
    """Tests for concurrent refresh against a quoter."""

    def test_refresh_exact_input(self):
        quoter = MockQuoter(quotes={QuoteKey("0xaa", 1000, True): 990})
        batch = QuoteBatch(exact_output=False)
        batch.set_requests([REQ_A, REQ_B, REQ_NO_AMOUNT])

        records = asyncio.run(batch.refresh(quoter, block_number=7))

        assert records[0] == QuoteRecord(amount=990, loading=False, valid=True, syncing=False)
        assert records[1].amount is None
        assert records[1].loading is False
        assert records[2].valid is False
        assert sorted(call[1] for call in quoter.calls) == ["0xaa", "0xbb"]

    def test_refresh_exact_output(self):
        quoter = MockQuoter(default_rate=(1, 2))
        batch = QuoteBatch(exact_output=True)
        batch.set_requests([REQ_A])

        records = asyncio.run(batch.refresh(quoter, block_number=7))

        assert records[0].amount == 2000
        assert quoter.calls == [("exact_output", "0xaa", 1000)]

    def test_refresh_skips_fresh_results(self):
        quoter = MockQuoter(default_rate=(1, 1))
        batch = QuoteBatch()
        batch.set_requests([REQ_A])

        asyncio.run(batch.refresh(quoter, block_number=7))
        asyncio.run(batch.refresh(quoter, block_number=7))
        assert len(quoter.calls) == 1

        asyncio.run(batch.refresh(quoter, block_number=8))
        assert len(quoter.calls) == 2
        assert batch.records()[0].syncing is False

    def test_raising_lookup_settles_as_reverted(self):
        """A quoter error on one path keeps the other path's amount."""

        class FlakyQuoter(MockQuoter):
            def quote_exact_input(self, path, amount_in):
                if path == "0xbb":
                    raise ConnectionError("rpc unavailable")
                return super().quote_exact_input(path, amount_in)

        quoter = FlakyQuoter(quotes={QuoteKey("0xaa", 1000, True): 990})
        batch = QuoteBatch()
        batch.set_requests([REQ_A, REQ_B])

        records = asyncio.run(batch.refresh(quoter, block_number=7))

        assert records == [
            QuoteRecord(amount=990, loading=False, valid=True, syncing=False),
            QuoteRecord(amount=None, loading=False, valid=True, syncing=False),
        ]
        assert batch.pending_requests() == []
