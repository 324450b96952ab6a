"""Ledger service for session-scoped transactions and summaries."""

import logging
import math
from typing import Optional

from session_ledger.core.exceptions import CacheError, SummaryOverflowError
from session_ledger.domain.models import NewTransaction, Transaction, summary_cache_key
from session_ledger.repositories.protocols import CacheRepository, TransactionRepository

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY_TTL_SECONDS = 60


class LedgerService:
    """
    Service mediating all access to a session's ledger.

    Writes and record reads go straight to the transaction store.
    The running balance is read cache-aside: a cached sum is returned as-is
    until its TTL expires, so a summary read after a write may be stale for
    up to summary_ttl_seconds unless invalidate_on_write is enabled.
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        cache_repo: CacheRepository,
        summary_ttl_seconds: int = DEFAULT_SUMMARY_TTL_SECONDS,
        invalidate_on_write: bool = False,
        fallback_on_cache_error: bool = False,
    ):
        self._transaction_repo = transaction_repo
        self._cache_repo = cache_repo
        self._summary_ttl = summary_ttl_seconds
        self._invalidate_on_write = invalidate_on_write
        self._fallback_on_cache_error = fallback_on_cache_error

    def create_transaction(self, title: str, amount: float, session_id: str) -> Transaction:
        """
        Append a transaction to a session.

        Args:
            title: Free-form label
            amount: Signed amount (direction already applied)
            session_id: Owning session token

        Returns:
            The stored Transaction with id and created_at assigned
        """
        created = self._transaction_repo.insert(
            NewTransaction(title=title, amount=amount, session_id=session_id)
        )
        if self._invalidate_on_write:
            self._cache_repo.delete(summary_cache_key(session_id))
        return created

    def list_transactions(self, session_id: str) -> list[Transaction]:
        """List all transactions of a session."""
        return self._transaction_repo.list_by_session(session_id)

    def get_transaction(self, txn_id: str, session_id: str) -> Optional[Transaction]:
        """Get a transaction by id; None unless it belongs to the session."""
        return self._transaction_repo.find_by_id(txn_id, session_id)

    def get_summary(self, session_id: str) -> float:
        """
        Return the running balance of a session.

        A cache hit is returned without consulting the store. On a miss the
        sum is computed by the store and cached for summary_ttl_seconds.
        Concurrent misses recompute independently; the last write wins.
        A sum that overflows to infinity raises SummaryOverflowError and is
        not cached.
        """
        key = summary_cache_key(session_id)

        cached = self._read_cache(key)
        if cached is not None:
            logger.debug("Summary cache hit for %s", key)
            return float(cached)

        logger.debug("Summary cache miss for %s", key)
        summary = self._transaction_repo.sum_by_session(session_id)
        if not math.isfinite(summary):
            raise SummaryOverflowError()
        self._write_cache(key, str(summary))
        return summary

    def _read_cache(self, key: str) -> Optional[str]:
        try:
            return self._cache_repo.get(key)
        except CacheError:
            if not self._fallback_on_cache_error:
                raise
            logger.warning("Summary cache unavailable, reading from store", exc_info=True)
            return None

    def _write_cache(self, key: str, value: str) -> None:
        try:
            self._cache_repo.set(key, value, self._summary_ttl)
        except CacheError:
            if not self._fallback_on_cache_error:
                raise
            logger.warning("Failed to cache summary for %s", key, exc_info=True)
