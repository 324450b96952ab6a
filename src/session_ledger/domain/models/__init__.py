"""Domain models package."""

from session_ledger.domain.models.enums import TransactionType
from session_ledger.domain.models.transaction import NewTransaction, Transaction
from session_ledger.domain.models.cache import SUMMARY_KEY_PREFIX, summary_cache_key
from session_ledger.domain.models.identifiers import canonical_uuid

__all__ = [
    "TransactionType",
    "NewTransaction",
    "Transaction",
    "SUMMARY_KEY_PREFIX",
    "summary_cache_key",
    "canonical_uuid",
]
