"""Domain layer - pure business models with no external dependencies."""

from session_ledger.domain.models import (
    NewTransaction,
    Transaction,
    TransactionType,
    summary_cache_key,
)

__all__ = [
    "NewTransaction",
    "Transaction",
    "TransactionType",
    "summary_cache_key",
]
