"""Repository protocol definitions (interfaces)."""

from session_ledger.repositories.protocols.transaction_repo import TransactionRepository
from session_ledger.repositories.protocols.cache_repo import CacheRepository

__all__ = [
    "TransactionRepository",
    "CacheRepository",
]
