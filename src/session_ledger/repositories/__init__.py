"""Repository layer - data access abstractions and implementations."""

from session_ledger.repositories.protocols import (
    TransactionRepository,
    CacheRepository,
)

__all__ = [
    "TransactionRepository",
    "CacheRepository",
]
