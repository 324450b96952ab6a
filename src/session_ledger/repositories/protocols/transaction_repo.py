"""Transaction repository protocol."""

from typing import Protocol, Optional

from session_ledger.domain.models import NewTransaction, Transaction


class TransactionRepository(Protocol):
    """Interface for the append-only transaction store."""

    def insert(self, transaction: NewTransaction) -> Transaction:
        """Persist a new transaction, assigning id and created_at."""
        ...

    def list_by_session(self, session_id: str) -> list[Transaction]:
        """List all transactions owned by a session."""
        ...

    def find_by_id(self, txn_id: str, session_id: str) -> Optional[Transaction]:
        """Retrieve a transaction only if it belongs to the given session."""
        ...

    def sum_by_session(self, session_id: str) -> float:
        """Sum of amounts for a session; 0.0 when it has no transactions."""
        ...

    def ping(self) -> bool:
        """Return True if the store answers a trivial query."""
        ...
