"""Transaction domain models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class NewTransaction:
    """Insert payload; the store assigns id and created_at."""

    title: str
    amount: float
    session_id: str


@dataclass(frozen=True)
class Transaction:
    """
    Ledger entry owned by exactly one session.

    Entries are append-only: there is no update or delete path.
    - amount is signed (credit positive, debit negative)
    - amount is a float; sums carry float rounding error
    """

    id: str
    title: str
    amount: float
    session_id: str
    created_at: datetime
