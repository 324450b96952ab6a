"""Enumerations for domain models."""

from enum import Enum


class TransactionType(str, Enum):
    """Direction of a ledger entry as submitted by the client."""

    CREDIT = "credit"
    DEBIT = "debit"

    def signed(self, amount: float) -> float:
        """Apply the direction to a submitted magnitude."""
        if self is TransactionType.DEBIT:
            return amount * -1
        return amount
