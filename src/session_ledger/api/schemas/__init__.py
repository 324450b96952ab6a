"""Pydantic schemas for API request/response."""

from session_ledger.api.schemas.transaction import (
    TransactionCreateRequest,
    TransactionResponse,
    SummaryResponse,
    ValidationResult,
    validate_create_transaction,
    validate_transaction_id,
)
from session_ledger.api.schemas.health import HealthResponse, ServicesStatus

__all__ = [
    "TransactionCreateRequest",
    "TransactionResponse",
    "SummaryResponse",
    "ValidationResult",
    "validate_create_transaction",
    "validate_transaction_id",
    "HealthResponse",
    "ServicesStatus",
]
