"""Pydantic schemas and validators for transaction endpoints."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from session_ledger.domain.models import canonical_uuid
from session_ledger.domain.models.enums import TransactionType

T = TypeVar("T")


class TransactionCreateRequest(BaseModel):
    """Request schema for creating a transaction."""

    title: str = Field(..., max_length=255, description="Free-form label")
    amount: float = Field(
        ..., strict=True, allow_inf_nan=False, description="Magnitude; sign comes from type"
    )
    type: TransactionType = Field(..., description="credit or debit")


class TransactionResponse(BaseModel):
    """Response schema for a single transaction."""

    model_config = {"from_attributes": True}

    id: str
    title: str
    amount: float
    session_id: str
    created_at: datetime


class SummaryResponse(BaseModel):
    """Running balance of a session."""

    amount: float


@dataclass
class ValidationResult(Generic[T]):
    """Outcome of validating untrusted input: a value or a list of issues."""

    value: Optional[T] = None
    issues: list[dict] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def _issues_from(exc: PydanticValidationError) -> list[dict]:
    return [
        {"path": list(err["loc"]), "message": err["msg"], "code": err["type"]}
        for err in exc.errors()
    ]


def validate_create_transaction(payload: Any) -> ValidationResult[TransactionCreateRequest]:
    """Validate a decoded JSON body for POST /transactions."""
    try:
        return ValidationResult(value=TransactionCreateRequest.model_validate(payload))
    except PydanticValidationError as exc:
        return ValidationResult(issues=_issues_from(exc))


def validate_transaction_id(raw: str) -> ValidationResult[str]:
    """Validate a transaction id path segment; the value is the canonical UUID."""
    transaction_id = canonical_uuid(raw)
    if transaction_id is None:
        return ValidationResult(
            issues=[{"path": ["id"], "message": "Invalid uuid", "code": "invalid_uuid"}]
        )
    return ValidationResult(value=transaction_id)
