"""Transaction endpoints scoped to the caller's session cookie."""

from typing import Any, Optional

from fastapi import APIRouter, Body, Cookie, Depends, Response

from session_ledger.api.deps import (
    get_ledger_service,
    get_session_id,
    require_json_content_type,
)
from session_ledger.api.schemas.transaction import (
    SummaryResponse,
    TransactionResponse,
    validate_create_transaction,
    validate_transaction_id,
)
from session_ledger.config.settings import get_settings
from session_ledger.core.exceptions import ValidationError
from session_ledger.services import LedgerService
from session_ledger.services.session_identity import (
    SESSION_COOKIE_NAME,
    resolve_write_session,
    session_cookie_kwargs,
)

router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
    dependencies=[Depends(require_json_content_type)],
)


@router.post("", status_code=201, response_class=Response)
def create_transaction(
    payload: Any = Body(default=None),
    session_cookie: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE_NAME),
    ledger: LedgerService = Depends(get_ledger_service),
) -> Response:
    """
    Append a transaction to the caller's session.

    Issues a session cookie when the request carries none.
    """
    result = validate_create_transaction(payload)
    if not result.ok:
        raise ValidationError(result.issues)
    data = result.value

    session_id, issued = resolve_write_session(session_cookie)
    ledger.create_transaction(
        title=data.title,
        amount=data.type.signed(data.amount),
        session_id=session_id,
    )

    response = Response(status_code=201)
    if issued:
        response.set_cookie(
            SESSION_COOKIE_NAME,
            session_id,
            **session_cookie_kwargs(get_settings()),
        )
    return response


@router.get("", response_model=list[TransactionResponse])
def list_transactions(
    session_id: str = Depends(get_session_id),
    ledger: LedgerService = Depends(get_ledger_service),
):
    """List all transactions of the caller's session."""
    return [TransactionResponse.model_validate(t) for t in ledger.list_transactions(session_id)]


@router.get("/summary", response_model=SummaryResponse)
def get_summary(
    session_id: str = Depends(get_session_id),
    ledger: LedgerService = Depends(get_ledger_service),
):
    """Running balance of the caller's session (cached for a short TTL)."""
    return SummaryResponse(amount=ledger.get_summary(session_id))


@router.get("/{transaction_id}", response_model=Optional[TransactionResponse])
def get_transaction(
    transaction_id: str,
    session_id: str = Depends(get_session_id),
    ledger: LedgerService = Depends(get_ledger_service),
):
    """Get one transaction; null when it does not exist in this session."""
    result = validate_transaction_id(transaction_id)
    if not result.ok:
        raise ValidationError(result.issues)

    txn = ledger.get_transaction(result.value, session_id)
    return TransactionResponse.model_validate(txn) if txn else None
