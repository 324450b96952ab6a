"""SQLAlchemy implementation of TransactionRepository."""

import logging
from typing import Optional

from sqlalchemy import func, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from session_ledger.core.exceptions import StoreError
from session_ledger.domain.models import NewTransaction, Transaction
from session_ledger.repositories.sqlalchemy.orm_models import TransactionORM

logger = logging.getLogger(__name__)


class SqlAlchemyTransactionRepository:
    """SQLAlchemy-backed append-only transaction store."""

    def __init__(self, db: Session):
        self._db = db

    def insert(self, transaction: NewTransaction) -> Transaction:
        """Persist a new transaction; committed before returning."""
        orm_txn = TransactionORM(
            title=transaction.title,
            amount=transaction.amount,
            session_id=transaction.session_id,
        )
        try:
            self._db.add(orm_txn)
            self._db.commit()
            self._db.refresh(orm_txn)
        except SQLAlchemyError as exc:
            self._db.rollback()
            raise StoreError(f"Failed to insert transaction: {exc}") from exc
        return self._to_domain(orm_txn)

    def list_by_session(self, session_id: str) -> list[Transaction]:
        """List all transactions owned by a session (store default order)."""
        try:
            rows = (
                self._db.query(TransactionORM)
                .filter(TransactionORM.session_id == session_id)
                .all()
            )
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to list transactions: {exc}") from exc
        return [self._to_domain(t) for t in rows]

    def find_by_id(self, txn_id: str, session_id: str) -> Optional[Transaction]:
        """Retrieve a transaction only if both id and session match."""
        try:
            orm_txn = (
                self._db.query(TransactionORM)
                .filter(
                    TransactionORM.id == txn_id,
                    TransactionORM.session_id == session_id,
                )
                .first()
            )
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to fetch transaction: {exc}") from exc
        return self._to_domain(orm_txn) if orm_txn else None

    def sum_by_session(self, session_id: str) -> float:
        """Sum of amounts for a session; 0.0 when it has no transactions."""
        try:
            total = (
                self._db.query(func.sum(TransactionORM.amount))
                .filter(TransactionORM.session_id == session_id)
                .scalar()
            )
        except SQLAlchemyError as exc:
            raise StoreError(f"Failed to sum transactions: {exc}") from exc
        return float(total or 0)

    def ping(self) -> bool:
        """Return True if the database answers SELECT 1."""
        try:
            self._db.execute(text("SELECT 1"))
        except SQLAlchemyError:
            logger.warning("Database ping failed", exc_info=True)
            return False
        return True

    @staticmethod
    def _to_domain(orm: TransactionORM) -> Transaction:
        """Convert ORM model to domain model."""
        return Transaction(
            id=orm.id,
            title=orm.title,
            amount=float(orm.amount),
            session_id=orm.session_id,
            created_at=orm.created_at,
        )
