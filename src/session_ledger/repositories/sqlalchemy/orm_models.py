"""SQLAlchemy ORM model definitions."""

import uuid

from sqlalchemy import Column, String, DateTime, Float, Index, func

from session_ledger.repositories.sqlalchemy.database import Base


class TransactionORM(Base):
    """SQLAlchemy model for Transaction (append-only ledger entry)."""

    __tablename__ = "transactions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(255), nullable=False)
    # Float keeps rounding error; a Numeric column would be needed for currency
    amount = Column(Float, nullable=False)
    session_id = Column(String(36), nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    __table_args__ = (Index("idx_session_id", "session_id"),)
