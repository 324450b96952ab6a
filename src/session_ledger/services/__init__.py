"""Service layer - business logic orchestration."""

from session_ledger.services.ledger_service import LedgerService
from session_ledger.services.health_service import HealthService, HealthStatus

__all__ = [
    "LedgerService",
    "HealthService",
    "HealthStatus",
]
