"""API routers package."""

from session_ledger.api.routers.transactions import router as transactions_router
from session_ledger.api.routers.health import router as health_router

__all__ = [
    "transactions_router",
    "health_router",
]
