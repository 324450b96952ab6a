"""Dependency injection for FastAPI."""

from typing import Optional

import redis
from fastapi import Cookie, Depends, Request
from sqlalchemy.orm import Session

from session_ledger.config.settings import get_settings
from session_ledger.core.exceptions import UnsupportedMediaTypeError
from session_ledger.repositories.sqlalchemy.database import get_db
from session_ledger.repositories.sqlalchemy import SqlAlchemyTransactionRepository
from session_ledger.repositories.redis import RedisCacheRepository
from session_ledger.services import LedgerService, HealthService
from session_ledger.services.session_identity import SESSION_COOKIE_NAME, require_session

JSON_BODY_METHODS = ("POST", "PUT")


def get_redis_client(request: Request) -> redis.Redis:
    """Provide the Redis client created at application startup."""
    return request.app.state.redis


def get_transaction_repo(db: Session = Depends(get_db)) -> SqlAlchemyTransactionRepository:
    """Provide TransactionRepository instance."""
    return SqlAlchemyTransactionRepository(db)


def get_cache_repo(client: redis.Redis = Depends(get_redis_client)) -> RedisCacheRepository:
    """Provide CacheRepository instance."""
    return RedisCacheRepository(client)


def get_ledger_service(
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
    cache_repo: RedisCacheRepository = Depends(get_cache_repo),
) -> LedgerService:
    """Provide LedgerService instance."""
    settings = get_settings()
    return LedgerService(
        transaction_repo=transaction_repo,
        cache_repo=cache_repo,
        summary_ttl_seconds=settings.summary_cache_ttl_seconds,
        invalidate_on_write=settings.summary_invalidate_on_write,
        fallback_on_cache_error=settings.summary_cache_fallback,
    )


def get_health_service(
    transaction_repo: SqlAlchemyTransactionRepository = Depends(get_transaction_repo),
    cache_repo: RedisCacheRepository = Depends(get_cache_repo),
) -> HealthService:
    """Provide HealthService instance."""
    return HealthService(transaction_repo=transaction_repo, cache_repo=cache_repo)


def require_json_content_type(request: Request) -> None:
    """Reject POST/PUT requests whose body is not declared as JSON."""
    if request.method not in JSON_BODY_METHODS:
        return
    content_type = request.headers.get("content-type")
    if not content_type or "application/json" not in content_type:
        raise UnsupportedMediaTypeError()


def get_session_id(
    session_cookie: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE_NAME),
) -> str:
    """Session token required by every read endpoint."""
    return require_session(session_cookie)
