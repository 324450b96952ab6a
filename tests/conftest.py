"""
Pytest configuration and fixtures for the session ledger tests.

This module provides:
- In-memory SQLite database fixtures
- In-memory Redis (fakeredis) fixtures, connected and disconnected
- Repository and service fixtures
- A FastAPI test client wired to the test database and cache
"""

import uuid
from typing import Optional

import fakeredis
import pytest
from sqlalchemy import create_engine, StaticPool
from sqlalchemy.orm import sessionmaker, Session
from fastapi.testclient import TestClient

from session_ledger.main import app
from session_ledger.api.deps import get_redis_client
from session_ledger.config.settings import Settings, set_settings, reset_settings
from session_ledger.core.exceptions import CacheError
from session_ledger.repositories.sqlalchemy.database import Base, get_db, reset_database
# Import ORM models to register them with Base before creating tables
from session_ledger.repositories.sqlalchemy import orm_models  # noqa: F401
from session_ledger.repositories.sqlalchemy import SqlAlchemyTransactionRepository
from session_ledger.repositories.redis import RedisCacheRepository
from session_ledger.services import LedgerService


# =============================================================================
# SESSION HELPERS
# =============================================================================


def make_session_id() -> str:
    """Return a well-formed session token."""
    return str(uuid.uuid4())


@pytest.fixture
def session_a() -> str:
    return make_session_id()


@pytest.fixture
def session_b() -> str:
    return make_session_id()


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def test_engine():
    """Create test database engine with shared in-memory SQLite."""
    # Reset settings for clean state
    reset_settings()

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def test_session(test_engine) -> Session:
    """Create test database session."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


# =============================================================================
# CACHE FIXTURES
# =============================================================================


@pytest.fixture
def redis_client() -> fakeredis.FakeRedis:
    """In-memory Redis stand-in, decoding values to str like the real client."""
    client = fakeredis.FakeRedis(decode_responses=True)
    yield client
    client.flushall()


@pytest.fixture
def down_redis_client() -> fakeredis.FakeRedis:
    """Redis client whose server is unreachable; every command raises."""
    server = fakeredis.FakeServer()
    server.connected = False
    return fakeredis.FakeRedis(server=server, decode_responses=True)


class FailingCacheRepository:
    """Cache repository whose backend is always down."""

    def get(self, key: str) -> Optional[str]:
        raise CacheError("cache unavailable")

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        raise CacheError("cache unavailable")

    def delete(self, key: str) -> None:
        raise CacheError("cache unavailable")

    def ping(self) -> bool:
        return False


@pytest.fixture
def failing_cache_repo() -> FailingCacheRepository:
    return FailingCacheRepository()


# =============================================================================
# REPOSITORY FIXTURES
# =============================================================================


@pytest.fixture
def transaction_repo(test_session) -> SqlAlchemyTransactionRepository:
    """Provide test TransactionRepository."""
    return SqlAlchemyTransactionRepository(test_session)


@pytest.fixture
def cache_repo(redis_client) -> RedisCacheRepository:
    """Provide test CacheRepository."""
    return RedisCacheRepository(redis_client)


# =============================================================================
# SERVICE FIXTURES
# =============================================================================


@pytest.fixture
def ledger_service(transaction_repo, cache_repo) -> LedgerService:
    """Provide LedgerService with the default 60s summary TTL."""
    return LedgerService(
        transaction_repo=transaction_repo,
        cache_repo=cache_repo,
    )


# =============================================================================
# API CLIENT FIXTURES
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings used by the app under test; never touches a real backend."""
    return Settings(environment="test", database_url="sqlite:///:memory:")


def _override_get_db(test_engine):
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

    def override_get_db():
        session = TestSessionLocal()
        try:
            yield session
        finally:
            session.close()

    return override_get_db


@pytest.fixture
def client(test_engine, redis_client, test_settings) -> TestClient:
    """Provide FastAPI test client with test database and in-memory Redis."""
    set_settings(test_settings)
    reset_database()

    app.dependency_overrides[get_db] = _override_get_db(test_engine)
    app.dependency_overrides[get_redis_client] = lambda: redis_client
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()


@pytest.fixture
def client_with_down_cache(test_engine, down_redis_client, test_settings) -> TestClient:
    """Test client whose Redis is unreachable; server errors become 500 responses."""
    set_settings(test_settings)
    reset_database()

    app.dependency_overrides[get_db] = _override_get_db(test_engine)
    app.dependency_overrides[get_redis_client] = lambda: down_redis_client
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
    reset_database()
    reset_settings()
