"""Redis repository implementations."""

from session_ledger.repositories.redis.client import create_redis_client
from session_ledger.repositories.redis.cache_repo import RedisCacheRepository

__all__ = [
    "create_redis_client",
    "RedisCacheRepository",
]
