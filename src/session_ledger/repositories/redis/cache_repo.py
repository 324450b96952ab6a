"""Redis implementation of CacheRepository."""

import logging
from typing import Optional

import redis

from session_ledger.core.exceptions import CacheError

logger = logging.getLogger(__name__)


class RedisCacheRepository:
    """Redis-backed cache for derived ledger values."""

    def __init__(self, client: redis.Redis):
        self._client = client

    def get(self, key: str) -> Optional[str]:
        """Return the cached value, or None on a miss."""
        try:
            return self._client.get(key)
        except redis.RedisError as exc:
            raise CacheError(f"Cache read failed for {key}: {exc}") from exc

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a value with an expiry in seconds."""
        try:
            self._client.set(key, value, ex=ttl_seconds)
        except redis.RedisError as exc:
            raise CacheError(f"Cache write failed for {key}: {exc}") from exc

    def delete(self, key: str) -> None:
        """Drop a cached value."""
        try:
            self._client.delete(key)
        except redis.RedisError as exc:
            raise CacheError(f"Cache delete failed for {key}: {exc}") from exc

    def ping(self) -> bool:
        """Return True if Redis answers PING."""
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            logger.warning("Redis ping failed", exc_info=True)
            return False
