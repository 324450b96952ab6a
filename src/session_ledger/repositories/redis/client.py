"""Redis client construction."""

import redis

from session_ledger.config.settings import Settings


def create_redis_client(settings: Settings) -> redis.Redis:
    """Build a client for the summary cache.

    Values are decoded to str so repositories never see raw bytes.
    """
    return redis.Redis.from_url(settings.redis_url, decode_responses=True)
