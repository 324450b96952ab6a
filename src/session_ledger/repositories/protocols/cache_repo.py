"""Cache repository protocol for derived data."""

from typing import Protocol, Optional


class CacheRepository(Protocol):
    """Interface for a key-value cache with per-key expiry."""

    def get(self, key: str) -> Optional[str]:
        """Return the cached value, or None on a miss."""
        ...

    def set(self, key: str, value: str, ttl_seconds: int) -> None:
        """Store a value that expires after ttl_seconds."""
        ...

    def delete(self, key: str) -> None:
        """Drop a cached value (no-op when absent)."""
        ...

    def ping(self) -> bool:
        """Return True if the cache backend is reachable."""
        ...
