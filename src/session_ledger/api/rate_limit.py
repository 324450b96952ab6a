"""Per-client request rate limiting for the whole API."""

import math
import time
from dataclasses import dataclass

from limits import RateLimitItemPerSecond
from limits.storage import MemoryStorage
from limits.strategies import FixedWindowRateLimiter


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of counting one request against a client's window."""

    allowed: bool
    limit: int
    remaining: int
    reset_seconds: int

    def headers(self) -> dict[str, str]:
        return {
            "x-ratelimit-limit": str(self.limit),
            "x-ratelimit-remaining": str(self.remaining),
            "x-ratelimit-reset": str(self.reset_seconds),
        }


class RequestRateLimiter:
    """
    Fixed-window limiter keyed by client address.

    Counters live in process memory, so each worker enforces its own limit
    and counts reset on restart.
    """

    def __init__(self, max_requests: int, window_seconds: int = 60):
        self._item = RateLimitItemPerSecond(max_requests, window_seconds)
        self._limiter = FixedWindowRateLimiter(MemoryStorage())

    def check(self, client_key: str) -> RateLimitDecision:
        """Count a request from client_key and report whether it may proceed."""
        allowed = self._limiter.hit(self._item, client_key)
        stats = self._limiter.get_window_stats(self._item, client_key)
        return RateLimitDecision(
            allowed=allowed,
            limit=self._item.amount,
            remaining=stats.remaining,
            reset_seconds=max(0, math.ceil(stats.reset_time - time.time())),
        )
