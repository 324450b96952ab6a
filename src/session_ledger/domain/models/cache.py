"""Cache key helpers for derived ledger state."""

SUMMARY_KEY_PREFIX = "summary:"


def summary_cache_key(session_id: str) -> str:
    """
    Cache key for a session's running balance.

    IMPORTANT: The cached value is derived; always recompute from the ledger.
    """
    return f"{SUMMARY_KEY_PREFIX}{session_id}"
